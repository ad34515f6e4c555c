import logging
from pathlib import Path

import tomlkit

from domain.models import HeightmapSettings
from shared.constants import SETTINGS_FILENAME

logger = logging.getLogger(__name__)


def _configs_dir() -> Path:
    """Project-local configs directory (<project_root>/configs)."""
    project_root = Path(__file__).resolve().parent.parent.parent
    return project_root / 'configs'


def settings_path() -> Path:
    """Default settings file location."""
    return _configs_dir() / SETTINGS_FILENAME


def load_settings(path: str | Path | None = None) -> HeightmapSettings:
    """
    Load and validate settings TOML -> HeightmapSettings.

    A missing file gives the built-in defaults. Invalid values raise
    pydantic's ValidationError (a ValueError).
    """
    p = Path(path) if path is not None else settings_path()
    if not p.exists():
        logger.debug('Settings file %s not found, using defaults', p)
        return HeightmapSettings()
    text = p.read_text(encoding='utf-8')
    data = tomlkit.parse(text).unwrap()
    settings = HeightmapSettings.model_validate(data)
    logger.info(
        'Settings loaded from %s: relief_color=%s allowed_error=%s elevation_step=%s',
        p,
        settings.relief_color,
        settings.allowed_error,
        settings.elevation_step,
    )
    return settings


def save_settings(settings: HeightmapSettings, path: str | Path | None = None) -> Path:
    """Save settings to TOML (no atomicity, no backups)."""
    p = Path(path) if path is not None else settings_path()
    p.parent.mkdir(parents=True, exist_ok=True)
    data = settings.model_dump()
    data['relief_color'] = list(data['relief_color'])
    p.write_text(tomlkit.dumps(data), encoding='utf-8')
    return p
