"""Domain layer - settings model and its TOML storage."""
from domain.models import HeightmapSettings
from domain.settings import load_settings, save_settings, settings_path

__all__ = [
    'HeightmapSettings',
    'load_settings',
    'save_settings',
    'settings_path',
]
