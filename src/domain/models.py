from pydantic import BaseModel, field_validator

from shared.constants import ALLOWED_ERROR, ELEVATION_STEP, RELIEF_COLOR

COLOR_CHANNEL_MAX = 255


class HeightmapSettings(BaseModel):
    """Tunables of the map -> heightmap pipeline."""

    model_config = {
        'extra': 'ignore',  # ignore unknown keys in settings files
    }

    # Reference color of relief lines (R, G, B)
    relief_color: tuple[int, int, int] = RELIEF_COLOR
    # Squared RGB distance still classified as relief line (inclusive)
    allowed_error: int = ALLOWED_ERROR
    # Relative height step between neighboring regions
    elevation_step: int = ELEVATION_STEP

    @field_validator('relief_color')
    @classmethod
    def validate_relief_color(cls, v: tuple[int, int, int]) -> tuple[int, int, int]:
        for channel in v:
            if not (0 <= channel <= COLOR_CHANNEL_MAX):
                msg = f'relief_color channels must be in [0, {COLOR_CHANNEL_MAX}], got {v}'
                raise ValueError(msg)
        return v

    @field_validator('allowed_error')
    @classmethod
    def validate_allowed_error(cls, v: int | str) -> int:
        iv = int(v)
        if iv < 0:
            msg = 'allowed_error must not be negative'
            raise ValueError(msg)
        return iv

    @field_validator('elevation_step')
    @classmethod
    def validate_elevation_step(cls, v: int | str) -> int:
        iv = int(v)
        if iv <= 0:
            msg = 'elevation_step must be positive'
            raise ValueError(msg)
        return iv
