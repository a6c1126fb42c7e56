"""Pydantic schemas for configuration validation."""

from pydantic import BaseModel, Field, field_validator

from .constants import DISTANCE_UNITS, LOG_LEVELS, WOLF_POSITIONS


class SkinsConfig(BaseModel):
    """Per-game skins settings supplied by the game setup screen."""

    skin_value: float = Field(default=1.0, ge=0)
    carryover_enabled: bool = True
    use_handicaps: bool = False
    handicaps: dict[str, float | None] = Field(default_factory=dict)
    holes_played: int = Field(default=18)

    @field_validator('holes_played')
    @classmethod
    def validate_holes_played(cls, v):
        """Skins games are played over 9 or 18 holes."""
        if v not in (9, 18):
            raise ValueError(f'holes_played must be 9 or 18, got {v}')
        return v

    class Config:
        extra = 'forbid'


class ScoringConfig(BaseModel):
    """Scoring core configuration settings."""

    distance_unit: str = Field(default='meters')
    putting_baseline_file: str = Field(..., min_length=1)
    long_game_baseline_file: str = Field(..., min_length=1)
    ob_penalty_strokes: int = Field(default=1, ge=1, le=2)
    default_holes: int = Field(default=18)
    default_skin_value: float = Field(default=1.0, ge=0)
    default_carryover_enabled: bool = True
    log_level: str = Field(default='INFO')

    @field_validator('distance_unit')
    @classmethod
    def validate_distance_unit(cls, v):
        """Ensure the distance unit is one the calculator understands."""
        if v not in DISTANCE_UNITS:
            raise ValueError(f'Invalid distance unit: {v}')
        return v

    @field_validator('default_holes')
    @classmethod
    def validate_default_holes(cls, v):
        """Rounds are 9 or 18 holes."""
        if v not in (9, 18):
            raise ValueError(f'default_holes must be 9 or 18, got {v}')
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Accept standard level names in any case."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f'Invalid log level: {v}')
        return level

    class Config:
        extra = 'forbid'


class WolfSettings(BaseModel):
    """Points awarded in a Wolf game."""

    lone_wolf_win_points: int = Field(default=4, ge=0)
    lone_wolf_loss_points: int = Field(default=1, ge=0)
    team_win_points: int = Field(default=1, ge=0)
    wolf_position: str = Field(default='last')

    @field_validator('wolf_position')
    @classmethod
    def validate_wolf_position(cls, v):
        """The wolf tees off first or last."""
        if v not in WOLF_POSITIONS:
            raise ValueError(f'wolf_position must be first or last, got {v}')
        return v

    class Config:
        extra = 'forbid'
