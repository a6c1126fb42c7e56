"""Scoring core configuration management."""

from functools import lru_cache

from .constants import CONFIG_FILE
from .schemas import ScoringConfig, SkinsConfig
from .utils import data_path, load_json


@lru_cache(maxsize=1)
def get_config() -> ScoringConfig:
    """
    Load scoring configuration from golfscore/data/scoring_config.json.

    Configuration is cached after first load.

    Returns:
        ScoringConfig object with validated settings

    Raises:
        FileNotFoundError: If scoring_config.json doesn't exist
        ValueError: If config file has invalid structure

    Example:
        from golfscore.config import get_config
        config = get_config()
        print(f"Distance unit: {config.distance_unit}")
    """
    return load_json(data_path(CONFIG_FILE), schema=ScoringConfig)


def get_distance_unit() -> str:
    """Get the unit the app records shot distances in."""
    return get_config().distance_unit


def get_ob_penalty_strokes() -> int:
    """Get the penalty strokes charged for an out-of-bounds shot."""
    return get_config().ob_penalty_strokes


def get_default_holes() -> int:
    """Get the default number of holes in a match."""
    return get_config().default_holes


def get_log_level() -> str:
    """Get the configured log level name (DEBUG, INFO, ...)."""
    return get_config().log_level


def get_baseline_files() -> tuple[str, str]:
    """Get the packaged (putting, long game) baseline file names."""
    config = get_config()
    return config.putting_baseline_file, config.long_game_baseline_file


def get_default_skins_config() -> SkinsConfig:
    """Build a SkinsConfig from the configured defaults."""
    config = get_config()
    return SkinsConfig(
        skin_value=config.default_skin_value,
        carryover_enabled=config.default_carryover_enabled,
        holes_played=config.default_holes,
    )


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime
    and you need to reload it.
    """
    get_config.cache_clear()
