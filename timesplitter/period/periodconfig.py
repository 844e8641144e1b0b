"""Period splitter configuration.

Loads periodconfig.yaml from the package and merges an optional override
file named by the TIMESPLITTER_CONFIG_PATH environment variable.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TIMESPLITTER_CONFIG_PATH"
DEFAULT_CONFIG_PATH = Path(__file__).parent / "periodconfig.yaml"

# Hard lower bound on min_period_count, whatever the config says
MIN_PERIOD_COUNT_FLOOR = 2


def _read_yaml(path: Path) -> Dict[str, Any]:
    """Read a YAML mapping, treating an empty file as {}."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into a copy of base."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


@lru_cache(maxsize=1)
def load_config() -> Dict[str, Any]:
    """
    Load splitter configuration.

    Search order:
      1. Packaged defaults: timesplitter/period/periodconfig.yaml
      2. Override file from $TIMESPLITTER_CONFIG_PATH (merged on top)

    Returns:
        Configuration dict (cached; call clear_config_cache() after changing
        the environment)

    Raises:
        FileNotFoundError: If TIMESPLITTER_CONFIG_PATH names a missing file
    """
    config = _read_yaml(DEFAULT_CONFIG_PATH)

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        override_path = Path(env_path)
        if not override_path.exists():
            raise FileNotFoundError(f"{CONFIG_ENV_VAR} points to missing file: {override_path}")
        config = _merge(config, _read_yaml(override_path))
        logger.info(f"Loaded config override from {CONFIG_ENV_VAR}: {override_path}")

    return config


def clear_config_cache() -> None:
    """Clear the cached configuration."""
    load_config.cache_clear()
    logger.debug("Cleared period config cache")


def get_min_period_count() -> int:
    """
    Smallest accepted period count.

    Overrides may raise the minimum but never lower it below
    MIN_PERIOD_COUNT_FLOOR; a single period or zero periods is not a split.
    """
    configured = int(load_config().get("min_period_count", MIN_PERIOD_COUNT_FLOOR))
    if configured < MIN_PERIOD_COUNT_FLOOR:
        logger.warning(
            f"min_period_count {configured} is below {MIN_PERIOD_COUNT_FLOOR}, "
            f"using {MIN_PERIOD_COUNT_FLOOR}"
        )
        return MIN_PERIOD_COUNT_FLOOR
    return configured


def get_time_format() -> str:
    return load_config().get("time_format", "%H:%M")


def get_message(key: str, field: str = "code") -> str:
    """
    Look up an error message.

    Args:
        key: Message key ("invalid_time_format" or "invalid_count")
        field: "code" for the machine-facing error string, "display" for
            the text shown to a user

    Examples:
        >>> get_message("invalid_time_format")
        'invalid time format'
        >>> get_message("invalid_time_format", "display")
        'Please enter valid times in HH:mm format'
    """
    return load_config()["messages"][key][field]


__all__ = [
    "CONFIG_ENV_VAR",
    "MIN_PERIOD_COUNT_FLOOR",
    "load_config",
    "clear_config_cache",
    "get_min_period_count",
    "get_time_format",
    "get_message",
]
