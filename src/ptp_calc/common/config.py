import copy
import numbers
from pathlib import Path

import yaml

DEFAULT_CONFIG = {
    "logging": {"level": "INFO"},
    "assessment": {"advisory_age_ceiling": 100},
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _merge(base: dict, override: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _validate(cfg: dict) -> dict:
    for section in DEFAULT_CONFIG:
        if not isinstance(cfg[section], dict):
            raise ValueError(f"Config section '{section}' must be a mapping, got {type(cfg[section]).__name__}")

    level = cfg["logging"]["level"]
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ValueError(f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {level!r}")

    ceiling = cfg["assessment"]["advisory_age_ceiling"]
    if isinstance(ceiling, bool) or not isinstance(ceiling, numbers.Real):
        raise ValueError(f"assessment.advisory_age_ceiling must be a number, got {ceiling!r}")
    return cfg


def load_config(config_path: str | Path | None = None) -> dict:
    if config_path is None:
        return copy.deepcopy(DEFAULT_CONFIG)
    with open(config_path) as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config root must be a mapping, got {type(loaded).__name__}")
    return _validate(_merge(DEFAULT_CONFIG, loaded))
