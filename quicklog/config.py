"""Configuration module — frozen dataclass loaded from environment variables or YAML."""

import logging
import os
from dataclasses import dataclass, fields

import yaml

logger = logging.getLogger(__name__)


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class QuicklogConfig:
    enabled: bool = True
    capacity: int = 40
    timezone: str = "UTC"
    exact_time: bool = False


def load_config() -> QuicklogConfig:
    """Build QuicklogConfig from environment variables with sensible defaults."""
    return QuicklogConfig(
        enabled=_parse_bool(os.environ.get("QUICKLOG_ENABLED", "true")),
        capacity=int(os.environ.get("QUICKLOG_CAPACITY", QuicklogConfig.capacity)),
        timezone=os.environ.get("QUICKLOG_TIMEZONE", QuicklogConfig.timezone),
        exact_time=_parse_bool(os.environ.get("QUICKLOG_EXACT_TIME", "false")),
    )


def load_config_file(path: str) -> QuicklogConfig:
    """Read the `quicklog:` section of a YAML file over the defaults.

    A missing file or invalid YAML yields the defaults; unknown keys are ignored.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return QuicklogConfig()
    except yaml.YAMLError as e:
        logger.warning("Invalid YAML in %s, using defaults: %s", path, e)
        return QuicklogConfig()

    section = (data or {}).get("quicklog") if isinstance(data, dict) else None
    if not isinstance(section, dict):
        return QuicklogConfig()

    known = {f.name for f in fields(QuicklogConfig)}
    overrides = {k: v for k, v in section.items() if k in known}
    if "enabled" in overrides:
        overrides["enabled"] = _parse_bool(overrides["enabled"])
    if "exact_time" in overrides:
        overrides["exact_time"] = _parse_bool(overrides["exact_time"])
    if "capacity" in overrides:
        overrides["capacity"] = int(overrides["capacity"])
    if "timezone" in overrides:
        overrides["timezone"] = str(overrides["timezone"])
    return QuicklogConfig(**overrides)
