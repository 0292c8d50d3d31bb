# tricommon/utils/config.py
"""
Minimal config loader with caching.

- Reads the `tricommon:` section of the YAML file named by
  `TRICOMMON_CONFIG_PATH` (default ./config.yaml), so the file can be shared
  with the host application.
- A missing file means "all defaults".
- Applies environment overrides (currently: TRICOMMON_LOG_LEVEL).
- Validates the result into a `ToolkitConfig`.
- Exposes reload_config() for tests.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from tricommon.exceptions import ConfigurationError
from tricommon.schemas.config import ToolkitConfig
from tricommon.schemas.settings import ToolkitSettings

# Plain stdlib logger: setup_logger() itself depends on this module.
logger = logging.getLogger(__name__)

_CONFIG_CACHE: ToolkitConfig | None = None


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        logger.debug("No config file at %s; using defaults", path)
        return {}
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Failed to read {path}: {e}") from e
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Top level of {path} must be a mapping")
    section = data.get("tricommon") or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"`tricommon` section of {path} must be a mapping")
    return section


def _apply_env_overrides(
    cfg: Dict[str, Any], settings: ToolkitSettings
) -> Dict[str, Any]:
    if settings.log_level:
        logging_cfg = dict(cfg.get("logging") or {})
        logging_cfg["level"] = settings.log_level
        cfg["logging"] = logging_cfg
    return cfg


def get_config() -> ToolkitConfig:
    """Returns the cached toolkit configuration, loading it on first use.

    :return: The validated configuration.
    :rtype: ToolkitConfig
    :raises ConfigurationError: If the file is malformed or holds invalid values.
    """
    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    settings = ToolkitSettings()
    cfg = _read_yaml(Path(settings.config_path))
    cfg = _apply_env_overrides(cfg, settings)
    try:
        _CONFIG_CACHE = ToolkitConfig.model_validate(cfg)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in {settings.config_path}: {e}"
        ) from e
    return _CONFIG_CACHE


def reload_config() -> ToolkitConfig:
    """Clear cache and reload (primarily for tests)."""
    global _CONFIG_CACHE
    _CONFIG_CACHE = None
    return get_config()
