# tricommon/schemas/settings.py
"""
Environment-driven settings using pydantic-settings.

Only a couple of knobs live here: where to find the YAML config file and an
optional override for the package log level. Both are read from variables
prefixed with `TRICOMMON_`.
"""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class ToolkitSettings(BaseSettings):
    """
    Loads `TRICOMMON_*` environment variables into a structured model.

    :ivar config_path: Path of the YAML config file (`TRICOMMON_CONFIG_PATH`).
    :vartype config_path: str
    :ivar log_level: Overrides `logging.level` from the file (`TRICOMMON_LOG_LEVEL`).
    :vartype log_level: Optional[str]
    """

    config_path: str = "config.yaml"
    log_level: Optional[str] = None

    model_config = SettingsConfigDict(env_prefix="TRICOMMON_", extra="ignore")
