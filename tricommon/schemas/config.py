"""
Schemas for the toolkit's own configuration file.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

_LEVEL_NAMES = {"debug", "info", "warning", "error", "critical"}


class LoggingConfig(BaseModel):
    """
    Controls how the `tricommon` package logger is set up.

    :param level: Minimum level name for the package logger.
    :param json_format: Emit JSON records when true, plain text otherwise.
        Written as `json` in the config file; `json_format` is also accepted.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    level: str = "warning"
    json_format: bool = Field(default=True, alias="json")

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        lowered = value.lower()
        if lowered not in _LEVEL_NAMES:
            raise ValueError(
                f"Unknown log level '{value}'. Expected one of {sorted(_LEVEL_NAMES)}"
            )
        return lowered


class ToolkitConfig(BaseModel):
    """
    Root of the `tricommon:` section in `config.yaml`.

    :param logging: Logger configuration block.
    """

    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
