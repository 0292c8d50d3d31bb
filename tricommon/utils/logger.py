# tricommon/utils/logger.py
"""
Centralized logging setup for the tricommon toolkit.

This module configures the `tricommon` package logger (never the root logger,
which belongs to the host application) with a single stderr handler. Records
are rendered as JSON by default so they slot into structured log pipelines.
"""
import logging
import sys
from typing import Any, MutableMapping

from pythonjsonlogger.json import JsonFormatter

from tricommon.exceptions import ConfigurationError
from tricommon.schemas.config import LoggingConfig
from tricommon.utils.config import get_config

PACKAGE_LOGGER_NAME = "tricommon"

_LOGGING_CONFIGURED = False


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """Extends the standard logging adapter to support structured logging.

    A dictionary passed via `extra` is nested under an `extra_data` key so the
    JSON formatter emits it as a single structured field instead of merging
    arbitrary keys into the record.
    """

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> tuple[str, MutableMapping[str, Any]]:
        """Wraps any `extra` mapping under `extra_data`.

        :param msg: The original log message.
        :type msg: str
        :param kwargs: The keyword arguments passed to the log call.
        :type kwargs: MutableMapping[str, Any]
        :return: The processed message and keyword arguments.
        :rtype: tuple[str, MutableMapping[str, Any]]
        """
        original_extra_content = kwargs.get("extra")
        if original_extra_content is not None:
            kwargs["extra"] = {"extra_data": original_extra_content}
        return msg, kwargs


def _configure_package_logger() -> None:
    config_error = None
    try:
        logging_cfg = get_config().logging
    except ConfigurationError as e:
        logging_cfg = LoggingConfig()
        config_error = e

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(getattr(logging, logging_cfg.level.upper(), logging.WARNING))

    if package_logger.handlers:
        package_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if logging_cfg.json_format:
        formatter: logging.Formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s"
        )
    else:
        formatter = logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    package_logger.addHandler(handler)
    # Keep records out of the host's root handlers.
    package_logger.propagate = False

    if config_error is not None:
        package_logger.warning("%s; using default logging settings", config_error)

    package_logger.debug(
        "Package logger configured. Level: %s, json: %s",
        logging_cfg.level,
        logging_cfg.json_format,
    )


def setup_logger(name: str) -> StructuredLoggerAdapter:
    """Configures the package logger once and returns a structured child logger.

    This is the entry point for obtaining a logger in any tricommon module. The
    first call reads the toolkit configuration and installs the handler;
    subsequent calls simply wrap `logging.getLogger(name)`.

    :param name: The name of the logger, typically `__name__`.
    :type name: str
    :return: A `StructuredLoggerAdapter` instance ready for use.
    :rtype: StructuredLoggerAdapter
    """
    global _LOGGING_CONFIGURED

    if not _LOGGING_CONFIGURED:
        _configure_package_logger()
        _LOGGING_CONFIGURED = True

    return StructuredLoggerAdapter(logging.getLogger(name), {})


def reset_logging() -> None:
    """Forgets the one-time setup so the next `setup_logger` call reconfigures."""
    global _LOGGING_CONFIGURED
    _LOGGING_CONFIGURED = False
