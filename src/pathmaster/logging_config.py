"""Logging setup for the pathmaster CLI."""

import logging
import logging.config
import os
import sys

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from pathmaster.config import get_app_dir, get_logging_settings
from pathmaster.constants import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FILE,
    DEFAULT_LOG_MAX_SIZE_MB,
    LOG_DIR_NAME,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_logging_configured = False


class LoggingSettings(BaseModel):
    """The [logging] table of config.toml."""

    enabled: bool = Field(default=True, description="Write a log file")
    level: str = Field(default="DEBUG", description="Log file level")
    max_size_mb: int = Field(default=DEFAULT_LOG_MAX_SIZE_MB, gt=0)
    backup_count: int = Field(default=DEFAULT_LOG_BACKUP_COUNT, ge=0)

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {value!r}")
        return level


def get_log_dir() -> Path:
    """Return ~/.pathmaster/logs, creating it (mode 0700) if needed."""
    log_dir = get_app_dir() / LOG_DIR_NAME
    os.makedirs(log_dir, mode=0o700, exist_ok=True)
    return log_dir


def get_log_path() -> Path:
    """Return the path of pathmaster.log."""
    return get_log_dir() / DEFAULT_LOG_FILE


def _load_settings() -> LoggingSettings:
    try:
        return LoggingSettings.model_validate(get_logging_settings())
    except ValidationError as e:
        sys.stderr.write(f"WARNING: Invalid [logging] settings, using defaults: {e}\n")
        return LoggingSettings()


def _build_logging_config(
    verbose: bool = False,
    console_format: str | None = None,
) -> dict[str, Any]:
    """
    Build the dictConfig dictionary.

    The console handler only passes warnings (DEBUG with verbose), since
    regular output is printed by the commands themselves. The rotating file
    handler follows the [logging] settings.
    """
    settings = _load_settings()

    handlers: dict[str, dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": "DEBUG" if verbose else "WARNING",
            "formatter": "console",
            "stream": "ext://sys.stderr",
        },
    }

    if settings.enabled:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": settings.level,
            "formatter": "file",
            "filename": str(get_log_path()),
            "maxBytes": settings.max_size_mb * 1024 * 1024,
            "backupCount": settings.backup_count,
            "encoding": "utf-8",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {"format": console_format or LOG_FORMAT},
            "file": {"format": LOG_FORMAT},
        },
        "handlers": handlers,
        "root": {"level": "DEBUG", "handlers": list(handlers)},
    }


def setup_logging(
    *,
    verbose: bool = False,
    console_format: str | None = None,
) -> None:
    """
    Configure logging once per process.

    Args:
        verbose: Show DEBUG messages on the console
        console_format: Console format string (default: LOG_FORMAT)
    """
    global _logging_configured

    if _logging_configured:
        return

    try:
        logging.config.dictConfig(
            _build_logging_config(verbose=verbose, console_format=console_format)
        )
    except (ValueError, OSError) as e:
        sys.stderr.write(f"WARNING: Failed to configure logging: {e}\n")
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format=console_format or "%(levelname)s: %(message)s",
        )

    _logging_configured = True
