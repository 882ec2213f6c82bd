"""Configuration for neo-uploads: logging and environment settings."""

from .logging_config import (
    LoggingConfig,
    LogLevel,
    LogVerbosity,
    LogFormat,
    setup_logging,
    get_logger,
)
from .settings import UploadSettings, get_upload_settings

__all__ = [
    "LoggingConfig",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "setup_logging",
    "get_logger",
    "UploadSettings",
    "get_upload_settings",
]
