"""
Logging Configuration Module.

Centralized logging for the Unthink service. Levels, format and the optional
log file come from ``settings`` (``UNTHINK_LOG_LEVEL`` and the ``LOGGING__*``
group); modules only ever call ``get_logger(__name__)``.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FILE_NAME = "unthink.log"

SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"

JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"module": "%(filename)s", "function": "%(funcName)s", "line": %(lineno)d, '
    '"message": "%(message)s"}'
)

# Module-specific log levels
MODULE_LOG_LEVELS = {
    "unthink.content": "INFO",
    "unthink.core.database": "INFO",
    "unthink.integrations": "DEBUG",
    "unthink.server": "INFO",
    "unthink.server.api": "DEBUG",
    "unthink.server.services": "DEBUG",
    # Third-party libraries (reduce noise)
    "sqlalchemy.engine": "WARNING",
    "aiosqlite": "WARNING",
    "httpx": "WARNING",
    "httpcore": "WARNING",
    "uvicorn.access": "INFO",
}


def _settings():
    # Deferred so unthink.core has no import-time dependency on unthink.server
    from unthink.server.core.config import settings

    return settings


def _format_string(fmt: str) -> str:
    if fmt == "json":
        return JSON_FORMAT
    if fmt == "simple":
        return SIMPLE_FORMAT
    return DETAILED_FORMAT


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: bool = True,
) -> None:
    """
    Configure logging for the application.

    Args:
        log_level: Override ``settings.log_level`` (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Override ``settings.logging.format`` (simple, detailed, json)
        enable_file: Allow the file handler; it is only added when ``settings.logging.enable_file`` is set too
    """
    settings = _settings()
    level = (log_level or settings.log_level).upper()
    fmt = log_format or settings.logging.format
    file_logging = enable_file and settings.logging.enable_file

    formatter = logging.Formatter(_format_string(fmt), datefmt="%Y-%m-%d %H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Filtering happens per handler
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if file_logging:
        log_dir = Path(settings.logging.file_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / LOG_FILE_NAME)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)

    root_logger.info(f"Logging configured: level={level}, format={fmt}, file_logging={file_logging}")


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, typically ``get_logger(__name__)``."""
    return logging.getLogger(name)


setup_logging()
