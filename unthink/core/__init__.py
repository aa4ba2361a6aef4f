"""
Core utilities for Unthink.

This package provides core functionality including logging configuration,
monitoring, domain errors, the database layer and I/O models.
"""

from unthink.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
