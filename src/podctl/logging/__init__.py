"""Logging configuration for podctl."""

from podctl.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
