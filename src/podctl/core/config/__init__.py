"""Configuration management with Pydantic validation."""

from podctl.core.config.models import DEFAULT_MAX_HEIGHT, DEFAULT_SHELL, PodctlConfig

__all__ = [
    "DEFAULT_MAX_HEIGHT",
    "DEFAULT_SHELL",
    "PodctlConfig",
]
