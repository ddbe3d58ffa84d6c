"""Configuration model for podctl."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from podctl.integrations.kubernetes.kubeconfig import default_kubeconfig_path
from podctl.integrations.kubernetes.kubectl_client import DEFAULT_SHELL

DEFAULT_MAX_HEIGHT = 15


class PodctlConfig(BaseModel):
    """Runtime settings for the picker and the shell handoff."""

    model_config = ConfigDict(extra="forbid")

    kubeconfig: str = Field(default_factory=default_kubeconfig_path)
    max_height: int = DEFAULT_MAX_HEIGHT
    shell: str = DEFAULT_SHELL
    kubectl_path: str | None = None

    @field_validator("kubeconfig")
    @classmethod
    def validate_kubeconfig(cls, v: str) -> str:
        """Expand ~ in kubeconfig path."""
        return str(Path(v).expanduser())

    @field_validator("max_height")
    @classmethod
    def validate_max_height(cls, v: int) -> int:
        """Validate max_height is positive."""
        if v < 1:
            raise ValueError("max_height must be at least 1")
        return v

    @field_validator("shell")
    @classmethod
    def validate_shell(cls, v: str) -> str:
        """Validate shell is not blank."""
        if not v.strip():
            raise ValueError("shell must not be empty")
        return v.strip()

    @classmethod
    def from_env(cls, base_config: dict[str, Any] | None = None) -> PodctlConfig:
        """Create configuration with environment variable overrides.

        Environment variables take precedence over base_config values.

        Supported environment variables:
            PODCTL_KUBECONFIG: kubeconfig file to read contexts from
            PODCTL_MAX_HEIGHT: Maximum visible rows in a prompt
            PODCTL_SHELL: Command started inside the container
            PODCTL_KUBECTL: Path to the kubectl binary
        """
        config_dict = base_config.copy() if base_config else {}

        if kubeconfig := os.environ.get("PODCTL_KUBECONFIG"):
            config_dict["kubeconfig"] = kubeconfig

        if max_height := os.environ.get("PODCTL_MAX_HEIGHT"):
            config_dict["max_height"] = max_height

        if shell := os.environ.get("PODCTL_SHELL"):
            config_dict["shell"] = shell

        if kubectl_path := os.environ.get("PODCTL_KUBECTL"):
            config_dict["kubectl_path"] = kubectl_path

        return cls.model_validate(config_dict)
