"""Errors raised while talking to a cluster or its tooling.

All of them derive from ``KubernetesError`` so the CLI can report any
cluster-side failure through one handler.
"""

from __future__ import annotations

from typing import Any


class KubernetesError(Exception):
    """A cluster operation failed.

    Attributes:
        message: Human-readable description.
        status_code: HTTP status from the API server, when there was one.
        resource_type: Kind of the resource involved, e.g. ``"Pod"``.
        resource_name: Name of the resource involved.
        namespace: Namespace of the resource involved.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.resource_type = resource_type
        self.resource_name = resource_name
        self.namespace = namespace

    @property
    def location(self) -> str | None:
        """``Kind/name in namespace`` for the resource involved, if known."""
        if not (self.resource_type and self.resource_name):
            return None
        location = f"{self.resource_type}/{self.resource_name}"
        if self.namespace:
            location += f" in {self.namespace}"
        return location

    def __str__(self) -> str:
        text = self.message
        if self.status_code:
            text += f" (status: {self.status_code})"
        if location := self.location:
            text += f" [{location}]"
        return text


class KubernetesConnectionError(KubernetesError):
    """No usable client could be built for a context.

    Covers broken kubeconfig entries, missing certificate files and
    unreachable API servers.
    """

    def __init__(
        self,
        message: str = "Failed to connect to Kubernetes cluster",
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message=message)
        self.original_error = original_error


class KubernetesAuthError(KubernetesError):
    """The API server refused the credentials (401) or the request (403)."""

    def __init__(
        self,
        message: str = "Kubernetes authentication/authorization failed",
        status_code: int | None = 401,
        reason: str | None = None,
    ) -> None:
        super().__init__(message=message, status_code=status_code)
        self.reason = reason


class KubernetesNotFoundError(KubernetesError):
    """A namespace or pod disappeared between listing and reading it."""

    def __init__(
        self,
        message: str = "Kubernetes resource not found",
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> None:
        if resource_type and resource_name:
            message = f"{resource_type} '{resource_name}' not found"
            if namespace:
                message += f" in namespace '{namespace}'"
        super().__init__(
            message=message,
            status_code=404,
            resource_type=resource_type,
            resource_name=resource_name,
            namespace=namespace,
        )


class KubernetesValidationError(KubernetesError):
    """The API server rejected a request as malformed (400/422)."""

    def __init__(
        self,
        message: str = "Invalid request",
        validation_errors: dict[str, Any] | None = None,
        status_code: int | None = 422,
    ) -> None:
        super().__init__(message=message, status_code=status_code)
        self.validation_errors = validation_errors or {}
