"""Kubernetes API client wrapper.

Wraps the official kubernetes Python client with a dedicated ``ApiClient``
per kubeconfig context, lazy API group initialization and consistent error
translation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from podctl.integrations.kubernetes.exceptions import (
    KubernetesAuthError,
    KubernetesConnectionError,
    KubernetesError,
    KubernetesNotFoundError,
    KubernetesValidationError,
)

if TYPE_CHECKING:
    from kubernetes.client import ApiClient, CoreV1Api

    from podctl.integrations.kubernetes.kubeconfig import CredentialSet

logger = structlog.get_logger()


class KubernetesClient:
    """Kubernetes API client bound to a single kubeconfig context.

    Unlike ``kubernetes.config.load_kube_config``, the client never touches
    the library's global default configuration: each instance owns its own
    ``ApiClient`` built from the selected context.

    Example:
        ```python
        from podctl.integrations.kubernetes import KubernetesClient, load_credentials

        credentials = load_credentials("~/.kube/config")
        with KubernetesClient(credentials, "staging") as client:
            namespaces = client.core_v1.list_namespace()
        ```
    """

    def __init__(self, credentials: CredentialSet, context: str) -> None:
        """Initialize the client for a context.

        Args:
            credentials: Parsed kubeconfig.
            context: Name of the context to connect with.

        Raises:
            KubeconfigError: If the context is not declared in the kubeconfig.
            KubernetesConnectionError: If the context cannot be turned into a client.
        """
        self._credentials = credentials
        self._context = credentials.get_context(context)
        self._core_v1: CoreV1Api | None = None
        self._api_client: ApiClient | None = self._create_api_client()

        logger.info(
            "Kubernetes client initialized",
            context=self._context.name,
            cluster=self._context.cluster,
        )

    def _create_api_client(self) -> ApiClient:
        """Build an ApiClient from the kubeconfig for the selected context."""
        from kubernetes import config
        from kubernetes.config import ConfigException

        try:
            api_client = config.new_client_from_config(
                config_file=self._credentials.path,
                context=self._context.name,
            )
        except (ConfigException, OSError, ValueError) as e:
            raise KubernetesConnectionError(
                message=f"Cannot build a client for context '{self._context.name}'",
                original_error=e,
            ) from e

        logger.debug(
            "created_api_client",
            context=self._context.name,
            kubeconfig=self._credentials.path,
        )
        return api_client

    # =========================================================================
    # Lazy API Group Accessors
    # =========================================================================

    @property
    def core_v1(self) -> CoreV1Api:
        """Get CoreV1Api instance (namespaces, pods)."""
        if self._core_v1 is None:
            from kubernetes.client import CoreV1Api

            self._core_v1 = CoreV1Api(self._api_client)
        return self._core_v1

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def context(self) -> str:
        """Name of the context this client is bound to."""
        return self._context.name

    # =========================================================================
    # Error Translation
    # =========================================================================

    @staticmethod
    def translate_api_exception(
        e: Exception,
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> KubernetesError:
        """Translate a kubernetes ApiException to a custom exception.

        Args:
            e: The original ApiException.
            resource_type: Type of resource being operated on.
            resource_name: Name of the resource.
            namespace: Namespace of the resource.

        Returns:
            An appropriate KubernetesError subclass.
        """
        from kubernetes.client import ApiException

        if isinstance(e, KubernetesError):
            return e

        if not isinstance(e, ApiException):
            return KubernetesError(
                message=str(e),
                resource_type=resource_type,
                resource_name=resource_name,
                namespace=namespace,
            )

        status = e.status

        if status in (401, 403):
            return KubernetesAuthError(
                message=e.reason or "Authentication/authorization failed",
                status_code=status,
                reason=e.reason,
            )

        if status == 404:
            return KubernetesNotFoundError(
                resource_type=resource_type,
                resource_name=resource_name,
                namespace=namespace,
            )

        if status in (400, 422):
            return KubernetesValidationError(
                message=e.reason or "Validation failed",
                status_code=status,
            )

        return KubernetesError(
            message=e.reason or f"Kubernetes API error: {status}",
            status_code=status,
            resource_type=resource_type,
            resource_name=resource_name,
            namespace=namespace,
        )

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """Close the client and release resources."""
        if self._api_client is not None:
            self._api_client.close()
            self._api_client = None
        self._core_v1 = None
        logger.debug("Kubernetes client closed", context=self._context.name)

    def __enter__(self) -> KubernetesClient:
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()
