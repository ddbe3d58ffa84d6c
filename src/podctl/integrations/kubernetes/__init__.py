"""Kubernetes integration - kubeconfig loading, API client and kubectl wrapper."""

from podctl.integrations.kubernetes.client import KubernetesClient
from podctl.integrations.kubernetes.exceptions import (
    KubernetesAuthError,
    KubernetesConnectionError,
    KubernetesError,
    KubernetesNotFoundError,
    KubernetesValidationError,
)
from podctl.integrations.kubernetes.kubeconfig import (
    ContextEntry,
    CredentialSet,
    KubeconfigError,
    default_kubeconfig_path,
    load_credentials,
)
from podctl.integrations.kubernetes.kubectl_client import (
    KubectlClient,
    KubectlError,
    KubectlNotFoundError,
    ShellSessionError,
    ShellSessionResult,
)

__all__ = [
    "ContextEntry",
    "CredentialSet",
    "KubeconfigError",
    "KubectlClient",
    "KubectlError",
    "KubectlNotFoundError",
    "KubernetesAuthError",
    "KubernetesClient",
    "KubernetesConnectionError",
    "KubernetesError",
    "KubernetesNotFoundError",
    "KubernetesValidationError",
    "ShellSessionError",
    "ShellSessionResult",
    "default_kubeconfig_path",
    "load_credentials",
]
