"""Pydantic display models for Kubernetes resources."""

from podctl.integrations.kubernetes.models.base import K8sEntityBase
from podctl.integrations.kubernetes.models.cluster import NamespaceSummary
from podctl.integrations.kubernetes.models.workloads import ContainerSummary, PodSummary

__all__ = [
    "ContainerSummary",
    "K8sEntityBase",
    "NamespaceSummary",
    "PodSummary",
]
