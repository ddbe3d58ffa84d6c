"""Cluster-scoped resource models."""

from __future__ import annotations

from typing import Any

from podctl.integrations.kubernetes.models.base import K8sEntityBase, _safe_get


class NamespaceSummary(K8sEntityBase):
    """Namespace offered at the namespace prompt."""

    @classmethod
    def from_k8s_object(cls, obj: Any) -> NamespaceSummary:
        """Create from a kubernetes V1Namespace object."""
        return cls(name=_safe_get(obj, "metadata", "name", default=""))
