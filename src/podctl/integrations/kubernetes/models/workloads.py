"""Pod and container models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from podctl.integrations.kubernetes.models.base import K8sEntityBase, _safe_get


class ContainerSummary(BaseModel):
    """A container declared in a pod spec."""

    model_config = ConfigDict(extra="ignore")

    name: str

    @classmethod
    def from_k8s_object(cls, obj: Any) -> ContainerSummary:
        """Create from a kubernetes V1Container object."""
        return cls(name=getattr(obj, "name", "") or "")


class PodSummary(K8sEntityBase):
    """Pod offered at the pod prompt, with the containers of its spec."""

    containers: list[ContainerSummary] = Field(
        default_factory=list, description="Containers from the pod spec, in spec order"
    )

    @property
    def container_names(self) -> list[str]:
        """Names of the pod's containers, in spec order."""
        return [c.name for c in self.containers]

    @classmethod
    def from_k8s_object(cls, obj: Any) -> PodSummary:
        """Create from a kubernetes V1Pod object."""
        spec_containers = _safe_get(obj, "spec", "containers") or []

        return cls(
            name=_safe_get(obj, "metadata", "name", default=""),
            namespace=_safe_get(obj, "metadata", "namespace"),
            containers=[ContainerSummary.from_k8s_object(c) for c in spec_containers],
        )
