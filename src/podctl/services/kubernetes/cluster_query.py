"""Read-only cluster queries backing the picker.

Each operation is a single synchronous round trip to the API server.
"""

from __future__ import annotations

from podctl.integrations.kubernetes.models.cluster import NamespaceSummary
from podctl.integrations.kubernetes.models.workloads import PodSummary
from podctl.services.kubernetes.base import K8sBaseManager


class ClusterQueryManager(K8sBaseManager):
    """Lists namespaces and pods and reads pod specs for one context."""

    _entity_name = "cluster_query"

    def list_namespaces(self) -> list[NamespaceSummary]:
        """List all namespaces.

        Returns:
            List of namespace summaries.
        """
        self._log.debug("listing_namespaces")
        try:
            result = self._client.core_v1.list_namespace()
            items = [NamespaceSummary.from_k8s_object(ns) for ns in result.items]
            self._log.debug("listed_namespaces", count=len(items))
            return items
        except Exception as e:
            self._handle_api_error(e, "Namespace", None, None)

    def list_pods(self, namespace: str) -> list[PodSummary]:
        """List pods in a namespace.

        Args:
            namespace: Target namespace.

        Returns:
            List of pod summaries.
        """
        self._log.debug("listing_pods", namespace=namespace)
        try:
            result = self._client.core_v1.list_namespaced_pod(namespace=namespace)
            pods = [PodSummary.from_k8s_object(pod) for pod in result.items]
            self._log.debug("listed_pods", namespace=namespace, count=len(pods))
            return pods
        except Exception as e:
            self._handle_api_error(e, "Pod", None, namespace)

    def get_pod(self, name: str, namespace: str) -> PodSummary:
        """Get a single pod by name.

        Args:
            name: Pod name.
            namespace: Target namespace.

        Returns:
            Pod summary, including its containers.
        """
        self._log.debug("getting_pod", name=name, namespace=namespace)
        try:
            result = self._client.core_v1.read_namespaced_pod(name=name, namespace=namespace)
            return PodSummary.from_k8s_object(result)
        except Exception as e:
            self._handle_api_error(e, "Pod", name, namespace)
