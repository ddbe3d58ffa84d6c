"""Kubernetes service module.

Provides the read-only cluster queries the picker needs.
"""

from podctl.services.kubernetes.cluster_query import ClusterQueryManager

__all__ = ["ClusterQueryManager"]
