"""Shared fixtures for Kubernetes service tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from podctl.integrations.kubernetes.client import KubernetesClient


@pytest.fixture
def mock_k8s_client() -> MagicMock:
    """Create a mock Kubernetes client.

    ``core_v1`` is a plain sub-mock; error translation uses the real
    ``KubernetesClient.translate_api_exception``.
    """
    mock_client = MagicMock()
    mock_client.context = "staging"
    mock_client.translate_api_exception.side_effect = KubernetesClient.translate_api_exception
    return mock_client
