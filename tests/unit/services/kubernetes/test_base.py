"""Unit tests for K8sBaseManager."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from podctl.integrations.kubernetes.exceptions import KubernetesError
from podctl.services.kubernetes.base import K8sBaseManager


class TestK8sBaseManager:
    """Tests for K8sBaseManager base class."""

    @pytest.mark.unit
    @pytest.mark.kubernetes
    def test_init(self, mock_k8s_client: MagicMock) -> None:
        """Manager should initialize with client."""
        manager = K8sBaseManager(mock_k8s_client)

        assert manager._client is mock_k8s_client
        assert manager._log is not None

    @pytest.mark.unit
    @pytest.mark.kubernetes
    def test_handle_api_error(self, mock_k8s_client: MagicMock) -> None:
        """Should translate API exception through client and chain it."""
        manager = K8sBaseManager(mock_k8s_client)
        test_exception = Exception("Test error")

        with pytest.raises(KubernetesError, match="Test error") as exc_info:
            manager._handle_api_error(
                test_exception,
                resource_type="Pod",
                resource_name="test-pod",
                namespace="test-ns",
            )

        assert exc_info.value.__cause__ is test_exception
        mock_k8s_client.translate_api_exception.assert_called_once_with(
            test_exception,
            resource_type="Pod",
            resource_name="test-pod",
            namespace="test-ns",
        )

    @pytest.mark.unit
    @pytest.mark.kubernetes
    def test_entity_name_default(self, mock_k8s_client: MagicMock) -> None:
        """Base manager should have empty entity name."""
        assert K8sBaseManager(mock_k8s_client)._entity_name == ""
