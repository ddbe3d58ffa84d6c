"""Shared pytest fixtures for podctl tests."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from podctl.cli.main import app

SAMPLE_KUBECONFIG = """
apiVersion: v1
kind: Config
current-context: staging
clusters:
  - name: staging-cluster
    cluster:
      server: https://staging.example.com:6443
  - name: prod-cluster
    cluster:
      server: https://prod.example.com:6443
users:
  - name: ops
    user:
      token: not-a-real-token
contexts:
  - name: staging
    context:
      cluster: staging-cluster
      user: ops
      namespace: web
  - name: production
    context:
      cluster: prod-cluster
      user: ops
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def kubeconfig_file(temp_dir: Path) -> Path:
    """Write a kubeconfig with two contexts: staging and production."""
    path = temp_dir / "config"
    path.write_text(SAMPLE_KUBECONFIG)
    return path


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset environment variables for each test."""
    for key in list(os.environ.keys()):
        if key.startswith("PODCTL_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("KUBECONFIG", raising=False)


@pytest.fixture
def capture_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Fixture to capture log output."""
    import logging

    caplog.set_level(logging.DEBUG)
    return caplog


@pytest.fixture
def cli_app() -> typer.Typer:
    """Return the CLI app for testing."""
    return app
