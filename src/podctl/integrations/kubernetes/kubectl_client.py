"""kubectl CLI wrapper for interactive exec sessions.

Hands the terminal over to ``kubectl exec`` so the remote shell protocol,
TTY handling and signal forwarding stay kubectl's concern.
"""

from __future__ import annotations

import os
import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from podctl.integrations.kubernetes.exceptions import KubernetesError

logger = structlog.get_logger()

DEFAULT_SHELL = "sh"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class KubectlError(KubernetesError):
    """Base exception for kubectl operations."""


class KubectlNotFoundError(KubectlError):
    """Raised when kubectl binary is not found."""

    def __init__(self, binary_path: str | None = None) -> None:
        location = f"at '{binary_path}'" if binary_path else "in PATH"
        super().__init__(
            message=(
                f"kubectl binary not found {location}. "
                "Install from: https://kubernetes.io/docs/tasks/tools/"
            ),
        )


class ShellSessionError(KubectlError):
    """Raised when the exec session exits with a non-zero status."""

    def __init__(self, returncode: int, pod: str, container: str) -> None:
        super().__init__(
            message=f"kubectl exec exited with status {returncode}",
            resource_type="Pod",
            resource_name=f"{pod}/{container}",
        )
        self.returncode = returncode


# ---------------------------------------------------------------------------
# Result dataclass
# ---------------------------------------------------------------------------


@dataclass
class ShellSessionResult:
    """Outcome of a finished exec session."""

    args: list[str] = field(default_factory=list)
    returncode: int = 0


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------


class KubectlClient:
    """Client for running interactive sessions through the kubectl CLI."""

    def __init__(self, binary_path: str | None = None) -> None:
        """Initialize kubectl client.

        Args:
            binary_path: Optional explicit path to kubectl binary.
                If None, searches PATH.

        Raises:
            KubectlNotFoundError: If binary not found.
        """
        self._binary = self._find_binary(binary_path)
        self._log = logger.bind(binary=self._binary)
        self._log.debug("kubectl_client_initialized")

    @staticmethod
    def _find_binary(binary_path: str | None) -> str:
        """Locate kubectl binary.

        Args:
            binary_path: Explicit path or None to search PATH.

        Returns:
            Path to kubectl binary.

        Raises:
            KubectlNotFoundError: If not found.
        """
        if binary_path:
            path = Path(binary_path).expanduser()
            if not path.exists():
                raise KubectlNotFoundError(binary_path)
            return str(path.resolve())

        found = shutil.which("kubectl")
        if not found:
            raise KubectlNotFoundError()

        return found

    @property
    def binary(self) -> str:
        """Resolved path of the kubectl binary."""
        return self._binary

    @staticmethod
    def build_exec_args(
        pod: str,
        container: str,
        context: str,
        namespace: str,
        shell: str = DEFAULT_SHELL,
    ) -> list[str]:
        """Build the kubectl arguments for an interactive shell in a container."""
        return [
            "exec",
            "-it",
            pod,
            "-c",
            container,
            f"--context={context}",
            "-n",
            namespace,
            "--",
            shell,
        ]

    def exec_shell(
        self,
        pod: str,
        container: str,
        *,
        context: str,
        namespace: str,
        kubeconfig: str | None = None,
        shell: str = DEFAULT_SHELL,
    ) -> ShellSessionResult:
        """Open an interactive shell in a container and wait for it to end.

        The subprocess inherits this process's stdin, stdout and stderr, so the
        user talks to the remote shell directly.

        Args:
            pod: Pod name.
            container: Container name.
            context: kubeconfig context to use.
            namespace: Namespace of the pod.
            kubeconfig: kubeconfig file kubectl should read, exported as
                ``KUBECONFIG``. If None, kubectl uses its own default.
            shell: Command to run inside the container.

        Returns:
            The session result. End-of-input ends the remote shell with the
            status of its last command, so a clean Ctrl-D is a normal result.

        Raises:
            ShellSessionError: If kubectl exits with a non-zero status.
            KubectlError: If kubectl cannot be started.
        """
        args = [self._binary, *self.build_exec_args(pod, container, context, namespace, shell)]
        log = self._log.bind(pod=pod, container=container, context=context, namespace=namespace)
        env = None
        if kubeconfig:
            env = {**os.environ, "KUBECONFIG": kubeconfig}
        log.info("exec_shell", args=args, kubeconfig=kubeconfig)

        try:
            result = subprocess.run(args, check=False, env=env)
        except OSError as e:
            raise KubectlError(message=f"Failed to start kubectl: {e}") from e

        if result.returncode != 0:
            log.warning("exec_shell_failed", returncode=result.returncode)
            raise ShellSessionError(result.returncode, pod, container)

        log.info("exec_shell_finished")
        return ShellSessionResult(args=args, returncode=0)
