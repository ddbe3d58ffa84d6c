"""Error reporting for the podctl CLI.

Every failure the wizard or the shell handoff can raise is turned into a
short message and a ``typer.Exit`` here.
"""

from __future__ import annotations

from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from podctl.integrations.kubernetes.exceptions import (
    KubernetesAuthError,
    KubernetesConnectionError,
    KubernetesError,
    KubernetesNotFoundError,
    KubernetesValidationError,
)
from podctl.integrations.kubernetes.kubeconfig import KubeconfigError
from podctl.integrations.kubernetes.kubectl_client import KubectlNotFoundError, ShellSessionError
from podctl.services.wizard import SelectionCancelledError, SelectionError

# Shared console instance
console = Console()


def handle_selection_error(error: SelectionError) -> NoReturn:
    """Report a failed or cancelled prompt.

    Raises:
        typer.Exit: Always exits with code 1.
    """
    if isinstance(error, SelectionCancelledError):
        console.print("Process was cancelled by the user.")
    else:
        console.print(f"Selection failed: {escape(str(error))}")
    raise typer.Exit(1)


def handle_k8s_error(error: KubernetesError) -> NoReturn:
    """Handle Kubernetes errors with user-friendly output.

    Args:
        error: The Kubernetes error to handle.

    Raises:
        typer.Exit: With the session's exit code for ``ShellSessionError``,
            otherwise 1.
    """
    message = escape(error.message)

    if isinstance(error, ShellSessionError):
        console.print(f"Command execution failed: {escape(str(error))}")
        raise typer.Exit(error.returncode)

    if isinstance(error, KubeconfigError):
        console.print(f"[red]Error:[/red] Failed to load kubeconfig: {message}")
        if error.original_error:
            console.print(f"  Cause: {escape(str(error.original_error))}")

    elif isinstance(error, KubectlNotFoundError):
        console.print(f"[red]Error:[/red] {message}")

    elif isinstance(error, KubernetesConnectionError):
        console.print("[red]Error:[/red] Cannot connect to Kubernetes cluster")
        console.print(f"  {message}")
        if error.original_error:
            console.print(f"  Cause: {escape(str(error.original_error))}")
        console.print(
            "\n[dim]Hint: Check that your kubeconfig is valid and the cluster is reachable.[/dim]"
        )

    elif isinstance(error, KubernetesAuthError):
        console.print("[red]Error:[/red] Authentication/authorization failed")
        console.print(f"  {message}")
        console.print("\n[dim]Hint: Check your credentials, token, or RBAC permissions.[/dim]")

    elif isinstance(error, KubernetesNotFoundError):
        console.print("[red]Error:[/red] Resource not found")
        console.print(f"  {message}")

    elif isinstance(error, KubernetesValidationError):
        console.print("[red]Error:[/red] Request rejected by the API server")
        console.print(f"  {message}")

    else:
        console.print(f"[red]Error:[/red] {message}")
        if error.status_code:
            console.print(f"  HTTP Status: {error.status_code}")

    raise typer.Exit(1)
