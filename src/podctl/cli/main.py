"""Main CLI entry point using Typer."""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.markup import escape

from podctl import __version__
from podctl.cli.errors import console, handle_k8s_error, handle_selection_error
from podctl.core.config import PodctlConfig
from podctl.integrations.kubernetes.exceptions import KubernetesError
from podctl.integrations.kubernetes.kubeconfig import load_credentials
from podctl.integrations.kubernetes.kubectl_client import KubectlClient
from podctl.logging.config import configure_logging, get_logger
from podctl.services.wizard import PodPickerWizard, SelectionError, Stage
from podctl.tui.apps.picker import TextualSelector
from podctl.tui.theme import Styles

app = typer.Typer(
    name="podctl",
    help="Pick a context, namespace, pod and container, then open a shell in it.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"podctl version {__version__}")
        raise typer.Exit()


def print_selected(_stage: Stage, value: str) -> None:
    """Confirm a wizard answer on the console. The stage is not shown."""
    console.print(Styles.selected(value))


@app.command()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug mode.",
    ),
) -> None:
    """Pick a context, namespace, pod and container, then open a shell in it."""
    configure_logging(verbose=verbose, debug=debug)
    log = get_logger(__name__)

    try:
        config = PodctlConfig.from_env()
    except ValidationError as e:
        console.print(f"[red]Error:[/red] Invalid configuration\n{escape(str(e))}")
        raise typer.Exit(1) from e

    try:
        credentials = load_credentials(config.kubeconfig)
        kubectl = KubectlClient(config.kubectl_path)

        wizard = PodPickerWizard(
            credentials,
            TextualSelector(max_height=config.max_height),
            on_selected=print_selected,
        )
        selection = wizard.run()

        kubectl.exec_shell(
            selection.pod,
            selection.container,
            context=selection.context,
            namespace=selection.namespace,
            kubeconfig=credentials.path,
            shell=config.shell,
        )
    except SelectionError as e:
        log.info("wizard_aborted", reason=str(e))
        handle_selection_error(e)
    except KubernetesError as e:
        log.info("podctl_failed", error=str(e))
        handle_k8s_error(e)

    console.print(
        f'Exited out of "{selection.pod} / {selection.container}"',
        markup=False,
        highlight=False,
    )


if __name__ == "__main__":
    app()
