"""Cascading pod picker.

Walks the operator through four single-choice prompts, each populated from
the previous answer:

    context -> namespace -> pod -> container

The wizard never exits the process. Cancellation, empty option lists and
cluster failures surface as exceptions so the caller decides how to report
them and which exit code to use.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

import structlog

from podctl.integrations.kubernetes.client import KubernetesClient
from podctl.services.kubernetes.cluster_query import ClusterQueryManager

if TYPE_CHECKING:
    from podctl.integrations.kubernetes.kubeconfig import CredentialSet

logger = structlog.get_logger()


class Stage(Enum):
    """Wizard stages, in prompt order. Values are the prompt titles."""

    CONTEXT = "Cluster"
    NAMESPACE = "Namespace"
    POD = "Pod"
    CONTAINER = "Container"


# =============================================================================
# Exceptions
# =============================================================================


class SelectionError(Exception):
    """A prompt could not produce a choice."""


class SelectionCancelledError(SelectionError):
    """The user aborted a prompt."""

    def __init__(self, stage: str | None = None) -> None:
        message = "selection cancelled by the user"
        if stage:
            message += f" at '{stage}'"
        super().__init__(message)
        self.stage = stage


class EmptyOptionsError(SelectionError):
    """A stage has nothing to choose from."""

    def __init__(self, stage: Stage, scope: str) -> None:
        noun = {
            Stage.CONTEXT: "contexts",
            Stage.NAMESPACE: "namespaces",
            Stage.POD: "pods",
            Stage.CONTAINER: "containers",
        }[stage]
        super().__init__(f"no {noun} found in {scope}")
        self.stage = stage
        self.scope = scope


# =============================================================================
# Collaborators
# =============================================================================


class Selector(Protocol):
    """Single-choice prompt."""

    def select(self, title: str, options: Sequence[str]) -> str:
        """Show ``options`` under ``title`` and return the chosen one.

        Raises:
            SelectionCancelledError: If the user aborts.
            SelectionError: If the prompt fails for any other reason.
        """
        ...


ManagerFactory = Callable[[str], AbstractContextManager[ClusterQueryManager]]
SelectionCallback = Callable[[Stage, str], None]


@dataclass(frozen=True)
class PodSelection:
    """The four answers of a completed wizard run."""

    context: str
    namespace: str
    pod: str
    container: str


# =============================================================================
# Wizard
# =============================================================================


class PodPickerWizard:
    """Sequential context/namespace/pod/container picker.

    Args:
        credentials: Parsed kubeconfig supplying the context list.
        selector: Prompt used for every stage.
        manager_factory: Opens a query manager for a context name. Defaults
            to a fresh ``KubernetesClient`` that is closed afterwards.
        on_selected: Called after each stage with the chosen value.
    """

    def __init__(
        self,
        credentials: CredentialSet,
        selector: Selector,
        *,
        manager_factory: ManagerFactory | None = None,
        on_selected: SelectionCallback | None = None,
    ) -> None:
        self._credentials = credentials
        self._selector = selector
        self._manager_factory = manager_factory or self._open_manager
        self._on_selected = on_selected
        self._log = logger.bind(entity="wizard")

    @contextmanager
    def _open_manager(self, context: str) -> Iterator[ClusterQueryManager]:
        with KubernetesClient(self._credentials, context) as client:
            yield ClusterQueryManager(client)

    def run(self) -> PodSelection:
        """Run all four stages and return the selection.

        Raises:
            SelectionCancelledError: If the user aborts any prompt.
            SelectionError: If a stage has no options or a prompt fails.
            KubernetesError: If a cluster query fails.
        """
        context = self._choose(
            Stage.CONTEXT,
            self._credentials.context_names(),
            scope=f"kubeconfig '{self._credentials.path}'",
        )

        with self._manager_factory(context) as manager:
            namespaces = [ns.name for ns in manager.list_namespaces()]
            namespace = self._choose(Stage.NAMESPACE, namespaces, scope=f"context '{context}'")

            pods = [pod.name for pod in manager.list_pods(namespace)]
            pod = self._choose(Stage.POD, pods, scope=f"namespace '{namespace}'")

            detail = manager.get_pod(pod, namespace)
            container = self._choose(
                Stage.CONTAINER, detail.container_names, scope=f"pod '{pod}'"
            )

        selection = PodSelection(
            context=context,
            namespace=namespace,
            pod=pod,
            container=container,
        )
        self._log.info(
            "selection_complete",
            context=context,
            namespace=namespace,
            pod=pod,
            container=container,
        )
        return selection

    def _choose(self, stage: Stage, options: list[str], *, scope: str) -> str:
        """Prompt for one stage."""
        stage_name = stage.name.lower()
        if not options:
            self._log.warning("no_options", stage=stage_name, scope=scope)
            raise EmptyOptionsError(stage, scope)

        self._log.debug("prompting", stage=stage_name, options=len(options))
        try:
            choice = self._selector.select(stage.value, options)
        except SelectionCancelledError:
            self._log.info("selection_cancelled", stage=stage_name)
            raise

        self._log.info("stage_selected", stage=stage_name, value=choice)
        if self._on_selected is not None:
            self._on_selected(stage, choice)
        return choice
