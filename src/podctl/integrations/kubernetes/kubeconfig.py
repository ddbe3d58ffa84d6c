"""Kubeconfig loading.

Reads the local kubeconfig file once and exposes the contexts it declares.
The file is never written.
"""

from __future__ import annotations

import os
from pathlib import Path

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from podctl.integrations.kubernetes.exceptions import KubernetesError

logger = structlog.get_logger()

DEFAULT_KUBECONFIG = "~/.kube/config"
KUBECONFIG_ENV_VAR = "KUBECONFIG"


class KubeconfigError(KubernetesError):
    """Raised when the kubeconfig file is missing, unreadable or malformed."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        if path:
            message = f"{message}: {path}"
        super().__init__(message=message)
        self.path = path
        self.original_error = original_error


class ContextEntry(BaseModel):
    """A named context from a kubeconfig file."""

    model_config = ConfigDict(extra="ignore")

    name: str
    cluster: str | None = None
    user: str | None = None
    namespace: str | None = None


class CredentialSet(BaseModel):
    """Parsed kubeconfig: context name to connection parameters."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str
    current_context: str | None = None
    contexts: dict[str, ContextEntry] = Field(default_factory=dict)

    def context_names(self) -> list[str]:
        """Return context names in the order the file declares them."""
        return list(self.contexts)

    def get_context(self, name: str) -> ContextEntry:
        """Look up a context by name.

        Raises:
            KubeconfigError: If the context is not declared in the file.
        """
        try:
            return self.contexts[name]
        except KeyError:
            raise KubeconfigError(f"Context '{name}' not found in kubeconfig", self.path) from None


def default_kubeconfig_path() -> str:
    """Resolve the conventional kubeconfig location.

    Follows kubectl: the first existing file listed in ``$KUBECONFIG``,
    otherwise its first entry, otherwise ``~/.kube/config``.
    """
    entries = [p for p in os.environ.get(KUBECONFIG_ENV_VAR, "").split(os.pathsep) if p]
    for entry in entries:
        candidate = Path(entry).expanduser()
        if candidate.exists():
            return str(candidate)
    if entries:
        return str(Path(entries[0]).expanduser())
    return str(Path(DEFAULT_KUBECONFIG).expanduser())


def load_credentials(path: str | Path) -> CredentialSet:
    """Load and parse a kubeconfig file.

    Args:
        path: Location of the kubeconfig file.

    Returns:
        The parsed credential set.

    Raises:
        KubeconfigError: If the file is missing, unreadable or malformed.
    """
    kubeconfig_path = Path(path).expanduser()
    log = logger.bind(kubeconfig=str(kubeconfig_path))

    try:
        raw = kubeconfig_path.read_text()
    except FileNotFoundError as e:
        raise KubeconfigError("kubeconfig file not found", str(kubeconfig_path), e) from e
    except OSError as e:
        raise KubeconfigError("Cannot read kubeconfig file", str(kubeconfig_path), e) from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise KubeconfigError("kubeconfig is not valid YAML", str(kubeconfig_path), e) from e

    # An empty file is a valid, empty config
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise KubeconfigError("kubeconfig must be a mapping", str(kubeconfig_path))

    entries = data.get("contexts") or []
    if not isinstance(entries, list):
        raise KubeconfigError("kubeconfig 'contexts' must be a list", str(kubeconfig_path))

    contexts: dict[str, ContextEntry] = {}
    for entry in entries:
        if not isinstance(entry, dict) or not entry.get("name"):
            raise KubeconfigError("kubeconfig has a context without a name", str(kubeconfig_path))
        details = entry.get("context") or {}
        if not isinstance(details, dict):
            raise KubeconfigError(
                f"kubeconfig context '{entry['name']}' is malformed", str(kubeconfig_path)
            )
        try:
            ctx = ContextEntry.model_validate({**details, "name": str(entry["name"])})
        except ValidationError as e:
            raise KubeconfigError(
                f"kubeconfig context '{entry['name']}' is malformed", str(kubeconfig_path), e
            ) from e
        contexts[ctx.name] = ctx

    current = data.get("current-context") or None
    credentials = CredentialSet(
        path=str(kubeconfig_path),
        current_context=str(current) if current else None,
        contexts=contexts,
    )
    log.debug("loaded_kubeconfig", contexts=len(contexts), current_context=credentials.current_context)
    return credentials
