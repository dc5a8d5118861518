"""Data models for kube-secrets.

This module provides the immutable run parameters and the read-only
views of cluster data that flow through the listing pipeline.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from kube_secrets.exceptions import ConfigError

OPAQUE_TYPE = "Opaque"


@dataclass(frozen=True, slots=True)
class Config:
    """Parameters for a single listing run.

    Attributes:
        namespace: The Kubernetes namespace to list secrets from.
        query: Case-sensitive substring the secret name must contain.
               None (or an empty string) disables name filtering.
        show_all: If True, show every secret type instead of only Opaque.

    """

    namespace: str
    query: str | None = None
    show_all: bool = False

    def __post_init__(self) -> None:
        if not self.namespace or not self.namespace.strip():
            raise ConfigError("Namespace must not be empty")


@dataclass(frozen=True, slots=True)
class SecretRecord:
    """Read-only view of a Kubernetes Secret.

    Attributes:
        name: The secret name.
        type: The secret type (e.g. Opaque, kubernetes.io/tls).
        data: Mapping of key to the raw, already base64-decoded value.

    """

    name: str | None
    type: str | None
    data: Mapping[str, bytes] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", MappingProxyType(dict(self.data or {})))


@dataclass(frozen=True, slots=True)
class NamespaceDiagnosis:
    """Result of checking a namespace after nothing was shown."""

    namespace: str
    exists: bool

    @property
    def message(self) -> str:
        if self.exists:
            return f"No secrets found in namespace '{self.namespace}'"
        return f"Namespace '{self.namespace}' does not exist. Maybe you're looking at the wrong cluster?"


@dataclass(slots=True)
class RunOutcome:
    """Counters accumulated over one pipeline run.

    Attributes:
        secrets_shown: Number of secrets that passed the filter.
        entries_shown: Number of key/value lines rendered across all secrets.
        diagnosis: Namespace diagnosis, set only when no entries were shown.

    """

    secrets_shown: int = 0
    entries_shown: int = 0
    diagnosis: NamespaceDiagnosis | None = None
