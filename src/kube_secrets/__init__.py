"""kube-secrets: list and decode the Secrets of a Kubernetes namespace.

This package provides the `secrets` command-line tool and the listing
pipeline behind it, which can also be driven from Python.

Example usage:
    from kube_secrets import Cluster, Config, ListingPipeline

    # List Opaque secrets whose name contains "token"
    pipeline = ListingPipeline(Config(namespace="default", query="token"))
    outcome = pipeline.execute(Cluster())
"""

__version__ = "0.1.0"

from kube_secrets.cli import cli
from kube_secrets.cluster import Cluster
from kube_secrets.diagnostics import diagnose_namespace
from kube_secrets.exceptions import (
    ClusterConnectionError,
    ConfigError,
    DataContractError,
    KubeSecretsError,
)
from kube_secrets.filtering import should_display
from kube_secrets.models import Config, NamespaceDiagnosis, RunOutcome, SecretRecord
from kube_secrets.pipeline import ListingPipeline
from kube_secrets.rendering import PlainStyle, RichStyle, render_secret

__all__ = [
    # Version
    "__version__",
    # Main CLI
    "cli",
    # Classes
    "Cluster",
    "Config",
    "ListingPipeline",
    "RichStyle",
    "NamespaceDiagnosis",
    "PlainStyle",
    "RunOutcome",
    "SecretRecord",
    # Functions
    "diagnose_namespace",
    "render_secret",
    "should_display",
    # Exceptions
    "KubeSecretsError",
    "ClusterConnectionError",
    "ConfigError",
    "DataContractError",
]
