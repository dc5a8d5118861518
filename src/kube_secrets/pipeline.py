"""Listing pipeline.

This module ties the filter, the renderer and the namespace diagnostic
together. The cluster is reached only through the SecretSource and
NamespaceSource ports, so the pipeline runs just as well against
in-memory fakes.
"""

from collections.abc import Callable, Iterable
from typing import Protocol

from icecream import ic
from rich.text import Text

from kube_secrets.diagnostics import diagnose_namespace
from kube_secrets.filtering import should_display
from kube_secrets.models import Config, NamespaceDiagnosis, RunOutcome, SecretRecord
from kube_secrets.rendering import OutputStyle, PlainStyle, render_secret


class SecretSource(Protocol):
    def list_secrets(self, namespace: str) -> Iterable[SecretRecord]: ...


class NamespaceSource(Protocol):
    def list_namespaces(self) -> Iterable[str]: ...


class ClusterSource(SecretSource, NamespaceSource, Protocol):
    pass


class ListingPipeline:
    """Filters, renders and diagnoses the secrets of one namespace.

    Attributes:
        config: The run parameters.
        style: Styling strategy handed to the renderer.
        emit: Callable receiving every output line.

    """

    def __init__(
        self,
        config: Config,
        style: OutputStyle | None = None,
        emit: Callable[[str | Text], None] = print,
    ) -> None:
        self.config: Config = config
        self.style: OutputStyle = style or PlainStyle()
        self.emit: Callable[[str | Text], None] = emit

    def run(self, secrets: Iterable[SecretRecord]) -> RunOutcome:
        """Render every secret that passes the filter.

        Args:
            secrets: One snapshot of the namespace's secrets.

        Returns:
            The counts of rendered secrets and entries.

        Raises:
            DataContractError: If a secret has no name or type.

        """
        outcome = RunOutcome()

        for secret in secrets:
            if not should_display(self.config, secret):
                continue

            rendered = render_secret(secret, self.style)
            for line in rendered.lines:
                self.emit(line)

            outcome.secrets_shown += 1
            outcome.entries_shown += rendered.entries

        ic(outcome)
        return outcome

    def diagnose(self, outcome: RunOutcome, namespaces: Iterable[str]) -> NamespaceDiagnosis | None:
        """Explain an empty listing.

        Does nothing when entries were shown; the namespace iterable is
        not touched in that case.

        Args:
            outcome: The result of run().
            namespaces: Names of all namespaces in the cluster.

        Returns:
            The diagnosis, or None if entries were shown.

        """
        if outcome.entries_shown:
            return None

        outcome.diagnosis = diagnose_namespace(self.config.namespace, namespaces)
        self.emit(outcome.diagnosis.message)
        return outcome.diagnosis

    def execute(self, source: ClusterSource) -> RunOutcome:
        """Run the full listing against a cluster.

        The namespace list is only requested when nothing was shown.

        Args:
            source: Provider of secrets and namespace names.

        Returns:
            The run outcome, including the diagnosis if one was made.

        """
        outcome = self.run(source.list_secrets(self.config.namespace))
        if not outcome.entries_shown:
            self.diagnose(outcome, source.list_namespaces())
        return outcome
