"""Kubernetes cluster interaction utilities.

This module provides the Cluster class, which selects a kubeconfig
context and reads Secrets and Namespaces through the Kubernetes API.
"""

import base64
import binascii
import os
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import click
import questionary
from icecream import ic
from kubernetes import client, config
from kubernetes.client.exceptions import ApiException
from kubernetes.config.config_exception import ConfigException
from urllib3.exceptions import MaxRetryError

from kube_secrets import console
from kube_secrets.exceptions import ClusterConnectionError, ConfigError, DataContractError
from kube_secrets.models import SecretRecord
from kube_secrets.styles import POINTER, PROMPT_STYLE, QMARK

IN_CLUSTER_CONTEXT = "in-cluster"


def _running_in_cluster() -> bool:
    return "KUBERNETES_SERVICE_HOST" in os.environ


@contextmanager
def _api_call(description: str) -> Generator[None, None, None]:
    """Translate Kubernetes client failures into ClusterConnectionError.

    Args:
        description: What was being done, used in the error message.

    Raises:
        ClusterConnectionError: If the wrapped call fails.

    """
    try:
        yield
    except ApiException as e:
        raise ClusterConnectionError(f"Failed to {description}: {e.status} {e.reason}") from e
    except MaxRetryError as e:
        raise ClusterConnectionError(f"Failed to connect to the Kubernetes cluster: {e.reason}") from e


def secret_from_api(secret: Any) -> SecretRecord:
    """Convert a V1Secret into a SecretRecord.

    Name and type are passed through as-is, missing ones are rejected by
    the filter. Data values are base64-decoded.

    Args:
        secret: A V1Secret returned by the API.

    Returns:
        The SecretRecord view of the secret.

    Raises:
        DataContractError: If a data value is not valid base64.

    """
    name: str | None = secret.metadata.name if secret.metadata is not None else None
    data: dict[str, bytes] = {}

    for key, value in (secret.data or {}).items():
        try:
            data[key] = base64.b64decode(value or "", validate=True)
        except (binascii.Error, ValueError) as e:
            raise DataContractError(f"Secret '{name}' has a non-base64 value for key '{key}'") from e

    return SecretRecord(name=name, type=secret.type, data=data)


def namespace_name_from_api(namespace: Any) -> str:
    """Return the name of a V1Namespace.

    Raises:
        DataContractError: If the namespace has no metadata.name.

    """
    name: str | None = namespace.metadata.name if namespace.metadata is not None else None
    if name is None:
        raise DataContractError("Namespace returned by the API has no metadata.name")
    return name


class Cluster:
    """Reads Secrets and Namespaces from a Kubernetes cluster.

    Attributes:
        context: The active kubeconfig context name, or "in-cluster" when
                 running with the pod's service account.

    """

    def __init__(self, *, context: str | None = None, select_context: bool = False) -> None:
        """Initialize Cluster and load the client configuration.

        Args:
            context: Name of the kubeconfig context to use. The current
                     context is used if omitted.
            select_context: If True, prompt the user to select a context.

        Raises:
            ClusterConnectionError: If no usable configuration is found.
            ConfigError: If the requested context does not exist.

        """
        try:
            self.context: str = self._set_context(context=context, select_context=select_context)
        except ClusterConnectionError:
            if context is not None or select_context or not _running_in_cluster():
                raise
            self.context = self._load_incluster_config()
            return

        try:
            config.load_kube_config(context=self.context)
        except ConfigException as e:
            raise ClusterConnectionError(f"Unable to load context '{self.context}': {e}") from e

    @staticmethod
    def _set_context(*, context: str | None, select_context: bool) -> str:
        """Set the Kubernetes context to use.

        Args:
            context: Explicit context name, if any.
            select_context: If True, prompt user to select a context.

        Returns:
            The selected, requested or current context name.

        Raises:
            ClusterConnectionError: If kubeconfig is invalid or missing.
            ConfigError: If the requested context is not in the kubeconfig.
            click.Abort: If user cancels context selection.

        """
        try:
            contexts, current_context = config.list_kube_config_contexts()
        except ConfigException as e:
            raise ClusterConnectionError(f"Invalid or missing kubeconfig: {e}") from e

        context_names: list[str] = [ctx["name"] for ctx in contexts]
        if select_context:
            context = questionary.select(
                "Select context to work with",
                choices=context_names,
                style=PROMPT_STYLE,
                pointer=POINTER,
                qmark=QMARK,
            ).ask()
            if context is None:
                console.warning("Context selection cancelled.")
                raise click.Abort()
        elif context is not None:
            if context not in context_names:
                raise ConfigError(f"Context '{context}' not found in kubeconfig")
        else:
            context = str(current_context["name"])

        ic(context)
        console.action(f"Working with {console.highlight(context)} cluster")
        return context

    @staticmethod
    def _load_incluster_config() -> str:
        try:
            config.load_incluster_config()
        except ConfigException as e:
            raise ClusterConnectionError(f"Unable to load in-cluster configuration: {e}") from e
        console.action(f"Working with {console.highlight(IN_CLUSTER_CONTEXT)} service account")
        return IN_CLUSTER_CONTEXT

    @staticmethod
    def list_secrets(namespace: str) -> list[SecretRecord]:
        """Get all secrets in a namespace.

        Args:
            namespace: The namespace to list.

        Returns:
            The secrets, in the order returned by the API.

        Raises:
            ClusterConnectionError: If the API call fails.
            DataContractError: If a secret carries malformed data.

        """
        with _api_call(f"list secrets in namespace '{namespace}'"):
            items = client.CoreV1Api().list_namespaced_secret(namespace).items
        ic(namespace, len(items))

        return [secret_from_api(secret) for secret in items]

    @staticmethod
    def list_namespaces() -> list[str]:
        """Get all namespaces in the cluster.

        Returns:
            List of namespace names.

        Raises:
            ClusterConnectionError: If the API call fails.
            DataContractError: If a namespace has no name.

        """
        with _api_call("list namespaces"):
            items = client.CoreV1Api().list_namespace().items
        ns_list = [namespace_name_from_api(ns) for ns in items]
        ic(ns_list)

        return ns_list

    def __repr__(self) -> str:
        """Return a detailed string representation for debugging."""
        return f"Cluster(context={self.context!r})"
