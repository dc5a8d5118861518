"""Namespace diagnostics for empty listings."""

from collections.abc import Iterable

from icecream import ic

from kube_secrets.models import NamespaceDiagnosis


def diagnose_namespace(namespace: str, namespaces: Iterable[str]) -> NamespaceDiagnosis:
    """Tell an empty namespace apart from a missing one.

    The iterable is consumed lazily and scanning stops at the first exact
    match. Errors raised while iterating propagate to the caller.

    Args:
        namespace: The namespace that produced no output.
        namespaces: Names of all namespaces in the cluster.

    Returns:
        The diagnosis for the namespace.

    """
    for name in namespaces:
        if name == namespace:
            ic(namespace, "found")
            return NamespaceDiagnosis(namespace=namespace, exists=True)

    ic(namespace, "missing")
    return NamespaceDiagnosis(namespace=namespace, exists=False)
