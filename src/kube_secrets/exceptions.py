"""Custom exceptions for kube-secrets.

This module defines the exception hierarchy used throughout the application
to provide meaningful error messages and proper error handling.
"""


class KubeSecretsError(Exception):
    """Base exception for all kube-secrets errors.

    All custom exceptions in this package inherit from this class,
    allowing callers to catch all kube-secrets errors with a single
    except clause if desired.
    """

    pass


class ConfigError(KubeSecretsError):
    """Raised when the run parameters are invalid.

    This can occur when:
    - The namespace argument is missing or empty
    - The requested kubeconfig context does not exist
    """

    pass


class ClusterConnectionError(KubeSecretsError):
    """Raised when a call to the Kubernetes API fails.

    This can occur when:
    - The kubeconfig is invalid or missing
    - The cluster is unreachable
    - Authentication or authorization fails
    - The API server rejects the request
    """

    pass


class DataContractError(KubeSecretsError):
    """Raised when a fetched Secret does not look like a Secret.

    This typically means:
    - The secret has no metadata.name
    - The secret has no type
    - A data value is not valid base64
    """

    pass
