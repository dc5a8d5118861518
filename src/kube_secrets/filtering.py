"""Secret selection rules.

Decides which fetched secrets are displayed, based on the secret type
and an optional substring query on the secret name.
"""

from icecream import ic

from kube_secrets.exceptions import DataContractError
from kube_secrets.models import OPAQUE_TYPE, Config, SecretRecord


def should_display(config: Config, secret: SecretRecord) -> bool:
    """Check whether a secret should be displayed.

    Non-Opaque secrets are rejected unless show_all is set, whatever the
    query says. Secrets passing the type check are then matched against
    the query as a plain, case-sensitive substring of the name.

    Args:
        config: The run parameters.
        secret: The secret to check.

    Returns:
        True if the secret should be displayed.

    Raises:
        DataContractError: If the secret has no name or no type.

    """
    if secret.type is None:
        raise DataContractError(f"Secret '{secret.name}' has no type")
    if secret.name is None:
        raise DataContractError("Secret has no name")

    if not config.show_all and secret.type != OPAQUE_TYPE:
        ic(secret.name, secret.type)
        return False

    if not config.query:
        return True

    return config.query in secret.name
