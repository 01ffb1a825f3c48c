"""Secret value redaction.

This module replaces every sensitive value of a secret with a fixed
placeholder, so that a kustomize build can run without access to the
decryption keys.
"""

from ksops_dry_run.models import SecretResource

PLACEHOLDER = "KSOPS_DRY_RUN_PLACEHOLDER"
DRY_RUN_LABEL = "ksops-dry-run.joshdk.github.com"


def redact_value(value: str) -> str:
    """Return the placeholder for a secret value.

    Empty values are preserved, as they are already visible in the encrypted
    secret and help in understanding the overall configuration.
    """
    return "" if value == "" else PLACEHOLDER


def redact_secret(secret: SecretResource) -> SecretResource:
    """Redact a secret in place.

    The combined set of keys from data and stringData is merged into
    stringData with placeholder values. Keeping everything in stringData makes
    the placeholders obvious to anyone reading the build output, and avoids
    base64 encoding them. stringData is processed before data, so a key
    present in both takes its emptiness from data.

    A marker label is added so that generated resources can be targeted with
    a label selector, e.g. to skip them during a kubectl apply.

    Args:
        secret: The secret to redact.

    Returns:
        The same secret instance, for convenience.

    """
    string_data = {key: redact_value(value) for key, value in secret.string_data.items()}
    for key, value in secret.data.items():
        string_data[key] = redact_value(value)

    secret.string_data = string_data
    secret.data = {}
    secret.metadata.labels[DRY_RUN_LABEL] = "true"
    return secret
