"""Secrets subpackage.

This package contains modules for parsing encrypted secret files, redacting
their values and encoding the stubbed secrets back to YAML.
"""

from ksops_dry_run.secrets.encoding import SecretStreamEncoder
from ksops_dry_run.secrets.parsing import parse_encrypted_secrets
from ksops_dry_run.secrets.redaction import DRY_RUN_LABEL, PLACEHOLDER, redact_secret, redact_value

__all__ = [
    # encoding
    "SecretStreamEncoder",
    # parsing
    "parse_encrypted_secrets",
    # redaction
    "DRY_RUN_LABEL",
    "PLACEHOLDER",
    "redact_secret",
    "redact_value",
]
