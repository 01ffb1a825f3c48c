"""Encrypted secret file parsing.

This module reads a ksops encrypted secret file, which may hold any number of
YAML documents, and turns every document into a redacted SecretResource.
"""

import yaml
from icecream import ic

from ksops_dry_run.exceptions import (
    DocumentParseError,
    SecretFileError,
    SecretIdentityError,
    describe_yaml_error,
)
from ksops_dry_run.models import SecretResource
from ksops_dry_run.secrets.redaction import redact_secret

SECRET_API_VERSION = "v1"
SECRET_KIND = "Secret"


def _validate_identity(filename: str, secret: SecretResource) -> None:
    if secret.identity.api_version != SECRET_API_VERSION:
        raise SecretIdentityError(filename, "apiVersion", SECRET_API_VERSION, secret.identity.api_version)
    if secret.identity.kind != SECRET_KIND:
        raise SecretIdentityError(filename, "kind", SECRET_KIND, secret.identity.kind)


def parse_encrypted_secrets(filename: str) -> list[SecretResource]:
    """Parse an encrypted secret file into redacted secrets.

    Documents are decoded one at a time until the stream is exhausted. Empty
    documents are skipped; a file with no documents yields an empty list.

    Args:
        filename: Path to the encrypted secret file.

    Returns:
        One redacted secret per document, in stream order.

    Raises:
        SecretFileError: If the file cannot be opened or read.
        DocumentParseError: If the file is not UTF-8, or a document is malformed
            YAML or has the wrong shape.
        SecretIdentityError: If a document is not a v1/Secret.

    """
    secrets: list[SecretResource] = []
    try:
        with open(filename, encoding="utf-8") as stream:
            for index, document in enumerate(yaml.safe_load_all(stream)):
                if document is None:
                    continue
                try:
                    secret = SecretResource.from_dict(document)
                except ValueError as err:
                    raise DocumentParseError(f"Document {index} in '{filename}' is invalid: {err}") from err
                _validate_identity(filename, secret)
                secrets.append(redact_secret(secret))
    except UnicodeDecodeError as err:
        raise DocumentParseError(
            f"Encrypted secret file '{filename}' is not valid UTF-8: {err.reason} at byte {err.start}"
        ) from err
    except OSError as err:
        raise SecretFileError(f"Failed to read encrypted secret file '{filename}': {err}") from err
    except yaml.YAMLError as err:
        raise DocumentParseError(
            f"Encrypted secret file '{filename}' contains malformed YAML: {describe_yaml_error(err)}"
        ) from err

    ic(filename, len(secrets))
    return secrets
