"""Custom exceptions for ksops-dry-run.

This module defines the exception hierarchy used throughout the application
so that every failure can be reported once, as a single line, by the CLI.
"""

import yaml


def describe_yaml_error(err: yaml.YAMLError) -> str:
    """Summarize a PyYAML error on a single line.

    PyYAML renders marked errors over several lines, including a snippet of
    the offending input. Only the problem and its position are kept.

    Args:
        err: The error raised by the YAML loader.

    Returns:
        A one-line description of the error.

    """
    if isinstance(err, yaml.MarkedYAMLError) and err.problem_mark is not None:
        problem = err.problem or err.context or "invalid YAML"
        return f"{problem} at line {err.problem_mark.line + 1}, column {err.problem_mark.column + 1}"
    return " ".join(str(err).split())


class KsopsDryRunError(Exception):
    """Base exception for all ksops-dry-run errors.

    All custom exceptions in this package inherit from this class,
    allowing the CLI to catch every expected failure with a single
    except clause.
    """

    pass


class MissingConfigError(KsopsDryRunError):
    """Raised when a required environment variable is absent or empty.

    This can occur when:
    - KSOPS_PATH is unset while running in pass-through mode
    - KUSTOMIZE_PLUGIN_CONFIG_STRING or KUSTOMIZE_PLUGIN_CONFIG_ROOT is
      unset while running in dry-run mode
    """

    def __init__(self, variable: str) -> None:
        super().__init__(f"required environment variable {variable} was not found")
        self.variable = variable


class ConfigParseError(KsopsDryRunError):
    """Raised when the ksops generator config cannot be decoded.

    This can occur when:
    - The config string is not valid YAML
    - The document is not a mapping
    - A field has the wrong type (e.g. files is not a list of strings)
    """

    pass


class IdentityError(KsopsDryRunError):
    """Raised when a document has an unexpected apiVersion or kind."""

    def __init__(self, subject: str, field: str, expected: str, actual: str) -> None:
        super().__init__(f"expected {subject} {field} {expected!r} but got {actual!r}")
        self.field = field
        self.expected = expected
        self.actual = actual


class ConfigIdentityError(IdentityError):
    """Raised when the generator config is not a viaduct.ai/v1 ksops resource.

    This should never happen in practice, as it is the result of a ksops
    generator misconfiguration.
    """

    def __init__(self, field: str, expected: str, actual: str) -> None:
        super().__init__("ksops generator config", field, expected, actual)


class SecretIdentityError(IdentityError):
    """Raised when an encrypted secret document is not a v1 Secret."""

    def __init__(self, filename: str, field: str, expected: str, actual: str) -> None:
        super().__init__(f"ksops encrypted secret in '{filename}'", field, expected, actual)
        self.filename = filename


class SecretFileError(KsopsDryRunError):
    """Raised when an encrypted secret file cannot be opened or read.

    This can occur when:
    - The file does not exist
    - The file is not readable by the current user
    - The path points at a directory
    """

    pass


class DocumentParseError(KsopsDryRunError):
    """Raised when a document in an encrypted secret file cannot be decoded.

    This can occur when:
    - The stream contains malformed YAML
    - A document is not a mapping
    - A field has the wrong type (e.g. stringData is a list)
    """

    pass


class EncodeError(KsopsDryRunError):
    """Raised when a stubbed secret cannot be written to the output stream."""

    pass


class DelegationError(KsopsDryRunError):
    """Raised when the original ksops plugin cannot be executed.

    This can occur when:
    - KSOPS_PATH does not point at an existing file
    - The file is not executable
    """

    pass
