"""ksops-dry-run: placeholder secrets for kustomize builds.

This package provides a drop-in replacement for the ksops kustomize plugin.
Without KSOPS_DRY_RUN set it executes the original ksops binary; with it set,
it renders every encrypted secret with placeholder values instead of
decrypting it.

Example usage:
    from ksops_dry_run import PluginEnvironment, render

    environment = PluginEnvironment.from_environ(os.environ)
    render(environment, sys.stdout)
"""

__version__ = "0.1.0"

from ksops_dry_run.cli import cli
from ksops_dry_run.dry_run import render
from ksops_dry_run.environment import PluginEnvironment
from ksops_dry_run.exceptions import (
    ConfigIdentityError,
    ConfigParseError,
    DelegationError,
    DocumentParseError,
    EncodeError,
    KsopsDryRunError,
    MissingConfigError,
    SecretFileError,
    SecretIdentityError,
)
from ksops_dry_run.generator import parse_generator_config
from ksops_dry_run.models import GeneratorConfig, ResourceIdentity, ResourceMetadata, SecretResource
from ksops_dry_run.secrets import SecretStreamEncoder, parse_encrypted_secrets, redact_secret

__all__ = [
    # Version
    "__version__",
    # Main CLI
    "cli",
    # Functions
    "parse_encrypted_secrets",
    "parse_generator_config",
    "redact_secret",
    "render",
    # Classes
    "GeneratorConfig",
    "PluginEnvironment",
    "ResourceIdentity",
    "ResourceMetadata",
    "SecretResource",
    "SecretStreamEncoder",
    # Exceptions
    "KsopsDryRunError",
    "ConfigIdentityError",
    "ConfigParseError",
    "DelegationError",
    "DocumentParseError",
    "EncodeError",
    "MissingConfigError",
    "SecretFileError",
    "SecretIdentityError",
]
