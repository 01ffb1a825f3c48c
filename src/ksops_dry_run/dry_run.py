"""Dry-run rendering of a ksops generator.

This module ties the pieces together: it parses the generator config, reads
every encrypted secret file it references and writes stubbed secrets to the
output stream.
"""

from typing import TextIO

from icecream import ic

from ksops_dry_run.environment import PluginEnvironment
from ksops_dry_run.generator import parse_generator_config
from ksops_dry_run.secrets.encoding import SecretStreamEncoder
from ksops_dry_run.secrets.parsing import parse_encrypted_secrets


def render(environment: PluginEnvironment, stream: TextIO) -> int:
    """Write stubbed secrets for every file in the generator config.

    Files are processed in config order, and the secrets of each file in
    document order. Each file is fully parsed before any of its secrets are
    written.

    Args:
        environment: The plugin environment.
        stream: Stream the YAML documents are written to.

    Returns:
        The number of secrets written.

    Raises:
        MissingConfigError: If the config string or root is not set.
        KsopsDryRunError: If any file or document cannot be processed.

    """
    body = environment.require_config_string()
    environment.require_config_root()
    config = parse_generator_config(body)

    count = 0
    with SecretStreamEncoder(stream) as encoder:
        for filename in config.files:
            path = environment.resolve(filename)
            ic(path)
            for secret in parse_encrypted_secrets(path):
                encoder.encode(secret)
                count += 1
    return count
