"""Ksops generator config parsing.

This module decodes the generator config kustomize hands to the plugin and
checks that it really is a ksops generator.
"""

import yaml
from icecream import ic

from ksops_dry_run.exceptions import ConfigIdentityError, ConfigParseError, describe_yaml_error
from ksops_dry_run.models import GeneratorConfig

GENERATOR_API_VERSION = "viaduct.ai/v1"
GENERATOR_KIND = "ksops"


def parse_generator_config(body: str) -> GeneratorConfig:
    """Parse a ksops generator config.

    Args:
        body: Literal YAML containing a single generator config document.

    Returns:
        The decoded GeneratorConfig.

    Raises:
        ConfigParseError: If the YAML is malformed or has the wrong shape.
        ConfigIdentityError: If the apiVersion or kind is not that of a ksops
            generator.

    """
    try:
        config = GeneratorConfig.from_dict(yaml.safe_load(body))
    except yaml.YAMLError as err:
        raise ConfigParseError(f"ksops generator config contains malformed YAML: {describe_yaml_error(err)}") from err
    except ValueError as err:
        raise ConfigParseError(f"ksops generator config is invalid: {err}") from err

    if config.identity.api_version != GENERATOR_API_VERSION:
        raise ConfigIdentityError("apiVersion", GENERATOR_API_VERSION, config.identity.api_version)
    if config.identity.kind != GENERATOR_KIND:
        raise ConfigIdentityError("kind", GENERATOR_KIND, config.identity.kind)

    ic(config)
    return config
