"""Plugin environment for ksops-dry-run.

Kustomize configures exec plugins exclusively through environment variables.
This module reads them once at startup into an immutable record that is then
passed explicitly to the pass-through and dry-run code paths.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from ksops_dry_run.exceptions import MissingConfigError

DRY_RUN_VAR = "KSOPS_DRY_RUN"
KSOPS_PATH_VAR = "KSOPS_PATH"
CONFIG_STRING_VAR = "KUSTOMIZE_PLUGIN_CONFIG_STRING"
CONFIG_ROOT_VAR = "KUSTOMIZE_PLUGIN_CONFIG_ROOT"
DEBUG_VAR = "KSOPS_DRY_RUN_DEBUG"


@dataclass(frozen=True, slots=True)
class PluginEnvironment:
    """Configuration supplied by kustomize and the user.

    Attributes:
        dry_run: Whether KSOPS_DRY_RUN is present, regardless of its value.
        ksops_path: Path to the original ksops plugin.
        config_string: Literal YAML of the ksops generator config.
        config_root: Directory that contains the generator config.
        debug: Whether debug tracing is enabled.

    """

    dry_run: bool = False
    ksops_path: str = ""
    config_string: str = ""
    config_root: str = ""
    debug: bool = False

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "PluginEnvironment":
        """Read the plugin environment from a mapping of variables.

        Args:
            environ: Environment variables, usually os.environ.

        Returns:
            The populated PluginEnvironment.

        """
        return cls(
            dry_run=DRY_RUN_VAR in environ,
            ksops_path=environ.get(KSOPS_PATH_VAR, ""),
            config_string=environ.get(CONFIG_STRING_VAR, ""),
            config_root=environ.get(CONFIG_ROOT_VAR, ""),
            debug=DEBUG_VAR in environ,
        )

    def require_ksops_path(self) -> str:
        if not self.ksops_path:
            raise MissingConfigError(KSOPS_PATH_VAR)
        return self.ksops_path

    def require_config_string(self) -> str:
        if not self.config_string:
            raise MissingConfigError(CONFIG_STRING_VAR)
        return self.config_string

    def require_config_root(self) -> str:
        if not self.config_root:
            raise MissingConfigError(CONFIG_ROOT_VAR)
        return self.config_root

    def resolve(self, filename: str) -> str:
        """Resolve an encrypted secret filename against the config root.

        Args:
            filename: A file name from the generator config.

        Returns:
            The normalized path. Absolute file names are returned unchanged.

        Raises:
            MissingConfigError: If the config root is not set.

        """
        return os.path.normpath(os.path.join(self.require_config_root(), filename))
