"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_cli_configuration
from .runtime_settings import (
    CliConfiguration,
    ComponentsSettings,
    HelmfileSettings,
    TerraformSettings,
)

__all__ = [
    "CliConfiguration",
    "ComponentsSettings",
    "HelmfileSettings",
    "TerraformSettings",
    "ConfigurationError",
    "load_cli_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
