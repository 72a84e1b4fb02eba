"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_BASE_PATH,
    DEFAULT_HELMFILE_BASE_PATH,
    DEFAULT_TERRAFORM_BASE_PATH,
    CliConfiguration,
    ComponentsSettings,
    HelmfileSettings,
    TerraformSettings,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_cli_configuration(config_path: Path | str) -> CliConfiguration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = _string_with_default(parsed.get("base_path"), "base_path", DEFAULT_BASE_PATH)
    components = _parse_components_section(parsed.get("components"))
    return CliConfiguration(base_path=base_path, components=components)


def _parse_components_section(value: Any) -> ComponentsSettings:
    section = _optional_mapping(value, "components")
    terraform = _optional_mapping(section.get("terraform"), "components.terraform")
    helmfile = _optional_mapping(section.get("helmfile"), "components.helmfile")
    return ComponentsSettings(
        terraform=TerraformSettings(
            base_path=_string_with_default(
                terraform.get("base_path"),
                "components.terraform.base_path",
                DEFAULT_TERRAFORM_BASE_PATH,
            )
        ),
        helmfile=HelmfileSettings(
            base_path=_string_with_default(
                helmfile.get("base_path"),
                "components.helmfile.base_path",
                DEFAULT_HELMFILE_BASE_PATH,
            )
        ),
    )


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _string_with_default(value: Any, field_name: str, default: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
