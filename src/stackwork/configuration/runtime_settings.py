"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_BASE_PATH = "."
DEFAULT_TERRAFORM_BASE_PATH = "components/terraform"
DEFAULT_HELMFILE_BASE_PATH = "components/helmfile"


@dataclass(frozen=True)
class TerraformSettings:
    """Location of terraform root modules below the project base path."""

    base_path: str = DEFAULT_TERRAFORM_BASE_PATH


@dataclass(frozen=True)
class HelmfileSettings:
    """Location of helmfile charts below the project base path."""

    base_path: str = DEFAULT_HELMFILE_BASE_PATH


@dataclass(frozen=True)
class ComponentsSettings:
    terraform: TerraformSettings = field(default_factory=TerraformSettings)
    helmfile: HelmfileSettings = field(default_factory=HelmfileSettings)


@dataclass(frozen=True)
class CliConfiguration:
    """Top-level configuration aggregate.

    ``base_path`` may be absolute or relative; relative values are resolved
    against the process working directory when paths are used, never here.
    """

    base_path: str = DEFAULT_BASE_PATH
    components: ComponentsSettings = field(default_factory=ComponentsSettings)
