"""Working directory and artifact path composition.

Directories keep the unreplaced, possibly nested ``component_folder_prefix``;
file names use the replaced form. Nothing here touches the filesystem.
"""

from __future__ import annotations

from pathlib import Path

from stackwork.configuration.runtime_settings import CliConfiguration

from .artifact_naming import (
    helmfile_varfile_name,
    terraform_planfile_name,
    terraform_varfile_name,
)
from .layout_models import ComponentTool, ConfigAndStacksInfo
from .path_joining import join_below


def tool_base_path(cli_config: CliConfiguration, tool: ComponentTool) -> Path:
    """Return the directory holding every component of the given tool family."""
    if tool is ComponentTool.HELMFILE:
        return join_below(cli_config.base_path, cli_config.components.helmfile.base_path)
    return join_below(cli_config.base_path, cli_config.components.terraform.base_path)


def component_working_dir(
    cli_config: CliConfiguration, info: ConfigAndStacksInfo, tool: ComponentTool
) -> Path:
    """Return the working directory the tool is invoked from for this component."""
    return join_below(
        tool_base_path(cli_config, tool), info.component_folder_prefix, info.final_component
    )


def terraform_component_working_dir(
    cli_config: CliConfiguration, info: ConfigAndStacksInfo
) -> Path:
    return component_working_dir(cli_config, info, ComponentTool.TERRAFORM)


def helmfile_component_working_dir(
    cli_config: CliConfiguration, info: ConfigAndStacksInfo
) -> Path:
    return component_working_dir(cli_config, info, ComponentTool.HELMFILE)


def terraform_varfile_path(cli_config: CliConfiguration, info: ConfigAndStacksInfo) -> Path:
    return terraform_component_working_dir(cli_config, info) / terraform_varfile_name(info)


def terraform_planfile_path(cli_config: CliConfiguration, info: ConfigAndStacksInfo) -> Path:
    return terraform_component_working_dir(cli_config, info) / terraform_planfile_name(info)


def helmfile_varfile_path(cli_config: CliConfiguration, info: ConfigAndStacksInfo) -> Path:
    return helmfile_component_working_dir(cli_config, info) / helmfile_varfile_name(info)
