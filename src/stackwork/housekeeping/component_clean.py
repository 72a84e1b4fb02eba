"""Terraform clean use case built on the housekeeping primitives."""

from __future__ import annotations

import logging
from pathlib import Path

from stackwork.component_layout import (
    ComponentTool,
    ConfigAndStacksInfo,
    terraform_component_working_dir,
    terraform_planfile_name,
    terraform_varfile_name,
    tool_base_path,
)
from stackwork.configuration.runtime_settings import CliConfiguration

from .artifact_cleanup import delete_files_and_folders_recursive
from .folder_search import find_folders_with_prefix

logger = logging.getLogger(__name__)

TERRAFORM_GENERATED_ITEMS: tuple[str, ...] = (
    ".terraform",
    ".terraform.lock.hcl",
    "terraform.tfstate.d",
    "backend.tf.json",
)


def clean_terraform_component(cli_config: CliConfiguration, info: ConfigAndStacksInfo) -> None:
    """Remove generated files and the stack's varfile/planfile from one component."""
    working_dir = terraform_component_working_dir(cli_config, info)
    items = (
        *TERRAFORM_GENERATED_ITEMS,
        terraform_varfile_name(info),
        terraform_planfile_name(info),
    )
    logger.info("Cleaning component %s in %s", info.component, working_dir)
    delete_files_and_folders_recursive(working_dir, items)


def clean_terraform_components(cli_config: CliConfiguration, prefix: str = "") -> list[str]:
    """Remove generated files from every terraform component folder matching ``prefix``.

    Folders that are themselves generated state (``.terraform`` and the like)
    are not treated as components.

    Returns:
      The component folders that were cleaned, relative to the terraform base path.
    """
    components_root = tool_base_path(cli_config, ComponentTool.TERRAFORM)
    folders = [
        folder
        for folder in find_folders_with_prefix(components_root, prefix)
        if not _is_generated_folder(folder)
    ]
    for folder in folders:
        delete_files_and_folders_recursive(components_root / folder, TERRAFORM_GENERATED_ITEMS)
    return folders


def _is_generated_folder(folder: str) -> bool:
    # .terraform, terraform.tfstate.d and other tool state found one level down.
    return any(
        part.startswith(".") or part in TERRAFORM_GENERATED_ITEMS for part in Path(folder).parts
    )
