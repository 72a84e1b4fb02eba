"""Housekeeping domain exports."""

from .artifact_cleanup import delete_files_and_folders_recursive
from .component_clean import (
    TERRAFORM_GENERATED_ITEMS,
    clean_terraform_component,
    clean_terraform_components,
)
from .folder_search import find_folders_with_prefix
from .housekeeping_errors import HousekeepingError

__all__ = [
    "HousekeepingError",
    "TERRAFORM_GENERATED_ITEMS",
    "clean_terraform_component",
    "clean_terraform_components",
    "delete_files_and_folders_recursive",
    "find_folders_with_prefix",
]
