"""Stack context domain exports."""

from .stack_info_resolver import (
    FOLDER_PREFIX_DELIMITER,
    StackContextError,
    resolve_component_stack_info,
)

__all__ = ["FOLDER_PREFIX_DELIMITER", "StackContextError", "resolve_component_stack_info"]
