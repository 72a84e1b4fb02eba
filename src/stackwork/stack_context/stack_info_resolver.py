"""Resolution of a component argument and stack name into layout coordinates."""

from __future__ import annotations

import os
import re

from stackwork.component_layout.layout_models import ConfigAndStacksInfo

FOLDER_PREFIX_DELIMITER = "-"

_SEPARATORS = re.compile(r"[/\\]" if os.sep == "\\" else r"/")


class StackContextError(Exception):
    """Raised when a component argument or stack cannot be resolved."""


def resolve_component_stack_info(
    component_argument: str,
    stack: str,
    *,
    base_component: str | None = None,
) -> ConfigAndStacksInfo:
    """Build the layout coordinates for ``component_argument`` deployed in ``stack``.

    ``networking/aws/vpc`` resolves to folder prefix ``networking/aws``, replaced
    prefix ``networking-aws`` and component ``vpc``. ``base_component`` names the
    component directory actually used when the component inherits from another.
    The stack name is used as the artifact context prefix.
    """
    parts = [part for part in _SEPARATORS.split(component_argument.strip()) if part]
    if not parts:
        raise StackContextError("Component argument must not be empty.")
    stripped_stack = stack.strip()
    if not stripped_stack:
        raise StackContextError("Stack must not be empty.")
    if _SEPARATORS.search(stripped_stack):
        raise StackContextError(f"Stack must not contain path separators: {stripped_stack}")

    *folder_parts, component = parts
    final_component = base_component.strip() if base_component else component
    if not final_component:
        raise StackContextError("Base component must not be empty.")
    return ConfigAndStacksInfo(
        component=component,
        final_component=final_component,
        context_prefix=stripped_stack,
        component_folder_prefix="/".join(folder_parts),
        component_folder_prefix_replaced=FOLDER_PREFIX_DELIMITER.join(folder_parts),
    )
