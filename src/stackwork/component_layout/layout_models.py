"""Component layout domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ComponentTool(str, Enum):
    """Tool family a component belongs to."""

    TERRAFORM = "terraform"
    HELMFILE = "helmfile"


@dataclass(frozen=True)
class ConfigAndStacksInfo:
    """Resolved component/stack coordinates consumed by the layout rules.

    The producer of this record owns ``component_folder_prefix_replaced``: it
    must hold ``component_folder_prefix`` with every path separator substituted,
    so that artifact names built from it stay a single path segment. The
    layout rules neither perform nor validate that substitution.
    """

    component: str
    final_component: str
    context_prefix: str
    component_folder_prefix: str = ""
    component_folder_prefix_replaced: str = ""
