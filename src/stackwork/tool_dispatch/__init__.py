"""Tool dispatch domain exports."""

from .command_builder import build_helmfile_command, build_terraform_command
from .dispatch_contracts import ToolInvocation
from .tool_runner import ToolDispatchError, run_tool_invocation

__all__ = [
    "ToolInvocation",
    "ToolDispatchError",
    "build_helmfile_command",
    "build_terraform_command",
    "run_tool_invocation",
]
