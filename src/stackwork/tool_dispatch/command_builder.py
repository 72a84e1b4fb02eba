"""Command construction for terraform and helmfile components."""

from __future__ import annotations

from collections.abc import Sequence

from stackwork.component_layout import (
    ConfigAndStacksInfo,
    helmfile_component_working_dir,
    helmfile_varfile_name,
    terraform_component_working_dir,
    terraform_planfile_name,
    terraform_varfile_name,
)
from stackwork.configuration.runtime_settings import CliConfiguration

from .dispatch_contracts import ToolInvocation

TERRAFORM_BINARY = "terraform"
HELMFILE_BINARY = "helmfile"

# Subcommands that read stack variables through -var-file.
_VARFILE_SUBCOMMANDS = frozenset({"plan", "apply", "destroy", "import", "refresh"})


def build_terraform_command(
    subcommand: str,
    info: ConfigAndStacksInfo,
    cli_config: CliConfiguration,
    *,
    from_plan: bool = False,
    extra_args: Sequence[str] = (),
) -> ToolInvocation:
    """Build the terraform invocation for a component in a stack.

    Artifact arguments are passed by name since terraform runs inside the
    component working directory.
    """
    command: list[str] = [TERRAFORM_BINARY, subcommand]
    if subcommand == "plan":
        command += ["-var-file", terraform_varfile_name(info)]
        command += ["-out", terraform_planfile_name(info)]
    elif subcommand == "apply" and from_plan:
        command.append(terraform_planfile_name(info))
    elif subcommand in _VARFILE_SUBCOMMANDS:
        command += ["-var-file", terraform_varfile_name(info)]
    command += list(extra_args)
    return ToolInvocation(
        command=tuple(command),
        working_dir=terraform_component_working_dir(cli_config, info),
    )


def build_helmfile_command(
    subcommand: str,
    info: ConfigAndStacksInfo,
    cli_config: CliConfiguration,
    *,
    extra_args: Sequence[str] = (),
) -> ToolInvocation:
    """Build the helmfile invocation for a component in a stack."""
    command = (
        HELMFILE_BINARY,
        "--state-values-file",
        helmfile_varfile_name(info),
        subcommand,
        *extra_args,
    )
    return ToolInvocation(
        command=command,
        working_dir=helmfile_component_working_dir(cli_config, info),
    )
