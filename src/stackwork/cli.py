"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from stackwork.component_layout import (
    ComponentTool,
    ConfigAndStacksInfo,
    component_working_dir,
    helmfile_varfile_path,
    terraform_planfile_path,
    terraform_varfile_path,
    tool_base_path,
)
from stackwork.configuration import (
    DEFAULT_CONFIG_FILENAME,
    CliConfiguration,
    ConfigurationError,
    load_cli_configuration,
    write_placeholder_configuration,
)
from stackwork.housekeeping import (
    HousekeepingError,
    clean_terraform_component,
    clean_terraform_components,
    find_folders_with_prefix,
)
from stackwork.stack_context import StackContextError, resolve_component_stack_info
from stackwork.tool_dispatch import (
    ToolDispatchError,
    ToolInvocation,
    build_helmfile_command,
    build_terraform_command,
    run_tool_invocation,
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_config_option = click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help=f"Project configuration file (default: ./{DEFAULT_CONFIG_FILENAME} if present)",
)
_stack_option = click.option(
    "-s",
    "--stack",
    "stack",
    required=True,
    help="Stack name, used as the artifact context prefix",
)
_base_component_option = click.option(
    "--base-component",
    "base_component",
    required=False,
    help="Component directory to use when the component inherits from another",
)
_dry_run_option = click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Print the tool command instead of running it.",
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="stackwork")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="INFO",
    show_default=True,
    help="Logging level for housekeeping and dispatch messages.",
)
def cli(log_level: str) -> None:
    """Run terraform and helmfile components against per-stack working directories."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML project configuration to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML project configuration with defaults and guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="describe-paths")
@click.argument("component")
@_stack_option
@click.option(
    "--tool",
    type=click.Choice([tool.value for tool in ComponentTool]),
    default=ComponentTool.TERRAFORM.value,
    show_default=True,
)
@_base_component_option
@_config_option
def describe_paths(
    component: str,
    stack: str,
    tool: str,
    base_component: str | None,
    config_path: str | None,
) -> None:
    """Print the working directory and artifact paths of a component in a stack."""
    cli_config = _load_configuration(config_path)
    info = _resolve_info(component, stack, base_component)
    component_tool = ComponentTool(tool)
    click.echo(f"working_dir: {component_working_dir(cli_config, info, component_tool)}")
    if component_tool is ComponentTool.HELMFILE:
        click.echo(f"varfile: {helmfile_varfile_path(cli_config, info)}")
    else:
        click.echo(f"varfile: {terraform_varfile_path(cli_config, info)}")
        click.echo(f"planfile: {terraform_planfile_path(cli_config, info)}")


@cli.command(name="list-components")
@click.option(
    "--tool",
    type=click.Choice([tool.value for tool in ComponentTool]),
    default=ComponentTool.TERRAFORM.value,
    show_default=True,
)
@click.option("--prefix", default="", help="Only list folders whose name starts with this prefix")
@_config_option
def list_components(tool: str, prefix: str, config_path: str | None) -> None:
    """List component folders up to two levels below the tool's base path."""
    cli_config = _load_configuration(config_path)
    try:
        folders = find_folders_with_prefix(tool_base_path(cli_config, ComponentTool(tool)), prefix)
    except HousekeepingError as exc:
        raise CliError(str(exc)) from exc
    for folder in folders:
        click.echo(folder)


@cli.command(name="clean")
@click.argument("component", required=False)
@click.option("-s", "--stack", "stack", required=False, help="Stack name of the component")
@click.option("--prefix", default="", help="Only clean component folders with this prefix")
@_base_component_option
@_config_option
def clean(
    component: str | None,
    stack: str | None,
    prefix: str,
    base_component: str | None,
    config_path: str | None,
) -> None:
    """Delete generated terraform files from one component or from all components."""
    if component is None and (stack or base_component):
        raise CliError("--stack and --base-component require a component to clean.")
    cli_config = _load_configuration(config_path)
    try:
        if component is None:
            for folder in clean_terraform_components(cli_config, prefix):
                click.echo(folder)
            return
        if not stack:
            raise CliError("Cleaning a single component requires --stack.")
        clean_terraform_component(cli_config, _resolve_info(component, stack, base_component))
    except HousekeepingError as exc:
        raise CliError(str(exc)) from exc


@cli.command(name="terraform", context_settings={"ignore_unknown_options": True})
@click.argument("subcommand")
@click.argument("component")
@_stack_option
@click.option(
    "--from-plan",
    is_flag=True,
    default=False,
    help="Apply the stack's planfile instead of planning again.",
)
@_base_component_option
@_dry_run_option
@_config_option
@click.argument("extra_args", nargs=-1, type=click.UNPROCESSED)
def terraform(
    subcommand: str,
    component: str,
    stack: str,
    from_plan: bool,
    base_component: str | None,
    dry_run: bool,
    config_path: str | None,
    extra_args: tuple[str, ...],
) -> None:
    """Run a terraform subcommand for a component in a stack."""
    cli_config = _load_configuration(config_path)
    info = _resolve_info(component, stack, base_component)
    invocation = build_terraform_command(
        subcommand, info, cli_config, from_plan=from_plan, extra_args=extra_args
    )
    _dispatch(invocation, dry_run)


@cli.command(name="helmfile", context_settings={"ignore_unknown_options": True})
@click.argument("subcommand")
@click.argument("component")
@_stack_option
@_base_component_option
@_dry_run_option
@_config_option
@click.argument("extra_args", nargs=-1, type=click.UNPROCESSED)
def helmfile(
    subcommand: str,
    component: str,
    stack: str,
    base_component: str | None,
    dry_run: bool,
    config_path: str | None,
    extra_args: tuple[str, ...],
) -> None:
    """Run a helmfile subcommand for a component in a stack."""
    cli_config = _load_configuration(config_path)
    info = _resolve_info(component, stack, base_component)
    invocation = build_helmfile_command(subcommand, info, cli_config, extra_args=extra_args)
    _dispatch(invocation, dry_run)


def _load_configuration(config_path: str | None) -> CliConfiguration:
    if config_path is None:
        if not Path(DEFAULT_CONFIG_FILENAME).exists():
            return CliConfiguration()
        config_path = DEFAULT_CONFIG_FILENAME
    try:
        return load_cli_configuration(config_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc


def _resolve_info(
    component: str, stack: str, base_component: str | None
) -> ConfigAndStacksInfo:
    try:
        return resolve_component_stack_info(component, stack, base_component=base_component)
    except StackContextError as exc:
        raise CliError(str(exc)) from exc


def _dispatch(invocation: ToolInvocation, dry_run: bool) -> None:
    if dry_run:
        click.echo(invocation.render())
        return
    try:
        run_tool_invocation(invocation)
    except ToolDispatchError as exc:
        raise CliError(str(exc)) from exc


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
