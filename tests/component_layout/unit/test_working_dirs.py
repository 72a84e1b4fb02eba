"""Working directory and artifact path tests."""

from __future__ import annotations

from pathlib import Path

from stackwork.component_layout import (
    ComponentTool,
    ConfigAndStacksInfo,
    component_working_dir,
    helmfile_component_working_dir,
    helmfile_varfile_name,
    helmfile_varfile_path,
    terraform_component_working_dir,
    terraform_planfile_name,
    terraform_planfile_path,
    terraform_varfile_name,
    terraform_varfile_path,
    tool_base_path,
)
from stackwork.configuration import (
    CliConfiguration,
    ComponentsSettings,
    HelmfileSettings,
    TerraformSettings,
)


def _config(base_path: str = "/repo") -> CliConfiguration:
    return CliConfiguration(
        base_path=base_path,
        components=ComponentsSettings(
            terraform=TerraformSettings(base_path="components/terraform"),
            helmfile=HelmfileSettings(base_path="components/helmfile"),
        ),
    )


def _vpc_info(**overrides: str) -> ConfigAndStacksInfo:
    values = {
        "component": "vpc",
        "final_component": "vpc",
        "context_prefix": "tenant1-ue1-prod",
    }
    values.update(overrides)
    return ConfigAndStacksInfo(**values)


def test_flat_terraform_component_paths() -> None:
    cli_config = _config()
    info = _vpc_info()

    assert terraform_component_working_dir(cli_config, info) == Path(
        "/repo/components/terraform/vpc"
    )
    assert terraform_varfile_path(cli_config, info) == Path(
        "/repo/components/terraform/vpc/tenant1-ue1-prod-vpc.terraform.tfvars.json"
    )
    assert terraform_planfile_path(cli_config, info) == Path(
        "/repo/components/terraform/vpc/tenant1-ue1-prod-vpc.planfile"
    )


def test_grouped_terraform_component_keeps_nested_directory() -> None:
    cli_config = _config()
    info = _vpc_info(
        component_folder_prefix="networking/aws",
        component_folder_prefix_replaced="networking-aws",
    )

    assert terraform_component_working_dir(cli_config, info) == Path(
        "/repo/components/terraform/networking/aws/vpc"
    )
    assert terraform_varfile_path(cli_config, info).name == (
        "tenant1-ue1-prod-networking-aws-vpc.terraform.tfvars.json"
    )


def test_helmfile_component_paths() -> None:
    cli_config = _config()
    info = _vpc_info(component="nginx", final_component="nginx")

    assert helmfile_component_working_dir(cli_config, info) == Path(
        "/repo/components/helmfile/nginx"
    )
    assert helmfile_varfile_path(cli_config, info) == Path(
        "/repo/components/helmfile/nginx/tenant1-ue1-prod-nginx.helmfile.vars.yaml"
    )


def test_working_dir_uses_final_component() -> None:
    info = _vpc_info(component="vpc-blue", final_component="vpc")

    assert terraform_component_working_dir(_config(), info) == Path(
        "/repo/components/terraform/vpc"
    )


def test_artifact_paths_compose_working_dir_and_name() -> None:
    cli_config = _config()
    info = _vpc_info(component_folder_prefix="core", component_folder_prefix_replaced="core")
    working_dir = terraform_component_working_dir(cli_config, info)

    assert terraform_varfile_path(cli_config, info) == working_dir / terraform_varfile_name(info)
    assert terraform_planfile_path(cli_config, info) == working_dir / terraform_planfile_name(info)
    assert helmfile_varfile_path(cli_config, info) == (
        helmfile_component_working_dir(cli_config, info) / helmfile_varfile_name(info)
    )


def test_stacks_share_working_dir_but_not_artifacts() -> None:
    cli_config = _config()
    prod = _vpc_info(context_prefix="tenant1-ue1-prod")
    dev = _vpc_info(context_prefix="tenant1-ue1-dev")

    assert terraform_component_working_dir(cli_config, prod) == terraform_component_working_dir(
        cli_config, dev
    )
    assert terraform_planfile_path(cli_config, prod) != terraform_planfile_path(cli_config, dev)


def test_relative_base_path_yields_relative_paths() -> None:
    path = terraform_varfile_path(_config(base_path="."), _vpc_info())

    assert not path.is_absolute()
    assert path == Path("components/terraform/vpc/tenant1-ue1-prod-vpc.terraform.tfvars.json")


def test_component_working_dir_dispatches_on_tool() -> None:
    cli_config = _config()
    info = _vpc_info()

    assert component_working_dir(cli_config, info, ComponentTool.TERRAFORM) == Path(
        "/repo/components/terraform/vpc"
    )
    assert component_working_dir(cli_config, info, ComponentTool.HELMFILE) == Path(
        "/repo/components/helmfile/vpc"
    )
    assert tool_base_path(cli_config, ComponentTool.HELMFILE) == Path("/repo/components/helmfile")


def test_absolute_tool_base_path_is_appended_below_base_path() -> None:
    cli_config = CliConfiguration(
        base_path="/repo",
        components=ComponentsSettings(
            terraform=TerraformSettings(base_path="/components/terraform"),
            helmfile=HelmfileSettings(base_path="/components/helmfile"),
        ),
    )

    assert tool_base_path(cli_config, ComponentTool.TERRAFORM) == Path("/repo/components/terraform")
    assert terraform_component_working_dir(cli_config, _vpc_info()) == Path(
        "/repo/components/terraform/vpc"
    )
    assert helmfile_component_working_dir(cli_config, _vpc_info()) == Path(
        "/repo/components/helmfile/vpc"
    )


def test_absolute_folder_prefix_is_appended_below_tool_base_path() -> None:
    info = _vpc_info(
        component_folder_prefix="/networking",
        component_folder_prefix_replaced="networking",
    )

    assert terraform_component_working_dir(_config(), info) == Path(
        "/repo/components/terraform/networking/vpc"
    )
    assert terraform_planfile_path(_config(), info) == Path(
        "/repo/components/terraform/networking/vpc/tenant1-ue1-prod-networking-vpc.planfile"
    )
