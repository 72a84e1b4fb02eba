"""Component layout domain exports."""

from .artifact_naming import (
    HELMFILE_VARFILE_SUFFIX,
    TERRAFORM_PLANFILE_SUFFIX,
    TERRAFORM_VARFILE_SUFFIX,
    helmfile_varfile_name,
    terraform_planfile_name,
    terraform_varfile_name,
)
from .layout_models import ComponentTool, ConfigAndStacksInfo
from .path_joining import join_below
from .working_dirs import (
    component_working_dir,
    helmfile_component_working_dir,
    helmfile_varfile_path,
    terraform_component_working_dir,
    terraform_planfile_path,
    terraform_varfile_path,
    tool_base_path,
)

__all__ = [
    "ComponentTool",
    "ConfigAndStacksInfo",
    "HELMFILE_VARFILE_SUFFIX",
    "TERRAFORM_PLANFILE_SUFFIX",
    "TERRAFORM_VARFILE_SUFFIX",
    "helmfile_varfile_name",
    "terraform_planfile_name",
    "terraform_varfile_name",
    "component_working_dir",
    "helmfile_component_working_dir",
    "helmfile_varfile_path",
    "terraform_component_working_dir",
    "terraform_planfile_path",
    "terraform_varfile_path",
    "tool_base_path",
    "join_below",
]
