"""Artifact file naming rules.

Every name leads with the stack context prefix so that a directory listing
groups artifacts by stack. Inputs are not validated: an empty context prefix
or component yields a degenerate name such as ``-vpc.planfile``.
"""

from __future__ import annotations

from .layout_models import ConfigAndStacksInfo

TERRAFORM_VARFILE_SUFFIX = ".terraform.tfvars.json"
TERRAFORM_PLANFILE_SUFFIX = ".planfile"
HELMFILE_VARFILE_SUFFIX = ".helmfile.vars.yaml"


def terraform_varfile_name(info: ConfigAndStacksInfo) -> str:
    """Return the varfile name of a terraform component in a stack."""
    return _artifact_name(info, TERRAFORM_VARFILE_SUFFIX)


def terraform_planfile_name(info: ConfigAndStacksInfo) -> str:
    """Return the planfile name of a terraform component in a stack."""
    return _artifact_name(info, TERRAFORM_PLANFILE_SUFFIX)


def helmfile_varfile_name(info: ConfigAndStacksInfo) -> str:
    """Return the varfile name of a helmfile component in a stack."""
    return _artifact_name(info, HELMFILE_VARFILE_SUFFIX)


def _artifact_name(info: ConfigAndStacksInfo, suffix: str) -> str:
    if len(info.component_folder_prefix_replaced) == 0:
        return f"{info.context_prefix}-{info.component}{suffix}"
    return (
        f"{info.context_prefix}-{info.component_folder_prefix_replaced}-{info.component}{suffix}"
    )
