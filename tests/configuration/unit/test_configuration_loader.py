"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from stackwork.configuration.loader import ConfigurationError, load_cli_configuration


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "stackwork.yaml",
        """
base_path: /repo
components:
  terraform:
    base_path: infra/terraform
  helmfile:
    base_path: infra/helmfile
""",
    )

    configuration = load_cli_configuration(config_path)

    assert configuration.base_path == "/repo"
    assert configuration.components.terraform.base_path == "infra/terraform"
    assert configuration.components.helmfile.base_path == "infra/helmfile"


def test_applies_defaults_for_missing_sections(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "stackwork.yaml", "")

    configuration = load_cli_configuration(config_path)

    assert configuration.base_path == "."
    assert configuration.components.terraform.base_path == "components/terraform"
    assert configuration.components.helmfile.base_path == "components/helmfile"


def test_loads_json_configuration_with_partial_components(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "stackwork.json",
        json.dumps({"components": {"helmfile": {"base_path": "charts"}}}),
    )

    configuration = load_cli_configuration(config_path)

    assert configuration.components.terraform.base_path == "components/terraform"
    assert configuration.components.helmfile.base_path == "charts"


def test_keeps_relative_base_path_unresolved(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "stackwork.yaml", "base_path: ./project\n")

    assert load_cli_configuration(config_path).base_path == "./project"


def test_errors_when_file_is_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_cli_configuration(tmp_path / "missing.yaml")


def test_errors_when_yaml_is_malformed(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "stackwork.yaml", "components: [unclosed\n")

    with pytest.raises(ConfigurationError, match="Failed to parse configuration file"):
        load_cli_configuration(config_path)


def test_errors_when_configuration_root_is_not_mapping(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "stackwork.yaml", "[]")

    with pytest.raises(ConfigurationError, match="Configuration root must be a mapping"):
        load_cli_configuration(config_path)


@pytest.mark.parametrize(
    ("config", "message"),
    [
        ({"base_path": 7}, "base_path must be a string"),
        ({"base_path": "  "}, "base_path must not be empty"),
        ({"components": "terraform"}, "'components' must be a mapping"),
        ({"components": {"terraform": []}}, "'components.terraform' must be a mapping"),
        (
            {"components": {"helmfile": {"base_path": ""}}},
            "components.helmfile.base_path must not be empty",
        ),
    ],
)
def test_errors_for_invalid_values(tmp_path: Path, config: dict, message: str) -> None:
    config_path = _write_file(tmp_path / "stackwork.yaml", json.dumps(config))

    with pytest.raises(ConfigurationError, match=message):
        load_cli_configuration(config_path)
