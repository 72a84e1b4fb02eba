"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "stackwork.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Project configuration for stackwork.
# Every value is optional; the commented defaults apply when a key is omitted.

# Project root. Relative paths are resolved against the directory stackwork runs in.
base_path: "."

components:
  terraform:
    # Directory below base_path holding terraform root modules.
    # Components may be flat (<base_path>/<component>) or grouped one level
    # deep (<base_path>/<group>/<component>).
    base_path: "components/terraform"
  helmfile:
    # Directory below base_path holding helmfile charts.
    base_path: "components/helmfile"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML project configuration with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder project configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
