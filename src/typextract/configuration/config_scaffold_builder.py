"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "typextract.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Extraction configuration for typextract.
# Replace every <REQUIRED> placeholder before running extract.

schema:
  # Provide either inline JSON schema text or a schema path relative to this file.
  path: "<REQUIRED>"
  # inline: "<OPTIONAL>"

output:
  # json or yaml
  format: json
  # Write the partial type model even when some types could not be resolved.
  allow_partial: false
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

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
