"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "mongo-schema.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Export configuration for mongo-json-schema.
# Replace every <REQUIRED> placeholder before running export.
# Remove <OPTIONAL> entries you do not need; defaults are shown in comments.

models:
  # Import path of a pydantic model or annotated type, as package.module:Name.
  - target: "<REQUIRED>"
    # Collection receiving the validator. Defaults to the lower-cased Name.
    collection: "<OPTIONAL>"
    # strict | moderate | off (default: strict)
    validation_level: "<OPTIONAL>"
    # error | warn (default: error)
    validation_action: "<OPTIONAL>"

output:
  # json | yaml (default: json)
  format: "<OPTIONAL>"
  # Indentation width (default: 2)
  indent: "<OPTIONAL>"
  # validation | serialization (default: validation)
  mode: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML export configuration template with placeholders and inline guidance."""
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
