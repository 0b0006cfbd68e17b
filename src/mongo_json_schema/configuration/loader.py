"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from mongo_json_schema.conversion.document_rendering import OUTPUT_FORMATS
from mongo_json_schema.conversion.validator_documents import VALIDATION_ACTIONS, VALIDATION_LEVELS

from .runtime_settings import Configuration, ModelTarget, OutputSettings

_OPTIONAL_PLACEHOLDER = "<OPTIONAL>"
_REQUIRED_PLACEHOLDER = "<REQUIRED>"
_SCHEMA_MODES: tuple[str, ...] = ("validation", "serialization")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    models = _parse_models_section(parsed.get("models"))
    output = _parse_output_section(parsed.get("output"))

    return Configuration(path=path, models=models, output=output)


def _parse_models_section(value: Any) -> tuple[ModelTarget, ...]:
    if not isinstance(value, Sequence) or isinstance(value, str) or not value:
        raise ConfigurationError("Configuration section 'models' must list at least one model.")

    models: list[ModelTarget] = []
    seen_collections: set[str] = set()
    for index, entry in enumerate(value):
        label = f"models[{index}]"
        section = _require_mapping(entry, label)
        target = _require_non_empty_string(section.get("target"), f"{label}.target")
        if ":" not in target:
            raise ConfigurationError(f"{label}.target must look like 'package.module:Name'.")
        collection = _optional_string(section.get("collection"), f"{label}.collection")
        if collection is None:
            collection = target.rpartition(":")[2].rpartition(".")[2].lower()
        if collection in seen_collections:
            raise ConfigurationError(f"Duplicate collection detected: {collection}")
        seen_collections.add(collection)
        models.append(
            ModelTarget(
                target=target,
                collection=collection,
                validation_level=_require_choice(
                    section.get("validation_level"),
                    f"{label}.validation_level",
                    VALIDATION_LEVELS,
                    default="strict",
                ),
                validation_action=_require_choice(
                    section.get("validation_action"),
                    f"{label}.validation_action",
                    VALIDATION_ACTIONS,
                    default="error",
                ),
            )
        )
    return tuple(models)


def _parse_output_section(value: Any) -> OutputSettings:
    section: Mapping[str, Any] = {} if value is None else _require_mapping(value, "output")
    output_format = _require_choice(
        section.get("format"), "output.format", OUTPUT_FORMATS, default="json"
    )
    indent_value = _unset_placeholder(section.get("indent"))
    indent = 2 if indent_value is None else _require_positive_int(indent_value, "output.indent")
    mode = _require_choice(section.get("mode"), "output.mode", _SCHEMA_MODES, default="validation")
    return OutputSettings(output_format=output_format, indent=indent, mode=mode)


def _unset_placeholder(value: Any) -> Any:
    return None if value == _OPTIONAL_PLACEHOLDER else value


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    if stripped == _REQUIRED_PLACEHOLDER:
        raise ConfigurationError(f"{field_name} still holds the {_REQUIRED_PLACEHOLDER} placeholder.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    value = _unset_placeholder(value)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_choice(
    value: Any, field_name: str, choices: tuple[str, ...], *, default: str
) -> str:
    chosen = _optional_string(value, field_name)
    if chosen is None:
        return default
    normalized = chosen.lower()
    if normalized not in choices:
        raise ConfigurationError(f"{field_name} must be one of: {', '.join(choices)}.")
    return normalized


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
