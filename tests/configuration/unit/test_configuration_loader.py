"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from mongo_json_schema.configuration import (
    ConfigurationError,
    build_placeholder_configuration,
    load_configuration,
)


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration_with_defaults(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml",
        """
models:
  - target: "shop.models:Order"
  - target: "shop.models:Customer.Address"
    collection: addresses
    validation_level: Moderate
    validation_action: warn
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    first, second = configuration.models
    assert first.target == "shop.models:Order"
    assert first.collection == "order"
    assert first.validation_level == "strict"
    assert first.validation_action == "error"
    assert second.collection == "addresses"
    assert second.validation_level == "moderate"
    assert second.validation_action == "warn"
    assert configuration.output.output_format == "json"
    assert configuration.output.indent == 2
    assert configuration.output.mode == "validation"


def test_loads_json_configuration_with_output_section(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.json",
        json.dumps(
            {
                "models": [{"target": "shop.models:Customer.Address"}],
                "output": {"format": "yaml", "indent": 4, "mode": "serialization"},
            }
        ),
    )

    configuration = load_configuration(str(config_path))

    assert configuration.models[0].collection == "address"
    assert configuration.output.output_format == "yaml"
    assert configuration.output.indent == 4
    assert configuration.output.mode == "serialization"


def test_optional_placeholders_fall_back_to_defaults(tmp_path: Path) -> None:
    scaffold = build_placeholder_configuration().replace("<REQUIRED>", "shop.models:Order")
    config_path = _write_file(tmp_path / "config.yaml", scaffold)

    configuration = load_configuration(config_path)

    assert configuration.models[0].collection == "order"
    assert configuration.models[0].validation_level == "strict"
    assert configuration.output.indent == 2


def test_required_placeholder_is_rejected(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", build_placeholder_configuration())

    with pytest.raises(ConfigurationError, match="models\\[0\\].target still holds the <REQUIRED>"):
        load_configuration(config_path)


def test_missing_file_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("- just\n- a list\n", "Configuration root must be a mapping."),
        ("", "must list at least one model"),
        ("models: []\n", "must list at least one model"),
        ("models:\n  - collection: users\n", "models\\[0\\].target must be a string."),
        ("models:\n  - target: shop.models.Order\n", "must look like 'package.module:Name'"),
        (
            "models:\n  - target: a:Order\n  - target: b:Order\n",
            "Duplicate collection detected: order",
        ),
        (
            "models:\n  - target: a:Order\n    validation_level: lenient\n",
            "validation_level must be one of: strict, moderate, off.",
        ),
        (
            "models:\n  - target: a:Order\n    validation_action: ignore\n",
            "validation_action must be one of: error, warn.",
        ),
        ("models:\n  - target: a:Order\noutput:\n  format: xml\n", "output.format must be one of"),
        ("models:\n  - target: a:Order\noutput:\n  indent: 0\n", "greater than zero"),
        ("models:\n  - target: a:Order\noutput:\n  indent: true\n", "must be an integer"),
        ("models:\n  - target: a:Order\noutput: fast\n", "Configuration section 'output'"),
    ],
)
def test_invalid_configuration_is_rejected(tmp_path: Path, contents: str, message: str) -> None:
    config_path = _write_file(tmp_path / "config.yaml", contents)

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)
