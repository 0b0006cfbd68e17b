"""Numeric type resolver tests."""

from __future__ import annotations

import pytest
from mongo_json_schema.numeric_resolution import (
    FLOAT32_RANGE,
    FLOAT64_RANGE,
    INT32_RANGE,
    INT53_RANGE,
    resolve_numeric_type,
)


def test_integer_without_bounds_resolves_to_long() -> None:
    node = {"type": "integer"}

    assert resolve_numeric_type(node) == "long"
    assert node == {"type": "integer"}


def test_integer_with_int32_pair_drops_bounds() -> None:
    node = {"type": "integer", "minimum": INT32_RANGE.minimum, "maximum": INT32_RANGE.maximum}

    assert resolve_numeric_type(node) == "int"
    assert "minimum" not in node
    assert "maximum" not in node


def test_integer_with_int53_pair_drops_bounds() -> None:
    node = {"type": "integer", "minimum": INT53_RANGE.minimum, "maximum": INT53_RANGE.maximum}

    assert resolve_numeric_type(node) == "long"
    assert node == {"type": "integer"}


def test_integer_with_custom_small_range_keeps_bounds() -> None:
    node = {"type": "integer", "minimum": -100, "maximum": 100}

    assert resolve_numeric_type(node) == "int"
    assert node == {"type": "integer", "minimum": -100, "maximum": 100}


def test_integer_drops_only_the_filled_in_int32_bound() -> None:
    node = {"type": "integer", "minimum": 0, "maximum": INT32_RANGE.maximum}

    assert resolve_numeric_type(node) == "int"
    assert node == {"type": "integer", "minimum": 0}


def test_integer_beyond_int32_resolves_to_long() -> None:
    node = {"type": "integer", "minimum": -5_000_000_000, "maximum": 5_000_000_000}

    assert resolve_numeric_type(node) == "long"
    assert node["minimum"] == -5_000_000_000
    assert node["maximum"] == 5_000_000_000


def test_integer_drops_filled_in_int53_bound_for_long() -> None:
    node = {"type": "integer", "minimum": INT53_RANGE.minimum, "maximum": 5_000_000_000}

    assert resolve_numeric_type(node) == "long"
    assert node == {"type": "integer", "maximum": 5_000_000_000}


def test_integer_with_single_bound_stays_generic_and_keeps_it() -> None:
    upper_only = {"type": "integer", "maximum": 50}
    lower_only = {"type": "integer", "minimum": 0}

    assert resolve_numeric_type(upper_only) == "number"
    assert upper_only == {"type": "integer", "maximum": 50}
    assert resolve_numeric_type(lower_only) == "number"
    assert lower_only == {"type": "integer", "minimum": 0}


def test_integer_beyond_64_bits_falls_back_to_number_and_keeps_bounds() -> None:
    node = {"type": "integer", "minimum": 0, "maximum": 2**70}

    assert resolve_numeric_type(node) == "number"
    assert node == {"type": "integer", "minimum": 0, "maximum": 2**70}


def test_number_with_float32_pair_is_double_and_keeps_bounds() -> None:
    node = {"type": "number", "minimum": FLOAT32_RANGE.minimum, "maximum": FLOAT32_RANGE.maximum}

    assert resolve_numeric_type(node) == "double"
    assert node["minimum"] == FLOAT32_RANGE.minimum
    assert node["maximum"] == FLOAT32_RANGE.maximum


def test_number_with_float64_pair_is_double_without_bounds() -> None:
    node = {"type": "number", "minimum": FLOAT64_RANGE.minimum, "maximum": FLOAT64_RANGE.maximum}

    assert resolve_numeric_type(node) == "double"
    assert node == {"type": "number"}


@pytest.mark.parametrize(
    "bounds",
    [
        {},
        {"minimum": -10.5},
        {"minimum": 0.1, "maximum": 99.9},
        {"minimum": INT32_RANGE.minimum, "maximum": INT32_RANGE.maximum},
        {"minimum": FLOAT32_RANGE.minimum},
    ],
)
def test_number_without_canonical_pair_stays_generic(bounds: dict[str, float]) -> None:
    node = {"type": "number", **bounds}

    assert resolve_numeric_type(node) == "number"
    assert node == {"type": "number", **bounds}


def test_subtype_override_is_used_when_type_is_absent() -> None:
    node = {"bsonType": "integer", "minimum": -1, "maximum": 1}

    assert resolve_numeric_type(node) == "int"


def test_boolean_maps_to_bool_and_other_kinds_pass_through() -> None:
    assert resolve_numeric_type({"type": "boolean"}) == "bool"
    assert resolve_numeric_type({"type": "string", "minimum": 1}) == "string"
    assert resolve_numeric_type({"bsonType": "objectId"}) == "objectId"


def test_non_numeric_bounds_are_left_untouched() -> None:
    node = {"type": "integer", "minimum": "0", "maximum": 10}

    assert resolve_numeric_type(node) == "number"
    assert node == {"type": "integer", "minimum": "0", "maximum": 10}
