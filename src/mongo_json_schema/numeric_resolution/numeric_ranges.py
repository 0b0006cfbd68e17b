"""Canonical numeric range constants."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NumericRange:
    """Inclusive (minimum, maximum) pair of a well-known binary width."""

    minimum: int | float
    maximum: int | float

    def matches(self, minimum: object, maximum: object) -> bool:
        """Return True when both bounds equal this range exactly."""
        return _same_number(minimum, self.minimum) and _same_number(maximum, self.maximum)

    def contains(self, minimum: int | float, maximum: int | float) -> bool:
        """Return True when both bounds lie inside this range."""
        return self.minimum <= minimum and maximum <= self.maximum


def _same_number(value: object, expected: int | float) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return value == expected


INT32_RANGE = NumericRange(minimum=-2_147_483_648, maximum=2_147_483_647)
INT53_RANGE = NumericRange(minimum=-9_007_199_254_740_991, maximum=9_007_199_254_740_991)
INT64_RANGE = NumericRange(minimum=-9_223_372_036_854_775_808, maximum=9_223_372_036_854_775_807)

FLOAT32_RANGE = NumericRange(minimum=-3.4028234663852886e38, maximum=3.4028234663852886e38)
FLOAT64_RANGE = NumericRange(minimum=-1.7976931348623157e308, maximum=1.7976931348623157e308)
