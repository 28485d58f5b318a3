"""Attribute sentinels and code sets used across procedures."""

from __future__ import annotations

from s52engine.models.feature import Feature

# Stand-in for a missing enumerated attribute (WATLEV, EXPSOU, CATWRK).
UNKNOWN = 99999999

# QUAPOS values meaning the position is not surveyed to full accuracy.
LOW_ACCURACY_QUAPOS = frozenset({2, 3, 4, 5, 6, 7, 8, 9})


def is_low_accuracy(feature: Feature) -> bool:
    return bool(LOW_ACCURACY_QUAPOS.intersection(feature.int_values("QUAPOS")))


def enum_or_unknown(feature: Feature, code: str) -> int:
    return feature.first_int(code, UNKNOWN)
