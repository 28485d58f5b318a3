"""DEPVAL — least depth and seabed depth under an obstruction or wreck."""

from __future__ import annotations

from typing import NamedTuple

from s52engine.engine.collection import FeatureCollection
from s52engine.models.feature import Feature

_DEPTH_AREAS = frozenset({"DEPARE", "DRGARE"})

# WATLEV: always under water
_SUBMERGED = 3
# EXPSOU: within / shoaler than the surrounding depth range
_EXPOSED = frozenset({1, 3})


class DepthValues(NamedTuple):
    least_depth: float | None
    seabed_depth: float | None


def depval(
    expsou: int,
    watlev: int,
    collection: FeatureCollection,
    feature: Feature,
) -> DepthValues:
    """Scan group-one features intersecting ``feature``.

    An unsurveyed area (UNSARE) pins the least depth to 0 and ends the scan.
    Otherwise the shallowest DRVAL1 of intersecting depth/dredged areas is
    taken. It is kept as the least depth only for a submerged feature whose
    sounding exposure is 1 or 3; in every other case it is reported as the
    seabed depth instead.
    """
    least_depth: float | None = None

    for other in collection.group_one_near(feature):
        if not collection.intersects(feature, other):
            continue
        if other.acronym == "UNSARE":
            least_depth = 0.0
            break
        if other.acronym in _DEPTH_AREAS and other.has_attribute("DRVAL1"):
            drval1 = other.first_float("DRVAL1")
            if least_depth is None or drval1 < least_depth:
                least_depth = drval1

    if least_depth is None:
        return DepthValues(None, None)
    if watlev == _SUBMERGED and expsou in _EXPOSED:
        return DepthValues(least_depth, least_depth)
    return DepthValues(None, least_depth)
