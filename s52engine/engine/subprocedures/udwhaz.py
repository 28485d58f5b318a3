"""UDWHAZ — isolated danger test for obstructions and wrecks.

A hazard at or shallower than the safety contour that lies inside water
deeper than the safety contour is an isolated danger. The result carries a
MetadataPatch instead of touching the feature, so the caller decides when
the change is committed.
"""

from __future__ import annotations

from typing import NamedTuple

from s52engine.engine.collection import FeatureCollection
from s52engine.models.feature import SCAMIN_INFINITE, DisplayCategory, Feature, MetadataPatch
from s52engine.models.instruction import Instruction, sy
from s52engine.models.mariner import MarinerSettings

_DEPTH_AREAS = frozenset({"DEPARE", "DRGARE"})
# WATLEV: partly submerged at high water / always dry
_ABOVE_WATER = frozenset({1, 2})

ISOLATED_DANGER = "ISODGR01"


class HazardResult(NamedTuple):
    instruction: Instruction | None
    patch: MetadataPatch

    @property
    def is_danger(self) -> bool:
        return self.instruction is not None


_NO_HAZARD = HazardResult(None, MetadataPatch())


def _inside_depth_area(
    collection: FeatureCollection,
    feature: Feature,
    accept,
) -> bool:
    for area in collection.group_one_near(feature):
        if area.acronym not in _DEPTH_AREAS or not area.has_attribute("DRVAL1"):
            continue
        if collection.contains_point(area, feature) and accept(area.first_float("DRVAL1")):
            return True
    return False


def udwhaz(
    depth: float | None,
    mariner: MarinerSettings,
    collection: FeatureCollection,
    feature: Feature,
    watlev: int,
) -> HazardResult:
    safety = mariner.safety_contour
    if depth is None or depth > safety:
        return _NO_HAZARD

    if _inside_depth_area(collection, feature, lambda drval1: drval1 >= safety):
        if watlev in _ABOVE_WATER:
            return HazardResult(
                None,
                MetadataPatch(display_category=DisplayCategory.DISPLAYBASE, viewing_group="14050"),
            )
        return HazardResult(
            sy(ISOLATED_DANGER),
            MetadataPatch(
                display_category=DisplayCategory.DISPLAYBASE,
                priority=8,
                over_radar=True,
                viewing_group="14010",
                scamin=SCAMIN_INFINITE,
            ),
        )

    if not mariner.show_isolated_danger_in_shallow_water:
        return _NO_HAZARD

    if _inside_depth_area(collection, feature, lambda drval1: 0 <= drval1 < safety):
        if watlev in _ABOVE_WATER:
            return HazardResult(
                None,
                MetadataPatch(display_category=DisplayCategory.STANDARD, viewing_group="24050"),
            )
        return HazardResult(
            sy(ISOLATED_DANGER),
            MetadataPatch(
                display_category=DisplayCategory.DISPLAYBASE,
                priority=8,
                over_radar=True,
                viewing_group="24020",
            ),
        )

    return _NO_HAZARD
