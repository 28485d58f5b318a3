"""QUAPNT — low-accuracy marker for point features."""

from __future__ import annotations

from s52engine.engine.attributes import is_low_accuracy
from s52engine.models.feature import Feature
from s52engine.models.instruction import Instruction, sy
from s52engine.models.mariner import MarinerSettings


def quapnt(feature: Feature, mariner: MarinerSettings) -> Instruction | None:
    if not mariner.low_accuracy_symbols:
        return None
    if is_low_accuracy(feature):
        return sy("LOWACC01")
    return None
