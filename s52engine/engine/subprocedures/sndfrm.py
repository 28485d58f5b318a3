"""SNDFRM — sounding figure symbols for a depth value."""

from __future__ import annotations

from s52engine.engine.attributes import LOW_ACCURACY_QUAPOS
from s52engine.engine.encoders import sounding_codes
from s52engine.models.feature import Feature
from s52engine.models.instruction import Instruction, sy
from s52engine.models.mariner import MarinerSettings

# TECSOU: found by wire-drag sweep
_SWEPT = 6
# STATUS: not confirmed
_UNCONFIRMED = 18
_UNRELIABLE_QUASOU = frozenset({3, 4, 5, 8, 9})


def _is_low_confidence(feature: Feature) -> bool:
    if _UNCONFIRMED in feature.int_values("STATUS"):
        return True
    if _UNRELIABLE_QUASOU.intersection(feature.int_values("QUASOU")):
        return True
    return bool(LOW_ACCURACY_QUAPOS.intersection(feature.int_values("QUAPOS")))


def sndfrm(depth: float, mariner: MarinerSettings, feature: Feature) -> list[Instruction]:
    """Symbols spelling out ``depth``.

    Soundings at or above the safety contour use the SOUNDS (black) family,
    deeper ones SOUNDG (grey). Optional prefixes: B1 swept, C2 low
    confidence, A1 drying height.
    """
    prefix = "SOUNDS" if depth <= mariner.safety_contour else "SOUNDG"
    result: list[Instruction] = []

    if _SWEPT in feature.int_values("TECSOU"):
        result.append(sy(f"{prefix}B1"))
    if _is_low_confidence(feature):
        result.append(sy(f"{prefix}C2"))
    if depth < 0:
        result.append(sy(f"{prefix}A1"))

    result.extend(sy(f"{prefix}{code:02d}") for code in sounding_codes(depth))
    return result
