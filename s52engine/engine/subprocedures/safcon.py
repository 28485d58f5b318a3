"""SAFCON — depth contour label symbols."""

from __future__ import annotations

from s52engine.engine.encoders import contour_label_codes
from s52engine.models.instruction import Instruction, sy

_PREFIX = "SAFCON"


def safcon(depth: float) -> list[Instruction]:
    # TODO: labels of 100 m and deeper need the SAFCON8x/9x symbols, which the
    # symbol library does not ship yet.
    return [sy(f"{_PREFIX}{code:02d}") for code in contour_label_codes(depth)]
