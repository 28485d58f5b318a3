"""SLCONS — shoreline constructions.

Best effort: a fault while reading attributes is logged and whatever was
emitted before it is kept.
"""

from __future__ import annotations

import logging

from s52engine.engine.attributes import is_low_accuracy
from s52engine.engine.catalogue import CSKeyword
from s52engine.engine.context import EvaluationContext
from s52engine.engine.registry import procedure
from s52engine.models.feature import Feature, GeometryType
from s52engine.models.instruction import lc, ls, sy

logger = logging.getLogger(__name__)

# CONDTN: under construction / ruined
_UNFINISHED = frozenset({1, 2})
# CATSLC: wharf, fender, solid face wharf
_HEAVY = frozenset({6, 15, 16})


def _line_style(feature: Feature) -> str:
    condtn = feature.first_int("CONDTN")
    catslc = feature.first_int("CATSLC")
    watlev = feature.first_int("WATLEV")

    if condtn in _UNFINISHED:
        return "DASH,1,CSTLN"
    if catslc in _HEAVY:
        return "SOLD,4,CSTLN"
    if watlev == 2:
        return "SOLD,2,CSTLN"
    if watlev in (3, 4):
        return "DASH,2,CSTLN"
    return "SOLD,2,CSTLN"


@procedure(CSKeyword.SLCONS, description="Shoreline construction line style")
def slcons(ctx: EvaluationContext) -> None:
    feature = ctx.feature
    try:
        if feature.kind is GeometryType.POINT:
            if is_low_accuracy(feature):
                ctx.emit(sy("LOWACC01"))
        elif feature.kind in (GeometryType.LINE, GeometryType.AREA):
            if is_low_accuracy(feature):
                ctx.emit(lc("LOWACC21"))
            ctx.emit(ls(_line_style(feature)))
    except Exception:
        logger.exception("SLCONS failed for %s, keeping %d instructions", feature.id, len(ctx.instructions))
