"""DEPARE — depth areas and dredged areas.

Only the seabed fill and the dredged-area extras are evaluated. The
safety-contour cross-check against neighbouring contours (continuations A
and B of the published procedure) is not implemented, so depth area
boundaries keep their lookup-table style.
"""

from __future__ import annotations

from s52engine.engine.catalogue import CSKeyword
from s52engine.engine.context import EvaluationContext
from s52engine.engine.registry import Completeness, procedure
from s52engine.engine.subprocedures import rescsp, seabed
from s52engine.models.instruction import ap, ls

# Depth assumed for an area without DRVAL1
_DRVAL1_DEFAULT = -1.0
_DRVAL2_OFFSET = 0.01


@procedure(
    CSKeyword.DEPARE,
    completeness=Completeness.PARTIAL,
    description="Seabed colour for depth areas, pattern and boundary for dredged areas",
)
def depare(ctx: EvaluationContext) -> None:
    feature = ctx.feature
    drval1 = feature.first_float("DRVAL1", _DRVAL1_DEFAULT)
    drval2 = feature.first_float("DRVAL2", drval1 + _DRVAL2_OFFSET)

    ctx.emit(*seabed(drval1, drval2, ctx.mariner))

    if feature.acronym == "DRGARE":
        ctx.emit(ap("DRGARE01"), ls("DASH,1,CHGRF"))
        if feature.has_attribute("RESTRN"):
            ctx.emit(rescsp(feature.int_values("RESTRN")))
