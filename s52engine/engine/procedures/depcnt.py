"""DEPCNT — depth contours."""

from __future__ import annotations

from s52engine.engine.attributes import is_low_accuracy
from s52engine.engine.catalogue import CSKeyword
from s52engine.engine.context import EvaluationContext
from s52engine.engine.registry import procedure
from s52engine.engine.subprocedures import safcon
from s52engine.models.instruction import ls


@procedure(CSKeyword.DEPCNT, description="Contour line style and optional depth label")
def depcnt(ctx: EvaluationContext) -> None:
    feature = ctx.feature
    if is_low_accuracy(feature):
        ctx.emit(ls("DASH,1,DEPCN"))
    else:
        ctx.emit(ls("SOLD,1,DEPCN"))

    if ctx.mariner.contour_labels:
        ctx.emit(*safcon(feature.first_float("VALDCO", 0.0)))
