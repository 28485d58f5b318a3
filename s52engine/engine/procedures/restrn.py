"""RESTRN — restriction symbol on features that are not restricted areas."""

from __future__ import annotations

from s52engine.engine.catalogue import CSKeyword
from s52engine.engine.context import EvaluationContext
from s52engine.engine.registry import procedure
from s52engine.engine.subprocedures import rescsp


@procedure(CSKeyword.RESTRN, description="Restriction symbol via RESCSP")
def restrn(ctx: EvaluationContext) -> None:
    if ctx.feature.has_attribute("RESTRN"):
        ctx.emit(rescsp(ctx.feature.int_values("RESTRN")))
