"""SOUNDG — spot soundings."""

from __future__ import annotations

from s52engine.engine.catalogue import CSKeyword
from s52engine.engine.context import EvaluationContext
from s52engine.engine.registry import procedure
from s52engine.engine.subprocedures import sndfrm


@procedure(CSKeyword.SOUNDG, description="Sounding figure from the geometry depth")
def soundg(ctx: EvaluationContext) -> None:
    ctx.emit(*sndfrm(ctx.feature.geometry.depth, ctx.mariner, ctx.feature))
