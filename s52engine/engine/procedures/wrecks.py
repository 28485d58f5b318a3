"""WRECKS — wrecks, with the same isolated danger check as OBSTRN.

Without a charted VALSOU the depth comes from the surrounding depth areas,
then from CATWRK (a non-dangerous wreck is assumed 20.1 m down, or shallower
when the seabed says so), then from WATLEV.
"""

from __future__ import annotations

import math

from s52engine.engine.attributes import UNKNOWN, enum_or_unknown, is_low_accuracy
from s52engine.engine.catalogue import CSKeyword
from s52engine.engine.context import EvaluationContext
from s52engine.engine.registry import procedure
from s52engine.engine.subprocedures import HazardResult, depval, quapnt, sndfrm, udwhaz
from s52engine.models.feature import GeometryType, MetadataPatch
from s52engine.models.instruction import Instruction, ac, lc, ls, sy

SOUNDING_VIEWING_GROUP = "34051"
_SHALLOW_LIMIT = 20.0
# CATWRK 1: non-dangerous wreck
_NON_DANGEROUS_DEPTH = 20.1
_SEABED_CLEARANCE = 66.0


def _default_depth(catwrk: int, watlev: int, seabed_depth: float | None) -> float:
    if catwrk != UNKNOWN:
        if catwrk != 1:
            return -15.0
        if seabed_depth is not None and seabed_depth - _SEABED_CLEARANCE < _NON_DANGEROUS_DEPTH:
            return seabed_depth - _SEABED_CLEARANCE
        return _NON_DANGEROUS_DEPTH
    if watlev in (3, 5):
        return 0.0
    return -15.0


def _wreck_symbol(catwrk: int, watlev: int) -> str:
    if watlev == 3 and catwrk == 1:
        return "WRECKS04"
    if watlev == 3 and catwrk == 2:
        return "WRECKS05"
    if catwrk in (4, 5) or watlev in (1, 2, 4, 5):
        return "WRECKS01"
    return "WRECKS05"


def _point(ctx: EvaluationContext, hazard: HazardResult, valsou: float, catwrk: int, watlev: int,
           accuracy: Instruction | None, soundings: list[Instruction]) -> None:
    if hazard.is_danger:
        ctx.emit(hazard.instruction)
        return
    if math.isnan(valsou):
        ctx.emit(sy(_wreck_symbol(catwrk, watlev)))
        return
    ctx.emit(sy("DANGER01" if valsou <= _SHALLOW_LIMIT else "DANGER02"), accuracy)
    ctx.emit(*soundings)


def _outline(ctx: EvaluationContext, hazard: HazardResult, valsou: float, watlev: int) -> Instruction:
    if is_low_accuracy(ctx.feature):
        return lc("LOWACC41")
    if hazard.is_danger:
        return ls("DOTT,2,CHBLK")
    if not math.isnan(valsou):
        return ls("DOTT,2,CHBLK" if valsou <= _SHALLOW_LIMIT else "DASH,2,CHBLK")
    if watlev in (1, 2):
        return ls("SOLD,2,CSTLN")
    if watlev == 4:
        return ls("DASH,2,CSTLN")
    return ls("DOTT,2,CSTLN")


def _area(ctx: EvaluationContext, hazard: HazardResult, valsou: float, watlev: int,
          accuracy: Instruction | None, soundings: list[Instruction]) -> None:
    ctx.emit(_outline(ctx, hazard, valsou, watlev))

    if not math.isnan(valsou):
        if hazard.is_danger:
            ctx.emit(hazard.instruction)
        else:
            ctx.emit(*soundings)
        ctx.emit(accuracy)
        return

    if watlev in (1, 2):
        ctx.emit(ac("CHGRN"))
    elif watlev == 4:
        ctx.emit(ac("DEPIT"))
    else:
        ctx.emit(ac("DEPVS"))
    ctx.emit(hazard.instruction, accuracy)


@procedure(CSKeyword.WRECKS, description="Wreck symbology with isolated danger check")
def wrecks(ctx: EvaluationContext) -> None:
    feature = ctx.feature
    valsou = feature.first_float("VALSOU")
    watlev = enum_or_unknown(feature, "WATLEV")
    expsou = enum_or_unknown(feature, "EXPSOU")
    catwrk = enum_or_unknown(feature, "CATWRK")

    soundings: list[Instruction] = []
    if not math.isnan(valsou):
        depth = valsou
        ctx.update(MetadataPatch(viewing_group=SOUNDING_VIEWING_GROUP))
        soundings = sndfrm(depth, ctx.mariner, feature)
    else:
        least_depth, seabed_depth = depval(expsou, watlev, ctx.collection, feature)
        if least_depth is not None:
            depth = least_depth
        else:
            depth = _default_depth(catwrk, watlev, seabed_depth)

    hazard = udwhaz(depth, ctx.mariner, ctx.collection, feature, watlev)
    ctx.update(hazard.patch)
    accuracy = quapnt(feature, ctx.mariner)

    # Lines take the area outline rules
    if feature.kind is GeometryType.POINT:
        _point(ctx, hazard, valsou, catwrk, watlev, accuracy, soundings)
    else:
        _area(ctx, hazard, valsou, watlev, accuracy, soundings)
