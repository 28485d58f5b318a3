"""OBSTRN — obstructions and underwater rocks.

The depth used for the isolated-danger test is VALSOU when charted, else the
least depth of the surrounding depth areas, else a default keyed off
WATLEV/CATOBS. An isolated danger replaces the point symbol entirely.
"""

from __future__ import annotations

import math

from s52engine.engine.attributes import enum_or_unknown, is_low_accuracy
from s52engine.engine.catalogue import CSKeyword
from s52engine.engine.context import EvaluationContext
from s52engine.engine.errors import PreconditionError
from s52engine.engine.registry import procedure
from s52engine.engine.subprocedures import HazardResult, depval, sndfrm, udwhaz
from s52engine.models.feature import Feature, GeometryType, MetadataPatch
from s52engine.models.instruction import Instruction, ac, ap, lc, ls, sy

SOUNDING_VIEWING_GROUP = "34051"
# VALSOU above this is "deep" for symbol selection
_SHALLOW_LIMIT = 20.0
# CATOBS: foul ground
_FOUL_GROUND = 6


def _default_depth(watlev: int, catobs: int | None) -> float:
    if catobs == _FOUL_GROUND:
        return 0.01
    if watlev == 5:
        return 0.0
    if watlev == 3:
        return 0.01
    return -15.0


def _require_obstrn(feature: Feature) -> None:
    if feature.acronym != "OBSTRN":
        raise PreconditionError(f"must be OBSTRN or UWTROC and is {feature.acronym}")


def _point_symbol(feature: Feature, valsou: float, watlev: int, catobs: int | None) -> tuple[str, bool]:
    """Return (symbol, show_sounding) for a point obstruction."""
    rock = feature.acronym == "UWTROC"

    if not math.isnan(valsou):
        if valsou > _SHALLOW_LIMIT:
            return "DANGER02", True
        if rock:
            if watlev in (4, 5):
                return "UWTROC04", False
            return "DANGER01", True
        _require_obstrn(feature)
        if catobs == _FOUL_GROUND:
            return "DANGER01", True
        if watlev in (1, 2):
            return "OBSTRN11", False
        if watlev == 4:
            return "DANGER03", True
        return "DANGER01", True

    if rock:
        return ("UWTROC03" if watlev == 3 else "UWTROC04"), False
    _require_obstrn(feature)
    if catobs == _FOUL_GROUND:
        return "OBSTRN01", False
    if watlev in (1, 2):
        return "OBSTRN11", False
    if watlev in (4, 5):
        return "OBSTRN03", False
    return "OBSTRN01", False


def _point(ctx: EvaluationContext, hazard: HazardResult, valsou: float, watlev: int,
           catobs: int | None, soundings: list[Instruction]) -> None:
    if hazard.is_danger:
        ctx.emit(hazard.instruction)
        return
    symbol, show_sounding = _point_symbol(ctx.feature, valsou, watlev, catobs)
    ctx.emit(sy(symbol))
    if show_sounding:
        ctx.emit(*soundings)


def _line(ctx: EvaluationContext, hazard: HazardResult, valsou: float,
          soundings: list[Instruction]) -> None:
    if is_low_accuracy(ctx.feature):
        ctx.emit(lc("LOWACC41" if hazard.is_danger else "LOWACC31"))
    elif hazard.is_danger or math.isnan(valsou) or valsou <= _SHALLOW_LIMIT:
        ctx.emit(ls("DOTT,2,CHBLK"))
    else:
        ctx.emit(ls("DASH,2,CHBLK"))

    if hazard.is_danger:
        ctx.emit(hazard.instruction)
    elif not math.isnan(valsou):
        ctx.emit(*soundings)


_AREA_BY_WATLEV = {
    1: ("CHBRN", "SOLD,2,CSTLN"),
    2: ("CHBRN", "SOLD,2,CSTLN"),
    3: ("DEPVS", "DOTT,2,CHBLK"),
    4: ("DEPIT", "DASH,2,CSTLN"),
    5: ("DEPVS", "DOTT,2,CHBLK"),
}


def _area(ctx: EvaluationContext, hazard: HazardResult, valsou: float, watlev: int,
          catobs: int | None, soundings: list[Instruction]) -> None:
    if hazard.is_danger:
        ctx.emit(ac("DEPVS"), ap("FOULAR01"), ls("DOTT,2,CHBLK"), hazard.instruction)
        return

    if not math.isnan(valsou):
        ctx.emit(ls("DOTT,2,CHBLK" if valsou <= _SHALLOW_LIMIT else "DASH,2,CHGRD"))
        ctx.emit(*soundings)
    elif catobs == _FOUL_GROUND:
        ctx.emit(ap("FOULAR01"), ls("DOTT,2,CHBLK"))
    else:
        colour, style = _AREA_BY_WATLEV.get(watlev, ("DEPVS", "DOTT,2,CHBLK"))
        ctx.emit(ac(colour), ls(style))


@procedure(CSKeyword.OBSTRN, description="Obstruction / rock symbology with isolated danger check")
def obstrn(ctx: EvaluationContext) -> None:
    feature = ctx.feature
    valsou = feature.first_float("VALSOU")
    watlev = enum_or_unknown(feature, "WATLEV")
    expsou = enum_or_unknown(feature, "EXPSOU")
    catobs = feature.first_int("CATOBS")

    soundings: list[Instruction] = []
    if not math.isnan(valsou):
        depth = valsou
        ctx.update(MetadataPatch(viewing_group=SOUNDING_VIEWING_GROUP))
        soundings = sndfrm(depth, ctx.mariner, feature)
    else:
        least_depth = depval(expsou, watlev, ctx.collection, feature).least_depth
        depth = least_depth if least_depth is not None else _default_depth(watlev, catobs)

    hazard = udwhaz(depth, ctx.mariner, ctx.collection, feature, watlev)
    ctx.update(hazard.patch)

    if feature.kind is GeometryType.POINT:
        _point(ctx, hazard, valsou, watlev, catobs, soundings)
    elif feature.kind is GeometryType.LINE:
        _line(ctx, hazard, valsou, soundings)
    elif feature.kind is GeometryType.AREA:
        _area(ctx, hazard, valsou, watlev, catobs, soundings)

