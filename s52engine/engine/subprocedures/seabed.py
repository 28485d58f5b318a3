"""SEABED — colour fill for areas that form the seabed."""

from __future__ import annotations

from s52engine.models.instruction import Instruction, ac, ap
from s52engine.models.mariner import MarinerSettings


def seabed(drval1: float, drval2: float, mariner: MarinerSettings) -> list[Instruction]:
    """Fill colour by depth band, plus the shallow-water pattern when enabled.

    Four shades: intertidal (DEPIT), very shallow (DEPVS), medium shallow
    (DEPMS), medium deep (DEPMD), deep (DEPDW). Two-shades mode only
    separates shallower / deeper than the safety contour.
    """
    colour = "DEPIT"
    shallow = True

    if drval1 >= 0.0 and drval2 > 0.0:
        colour = "DEPVS"

    if mariner.two_shades:
        if drval1 >= mariner.safety_contour and drval2 > mariner.safety_contour:
            colour = "DEPDW"
            shallow = False
    else:
        if drval1 >= mariner.shallow_contour and drval2 > mariner.shallow_contour:
            colour = "DEPMS"
        if drval1 >= mariner.safety_contour and drval2 > mariner.safety_contour:
            colour = "DEPMD"
            shallow = False
        if drval1 >= mariner.deep_contour and drval2 > mariner.deep_contour:
            colour = "DEPDW"
            shallow = False

    result = [ac(colour)]
    if mariner.shallow_pattern and shallow:
        result.append(ap("DIAMOND1"))
    return result
