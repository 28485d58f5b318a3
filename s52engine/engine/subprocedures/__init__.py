"""Shared sub-procedures called by the top-level CS procedures."""

from s52engine.engine.subprocedures.depval import DepthValues, depval
from s52engine.engine.subprocedures.quapnt import quapnt
from s52engine.engine.subprocedures.rescsp import rescsp
from s52engine.engine.subprocedures.safcon import safcon
from s52engine.engine.subprocedures.seabed import seabed
from s52engine.engine.subprocedures.sndfrm import sndfrm
from s52engine.engine.subprocedures.udwhaz import HazardResult, udwhaz

__all__ = [
    "DepthValues",
    "HazardResult",
    "depval",
    "quapnt",
    "rescsp",
    "safcon",
    "seabed",
    "sndfrm",
    "udwhaz",
]
