"""The fixed catalogue of S-52 conditional symbology keywords."""

from __future__ import annotations

import enum


class ProcedureKind(enum.Enum):
    # Top-level procedure with a full or partial implementation.
    PROCEDURE = "procedure"
    # Only ever called from another procedure; tolerated at top level as a no-op.
    SUB_PROCEDURE = "sub_procedure"
    # Top-level procedure without an implementation; no-op.
    UNIMPLEMENTED = "unimplemented"


class CSKeyword(enum.Enum):
    """The 22 CS keywords, each tagged with how the dispatcher treats it."""

    DATCVR = "DATCVR", ProcedureKind.UNIMPLEMENTED
    DEPARE = "DEPARE", ProcedureKind.PROCEDURE
    DEPCNT = "DEPCNT", ProcedureKind.PROCEDURE
    DEPVAL = "DEPVAL", ProcedureKind.SUB_PROCEDURE
    LIGHTS = "LIGHTS", ProcedureKind.UNIMPLEMENTED
    LITDSN = "LITDSN", ProcedureKind.SUB_PROCEDURE
    OBSTRN = "OBSTRN", ProcedureKind.PROCEDURE
    QUAPOS = "QUAPOS", ProcedureKind.UNIMPLEMENTED
    QUALIN = "QUALIN", ProcedureKind.SUB_PROCEDURE
    QUAPNT = "QUAPNT", ProcedureKind.SUB_PROCEDURE
    RESARE = "RESARE", ProcedureKind.PROCEDURE
    RESTRN = "RESTRN", ProcedureKind.PROCEDURE
    RESCSP = "RESCSP", ProcedureKind.SUB_PROCEDURE
    SAFCON = "SAFCON", ProcedureKind.SUB_PROCEDURE
    SLCONS = "SLCONS", ProcedureKind.PROCEDURE
    SEABED = "SEABED", ProcedureKind.SUB_PROCEDURE
    SNDFRM = "SNDFRM", ProcedureKind.SUB_PROCEDURE
    SOUNDG = "SOUNDG", ProcedureKind.PROCEDURE
    SYMINS = "SYMINS", ProcedureKind.UNIMPLEMENTED
    TOPMAR = "TOPMAR", ProcedureKind.UNIMPLEMENTED
    UDWHAZ = "UDWHAZ", ProcedureKind.SUB_PROCEDURE
    WRECKS = "WRECKS", ProcedureKind.PROCEDURE

    def __init__(self, code: str, kind: ProcedureKind) -> None:
        self.code = code
        self.kind = kind

    @property
    def is_top_level(self) -> bool:
        return self.kind is ProcedureKind.PROCEDURE

    @classmethod
    def lookup(cls, name: str) -> CSKeyword | None:
        """Return the keyword for ``name`` or ``None`` when it is not in the catalogue."""
        return cls.__members__.get(name)
