"""Presentation instructions — the output vocabulary of the symbology engine.

An instruction is a two-letter command word plus a comma-delimited parameter
string, e.g. ``LS(DASH,1,CHGRF)``. The engine only chooses tokens; resolving
them against a symbol library is the rasterizer's job.
"""

from __future__ import annotations

import enum
import logging
import re

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"^\s*([A-Z]{2})\s*\((.*)\)\s*$")


class InstructionType(str, enum.Enum):
    TX = "TX"  # text
    TE = "TE"  # formatted numeric text
    SY = "SY"  # point symbol
    LS = "LS"  # simple line style
    LC = "LC"  # complex line style
    AC = "AC"  # area colour fill
    AP = "AP"  # area pattern fill
    CS = "CS"  # conditional symbology procedure call


class Instruction(BaseModel):
    """A single drawing command."""

    model_config = ConfigDict(frozen=True)

    type: InstructionType
    params: str = ""

    @property
    def param_list(self) -> list[str]:
        return self.params.split(",") if self.params else []

    @property
    def is_conditional(self) -> bool:
        return self.type is InstructionType.CS

    def __str__(self) -> str:
        return f"{self.type.value}({self.params})"


def sy(name: str) -> Instruction:
    return Instruction(type=InstructionType.SY, params=name)


def ls(style: str) -> Instruction:
    return Instruction(type=InstructionType.LS, params=style)


def lc(name: str) -> Instruction:
    return Instruction(type=InstructionType.LC, params=name)


def ac(colour: str) -> Instruction:
    return Instruction(type=InstructionType.AC, params=colour)


def ap(pattern: str) -> Instruction:
    return Instruction(type=InstructionType.AP, params=pattern)


def cs(directive: str) -> Instruction:
    return Instruction(type=InstructionType.CS, params=directive)


def parse_instructions(field: str) -> list[Instruction]:
    """Parse a lookup-table instruction field such as ``AC(DEPVS);CS(DEPARE01)``.

    Empty items are ignored. Items with an unknown command word are skipped
    with a warning so one bad entry does not lose the rest of the record.
    """
    result: list[Instruction] = []
    for item in field.split(";"):
        if not item.strip():
            continue
        match = _TOKEN_RE.match(item)
        if match is None:
            logger.warning("Skipping malformed instruction %r", item)
            continue
        word, params = match.groups()
        try:
            kind = InstructionType(word)
        except ValueError:
            logger.warning("Skipping unknown command word %r in %r", word, item)
            continue
        result.append(Instruction(type=kind, params=params.strip()))
    return result
