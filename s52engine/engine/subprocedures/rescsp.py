"""RESCSP — restriction symbol for non-area features and dredged areas."""

from __future__ import annotations

from collections.abc import Iterable

from s52engine.engine import restrictions
from s52engine.models.instruction import Instruction, sy


def rescsp(restrn: Iterable[int]) -> Instruction:
    restrn = set(restrn)
    family = restrictions.match_family(restrn)
    if family is not None:
        return sy(family.symbol_for(restrictions.select_tier(family, restrn)))
    if restrn & restrictions.INFORMATION_RESTRICTED:
        return sy(restrictions.INFORMATION_SYMBOL)
    return sy(restrictions.DEFAULT_SYMBOL)
