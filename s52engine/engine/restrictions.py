"""Restriction code-set tables shared by RESARE and RESCSP.

Both procedures select a symbol from the same severity ladder, so the code
sets live here once:

  ...51  plain
  ...61  qualified: another kind of restriction also applies
  ...71  qualified-alternate: an information restriction also applies
"""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

# RESTRN values
ENTRY_RESTRICTED = frozenset({7, 8, 14})
ANCHORING_RESTRICTED = frozenset({1, 2})
FISHING_RESTRICTED = frozenset({3, 4, 5, 6, 24})
CATEGORY_RESTRICTED = frozenset({13, 16, 17, 23, 25, 26, 27})
INFORMATION_RESTRICTED = frozenset({9, 10, 11, 12, 15, 18, 19, 20, 21, 22})

# CATREA values
CATREA_QUALIFIED = frozenset({1, 8, 9, 12, 14, 18, 19, 21, 24, 25, 26})
CATREA_ALTERNATE = frozenset({4, 5, 6, 7, 10, 20, 22, 23})

PLAIN_BOUNDARY_STYLE = "DASH,2,CHMGD"


class Tier(enum.IntEnum):
    PLAIN = 51
    QUALIFIED = 61
    ALTERNATE = 71


@dataclass(frozen=True)
class RestrictionFamily:
    symbol: str
    trigger: frozenset[int]
    # RESTRN values that lift the symbol to the qualified tier; empty when the
    # family has no qualified symbol.
    qualifiers: frozenset[int]
    # Complex line used for symbolized area boundaries
    boundary: str

    def symbol_for(self, tier: Tier) -> str:
        return f"{self.symbol}{tier.value}"


ENTRY = RestrictionFamily(
    symbol="ENTRES",
    trigger=ENTRY_RESTRICTED,
    qualifiers=frozenset({1, 2, 3, 4, 5, 6, 13, 16, 17, 23, 24, 25, 26, 27}),
    boundary="CTYARE51",
)
ANCHORING = RestrictionFamily(
    symbol="ACHRES",
    trigger=ANCHORING_RESTRICTED,
    qualifiers=frozenset({3, 4, 5, 6, 13, 16, 17, 23, 24, 25, 26, 27}),
    boundary="ACHRES51",
)
FISHING = RestrictionFamily(
    symbol="FSHRES",
    trigger=FISHING_RESTRICTED,
    qualifiers=CATEGORY_RESTRICTED,
    boundary="FSHRES51",
)
CATEGORY = RestrictionFamily(
    symbol="CTYARE",
    trigger=CATEGORY_RESTRICTED,
    qualifiers=frozenset(),
    boundary="CTYARE51",
)

# Evaluation order matters: the first family whose trigger matches wins.
FAMILIES: tuple[RestrictionFamily, ...] = (ENTRY, ANCHORING, FISHING, CATEGORY)

INFORMATION_SYMBOL = "INFARE51"
DEFAULT_SYMBOL = "RSRDEF51"
DEFAULT_BOUNDARY = "CTYARE51"


def match_family(restrn: Iterable[int]) -> RestrictionFamily | None:
    codes = set(restrn)
    for family in FAMILIES:
        if codes & family.trigger:
            return family
    return None


def select_tier(
    family: RestrictionFamily,
    restrn: Iterable[int],
    catrea: Iterable[int] = (),
) -> Tier:
    """Pick the severity tier within ``family`` from RESTRN and (areas only) CATREA."""
    restrn = set(restrn)
    catrea = set(catrea)
    if family.qualifiers and (restrn & family.qualifiers or catrea & CATREA_QUALIFIED):
        return Tier.QUALIFIED
    if restrn & INFORMATION_RESTRICTED or catrea & CATREA_ALTERNATE:
        return Tier.ALTERNATE
    return Tier.PLAIN
