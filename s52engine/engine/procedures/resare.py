"""RESARE — restricted areas.

Exactly one symbol is chosen, from the first matching of:
  1. entry restricted            ENTRES51/61/71
  2. anchoring restricted        ACHRES51/61/71
  3. fishing/trawling restricted FSHRES51/61/71
  4. other category restriction  CTYARE51/71
  5. anything else               INFARE51 or RSRDEF51
When RESTRN is missing the area is classified from CATREA alone. The
boundary line depends only on the mariner's boundary style.
"""

from __future__ import annotations

from s52engine.engine import restrictions
from s52engine.engine.catalogue import CSKeyword
from s52engine.engine.context import EvaluationContext
from s52engine.engine.registry import procedure
from s52engine.models.feature import MetadataPatch
from s52engine.models.instruction import lc, ls, sy

RESTRICTED_AREA_PRIORITY = 6


def _catrea_symbol(catrea: set[int]) -> str:
    if catrea & restrictions.CATREA_QUALIFIED:
        if catrea & restrictions.CATREA_ALTERNATE:
            return restrictions.CATEGORY.symbol_for(restrictions.Tier.ALTERNATE)
        return restrictions.CATEGORY.symbol_for(restrictions.Tier.PLAIN)
    if catrea & restrictions.CATREA_ALTERNATE:
        return restrictions.INFORMATION_SYMBOL
    return restrictions.DEFAULT_SYMBOL


@procedure(CSKeyword.RESARE, description="Restricted area symbol and boundary")
def resare(ctx: EvaluationContext) -> None:
    feature = ctx.feature
    catrea = set(feature.int_values("CATREA"))
    boundary = restrictions.DEFAULT_BOUNDARY

    if feature.has_attribute("RESTRN"):
        restrn = set(feature.int_values("RESTRN"))
        family = restrictions.match_family(restrn)
        if family is not None:
            tier = restrictions.select_tier(family, restrn, catrea)
            symbol = family.symbol_for(tier)
            boundary = family.boundary
        elif restrn & restrictions.INFORMATION_RESTRICTED:
            symbol = restrictions.INFORMATION_SYMBOL
        else:
            symbol = restrictions.DEFAULT_SYMBOL
    elif catrea:
        symbol = _catrea_symbol(catrea)
    else:
        symbol = restrictions.DEFAULT_SYMBOL

    ctx.emit(sy(symbol))
    if ctx.mariner.symbolized_boundaries:
        ctx.emit(lc(boundary))
    else:
        ctx.emit(ls(restrictions.PLAIN_BOUNDARY_STYLE))
    ctx.update(MetadataPatch(priority=RESTRICTED_AREA_PRIORITY))
