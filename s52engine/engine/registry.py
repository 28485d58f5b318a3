"""Procedure registry — every top-level CS procedure is a function registered via decorator.

Usage:
    @procedure(CSKeyword.DEPCNT, description="Depth contour line and labels")
    def depcnt(ctx: EvaluationContext) -> None:
        ctx.emit(ls("SOLD,1,DEPCN"))

Adding a procedure = creating one module with the decorator. Keywords the
catalogue marks as sub-procedures or unimplemented cannot be registered.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from s52engine.engine.catalogue import CSKeyword, ProcedureKind

if TYPE_CHECKING:
    from s52engine.engine.context import EvaluationContext

logger = logging.getLogger(__name__)


class Completeness(enum.Enum):
    FULL = "full"
    # Parts of the published decision tree are deliberately not evaluated.
    PARTIAL = "partial"


@dataclass
class ProcedureSpec:
    keyword: CSKeyword
    fn: Callable[["EvaluationContext"], None]
    completeness: Completeness = Completeness.FULL
    description: str = ""


class ProcedureRegistry:
    """Keyword -> procedure table."""

    def __init__(self) -> None:
        self._procedures: dict[CSKeyword, ProcedureSpec] = {}

    def register(self, spec: ProcedureSpec) -> None:
        if spec.keyword.kind is not ProcedureKind.PROCEDURE:
            raise ValueError(
                f"{spec.keyword.name} is a {spec.keyword.kind.value} keyword and cannot be registered"
            )
        if spec.keyword in self._procedures:
            raise ValueError(f"Duplicate procedure for keyword: {spec.keyword.name}")
        self._procedures[spec.keyword] = spec
        logger.debug("Registered procedure %s (%s)", spec.keyword.name, spec.completeness.value)

    def get(self, keyword: CSKeyword) -> ProcedureSpec | None:
        return self._procedures.get(keyword)

    def all(self) -> list[ProcedureSpec]:
        return sorted(self._procedures.values(), key=lambda s: s.keyword.name)

    def __contains__(self, keyword: CSKeyword) -> bool:
        return keyword in self._procedures

    @property
    def count(self) -> int:
        return len(self._procedures)


# Module-level singleton
_registry = ProcedureRegistry()


def get_registry() -> ProcedureRegistry:
    return _registry


def procedure(
    keyword: CSKeyword,
    completeness: Completeness = Completeness.FULL,
    description: str = "",
) -> Callable:
    """Decorator to register a top-level CS procedure in the global registry."""

    def decorator(fn: Callable[["EvaluationContext"], None]) -> Callable[["EvaluationContext"], None]:
        _registry.register(
            ProcedureSpec(
                keyword=keyword,
                fn=fn,
                completeness=completeness,
                description=description,
            )
        )
        return fn

    return decorator
