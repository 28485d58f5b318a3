"""Dispatcher — routes a feature's CS directive to its procedure.

The directive token is ``<KEYWORD><EDITION>``, e.g. ``DEPARE01``. Keywords
without a registered procedure (sub-procedures, unimplemented procedures and
anything outside the catalogue) take the fallback: the directive is dropped
and the ordinary instructions are committed unchanged.
"""

from __future__ import annotations

import logging

from s52engine.engine.catalogue import CSKeyword
from s52engine.engine.collection import FeatureCollection
from s52engine.engine.context import EvaluationContext
from s52engine.engine.errors import DirectiveError
from s52engine.engine.registry import ProcedureRegistry, get_registry
from s52engine.models.feature import Feature
from s52engine.models.instruction import Instruction
from s52engine.models.mariner import MarinerSettings

logger = logging.getLogger(__name__)

KEYWORD_LENGTH = 6


def split_directive(feature: Feature) -> tuple[Instruction, list[Instruction]]:
    """Separate the single CS directive from the ordinary instructions."""
    directives = [i for i in feature.instructions if i.is_conditional]
    if len(directives) != 1:
        raise DirectiveError(
            f"{feature.id}: expected exactly one CS directive, found {len(directives)}"
        )
    ordinary = [i for i in feature.instructions if not i.is_conditional]
    return directives[0], ordinary


def parse_directive(token: str) -> tuple[CSKeyword | None, str]:
    """Return (keyword, edition) for a directive token; keyword is None when unknown."""
    token = token.strip()
    keyword = CSKeyword.lookup(token[:KEYWORD_LENGTH])
    edition = token[KEYWORD_LENGTH:][-1:]
    return keyword, edition


class Dispatcher:
    """Evaluates one feature at a time against the procedure registry."""

    def __init__(
        self,
        collection: FeatureCollection,
        mariner: MarinerSettings | None = None,
        registry: ProcedureRegistry | None = None,
    ) -> None:
        self.collection = collection
        self.mariner = mariner or MarinerSettings()
        self.registry = registry or get_registry()

    def dispatch(self, feature: Feature, rendered: list[Feature] | None = None) -> Feature:
        """Evaluate ``feature`` in place and return it.

        Raises DirectiveError when the feature does not carry exactly one
        directive. PreconditionError from a procedure propagates and leaves
        the feature untouched.
        """
        directive, ordinary = split_directive(feature)
        keyword, edition = parse_directive(directive.params)

        spec = self.registry.get(keyword) if keyword is not None else None
        if spec is None:
            logger.debug("%s: no procedure for %s, passing %d instructions through",
                         feature.id, directive.params, len(ordinary))
            feature.instructions = ordinary
            return feature

        ctx = EvaluationContext(
            feature=feature,
            collection=self.collection,
            mariner=self.mariner,
            edition=edition,
            rendered=rendered if rendered is not None else [],
            instructions=ordinary,
        )
        spec.fn(ctx)

        feature.instructions = ctx.instructions
        ctx.patch.apply(feature.metadata)
        logger.debug("%s: %s emitted %d instructions", feature.id, keyword.name, len(ctx.instructions))
        return feature
