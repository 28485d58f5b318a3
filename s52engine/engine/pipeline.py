"""Render pass orchestrator — evaluates every feature of a chart once.

Per feature, in chart order:
  - drop features with no instructions at all
  - drop features under the display scale (group-one features always stay)
  - drop SOUNDG when the mariner has soundings switched off
  - evaluate the CS directive, if any
  - drop features whose display category the mariner has not selected
Each pass evaluates a copy of the feature, so the chart snapshot keeps its
directive and lookup metadata for the next pass. Accepted copies are appended
to the rendered list, which later procedures see through
``EvaluationContext.rendered``.
"""

from __future__ import annotations

import dataclasses
import logging
import time
from dataclasses import dataclass, field

from s52engine.engine.collection import FeatureCollection
from s52engine.engine.dispatcher import Dispatcher
from s52engine.engine.errors import PreconditionError
from s52engine.engine.registry import ProcedureRegistry
from s52engine.models.feature import Feature
from s52engine.models.mariner import MarinerSettings

logger = logging.getLogger(__name__)


def _pass_copy(feature: Feature) -> Feature:
    """Copy of ``feature`` whose instructions and metadata can be replaced freely."""
    return dataclasses.replace(
        feature,
        instructions=list(feature.instructions),
        metadata=dataclasses.replace(feature.metadata),
    )


@dataclass
class PassResult:
    rendered: list[Feature] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    # feature id -> error message
    errors: dict[str, str] = field(default_factory=dict)
    elapsed_ms: float = 0.0

    def paint_order(self) -> list[Feature]:
        """Rendered features sorted by priority, lowest first; ties keep chart order."""
        return sorted(self.rendered, key=lambda f: f.metadata.priority)


class RenderPass:
    """One evaluation pass over a stable snapshot of a chart's features."""

    def __init__(
        self,
        features: list[Feature] | FeatureCollection,
        mariner: MarinerSettings | None = None,
        registry: ProcedureRegistry | None = None,
    ) -> None:
        if isinstance(features, FeatureCollection):
            self.collection = features
        else:
            self.collection = FeatureCollection(features)
        self.mariner = mariner or MarinerSettings()
        self.dispatcher = Dispatcher(self.collection, self.mariner, registry)

    def run(self, scale: float | None = None) -> PassResult:
        """Evaluate every feature. ``scale`` enables the SCAMIN filter."""
        start = time.perf_counter()
        result = PassResult()

        for feature in self.collection:
            if not self._accepts(feature, scale):
                result.skipped.append(feature.id)
                continue

            feature = _pass_copy(feature)

            if feature.has_directive:
                t0 = time.perf_counter()
                try:
                    self.dispatcher.dispatch(feature, result.rendered)
                except PreconditionError as e:
                    result.errors[feature.id] = str(e)
                    logger.warning("  %s FAILED: %s", feature.id, e)
                    continue
                logger.debug("  %s evaluated in %.3fms", feature.id, (time.perf_counter() - t0) * 1000)

            if feature.metadata.display_category > self.mariner.display_category:
                result.skipped.append(feature.id)
                continue

            result.rendered.append(feature)

        result.elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "Render pass complete: %d/%d features in %.0fms (%d errors)",
            len(result.rendered),
            len(self.collection),
            result.elapsed_ms,
            len(result.errors),
        )
        return result

    def _accepts(self, feature: Feature, scale: float | None) -> bool:
        if not feature.instructions:
            return False
        if scale is not None and feature.metadata.scamin <= scale and not feature.is_group_one:
            return False
        if not self.mariner.soundings and feature.acronym == "SOUNDG":
            return False
        return True


def create_render_pass(
    features: list[Feature] | FeatureCollection,
    mariner: MarinerSettings | None = None,
) -> RenderPass:
    """Factory function for creating a render pass over the global registry."""
    return RenderPass(features, mariner=mariner)
