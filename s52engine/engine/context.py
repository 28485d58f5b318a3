"""EvaluationContext — the single mutable state object for one feature's evaluation.

Procedures append to ``instructions`` and accumulate rendering changes in
``patch``. Nothing here touches the feature itself; the dispatcher commits
both at the end so only the evaluated feature is ever mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from s52engine.engine.collection import FeatureCollection
from s52engine.models.feature import Feature, MetadataPatch
from s52engine.models.instruction import Instruction
from s52engine.models.mariner import MarinerSettings


@dataclass
class EvaluationContext:
    feature: Feature
    collection: FeatureCollection
    mariner: MarinerSettings
    # Edition digit of the CS directive, e.g. "1" for DEPARE01
    edition: str = ""
    # Features already accepted in this render pass
    rendered: list[Feature] = field(default_factory=list)
    # Ordinary instructions carried through, then everything the procedure emits
    instructions: list[Instruction] = field(default_factory=list)
    patch: MetadataPatch = field(default_factory=MetadataPatch)

    def emit(self, *instructions: Instruction | None) -> None:
        """Append instructions in order, skipping ``None`` results of sub-procedures."""
        self.instructions.extend(i for i in instructions if i is not None)

    def update(self, patch: MetadataPatch) -> None:
        self.patch = self.patch.merge(patch)
