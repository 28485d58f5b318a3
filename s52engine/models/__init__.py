"""Data model for chart features, instructions and mariner settings."""

from s52engine.models.feature import (
    SCAMIN_INFINITE,
    DisplayCategory,
    Feature,
    FeatureGeometry,
    GeometryType,
    MetadataPatch,
    RenderMetadata,
)
from s52engine.models.instruction import Instruction, InstructionType, parse_instructions
from s52engine.models.mariner import BoundaryStyle, ColorScheme, MarinerSettings, PointStyle

__all__ = [
    "SCAMIN_INFINITE",
    "BoundaryStyle",
    "ColorScheme",
    "DisplayCategory",
    "Feature",
    "FeatureGeometry",
    "GeometryType",
    "Instruction",
    "InstructionType",
    "MarinerSettings",
    "MetadataPatch",
    "PointStyle",
    "RenderMetadata",
    "parse_instructions",
]
