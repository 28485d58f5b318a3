"""S-52 conditional symbology engine for ENC chart features."""

from s52engine.app import create_engine, register_procedures
from s52engine.engine.collection import FeatureCollection
from s52engine.engine.dispatcher import Dispatcher
from s52engine.engine.errors import DirectiveError, PreconditionError, S52EngineError
from s52engine.engine.pipeline import PassResult, RenderPass, create_render_pass
from s52engine.models import (
    DisplayCategory,
    Feature,
    FeatureGeometry,
    GeometryType,
    Instruction,
    MarinerSettings,
    parse_instructions,
)

__version__ = "0.1.0"

__all__ = [
    "DirectiveError",
    "DisplayCategory",
    "Dispatcher",
    "Feature",
    "FeatureCollection",
    "FeatureGeometry",
    "GeometryType",
    "Instruction",
    "MarinerSettings",
    "PassResult",
    "PreconditionError",
    "RenderPass",
    "S52EngineError",
    "create_engine",
    "create_render_pass",
    "register_procedures",
]
