"""Chart feature model — attributes, geometry and rendering metadata.

Per-feature attribute values live in ``Feature.attributes`` as ordered lists of
raw strings; typed access goes through the helper methods so every procedure
reads them the same way. Rendering metadata is only ever changed through a
``MetadataPatch`` applied by the dispatcher.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field, fields

from shapely.geometry import LineString, Point, Polygon
from shapely.geometry.base import BaseGeometry

from s52engine.models.instruction import Instruction, parse_instructions

# Scale-minimum value meaning "visible at every scale".
SCAMIN_INFINITE = 1499999.0


class GeometryType(enum.Enum):
    POINT = "P"
    LINE = "L"
    AREA = "A"
    NONE = "N"


class DisplayCategory(enum.IntEnum):
    DISPLAYBASE = 0
    STANDARD = 1
    OTHER = 2
    MARINERS_OTHER = 3
    MARINERS_STANDARD = 4


@dataclass
class FeatureGeometry:
    """Geometry of a feature: a shapely shape plus the sounding depth for soundings."""

    kind: GeometryType
    shape: BaseGeometry | None = None
    depth: float = 0.0

    @classmethod
    def point(cls, x: float, y: float, depth: float = 0.0) -> FeatureGeometry:
        return cls(GeometryType.POINT, Point(x, y), depth)

    @classmethod
    def line(cls, coords: list[tuple[float, float]]) -> FeatureGeometry:
        return cls(GeometryType.LINE, LineString(coords))

    @classmethod
    def area(cls, coords: list[tuple[float, float]]) -> FeatureGeometry:
        return cls(GeometryType.AREA, Polygon(coords))

    @classmethod
    def none(cls) -> FeatureGeometry:
        return cls(GeometryType.NONE)

    @property
    def is_empty(self) -> bool:
        return self.shape is None or self.shape.is_empty

    @property
    def location(self) -> Point | None:
        """Point used for containment tests. Non-point shapes use an interior point."""
        if self.is_empty:
            return None
        if self.kind is GeometryType.POINT:
            return self.shape
        return self.shape.representative_point()

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        if self.is_empty:
            return (0.0, 0.0, 0.0, 0.0)
        return tuple(float(v) for v in self.shape.bounds)


@dataclass
class RenderMetadata:
    priority: int = 0
    display_category: DisplayCategory = DisplayCategory.OTHER
    viewing_group: str = ""
    over_radar: bool = False
    scamin: float = SCAMIN_INFINITE


@dataclass(frozen=True)
class MetadataPatch:
    """Pending changes to a feature's RenderMetadata. ``None`` fields are left alone."""

    priority: int | None = None
    display_category: DisplayCategory | None = None
    viewing_group: str | None = None
    over_radar: bool | None = None
    scamin: float | None = None

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def merge(self, other: MetadataPatch) -> MetadataPatch:
        """Return a patch where values set in ``other`` override ours."""
        values = {}
        for f in fields(self):
            theirs = getattr(other, f.name)
            values[f.name] = theirs if theirs is not None else getattr(self, f.name)
        return MetadataPatch(**values)

    def apply(self, metadata: RenderMetadata) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                setattr(metadata, f.name, value)


def split_attribute_value(raw: str) -> list[str]:
    """Split a raw S-57 attribute string (``"1,2/3"``) into its ordered values."""
    values: list[str] = []
    for part in raw.split(","):
        part = part.strip()
        if "/" in part:
            values.extend(p.strip() for p in part.split("/"))
        else:
            values.append(part)
    return values


@dataclass
class Feature:
    """A single chart feature as seen by the symbology engine."""

    acronym: str
    geometry: FeatureGeometry
    attributes: dict[str, list[str]] = field(default_factory=dict)
    instructions: list[Instruction] = field(default_factory=list)
    metadata: RenderMetadata = field(default_factory=RenderMetadata)
    # Display priority group; group 1 features take part in depth/coverage logic.
    group: int = 2
    id: str = ""

    @classmethod
    def from_s57(
        cls,
        acronym: str,
        geometry: FeatureGeometry,
        attributes: dict[str, str] | None = None,
        instructions: str | list[Instruction] = "",
        *,
        priority: int = 0,
        display_category: DisplayCategory = DisplayCategory.OTHER,
        viewing_group: str = "",
        over_radar: bool = False,
        group: int = 2,
        id: str = "",
    ) -> Feature:
        """Build a feature from raw attribute strings and a lookup-table instruction field."""
        parsed = {code: split_attribute_value(raw) for code, raw in (attributes or {}).items()}
        if isinstance(instructions, str):
            instructions = parse_instructions(instructions)
        scamin_values = [v for v in parsed.get("SCAMIN", []) if v]
        metadata = RenderMetadata(
            priority=priority,
            display_category=display_category,
            viewing_group=viewing_group,
            over_radar=over_radar,
            scamin=float(scamin_values[0]) if scamin_values else SCAMIN_INFINITE,
        )
        return cls(
            acronym=acronym,
            geometry=geometry,
            attributes=parsed,
            instructions=list(instructions),
            metadata=metadata,
            group=group,
            id=id or acronym,
        )

    @property
    def kind(self) -> GeometryType:
        return self.geometry.kind

    @property
    def is_group_one(self) -> bool:
        return self.group == 1

    @property
    def has_directive(self) -> bool:
        return any(i.is_conditional for i in self.instructions)

    # --- attribute access ---

    def values(self, code: str) -> list[str]:
        return [v for v in self.attributes.get(code, []) if v != ""]

    def has_attribute(self, code: str) -> bool:
        """True when the attribute is present with at least one non-empty value."""
        return bool(self.values(code))

    def int_values(self, code: str) -> list[int]:
        return [int(float(v)) for v in self.values(code)]

    def first_int(self, code: str, default: int | None = None) -> int | None:
        values = self.values(code)
        return int(float(values[0])) if values else default

    def first_float(self, code: str, default: float | None = math.nan) -> float | None:
        values = self.values(code)
        return float(values[0]) if values else default
