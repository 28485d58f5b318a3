"""FeatureCollection — read-only spatial queries over the chart's features.

Group-one bounding boxes are kept in a numpy array so the linear scans in
DEPVAL / UDWHAZ only run shapely predicates on features whose boxes overlap.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray

from s52engine.models.feature import Feature, GeometryType


class FeatureCollection:
    """Stable snapshot of a chart's features used during a render pass."""

    def __init__(self, features: Iterable[Feature] = ()) -> None:
        self._features: tuple[Feature, ...] = tuple(features)
        self._group_one: tuple[Feature, ...] = tuple(f for f in self._features if f.is_group_one)
        if self._group_one:
            self._bounds: NDArray[np.float64] = np.array(
                [f.geometry.bounds for f in self._group_one], dtype=np.float64
            )
        else:
            self._bounds = np.empty((0, 4), dtype=np.float64)

    def __len__(self) -> int:
        return len(self._features)

    def __iter__(self):
        return iter(self._features)

    @property
    def features(self) -> tuple[Feature, ...]:
        return self._features

    def group_one(self) -> tuple[Feature, ...]:
        return self._group_one

    def group_one_near(self, feature: Feature) -> list[Feature]:
        """Group-one features whose bounding box overlaps ``feature``'s, in collection order."""
        if feature.geometry.is_empty or len(self._group_one) == 0:
            return []
        xmin, ymin, xmax, ymax = feature.geometry.bounds
        b = self._bounds
        mask = (b[:, 0] <= xmax) & (b[:, 2] >= xmin) & (b[:, 1] <= ymax) & (b[:, 3] >= ymin)
        return [self._group_one[i] for i in np.flatnonzero(mask)]

    @staticmethod
    def intersects(a: Feature, b: Feature) -> bool:
        """Geometric overlap test. Two points never intersect; empty geometry never does."""
        if a.kind is GeometryType.NONE or b.kind is GeometryType.NONE:
            return False
        if a.geometry.is_empty or b.geometry.is_empty:
            return False
        if a.kind is GeometryType.POINT and b.kind is GeometryType.POINT:
            return False
        return bool(a.geometry.shape.intersects(b.geometry.shape))

    @staticmethod
    def contains_point(area: Feature, feature: Feature) -> bool:
        """True when ``area`` is an area feature containing ``feature``'s location."""
        if area.kind is not GeometryType.AREA or area.geometry.is_empty:
            return False
        location = feature.geometry.location
        if location is None:
            return False
        return bool(area.geometry.shape.contains(location))
