"""Shared test fixtures."""

from __future__ import annotations

import os

import pytest

from s52engine.app import register_procedures
from s52engine.engine.collection import FeatureCollection
from s52engine.engine.dispatcher import Dispatcher
from s52engine.models.feature import Feature, FeatureGeometry
from s52engine.models.mariner import MarinerSettings

# Import every procedure module once so the global registry is populated
register_procedures()


def square(x0: float, y0: float, size: float) -> list[tuple[float, float]]:
    return [(x0, y0), (x0 + size, y0), (x0 + size, y0 + size), (x0, y0 + size)]


@pytest.fixture(autouse=True)
def _clean_mariner_env(monkeypatch):
    """Keep a developer's S52_MARINER_* variables out of the tests."""
    for key in list(os.environ):
        if key.startswith("S52_MARINER_"):
            monkeypatch.delenv(key)


@pytest.fixture
def mariner() -> MarinerSettings:
    return MarinerSettings()


@pytest.fixture
def make_feature():
    """Factory: ``make_feature("OBSTRN", FeatureGeometry.point(5, 5), {"VALSOU": "15"}, "CS(OBSTRN04)")``."""

    def _make(
        acronym: str,
        geometry: FeatureGeometry | None = None,
        attributes: dict[str, str] | None = None,
        instructions: str = "",
        **kwargs,
    ) -> Feature:
        return Feature.from_s57(
            acronym,
            geometry or FeatureGeometry.point(5.0, 5.0),
            attributes or {},
            instructions,
            **kwargs,
        )

    return _make


@pytest.fixture
def depth_area():
    """Factory for a group-one square depth area, 10x10 at the origin by default."""

    def _make(
        drval1: float | None,
        drval2: float | None = None,
        acronym: str = "DEPARE",
        origin: tuple[float, float] = (0.0, 0.0),
        size: float = 10.0,
    ) -> Feature:
        attributes = {}
        if drval1 is not None:
            attributes["DRVAL1"] = str(drval1)
        if drval2 is not None:
            attributes["DRVAL2"] = str(drval2)
        return Feature.from_s57(
            acronym,
            FeatureGeometry.area(square(origin[0], origin[1], size)),
            attributes,
            "AP(NODATA03)" if acronym == "UNSARE" else "CS(DEPARE01)",
            group=1,
            id=f"{acronym}:{drval1}",
        )

    return _make


@pytest.fixture
def evaluate(mariner):
    """Dispatch ``feature`` against ``others`` and return its instruction strings."""

    def _evaluate(feature: Feature, others: list[Feature] | None = None, settings: MarinerSettings | None = None):
        collection = FeatureCollection([*(others or []), feature])
        Dispatcher(collection, settings or mariner).dispatch(feature)
        return [str(i) for i in feature.instructions]

    return _evaluate
