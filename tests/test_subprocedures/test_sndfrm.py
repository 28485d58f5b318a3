"""Tests for SNDFRM."""

from s52engine.engine.subprocedures import sndfrm
from s52engine.models.feature import FeatureGeometry
from s52engine.models.mariner import MarinerSettings


def _names(instructions):
    return [i.params for i in instructions]


def test_prefix_by_safety_contour(make_feature, mariner):
    feature = make_feature("SOUNDG")
    assert _names(sndfrm(5.5, mariner, feature)) == ["SOUNDS15", "SOUNDS55"]
    assert _names(sndfrm(8.0, mariner, feature)) == ["SOUNDS18", "SOUNDS50"]
    assert _names(sndfrm(12.0, mariner, feature)) == ["SOUNDG11", "SOUNDG02"]
    deeper = MarinerSettings(safety_contour=15.0, deep_contour=20.0)
    assert _names(sndfrm(12.0, deeper, feature)) == ["SOUNDS11", "SOUNDS02"]


def test_drying_height(make_feature, mariner):
    assert _names(sndfrm(-2.5, mariner, make_feature("SOUNDG"))) == ["SOUNDSA1", "SOUNDS12", "SOUNDS55"]


def test_swept_and_low_confidence_prefixes(make_feature, mariner):
    feature = make_feature("SOUNDG", attributes={"TECSOU": "6", "QUASOU": "4"})
    assert _names(sndfrm(25.0, mariner, feature)) == ["SOUNDGB1", "SOUNDGC2", "SOUNDG12", "SOUNDG05"]


def test_low_confidence_sources(make_feature, mariner):
    for attributes in ({"STATUS": "18"}, {"QUASOU": "9"}, {"QUAPOS": "5"}):
        feature = make_feature("SOUNDG", attributes=attributes)
        assert _names(sndfrm(5.0, mariner, feature))[0] == "SOUNDSC2"

    confident = make_feature("SOUNDG", attributes={"STATUS": "1", "QUASOU": "1", "QUAPOS": "1"})
    assert _names(sndfrm(5.0, mariner, confident)) == ["SOUNDS15", "SOUNDS50"]


def test_band_lengths(make_feature, mariner):
    feature = make_feature("SOUNDG", FeatureGeometry.point(0, 0))
    assert len(sndfrm(5.5, mariner, feature)) == 2
    assert len(sndfrm(123.4, mariner, feature)) == 3
    assert len(sndfrm(9999, mariner, feature)) == 4
