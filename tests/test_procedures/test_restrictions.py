"""Tests for RESARE and RESTRN."""

import pytest

from s52engine.engine.collection import FeatureCollection
from s52engine.engine.dispatcher import Dispatcher
from s52engine.models.feature import FeatureGeometry
from s52engine.models.instruction import InstructionType
from s52engine.models.mariner import BoundaryStyle, MarinerSettings

SYMBOLIZED = MarinerSettings(area_style=BoundaryStyle.SYMBOLIZED)


@pytest.fixture
def restricted_area(make_feature):
    def _make(**attributes):
        return make_feature(
            "RESARE",
            FeatureGeometry.area([(0, 0), (4, 0), (4, 4), (0, 4)]),
            attributes,
            "CS(RESARE02)",
        )

    return _make


class TestResare:
    def test_entry_restricted_plain_boundary(self, restricted_area, evaluate):
        area = restricted_area(RESTRN="7")
        assert evaluate(area) == ["SY(ENTRES51)", "LS(DASH,2,CHMGD)"]
        assert area.metadata.priority == 6

    @pytest.mark.parametrize(
        "attributes, symbol, boundary",
        [
            ({"RESTRN": "7", "CATREA": "1"}, "ENTRES61", "CTYARE51"),
            ({"RESTRN": "8", "CATREA": "4"}, "ENTRES71", "CTYARE51"),
            ({"RESTRN": "1,2"}, "ACHRES51", "ACHRES51"),
            ({"RESTRN": "2", "CATREA": "12"}, "ACHRES61", "ACHRES51"),
            ({"RESTRN": "1,11"}, "ACHRES71", "ACHRES51"),
            ({"RESTRN": "5"}, "FSHRES51", "FSHRES51"),
            ({"RESTRN": "24"}, "FSHRES51", "FSHRES51"),
            # 24 does not lift fishing to the qualified tier
            ({"RESTRN": "3,24"}, "FSHRES51", "FSHRES51"),
            ({"RESTRN": "6", "CATREA": "9"}, "FSHRES61", "FSHRES51"),
            ({"RESTRN": "3", "CATREA": "20"}, "FSHRES71", "FSHRES51"),
            ({"RESTRN": "27"}, "CTYARE51", "CTYARE51"),
            ({"RESTRN": "13,9"}, "CTYARE71", "CTYARE51"),
            ({"RESTRN": "15"}, "INFARE51", "CTYARE51"),
            ({"RESTRN": "28"}, "RSRDEF51", "CTYARE51"),
        ],
    )
    def test_restriction_ladder(self, restricted_area, evaluate, attributes, symbol, boundary):
        assert evaluate(restricted_area(**attributes), settings=SYMBOLIZED) == [f"SY({symbol})", f"LC({boundary})"]

    @pytest.mark.parametrize(
        "catrea, symbol",
        [("1", "CTYARE51"), ("1,4", "CTYARE71"), ("4", "INFARE51"), ("2", "RSRDEF51")],
    )
    def test_category_only(self, restricted_area, evaluate, catrea, symbol):
        area = restricted_area(CATREA=catrea)
        assert evaluate(area) == [f"SY({symbol})", "LS(DASH,2,CHMGD)"]
        assert area.metadata.priority == 6

    def test_no_attributes(self, restricted_area, evaluate):
        area = restricted_area()
        assert evaluate(area) == ["SY(RSRDEF51)", "LS(DASH,2,CHMGD)"]
        assert area.metadata.priority == 6

    @pytest.mark.parametrize(
        "attributes",
        [{}, {"RESTRN": "7"}, {"RESTRN": "1"}, {"RESTRN": "3"}, {"RESTRN": "13"}, {"RESTRN": "9"},
         {"RESTRN": "28"}, {"CATREA": "1"}, {"CATREA": "4"}, {"RESTRN": "7,9", "CATREA": "1,4"}],
    )
    def test_one_symbol_and_boundary_by_style_only(self, restricted_area, attributes):
        for mariner, boundary_type in ((MarinerSettings(), InstructionType.LS), (SYMBOLIZED, InstructionType.LC)):
            area = restricted_area(**attributes)
            Dispatcher(FeatureCollection([area]), mariner).dispatch(area)
            types = [i.type for i in area.instructions]
            assert types == [InstructionType.SY, boundary_type]
            assert area.metadata.priority == 6


class TestRestrn:
    def test_restriction_symbol(self, make_feature, evaluate):
        cable = make_feature("CBLSUB", FeatureGeometry.line([(0, 0), (5, 5)]), {"RESTRN": "1"}, "LS(DASH,2,CHMGD);CS(RESTRN01)")
        assert evaluate(cable) == ["LS(DASH,2,CHMGD)", "SY(ACHRES51)"]

    def test_no_restriction(self, make_feature, evaluate):
        cable = make_feature("CBLSUB", FeatureGeometry.line([(0, 0), (5, 5)]), {}, "LS(DASH,2,CHMGD);CS(RESTRN01)")
        assert evaluate(cable) == ["LS(DASH,2,CHMGD)"]
