"""Tests for directive extraction and routing."""

import pytest

from s52engine.engine.catalogue import CSKeyword
from s52engine.engine.collection import FeatureCollection
from s52engine.engine.context import EvaluationContext
from s52engine.engine.dispatcher import Dispatcher, parse_directive, split_directive
from s52engine.engine.errors import DirectiveError, PreconditionError
from s52engine.engine.registry import ProcedureRegistry, ProcedureSpec
from s52engine.models.feature import DisplayCategory, MetadataPatch
from s52engine.models.instruction import cs, ls, sy


def test_parse_directive():
    assert parse_directive("DEPARE01") == (CSKeyword.DEPARE, "1")
    assert parse_directive("OBSTRN04") == (CSKeyword.OBSTRN, "4")
    assert parse_directive("SEABED01") == (CSKeyword.SEABED, "1")
    assert parse_directive("FOOBAR01") == (None, "1")
    assert parse_directive("XYZ") == (None, "")


def test_split_directive(make_feature):
    feature = make_feature("DEPARE", instructions="AC(DEPVS);CS(DEPARE01);LS(SOLD,1,DEPSC)")
    directive, ordinary = split_directive(feature)
    assert directive == cs("DEPARE01")
    assert [str(i) for i in ordinary] == ["AC(DEPVS)", "LS(SOLD,1,DEPSC)"]


def test_missing_directive_raises(make_feature):
    feature = make_feature("BOYLAT", instructions="SY(BOYLAT13)")
    with pytest.raises(DirectiveError, match="found 0"):
        split_directive(feature)


def test_two_directives_raise(make_feature):
    feature = make_feature("DEPARE", instructions="CS(DEPARE01);CS(SEABED01)")
    with pytest.raises(DirectiveError, match="found 2"):
        Dispatcher(FeatureCollection([feature])).dispatch(feature)


def test_directive_error_is_a_precondition_error():
    assert issubclass(DirectiveError, PreconditionError)
    assert issubclass(PreconditionError, ValueError)


@pytest.mark.parametrize("token", ["SEABED01", "UDWHAZ03", "LIGHTS05", "QUAPOS01", "FOOBAR01"])
def test_fallback_passes_ordinary_instructions_through(make_feature, token):
    feature = make_feature("LIGHTS", instructions=f"SY(LIGHTS11);CS({token});LS(SOLD,1,CHBLK)")
    Dispatcher(FeatureCollection([feature])).dispatch(feature)
    assert [str(i) for i in feature.instructions] == ["SY(LIGHTS11)", "LS(SOLD,1,CHBLK)"]
    assert not feature.has_directive


def test_procedure_receives_context(make_feature, mariner):
    seen = {}

    def record(ctx: EvaluationContext) -> None:
        seen["edition"] = ctx.edition
        seen["buffer"] = list(ctx.instructions)
        seen["rendered"] = ctx.rendered
        ctx.emit(sy("TEST01"), None)
        ctx.update(MetadataPatch(priority=5, display_category=DisplayCategory.STANDARD))

    reg = ProcedureRegistry()
    reg.register(ProcedureSpec(keyword=CSKeyword.DEPCNT, fn=record))
    feature = make_feature("DEPCNT", instructions="LS(SOLD,1,DEPCN);CS(DEPCNT03)")
    rendered = [make_feature("DEPARE")]

    Dispatcher(FeatureCollection([feature]), mariner, reg).dispatch(feature, rendered)

    assert seen["edition"] == "3"
    assert seen["buffer"] == [ls("SOLD,1,DEPCN")]
    assert seen["rendered"] is rendered
    assert [str(i) for i in feature.instructions] == ["LS(SOLD,1,DEPCN)", "SY(TEST01)"]
    assert feature.metadata.priority == 5
    assert feature.metadata.display_category is DisplayCategory.STANDARD


def test_failed_procedure_leaves_feature_untouched(make_feature):
    def broken(ctx: EvaluationContext) -> None:
        ctx.emit(sy("HALF01"))
        ctx.update(MetadataPatch(priority=9))
        raise PreconditionError("wrong feature type")

    reg = ProcedureRegistry()
    reg.register(ProcedureSpec(keyword=CSKeyword.OBSTRN, fn=broken))
    feature = make_feature("WRECKS", instructions="CS(OBSTRN04)", priority=2)

    with pytest.raises(PreconditionError):
        Dispatcher(FeatureCollection([feature]), registry=reg).dispatch(feature)
    assert feature.instructions == [cs("OBSTRN04")]
    assert feature.metadata.priority == 2


def test_dispatch_is_idempotent_over_fresh_features(make_feature, depth_area):
    area = depth_area(20.0)

    def build():
        return make_feature("OBSTRN", attributes={"VALSOU": "4"}, instructions="CS(OBSTRN04)")

    first, second = build(), build()
    Dispatcher(FeatureCollection([area, first])).dispatch(first)
    Dispatcher(FeatureCollection([area, second])).dispatch(second)
    assert first.instructions == second.instructions
    assert first.metadata == second.metadata
