"""Unit tests for Classify models."""

import pytest
from pydantic import ValidationError

from oclc_classify.models.model_classify import (
    ClassificationRecommendation,
    ClassifyOutcomeAdapter,
    MultiWork,
    Recommendations,
    SingleWorkSummary,
)
from oclc_classify.models.model_classify_raw import (
    IdentifierType,
    RecommendationKind,
    RecommendationStat,
    Work,
)

WORK = Work(
    author="Dibdin, Michael",
    editions="66",
    format="Book",
    holdings="1278",
    hyr="2020",
    itemtype="itemtype-book",
    lyr="1996",
    owi="570898",
    schemes="DDC LCC",
    title="Così fan tutti : an Aurelio Zen mystery",
    wi="570898",
)


class TestWork:
    def test_optional_fields_default_to_none(self):
        work = Work(
            author="foo",
            editions="28",
            format="Book",
            holdings="2183",
            itemtype="itemtype-book",
            owi="47289247",
            title="FooBar",
        )

        assert work.hyr is None
        assert work.lyr is None
        assert work.schemes is None
        assert work.wi is None
        assert work.scheme_list == []

    def test_numeric_fields_stay_text(self):
        assert WORK.editions == "66"
        assert WORK.holdings == "1278"
        assert WORK.hyr == "2020"

    def test_scheme_list_splits_on_whitespace(self):
        assert WORK.scheme_list == ["DDC", "LCC"]

    def test_missing_required_field_rejected(self):
        with pytest.raises(ValidationError):
            Work.model_validate({"author": "foo", "title": "FooBar"})

    def test_unknown_attributes_ignored(self):
        work = Work.model_validate({**WORK.model_dump(), "eholdings": "197"})

        assert work == WORK

    def test_work_is_frozen(self):
        with pytest.raises(ValidationError):
            WORK.title = "Other"


class TestRecommendationStat:
    def test_only_holdings_required(self):
        stat = RecommendationStat(holdings="2")

        assert stat.nsfa is None
        assert stat.sfa is None
        assert stat.sf2 is None

    def test_holdings_required(self):
        with pytest.raises(ValidationError):
            RecommendationStat.model_validate({"sfa": "800"})


class TestEnums:
    def test_recommendation_kind_values_are_tag_names(self):
        assert RecommendationKind("mostPopular") is RecommendationKind.MOST_POPULAR
        assert RecommendationKind("mostRecent") is RecommendationKind.MOST_RECENT
        assert RecommendationKind("latestEdition") is RecommendationKind.LATEST_EDITION

    def test_identifier_type_default_is_stdnbr(self):
        assert IdentifierType("stdnbr") is IdentifierType.STDNBR
        assert {t.value for t in IdentifierType} >= {"isbn", "issn", "oclc"}


class TestClassificationRecommendation:
    def test_defaults_are_empty_lists(self):
        rec = ClassificationRecommendation()

        assert rec.most_popular == []
        assert rec.most_recent == []
        assert rec.latest_edition == []

    def test_for_kind(self):
        rec = ClassificationRecommendation(
            most_popular=["a"], most_recent=["b"], latest_edition=["c"]
        )

        assert rec.for_kind(RecommendationKind.MOST_POPULAR) == ["a"]
        assert rec.for_kind(RecommendationKind.MOST_RECENT) == ["b"]
        assert rec.for_kind(RecommendationKind.LATEST_EDITION) == ["c"]


class TestClassifyOutcome:
    def test_single_work_summary_round_trips_through_json(self):
        outcome = SingleWorkSummary(
            work=WORK,
            recommendations=Recommendations(
                dewey_decimal=ClassificationRecommendation(most_popular=["823.914"]),
                library_of_congress=ClassificationRecommendation(),
            ),
        )

        restored = ClassifyOutcomeAdapter.validate_json(outcome.model_dump_json())

        assert isinstance(restored, SingleWorkSummary)
        assert restored == outcome

    def test_multi_work_round_trips_through_json(self):
        outcome = MultiWork(works=[WORK])

        restored = ClassifyOutcomeAdapter.validate_python(outcome.model_dump())

        assert isinstance(restored, MultiWork)
        assert restored.works[0].wi == "570898"

    def test_discriminator_is_fixed_per_variant(self):
        assert MultiWork(works=[]).kind == "multi_work"
        with pytest.raises(ValidationError):
            MultiWork(kind="single_work_summary", works=[])

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            ClassifyOutcomeAdapter.validate_python({"kind": "empty"})
