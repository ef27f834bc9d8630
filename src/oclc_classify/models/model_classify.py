"""
Pydantic models for interpreted Classify results.

These are the data contracts handed to callers. Callers receive these
models; they never see the raw XML-shaped ClassifyResponse.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from oclc_classify.models.model_classify_raw import RecommendationKind, Work


class ClassificationRecommendation(BaseModel):
    """Candidate class numbers for one scheme, grouped by recommendation kind.

    Every kind is always present; an empty list means the service returned
    no recommendation of that kind.
    """

    model_config = ConfigDict(frozen=True)

    most_popular: list[str] = []
    most_recent: list[str] = []
    latest_edition: list[str] = []

    def for_kind(self, kind: RecommendationKind) -> list[str]:
        if kind is RecommendationKind.MOST_POPULAR:
            return self.most_popular
        if kind is RecommendationKind.MOST_RECENT:
            return self.most_recent
        return self.latest_edition


class Recommendations(BaseModel):
    """Dewey and Library of Congress recommendations for one work."""

    model_config = ConfigDict(frozen=True)

    dewey_decimal: ClassificationRecommendation
    library_of_congress: ClassificationRecommendation


class SingleWorkSummary(BaseModel):
    """Exactly one authoritative work plus its classification guidance."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["single_work_summary"] = "single_work_summary"
    work: Work
    recommendations: Recommendations


class MultiWork(BaseModel):
    """Candidate works for an identifier; no recommendations."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["multi_work"] = "multi_work"
    works: list[Work]


ClassifyOutcome = Annotated[
    SingleWorkSummary | MultiWork, Field(discriminator="kind")
]

ClassifyOutcomeAdapter: TypeAdapter[SingleWorkSummary | MultiWork] = TypeAdapter(
    ClassifyOutcome
)
