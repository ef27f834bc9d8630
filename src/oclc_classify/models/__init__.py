"""Data models for oclc_classify."""

from oclc_classify.models.model_classify import (
    ClassificationRecommendation,
    ClassifyOutcome,
    MultiWork,
    Recommendations,
    SingleWorkSummary,
)
from oclc_classify.models.model_classify_raw import (
    ClassifyResponse,
    IdentifierType,
    RecommendationKind,
    Work,
)

__all__ = [
    "ClassificationRecommendation",
    "ClassifyOutcome",
    "ClassifyResponse",
    "IdentifierType",
    "MultiWork",
    "RecommendationKind",
    "Recommendations",
    "SingleWorkSummary",
    "Work",
]
