"""
Recommendation normalizer.

Flattens the <recommendations> block into per-scheme, per-kind lists of
candidate class numbers. The result does not depend on which response code
produced the block.
"""

from oclc_classify.models.model_classify import (
    ClassificationRecommendation,
    Recommendations,
)
from oclc_classify.models.model_classify_raw import (
    RawRecommendations,
    RecommendationKind,
    RecommendationSet,
)


def _filing_forms(nsfa: str | None, sfa: str | None) -> list[str]:
    # nsfa before sfa; the same value in both slots is kept twice
    return [value for value in (nsfa, sfa) if value]


def normalize_scheme(recommendation_set: RecommendationSet) -> ClassificationRecommendation:
    """Group the filing forms of one scheme's entries by kind, in document order."""
    by_kind: dict[RecommendationKind, list[str]] = {kind: [] for kind in RecommendationKind}
    for entry in recommendation_set.entries:
        by_kind[entry.kind].extend(_filing_forms(entry.stat.nsfa, entry.stat.sfa))

    return ClassificationRecommendation(
        most_popular=by_kind[RecommendationKind.MOST_POPULAR],
        most_recent=by_kind[RecommendationKind.MOST_RECENT],
        latest_edition=by_kind[RecommendationKind.LATEST_EDITION],
    )


def normalize(raw: RawRecommendations) -> Recommendations:
    """Convert a raw recommendations block into Dewey and LC candidate lists."""
    return Recommendations(
        dewey_decimal=normalize_scheme(raw.ddc),
        library_of_congress=normalize_scheme(raw.lcc),
    )
