"""
Pydantic models mirroring the Classify XML document.

These follow the wire layout one-to-one and are deliberately permissive:
which optional fields are populated depends on the response code, and that
is checked by the interpreter, not here.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class IdentifierType(str, Enum):
    """Query parameter used to send the identifier to the service."""

    STDNBR = "stdnbr"  # any standard number, service detects the kind
    ISBN = "isbn"
    ISSN = "issn"
    UPC = "upc"
    OCLC = "oclc"
    OWI = "owi"
    WI = "wi"


class RecommendationKind(str, Enum):
    """Why a class number is recommended. Values are the XML tag names."""

    MOST_POPULAR = "mostPopular"
    MOST_RECENT = "mostRecent"
    LATEST_EDITION = "latestEdition"


class ClassifyInput(BaseModel):
    """Echo of the request: <input type="isbn">0679442723</input>."""

    model_config = ConfigDict(frozen=True)

    input_type: str
    value: str = ""


class ResponseStatus(BaseModel):
    """<response code="..."/>."""

    model_config = ConfigDict(frozen=True)

    code: int


class Work(BaseModel):
    """One bibliographic work as classified by the service.

    Counts and years are kept as text; the service does not guarantee they
    are numeric and nothing here does arithmetic on them.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    author: str
    editions: str
    format: str
    holdings: str
    hyr: str | None = None  # latest year published
    itemtype: str
    lyr: str | None = None  # earliest year published
    owi: str  # OCLC work identifier
    schemes: str | None = None  # space separated, e.g. "DDC LCC"
    title: str
    wi: str | None = None  # work instance identifier

    @property
    def scheme_list(self) -> list[str]:
        return self.schemes.split() if self.schemes else []


class RecommendationStat(BaseModel):
    """Holdings count plus the alternate filing forms of a class number."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    holdings: str
    nsfa: str | None = None  # normalized start-filing alphabetic
    sfa: str | None = None  # start-filing alphabetic
    sf2: str | None = None  # secondary filing form


class RecommendationEntry(BaseModel):
    """A recommendation stat tagged with the element it came from."""

    model_config = ConfigDict(frozen=True)

    kind: RecommendationKind
    stat: RecommendationStat


class RecommendationSet(BaseModel):
    """Recommendations for one scheme (<ddc> or <lcc>), in document order."""

    model_config = ConfigDict(frozen=True)

    entries: list[RecommendationEntry] = []


class RawRecommendations(BaseModel):
    """The <recommendations> block."""

    model_config = ConfigDict(frozen=True)

    ddc: RecommendationSet = RecommendationSet()
    lcc: RecommendationSet = RecommendationSet()


class ClassifyResponse(BaseModel):
    """The whole <classify> document."""

    model_config = ConfigDict(frozen=True)

    input: ClassifyInput | None = None
    response: ResponseStatus
    work_count: int | None = None
    work: Work | None = None
    works: list[Work] | None = None
    recommendations: RawRecommendations | None = None
