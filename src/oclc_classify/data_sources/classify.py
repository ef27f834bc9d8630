"""
OCLC Classify API client.

One public method:
  lookup — classify a standard number (ISBN/ISSN/UPC/OCLC number/...)

Plus module-level `lookup` / `lookup_sync` helpers that own a client for a
single call.
"""

from __future__ import annotations

import asyncio
import logging
import xml.etree.ElementTree as ET

from pydantic import ValidationError

from oclc_classify.config import get_settings
from oclc_classify.constants import (
    CLASSIFY_SOURCE_NAME,
    DEWEY_SCHEME_TAG,
    LIBRARY_OF_CONGRESS_SCHEME_TAG,
)
from oclc_classify.data_sources.base_client import (
    BaseClient,
    ClientConfig,
    InvalidInputError,
    RequestContext,
    XmlParsingError,
)
from oclc_classify.models.model_classify import ClassifyOutcome
from oclc_classify.models.model_classify_raw import (
    ClassifyInput,
    ClassifyResponse,
    IdentifierType,
    RawRecommendations,
    RecommendationEntry,
    RecommendationKind,
    RecommendationSet,
    RecommendationStat,
    ResponseStatus,
    Work,
)
from oclc_classify.services.classify_interpreter import interpret

logger = logging.getLogger(__name__)


class ClassifyClient(BaseClient):
    """Client for the OCLC Classify service."""

    def __init__(
        self, config: ClientConfig | None = None, base_url: str | None = None
    ) -> None:
        settings = get_settings()
        super().__init__(
            config or ClientConfig(timeout_seconds=settings.request_timeout_seconds)
        )
        self.base_url = base_url or settings.base_url

    @property
    def _source_name(self) -> str:
        return CLASSIFY_SOURCE_NAME

    # -- Public methods -------------------------------------------------------

    async def lookup(
        self,
        identifier: str,
        identifier_type: IdentifierType | str = IdentifierType.STDNBR,
    ) -> ClassifyOutcome | None:
        """Classify a standard number.

        Returns a SingleWorkSummary or MultiWork, or None when the identifier
        is valid but nothing is classified under it. Raises a ClassifyError
        subclass for every failure, including an unknown identifier_type;
        nothing is retried.
        """
        try:
            query_param = IdentifierType(identifier_type).value
        except ValueError:
            raise InvalidInputError(
                self._source_name, f"Unknown identifier type: {identifier_type!r}"
            ) from None

        params = {query_param: identifier, "summary": "true"}
        context = RequestContext(
            source=self._source_name, method="lookup", params=params
        )

        body = await self._rest_get(self.base_url, params, context=context)
        raw = self.parse_classify_xml(body)
        logger.debug("Parsed classify response: %r", raw)
        return interpret(raw)

    # -- XML parsing ------------------------------------------------------------

    @classmethod
    def parse_classify_xml(cls, xml_text: str | bytes) -> ClassifyResponse:
        """Parse a Classify XML document into a ClassifyResponse.

        Bytes are decoded by the XML parser using the encoding the document
        declares (UTF-8 when it declares none).

        Raises XmlParsingError for malformed XML, a missing or non-numeric
        response code, or a work/recommendation missing required attributes.
        """
        try:
            root = ET.fromstring(xml_text.strip())
        except (ET.ParseError, LookupError, ValueError) as e:
            # LookupError / ValueError: unknown or unsupported declared encoding
            raise XmlParsingError(CLASSIFY_SOURCE_NAME, f"Failed to parse XML: {e}")

        children = cls._children_by_tag(root)

        response_elem = children.get("response")
        if response_elem is None:
            raise XmlParsingError(CLASSIFY_SOURCE_NAME, "Missing <response> element")

        try:
            return ClassifyResponse(
                input=cls._parse_input(children.get("input")),
                response=ResponseStatus(code=cls._parse_int(response_elem.get("code"))),
                work_count=cls._parse_optional_int(children.get("workCount")),
                work=cls._parse_work(children.get("work")),
                works=cls._parse_works(children.get("works")),
                recommendations=cls._parse_recommendations(
                    children.get("recommendations")
                ),
            )
        except (ValidationError, ValueError) as e:
            raise XmlParsingError(
                CLASSIFY_SOURCE_NAME, f"Unexpected document shape: {e}"
            )

    @staticmethod
    def _local_name(tag: str) -> str:
        """Strip the '{namespace}' prefix ElementTree puts on tag names."""
        return tag.rsplit("}", 1)[-1]

    @classmethod
    def _children_by_tag(cls, elem: ET.Element) -> dict[str, ET.Element]:
        """First child element per local tag name."""
        children: dict[str, ET.Element] = {}
        for child in elem:
            children.setdefault(cls._local_name(child.tag), child)
        return children

    @staticmethod
    def _parse_int(value: str | None) -> int:
        if value is None:
            raise ValueError("missing integer value")
        return int(value.strip())

    @classmethod
    def _parse_optional_int(cls, elem: ET.Element | None) -> int | None:
        if elem is None:
            return None
        return cls._parse_int(elem.text)

    @staticmethod
    def _parse_input(elem: ET.Element | None) -> ClassifyInput | None:
        if elem is None:
            return None
        return ClassifyInput(
            input_type=elem.get("type", ""),
            value=(elem.text or "").strip(),
        )

    @staticmethod
    def _parse_work(elem: ET.Element | None) -> Work | None:
        if elem is None:
            return None
        return Work.model_validate(dict(elem.attrib))

    @classmethod
    def _parse_works(cls, elem: ET.Element | None) -> list[Work] | None:
        if elem is None:
            return None
        return [
            Work.model_validate(dict(child.attrib))
            for child in elem
            if cls._local_name(child.tag) == "work"
        ]

    @classmethod
    def _parse_recommendations(
        cls, elem: ET.Element | None
    ) -> RawRecommendations | None:
        if elem is None:
            return None
        schemes = cls._children_by_tag(elem)
        return RawRecommendations(
            ddc=cls._parse_recommendation_set(schemes.get(DEWEY_SCHEME_TAG)),
            lcc=cls._parse_recommendation_set(
                schemes.get(LIBRARY_OF_CONGRESS_SCHEME_TAG)
            ),
        )

    @classmethod
    def _parse_recommendation_set(cls, elem: ET.Element | None) -> RecommendationSet:
        if elem is None:
            return RecommendationSet()

        entries = []
        for child in elem:
            tag = cls._local_name(child.tag)
            try:
                kind = RecommendationKind(tag)
            except ValueError:
                logger.warning("Skipping unknown recommendation element <%s>", tag)
                continue
            entries.append(
                RecommendationEntry(
                    kind=kind,
                    stat=RecommendationStat.model_validate(dict(child.attrib)),
                )
            )
        return RecommendationSet(entries=entries)


# ---------------------------------------------------------------------------
# Module-level facade
# ---------------------------------------------------------------------------


async def lookup(
    identifier: str,
    identifier_type: IdentifierType | str = IdentifierType.STDNBR,
    config: ClientConfig | None = None,
) -> ClassifyOutcome | None:
    """Classify one identifier with a client that lives for this call only."""
    async with ClassifyClient(config) as client:
        return await client.lookup(identifier, identifier_type)


def lookup_sync(
    identifier: str,
    identifier_type: IdentifierType | str = IdentifierType.STDNBR,
    config: ClientConfig | None = None,
) -> ClassifyOutcome | None:
    """Blocking variant of `lookup`. Must not be called from a running event loop."""
    return asyncio.run(lookup(identifier, identifier_type, config))
