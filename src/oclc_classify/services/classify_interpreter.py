"""
Classification interpreter.

Turns a raw ClassifyResponse into the outcome its response code announces:

  0   → SingleWorkSummary (needs <work> and <recommendations>)
  4   → MultiWork (needs <works>)
  100 → NoInputError
  101 → InvalidInputError
  102 → None (valid identifier, nothing classified)
  *   → UnexpectedResponseCodeError
"""

import logging

from oclc_classify.constants import (
    CLASSIFY_SOURCE_NAME,
    RESPONSE_CODE_DESCRIPTIONS,
    RESPONSE_CODE_INVALID_INPUT,
    RESPONSE_CODE_MULTI_WORK,
    RESPONSE_CODE_NO_INPUT,
    RESPONSE_CODE_NOT_FOUND,
    RESPONSE_CODE_SINGLE_WORK,
)
from oclc_classify.data_sources.base_client import (
    InvalidInputError,
    NoInputError,
    UnexpectedError,
    UnexpectedResponseCodeError,
)
from oclc_classify.models.model_classify import (
    ClassifyOutcome,
    MultiWork,
    SingleWorkSummary,
)
from oclc_classify.models.model_classify_raw import ClassifyResponse
from oclc_classify.services.recommendation_normalizer import normalize

logger = logging.getLogger(__name__)


def interpret(raw: ClassifyResponse) -> ClassifyOutcome | None:
    """Convert a raw response into a ClassifyOutcome, None, or a ClassifyError.

    Pure: no I/O, no state. Raises rather than returning a default when the
    document does not carry what its code promises.
    """
    code = raw.response.code
    logger.debug(
        "Interpreting response code=%d (%s)",
        code,
        RESPONSE_CODE_DESCRIPTIONS.get(code, "unknown"),
    )

    if code == RESPONSE_CODE_NO_INPUT:
        raise NoInputError(CLASSIFY_SOURCE_NAME, RESPONSE_CODE_DESCRIPTIONS[code])

    if code == RESPONSE_CODE_INVALID_INPUT:
        raise InvalidInputError(CLASSIFY_SOURCE_NAME, RESPONSE_CODE_DESCRIPTIONS[code])

    if code == RESPONSE_CODE_NOT_FOUND:
        return None

    if code == RESPONSE_CODE_SINGLE_WORK:
        return _single_work_summary(raw)

    if code == RESPONSE_CODE_MULTI_WORK:
        return _multi_work(raw)

    raise UnexpectedResponseCodeError(CLASSIFY_SOURCE_NAME, code)


def _single_work_summary(raw: ClassifyResponse) -> SingleWorkSummary:
    if raw.work is None:
        raise UnexpectedError(
            CLASSIFY_SOURCE_NAME, "Response code 0 without a <work> element"
        )
    if raw.recommendations is None:
        raise UnexpectedError(
            CLASSIFY_SOURCE_NAME, "Response code 0 without a <recommendations> element"
        )
    return SingleWorkSummary(
        work=raw.work,
        recommendations=normalize(raw.recommendations),
    )


def _multi_work(raw: ClassifyResponse) -> MultiWork:
    if raw.works is None:
        raise UnexpectedError(
            CLASSIFY_SOURCE_NAME, "Response code 4 without a <works> element"
        )
    if raw.work_count is not None and raw.work_count != len(raw.works):
        # workCount is the service-side total; the page may hold fewer
        logger.debug(
            "workCount=%d but %d works in document", raw.work_count, len(raw.works)
        )
    return MultiWork(works=raw.works)
