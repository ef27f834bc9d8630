"""Project-wide constants."""

# -- Classify service -------------------------------------------------------
CLASSIFY_BASE_URL: str = "http://classify.oclc.org/classify2/Classify"
CLASSIFY_SOURCE_NAME: str = "oclc_classify"

# -- Response codes ---------------------------------------------------------
# The code in <response code="..."/> decides which payload shape follows.
RESPONSE_CODE_SINGLE_WORK: int = 0
RESPONSE_CODE_MULTI_WORK: int = 4
RESPONSE_CODE_NO_INPUT: int = 100
RESPONSE_CODE_INVALID_INPUT: int = 101
RESPONSE_CODE_NOT_FOUND: int = 102

RESPONSE_CODE_DESCRIPTIONS: dict[int, str] = {
    RESPONSE_CODE_SINGLE_WORK: "Success. Single-work summary response provided.",
    RESPONSE_CODE_MULTI_WORK: "Success. Multi-work response provided.",
    RESPONSE_CODE_NO_INPUT: "No input. The method requires an input argument.",
    RESPONSE_CODE_INVALID_INPUT: "Invalid input. The standard number argument is invalid.",
    RESPONSE_CODE_NOT_FOUND: "No data found for the input argument.",
}

# -- Recommendation schemes -------------------------------------------------
DEWEY_SCHEME_TAG: str = "ddc"
LIBRARY_OF_CONGRESS_SCHEME_TAG: str = "lcc"
