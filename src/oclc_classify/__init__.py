"""Typed client for the OCLC Classify bibliographic classification service."""

from oclc_classify.data_sources.base_client import (
    ClassifyError,
    InvalidInputError,
    NoInputError,
    TransportError,
    UnexpectedError,
    UnexpectedResponseCodeError,
    XmlParsingError,
)
from oclc_classify.data_sources.classify import ClassifyClient, lookup, lookup_sync

__all__ = [
    "ClassifyClient",
    "ClassifyError",
    "InvalidInputError",
    "NoInputError",
    "TransportError",
    "UnexpectedError",
    "UnexpectedResponseCodeError",
    "XmlParsingError",
    "lookup",
    "lookup_sync",
]
