"""Parsers for extracting data from external sources."""

from .source_code_parser import SourceCodeParser
from .submission_list_parser import SubmissionListParser
from .url_parser import URLParser
from .interfaces import (
    APIClientProtocol,
    ExtractionError,
    HTTPClientProtocol,
    ParsingError,
    SourceCodeParserProtocol,
    SubmissionListParserProtocol,
)

__all__ = [
    "APIClientProtocol",
    "ExtractionError",
    "HTTPClientProtocol",
    "ParsingError",
    "SourceCodeParser",
    "SourceCodeParserProtocol",
    "SubmissionListParser",
    "SubmissionListParserProtocol",
    "URLParser",
]
