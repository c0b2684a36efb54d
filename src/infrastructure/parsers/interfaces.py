"""Protocol interfaces for parsers."""

from typing import Any, Protocol

from domain.models import Submission


class ParsingError(ValueError):
    """Error parsing API or HTML content."""

    pass


class ExtractionError(ParsingError):
    """Submission page does not contain a source code block."""

    pass


class HTTPClientProtocol(Protocol):
    """Protocol for HTTP client."""

    async def get_text(self, url: str) -> str:
        """Get text content from URL."""
        ...


class APIClientProtocol(Protocol):
    """Protocol for Codeforces API client."""

    async def fetch_user_status(self, handle: str) -> dict[str, Any]:
        """Get submission history of a user from Codeforces API."""
        ...


class SubmissionListParserProtocol(Protocol):
    """Protocol for turning a user.status payload into submissions."""

    def parse(self, payload: dict[str, Any]) -> list[Submission]:
        """Parse accepted, deduplicated submissions."""
        ...


class SourceCodeParserProtocol(Protocol):
    """Protocol for extracting source code from a submission page."""

    def extract(self, html: str) -> str:
        """Extract source code text."""
        ...
