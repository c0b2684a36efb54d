"""Parser for extracting solution source code from submission pages."""

from bs4 import BeautifulSoup
from loguru import logger

from .interfaces import ExtractionError


class SourceCodeParser:
    """Extracts the program source block from a Codeforces submission page."""

    SELECTOR = "pre[class*=program-source]"

    def __init__(self, features: str = "lxml"):
        """
        Initialize parser.

        Args:
            features: BeautifulSoup tree builder
        """
        self.features = features

    def extract(self, html: str) -> str:
        """
        Extract source code exactly as submitted.

        Args:
            html: Submission page HTML

        Returns:
            Entity-decoded source text with whitespace untouched

        Raises:
            ExtractionError: If the page has no source block (private, removed
                or an error page)
        """
        soup = BeautifulSoup(html, self.features)
        source_block = soup.select_one(self.SELECTOR)

        if source_block is None:
            logger.debug("No program source block found on page")
            raise ExtractionError("Source code block not found")

        return source_block.get_text()
