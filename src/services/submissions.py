"""Service for listing a user's accepted submissions."""

from loguru import logger

from domain.models import Submission
from infrastructure.parsers import APIClientProtocol, SubmissionListParser, SubmissionListParserProtocol


class SubmissionService:
    """Service for collecting unique accepted submissions of a user."""

    def __init__(
        self,
        *,
        api_client: APIClientProtocol,
        list_parser: SubmissionListParserProtocol | None = None,
    ):
        """Initialize service with dependencies."""
        self.api_client = api_client
        self.list_parser = list_parser or SubmissionListParser()

    async def list_accepted(self, handle: str) -> list[Submission]:
        """
        Get one accepted submission per solved problem, in API order.

        Never raises: a failed request or a malformed response is logged and
        results in an empty list.
        """
        logger.debug(f"Listing accepted submissions of {handle}")

        try:
            payload = await self.api_client.fetch_user_status(handle)
        except Exception as e:
            logger.error(f"Failed to fetch list of submissions of {handle}: {e}")
            return []

        try:
            submissions = self.list_parser.parse(payload)
        except Exception as e:
            logger.error(f"Failed to parse submissions of {handle}: {e}")
            return []

        logger.info(f"User {handle} has a total of {len(submissions)} unique accepted submissions")
        return submissions
