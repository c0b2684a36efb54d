"""Builder for Codeforces API and submission URLs."""

from urllib.parse import urlencode

from loguru import logger

from domain.models import SubmissionIdentifier


class URLParser:
    """Builds the Codeforces URLs used by the crawler."""

    BASE_URL = "https://codeforces.com"

    @classmethod
    def build_user_status_url(cls, handle: str) -> str:
        """
        Build user.status API URL returning the whole submission history.
        """
        query = urlencode({"handle": handle, "from": 1})
        url = f"{cls.BASE_URL}/api/user.status?{query}"

        logger.debug(f"Built user.status URL: {url}")
        return url

    @classmethod
    def build_submission_url(cls, identifier: SubmissionIdentifier) -> str:
        """
        Build submission page URL from identifier.
        """
        url = f"{cls.BASE_URL}/contest/{identifier.contest_id}/submission/{identifier.submission_id}"

        logger.debug(f"Built submission URL: {url}")
        return url
