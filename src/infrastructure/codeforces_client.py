"""Client for the public Codeforces API."""

import json
from typing import Any

from loguru import logger

from domain.exceptions import CodeforcesAPIError
from infrastructure.parsers.interfaces import HTTPClientProtocol, ParsingError
from infrastructure.parsers.url_parser import URLParser


class CodeforcesApiClient:
    """Thin wrapper over the Codeforces JSON API."""

    def __init__(self, http_client: HTTPClientProtocol, url_parser: type[URLParser] = URLParser):
        self.http_client = http_client
        self.url_parser = url_parser

    async def fetch_user_status(self, handle: str) -> dict[str, Any]:
        """
        Fetch the complete submission history of a user.

        Sample json:
        {
            "status": "OK",
            "result": [
                {
                "id": 145083228,
                "contestId": 1091,
                "problem": {"contestId": 1091, "index": "A", ...},
                "programmingLanguage": "GNU C11",
                "verdict": "OK",
                ...
                },
                ...
            ]
        }

        Raises:
            FetchError: If the request fails
            ParsingError: If the body is not a JSON object
            CodeforcesAPIError: If the API reports a failure
        """
        url = self.url_parser.build_user_status_url(handle)
        body = await self.http_client.get_text(url)

        try:
            payload = json.loads(body)
        except json.JSONDecodeError as e:
            raise ParsingError(f"Invalid JSON from {url}: {e}") from e

        if not isinstance(payload, dict):
            raise ParsingError(f"Unexpected JSON document from {url}")

        if payload.get("status") != "OK":
            logger.debug(f"Unsuccessful user.status request for {handle}: {payload.get('comment')}")
            raise CodeforcesAPIError("user.status", payload.get("comment"))

        return payload
