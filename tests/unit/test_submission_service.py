"""Unit tests for the submission listing service."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from domain.exceptions import CodeforcesAPIError, FetchError
from infrastructure.parsers import ParsingError
from services.submissions import SubmissionService


def ok_entry(submission_id, contest_id, index):
    return {
        "id": submission_id,
        "contestId": contest_id,
        "problem": {"index": index},
        "programmingLanguage": "PyPy 3",
        "verdict": "OK",
    }


@pytest.mark.asyncio
async def test_list_accepted_returns_unique_submissions():
    api_client = AsyncMock()
    api_client.fetch_user_status.return_value = {
        "status": "OK",
        "result": [ok_entry(3, 1, "A"), ok_entry(2, 1, "B"), ok_entry(1, 1, "A")],
    }

    service = SubmissionService(api_client=api_client)
    submissions = await service.list_accepted("tourist")

    assert [s.problem_key for s in submissions] == ["1A", "1B"]
    api_client.fetch_user_status.assert_awaited_once_with("tourist")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        FetchError("https://codeforces.com/api/user.status", "timeout"),
        CodeforcesAPIError("user.status", "handle: User not found"),
        ParsingError("Invalid JSON"),
    ],
)
async def test_list_accepted_returns_empty_on_fetch_failure(error):
    api_client = AsyncMock()
    api_client.fetch_user_status.side_effect = error

    service = SubmissionService(api_client=api_client)

    assert await service.list_accepted("tourist") == []


@pytest.mark.asyncio
async def test_list_accepted_returns_empty_on_parse_failure():
    api_client = AsyncMock()
    api_client.fetch_user_status.return_value = {"status": "OK"}

    service = SubmissionService(api_client=api_client)

    assert await service.list_accepted("tourist") == []


@pytest.mark.asyncio
async def test_list_accepted_uses_injected_parser():
    api_client = AsyncMock()
    api_client.fetch_user_status.return_value = {"status": "OK", "result": []}
    list_parser = MagicMock()
    list_parser.parse.return_value = ["sentinel"]

    service = SubmissionService(api_client=api_client, list_parser=list_parser)

    assert await service.list_accepted("tourist") == ["sentinel"]
    list_parser.parse.assert_called_once_with({"status": "OK", "result": []})
