"""Parser for the user.status API payload."""

from typing import Any

from loguru import logger

from domain.models import Submission

from .interfaces import ParsingError

VERDICT_OK = "OK"


class SubmissionListParser:
    """Selects one accepted submission per problem from a user.status payload."""

    def parse(self, payload: dict[str, Any]) -> list[Submission]:
        """
        Parse accepted submissions, keeping the first one seen for each problem.

        Args:
            payload: Decoded user.status response

        Returns:
            Submissions in API order, unique by problem key

        Raises:
            ParsingError: If the payload or an accepted entry is malformed
        """
        entries = payload.get("result")
        if not isinstance(entries, list):
            raise ParsingError("user.status payload has no result array")

        submissions: list[Submission] = []
        seen: set[str] = set()

        for entry in entries:
            if not isinstance(entry, dict) or entry.get("verdict") != VERDICT_OK:
                continue

            submission = self._parse_entry(entry)
            if submission.problem_key in seen:
                logger.debug(
                    f"Skipping submission {submission.submission_id}, "
                    f"{submission.problem_key} already selected"
                )
                continue

            seen.add(submission.problem_key)
            submissions.append(submission)

        return submissions

    def _parse_entry(self, entry: dict[str, Any]) -> Submission:
        """Build a Submission from one accepted API record."""
        try:
            return Submission(
                submission_id=int(entry["id"]),
                contest_id=int(entry["contestId"]),
                problem_index=str(entry["problem"]["index"]),
                language=str(entry["programmingLanguage"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ParsingError(f"Malformed submission entry {entry.get('id')}: {e!r}") from e
