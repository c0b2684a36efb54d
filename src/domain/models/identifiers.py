"""Value objects for submission identification."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProblemIdentifier:
    """Identifies a specific Codeforces problem."""

    contest_id: int
    problem_index: str

    @property
    def problem_key(self) -> str:
        """Contest id followed by the in-contest index, e.g. ``1325A``."""
        return f"{self.contest_id}{self.problem_index}"

    def __str__(self) -> str:
        """String representation."""
        return self.problem_key


@dataclass(frozen=True)
class SubmissionIdentifier:
    """Identifies a specific submission page."""

    contest_id: int
    submission_id: int

    def __str__(self) -> str:
        """String representation."""
        return f"{self.contest_id}/{self.submission_id}"
