"""Submission value object built from the user.status API."""

from dataclasses import dataclass

from .identifiers import ProblemIdentifier, SubmissionIdentifier


@dataclass(frozen=True)
class Submission:
    """An accepted submission selected for download."""

    submission_id: int
    contest_id: int
    problem_index: str
    language: str

    @property
    def problem(self) -> ProblemIdentifier:
        return ProblemIdentifier(contest_id=self.contest_id, problem_index=self.problem_index)

    @property
    def problem_key(self) -> str:
        return self.problem.problem_key

    @property
    def identifier(self) -> SubmissionIdentifier:
        return SubmissionIdentifier(contest_id=self.contest_id, submission_id=self.submission_id)
