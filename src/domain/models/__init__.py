"""Domain models package."""

from .crawl import CrawlFailure, CrawlReport, CrawlStage
from .identifiers import ProblemIdentifier, SubmissionIdentifier
from .submission import Submission

__all__ = [
    "CrawlFailure",
    "CrawlReport",
    "CrawlStage",
    "ProblemIdentifier",
    "Submission",
    "SubmissionIdentifier",
]
