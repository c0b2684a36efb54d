"""Value objects describing the outcome of a crawl run."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

CrawlStage = Literal["fetch", "extract", "write"]


@dataclass(frozen=True)
class CrawlFailure:
    """A submission that could not be saved."""

    problem_key: str
    stage: CrawlStage
    reason: str


@dataclass
class CrawlReport:
    """Summary of one crawl for a single user."""

    username: str
    total: int = 0
    written: list[Path] = field(default_factory=list)
    failures: list[CrawlFailure] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return len(self.written)

    @property
    def failed(self) -> int:
        return len(self.failures)
