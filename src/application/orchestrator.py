"""Async orchestrator for coordinating the solution download process."""

from loguru import logger

from domain.models import CrawlFailure, CrawlReport, CrawlStage, Submission
from infrastructure.parsers import HTTPClientProtocol, SourceCodeParserProtocol, URLParser
from infrastructure.solution_writer import SolutionWriter
from services.submissions import SubmissionService


class CrawlOrchestrator:
    """Downloads every accepted solution of a user, one submission at a time."""

    def __init__(
        self,
        *,
        submission_service: SubmissionService,
        http_client: HTTPClientProtocol,
        source_parser: SourceCodeParserProtocol,
        writer: SolutionWriter,
        url_parser: type[URLParser] = URLParser,
    ):
        """
        Initialize orchestrator with dependency injection.

        Args:
            submission_service: Lists unique accepted submissions
            http_client: Rate-limited client for submission pages
            source_parser: Extracts source code from a submission page
            writer: Persists extracted source code
            url_parser: Builds submission page URLs
        """
        self.submission_service = submission_service
        self.http_client = http_client
        self.source_parser = source_parser
        self.writer = writer
        self.url_parser = url_parser

    async def crawl(self, username: str) -> CrawlReport:
        """
        Fetch and store solutions of a user.

        A failure on one submission is recorded in the report and the run
        moves on to the next one.
        """
        logger.info(f"Crawling accepted solutions of {username}")

        submissions = await self.submission_service.list_accepted(username)
        report = CrawlReport(username=username, total=len(submissions))

        for position, submission in enumerate(submissions, start=1):
            logger.info(
                f"[{position}/{report.total}]: Fetching solution for problem: {submission.problem_key}"
            )
            await self._process(username, submission, report)

        logger.info(
            f"Finished crawling {username}: {report.succeeded}/{report.total} solutions written, "
            f"{report.failed} skipped"
        )
        return report

    async def _process(self, username: str, submission: Submission, report: CrawlReport) -> None:
        """Run fetch, extract and write for a single submission."""
        url = self.url_parser.build_submission_url(submission.identifier)

        try:
            html = await self.http_client.get_text(url)
        except Exception as e:
            self._record(report, submission, "fetch", e)
            return

        try:
            source = self.source_parser.extract(html)
        except Exception as e:
            self._record(report, submission, "extract", e)
            return

        try:
            path = self.writer.write(username, submission.problem_key, submission.language, source)
        except Exception as e:
            self._record(report, submission, "write", e)
            return

        logger.info(f"Saved {submission.problem_key} to {path}")
        report.written.append(path)

    def _record(
        self,
        report: CrawlReport,
        submission: Submission,
        stage: CrawlStage,
        error: Exception,
    ) -> None:
        if stage == "write":
            logger.warning(f"Could not save solution for problem {submission.problem_key}: {error}")
        else:
            logger.warning(
                f"Could not fetch source code for problem {submission.problem_key}, "
                f"it is not public or unreachable: {error}"
            )
        report.failures.append(
            CrawlFailure(problem_key=submission.problem_key, stage=stage, reason=str(error))
        )


def create_orchestrator(http_client, solutions_dir) -> CrawlOrchestrator:
    """Factory function to create orchestrator with all dependencies."""
    from infrastructure.parsers import SourceCodeParser
    from services import create_submission_service

    return CrawlOrchestrator(
        submission_service=create_submission_service(http_client),
        http_client=http_client,
        source_parser=SourceCodeParser(),
        writer=SolutionWriter(solutions_dir),
    )
