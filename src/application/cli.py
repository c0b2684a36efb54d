"""Command line entry point."""

import argparse
import asyncio
import sys
import time

from loguru import logger

from application.config import Settings, configure_logging
from application.orchestrator import create_orchestrator
from domain.models import CrawlReport
from infrastructure.http_client import AsyncHTTPClient
from infrastructure.rate_limiter import AsyncRateLimiter


def format_elapsed(seconds: float) -> str:
    """Format a duration as hours, minutes, seconds and milliseconds."""
    millis = int(seconds * 1000)
    hours, millis = divmod(millis, 3_600_000)
    minutes, millis = divmod(millis, 60_000)
    secs, millis = divmod(millis, 1000)
    return f"{hours} hours, {minutes} minutes, {secs} seconds, {millis} milliseconds"


async def run(username: str, settings: Settings) -> CrawlReport:
    """Crawl a user's solutions with a fresh rate limiter and HTTP session."""
    rate_limiter = AsyncRateLimiter(settings.rate_limit)

    async with AsyncHTTPClient(rate_limiter=rate_limiter, timeout=settings.request_timeout) as http_client:
        orchestrator = create_orchestrator(http_client, settings.solutions_dir)
        return await orchestrator.crawl(username)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Download accepted Codeforces solutions of a user"
    )
    parser.add_argument("username", nargs="?", help="Codeforces handle")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    username = args.username
    if not username:
        print("Enter username:")
        username = sys.stdin.readline().strip()
    if not username:
        logger.error("No username given")
        return 1

    started = time.perf_counter()
    report = asyncio.run(run(username, settings))
    elapsed = time.perf_counter() - started

    print(
        f"\nFetched {report.succeeded} of {report.total} accepted solutions into "
        f"{settings.solutions_dir / username}"
    )
    print(f"Completed fetching all successful submissions in {format_elapsed(elapsed)}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
