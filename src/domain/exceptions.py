"""Exceptions raised by the crawl pipeline."""

from pathlib import Path


class CrawlerError(Exception):
    """Base exception for the solutions crawler."""

    pass


class FetchError(CrawlerError):
    """HTTP request failed or returned a non-2xx status."""

    def __init__(self, url: str, cause: BaseException | str):
        self.url = url
        self.cause = cause
        super().__init__(f"Failed to fetch {url}: {cause}")


class CodeforcesAPIError(CrawlerError):
    """Codeforces API answered with a non-OK status."""

    def __init__(self, method: str, comment: str | None = None):
        self.method = method
        self.comment = comment
        super().__init__(f"Codeforces API call {method} failed: {comment or 'no comment'}")


class WriteError(CrawlerError):
    """Solution file could not be written."""

    def __init__(self, path: Path, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write {path}: {cause}")
