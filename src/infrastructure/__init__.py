"""Infrastructure: HTTP access, parsers and local storage."""

from .codeforces_client import CodeforcesApiClient
from .http_client import AsyncHTTPClient
from .rate_limiter import AsyncRateLimiter
from .solution_writer import SolutionWriter

__all__ = [
    "AsyncHTTPClient",
    "AsyncRateLimiter",
    "CodeforcesApiClient",
    "SolutionWriter",
]
