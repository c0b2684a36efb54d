"""Persists downloaded solutions to the local filesystem."""

from pathlib import Path

from loguru import logger

from domain.exceptions import WriteError
from domain.languages import file_extension


def split_lines(source: str) -> list[str]:
    """
    Split text on "\\r\\n", "\\r" and "\\n" only.

    Other characters str.splitlines() treats as breaks (form feed, "\\u2028", ...)
    stay inside their line.
    """
    lines = source.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


class SolutionWriter:
    """Writes one source file per solved problem under ``base_dir/<username>``."""

    def __init__(self, base_dir: Path):
        """
        Initialize writer.

        Args:
            base_dir: Root directory holding one folder per user
        """
        self.base_dir = Path(base_dir)

    def build_path(self, username: str, problem_key: str, language: str) -> Path:
        """Compute target path for a solution."""
        return self.base_dir / username / f"{problem_key}{file_extension(language)}"

    def write(self, username: str, problem_key: str, language: str, source: str) -> Path:
        """
        Write solution source, replacing any previous file for the problem.

        Every line is written with a single "\\n" terminator, whatever
        terminators the scraped page used. The content goes to a sibling
        ".tmp" file first, so a failed write leaves the previous file intact.

        Returns:
            Path of the written file

        Raises:
            WriteError: On any filesystem failure
        """
        path = self.build_path(username, problem_key, language)
        logger.debug(f"Writing file: {path}")

        staging = path.with_name(f"{path.name}.tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(staging, "w", encoding="utf-8", newline="\n") as f:
                for line in split_lines(source):
                    f.write(line + "\n")
            staging.replace(path)
        except OSError as e:
            if staging.exists():
                staging.unlink()
            raise WriteError(path, e) from e

        return path
