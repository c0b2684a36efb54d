"""Mapping from Codeforces language names to source file extensions."""

# Evaluated top to bottom, first match wins. "GNU C++" contains "GNU C",
# so the C++ rule has to stay above the C rule.
EXTENSION_RULES: tuple[tuple[str, str], ...] = (
    ("Java", ".java"),
    ("Py", ".py"),
    ("GNU C++", ".cpp"),
    ("GNU C", ".c"),
)


def file_extension(language: str) -> str:
    """
    Get file extension for a programming language reported by Codeforces.

    Args:
        language: Free-text language name, e.g. "GNU C++17 (64)"

    Returns:
        Extension including the leading dot, or "" for unknown languages
    """
    for marker, extension in EXTENSION_RULES:
        if marker in language:
            return extension
    return ""
