"""Input checks and cleanup for user-supplied resume / job description text."""

import re

_SUSPICIOUS_MARKERS = ("<script", "javascript:", "onclick=", "\0")

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")
_SPACE_RUN = re.compile(r" +")
_TAB_RUN = re.compile(r"\t+")
_SPACES_BEFORE_NEWLINE = re.compile(r" +\n")
_SPACES_AFTER_NEWLINE = re.compile(r"\n +")
_BLANK_LINE_RUN = re.compile(r"\n{3,}")


def contains_suspicious_content(text: str) -> bool:
    """True for script-injection markers or NUL bytes (case-sensitive)."""
    return any(marker in text for marker in _SUSPICIOUS_MARKERS)


def sanitize_text(text: str | None) -> str:
    """Trim, drop control characters (except newline/tab) and normalize whitespace.

    At most one blank line is kept between paragraphs.
    """
    if text is None:
        return ""
    cleaned = _CONTROL_CHARS.sub("", text.strip())
    cleaned = _SPACES_BEFORE_NEWLINE.sub("\n", cleaned)
    cleaned = _SPACES_AFTER_NEWLINE.sub("\n", cleaned)
    cleaned = _SPACE_RUN.sub(" ", cleaned)
    cleaned = _TAB_RUN.sub("\t", cleaned)
    return _BLANK_LINE_RUN.sub("\n\n", cleaned)


def validate_text(text: str, field_name: str, max_chars: int) -> str:
    """Reject blank, oversized or suspicious text; return the sanitized form.

    Raises ValueError so pydantic validators surface it as a 422.
    """
    if not text or not text.strip():
        raise ValueError(f"{field_name} cannot be empty")
    if len(text) > max_chars:
        raise ValueError(
            f"{field_name} exceeds maximum size of {max_chars} characters (got {len(text)})"
        )
    if contains_suspicious_content(text):
        raise ValueError(f"{field_name} contains suspicious or invalid patterns")
    return sanitize_text(text)
