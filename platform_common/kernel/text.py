from __future__ import annotations

import re


EMAIL_PATTERN = (
    r"^[_A-Za-z0-9\-+]+(\.[_A-Za-z0-9-]+)*@"
    r"[A-Za-z0-9-]+(\.[A-Za-z0-9]+)*(\.[A-Za-z]{2,})$"
)

_EMAIL_RE = re.compile(EMAIL_PATTERN)


def is_blank(value: str | None) -> bool:
    """True for `None`, the empty string, or whitespace-only strings."""
    return value is None or not value.strip()


def is_email_valid(email: str | None) -> bool:
    if email is None:
        return False
    return _EMAIL_RE.fullmatch(email) is not None
