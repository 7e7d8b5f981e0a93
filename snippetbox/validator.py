"""Field checks shared by every form.

Each check is a total predicate: it answers True or False and never raises.
Lengths are counted in characters (code points), not encoded bytes.
"""

import re
from collections.abc import Hashable
from typing import Protocol

EMAIL_RX = re.compile(
    r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*"
)


class Validator(Protocol):
    """Anything that can check itself and report problems by field name."""

    problems: dict[str, str]

    def validate(self) -> dict[str, str]: ...


def not_blank(value: str) -> bool:
    return value.strip() != ""


def max_chars(value: str, limit: int) -> bool:
    return len(value) <= limit


def max_bytes(value: str, limit: int) -> bool:
    """Return True if value encodes to at most limit bytes of UTF-8."""
    return len(value.encode("utf-8")) <= limit


def min_chars(value: str, n: int) -> bool:
    """Return True if value contains at least n characters."""
    return len(value) >= n


def matches(value: str, rx: re.Pattern[str]) -> bool:
    """Return True if the whole value matches a compiled pattern."""
    return rx.fullmatch(value) is not None


def permitted_value(value: Hashable, *permitted: Hashable) -> bool:
    return value in permitted
