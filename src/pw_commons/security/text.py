"""Security – character-class predicates used by password checks."""
from __future__ import annotations

from pw_commons.security.charsets import SPECIALS


def contains_numbers(text: str) -> bool:
    return any(ch.isdigit() for ch in text)


def contains_upper_case(text: str) -> bool:
    return any(ch.isupper() for ch in text)


def contains_lower_case(text: str) -> bool:
    return any(ch.islower() for ch in text)


def contains_special_chars(text: str) -> bool:
    """Return ``True`` if ``text`` holds at least one of :data:`SPECIALS`."""
    return any(ch in SPECIALS for ch in text)


def contains_spaces(text: str) -> bool:
    return any(ch.isspace() for ch in text)


__all__ = [
    "contains_lower_case",
    "contains_numbers",
    "contains_special_chars",
    "contains_spaces",
    "contains_upper_case",
]
