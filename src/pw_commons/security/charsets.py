"""Security – fixed character sets for passwords and salts."""
from __future__ import annotations

import string
from typing import Final

# i, I, o and O are left out so generated passwords stay readable.
PASSWORD: Final[str] = (
    "abcdefghjklmnpqrstuvwxyz"
    "ABCDEFGHJKLMNPQRSTUVWXYZ"
    "23456789"
    ".!@$*=?"
)

SPECIALS: Final[str] = ".-_!@$^*=~|+?"

DIGITS: Final[str] = string.digits

ALPHANUMERICS: Final[str] = string.ascii_letters + string.digits


__all__ = ["ALPHANUMERICS", "DIGITS", "PASSWORD", "SPECIALS"]
