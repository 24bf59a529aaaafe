"""Security – password strength rating."""
from __future__ import annotations

import dataclasses
import enum
import re
from typing import Final

from pw_commons.security.text import (
    contains_numbers,
    contains_spaces,
    contains_special_chars,
    contains_upper_case,
)

_MIN_LENGTH: Final = 8

_BEST: Final = re.compile(r"^.*(?=.{8,})(?=.*[A-Z])(?=.*\d)(?=.*\W).*$", re.DOTALL)
_STRONG: Final = re.compile(
    r"^[a-zA-Z\d\W_]*(?=[a-zA-Z\d\W_]{8,})"
    r"(((?=[a-zA-Z\d\W_]*[A-Z])(?=[a-zA-Z\d\W_]*\d))"
    r"|((?=[a-zA-Z\d\W_]*[A-Z])(?=[a-zA-Z\d\W_]*[\W_]))"
    r"|((?=[a-zA-Z\d\W_]*\d)(?=[a-zA-Z\d\W_]*[\W_])))"
    r"[a-zA-Z\d\W_]*$"
)
_WEAK: Final = re.compile(
    r"^[a-zA-Z\d\W_]*(?=[a-zA-Z\d\W_]{8,})"
    r"(?=[a-zA-Z\d\W_]*[A-Z]|[a-zA-Z\d\W_]*\d|[a-zA-Z\d\W_]*[\W_])"
    r"[a-zA-Z\d\W_]*$"
)


class PasswordStrength(enum.IntEnum):
    """Strength levels, ordered from worst to best."""

    BAD = 0
    WEAK = 1
    STRONG = 2
    BEST = 3


@dataclasses.dataclass(frozen=True, slots=True)
class StrengthReport:
    strength: PasswordStrength
    message: str = ""


class PasswordValidator:
    """Rates password strength and says what would improve it.

    * BAD: shorter than 8 characters, or no digit.
    * WEAK: missing an upper case or a special character.
    * STRONG: two of upper case, digit and symbol.
    * BEST: all of the above plus a space.

    Example::

        report = PasswordValidator.get_password_strength("SuperMan1")
        report.strength   # PasswordStrength.WEAK
        report.message    # "The password needs to have at least one special character."
    """

    @staticmethod
    def get_password_strength(password: str) -> StrengthReport:
        if len(password) < _MIN_LENGTH:
            return StrengthReport(
                PasswordStrength.BAD,
                f"The password needs to be at least {_MIN_LENGTH} characters long.",
            )
        if not contains_numbers(password):
            return StrengthReport(PasswordStrength.BAD, "The password needs to have at least one number.")
        if not contains_upper_case(password):
            return StrengthReport(
                PasswordStrength.WEAK,
                "The password needs to have at least one upper case character.",
            )
        if not contains_special_chars(password):
            return StrengthReport(
                PasswordStrength.WEAK,
                "The password needs to have at least one special character.",
            )

        if _BEST.match(password) and contains_spaces(password):
            return StrengthReport(PasswordStrength.BEST)
        if _STRONG.match(password):
            return StrengthReport(PasswordStrength.STRONG)
        if _WEAK.match(password):
            return StrengthReport(PasswordStrength.WEAK)
        return StrengthReport(PasswordStrength.BAD)


__all__ = ["PasswordStrength", "PasswordValidator", "StrengthReport"]
