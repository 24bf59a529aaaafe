"""Security – readable random password generator."""
from __future__ import annotations

from typing import TYPE_CHECKING

from pw_commons.observability.logging import get_logger
from pw_commons.security.charsets import DIGITS, PASSWORD, SPECIALS
from pw_commons.security.errors import GenerationInfeasibleError, InvalidConfigurationError
from pw_commons.security.random import RandomSource

if TYPE_CHECKING:
    from pw_commons.security.settings import PasswordPolicySettings

_log = get_logger(__name__)

DEFAULT_MINIMUM_SIZE = 6
DEFAULT_MAXIMUM_SIZE = 20
DEFAULT_MAX_ATTEMPTS = 1000

# one digit and one special character are always appended
_SUFFIX_LEN = 2


class PasswordGenerator:
    """Generates passwords from the readable :data:`PASSWORD` character set.

    The body is drawn from :data:`PASSWORD`, then one digit and one character
    from :data:`SPECIALS` are appended. Unless allowed, the body never repeats
    a character and never places the same character twice in a row; the
    suffix is exempt from both rules.

    Example::

        with SecureRandomSource() as rnd:
            generator = PasswordGenerator(rnd, minimum_size=10, maximum_size=12)
            password = generator.generate()
    """

    def __init__(
        self,
        random_source: RandomSource,
        *,
        minimum_size: int = DEFAULT_MINIMUM_SIZE,
        maximum_size: int = DEFAULT_MAXIMUM_SIZE,
        allow_repeat_characters: bool = False,
        allow_consecutive_characters: bool = False,
        max_attempts_per_character: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        self._random = random_source
        self.minimum_size = minimum_size
        self.maximum_size = maximum_size
        self.allow_repeat_characters = allow_repeat_characters
        self.allow_consecutive_characters = allow_consecutive_characters
        self.max_attempts_per_character = max_attempts_per_character
        self._check_configuration()

    @classmethod
    def from_settings(cls, settings: PasswordPolicySettings, random_source: RandomSource) -> PasswordGenerator:
        return cls(
            random_source,
            minimum_size=settings.minimum_size,
            maximum_size=settings.maximum_size,
            allow_repeat_characters=settings.allow_repeat_characters,
            allow_consecutive_characters=settings.allow_consecutive_characters,
        )

    def generate(self) -> str:
        self._check_configuration()
        length = self._password_length()
        body = self._build_body(length - _SUFFIX_LEN)
        digit = DIGITS[self._random.random_integer(0, len(DIGITS) - 1)]
        special = self._random.random_string(1, SPECIALS)
        return body + digit + special

    def _check_configuration(self) -> None:
        if self.minimum_size < _SUFFIX_LEN or self.maximum_size < _SUFFIX_LEN:
            raise InvalidConfigurationError(
                f"Password sizes must be at least {_SUFFIX_LEN}, "
                f"got minimum={self.minimum_size} maximum={self.maximum_size}",
                detail={"minimum_size": self.minimum_size, "maximum_size": self.maximum_size},
            )
        if self.minimum_size > self.maximum_size:
            raise InvalidConfigurationError(
                f"minimum_size ({self.minimum_size}) must not exceed maximum_size ({self.maximum_size})",
                detail={"minimum_size": self.minimum_size, "maximum_size": self.maximum_size},
            )
        if self.max_attempts_per_character < 1:
            raise InvalidConfigurationError(
                f"max_attempts_per_character must be positive, got {self.max_attempts_per_character}",
            )

    def _password_length(self) -> int:
        if self.minimum_size == self.maximum_size:
            return self.minimum_size
        return self._random.random_integer(self.minimum_size, self.maximum_size)

    def _build_body(self, body_length: int) -> str:
        if not self.allow_repeat_characters and body_length > len(PASSWORD):
            raise GenerationInfeasibleError(
                f"Cannot draw {body_length} distinct characters from a set of {len(PASSWORD)}",
                position=len(PASSWORD),
                attempts=0,
            )

        accepted: list[str] = []
        seen: set[str] = set()
        for position in range(body_length):
            candidate = self._draw_candidate(accepted, seen, position)
            accepted.append(candidate)
            seen.add(candidate)
        return "".join(accepted)

    def _draw_candidate(self, accepted: list[str], seen: set[str], position: int) -> str:
        previous = accepted[-1] if accepted else None
        for _ in range(self.max_attempts_per_character):
            candidate = self._random.random_string(1, PASSWORD)
            if not self.allow_consecutive_characters and candidate == previous:
                continue
            if not self.allow_repeat_characters and candidate in seen:
                continue
            return candidate

        _log.warning(
            "password_generation_exhausted",
            position=position,
            attempts=self.max_attempts_per_character,
        )
        raise GenerationInfeasibleError(
            f"No acceptable character found for position {position} "
            f"after {self.max_attempts_per_character} attempts",
            position=position,
            attempts=self.max_attempts_per_character,
        )


__all__ = ["DEFAULT_MAXIMUM_SIZE", "DEFAULT_MINIMUM_SIZE", "PasswordGenerator"]
