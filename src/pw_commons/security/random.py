"""Security – cryptographically secure random source.

:class:`SecureRandomSource` draws from the operating system entropy pool via
:class:`secrets.SystemRandom`. The handle is owned by the instance and
released by :meth:`SecureRandomSource.close` (or on context-manager exit).

Usage::

    with SecureRandomSource() as rnd:
        token = rnd.random_string(20, ALPHANUMERICS)
        coin = rnd.random_boolean()
        n = rnd.random_integer(10, 100)
        x = rnd.random_double(0.5, 3.0)
"""
from __future__ import annotations

import secrets
from collections.abc import Sequence
from types import TracebackType
from typing import Final, Protocol

from pw_commons.security.errors import InvalidRangeError, RandomSourceClosedError

UINT32_MAX: Final[int] = 2**32 - 1
INT32_MAX: Final[int] = 2**31 - 1


class RandomSource(Protocol):
    """Structural contract shared by the secure source and test doubles."""

    def random_boolean(self) -> bool: ...
    def random_integer(self, minimum: int, maximum: int) -> int: ...
    def random_double(self, minimum: float, maximum: float) -> float: ...
    def random_string(self, length: int, charset: Sequence[str]) -> str: ...


class SecureRandomSource:
    """Secure random booleans, bounded integers, doubles and strings.

    The OS entropy pool is safe for concurrent use, so one instance may be
    shared between threads. Call :meth:`close` only after every user is done;
    any draw after that raises :class:`RandomSourceClosedError`.
    """

    def __init__(self) -> None:
        self._rng: secrets.SystemRandom | None = secrets.SystemRandom()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._rng is None

    def close(self) -> None:
        self._rng = None

    def __enter__(self) -> SecureRandomSource:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _handle(self) -> secrets.SystemRandom:
        if self._rng is None:
            raise RandomSourceClosedError()
        return self._rng

    # ------------------------------------------------------------------
    # Draws
    # ------------------------------------------------------------------

    def random_boolean(self) -> bool:
        """Draw one byte; ``True`` when its top bit is set."""
        return self._handle().getrandbits(8) >= 128

    def random_integer(self, minimum: int, maximum: int) -> int:
        """Return an integer in ``[minimum, maximum]`` inclusive.

        A random unsigned 32-bit value is normalised to ``[0, 1]``, scaled by
        the range width and rounded to the nearest integer. The rounding gives
        each endpoint half the weight of an interior value; this is a known
        approximation kept for compatibility with existing callers.
        """
        if minimum >= maximum:
            raise InvalidRangeError(minimum, maximum)
        factor = self._handle().getrandbits(32) / UINT32_MAX
        return int(round((maximum - minimum) * factor)) + minimum

    def random_double(self, minimum: float, maximum: float) -> float:
        """Return a float in ``[minimum, maximum]``."""
        if minimum >= maximum:
            raise InvalidRangeError(minimum, maximum)
        ratio = self.random_integer(0, INT32_MAX) / INT32_MAX
        return ratio * (maximum - minimum) + minimum

    def random_string(self, length: int, charset: Sequence[str]) -> str:
        """Return ``length`` characters drawn independently from ``charset``."""
        if length < 0:
            raise InvalidRangeError(0, length, f"String length must not be negative, got {length}")
        upper = len(charset) - 1
        return "".join(charset[self.random_integer(0, upper)] for _ in range(length))


__all__ = ["INT32_MAX", "UINT32_MAX", "RandomSource", "SecureRandomSource"]
