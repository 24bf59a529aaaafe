"""Security – errors raised by the random source, generator and hasher."""
from __future__ import annotations

from typing import Any

from pw_commons.kernel.errors import DomainError


class SecurityError(DomainError):
    """Root of the password-protection error family."""

    default_code = "security_error"


class InvalidRangeError(SecurityError):
    """A requested numeric range is empty or inverted (``minimum >= maximum``)."""

    default_code = "invalid_range"

    def __init__(self, minimum: Any, maximum: Any, message: str | None = None) -> None:
        super().__init__(
            message or f"Invalid range: minimum {minimum!r} must be lower than maximum {maximum!r}",
            detail={"minimum": minimum, "maximum": maximum},
        )
        self.minimum = minimum
        self.maximum = maximum


class InvalidConfigurationError(SecurityError):
    """Password generator options are inconsistent."""

    default_code = "invalid_configuration"


class GenerationInfeasibleError(SecurityError):
    """The generator could not satisfy its character constraints.

    Attributes
    ----------
    position:
        Zero-based body position that could not be filled.
    attempts:
        Number of rejected draws before giving up.
    """

    default_code = "generation_infeasible"

    def __init__(self, message: str, *, position: int, attempts: int) -> None:
        super().__init__(message, detail={"position": position, "attempts": attempts})
        self.position = position
        self.attempts = attempts


class UnsupportedAlgorithmError(SecurityError):
    """The hash algorithm is unknown or unavailable in this runtime."""

    default_code = "unsupported_algorithm"

    def __init__(self, algorithm: str, *, cause: BaseException | None = None) -> None:
        super().__init__(
            f"Hash algorithm '{algorithm}' is not supported",
            detail={"algorithm": algorithm},
            cause=cause,
        )
        self.algorithm = algorithm


class RandomSourceClosedError(SecurityError):
    """A draw was requested from a :class:`SecureRandomSource` after ``close()``."""

    default_code = "random_source_closed"

    def __init__(self) -> None:
        super().__init__("Random source is closed")


__all__ = [
    "GenerationInfeasibleError",
    "InvalidConfigurationError",
    "InvalidRangeError",
    "RandomSourceClosedError",
    "SecurityError",
    "UnsupportedAlgorithmError",
]
