"""ProtectedPassword value object."""

from __future__ import annotations

import dataclasses

from pw_commons.kernel.errors import ValidationError


@dataclasses.dataclass(frozen=True, slots=True)
class ProtectedPassword:
    """Salted, iteratively hashed password record.

    All three fields must be stored together; the digest can only be
    reproduced from the same plaintext, salt, iteration count and algorithm.
    """

    digest: str
    salt: str
    iteration_count: int

    def __post_init__(self) -> None:
        if not self.digest:
            raise ValidationError("Protected password digest must not be empty")
        if not self.salt:
            raise ValidationError("Protected password salt must not be empty")
        if isinstance(self.iteration_count, bool) or not isinstance(self.iteration_count, int):
            raise ValidationError(f"Iteration count must be an integer, got {self.iteration_count!r}")
        if self.iteration_count < 1:
            raise ValidationError(f"Iteration count must be positive, got {self.iteration_count}")

    def __repr__(self) -> str:
        return f"ProtectedPassword(digest='{self.digest[:4]}…', iteration_count={self.iteration_count})"


__all__ = ["ProtectedPassword"]
