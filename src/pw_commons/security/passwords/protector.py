"""Security – PasswordProtector: salting plus iterative hash stretching.

``protect`` appends a salt to the plaintext and re-hashes the result
``iteration_count`` times. With no salt or iteration count supplied, a random
salt (a generated password) and a random count in ``[500, 1024]`` are used.
The returned :class:`ProtectedPassword` must be stored whole; verification
replays the pipeline with the stored salt and count.

Usage::

    with PasswordProtector() as protector:
        record = protector.protect("MyC0013ncrypti0nP@$$w0rd!")
        ...
        if protector.compare_protected_password(candidate, record):
            ...
"""
from __future__ import annotations

import hmac
from types import TracebackType

from pw_commons.kernel.errors import ValidationError
from pw_commons.observability.logging import get_logger
from pw_commons.security.hashing import ContentHasher, OutputEncoding
from pw_commons.security.passwords.generator import PasswordGenerator
from pw_commons.security.passwords.protected import ProtectedPassword
from pw_commons.security.random import RandomSource, SecureRandomSource
from pw_commons.security.settings import PasswordPolicySettings

_log = get_logger(__name__)

DEFAULT_MIN_ITERATIONS = 500
DEFAULT_MAX_ITERATIONS = 1024


class PasswordProtector:
    """Produces and verifies :class:`ProtectedPassword` records.

    A protector built without a ``random_source`` creates a
    :class:`SecureRandomSource` and closes it in :meth:`close`; an injected
    source remains the caller's to close.
    """

    def __init__(
        self,
        random_source: RandomSource | None = None,
        *,
        hasher: ContentHasher | None = None,
        generator: PasswordGenerator | None = None,
        min_iterations: int = DEFAULT_MIN_ITERATIONS,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
    ) -> None:
        if min_iterations < 1 or max_iterations <= min_iterations:
            raise ValidationError(
                f"Iteration bounds must satisfy 1 <= min < max, got [{min_iterations}, {max_iterations}]"
            )
        self._owned_source: SecureRandomSource | None = None
        if random_source is None:
            random_source = self._owned_source = SecureRandomSource()
        self._random = random_source
        self._hasher = hasher or ContentHasher()
        self._generator = generator or PasswordGenerator(random_source)
        self._min_iterations = min_iterations
        self._max_iterations = max_iterations

    @classmethod
    def from_settings(
        cls,
        settings: PasswordPolicySettings,
        random_source: RandomSource | None = None,
    ) -> PasswordProtector:
        protector = cls(
            random_source,
            hasher=ContentHasher(settings.algorithm),
            min_iterations=settings.min_iterations,
            max_iterations=settings.max_iterations,
        )
        protector._generator = PasswordGenerator.from_settings(settings, protector._random)
        return protector

    @property
    def hasher(self) -> ContentHasher:
        return self._hasher

    @property
    def max_iterations(self) -> int:
        return self._max_iterations

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        if self._owned_source is not None:
            self._owned_source.close()

    def __enter__(self) -> PasswordProtector:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def protect(
        self,
        plaintext: str,
        iteration_count: int | None = None,
        salt: str | None = None,
    ) -> ProtectedPassword:
        if not isinstance(plaintext, str) or not plaintext:
            raise ValidationError("Password to protect must be a non-empty string")
        if salt is None:
            salt = self._generator.generate()
        elif not salt:
            raise ValidationError("Salt must not be empty")
        if iteration_count is None:
            iteration_count = self._random.random_integer(self._min_iterations, self._max_iterations)
        elif isinstance(iteration_count, bool) or not isinstance(iteration_count, int):
            raise ValidationError(f"Iteration count must be an integer, got {iteration_count!r}")
        elif iteration_count < 1:
            raise ValidationError(f"Iteration count must be positive, got {iteration_count}")

        digest = self._stretch(plaintext + salt, iteration_count)
        _log.debug(
            "password_protected",
            iterations=iteration_count,
            algorithm=self._hasher.algorithm.name,
        )
        return ProtectedPassword(digest=digest, salt=salt, iteration_count=iteration_count)

    def compare_protected_password(self, candidate: str, stored: ProtectedPassword) -> bool:
        """Return ``True`` when ``candidate`` reproduces ``stored.digest``.

        Digests are compared in constant time.
        """
        if not isinstance(candidate, str) or not candidate:
            return False
        replay = self._stretch(candidate + stored.salt, stored.iteration_count)
        matched = hmac.compare_digest(replay.encode("utf-8"), stored.digest.encode("utf-8"))
        if not matched:
            _log.info("password_verification_failed", iterations=stored.iteration_count)
        return matched

    def _stretch(self, working: str, iteration_count: int) -> str:
        for _ in range(iteration_count):
            working = self._hasher.compute_hash(working, OutputEncoding.BASE64)
        return working


__all__ = ["DEFAULT_MAX_ITERATIONS", "DEFAULT_MIN_ITERATIONS", "PasswordProtector"]
