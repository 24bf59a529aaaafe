"""Security – PackedPasswordHasher: ProtectedPassword in a single column.

Format: ``<algorithm>$<iterations>$<salt>$<digest>``. Salts may contain
``$`` (it is in the password character set) but base64 digests never do, so
the algorithm and count are split from the left and the digest from the right.
"""
from __future__ import annotations

from pw_commons.kernel.errors import ValidationError
from pw_commons.kernel.security import PasswordHasher
from pw_commons.observability.logging import get_logger
from pw_commons.security.errors import UnsupportedAlgorithmError
from pw_commons.security.hashing import HashAlgorithm
from pw_commons.security.passwords.protected import ProtectedPassword
from pw_commons.security.passwords.protector import PasswordProtector

_log = get_logger(__name__)

_SEP = "$"
_MAX_COUNT_DIGITS = 10

# stored counts above max_iterations * headroom are refused by default
ITERATION_HEADROOM = 4


class PackedPasswordHasher(PasswordHasher):
    """:class:`PasswordHasher` adapter over :class:`PasswordProtector`.

    ``max_iterations`` bounds the iteration count ``verify`` will replay from a
    stored string; it defaults to ``ITERATION_HEADROOM`` times the
    protector's own maximum.
    """

    def __init__(self, protector: PasswordProtector, *, max_iterations: int | None = None) -> None:
        if max_iterations is None:
            max_iterations = protector.max_iterations * ITERATION_HEADROOM
        if max_iterations < 1:
            raise ValidationError(f"max_iterations must be positive, got {max_iterations}")
        self._protector = protector
        self._max_iterations = max_iterations

    def hash(self, password: str) -> str:
        return self.pack(self._protector.protect(password))

    def verify(self, password: str, hashed: str) -> bool:
        """Return ``False`` for a wrong password or a malformed record.

        A record whose iteration count exceeds ``max_iterations`` is refused
        without hashing. Raises :class:`UnsupportedAlgorithmError` when the
        record was written with a different algorithm than this hasher's
        protector uses.
        """
        try:
            algorithm, record = self.unpack(hashed)
        except ValidationError:
            return False
        if algorithm is not self._protector.hasher.algorithm:
            raise UnsupportedAlgorithmError(algorithm.name)
        if record.iteration_count > self._max_iterations:
            _log.warning(
                "packed_password_iterations_exceeded",
                iterations=record.iteration_count,
                limit=self._max_iterations,
            )
            return False
        return self._protector.compare_protected_password(password, record)

    def pack(self, record: ProtectedPassword) -> str:
        algorithm = self._protector.hasher.algorithm.name
        return _SEP.join((algorithm, str(record.iteration_count), record.salt, record.digest))

    @staticmethod
    def unpack(packed: str) -> tuple[HashAlgorithm, ProtectedPassword]:
        head = packed.split(_SEP, 2)
        if len(head) != 3:
            raise ValidationError("Packed password must have four '$'-separated parts")
        algorithm_name, iterations, rest = head
        salt, sep, digest = rest.rpartition(_SEP)
        if not sep or not iterations.isdecimal() or len(iterations) > _MAX_COUNT_DIGITS:
            raise ValidationError("Packed password must have four '$'-separated parts")
        algorithm = HashAlgorithm.parse(algorithm_name)
        return algorithm, ProtectedPassword(digest=digest, salt=salt, iteration_count=int(iterations))


__all__ = ["ITERATION_HEADROOM", "PackedPasswordHasher"]
