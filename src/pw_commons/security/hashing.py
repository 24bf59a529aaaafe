"""Security – ContentHasher with a closed set of digest algorithms."""
from __future__ import annotations

import base64
import enum
import hashlib

from pw_commons.security.errors import UnsupportedAlgorithmError


class HashAlgorithm(enum.Enum):
    """Supported digest algorithms; the value is the ``hashlib`` name."""

    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    @property
    def digest_size(self) -> int:
        return _DIGEST_SIZES[self]

    @classmethod
    def parse(cls, name: str | HashAlgorithm) -> HashAlgorithm:
        """Resolve ``"SHA-256"``, ``"sha256"`` or a member to a :class:`HashAlgorithm`."""
        if isinstance(name, cls):
            return name
        normalised = str(name).strip().lower().replace("-", "").replace("_", "")
        for member in cls:
            if member.value == normalised:
                return member
        raise UnsupportedAlgorithmError(str(name))


_DIGEST_SIZES: dict[HashAlgorithm, int] = {
    HashAlgorithm.MD5: 16,
    HashAlgorithm.SHA1: 20,
    HashAlgorithm.SHA256: 32,
    HashAlgorithm.SHA384: 48,
    HashAlgorithm.SHA512: 64,
}


class OutputEncoding(enum.Enum):
    HEX = "hex"
    BASE64 = "base64"


class ContentHasher:
    """One-way text digests under a configurable algorithm.

    The digest is computed twice (the digest bytes are hashed again) before
    encoding. Stored password records depend on this, so the second pass is
    kept in :meth:`_double_digest` where it can be migrated in one place.
    """

    def __init__(self, algorithm: HashAlgorithm | str = HashAlgorithm.SHA256) -> None:
        self._algorithm = HashAlgorithm.parse(algorithm)
        self._new_digest()  # fail fast when the runtime lacks the algorithm

    @property
    def algorithm(self) -> HashAlgorithm:
        return self._algorithm

    def compute_hash(self, plain_text: str, output_encoding: OutputEncoding = OutputEncoding.BASE64) -> str:
        digest = self._double_digest(plain_text.encode("utf-8"))
        if output_encoding is OutputEncoding.HEX:
            return digest.hex()
        return base64.b64encode(digest).decode("ascii")

    def _double_digest(self, data: bytes) -> bytes:
        first = self._new_digest()
        first.update(data)
        second = self._new_digest()
        second.update(first.digest())
        return second.digest()

    def _new_digest(self) -> hashlib._Hash:
        try:
            return hashlib.new(self._algorithm.value)
        except ValueError as exc:
            # e.g. MD5 on a FIPS-restricted OpenSSL build
            raise UnsupportedAlgorithmError(self._algorithm.value, cause=exc) from exc


__all__ = ["ContentHasher", "HashAlgorithm", "OutputEncoding"]
