"""Security – PasswordPolicySettings loaded from ``PW_*`` environment variables."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from pw_commons.config.settings import Settings
from pw_commons.config.validation import InvalidSettingValueError
from pw_commons.security.errors import UnsupportedAlgorithmError
from pw_commons.security.hashing import HashAlgorithm


@dataclasses.dataclass
class PasswordPolicySettings(Settings):
    """Generator and protector options.

    Example::

        settings = EnvSettingsLoader().load(PasswordPolicySettings)
        with PasswordProtector.from_settings(settings) as protector:
            record = protector.protect(plaintext)
    """

    _prefix: ClassVar[str] = "PW"

    minimum_size: int = 6
    maximum_size: int = 20
    allow_repeat_characters: bool = False
    allow_consecutive_characters: bool = False
    hash_algorithm: str = "SHA256"
    min_iterations: int = 500
    max_iterations: int = 1024

    def _validate(self) -> None:
        if self.minimum_size < 2:
            raise InvalidSettingValueError("minimum_size", self.minimum_size, "must be at least 2")
        if self.maximum_size < self.minimum_size:
            raise InvalidSettingValueError(
                "maximum_size", self.maximum_size, f"must be >= minimum_size ({self.minimum_size})"
            )
        if self.min_iterations < 1:
            raise InvalidSettingValueError("min_iterations", self.min_iterations, "must be positive")
        if self.max_iterations <= self.min_iterations:
            raise InvalidSettingValueError(
                "max_iterations", self.max_iterations, f"must be > min_iterations ({self.min_iterations})"
            )
        try:
            HashAlgorithm.parse(self.hash_algorithm)
        except UnsupportedAlgorithmError as exc:
            raise InvalidSettingValueError("hash_algorithm", self.hash_algorithm, "unknown algorithm") from exc

    @property
    def algorithm(self) -> HashAlgorithm:
        return HashAlgorithm.parse(self.hash_algorithm)


__all__ = ["PasswordPolicySettings"]
