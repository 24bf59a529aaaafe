"""Security – secure randomness, hashing and password protection."""
from pw_commons.security.errors import (
    GenerationInfeasibleError,
    InvalidConfigurationError,
    InvalidRangeError,
    RandomSourceClosedError,
    SecurityError,
    UnsupportedAlgorithmError,
)
from pw_commons.security.hashing import ContentHasher, HashAlgorithm, OutputEncoding
from pw_commons.security.passwords import (
    PackedPasswordHasher,
    PasswordGenerator,
    PasswordProtector,
    PasswordStrength,
    PasswordValidator,
    ProtectedPassword,
    StrengthReport,
)
from pw_commons.security.random import RandomSource, SecureRandomSource
from pw_commons.security.settings import PasswordPolicySettings

__all__ = [
    "ContentHasher",
    "GenerationInfeasibleError",
    "HashAlgorithm",
    "InvalidConfigurationError",
    "InvalidRangeError",
    "OutputEncoding",
    "PackedPasswordHasher",
    "PasswordGenerator",
    "PasswordPolicySettings",
    "PasswordProtector",
    "PasswordStrength",
    "PasswordValidator",
    "ProtectedPassword",
    "RandomSource",
    "RandomSourceClosedError",
    "SecureRandomSource",
    "SecurityError",
    "StrengthReport",
    "UnsupportedAlgorithmError",
]
