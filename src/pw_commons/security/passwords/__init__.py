"""Security – password generation, protection and strength rating."""
from pw_commons.security.passwords.generator import PasswordGenerator
from pw_commons.security.passwords.packed import PackedPasswordHasher
from pw_commons.security.passwords.protected import ProtectedPassword
from pw_commons.security.passwords.protector import PasswordProtector
from pw_commons.security.passwords.validator import PasswordStrength, PasswordValidator, StrengthReport

__all__ = [
    "PackedPasswordHasher",
    "PasswordGenerator",
    "PasswordProtector",
    "PasswordStrength",
    "PasswordValidator",
    "ProtectedPassword",
    "StrengthReport",
]
