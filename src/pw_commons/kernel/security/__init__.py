"""Kernel security – PasswordHasher port and sensitive field names."""
from pw_commons.kernel.security.crypto import PasswordHasher
from pw_commons.kernel.security.pii import DEFAULT_SENSITIVE_FIELDS

__all__ = ["DEFAULT_SENSITIVE_FIELDS", "PasswordHasher"]
