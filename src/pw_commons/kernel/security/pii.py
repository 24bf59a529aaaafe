"""Kernel security – default sensitive field names."""
from __future__ import annotations

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "plaintext", "candidate", "secret", "token",
    "salt", "digest", "hashed", "api_key", "apikey", "authorization",
})


__all__ = ["DEFAULT_SENSITIVE_FIELDS"]
