"""Kernel – framework-agnostic building blocks."""

from pw_commons.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ValidationError,
)
from pw_commons.kernel.security import DEFAULT_SENSITIVE_FIELDS, PasswordHasher

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "ApplicationError",
    "BaseError",
    "DomainError",
    "PasswordHasher",
    "ValidationError",
]
