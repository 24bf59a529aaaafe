"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   └── SecurityError    (pw_commons.security.errors)
    └── ApplicationError     (application.py)
        └── ConfigError      (pw_commons.config.validation)
"""

from pw_commons.kernel.errors.application import ApplicationError
from pw_commons.kernel.errors.base import BaseError
from pw_commons.kernel.errors.domain import DomainError, ValidationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ValidationError",
]
