"""Testing generators – Hypothesis strategies."""
from pw_commons.testing.generators.strategies import (
    plaintext_strategy,
    protected_password_strategy,
    salt_strategy,
)

__all__ = [
    "plaintext_strategy",
    "protected_password_strategy",
    "salt_strategy",
]
