"""conftest.py for benchmarks.

One random source is shared by the whole session so that benchmark timings
measure hashing and generation, not source construction.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from pw_commons.security import PasswordProtector, SecureRandomSource


@pytest.fixture(scope="session")
def shared_random() -> Iterator[SecureRandomSource]:
    with SecureRandomSource() as source:
        yield source


@pytest.fixture(scope="session")
def default_protector(shared_random: SecureRandomSource) -> PasswordProtector:
    """Protector with the production iteration range ``[500, 1024]``."""
    return PasswordProtector(shared_random)
