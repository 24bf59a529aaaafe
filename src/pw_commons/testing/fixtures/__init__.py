"""Testing fixtures – pytest plugin.

Register in ``conftest.py``::

    pytest_plugins = ["pw_commons.testing.fixtures"]
"""
from pw_commons.testing.fixtures.random import password_protector, secure_random

__all__ = ["password_protector", "secure_random"]
