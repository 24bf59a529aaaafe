"""Testing support – fakes, fixtures and Hypothesis strategies.

Import in your ``conftest.py``::

    pytest_plugins = ["pw_commons.testing.fixtures"]
"""

from pw_commons.testing.fakes import ScriptedRandomSource

__all__ = ["ScriptedRandomSource"]
