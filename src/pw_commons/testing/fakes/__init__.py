"""Testing fakes – deterministic doubles for security ports."""
from pw_commons.testing.fakes.random import ScriptedRandomSource

__all__ = ["ScriptedRandomSource"]
