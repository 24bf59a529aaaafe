"""Unit tests for ScriptedRandomSource."""

from __future__ import annotations

import pytest

from pw_commons.security.errors import InvalidRangeError
from pw_commons.security.random import RandomSource
from pw_commons.testing import ScriptedRandomSource


class TestScriptedRandomSource:
    def test_satisfies_protocol(self) -> None:
        source: RandomSource = ScriptedRandomSource([1])
        assert source.random_integer(0, 5) == 1

    def test_values_in_order(self) -> None:
        rnd = ScriptedRandomSource([3, 1, 4])
        assert [rnd.random_integer(0, 9) for _ in range(3)] == [3, 1, 4]
        assert rnd.draws == 3

    def test_exhaustion(self) -> None:
        rnd = ScriptedRandomSource([1])
        rnd.random_integer(0, 9)
        with pytest.raises(LookupError):
            rnd.random_integer(0, 9)

    def test_cycle(self) -> None:
        rnd = ScriptedRandomSource([0, 1], cycle=True)
        assert [rnd.random_integer(0, 1) for _ in range(5)] == [0, 1, 0, 1, 0]

    def test_out_of_range_value(self) -> None:
        with pytest.raises(ValueError):
            ScriptedRandomSource([10]).random_integer(0, 9)

    def test_inverted_range(self) -> None:
        with pytest.raises(InvalidRangeError):
            ScriptedRandomSource([1]).random_integer(5, 5)

    def test_boolean_threshold(self) -> None:
        rnd = ScriptedRandomSource([127, 128])
        assert rnd.random_boolean() is False
        assert rnd.random_boolean() is True

    def test_string_uses_indexes(self) -> None:
        assert ScriptedRandomSource([2, 0, 1]).random_string(3, "xyz") == "zxy"

    def test_double_endpoints(self) -> None:
        rnd = ScriptedRandomSource([0, 2147483647])
        assert rnd.random_double(1.0, 3.0) == 1.0
        assert rnd.random_double(1.0, 3.0) == 3.0
