"""Tests for yearfrac.core.result: Ok / Err outcome values."""

from __future__ import annotations

import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from yearfrac.core.result import Err, Ok, unwrap


class TestOk:
    def test_is_frozen(self) -> None:
        ok = Ok(42)
        with pytest.raises(dataclasses.FrozenInstanceError):
            ok.value = 99  # type: ignore[misc]

    def test_pattern_match(self) -> None:
        match Ok(42):
            case Ok(v):
                assert v == 42
            case _:
                pytest.fail("Should match Ok")

    def test_map(self) -> None:
        assert Ok(2).map(lambda x: x * 3) == Ok(6)

    def test_and_then(self) -> None:
        assert Ok(2).and_then(lambda x: Ok(x + 1)) == Ok(3)
        assert Ok(2).and_then(lambda _: Err("no")) == Err("no")

    def test_map_err_is_noop(self) -> None:
        assert Ok(1).map_err(str.upper) == Ok(1)


class TestErr:
    def test_is_frozen(self) -> None:
        err = Err("fail")
        with pytest.raises(dataclasses.FrozenInstanceError):
            err.error = "other"  # type: ignore[misc]

    def test_map_short_circuits(self) -> None:
        assert Err("fail").map(lambda x: x * 3) == Err("fail")
        assert Err("fail").and_then(lambda x: Ok(x)) == Err("fail")

    def test_unwrap_raises(self) -> None:
        with pytest.raises(RuntimeError, match="fail"):
            Err("fail").unwrap()

    def test_map_err(self) -> None:
        assert Err("fail").map_err(str.upper) == Err("FAIL")


class TestFreeFunctions:
    def test_unwrap_ok(self) -> None:
        assert unwrap(Ok("v")) == "v"

    def test_unwrap_err_raises(self) -> None:
        with pytest.raises(RuntimeError, match="unwrap on Err"):
            unwrap(Err("bad"))

    def test_unwrap_rejects_non_result(self) -> None:
        with pytest.raises(TypeError):
            unwrap(42)  # type: ignore[arg-type]

    @given(n=st.integers())
    def test_unwrap_any_ok(self, n: int) -> None:
        assert unwrap(Ok(n)) == n
