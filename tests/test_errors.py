"""Tests for yearfrac.core.errors: error values."""

from __future__ import annotations

import dataclasses
import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from yearfrac.core.errors import INVALID_VALUE, InvalidValueError, YearfracError


def _invalid(value: object = "bogus") -> InvalidValueError:
    return InvalidValueError.create(value, source="test.fn")


class TestYearfracError:
    def test_is_frozen(self) -> None:
        err = YearfracError(message="base error", code="E001", source="test.fn")
        with pytest.raises(dataclasses.FrozenInstanceError):
            err.message = "changed"  # type: ignore[misc]

    def test_to_dict_keys(self) -> None:
        d = YearfracError(message="m", code="c", source="s").to_dict()
        assert set(d.keys()) == {"message", "code", "source"}

    def test_str_is_message(self) -> None:
        assert str(YearfracError(message="m", code="c", source="s")) == "m"


class TestInvalidValueError:
    def test_is_subclass(self) -> None:
        assert isinstance(_invalid(), YearfracError)

    def test_carries_raw_value(self) -> None:
        err = _invalid("bogus")
        assert err.value == "bogus"
        assert err.code == INVALID_VALUE
        assert err.source == "test.fn"

    def test_int_value_is_stringified(self) -> None:
        assert _invalid(5).value == "5"

    def test_message_lists_accepted_values(self) -> None:
        msg = _invalid("bogus").message
        assert msg.startswith("Yearfrac: Invalid Value: bogus.")
        for name in ("nasd30/360", "act/act", "act360", "act365", "eur30/360"):
            assert name in msg
        assert "0-4" in msg

    def test_to_dict_includes_value(self) -> None:
        d = _invalid().to_dict()
        assert set(d.keys()) == {"message", "code", "source", "value"}
        json.dumps(d)  # should not raise

    def test_with_context_keeps_type_and_value(self) -> None:
        err = _invalid("x").with_context("coupon leg")
        assert isinstance(err, InvalidValueError)
        assert err.message.startswith("coupon leg: Yearfrac: Invalid Value: x.")
        assert err.value == "x"

    def test_is_frozen(self) -> None:
        err = _invalid()
        with pytest.raises(dataclasses.FrozenInstanceError):
            err.value = "other"  # type: ignore[misc]

    @given(raw=st.text())
    def test_value_round_trips_any_text(self, raw: str) -> None:
        assert _invalid(raw).value == raw
