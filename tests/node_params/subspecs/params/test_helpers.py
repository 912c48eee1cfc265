"""Tests for command-line value parsers."""

from datetime import timedelta

import pytest
from hypothesis import given
from hypothesis import strategies as st

from node_params.subspecs.params import (
    to_address,
    to_addresses,
    to_duration,
    to_price,
    to_seconds,
    to_u256,
)
from node_params.types import Address, InvalidTokenError, Uint256


class TestToSeconds:
    """Tests for period parsing."""

    @pytest.mark.parametrize(
        "text, seconds",
        [
            ("twice-daily", 43200),
            ("half-hourly", 1800),
            ("1second", 1),
            ("1 minute", 60),
            ("hourly", 3600),
            ("daily", 86400),
            ("1day", 86400),
            ("30seconds", 30),
            ("15 minutes", 900),
            ("2hours", 7200),
            ("3 days", 259200),
            ("90", 90),
        ],
    )
    def test_periods(self, text: str, seconds: int) -> None:
        assert to_seconds(text) == seconds

    @pytest.mark.parametrize("text", ["", "soon", "-5", "1.5 hours", "minutes"])
    def test_rejects_invalid(self, text: str) -> None:
        with pytest.raises(InvalidTokenError) as excinfo:
            to_seconds(text)
        assert excinfo.value.message == f"{text}: Invalid duration given."

    @given(st.integers(min_value=0, max_value=10**9))
    def test_bare_integers(self, value: int) -> None:
        assert to_seconds(str(value)) == value

    def test_to_duration(self) -> None:
        assert to_duration("hourly") == timedelta(hours=1)

    @pytest.mark.parametrize("text", ["100000000000000 days", "99999999999999999"])
    def test_duration_too_long(self, text: str) -> None:
        """Periods beyond what a timedelta can hold are rejected like any bad token."""
        with pytest.raises(InvalidTokenError) as excinfo:
            to_duration(text)
        assert excinfo.value.message == f"{text}: Invalid duration given."


class TestToU256:
    """Tests for quantity parsing."""

    @pytest.mark.parametrize("text, value", [("0", 0), ("1000", 1000), ("0x3e8", 1000)])
    def test_values(self, text: str, value: int) -> None:
        assert to_u256(text) == Uint256(value)

    @pytest.mark.parametrize("text", ["", "ten", "-1", "0x", str(2**256)])
    def test_rejects_invalid(self, text: str) -> None:
        with pytest.raises(InvalidTokenError, match="Invalid numeric value"):
            to_u256(text)


class TestAddresses:
    """Tests for address parsing."""

    def test_with_and_without_prefix(self) -> None:
        expected = Address(b"\x12" * 20)
        assert to_address("0x" + "12" * 20) == expected
        assert to_address("12" * 20) == expected

    @pytest.mark.parametrize("text", [None, ""])
    def test_missing_is_zero(self, text: str | None) -> None:
        assert to_address(text) == Address.zero()

    @pytest.mark.parametrize("text", ["0x12", "zz" * 20])
    def test_rejects_invalid(self, text: str) -> None:
        with pytest.raises(InvalidTokenError) as excinfo:
            to_address(text)
        assert excinfo.value.message == f"Invalid address: {text}"

    def test_list(self) -> None:
        text = f"0x{'01' * 20}, 0x{'02' * 20},"
        assert to_addresses(text) == [Address(b"\x01" * 20), Address(b"\x02" * 20)]

    @pytest.mark.parametrize("text", [None, ""])
    def test_empty_list(self, text: str | None) -> None:
        assert to_addresses(text) == []


class TestToPrice:
    """Tests for price parsing."""

    def test_value(self) -> None:
        assert to_price("0.0025") == 0.0025

    @pytest.mark.parametrize("text", ["cheap", "-1", "nan", "inf"])
    def test_rejects_invalid(self, text: str) -> None:
        with pytest.raises(InvalidTokenError):
            to_price(text)
