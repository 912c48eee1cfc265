"""Parsers for the free-form values operators type on the command line."""

from __future__ import annotations

import math
from datetime import timedelta
from typing import Final

from node_params.types import Address, InvalidTokenError, Uint256

_NAMED_PERIODS: Final[dict[str, int]] = {
    "twice-daily": 12 * 60 * 60,
    "half-hourly": 30 * 60,
    "1second": 1,
    "1 second": 1,
    "second": 1,
    "1minute": 60,
    "1 minute": 60,
    "minute": 60,
    "hourly": 60 * 60,
    "1hour": 60 * 60,
    "1 hour": 60 * 60,
    "hour": 60 * 60,
    "daily": 24 * 60 * 60,
    "1day": 24 * 60 * 60,
    "1 day": 24 * 60 * 60,
    "day": 24 * 60 * 60,
}

_UNIT_SUFFIXES: Final[tuple[tuple[str, int], ...]] = (
    ("seconds", 1),
    ("minutes", 60),
    ("hours", 60 * 60),
    ("days", 24 * 60 * 60),
)


def to_seconds(text: str) -> int:
    """
    Parse a period such as "hourly", "30 minutes" or "90".

    Raises:
        InvalidTokenError: If the period is not recognised.
    """
    if text in _NAMED_PERIODS:
        return _NAMED_PERIODS[text]

    number, multiplier = text, 1
    for suffix, unit in _UNIT_SUFFIXES:
        if text.endswith(suffix):
            number, multiplier = text[: -len(suffix)], unit
            break

    try:
        count = int(number.strip())
    except ValueError:
        raise InvalidTokenError(
            "duration", text, f"{text}: Invalid duration given."
        ) from None
    if count < 0:
        raise InvalidTokenError("duration", text, f"{text}: Invalid duration given.")
    return count * multiplier


def to_duration(text: str) -> timedelta:
    """
    Parse a period into a `timedelta` (see `to_seconds`).

    Raises:
        InvalidTokenError: If the period is not recognised or too long to represent.
    """
    seconds = to_seconds(text)
    try:
        return timedelta(seconds=seconds)
    except OverflowError:
        raise InvalidTokenError(
            "duration", text, f"{text}: Invalid duration given."
        ) from None


def to_u256(text: str) -> Uint256:
    """
    Parse a decimal or `0x`-prefixed hexadecimal quantity.

    Raises:
        InvalidTokenError: If the text is not a number that fits in 256 bits.
    """
    try:
        return Uint256(text)
    except (ValueError, OverflowError):
        raise InvalidTokenError("quantity", text, f"Invalid numeric value: {text}") from None


def to_address(text: str | None) -> Address:
    """
    Parse a 20-byte hex address, with or without `0x`.

    A missing or empty value yields the zero address.

    Raises:
        InvalidTokenError: If the text is not 40 hex digits.
    """
    if not text:
        return Address.zero()
    try:
        return Address(text)
    except ValueError:
        raise InvalidTokenError("address", text, f"Invalid address: {text}") from None


def to_addresses(text: str | None) -> list[Address]:
    """Parse a comma-separated list of addresses; empty input gives an empty list."""
    if not text:
        return []
    return [to_address(part.strip()) for part in text.split(",") if part.strip()]


def to_price(text: str) -> float:
    """
    Parse a non-negative price such as "0.0025".

    Raises:
        InvalidTokenError: If the text is not a non-negative number.
    """
    try:
        price = float(text)
    except ValueError:
        raise InvalidTokenError(
            "price", text, f"Invalid numeric value: {text}"
        ) from None
    if not math.isfinite(price) or price < 0:
        raise InvalidTokenError("price", text, f"Invalid numeric value: {text}")
    return price
