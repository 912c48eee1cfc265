"""
Recursive Length Prefix (RLP) Encoding
======================================

RLP is Ethereum's serialization format for arbitrary nested binary data.
Node parameters only need the encoder: the default miner extra-data is an
RLP list describing the client build.

Encoding Rules
--------------

+-------------+-----------------------------------------------------------+
| Prefix      | Meaning                                                   |
+=============+===========================================================+
| [0x00-0x7f] | Single byte, value is the byte itself                     |
+-------------+-----------------------------------------------------------+
| [0x80-0xb7] | Short string (0-55 bytes), length = prefix - 0x80         |
+-------------+-----------------------------------------------------------+
| [0xb8-0xbf] | Long string (>55 bytes), prefix - 0xb7 = length of length |
+-------------+-----------------------------------------------------------+
| [0xc0-0xf7] | Short list (0-55 bytes payload), length = prefix - 0xc0   |
+-------------+-----------------------------------------------------------+
| [0xf8-0xff] | Long list (>55 bytes payload), prefix - 0xf7 = len of len |
+-------------+-----------------------------------------------------------+

References:
----------
- Ethereum Yellow Paper, Appendix B
- https://ethereum.org/en/developers/docs/data-structures-and-encoding/rlp/
"""

from __future__ import annotations

from typing import TypeAlias

RLPItem: TypeAlias = bytes | list["RLPItem"]
"""
RLP-encodable item.

Either:
- bytes (a byte string)
- list of RLP items (recursive)
"""


SINGLE_BYTE_MAX = 0x7F
"""Boundary between single-byte encoding [0x00-0x7f] and string prefix."""

SHORT_STRING_PREFIX = 0x80
"""Prefix for short strings (0-55 bytes). Final prefix = 0x80 + length."""

SHORT_STRING_MAX_LEN = 55
"""Maximum string length for short encoding."""

LONG_STRING_BASE = 0xB7
"""Base for long string prefix. Final prefix = 0xb7 + length_of_length."""

SHORT_LIST_PREFIX = 0xC0
"""Prefix for short lists (0-55 bytes payload). Final prefix = 0xc0 + length."""

SHORT_LIST_MAX_LEN = 55
"""Maximum list payload length for short encoding."""

LONG_LIST_BASE = 0xF7
"""Base for long list prefix. Final prefix = 0xf7 + length_of_length."""


def encode_rlp(item: RLPItem) -> bytes:
    """
    Encode an item using RLP.

    Args:
        item: Bytes or nested list of bytes to encode.

    Returns:
        RLP-encoded bytes.

    Raises:
        TypeError: If item is not bytes or list.
    """
    if isinstance(item, bytes):
        return _encode_bytes(item)
    if isinstance(item, list):
        return _encode_list(item)
    raise TypeError(f"Cannot RLP encode type: {type(item).__name__}")


def _encode_bytes(data: bytes) -> bytes:
    """Encode a byte string."""
    length = len(data)

    if length == 1 and data[0] <= SINGLE_BYTE_MAX:
        return data

    if length <= SHORT_STRING_MAX_LEN:
        return bytes([SHORT_STRING_PREFIX + length]) + data

    length_bytes = _encode_length(length)
    return bytes([LONG_STRING_BASE + len(length_bytes)]) + length_bytes + data


def _encode_list(items: list[RLPItem]) -> bytes:
    """Encode a list of items."""
    payload = b"".join(encode_rlp(item) for item in items)
    length = len(payload)

    if length <= SHORT_LIST_MAX_LEN:
        return bytes([SHORT_LIST_PREFIX + length]) + payload

    length_bytes = _encode_length(length)
    return bytes([LONG_LIST_BASE + len(length_bytes)]) + length_bytes + payload


def _encode_length(value: int) -> bytes:
    """Encode length as minimal big-endian bytes."""
    return value.to_bytes((value.bit_length() + 7) // 8, "big")
