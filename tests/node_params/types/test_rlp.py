"""RLP encoder tests against the canonical examples."""

import pytest

from node_params.types import encode_rlp


@pytest.mark.parametrize(
    "item, expected",
    [
        (b"", b"\x80"),
        (b"\x00", b"\x00"),
        (b"\x7f", b"\x7f"),
        (b"\x80", b"\x81\x80"),
        (b"dog", b"\x83dog"),
        ([], b"\xc0"),
        ([b"cat", b"dog"], b"\xc8\x83cat\x83dog"),
        ([[], [[]], [[], [[]]]], bytes.fromhex("c7c0c1c0c3c0c1c0")),
    ],
)
def test_short_items(item: bytes | list, expected: bytes) -> None:
    assert encode_rlp(item) == expected


def test_long_string() -> None:
    """Strings over 55 bytes carry a length-of-length prefix."""
    data = b"Lorem ipsum dolor sit amet, consectetur adipisicing elit"
    assert len(data) == 56
    assert encode_rlp(data) == b"\xb8\x38" + data


def test_long_list() -> None:
    """Lists with payload over 55 bytes carry a length-of-length prefix."""
    items = [b"\x01" * 10] * 6
    payload = (b"\x8a" + b"\x01" * 10) * 6
    assert encode_rlp(items) == b"\xf8" + bytes([len(payload)]) + payload


def test_rejects_unsupported_types() -> None:
    with pytest.raises(TypeError, match="Cannot RLP encode"):
        encode_rlp("text")  # type: ignore[arg-type]
