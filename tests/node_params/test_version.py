"""Tests for the client version and default extra-data."""

from node_params.types import Uint32, encode_rlp
from node_params.version import CLIENT_NAME, __version__, packed_version, version_data


def test_packed_version() -> None:
    assert packed_version("1.2.3") == Uint32(0x010203)
    assert packed_version("0.1.0") == Uint32(0x000100)


def test_packed_version_defaults_to_current() -> None:
    assert packed_version() == packed_version(__version__)


def test_version_data_is_rlp_list() -> None:
    data = version_data()
    # Short RLP list: one prefix byte followed by the payload.
    assert 0xC0 <= data[0] <= 0xF7
    assert len(data) == 1 + data[0] - 0xC0
    assert encode_rlp([CLIENT_NAME.encode()])[1:] in data
