"""Client version and the default block extra-data derived from it."""

from __future__ import annotations

import platform
import sys
from typing import Final

from node_params.types import HexBytes, Uint32, encode_rlp

__version__: Final = "0.1.0"

CLIENT_NAME: Final = "NodeParams"
"""Client name advertised in block extra-data."""


def packed_version(version: str = __version__) -> Uint32:
    """Pack "major.minor.patch" into one integer, one byte per component."""
    major, minor, patch = (int(part) for part in version.split(".")[:3])
    return Uint32((major << 16) | (minor << 8) | patch)


def version_data() -> HexBytes:
    """
    Default extra-data for sealed blocks.

    An RLP list of [packed version, client name, Python "major.minor",
    first two letters of the OS name]. Stays well under the 32-byte
    extra-data limit of the compiled-in chains.
    """
    python = f"{sys.version_info.major}.{sys.version_info.minor}"
    os_name = platform.system().lower()[:2]
    return HexBytes(
        encode_rlp(
            [
                packed_version().to_minimal_bytes(),
                CLIENT_NAME.encode(),
                python.encode(),
                os_name.encode(),
            ]
        )
    )
