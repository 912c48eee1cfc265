"""Reusable type definitions for node parameters."""

from .base import CamelModel, StrictBaseModel
from .byte_arrays import Address, BaseBytes, Bytes8, Bytes20, Bytes32, HexBytes
from .exceptions import (
    InvalidTokenError,
    ParamsError,
    ResyncRequiredError,
    SpecLoadError,
    StorageError,
)
from .rlp import encode_rlp
from .uint import BaseUint, Uint32, Uint64, Uint256

__all__ = [
    # Core types
    "Uint32",
    "Uint64",
    "Uint256",
    "BaseUint",
    "BaseBytes",
    "Bytes8",
    "Bytes20",
    "Bytes32",
    "Address",
    "HexBytes",
    "CamelModel",
    "StrictBaseModel",
    "encode_rlp",
    # Exceptions
    "ParamsError",
    "InvalidTokenError",
    "ResyncRequiredError",
    "SpecLoadError",
    "StorageError",
]
