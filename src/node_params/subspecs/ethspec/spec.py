"""
Chain specification model and loader.

A chain specification pins down everything a node must agree on with its
peers before the first block: the consensus engine, the protocol
parameters and the genesis header.

Specification files use the cross-client JSON layout with camelCase keys::

    {
      "name": "Morden",
      "engine": {"Ethash": {"params": {...}}},
      "params": {"accountStartNonce": "0x100000", "networkID": "0x2", ...},
      "genesis": {"seal": {...}, "difficulty": "0x20000", "gasLimit": "0x2fefd8", ...},
      "accounts": {"0x...": {"balance": "1"}}
    }

Quantities may be written as decimal integers or `0x` hex strings.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import IO, Any

import yaml
from pydantic import Field, ValidationError, field_validator, model_validator

from node_params.types import (
    Address,
    Bytes8,
    Bytes32,
    HexBytes,
    SpecLoadError,
    StrictBaseModel,
    Uint64,
    Uint256,
)

logger = logging.getLogger(__name__)


class EngineSpec(StrictBaseModel):
    """
    Consensus engine selection.

    Files spell the engine as a single-key object, `{"Ethash": {...}}`.
    The key becomes `name`, the value is kept opaque as `params`.
    """

    name: str
    """Engine name, e.g. "Ethash", "InstantSeal", "AuthorityRound"."""

    params: dict[str, Any] = Field(default_factory=dict)
    """Engine-specific parameters, interpreted by the engine itself."""

    @model_validator(mode="before")
    @classmethod
    def unwrap_single_key(cls, data: Any) -> Any:
        """Accept both the file layout and the explicit `name`/`params` layout."""
        if isinstance(data, dict) and "name" not in data:
            if len(data) != 1:
                raise ValueError(f"engine must have exactly one key, got {sorted(data)}")
            ((name, body),) = data.items()
            if body is None:
                body = {}
            if not isinstance(body, dict):
                raise ValueError(f"engine {name} body must be an object")
            return {"name": name, "params": body.get("params", body)}
        return data


class SpecParams(StrictBaseModel):
    """Protocol parameters shared by every engine."""

    account_start_nonce: Uint256 = Uint256(0)
    """Nonce assigned to freshly created accounts."""

    maximum_extra_data_size: Uint64 = Uint64(32)
    """Largest extra-data payload a block header may carry."""

    min_gas_limit: Uint256 = Uint256(5000)
    """Floor under which the block gas limit may never fall."""

    network_id: Uint64 = Field(alias="networkID")
    """Network identifier used in the peer handshake."""

    gas_limit_bound_divisor: Uint256 = Uint256(1024)
    """Bounds how far the gas limit may move between consecutive blocks."""

    fork_block: Uint64 | None = None
    """Block number of a contentious fork, checked against peers."""

    fork_canon_hash: Bytes32 | None = None
    """Canonical hash expected at `fork_block`."""


class Seal(StrictBaseModel):
    """Proof-of-work seal of the genesis header."""

    nonce: Bytes8 = Bytes8.zero()
    mix_hash: Bytes32 = Bytes32.zero()

    @model_validator(mode="before")
    @classmethod
    def unwrap_ethereum(cls, data: Any) -> Any:
        """Files nest the seal fields under an `ethereum` key."""
        if isinstance(data, dict) and "ethereum" in data:
            return data["ethereum"]
        return data


class GenesisSpec(StrictBaseModel):
    """Header fields of block zero."""

    seal: Seal = Field(default_factory=Seal)
    difficulty: Uint256
    author: Address = Address.zero()
    timestamp: Uint64 = Uint64(0)
    parent_hash: Bytes32 = Bytes32.zero()
    gas_limit: Uint256
    extra_data: HexBytes = HexBytes(b"")


class AccountSpec(StrictBaseModel):
    """Pre-funded genesis account."""

    balance: Uint256 = Uint256(0)
    nonce: Uint256 | None = None


class Specification(StrictBaseModel):
    """
    A fully parsed chain specification.

    Immutable once loaded. Compiled-in networks and custom files produce
    the same type, so consumers never need to know where it came from.
    """

    name: str
    """Human readable chain name."""

    data_dir: str | None = None
    """Directory name for this chain's databases; defaults to `name`."""

    engine: EngineSpec
    params: SpecParams
    genesis: GenesisSpec
    accounts: dict[Address, AccountSpec] = Field(default_factory=dict)

    @field_validator("accounts", mode="before")
    @classmethod
    def parse_account_keys(cls, v: Any) -> Any:
        """Account keys arrive as hex strings; convert them to addresses."""
        if isinstance(v, dict):
            return {Address(k) if isinstance(k, str) else k: body for k, body in v.items()}
        return v

    @property
    def data_dir_name(self) -> str:
        """Directory name for this chain's databases."""
        return self.data_dir or self.name

    @classmethod
    def from_dict(cls, data: Any) -> Specification:
        """
        Validate an already-decoded specification document.

        Raises:
            SpecLoadError: If the document does not describe a valid specification.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise SpecLoadError(f"Spec json is invalid: {e}") from e

    @classmethod
    def load(cls, stream: IO[str]) -> Specification:
        """
        Parse a JSON specification from an open text stream.

        Raises:
            SpecLoadError: If the stream is not valid JSON or not a valid specification.
        """
        try:
            data = json.load(stream)
        except ValueError as e:
            raise SpecLoadError(f"Spec json is invalid: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def load_yaml(cls, stream: IO[str]) -> Specification:
        """
        Parse a YAML specification from an open text stream.

        Same document layout as the JSON form.

        Raises:
            SpecLoadError: If the stream is not valid YAML or not a valid specification.
        """
        try:
            data = yaml.safe_load(stream)
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise SpecLoadError(f"Spec json is invalid: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def load_file(cls, path: Path | str) -> Specification:
        """
        Load a specification file, choosing the decoder by extension.

        `.yaml` and `.yml` files are read as YAML, everything else as JSON.
        The file handle is released whether or not parsing succeeds.

        Raises:
            OSError: If the file cannot be opened.
            SpecLoadError: If the contents are not a valid specification.
        """
        path = Path(path)
        with path.open(encoding="utf-8") as f:
            if path.suffix.lower() in (".yaml", ".yml"):
                spec = cls.load_yaml(f)
            else:
                spec = cls.load(f)
        logger.info("Loaded chain specification %r from %s", spec.name, path)
        return spec
