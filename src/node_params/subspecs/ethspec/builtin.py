"""
Compiled-in chain specifications.

Well-known networks ship with the client so that selecting them never
touches the filesystem and never fails.
"""

from __future__ import annotations

from typing import Final

from node_params.types import Address, Bytes8, Bytes32, HexBytes, Uint64, Uint256

from .spec import EngineSpec, GenesisSpec, Seal, Specification, SpecParams

_POW_NONCE_42: Final = Bytes8("0x0000000000000042")
"""Genesis nonce shared by mainnet and several of its test networks."""

_MAINNET_EXTRA_DATA: Final = HexBytes(
    "0x11bbe8db4e347b4e8c937c1c8370e4b5ed33adb3db69cbdb7a38e1e50b1b82fa"
)

_ETHASH_HOMESTEAD: Final = {
    "minimumDifficulty": "0x020000",
    "difficultyBoundDivisor": "0x0800",
    "durationLimit": "0x0d",
    "homesteadTransition": "0x118c30",
}

FOUNDATION: Final = Specification(
    name="Foundation",
    data_dir="ethereum",
    engine=EngineSpec(name="Ethash", params=_ETHASH_HOMESTEAD),
    params=SpecParams(
        network_id=Uint64(1),
        account_start_nonce=Uint256(0),
        maximum_extra_data_size=Uint64(32),
        min_gas_limit=Uint256(5000),
        fork_block=Uint64(1_920_000),
        fork_canon_hash=Bytes32(
            "0x4985f5ca3d2afbec36529aa96f74de3cc10a2a4a6c44f2157a57d2c6059a11bb"
        ),
    ),
    genesis=GenesisSpec(
        seal=Seal(nonce=_POW_NONCE_42, mix_hash=Bytes32.zero()),
        difficulty=Uint256(0x400000000),
        gas_limit=Uint256(0x1388),
        extra_data=_MAINNET_EXTRA_DATA,
    ),
)
"""The original Ethereum network."""

CLASSIC: Final = Specification(
    name="Ethereum Classic",
    data_dir="classic",
    engine=EngineSpec(name="Ethash", params=_ETHASH_HOMESTEAD),
    params=SpecParams(
        network_id=Uint64(1),
        fork_block=Uint64(1_920_000),
        fork_canon_hash=Bytes32(
            "0x94365e3a8c0b35089c1d1195081fe7489b528a84b22199c916180db8b28ade7f"
        ),
    ),
    genesis=FOUNDATION.genesis,
)
"""The chain that refused the block 1,920,000 irregular state change."""

MORDEN: Final = Specification(
    name="Morden",
    data_dir="test",
    engine=EngineSpec(name="Ethash", params={"minimumDifficulty": "0x020000"}),
    params=SpecParams(
        network_id=Uint64(2),
        account_start_nonce=Uint256(0x100000),
    ),
    genesis=GenesisSpec(
        seal=Seal(nonce=Bytes8("0x00006d6f7264656e"), mix_hash=Bytes32.zero()),
        difficulty=Uint256(0x20000),
        gas_limit=Uint256(0x2FEFD8),
    ),
)
"""The original test network, kept alive by the classic community."""

ROPSTEN: Final = Specification(
    name="Ropsten",
    data_dir="test",
    engine=EngineSpec(name="Ethash", params={"minimumDifficulty": "0x020000"}),
    params=SpecParams(network_id=Uint64(3)),
    genesis=GenesisSpec(
        seal=Seal(nonce=_POW_NONCE_42, mix_hash=Bytes32.zero()),
        difficulty=Uint256(0x100000),
        gas_limit=Uint256(0x1000000),
        extra_data=HexBytes(b"\x35" * 32),
    ),
)
"""Proof-of-work test network."""

KOVAN: Final = Specification(
    name="Kovan",
    data_dir="kovan",
    engine=EngineSpec(
        name="AuthorityRound",
        params={"stepDuration": "4", "blockReward": "0x4563918244F40000"},
    ),
    params=SpecParams(
        network_id=Uint64(42),
        maximum_extra_data_size=Uint64(0x20),
        min_gas_limit=Uint256(0x1388),
    ),
    genesis=GenesisSpec(
        difficulty=Uint256(0x20000),
        gas_limit=Uint256(0x5B8D80),
    ),
)
"""Proof-of-authority test network."""

OLYMPIC: Final = Specification(
    name="Frontier (Test)",
    data_dir="olympic",
    engine=EngineSpec(name="Ethash", params={"minimumDifficulty": "0x020000"}),
    params=SpecParams(network_id=Uint64(0)),
    genesis=GenesisSpec(
        seal=Seal(nonce=Bytes8("0x000000000000002a"), mix_hash=Bytes32.zero()),
        difficulty=Uint256(0x20000),
        gas_limit=Uint256(0x2FEFD8),
    ),
)
"""Pre-launch test network of the Frontier release."""

EXPANSE: Final = Specification(
    name="Expanse",
    data_dir="expanse",
    engine=EngineSpec(name="Ethash", params={"minimumDifficulty": "0x020000"}),
    params=SpecParams(network_id=Uint64(1), min_gas_limit=Uint256(0x1388)),
    genesis=GenesisSpec(
        seal=Seal(nonce=Bytes8("0x214652414e4b4f21"), mix_hash=Bytes32.zero()),
        difficulty=Uint256(0x40000000),
        gas_limit=Uint256(0x1388),
        timestamp=Uint64(0x55B5DC4B),
    ),
)
"""Independent chain forked from the Ethereum codebase."""

DEV: Final = Specification(
    name="DevelopmentChain",
    data_dir="dev",
    engine=EngineSpec(name="InstantSeal"),
    params=SpecParams(network_id=Uint64(0x11)),
    genesis=GenesisSpec(
        difficulty=Uint256(0x20000),
        gas_limit=Uint256(0x5B8D80),
        author=Address.zero(),
    ),
)
"""Single-node development chain that seals every transaction instantly."""
