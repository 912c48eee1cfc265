"""Block authoring settings that sit alongside the miner proper."""

from __future__ import annotations

from pydantic import Field

from node_params.types import Address, HexBytes, StrictBaseModel, Uint256
from node_params.version import version_data


class MinerExtras(StrictBaseModel):
    """Who authors blocks, what they say, and how full they get."""

    author: Address = Address.zero()
    """Beneficiary of block rewards."""

    extra_data: HexBytes = Field(default_factory=version_data)
    """Payload written into the extra-data field of authored blocks."""

    gas_floor_target: Uint256 = Uint256(4_700_000)
    """Block gas limit to move towards when the limit is below it."""

    gas_ceil_target: Uint256 = Uint256(6_283_184)
    """Block gas limit to move towards when the limit is above it."""

    transactions_limit: int = 1024
    """Maximum number of pending transactions kept in the queue."""

    engine_signer: Address = Address.zero()
    """Account that signs blocks for authority-based engines."""
