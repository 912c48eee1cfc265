"""Account management configuration."""

from __future__ import annotations

from pydantic import Field

from node_params.types import Address, StrictBaseModel, Uint32


class AccountsConfig(StrictBaseModel):
    """Key store and account unlocking settings."""

    iterations: Uint32 = Uint32(10240)
    """Key-derivation iterations used when encrypting new keys."""

    testnet: bool = False
    """Whether the key store belongs to a test network."""

    password_files: list[str] = Field(default_factory=list)
    """Files holding passwords for the accounts to unlock, one per line."""

    unlocked_accounts: list[Address] = Field(default_factory=list)
    """Accounts unlocked for the whole session."""

    enable_hardware_wallets: bool = True
    """Whether hardware wallets are detected and offered as accounts."""
