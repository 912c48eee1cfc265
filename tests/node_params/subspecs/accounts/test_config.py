"""Tests for account management configuration."""

from node_params.subspecs.accounts import AccountsConfig
from node_params.types import Address, Uint32


def test_defaults() -> None:
    config = AccountsConfig()
    assert config.iterations == Uint32(10240)
    assert config.testnet is False
    assert config.password_files == []
    assert config.unlocked_accounts == []
    assert config.enable_hardware_wallets is True


def test_unlocked_accounts_from_hex() -> None:
    config = AccountsConfig.model_validate({"unlockedAccounts": ["0x" + "ab" * 20]})
    assert config.unlocked_accounts == [Address(b"\xab" * 20)]
