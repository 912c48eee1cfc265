"""Account management configuration."""

from .config import AccountsConfig

__all__ = ["AccountsConfig"]
