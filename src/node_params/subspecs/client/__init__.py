"""Client operating modes."""

from .mode import (
    DEFAULT_MODE_ALARM,
    DEFAULT_MODE_TIMEOUT,
    ActiveMode,
    DarkMode,
    Mode,
    OfflineMode,
    PassiveMode,
    parse_mode,
)

__all__ = [
    "DEFAULT_MODE_ALARM",
    "DEFAULT_MODE_TIMEOUT",
    "ActiveMode",
    "DarkMode",
    "Mode",
    "OfflineMode",
    "PassiveMode",
    "parse_mode",
]
