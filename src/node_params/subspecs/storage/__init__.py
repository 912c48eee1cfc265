"""
Storage for persisted defaults.

Provides the read-only view used during resolution and a SQLite-backed
store that loads and saves the record between runs.
"""

from .database import PersistedDefaults
from .namespaces import USER_DEFAULTS, UserDefaultsNamespace
from .sqlite import SQLiteUserDefaultsStore
from .user_defaults import UserDefaults

__all__ = [
    "PersistedDefaults",
    "SQLiteUserDefaultsStore",
    "USER_DEFAULTS",
    "UserDefaults",
    "UserDefaultsNamespace",
]
