"""
Database namespace definitions for storage tables.

Defines table names and schema constants for SQLite storage.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class UserDefaultsNamespace:
    """
    Namespace for persisted defaults.

    A key-value table; the defaults record is a single JSON document
    stored under `DEFAULTS_KEY`.
    """

    TABLE_NAME: str = "user_defaults"
    """Table name for persisted defaults."""

    CREATE_TABLE: str = """
        CREATE TABLE IF NOT EXISTS user_defaults (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL
        )
    """
    """SQL to create the defaults table."""

    DEFAULTS_KEY: str = "defaults"
    """Key of the row holding the defaults record."""


USER_DEFAULTS = UserDefaultsNamespace()
