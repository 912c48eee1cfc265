"""
SQLite storage for persisted defaults.

The defaults record is small and written once per start, so it lives as
one JSON document in a key-value table. A missing row means the node has
never completed a start: loading then yields a fresh record with
`is_first_launch` set.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from dataclasses import replace
from pathlib import Path

from node_params.types import StorageError

from .namespaces import USER_DEFAULTS
from .user_defaults import UserDefaults

logger = logging.getLogger(__name__)


class SQLiteUserDefaultsStore:
    """
    SQLite-backed store for the defaults record.

    Data is stored as a JSON document.
    Deserialization happens on read.
    """

    def __init__(self, path: Path | str) -> None:
        """
        Open (or create) the defaults database.

        Args:
            path: Path to SQLite database file.
                  Use ":memory:" for in-memory database.

        Raises:
            StorageError: If the directory or database cannot be created or opened.
        """
        self._path = Path(path) if isinstance(path, str) else path

        try:
            if str(self._path) != ":memory:":
                self._path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(str(self._path))
        except (OSError, sqlite3.Error) as e:
            raise StorageError(f"Could not open user defaults at {self._path}: {e}") from e

        self._conn.row_factory = sqlite3.Row
        try:
            self._init_schema()
        except sqlite3.Error as e:
            self._conn.close()
            raise StorageError(f"Could not open user defaults at {self._path}: {e}") from e

    def _init_schema(self) -> None:
        """Create tables if they don't exist."""
        cursor = self._conn.cursor()
        cursor.execute(USER_DEFAULTS.CREATE_TABLE)
        self._conn.commit()

    def load(self) -> UserDefaults:
        """
        Read the defaults record.

        Returns:
            The stored record, or a fresh one if nothing was saved yet.

        Raises:
            StorageError: If the table cannot be read or the stored document is not valid.
        """
        try:
            cursor = self._conn.cursor()
            cursor.execute(
                f"SELECT value FROM {USER_DEFAULTS.TABLE_NAME} WHERE key = ?",
                (USER_DEFAULTS.DEFAULTS_KEY,),
            )
            row = cursor.fetchone()
        except sqlite3.Error as e:
            raise StorageError(f"Could not read user defaults: {e}") from e
        if row is None:
            logger.debug("No persisted defaults in %s, treating as first launch", self._path)
            return UserDefaults()

        try:
            data = json.loads(row["value"])
        except json.JSONDecodeError as e:
            raise StorageError(f"Corrupted user defaults: {e}") from e
        return UserDefaults.from_json_dict(data)

    def save(self, defaults: UserDefaults) -> None:
        """
        Write the defaults record.

        A saved record always describes a completed start, so
        `is_first_launch` is stored as False whatever the caller passed.

        Raises:
            StorageError: If the record cannot be written.
        """
        record = replace(defaults, is_first_launch=False)
        try:
            cursor = self._conn.cursor()
            # INSERT OR REPLACE keeps exactly one row under the defaults key.
            cursor.execute(
                f"INSERT OR REPLACE INTO {USER_DEFAULTS.TABLE_NAME} (key, value) VALUES (?, ?)",
                (USER_DEFAULTS.DEFAULTS_KEY, json.dumps(record.to_json_dict(), sort_keys=True)),
            )
            self._conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Could not write user defaults: {e}") from e
        logger.debug("Saved user defaults to %s", self._path)

    def close(self) -> None:
        """Close database connection."""
        self._conn.close()

    def __enter__(self) -> SQLiteUserDefaultsStore:
        """Context manager entry."""
        return self

    def __exit__(self, *args: object) -> None:
        """Context manager exit."""
        self.close()
