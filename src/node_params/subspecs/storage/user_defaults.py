"""Persisted defaults record and its JSON mapping."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

from node_params.subspecs.client import (
    DEFAULT_MODE_ALARM,
    DEFAULT_MODE_TIMEOUT,
    ActiveMode,
    DarkMode,
    Mode,
    OfflineMode,
    PassiveMode,
    parse_mode,
)
from node_params.subspecs.journaldb import Algorithm
from node_params.types import ParamsError, StorageError


@dataclass(frozen=True, slots=True)
class UserDefaults:
    """
    Choices recorded by the previous run.

    A fresh record describes a node that has never run: `is_first_launch`
    is True and every feature sits at its default.
    """

    is_first_launch: bool = True
    pruning: Algorithm = Algorithm.OVERLAY_RECENT
    tracing: bool = False
    fat_db: bool = False
    mode: Mode = field(default_factory=ActiveMode)

    def to_json_dict(self) -> dict[str, Any]:
        """
        Flatten into the on-disk JSON layout.

        The mode is spread over `mode`, `mode.timeout` and `mode.alarm`;
        timing keys are only written for modes that use them.
        """
        data: dict[str, Any] = {
            "is_first_launch": self.is_first_launch,
            "pruning": self.pruning.value,
            "tracing": self.tracing,
            "fat_db": self.fat_db,
            "mode": str(self.mode),
        }
        match self.mode:
            case PassiveMode(timeout=timeout, alarm=alarm):
                data["mode.timeout"] = int(timeout.total_seconds())
                data["mode.alarm"] = int(alarm.total_seconds())
            case DarkMode(timeout=timeout):
                data["mode.timeout"] = int(timeout.total_seconds())
            case ActiveMode() | OfflineMode():
                pass
        return data

    @classmethod
    def from_json_dict(cls, data: Any) -> UserDefaults:
        """
        Rebuild a record from its on-disk JSON layout.

        Missing keys fall back to the defaults of a fresh record.

        Raises:
            StorageError: If a key is present but holds an unusable value.
        """
        if not isinstance(data, dict):
            raise StorageError(f"User defaults must be a JSON object, got {type(data).__name__}")

        fresh = cls()
        try:
            pruning = fresh.pruning
            if "pruning" in data:
                pruning = Algorithm.from_str(data["pruning"])

            mode = fresh.mode
            if "mode" in data:
                timeout = DEFAULT_MODE_TIMEOUT
                if "mode.timeout" in data:
                    timeout = timedelta(seconds=int(data["mode.timeout"]))
                alarm = DEFAULT_MODE_ALARM
                if "mode.alarm" in data:
                    alarm = timedelta(seconds=int(data["mode.alarm"]))
                mode = parse_mode(data["mode"], timeout, alarm)
        except (ParamsError, TypeError, ValueError, OverflowError) as e:
            raise StorageError(f"Corrupted user defaults: {e}") from e

        flags: dict[str, bool] = {}
        for key in ("is_first_launch", "tracing", "fat_db"):
            value = data.get(key, getattr(fresh, key))
            if not isinstance(value, bool):
                raise StorageError(f"Corrupted user defaults: {key} must be a boolean")
            flags[key] = value

        return cls(pruning=pruning, mode=mode, **flags)
