"""
Client operating modes.

The operating mode controls how eagerly the node stays in sync::

    active   --> always syncing, always connected
    passive  --> syncs, sleeps after `timeout` of inactivity,
                 wakes every `alarm` to catch up
    dark     --> sleeps after `timeout`, wakes only on RPC demand
    offline  --> no networking at all
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Final, TypeAlias

from node_params.types import InvalidTokenError

DEFAULT_MODE_TIMEOUT: Final = timedelta(seconds=300)
"""Idle period before a passive or dark node goes to sleep."""

DEFAULT_MODE_ALARM: Final = timedelta(seconds=3600)
"""Wake-up period of a sleeping passive node."""


@dataclass(frozen=True, slots=True)
class ActiveMode:
    """Always syncing."""

    def __str__(self) -> str:
        return "active"


@dataclass(frozen=True, slots=True)
class PassiveMode:
    """Sync, sleep after `timeout` without activity, wake every `alarm`."""

    timeout: timedelta = DEFAULT_MODE_TIMEOUT
    alarm: timedelta = DEFAULT_MODE_ALARM

    def __str__(self) -> str:
        return "passive"


@dataclass(frozen=True, slots=True)
class DarkMode:
    """Sleep after `timeout` without activity; wake only on demand."""

    timeout: timedelta = DEFAULT_MODE_TIMEOUT

    def __str__(self) -> str:
        return "dark"


@dataclass(frozen=True, slots=True)
class OfflineMode:
    """No networking."""

    def __str__(self) -> str:
        return "offline"


Mode: TypeAlias = ActiveMode | PassiveMode | DarkMode | OfflineMode
"""Union of all operating modes for pattern matching dispatch."""


def parse_mode(
    name: str,
    timeout: timedelta = DEFAULT_MODE_TIMEOUT,
    alarm: timedelta = DEFAULT_MODE_ALARM,
) -> Mode:
    """
    Build a mode from its name and timing parameters.

    Timing parameters that the named mode does not use are ignored.

    Raises:
        InvalidTokenError: If `name` is not a known mode.
    """
    match name:
        case "active":
            return ActiveMode()
        case "passive":
            return PassiveMode(timeout=timeout, alarm=alarm)
        case "dark":
            return DarkMode(timeout=timeout)
        case "offline":
            return OfflineMode()
        case other:
            raise InvalidTokenError(
                "mode",
                other,
                f"{other}: Invalid value for --mode. "
                "Must be one of active, passive, dark or offline.",
            )
