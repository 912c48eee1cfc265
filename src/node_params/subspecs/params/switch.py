"""
Tri-state switches and the resync guards built on them.

Some features maintain extra indexes over the whole chain history. Turning
one on for a database that was synced without it would leave the index
silently incomplete, so the guards refuse that transition:

+------------------+-----------+-----------+-----------------------+
| is_first_launch  | requested | persisted | result                |
+==================+===========+===========+=======================+
| False            | ON        | False     | ResyncRequiredError   |
+------------------+-----------+-----------+-----------------------+
| any              | ON        | any       | True                  |
+------------------+-----------+-----------+-----------------------+
| any              | OFF       | any       | False                 |
+------------------+-----------+-----------+-----------------------+
| any              | AUTO      | x         | x                     |
+------------------+-----------+-----------+-----------------------+

Rows are checked top to bottom.
"""

from __future__ import annotations

import logging
from enum import Enum

from node_params.subspecs.client import Mode
from node_params.subspecs.journaldb import Algorithm
from node_params.subspecs.storage import PersistedDefaults
from node_params.types import InvalidTokenError, ResyncRequiredError

logger = logging.getLogger(__name__)


class Switch(Enum):
    """3-value switch."""

    ON = "on"
    """True."""

    OFF = "off"
    """False."""

    AUTO = "auto"
    """Whatever was in effect last time."""

    @classmethod
    def from_str(cls, text: str) -> Switch:
        """
        Parse "on", "off" or "auto".

        Raises:
            InvalidTokenError: For any other token.
        """
        try:
            return cls(text)
        except ValueError:
            raise InvalidTokenError("switch", text) from None

    @classmethod
    def default(cls) -> Switch:
        return cls.AUTO

    def __str__(self) -> str:
        return self.value


def _switch_to_bool(feature: str, switch: Switch, is_first_launch: bool, persisted: bool) -> bool:
    match (is_first_launch, switch, persisted):
        case (False, Switch.ON, False):
            logger.warning(
                "Refusing to enable %s on an existing database without a resync", feature
            )
            raise ResyncRequiredError(feature)
        case (_, Switch.ON, _):
            return True
        case (_, Switch.OFF, _):
            return False
        case (_, Switch.AUTO, default):
            logger.debug("%s switch is auto, using persisted %s", feature, default)
            return default
    raise AssertionError(f"unhandled switch {switch!r}")


def tracing_switch_to_bool(switch: Switch, user_defaults: PersistedDefaults) -> bool:
    """
    Decide whether transaction tracing is enabled.

    Raises:
        ResyncRequiredError: If tracing is switched on for an existing
            database that was synced without it.
    """
    return _switch_to_bool("TraceDB", switch, user_defaults.is_first_launch, user_defaults.tracing)


def fatdb_switch_to_bool(
    switch: Switch, user_defaults: PersistedDefaults, _algorithm: Algorithm
) -> bool:
    """
    Decide whether the fat database is enabled.

    `_algorithm` is accepted for symmetry with future pruning-dependent
    rules and does not currently affect the decision.

    Raises:
        ResyncRequiredError: If the fat database is switched on for an
            existing database that was synced without it.
    """
    return _switch_to_bool("FatDB", switch, user_defaults.is_first_launch, user_defaults.fat_db)


def mode_switch_to_mode(switch: Mode | None, user_defaults: PersistedDefaults) -> Mode:
    """Use the requested mode if there is one, else the persisted mode."""
    if switch is None:
        logger.debug("No mode requested, using persisted %s", user_defaults.mode)
        return user_defaults.mode
    return switch
