"""
Selector resolution.

Combines what the operator asked for with what the previous run persisted,
rejecting combinations that would leave the database inconsistent.
"""

from .helpers import to_address, to_addresses, to_duration, to_price, to_seconds, to_u256
from .pruning import (
    DEFAULT_PRUNING,
    AutoPruning,
    Pruning,
    SpecificPruning,
    parse_pruning,
    to_algorithm,
)
from .switch import Switch, fatdb_switch_to_bool, mode_switch_to_mode, tracing_switch_to_bool

__all__ = [
    "AutoPruning",
    "DEFAULT_PRUNING",
    "Pruning",
    "SpecificPruning",
    "Switch",
    "fatdb_switch_to_bool",
    "mode_switch_to_mode",
    "parse_pruning",
    "to_address",
    "to_addresses",
    "to_algorithm",
    "to_duration",
    "to_price",
    "to_seconds",
    "to_u256",
    "tracing_switch_to_bool",
]
