"""Pruning selection: a specific algorithm, or whatever the database already uses."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final, TypeAlias

from node_params.subspecs.journaldb import Algorithm
from node_params.subspecs.storage import PersistedDefaults

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AutoPruning:
    """Keep the algorithm the database was created with."""

    def __str__(self) -> str:
        return "auto"


@dataclass(frozen=True, slots=True)
class SpecificPruning:
    """Use exactly this algorithm."""

    algorithm: Algorithm

    def __str__(self) -> str:
        return str(self.algorithm)


Pruning: TypeAlias = AutoPruning | SpecificPruning
"""Union of the pruning selectors for pattern matching dispatch."""

DEFAULT_PRUNING: Final[Pruning] = AutoPruning()


def parse_pruning(text: str) -> Pruning:
    """
    Parse a pruning selector.

    "auto" defers to persisted state; anything else must name an algorithm.

    Raises:
        InvalidTokenError: Propagated from the algorithm name parser.
    """
    if text == "auto":
        return AutoPruning()
    return SpecificPruning(Algorithm.from_str(text))


def to_algorithm(pruning: Pruning, user_defaults: PersistedDefaults) -> Algorithm:
    """Resolve the selector to a concrete algorithm. Never fails."""
    match pruning:
        case SpecificPruning(algorithm=algorithm):
            return algorithm
        case AutoPruning():
            logger.debug("Pruning is auto, using persisted %s", user_defaults.pruning)
            return user_defaults.pruning
