"""
Chain selection.

Operators pick a chain with a short name on the command line. Several
historical names map onto the same network; anything unrecognised is
taken to be the path of a custom specification file::

    "mainnet" ----+
    "homestead" --+--> Chain.FOUNDATION --> compiled-in Specification
    "frontier" ---+
    "./my.json" -----> CustomChain("./my.json") --> Specification loaded from disk
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Final, TypeAlias

from node_params.types import SpecLoadError

from . import builtin
from .spec import Specification

logger = logging.getLogger(__name__)


class Chain(Enum):
    """
    Well-known networks with a compiled-in specification.

    The value of each member is its canonical rendering.
    """

    FOUNDATION = "foundation"
    MORDEN = "morden"
    ROPSTEN = "ropsten"
    KOVAN = "kovan"
    OLYMPIC = "olympic"
    CLASSIC = "classic"
    EXPANSE = "expanse"
    DEV = "dev"

    def spec(self) -> Specification:
        """Return the compiled-in specification. Never fails."""
        return _BUILTIN_SPECS[self]

    def legacy_fork_name(self) -> str | None:
        """
        Historical fork name, for the two networks that had one.

        Older releases stored these chains under a fork-specific name;
        callers use it to keep finding existing data.
        """
        match self:
            case Chain.CLASSIC:
                return "classic"
            case Chain.EXPANSE:
                return "expanse"
            case _:
                return None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class CustomChain:
    """A chain described by a specification file on disk."""

    path: str
    """Path to the specification file, exactly as given by the operator."""

    def spec(self) -> Specification:
        """
        Open and parse the specification file.

        Raises:
            SpecLoadError: "Could not load specification file." if the file
                cannot be opened; the parser's own message if it cannot be parsed.
        """
        try:
            return Specification.load_file(self.path)
        except OSError as e:
            logger.debug("Opening specification %s failed: %s", self.path, e)
            raise SpecLoadError("Could not load specification file.") from e

    def legacy_fork_name(self) -> str | None:
        """Custom chains never had a legacy fork name."""
        return None

    def __str__(self) -> str:
        return self.path


SpecType: TypeAlias = Chain | CustomChain
"""Union of the chain selectors for pattern matching dispatch."""

DEFAULT_SPEC_TYPE: Final[SpecType] = Chain.FOUNDATION
"""Chain used when the operator does not pick one."""

_ALIASES: Final[dict[str, Chain]] = {
    "foundation": Chain.FOUNDATION,
    "frontier": Chain.FOUNDATION,
    "homestead": Chain.FOUNDATION,
    "mainnet": Chain.FOUNDATION,
    "frontier-dogmatic": Chain.CLASSIC,
    "homestead-dogmatic": Chain.CLASSIC,
    "classic": Chain.CLASSIC,
    "morden": Chain.MORDEN,
    "classic-testnet": Chain.MORDEN,
    "ropsten": Chain.ROPSTEN,
    "kovan": Chain.KOVAN,
    "testnet": Chain.KOVAN,
    "olympic": Chain.OLYMPIC,
    "expanse": Chain.EXPANSE,
    "dev": Chain.DEV,
}
"""Every accepted chain name and the network it selects."""

_BUILTIN_SPECS: Final[dict[Chain, Specification]] = {
    Chain.FOUNDATION: builtin.FOUNDATION,
    Chain.MORDEN: builtin.MORDEN,
    Chain.ROPSTEN: builtin.ROPSTEN,
    Chain.KOVAN: builtin.KOVAN,
    Chain.OLYMPIC: builtin.OLYMPIC,
    Chain.CLASSIC: builtin.CLASSIC,
    Chain.EXPANSE: builtin.EXPANSE,
    Chain.DEV: builtin.DEV,
}


def parse_spec_type(text: str) -> SpecType:
    """
    Resolve a chain name. Never fails.

    Unknown names are kept verbatim as a custom specification path; whether
    that path exists is only checked when the specification is loaded.
    """
    chain = _ALIASES.get(text)
    if chain is None:
        return CustomChain(text)
    return chain
