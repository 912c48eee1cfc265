"""
Journal database pruning algorithms.

The journal database decides how much historical state the node keeps.
Each algorithm has a short user-facing name (what operators type) and a
longer internal name (what the database records on disk).
"""

from __future__ import annotations

from enum import Enum

from node_params.types import InvalidTokenError


class Algorithm(Enum):
    """
    State retention algorithm of the journal database.

    The value of each member is its user-facing name.
    """

    ARCHIVE = "archive"
    """Keep all state ever written. Nothing is pruned."""

    EARLY_MERGE = "light"
    """Merge journal entries into the backing store as early as possible."""

    OVERLAY_RECENT = "fast"
    """Keep recent state in an in-memory overlay; prune older entries."""

    REF_COUNTED = "basic"
    """Reference-count state nodes and drop them once unreferenced."""

    @classmethod
    def from_str(cls, text: str) -> Algorithm:
        """
        Parse a user-facing algorithm name.

        Raises:
            InvalidTokenError: If `text` is not one of archive, light, fast, basic.
        """
        try:
            return cls(text)
        except ValueError:
            raise InvalidTokenError(
                "pruning", text, f"Invalid pruning method: {text}"
            ) from None

    @classmethod
    def default(cls) -> Algorithm:
        """Algorithm used when nothing was ever chosen."""
        return cls.OVERLAY_RECENT

    def as_internal_name_str(self) -> str:
        """Name recorded by the database itself."""
        return _INTERNAL_NAMES[self]

    def is_stable(self) -> bool:
        """Whether the algorithm is considered production-ready."""
        return self in (Algorithm.ARCHIVE, Algorithm.OVERLAY_RECENT)

    def __str__(self) -> str:
        return self.value


_INTERNAL_NAMES: dict[Algorithm, str] = {
    Algorithm.ARCHIVE: "archive",
    Algorithm.EARLY_MERGE: "earlymerge",
    Algorithm.OVERLAY_RECENT: "overlayrecent",
    Algorithm.REF_COUNTED: "refcounted",
}
