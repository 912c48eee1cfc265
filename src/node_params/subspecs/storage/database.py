"""
Read-only view of persisted defaults.

Resolution functions only ever read what the previous run chose. They take
this Protocol rather than a concrete store, so tests can pass any object
with the right attributes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from node_params.subspecs.client import Mode
    from node_params.subspecs.journaldb import Algorithm


class PersistedDefaults(Protocol):
    """
    Protocol for the choices recorded by the previous run.

    Uses structural subtyping - any object with matching attributes satisfies it.
    When no previous run exists, `is_first_launch` must read True and the
    other attributes hold the store's own defaults.
    """

    @property
    def is_first_launch(self) -> bool:
        """True until a run has completed and saved its choices."""
        ...

    @property
    def pruning(self) -> Algorithm:
        """Pruning algorithm the database was created with."""
        ...

    @property
    def tracing(self) -> bool:
        """Whether the trace index was maintained."""
        ...

    @property
    def fat_db(self) -> bool:
        """Whether the fat (account-enumerable) database was maintained."""
        ...

    @property
    def mode(self) -> Mode:
        """Operating mode the node last ran in."""
        ...
