"""When to reseal the pending block in response to new transactions."""

from __future__ import annotations

from dataclasses import dataclass

from node_params.types import InvalidTokenError


@dataclass(frozen=True, slots=True)
class ResealPolicy:
    """
    Which incoming transactions trigger a reseal.

    Parsed from one of four tokens::

        none --> own=False, external=False
        own  --> own=True,  external=False
        ext  --> own=False, external=True
        all  --> own=True,  external=True
    """

    own: bool = True
    """Reseal on transactions submitted through this node."""

    external: bool = True
    """Reseal on transactions received from peers."""

    @classmethod
    def from_str(cls, text: str) -> ResealPolicy:
        """
        Parse a reseal token.

        Raises:
            InvalidTokenError: For anything other than none, own, ext, all.
        """
        match text:
            case "none":
                return cls(own=False, external=False)
            case "own":
                return cls(own=True, external=False)
            case "ext":
                return cls(own=False, external=True)
            case "all":
                return cls(own=True, external=True)
            case other:
                raise InvalidTokenError("reseal", other)
