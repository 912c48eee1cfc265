"""Exception hierarchy for parameter resolution."""

from __future__ import annotations


class ParamsError(Exception):
    """
    Base exception for all parameter resolution errors.

    Every error is user-correctable configuration: startup aborts and the
    message is shown to the operator as-is.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class InvalidTokenError(ParamsError):
    """
    Raised when a textual selector matches none of its accepted values.

    Attributes:
        kind: What was being parsed (e.g. "reseal", "switch").
        value: The offending input, echoed back verbatim.
    """

    def __init__(self, kind: str, value: str, message: str | None = None) -> None:
        self.kind = kind
        self.value = value
        super().__init__(message or f"Invalid {kind} value: {value}")


class ResyncRequiredError(ParamsError):
    """
    Raised when a feature is explicitly enabled on an existing database.

    The feature augments historical indexes, so turning it on for a chain
    that was synced without it requires a full resync first.

    Attributes:
        feature: Short name of the index feature (e.g. "TraceDB").
    """

    def __init__(self, feature: str) -> None:
        self.feature = feature
        super().__init__(f"{feature} resync required")


class SpecLoadError(ParamsError):
    """Raised when a chain specification cannot be opened or parsed."""


class StorageError(ParamsError):
    """Raised when persisted defaults are present but unreadable."""
