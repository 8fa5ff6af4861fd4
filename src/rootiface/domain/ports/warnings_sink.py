"""Warnings sink protocol."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class WarningsSink(Protocol):
    """Caller-owned collection of warning messages.

    A plain list[str] satisfies this protocol.
    """

    def append(self, message: str, /) -> None:
        """Record one warning message."""
        ...
