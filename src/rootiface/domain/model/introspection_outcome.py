"""Outcome of resolving and introspecting a root interface."""

from __future__ import annotations

from dataclasses import dataclass

from rootiface.domain.exceptions import RootIfaceError


@dataclass(frozen=True, slots=True)
class Introspected:
    """Successful introspection.

    Attributes:
        methods: Discovered method names, in discovery order
    """

    methods: tuple[str, ...]

    @property
    def ok(self) -> bool:
        """Always True."""
        return True


@dataclass(frozen=True, slots=True)
class IntrospectionFailed:
    """Failed resolution or introspection.

    Attributes:
        error: Library error describing the failure
    """

    error: RootIfaceError

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.error is None:
            raise TypeError("error must not be None")

    @property
    def ok(self) -> bool:
        """Always False."""
        return False

    @property
    def reason(self) -> str:
        """Human-readable failure reason."""
        return str(self.error)


IntrospectionOutcome = Introspected | IntrospectionFailed
