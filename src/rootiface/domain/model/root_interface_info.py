"""Root interface information: which methods a root interface declares."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True, slots=True)
class RootInterfaceInfo:
    """Introspection result for one root interface class name.

    Immutable value object with FAIL-FIRST validation.
    Unavailable information is an empty method set, never None,
    so contains_method() is total.

    Attributes:
        class_name: Class name as supplied (registry key)
        resolved_name: Name after stripping type parameters
        generic_mode: True if class_name carried type parameters
        methods: Method names declared by the class (incl. inherited)
        available: False if resolution or introspection failed
    """

    class_name: str
    resolved_name: str = ""
    generic_mode: bool = False
    methods: frozenset[str] = frozenset()
    available: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.methods, frozenset):
            raise TypeError(f"methods must be frozenset, got {type(self.methods).__name__}")
        if self.generic_mode and not self.resolved_name:
            raise ValueError("generic_mode requires resolved_name")
        if not self.available and self.methods:
            raise ValueError("unavailable info must have no methods")

    @classmethod
    def empty(cls, class_name: str = "") -> RootInterfaceInfo:
        """Info for an absent class name: no methods, nothing to resolve."""
        return cls(class_name=class_name)

    @classmethod
    def unavailable(
        cls,
        class_name: str,
        resolved_name: str = "",
        *,
        generic_mode: bool = False,
    ) -> RootInterfaceInfo:
        """Info for a class that failed to resolve or introspect."""
        return cls(
            class_name=class_name,
            resolved_name=resolved_name,
            generic_mode=generic_mode,
            available=False,
        )

    def contains_method(self, method_name: str) -> bool:
        """Check if the root interface declares a method.

        Exact, case-sensitive name match. Signatures are not compared.

        Args:
            method_name: Method name to look up

        Returns:
            True if method_name is declared, False otherwise
        """
        return method_name in self.methods

    def missing_methods(self, candidates: Iterable[str]) -> tuple[str, ...]:
        """Filter candidates down to names the root interface lacks.

        Args:
            candidates: Method names a generator would emit

        Returns:
            Candidates not declared by the root interface, in input order
        """
        return tuple(name for name in candidates if name not in self.methods)

    def __str__(self) -> str:
        """Format as class_name (N methods)."""
        if not self.available:
            return f"{self.class_name} (unavailable)"
        return f"{self.class_name} ({len(self.methods)} methods)"
