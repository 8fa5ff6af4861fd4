"""Generic type name normalization.

Splits a possibly parameterized type name into its base name and raw
type arguments. Both Java-style angle brackets and Python subscription
are understood:

    pkg.Foo<T>                  -> pkg.Foo  (T)
    pkg.Foo<K, java.util.List<V>> -> pkg.Foo  (K, java.util.List<V>)
    typing.Mapping[str, int]    -> typing.Mapping  (str, int)
"""

from __future__ import annotations

from dataclasses import dataclass

_OPENERS = {"<": ">", "[": "]"}
_CLOSERS = frozenset(_OPENERS.values())


@dataclass(frozen=True, slots=True)
class TypeName:
    """Normalized type name.

    Immutable value object with FAIL-FIRST validation.

    Attributes:
        raw: Name as supplied by the caller
        base_name: Name with type parameters stripped
        type_arguments: Top-level type arguments, whitespace-trimmed
    """

    raw: str
    base_name: str
    type_arguments: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.base_name:
            raise ValueError("base_name must not be empty")

    @property
    def is_generic(self) -> bool:
        """True if stripping type parameters changed the name."""
        return self.base_name != self.raw.strip()

    def __str__(self) -> str:
        """Format as base_name<args>."""
        if not self.type_arguments:
            return self.base_name
        return f"{self.base_name}<{', '.join(self.type_arguments)}>"


def parse_type_name(name: str) -> TypeName:
    """Strip type parameters from a type name.

    Args:
        name: Possibly parameterized type name

    Returns:
        TypeName with base name and top-level arguments

    Raises:
        ValueError: If name is empty or brackets are unbalanced
    """
    text = name.strip()
    if not text:
        raise ValueError("type name must not be empty")

    start = _first_opener(text)
    if start is None:
        if any(ch in _CLOSERS for ch in text):
            raise ValueError(f"unbalanced brackets in type name {name!r}")
        return TypeName(raw=name, base_name=text)

    closer = _OPENERS[text[start]]
    if not text.endswith(closer):
        raise ValueError(f"unbalanced brackets in type name {name!r}")

    base = text[:start].strip()
    arguments = _split_arguments(text[start + 1 : -1], name)
    return TypeName(raw=name, base_name=base, type_arguments=arguments)


def _first_opener(text: str) -> int | None:
    """Index of the first opening bracket, or None."""
    for index, ch in enumerate(text):
        if ch in _OPENERS:
            return index
    return None


def _split_arguments(inner: str, name: str) -> tuple[str, ...]:
    """Split argument list on top-level commas, checking bracket balance."""
    arguments: list[str] = []
    stack: list[str] = []
    current: list[str] = []

    for ch in inner:
        if ch in _OPENERS:
            stack.append(_OPENERS[ch])
        elif ch in _CLOSERS:
            if not stack or stack.pop() != ch:
                raise ValueError(f"unbalanced brackets in type name {name!r}")
        elif ch == "," and not stack:
            arguments.append("".join(current).strip())
            current = []
            continue
        current.append(ch)

    if stack:
        raise ValueError(f"unbalanced brackets in type name {name!r}")

    last = "".join(current).strip()
    if last or arguments:
        arguments.append(last)
    return tuple(arguments)
