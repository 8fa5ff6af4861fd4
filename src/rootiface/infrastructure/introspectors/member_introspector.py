"""Member introspector for root interface classes."""

from __future__ import annotations

import inspect

from rootiface.domain.exceptions import IntrospectionError
from rootiface.domain.ports.type_introspector import TypeIntrospectorPort


class MemberIntrospector(TypeIntrospectorPort):
    """Lists public methods of a class, inherited ones included.

    Walks the MRO most-derived first. The first class defining a name
    decides whether it is a method: a property overriding a base method
    hides that method.

    Counted as methods: functions, staticmethods, classmethods and
    builtin method descriptors. Not counted: properties, data attributes,
    nested classes, and any name starting with "_" (constructors,
    dunders, private helpers).

    Stateless - no state between method_names() calls.
    """

    def method_names(self, cls: type) -> tuple[str, ...]:
        """List public method names of cls.

        Args:
            cls: Class to introspect

        Returns:
            Method names in definition order, most-derived class first

        Raises:
            IntrospectionError: If cls is not a class or its MRO is broken
        """
        if not isinstance(cls, type):
            raise IntrospectionError(repr(cls), f"expected class, got {type(cls).__name__}")

        try:
            mro = inspect.getmro(cls)
        except (TypeError, AttributeError) as exc:
            raise IntrospectionError(cls.__qualname__, f"unreadable MRO: {exc}") from exc

        seen: set[str] = set()
        methods: dict[str, None] = {}

        for klass in mro:
            if klass is object:
                continue
            for name, member in vars(klass).items():
                if name in seen:
                    continue
                seen.add(name)
                if _is_public(name) and _is_method(member):
                    methods[name] = None

        return tuple(methods)


def _is_public(name: str) -> bool:
    """Public names do not start with underscore."""
    return not name.startswith("_")


def _is_method(member: object) -> bool:
    """Check if class namespace member is a method."""
    if isinstance(member, (staticmethod, classmethod)):
        return True
    if isinstance(member, (property, type)):
        return False
    return inspect.isroutine(member)
