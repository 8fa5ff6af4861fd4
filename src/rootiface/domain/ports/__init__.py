"""Domain ports (interfaces/protocols)."""

from rootiface.domain.ports.class_resolver import ClassResolverPort
from rootiface.domain.ports.type_introspector import TypeIntrospectorPort
from rootiface.domain.ports.warnings_sink import WarningsSink

__all__ = [
    "ClassResolverPort",
    "TypeIntrospectorPort",
    "WarningsSink",
]
