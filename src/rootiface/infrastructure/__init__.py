"""rootiface infrastructure layer: importlib and inspect adapters."""

from rootiface.infrastructure.introspectors import MemberIntrospector
from rootiface.infrastructure.resolvers import ImportClassResolver

__all__ = ["ImportClassResolver", "MemberIntrospector"]
