"""Type introspectors."""

from rootiface.infrastructure.introspectors.member_introspector import MemberIntrospector

__all__ = ["MemberIntrospector"]
