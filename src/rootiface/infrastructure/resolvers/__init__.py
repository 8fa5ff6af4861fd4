"""Class resolvers."""

from rootiface.infrastructure.resolvers.import_resolver import ImportClassResolver

__all__ = ["ImportClassResolver"]
