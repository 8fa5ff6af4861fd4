"""Domain model."""

from rootiface.domain.model.configuration import RegistryConfig
from rootiface.domain.model.introspection_outcome import (
    Introspected,
    IntrospectionFailed,
    IntrospectionOutcome,
)
from rootiface.domain.model.root_interface_info import RootInterfaceInfo
from rootiface.domain.model.type_name import TypeName, parse_type_name

__all__ = [
    "Introspected",
    "IntrospectionFailed",
    "IntrospectionOutcome",
    "RegistryConfig",
    "RootInterfaceInfo",
    "TypeName",
    "parse_type_name",
]
