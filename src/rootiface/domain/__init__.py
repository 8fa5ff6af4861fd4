"""rootiface domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, pathlib, collections.abc
"""

from rootiface.domain.exceptions import (
    ClassResolutionError,
    IntrospectionError,
    InvalidPortError,
    RootIfaceError,
)
from rootiface.domain.model import (
    Introspected,
    IntrospectionFailed,
    IntrospectionOutcome,
    RegistryConfig,
    RootInterfaceInfo,
    TypeName,
    parse_type_name,
)
from rootiface.domain.ports import (
    ClassResolverPort,
    TypeIntrospectorPort,
    WarningsSink,
)

__all__ = [
    # Exceptions
    "RootIfaceError",
    "ClassResolutionError",
    "IntrospectionError",
    "InvalidPortError",
    # Value objects
    "TypeName",
    "RootInterfaceInfo",
    "Introspected",
    "IntrospectionFailed",
    "IntrospectionOutcome",
    "RegistryConfig",
    "parse_type_name",
    # Ports
    "ClassResolverPort",
    "TypeIntrospectorPort",
    "WarningsSink",
]
