"""Domain exceptions: all public errors of rootiface.

Hexagonal architecture: all exceptions visible to users defined in domain.
Infrastructure/Application use these, not define their own public exceptions.
"""


class RootIfaceError(Exception):
    """Base for all rootiface error exceptions.

    Allows: except RootIfaceError to catch all library errors.
    """


class ClassResolutionError(RootIfaceError, LookupError):
    """Class name cannot be resolved to a loadable class.

    Inherits LookupError for semantic correctness (name not found).

    Attributes:
        class_name: Name that failed to resolve.
        reason: Why resolution failed.
    """

    def __init__(self, class_name: str, reason: str) -> None:
        """Initialize with class name and reason."""
        self.class_name = class_name
        self.reason = reason
        super().__init__(f"cannot resolve {class_name!r}: {reason}")


class IntrospectionError(RootIfaceError, TypeError):
    """Resolved class could not be introspected.

    Inherits TypeError: the resolved object is not an introspectable class.

    Attributes:
        class_name: Name of the class being introspected.
        reason: Why introspection failed.
    """

    def __init__(self, class_name: str, reason: str) -> None:
        """Initialize with class name and reason."""
        self.class_name = class_name
        self.reason = reason
        super().__init__(f"cannot introspect {class_name!r}: {reason}")


class InvalidPortError(RootIfaceError, TypeError):
    """Registry collaborator is missing.

    Raised at registry construction when a port is None.

    Attributes:
        port: Name of the missing port.
    """

    def __init__(self, port: str) -> None:
        """Initialize with port name."""
        self.port = port
        super().__init__(f"{port} must not be None")
