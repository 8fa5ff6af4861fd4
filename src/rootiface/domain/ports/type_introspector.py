"""Type introspector port (interface)."""

from abc import ABC, abstractmethod


class TypeIntrospectorPort(ABC):
    """Port for listing the methods a class exposes.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def method_names(self, cls: type) -> tuple[str, ...]:
        """List externally visible method names.

        Inherited methods included, constructors excluded,
        overloads of one name collapsed to a single entry.

        Args:
            cls: Class to introspect

        Returns:
            Ordered, de-duplicated method names

        Raises:
            IntrospectionError: If cls cannot be introspected
        """
        ...
