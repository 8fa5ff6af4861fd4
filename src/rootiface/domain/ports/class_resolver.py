"""Class resolver port (interface)."""

from abc import ABC, abstractmethod


class ClassResolverPort(ABC):
    """Port for locating a class by qualified name.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def resolve(self, qualified_name: str) -> type:
        """Resolve qualified name to a class.

        Args:
            qualified_name: Dotted class name without type parameters

        Returns:
            Resolved class

        Raises:
            ClassResolutionError: If the name cannot be loaded
        """
        ...
