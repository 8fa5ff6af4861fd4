"""Application services."""

from rootiface.application.services.registry import RootInterfaceRegistry

__all__ = ["RootInterfaceRegistry"]
