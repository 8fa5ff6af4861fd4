"""rootiface application layer."""

from rootiface.application.messages import format_warning
from rootiface.application.reporters import RegistryReporter, ReporterConfig
from rootiface.application.services import RootInterfaceRegistry

__all__ = [
    "RegistryReporter",
    "ReporterConfig",
    "RootInterfaceRegistry",
    "format_warning",
]
