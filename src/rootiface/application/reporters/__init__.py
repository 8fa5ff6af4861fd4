"""Reporters for root interface registry state."""

from rootiface.application.reporters.console import RegistryReporter, ReporterConfig

__all__ = ["RegistryReporter", "ReporterConfig"]
