"""pytest plugin for rootiface.

Provides fixtures for code generator tests:
    root_interface_config: Registry configuration (override in conftest.py)
    root_interface_registry: Fresh registry, reset after each test
    root_interface_warnings: Warnings sink (list)

Configuration (pytest.ini or pyproject.toml):
    root_interface_paths: Extra directories searched for root interfaces
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rootiface.presentation.pytest_plugin.fixtures import (
    root_interface_config,
    root_interface_registry,
    root_interface_warnings,
)

if TYPE_CHECKING:
    import pytest

__all__ = [
    "root_interface_config",
    "root_interface_registry",
    "root_interface_warnings",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "root_interface_paths",
        "Directories searched for root interface packages",
        type="linelist",
        default=[],
    )
