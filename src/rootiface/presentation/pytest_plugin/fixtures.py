"""pytest fixtures for code generator tests.

Provides a fresh root interface registry per test.
User overrides root_interface_config in their conftest.py.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from rootiface.application.services import RootInterfaceRegistry
from rootiface.domain.model.configuration import RegistryConfig

if TYPE_CHECKING:
    from collections.abc import Iterator


def _get_ini_lines(config: pytest.Config, name: str) -> list[str]:
    """Get linelist ini value from pytest config.

    Args:
        config: pytest Config object
        name: ini option name

    Returns:
        Non-empty lines, or [] if the option is not registered
        (fixtures imported without the plugin)
    """
    try:
        value = config.getini(name)
    except ValueError:
        return []
    return [str(line) for line in value or [] if str(line).strip()]


@pytest.fixture
def root_interface_config(request: pytest.FixtureRequest) -> RegistryConfig:
    """Default registry configuration.

    Reads the root_interface_paths ini option (one directory per line,
    relative to rootdir) into search_paths.

    Returns:
        RegistryConfig
    """
    # Note: rootdir exists on pytest.Config but type stubs may not include it
    root_dir = Path(str(getattr(request.config, "rootdir", ".")))
    lines = _get_ini_lines(request.config, "root_interface_paths")
    return RegistryConfig(search_paths=tuple(root_dir / line for line in lines))


@pytest.fixture
def root_interface_registry(
    root_interface_config: RegistryConfig,
) -> Iterator[RootInterfaceRegistry]:
    """Fresh registry, reset after the test.

    Yields:
        RootInterfaceRegistry wired to the importlib/inspect adapters
    """
    registry = RootInterfaceRegistry.from_config(root_interface_config)
    yield registry
    registry.reset()


@pytest.fixture
def root_interface_warnings() -> list[str]:
    """Warnings sink for get_or_create()."""
    return []
