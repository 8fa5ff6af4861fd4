"""Tests for infrastructure/resolvers/import_resolver.py."""

from __future__ import annotations

import collections
import collections.abc
import itertools
import sys
from typing import TYPE_CHECKING

import pytest

from rootiface.domain.exceptions import ClassResolutionError
from rootiface.infrastructure.resolvers.import_resolver import ImportClassResolver
from tests.factories import write_package

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

_counter = itertools.count()

MAPPER_SOURCE = """
from typing import Protocol


class BaseMapper(Protocol):
    def insert(self, row): ...

    def selectByPrimaryKey(self, key): ...

    class Example:
        pass


def helper():
    pass
"""


@pytest.fixture
def package_name() -> Iterator[str]:
    """Unique top-level package name, unloaded after the test."""
    name = f"rootiface_fixture_{next(_counter)}"
    yield name
    for module in [m for m in sys.modules if m == name or m.startswith(name + ".")]:
        del sys.modules[module]


class TestResolveFromSysPath:
    """Resolution of importable classes."""

    def test_module_level_class(self) -> None:
        resolver = ImportClassResolver()
        assert resolver.resolve("collections.OrderedDict") is collections.OrderedDict

    def test_class_in_submodule(self) -> None:
        resolver = ImportClassResolver()
        assert resolver.resolve("collections.abc.Mapping") is collections.abc.Mapping

    def test_class_in_nested_package(self) -> None:
        resolver = ImportClassResolver()
        cls = resolver.resolve("email.headerregistry.Address")
        assert cls.__name__ == "Address"


class TestResolveFailures:
    """ClassResolutionError cases."""

    def test_unknown_package(self) -> None:
        resolver = ImportClassResolver()
        with pytest.raises(ClassResolutionError, match="no importable module prefix"):
            resolver.resolve("com.acme.BaseMapper")

    def test_missing_attribute(self) -> None:
        resolver = ImportClassResolver()
        with pytest.raises(ClassResolutionError, match="'NoSuchClass' not found"):
            resolver.resolve("collections.NoSuchClass")

    def test_function_is_not_class(self) -> None:
        resolver = ImportClassResolver()
        with pytest.raises(ClassResolutionError, match="is not a class"):
            resolver.resolve("os.path.join")

    def test_module_is_not_class(self) -> None:
        resolver = ImportClassResolver()
        with pytest.raises(ClassResolutionError, match="is not a class"):
            resolver.resolve("collections.abc")

    @pytest.mark.parametrize("name", ["", "pkg..Foo", "pkg.Foo<T>", "1pkg.Foo"])
    def test_not_dotted_identifier(self, name: str) -> None:
        resolver = ImportClassResolver()
        with pytest.raises(ClassResolutionError, match="not a dotted identifier"):
            resolver.resolve(name)

    def test_error_keeps_class_name(self) -> None:
        resolver = ImportClassResolver()
        with pytest.raises(ClassResolutionError) as exc_info:
            resolver.resolve("com.acme.BaseMapper")
        assert exc_info.value.class_name == "com.acme.BaseMapper"


class TestResolveFromSearchPaths:
    """Packages located through explicit search paths."""

    def test_not_found_without_search_paths(self, tmp_path: Path, package_name: str) -> None:
        write_package(tmp_path, package_name, {"mapper": MAPPER_SOURCE})
        resolver = ImportClassResolver()
        with pytest.raises(ClassResolutionError):
            resolver.resolve(f"{package_name}.mapper.BaseMapper")

    def test_found_with_search_paths(self, tmp_path: Path, package_name: str) -> None:
        write_package(tmp_path, package_name, {"mapper": MAPPER_SOURCE})
        resolver = ImportClassResolver(search_paths=(tmp_path,))

        cls = resolver.resolve(f"{package_name}.mapper.BaseMapper")

        assert cls.__name__ == "BaseMapper"
        assert cls.__module__ == f"{package_name}.mapper"

    def test_nested_class_from_search_paths(self, tmp_path: Path, package_name: str) -> None:
        write_package(tmp_path, package_name, {"mapper": MAPPER_SOURCE})
        resolver = ImportClassResolver(search_paths=(tmp_path,))

        cls = resolver.resolve(f"{package_name}.mapper.BaseMapper.Example")

        assert cls.__qualname__ == "BaseMapper.Example"

    def test_package_loaded_once(self, tmp_path: Path, package_name: str) -> None:
        write_package(tmp_path, package_name, {"mapper": MAPPER_SOURCE})
        resolver = ImportClassResolver(search_paths=(tmp_path,))

        first = resolver.resolve(f"{package_name}.mapper.BaseMapper")
        second = resolver.resolve(f"{package_name}.mapper.BaseMapper")

        assert first is second

    def test_missing_dependency_not_masked(self, tmp_path: Path, package_name: str) -> None:
        write_package(
            tmp_path,
            package_name,
            {"broken": "import rootiface_no_such_dependency\n\nclass Mapper:\n    pass\n"},
        )
        resolver = ImportClassResolver(search_paths=(tmp_path,))

        with pytest.raises(ClassResolutionError, match="importing .*broken.* failed"):
            resolver.resolve(f"{package_name}.broken.Mapper")

    def test_import_time_error(self, tmp_path: Path, package_name: str) -> None:
        write_package(tmp_path, package_name, {"faulty": "raise RuntimeError('boom')\n"})
        resolver = ImportClassResolver(search_paths=(tmp_path,))

        with pytest.raises(ClassResolutionError, match="RuntimeError: boom"):
            resolver.resolve(f"{package_name}.faulty.Mapper")

    def test_failed_package_init_not_cached(self, tmp_path: Path, package_name: str) -> None:
        write_package(tmp_path, package_name, {"__init__": "raise ValueError('bad init')\n"})
        resolver = ImportClassResolver(search_paths=(tmp_path,))

        with pytest.raises(ClassResolutionError, match="bad init"):
            resolver.resolve(f"{package_name}.Mapper")
        assert package_name not in sys.modules

    def test_search_paths_property(self, tmp_path: Path) -> None:
        resolver = ImportClassResolver(search_paths=[tmp_path])
        assert resolver.search_paths == (str(tmp_path),)
