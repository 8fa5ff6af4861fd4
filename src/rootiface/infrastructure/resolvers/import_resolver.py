"""Import-based class resolver.

Resolves dotted class names the way the interpreter would import them:

    package.module.Class        -> import package.module, getattr Class
    package.module.Outer.Inner  -> import package.module, walk Outer.Inner

The longest importable module prefix wins. Packages that are not on
sys.path can be located through explicit search paths.
"""

from __future__ import annotations

import importlib
import importlib.machinery
import importlib.util
import sys
import threading
from typing import TYPE_CHECKING

from rootiface.domain.exceptions import ClassResolutionError
from rootiface.domain.ports.class_resolver import ClassResolverPort

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path
    from types import ModuleType


class ImportClassResolver(ClassResolverPort):
    """Resolve class names through importlib.

    Thread-safe: loading a top-level package from search paths is
    serialized so one package is never executed twice.
    """

    def __init__(self, search_paths: Iterable[Path] = ()) -> None:
        """Initialize resolver.

        Args:
            search_paths: Directories searched for top-level packages
                that sys.path cannot find.
        """
        self._search_paths = tuple(str(path) for path in search_paths)
        self._load_lock = threading.Lock()

    @property
    def search_paths(self) -> tuple[str, ...]:
        """Configured search paths."""
        return self._search_paths

    def resolve(self, qualified_name: str) -> type:
        """Resolve dotted name to a class.

        Args:
            qualified_name: Dotted class name

        Returns:
            Resolved class

        Raises:
            ClassResolutionError: If no module prefix imports, an attribute
                is missing, or the name does not denote a class
        """
        parts = qualified_name.split(".")
        if not all(part.isidentifier() for part in parts):
            raise ClassResolutionError(qualified_name, "not a dotted identifier")

        for split in range(len(parts), 0, -1):
            module_name = ".".join(parts[:split])
            module = self._try_import(qualified_name, module_name)
            if module is None:
                continue
            return self._walk(qualified_name, module, parts[split:])

        raise ClassResolutionError(qualified_name, "no importable module prefix")

    def _try_import(self, qualified_name: str, module_name: str) -> ModuleType | None:
        """Import module_name. None if that module itself does not exist.

        A ModuleNotFoundError for some other module (a missing dependency
        of module_name) is a real failure and is not masked by trying
        shorter prefixes.
        """
        try:
            return self._import(module_name)
        except ModuleNotFoundError as exc:
            if exc.name is None or _is_prefix(exc.name, module_name):
                return None
            raise ClassResolutionError(
                qualified_name, f"importing {module_name} failed: {exc}"
            ) from exc
        except Exception as exc:
            raise ClassResolutionError(
                qualified_name, f"importing {module_name} failed: {type(exc).__name__}: {exc}"
            ) from exc

    def _import(self, module_name: str) -> ModuleType:
        """Import module, falling back to search paths for its top package."""
        try:
            return importlib.import_module(module_name)
        except ModuleNotFoundError as exc:
            top = module_name.partition(".")[0]
            if exc.name != top or not self._search_paths:
                raise
            self._load_top_level(top)
            return importlib.import_module(module_name)

    def _load_top_level(self, top: str) -> None:
        """Load top-level package from search paths into sys.modules.

        Raises:
            ModuleNotFoundError: If no search path contains the package
        """
        with self._load_lock:
            if top in sys.modules:
                return

            spec = importlib.machinery.PathFinder.find_spec(top, list(self._search_paths))
            if spec is None or spec.loader is None:
                raise ModuleNotFoundError(f"No module named {top!r}", name=top)

            module = importlib.util.module_from_spec(spec)
            sys.modules[top] = module
            try:
                spec.loader.exec_module(module)
            except BaseException:
                sys.modules.pop(top, None)
                raise

    def _walk(self, qualified_name: str, module: ModuleType, attrs: list[str]) -> type:
        """Walk attribute chain from module to the class."""
        obj: object = module
        for attr in attrs:
            try:
                obj = getattr(obj, attr)
            except AttributeError as exc:
                raise ClassResolutionError(
                    qualified_name, f"{attr!r} not found in {_describe(obj)}"
                ) from exc

        if not isinstance(obj, type):
            raise ClassResolutionError(qualified_name, f"{_describe(obj)} is not a class")
        return obj


def _is_prefix(missing: str, module_name: str) -> bool:
    """True if missing is module_name or one of its parent packages."""
    return module_name == missing or module_name.startswith(missing + ".")


def _describe(obj: object) -> str:
    """Short description for error messages."""
    name = getattr(obj, "__name__", None)
    kind = type(obj).__name__
    if name is None:
        return kind
    return f"{kind} {name}"
