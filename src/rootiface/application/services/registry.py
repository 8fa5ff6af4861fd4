"""Root interface registry: memoized introspection of root interfaces.

Answers "does this root interface already declare method X?" for a code
generator deciding which methods to emit. One registry instance lives for
the whole host process and is reset at the start of every generation run,
since the importable classes may change between runs.

Thread-safe: creation is serialized per class name, distinct names are
introspected concurrently. reset() must not overlap in-flight lookups.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from rootiface.application.messages import ROOT_INTERFACE_UNAVAILABLE, format_warning
from rootiface.domain.exceptions import (
    ClassResolutionError,
    IntrospectionError,
    InvalidPortError,
)
from rootiface.domain.model.configuration import RegistryConfig
from rootiface.domain.model.introspection_outcome import (
    Introspected,
    IntrospectionFailed,
    IntrospectionOutcome,
)
from rootiface.domain.model.root_interface_info import RootInterfaceInfo
from rootiface.domain.model.type_name import parse_type_name

if TYPE_CHECKING:
    from rootiface.domain.ports.class_resolver import ClassResolverPort
    from rootiface.domain.ports.type_introspector import TypeIntrospectorPort
    from rootiface.domain.ports.warnings_sink import WarningsSink

logger = logging.getLogger(__name__)


class RootInterfaceRegistry:
    """Process-wide cache: class name -> RootInterfaceInfo.

    At most one RootInterfaceInfo per class name exists between resets.
    Failures never reach the caller: they become one warning in the
    sink of the call that performed construction, plus an info with
    no methods.
    """

    def __init__(
        self,
        resolver: ClassResolverPort,
        introspector: TypeIntrospectorPort,
        *,
        config: RegistryConfig | None = None,
    ) -> None:
        """Initialize registry.

        Args:
            resolver: Locates classes by qualified name
            introspector: Lists methods of a resolved class
            config: Registry configuration. Uses defaults if None.

        Raises:
            InvalidPortError: If resolver or introspector is None
        """
        if resolver is None:
            raise InvalidPortError("resolver")
        if introspector is None:
            raise InvalidPortError("introspector")

        self._resolver = resolver
        self._introspector = introspector
        self._config = config or RegistryConfig()
        self._entries: dict[str, RootInterfaceInfo] = {}
        self._creation_locks: dict[str, threading.Lock] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: RegistryConfig | None = None) -> RootInterfaceRegistry:
        """Create registry wired to the importlib/inspect adapters."""
        from rootiface.infrastructure.introspectors import MemberIntrospector
        from rootiface.infrastructure.resolvers import ImportClassResolver

        config = config or RegistryConfig()
        return cls(
            ImportClassResolver(config.search_paths),
            MemberIntrospector(),
            config=config,
        )

    @property
    def config(self) -> RegistryConfig:
        """Registry configuration."""
        return self._config

    def get_or_create(self, class_name: str | None, warnings: WarningsSink) -> RootInterfaceInfo:
        """Get cached info for class_name, introspecting it on first use.

        Args:
            class_name: Root interface class name, possibly parameterized
                (pkg.Foo<T>). None, "" or whitespace yields an info with no methods.
            warnings: Receives one message if this call constructs the
                info and construction fails

        Returns:
            Shared immutable RootInterfaceInfo
        """
        key = class_name or ""

        with self._lock:
            info = self._entries.get(key)
            if info is not None:
                return info
            creation_lock = self._creation_locks.setdefault(key, threading.Lock())

        with creation_lock:
            with self._lock:
                info = self._entries.get(key)
            if info is not None:
                return info

            info = self._build(key, warnings)

            with self._lock:
                self._entries[key] = info
                self._creation_locks.pop(key, None)

        return info

    def get(self, class_name: str | None) -> RootInterfaceInfo | None:
        """Cached info for class_name without constructing it."""
        with self._lock:
            return self._entries.get(class_name or "")

    def reset(self) -> None:
        """Discard all cached entries.

        Call between generation runs only, never concurrently with
        get_or_create().
        """
        with self._lock:
            self._entries.clear()
            self._creation_locks.clear()

    def begin_run(self) -> None:
        """Start a generation run: reset and log what was discarded."""
        discarded = len(self)
        self.reset()
        logger.info("Root interface registry reset, %d cached entries discarded", discarded)

    def entries(self) -> tuple[RootInterfaceInfo, ...]:
        """Snapshot of cached infos, ordered by class name."""
        with self._lock:
            return tuple(self._entries[key] for key in sorted(self._entries))

    def __len__(self) -> int:
        """Number of cached entries."""
        with self._lock:
            return len(self._entries)

    def __contains__(self, class_name: object) -> bool:
        """Check if class_name has a cached entry."""
        if class_name is not None and not isinstance(class_name, str):
            return False
        with self._lock:
            return (class_name or "") in self._entries

    def _build(self, class_name: str, warnings: WarningsSink) -> RootInterfaceInfo:
        """Construct info. Called once per class name between resets."""
        if not class_name.strip():
            return RootInterfaceInfo.empty(class_name)

        try:
            type_name = parse_type_name(class_name)
        except ValueError as exc:
            failure = IntrospectionFailed(ClassResolutionError(class_name, str(exc)))
            return self._degrade(class_name, failure, warnings)

        outcome = self._introspect(type_name.base_name)
        if isinstance(outcome, IntrospectionFailed):
            return self._degrade(
                class_name,
                outcome,
                warnings,
                resolved_name=type_name.base_name,
                generic_mode=type_name.is_generic,
            )

        logger.debug(
            "Root interface %s introspected: %d methods",
            class_name,
            len(outcome.methods),
        )
        return RootInterfaceInfo(
            class_name=class_name,
            resolved_name=type_name.base_name,
            generic_mode=type_name.is_generic,
            methods=frozenset(outcome.methods),
        )

    def _introspect(self, name: str) -> IntrospectionOutcome:
        """Resolve and introspect. Errors become IntrospectionFailed."""
        try:
            cls = self._resolver.resolve(name)
        except ClassResolutionError as exc:
            return IntrospectionFailed(exc)
        except Exception as exc:
            resolution_error = ClassResolutionError(name, _describe(exc))
            resolution_error.__cause__ = exc
            return IntrospectionFailed(resolution_error)

        try:
            methods = tuple(self._introspector.method_names(cls))
        except IntrospectionError as exc:
            return IntrospectionFailed(exc)
        except Exception as exc:
            introspection_error = IntrospectionError(name, _describe(exc))
            introspection_error.__cause__ = exc
            return IntrospectionFailed(introspection_error)

        return Introspected(methods)

    def _degrade(
        self,
        class_name: str,
        failure: IntrospectionFailed,
        warnings: WarningsSink,
        *,
        resolved_name: str = "",
        generic_mode: bool = False,
    ) -> RootInterfaceInfo:
        """Record the failure and return an info with no methods."""
        warnings.append(self._format_warning(class_name, failure))

        if self._config.log_failures:
            logger.warning(
                "Root interface %s unavailable: %s",
                class_name,
                failure.reason,
                exc_info=failure.error,
            )

        return RootInterfaceInfo.unavailable(
            class_name,
            resolved_name,
            generic_mode=generic_mode,
        )

    def _format_warning(self, class_name: str, failure: IntrospectionFailed) -> str:
        """Warning text for a failed construction."""
        reason = getattr(failure.error, "reason", failure.reason)
        template = self._config.warning_template
        if template is None:
            return format_warning(ROOT_INTERFACE_UNAVAILABLE, class_name=class_name, reason=reason)
        return template.format(class_name=class_name, reason=reason)


def _describe(exc: Exception) -> str:
    """Format unexpected exception as Type: message."""
    return f"{type(exc).__name__}: {exc}"
