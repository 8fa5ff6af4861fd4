"""Registry configuration.

None = use default, value = override.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class RegistryConfig:
    """Root interface registry configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        search_paths: Extra directories searched for root interface
            packages not importable from sys.path (classpath entries).
        log_failures: Log resolution/introspection failures with traceback
            in addition to the warnings sink.
        warning_template: Override for the failure warning text.
            Placeholders: {class_name}, {reason}. None = default message.
    """

    search_paths: tuple[Path, ...] = ()
    log_failures: bool = True
    warning_template: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.search_paths, tuple):
            raise TypeError(f"search_paths must be tuple, got {type(self.search_paths).__name__}")
        for path in self.search_paths:
            if not isinstance(path, Path):
                raise TypeError(f"search_paths entries must be Path, got {type(path).__name__}")
        if self.warning_template is not None:
            if "{class_name}" not in self.warning_template:
                raise ValueError("warning_template must contain {class_name}")
            try:
                self.warning_template.format(class_name="", reason="")
            except (KeyError, IndexError, ValueError) as exc:
                raise ValueError(
                    f"warning_template must only use {{class_name}} and {{reason}}: {exc!r}"
                ) from exc
