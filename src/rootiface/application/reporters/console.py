"""Console reporter: registry snapshot -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rootiface.domain.model.root_interface_info import RootInterfaceInfo


@dataclass(frozen=True, slots=True)
class ReporterConfig:
    """Configuration for registry reporter.

    Attributes:
        show_methods: List method names per root interface.
        width: Console width in characters.
    """

    show_methods: bool = True
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")


class RegistryReporter:
    """Renders cached root interfaces and collected warnings.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ReporterConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ReporterConfig()

    def report(
        self,
        entries: Sequence[RootInterfaceInfo],
        warnings: Sequence[str] = (),
    ) -> str:
        """Format registry entries and warnings.

        Args:
            entries: Infos, e.g. RootInterfaceRegistry.entries()
            warnings: Warning messages collected during the run

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        console.print()
        console.rule("[bold]ROOT INTERFACES[/bold]")
        console.print()

        unavailable = sum(1 for info in entries if not info.available)
        console.print(
            f"[bold]Interfaces:[/bold] {len(entries)} "
            f"([bold]unavailable:[/bold] {unavailable})"
        )
        console.print()

        if entries:
            console.print(self._build_table(entries))
            console.print()

        if warnings:
            self._render_warnings(console, warnings)

        return output.getvalue()

    def _build_table(self, entries: Sequence[RootInterfaceInfo]) -> Table:
        """One row per root interface."""
        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("Class", style="cyan")
        table.add_column("Generic", style="dim")
        table.add_column("Methods", justify="right")
        if self._config.show_methods:
            table.add_column("Names", style="green")

        for info in entries:
            class_name = escape(info.class_name) if info.class_name else "(none)"
            count = str(len(info.methods)) if info.available else "[red]unavailable[/red]"
            row = [class_name, "yes" if info.generic_mode else "", count]
            if self._config.show_methods:
                row.append(escape(", ".join(sorted(info.methods))))
            table.add_row(*row)

        return table

    def _render_warnings(self, console: Console, warnings: Sequence[str]) -> None:
        """Render collected warnings."""
        console.print(f"[bold yellow]WARNINGS[/bold yellow] ({len(warnings)})")
        console.print()
        for message in warnings:
            console.print(f"  {message}", markup=False, highlight=False)
        console.print()
