from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from rich.console import Console

MAX_ROWS = 50


@dataclass(frozen=True, slots=True)
class DifferencesRequest:
    expected: Path
    actual: Path
    differences: Sequence[str]


class DifferencesPresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(self, request: DifferencesRequest) -> None:
        if not request.differences:
            self.console.print(
                f"[green]✓[/green] {request.actual} is equivalent to {request.expected}"
            )
            return
        table = Table(title=f"MODS differences ({len(request.differences)})")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Location", style="cyan")
        table.add_column("Difference")
        for index, difference in enumerate(request.differences[:MAX_ROWS], start=1):
            location, _, detail = difference.partition(": ")
            table.add_row(str(index), location, detail)
        self.console.print(table)
        remaining = len(request.differences) - MAX_ROWS
        if remaining > 0:
            self.console.print(f"[dim]{remaining} more difference(s) not shown[/dim]")
