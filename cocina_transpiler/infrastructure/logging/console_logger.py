from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING, override

from rich.console import Console

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    druid: str = ""
    operation: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


def _fresh_stats() -> dict[str, int]:
    return {
        "documents_transformed": 0,
        "elements_written": 0,
        "version_transitions": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = _fresh_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{message}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{message}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{message}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {message}")

    @override
    def log_transform_start(self, druid: str, source: Path | None) -> None:
        self.set_context(druid=druid, operation="transform")
        if source is not None:
            self.verbose(f"Reading Cocina from {source}")
        self.verbose(f"Transforming {druid} to MODS")

    @override
    def log_transform_complete(
        self, druid: str, element_count: int, output: Path | None
    ) -> None:
        self._stats["documents_transformed"] += 1
        self._stats["elements_written"] += element_count
        if self._context is not None:
            self.debug(f"  Took {self._context.elapsed_ms():.1f} ms")
        if output is not None:
            self.success(f"Wrote MODS for {druid} to {output}")
        else:
            self.verbose(f"Generated MODS for {druid} ({element_count} descriptive entries)")
        self.clear_context()

    @override
    def log_version_transition(self, druid: str, transition: str, version: int) -> None:
        self._stats["version_transitions"] += 1
        self.info(f"{druid}: {transition} version {version}", level=LogLevel.VERBOSE)

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Processing Statistics:[/dim]")
            self.console.print(
                f"[dim]  Documents transformed: {self._stats['documents_transformed']}[/dim]"
            )
            self.console.print(
                f"[dim]  Descriptive entries: {self._stats['elements_written']:,}[/dim]"
            )
            if self._stats["version_transitions"] > 0:
                self.console.print(
                    f"[dim]  Version transitions: {self._stats['version_transitions']}[/dim]"
                )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = _fresh_stats()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        parts = [part for part in (self._context.druid, self._context.operation) if part]
        return f"[{':'.join(parts)}] " if parts else ""
