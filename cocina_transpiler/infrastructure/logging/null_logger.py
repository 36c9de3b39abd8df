from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_transform_start(self, druid: str, source: Path | None) -> None:
        return None

    @override
    def log_transform_complete(
        self, druid: str, element_count: int, output: Path | None
    ) -> None:
        return None

    @override
    def log_version_transition(self, druid: str, transition: str, version: int) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
