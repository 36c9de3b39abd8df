from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.description import Description


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_transform_start(self, druid: str, source: Path | None) -> None: ...

    def log_transform_complete(
        self, druid: str, element_count: int, output: Path | None
    ) -> None: ...

    def log_version_transition(
        self, druid: str, transition: str, version: int
    ) -> None: ...

    def log_final_stats(self) -> None: ...


@runtime_checkable
class ModsTransformerPort(Protocol):
    pass

    def generate(
        self, description: Description, druid: str, *, purl: str | None = None
    ) -> str: ...

    def write(
        self,
        description: Description,
        druid: str,
        output_path: Path,
        *,
        purl: str | None = None,
    ) -> None: ...


@runtime_checkable
class WorkflowStatePort(Protocol):
    pass

    def is_accessioned(self, druid: str, version: int) -> bool: ...

    def is_accessioning(self, druid: str, version: int) -> bool: ...

    def is_assembling(self, druid: str, version: int) -> bool: ...


@runtime_checkable
class PreservationPort(Protocol):
    pass

    def current_version(self, druid: str) -> int | None:
        """Version held by preservation, ``None`` when the object is unknown.

        Raises ``DependencyFailureError`` when the service cannot be reached.
        """
        ...
