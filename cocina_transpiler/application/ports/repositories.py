from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.repository_object import RepositoryObject


@runtime_checkable
class RepositoryObjectStorePort(Protocol):
    pass

    def get(self, druid: str) -> RepositoryObject: ...

    def find(self, druid: str) -> RepositoryObject | None: ...

    def add(self, repository_object: RepositoryObject) -> RepositoryObject: ...

    def compare_and_swap(
        self, druid: str, expected_lock: int, repository_object: RepositoryObject
    ) -> RepositoryObject:
        """Replace the stored object only if its lock still equals ``expected_lock``.

        Raises ``StaleLockError`` otherwise; nothing is written in that case.
        """
        ...


@runtime_checkable
class CocinaDocumentRepositoryPort(Protocol):
    pass

    def read_document(self, path: str | Path) -> dict[str, object]: ...
