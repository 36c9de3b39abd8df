"""Process-local repository object store with compare-and-swap writes."""

import copy
import threading

from ...domain.entities.repository_object import RepositoryObject
from ...domain.exceptions import ObjectNotFoundError, StaleLockError, VersioningError


class InMemoryRepositoryObjectStore:
    """Keeps repository objects in a dict guarded by a mutex.

    Readers always receive deep copies, so a caller can only change stored
    state through ``compare_and_swap``.
    """

    def __init__(self) -> None:
        super().__init__()
        self._objects: dict[str, RepositoryObject] = {}
        self._mutex = threading.Lock()

    def get(self, druid: str) -> RepositoryObject:
        found = self.find(druid)
        if found is None:
            raise ObjectNotFoundError(
                f"Couldn't find object with 'external_identifier'={druid}"
            )
        return found

    def find(self, druid: str) -> RepositoryObject | None:
        with self._mutex:
            stored = self._objects.get(druid)
            return copy.deepcopy(stored) if stored is not None else None

    def add(self, repository_object: RepositoryObject) -> RepositoryObject:
        druid = repository_object.external_identifier
        with self._mutex:
            if druid in self._objects:
                raise VersioningError(f"{druid} already exists")
            self._objects[druid] = copy.deepcopy(repository_object)
            return copy.deepcopy(self._objects[druid])

    def compare_and_swap(
        self, druid: str, expected_lock: int, repository_object: RepositoryObject
    ) -> RepositoryObject:
        with self._mutex:
            current = self._objects.get(druid)
            if current is None:
                raise ObjectNotFoundError(
                    f"Couldn't find object with 'external_identifier'={druid}"
                )
            if current.lock != expected_lock:
                raise StaleLockError(
                    f"Expected lock of {expected_lock} but {druid} is at {current.lock}."
                )
            replacement = copy.deepcopy(repository_object)
            replacement.lock = expected_lock + 1
            self._objects[druid] = replacement
            return copy.deepcopy(replacement)

    def __len__(self) -> int:
        with self._mutex:
            return len(self._objects)
