"""Open, close and discard repository object versions.

Every transition is a read-modify-write against the object store: the service
reads a private copy, applies the transition to it and then writes it back
with ``compare_and_swap`` keyed on the lock it read. When two callers race on
the same object exactly one write lands; the other receives ``StaleLockError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import ValidationError

from ..domain.entities.cocina_schema import validate_cocina_document
from ..domain.exceptions import (
    CocinaValidationConflictError,
    ObjectNotFoundError,
    VersioningError,
)
from .models import DEFAULT_USER_VERSION_MODE, UserVersionMode
from .user_version_service import add_user_version, point_user_version

if TYPE_CHECKING:
    from ..domain.entities.repository_object import RepositoryObject
    from .ports.repositories import RepositoryObjectStorePort
    from .ports.services import LoggerPort, PreservationPort, WorkflowStatePort

PRESERVATION_NOT_READY = (
    "Preservation (SDR) is not yet answering queries about this object. "
    "When an object has just been transferred, Preservation isn't immediately "
    "ready to answer queries."
)


@dataclass(slots=True)
class VersionServiceDependencies:
    store: RepositoryObjectStorePort
    workflow_state: WorkflowStatePort
    logger: LoggerPort
    preservation: PreservationPort | None = None
    sync_with_preservation: bool = False


class VersionService:
    pass

    def __init__(self, dependencies: VersionServiceDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._store = dependencies.store
        self._workflow_state = dependencies.workflow_state
        self._preservation = dependencies.preservation
        self._sync_with_preservation = dependencies.sync_with_preservation

    def is_open(self, druid: str, version: int | None = None) -> bool:
        """Whether ``version`` (the head version when omitted) is open.

        Raises ``ObjectNotFoundError`` for an unknown object and
        ``VersioningError`` when ``version`` is not the head version.
        """
        repository_object = self._find(druid)
        _check_head(repository_object, version)
        return repository_object.is_open

    def open(
        self,
        druid: str,
        description: str,
        *,
        assume_accessioned: bool = False,
        opening_user_name: str | None = None,
        lock: str | None = None,
    ) -> RepositoryObject:
        if not description or not description.strip():
            raise ValueError("description is required to open a new version")
        repository_object = self._find(druid)
        if lock is not None:
            repository_object.check_lock(lock)
        expected_lock = repository_object.lock
        self._ensure_openable(repository_object, assume_accessioned=assume_accessioned)
        self._check_preservation_version(druid, repository_object.head.version)

        new_version = repository_object.open_version(description)
        stored = self._store.compare_and_swap(druid, expected_lock, repository_object)
        self.logger.log_version_transition(druid, "open", new_version.version)
        if opening_user_name:
            self.logger.verbose(f"{druid}: version {new_version.version} opened by {opening_user_name}")
        return stored

    def can_open(self, druid: str, *, assume_accessioned: bool = False) -> bool:
        """Whether a new version could be opened right now.

        Rule violations answer ``False``; a preservation outage propagates as
        ``DependencyFailureError``.
        """
        try:
            repository_object = self._find(druid)
            self._ensure_openable(repository_object, assume_accessioned=assume_accessioned)
            if repository_object.last_closed is None:
                raise VersioningError("Object has no closed version")
            if self._sync_with_preservation:
                self._preservation_version(druid)
        except VersioningError:
            return False
        return True

    def update(
        self,
        druid: str,
        cocina: dict[str, object],
        *,
        label: str | None = None,
        lock: str | None = None,
    ) -> RepositoryObject:
        """Replace the open version's Cocina document."""
        repository_object = self._find(druid)
        if lock is not None:
            repository_object.check_lock(lock)
        expected_lock = repository_object.lock
        _validate_document(druid, cocina)
        updated = repository_object.update_opened_version(cocina, label=label)
        stored = self._store.compare_and_swap(druid, expected_lock, repository_object)
        self.logger.log_version_transition(druid, "update", updated.version)
        return stored

    def close(
        self,
        druid: str,
        *,
        version: int | None = None,
        description: str | None = None,
        user_name: str | None = None,
        user_version_mode: str | UserVersionMode = DEFAULT_USER_VERSION_MODE,
        lock: str | None = None,
    ) -> RepositoryObject:
        mode = UserVersionMode.parse(user_version_mode)
        repository_object = self._find(druid)
        if lock is not None:
            repository_object.check_lock(lock)
        expected_lock = repository_object.lock
        self._ensure_closeable(repository_object, version)

        opened = repository_object.opened
        if opened is not None and opened.cocina is not None:
            _validate_document(druid, opened.cocina)

        closed = repository_object.close_version(description)
        _update_user_version(repository_object, mode)
        stored = self._store.compare_and_swap(druid, expected_lock, repository_object)
        self.logger.log_version_transition(druid, "close", closed.version)
        if user_name:
            self.logger.verbose(f"{druid}: version {closed.version} closed by {user_name}")
        return stored

    def can_close(self, druid: str, version: int | None = None) -> bool:
        try:
            self._ensure_closeable(self._find(druid), version)
        except VersioningError:
            return False
        return True

    def discard(self, druid: str, *, lock: str | None = None) -> RepositoryObject:
        """Throw away the open version and fall back to the last closed one."""
        repository_object = self._find(druid)
        if lock is not None:
            repository_object.check_lock(lock)
        expected_lock = repository_object.lock
        discarded = repository_object.opened_version
        repository_object.discard_open_version()
        stored = self._store.compare_and_swap(druid, expected_lock, repository_object)
        if discarded is not None:
            self.logger.log_version_transition(druid, "discard", discarded)
        return stored

    def _find(self, druid: str) -> RepositoryObject:
        repository_object = self._store.find(druid)
        if repository_object is None:
            raise ObjectNotFoundError(
                f"Couldn't find object with 'external_identifier'={druid}"
            )
        return repository_object

    def _ensure_openable(
        self, repository_object: RepositoryObject, *, assume_accessioned: bool
    ) -> None:
        druid = repository_object.external_identifier
        version = repository_object.head.version
        if not assume_accessioned and not self._workflow_state.is_accessioned(druid, version):
            raise VersioningError("Object net yet accessioned")
        if repository_object.is_open:
            raise VersioningError("Object already opened for versioning")
        if self._workflow_state.is_accessioning(druid, version):
            raise VersioningError("Object currently being accessioned")

    def _ensure_closeable(
        self, repository_object: RepositoryObject, version: int | None
    ) -> None:
        druid = repository_object.external_identifier
        _check_head(repository_object, version)
        head_version = repository_object.head.version
        if not repository_object.is_open:
            raise VersioningError(
                f"Trying to close version {head_version} on {druid} which is not opened for versioning"
            )
        if self._workflow_state.is_assembling(druid, head_version):
            raise VersioningError(
                f"Trying to close version {head_version} on {druid} which has active assemblyWF"
            )
        if self._workflow_state.is_accessioning(druid, head_version):
            raise VersioningError(
                f"accessionWF already created for versioned object {druid}"
            )

    def _check_preservation_version(self, druid: str, current_version: int) -> None:
        if not self._sync_with_preservation:
            return
        preservation_version = self._preservation_version(druid)
        if preservation_version != current_version:
            raise VersioningError(
                "Version from Preservation is out of sync. Preservation expects "
                f"{preservation_version} but current version is {current_version}"
            )

    def _preservation_version(self, druid: str) -> int:
        if self._preservation is None:
            raise VersioningError(PRESERVATION_NOT_READY)
        preservation_version = self._preservation.current_version(druid)
        if preservation_version is None:
            raise VersioningError(PRESERVATION_NOT_READY)
        return preservation_version


def _check_head(repository_object: RepositoryObject, version: int | None) -> None:
    head_version = repository_object.head.version
    if version is not None and version != head_version:
        raise VersioningError(
            f"Version {version} does not match head version {head_version}"
        )


def _validate_document(druid: str, document: dict[str, object]) -> None:
    try:
        validate_cocina_document(document)
    except ValidationError as exc:
        raise CocinaValidationConflictError(
            f"Cocina document for {druid} is invalid: {exc.error_count()} validation error(s)",
            document,
        ) from exc


def _update_user_version(repository_object: RepositoryObject, mode: UserVersionMode) -> None:
    last_closed = repository_object.last_closed_version
    head_user_version = repository_object.head_user_version
    if mode is UserVersionMode.NEW or (
        mode is UserVersionMode.UPDATE and head_user_version is None
    ):
        add_user_version(repository_object, last_closed)
    elif mode in (UserVersionMode.UPDATE, UserVersionMode.UPDATE_IF_EXISTING):
        if head_user_version is not None:
            point_user_version(repository_object, last_closed, head_user_version)
