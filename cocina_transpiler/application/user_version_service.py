"""Create, move and withdraw user versions.

A user version is the public version number of an object. It always points at
a closed object version; several object versions may pass before a new user
version is cut.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..domain.entities.repository_object import UserVersion
from ..domain.exceptions import ObjectNotFoundError, UserVersioningError

if TYPE_CHECKING:
    from ..domain.entities.repository_object import RepositoryObject, RepositoryObjectVersion
    from .ports.repositories import RepositoryObjectStorePort
    from .ports.services import LoggerPort


def closed_object_version(
    repository_object: RepositoryObject, version: int | None
) -> RepositoryObjectVersion:
    """Object version ``version`` (head when ``None``); it must be closed."""
    object_version = (
        repository_object.head if version is None else repository_object.version(version)
    )
    if object_version is None:
        raise UserVersioningError(
            f"RepositoryObjectVersion {version} not found for {repository_object.external_identifier}"
        )
    if not object_version.is_closed:
        raise UserVersioningError("RepositoryObjectVersion not closed")
    return object_version


def add_user_version(repository_object: RepositoryObject, version: int | None) -> int:
    object_version = closed_object_version(repository_object, version)
    next_version = (repository_object.head_user_version or 0) + 1
    repository_object.user_versions.append(
        UserVersion(version=next_version, object_version=object_version.version)
    )
    return next_version


def user_version_for(repository_object: RepositoryObject, user_version: int) -> UserVersion | None:
    for candidate in repository_object.user_versions:
        if candidate.version == user_version:
            return candidate
    return None


def point_user_version(
    repository_object: RepositoryObject, version: int | None, user_version: int
) -> None:
    object_version = closed_object_version(repository_object, version)
    target = _require_user_version(repository_object, user_version)
    target.object_version = object_version.version


def _require_user_version(repository_object: RepositoryObject, user_version: int) -> UserVersion:
    target = user_version_for(repository_object, user_version)
    if target is None:
        raise UserVersioningError(
            f"UserVersion {user_version} not found for {repository_object.external_identifier}"
        )
    return target


@dataclass(slots=True)
class UserVersionService:
    store: RepositoryObjectStorePort
    logger: LoggerPort

    def create(self, druid: str, version: int | None = None) -> int:
        repository_object = self._repository_object(druid)
        lock = repository_object.lock
        new_user_version = add_user_version(repository_object, version)
        self.store.compare_and_swap(druid, lock, repository_object)
        self.logger.verbose(f"{druid}: user version {new_user_version} created")
        return new_user_version

    def withdraw(self, druid: str, user_version: int, *, withdraw: bool = True) -> None:
        repository_object = self._repository_object(druid)
        lock = repository_object.lock
        _require_user_version(repository_object, user_version).withdrawn = withdraw
        self.store.compare_and_swap(druid, lock, repository_object)
        state = "withdrawn" if withdraw else "restored"
        self.logger.verbose(f"{druid}: user version {user_version} {state}")

    def move(self, druid: str, version: int, user_version: int) -> None:
        repository_object = self._repository_object(druid)
        lock = repository_object.lock
        point_user_version(repository_object, version, user_version)
        self.store.compare_and_swap(druid, lock, repository_object)
        self.logger.verbose(f"{druid}: user version {user_version} moved to version {version}")

    def exists(self, druid: str, user_version: int) -> bool:
        return user_version_for(self._repository_object(druid), user_version) is not None

    def latest_user_version(self, druid: str) -> int | None:
        return self._repository_object(druid).head_user_version

    def object_version_for(self, druid: str, user_version: int) -> int:
        repository_object = self._repository_object(druid)
        return _require_user_version(repository_object, user_version).object_version

    def _repository_object(self, druid: str) -> RepositoryObject:
        try:
            return self.store.get(druid)
        except ObjectNotFoundError:
            raise UserVersioningError(f"RepositoryObject not found for {druid}") from None
