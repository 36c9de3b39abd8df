"""Repository objects and their versions.

An object owns an ordered list of versions. At any time the head version is
either the last closed version or the opened (draft) version, and at most one
version is open. Closed versions are never modified.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import UTC, datetime

from ..exceptions import (
    StaleLockError,
    VersionAlreadyOpenedError,
    VersionNotDiscardableError,
    VersionNotOpenedError,
)

INITIAL_VERSION_DESCRIPTION = "Initial version"


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True)
class RepositoryObjectVersion:
    version: int
    description: str | None = None
    closed_at: datetime | None = None
    cocina_version: str | None = None
    label: str | None = None
    structural: dict[str, object] | None = None
    cocina: dict[str, object] | None = None
    lock: int = 0

    @property
    def is_closed(self) -> bool:
        return self.closed_at is not None

    @property
    def has_cocina(self) -> bool:
        return self.cocina is not None

    def draft_copy(self, version: int, description: str) -> RepositoryObjectVersion:
        """Open copy of this version carrying its metadata forward."""
        return RepositoryObjectVersion(
            version=version,
            description=description,
            closed_at=None,
            cocina_version=self.cocina_version,
            label=self.label,
            structural=copy.deepcopy(self.structural),
            cocina=copy.deepcopy(self.cocina),
        )


@dataclass(slots=True)
class UserVersion:
    """Public, user-facing version number pointing at a closed object version."""

    version: int
    object_version: int
    withdrawn: bool = False


def _empty_versions() -> list[RepositoryObjectVersion]:
    return []


def _empty_user_versions() -> list[UserVersion]:
    return []


@dataclass(slots=True)
class RepositoryObject:
    external_identifier: str
    object_type: str = "dro"
    versions: list[RepositoryObjectVersion] = field(default_factory=_empty_versions)
    head_version: int | None = None
    opened_version: int | None = None
    last_closed_version: int | None = None
    lock: int = 0
    user_versions: list[UserVersion] = field(default_factory=_empty_user_versions)

    @classmethod
    def create(
        cls,
        external_identifier: str,
        *,
        object_type: str = "dro",
        cocina: dict[str, object] | None = None,
        label: str | None = None,
    ) -> RepositoryObject:
        """New object whose first version is opened immediately."""
        repository_object = cls(external_identifier=external_identifier, object_type=object_type)
        first = RepositoryObjectVersion(
            version=1,
            description=INITIAL_VERSION_DESCRIPTION,
            label=label,
            cocina=cocina,
        )
        repository_object.versions.append(first)
        repository_object.opened_version = 1
        repository_object.head_version = 1
        return repository_object

    def version(self, number: int) -> RepositoryObjectVersion | None:
        for object_version in self.versions:
            if object_version.version == number:
                return object_version
        return None

    @property
    def head(self) -> RepositoryObjectVersion:
        head = self.version(self.head_version) if self.head_version is not None else None
        if head is None:
            raise ValueError(f"{self.external_identifier} has no head version")
        return head

    @property
    def opened(self) -> RepositoryObjectVersion | None:
        return self.version(self.opened_version) if self.opened_version is not None else None

    @property
    def last_closed(self) -> RepositoryObjectVersion | None:
        if self.last_closed_version is None:
            return None
        return self.version(self.last_closed_version)

    @property
    def is_open(self) -> bool:
        return self.head_version is not None and self.head_version == self.opened_version

    @property
    def is_closed(self) -> bool:
        return self.head_version is not None and self.head_version == self.last_closed_version

    @property
    def head_user_version(self) -> int | None:
        return max((user.version for user in self.user_versions), default=None)

    def open_version(
        self, description: str, *, from_version: int | None = None
    ) -> RepositoryObjectVersion:
        if self.is_open:
            raise VersionAlreadyOpenedError(
                f"Cannot open new version because one is already open: {self.head_version}"
            )
        last_closed = self.last_closed
        if last_closed is None:
            raise VersionNotOpenedError(
                f"Cannot open new version because {self.external_identifier} has no closed version"
            )
        base = self.version(from_version) if from_version is not None else last_closed
        if base is None:
            raise VersionNotOpenedError(f"Version {from_version} not found")
        new_version = base.draft_copy(last_closed.version + 1, description)
        self.versions.append(new_version)
        self.opened_version = new_version.version
        self.head_version = new_version.version
        return new_version

    def close_version(
        self, description: str | None = None, *, closed_at: datetime | None = None
    ) -> RepositoryObjectVersion:
        opened = self.opened
        if not self.is_open or opened is None:
            raise VersionNotOpenedError(
                f"Cannot close version because head version is closed: {self.head_version}"
            )
        opened.closed_at = closed_at or utc_now()
        opened.description = description or opened.description
        self.opened_version = None
        self.last_closed_version = opened.version
        self.head_version = opened.version
        return opened

    def check_discard_open_version(self) -> None:
        if self.is_closed:
            raise VersionNotDiscardableError(
                "Cannot discard version because head version is closed"
            )
        last_closed = self.last_closed
        if last_closed is None:
            raise VersionNotDiscardableError(
                "Cannot discard version because this is the first version"
            )
        if not last_closed.has_cocina:
            raise VersionNotDiscardableError(
                "Cannot discard version because last closed version does not have cocina"
            )

    def can_discard_open_version(self) -> bool:
        try:
            self.check_discard_open_version()
        except VersionNotDiscardableError:
            return False
        return True

    def discard_open_version(self) -> None:
        self.check_discard_open_version()
        discarded = self.opened_version
        self.opened_version = None
        self.head_version = self.last_closed_version
        self.versions = [v for v in self.versions if v.version != discarded]

    def reopen(self) -> None:
        """Reopen the head version; used for remediation only."""
        if self.is_open:
            raise VersionAlreadyOpenedError("Cannot reopen version because already open")
        head = self.head
        head.closed_at = None
        self.opened_version = head.version
        previous = self.version(head.version - 1)
        self.last_closed_version = previous.version if previous else None

    def update_opened_version(
        self,
        cocina: dict[str, object],
        *,
        label: str | None = None,
        structural: dict[str, object] | None = None,
    ) -> RepositoryObjectVersion:
        opened = self.opened
        if opened is None:
            raise VersionNotOpenedError(
                f"Cannot update {self.external_identifier} because no version is open"
            )
        opened.cocina = cocina
        opened.label = label if label is not None else opened.label
        opened.structural = structural if structural is not None else opened.structural
        opened.lock += 1
        return opened

    @property
    def external_lock(self) -> str:
        # The identifier is part of the token so it cannot be replayed on another object.
        return "=".join((self.external_identifier, str(self.lock), str(self.head.lock)))

    def check_lock(self, lock: str | None) -> None:
        if lock != self.external_lock:
            raise StaleLockError(f"Expected lock of {self.external_lock} but received {lock}.")
