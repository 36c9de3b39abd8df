"""Load a repository object's version history from JSON.

The history file looks like::

    {
      "externalIdentifier": "druid:bc123df4567",
      "versions": [
        {"version": 1, "description": "Initial version", "closedAt": "2024-01-02T03:04:05Z"},
        {"version": 2, "description": "Fix title"}
      ],
      "userVersions": [{"version": 1, "objectVersion": 1}]
    }

A version without ``closedAt`` is the open version; at most one may be open
and it must be the last one.
"""

from __future__ import annotations

from datetime import datetime
import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ...domain.entities.cocina_schema import DRUID_PATTERN
from ...domain.entities.repository_object import (
    RepositoryObject,
    RepositoryObjectVersion,
    UserVersion,
)
from ..io.exceptions import (
    CocinaFileNotFoundError,
    CocinaFileParseError,
    CocinaFileShapeError,
)


class VersionRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    version: int = Field(ge=1)
    description: str | None = None
    closedAt: datetime | None = None
    label: str | None = None
    cocina: dict[str, object] | None = None


class UserVersionRecord(BaseModel):
    version: int = Field(ge=1)
    objectVersion: int = Field(ge=1)
    withdrawn: bool = False


class ObjectHistory(BaseModel):
    model_config = ConfigDict(extra="ignore")

    externalIdentifier: str = Field(pattern=DRUID_PATTERN)
    type: str = "dro"
    versions: list[VersionRecord] = Field(min_length=1)
    userVersions: list[UserVersionRecord] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_versions(self) -> ObjectHistory:
        numbers = [record.version for record in self.versions]
        if numbers != list(range(1, len(numbers) + 1)):
            raise ValueError("versions must be numbered 1..n in order")
        open_versions = [record.version for record in self.versions if record.closedAt is None]
        if len(open_versions) > 1 or (open_versions and open_versions[0] != numbers[-1]):
            raise ValueError("only the last version may be open")
        closed = set(numbers) - set(open_versions)
        for user_version in self.userVersions:
            if user_version.objectVersion not in closed:
                raise ValueError(
                    f"user version {user_version.version} must point at a closed version"
                )
        return self

    def to_repository_object(self) -> RepositoryObject:
        versions = [
            RepositoryObjectVersion(
                version=record.version,
                description=record.description,
                closed_at=record.closedAt,
                label=record.label,
                cocina=record.cocina,
            )
            for record in self.versions
        ]
        head = versions[-1]
        closed = [version for version in versions if version.is_closed]
        return RepositoryObject(
            external_identifier=self.externalIdentifier,
            object_type=self.type,
            versions=versions,
            head_version=head.version,
            opened_version=None if head.is_closed else head.version,
            last_closed_version=closed[-1].version if closed else None,
            user_versions=[
                UserVersion(
                    version=record.version,
                    object_version=record.objectVersion,
                    withdrawn=record.withdrawn,
                )
                for record in self.userVersions
            ],
        )


def load_repository_object(path: str | Path) -> RepositoryObject:
    file_path = Path(path)
    if not file_path.is_file():
        raise CocinaFileNotFoundError(f"File not found: {file_path}")
    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise CocinaFileParseError(f"Failed to parse JSON file {file_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise CocinaFileParseError(f"File {file_path} is not UTF-8 encoded: {e}") from e
    try:
        history = ObjectHistory.model_validate(data)
    except ValidationError as e:
        raise CocinaFileShapeError(f"Invalid object history in {file_path}: {e}") from e
    return history.to_repository_object()
