from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class UserVersionMode(StrEnum):
    """What closing a version does to the object's user versions."""

    NONE = "none"
    NEW = "new"
    UPDATE = "update"
    UPDATE_IF_EXISTING = "update_if_existing"

    @classmethod
    def parse(cls, value: str | UserVersionMode) -> UserVersionMode:
        try:
            return cls(value)
        except ValueError:
            options = ", ".join(mode.value for mode in cls)
            raise ValueError(f"user_version_mode must be one of {options}") from None


DEFAULT_USER_VERSION_MODE = UserVersionMode.UPDATE_IF_EXISTING


@dataclass(slots=True)
class TransformRequest:
    input_path: Path
    output_path: Path | None = None
    druid: str | None = None
    purl: str | None = None


@dataclass(slots=True)
class TransformResponse:
    success: bool = True
    druid: str | None = None
    mods_xml: str | None = None
    output_path: Path | None = None
    error: str | None = None


@dataclass(slots=True)
class CocinaInput:
    """A validated Cocina description plus the identifiers it came with."""

    druid: str
    description: dict[str, object]
    purl: str | None = None
