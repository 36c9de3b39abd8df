"""Domain errors.

Mapping errors come from the Cocina → MODS engine; versioning errors come from
the repository object lifecycle. Collaborator outages are reported separately
as ``DependencyFailureError`` so callers can tell them apart from rule
violations.
"""

from __future__ import annotations

from collections.abc import Mapping


class CocinaTranspilerError(Exception):
    pass


class MappingError(CocinaTranspilerError):
    def __init__(self, entity_type: str, value: object, reason: str = "") -> None:
        self.entity_type = entity_type
        self.value = value
        message = f"Cannot map {entity_type}: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class VersioningError(CocinaTranspilerError):
    pass


class ObjectNotFoundError(VersioningError):
    pass


class InvalidVersionStateError(VersioningError):
    """A transition was requested whose precondition does not hold."""


class VersionAlreadyOpenedError(InvalidVersionStateError):
    pass


class VersionNotOpenedError(InvalidVersionStateError):
    pass


class VersionNotDiscardableError(InvalidVersionStateError):
    pass


class StaleLockError(VersioningError):
    """The caller's lock token no longer matches the stored object."""


class CocinaValidationConflictError(VersioningError):
    def __init__(self, message: str, document: Mapping[str, object]) -> None:
        super().__init__(message)
        self.document = document


class UserVersioningError(VersioningError):
    pass


class DependencyFailureError(CocinaTranspilerError):
    """An external collaborator (preservation, workflow) failed."""
