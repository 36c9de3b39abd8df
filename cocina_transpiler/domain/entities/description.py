from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from ..exceptions import MappingError
from .descriptive_value import (
    PRIMARY,
    DescriptiveValue,
    Source,
    ValueLanguage,
    as_mapping,
    mappings_in,
    source_from_dict,
    value_language_from_dict,
    values_from_list,
)

Title = DescriptiveValue
Subject = DescriptiveValue
Form = DescriptiveValue
Note = DescriptiveValue
Identifier = DescriptiveValue


@dataclass(frozen=True, slots=True)
class Contributor:
    name: tuple[DescriptiveValue, ...] = ()
    type: str | None = None
    status: str | None = None
    role: tuple[DescriptiveValue, ...] = ()
    identifier: tuple[DescriptiveValue, ...] = ()
    note: tuple[DescriptiveValue, ...] = ()
    value_language: ValueLanguage | None = None
    value_at: str | None = None
    parallel_contributor: tuple[Contributor, ...] = ()

    @property
    def is_primary(self) -> bool:
        return self.status == PRIMARY


@dataclass(frozen=True, slots=True)
class Event:
    type: str | None = None
    display_label: str | None = None
    date: tuple[DescriptiveValue, ...] = ()
    contributor: tuple[Contributor, ...] = ()
    location: tuple[DescriptiveValue, ...] = ()
    identifier: tuple[DescriptiveValue, ...] = ()
    note: tuple[DescriptiveValue, ...] = ()
    value_language: ValueLanguage | None = None
    parallel_event: tuple[Event, ...] = ()


@dataclass(frozen=True, slots=True)
class Language:
    value: str | None = None
    code: str | None = None
    uri: str | None = None
    source: Source | None = None
    status: str | None = None
    display_label: str | None = None
    script: DescriptiveValue | None = None
    applies_to: tuple[DescriptiveValue, ...] = ()


@dataclass(frozen=True, slots=True)
class DescriptiveAccess:
    url: tuple[DescriptiveValue, ...] = ()
    physical_location: tuple[DescriptiveValue, ...] = ()
    digital_location: tuple[DescriptiveValue, ...] = ()
    access_contact: tuple[DescriptiveValue, ...] = ()
    note: tuple[DescriptiveValue, ...] = ()

    @property
    def has_location(self) -> bool:
        return bool(self.url or self.physical_location or self.access_contact)


@dataclass(frozen=True, slots=True)
class Geographic:
    form: tuple[DescriptiveValue, ...] = ()
    subject: tuple[DescriptiveValue, ...] = ()


@dataclass(frozen=True, slots=True)
class AdminMetadata:
    contributor: tuple[Contributor, ...] = ()
    event: tuple[Event, ...] = ()
    language: tuple[Language, ...] = ()
    note: tuple[DescriptiveValue, ...] = ()
    metadata_standard: tuple[DescriptiveValue, ...] = ()
    identifier: tuple[DescriptiveValue, ...] = ()


@dataclass(frozen=True, slots=True)
class RelatedResource:
    type: str | None = None
    status: str | None = None
    display_label: str | None = None
    value_at: str | None = None
    title: tuple[DescriptiveValue, ...] = ()
    contributor: tuple[Contributor, ...] = ()
    event: tuple[Event, ...] = ()
    form: tuple[DescriptiveValue, ...] = ()
    language: tuple[Language, ...] = ()
    note: tuple[DescriptiveValue, ...] = ()
    identifier: tuple[DescriptiveValue, ...] = ()
    subject: tuple[DescriptiveValue, ...] = ()
    purl: str | None = None
    access: DescriptiveAccess | None = None
    related_resource: tuple[RelatedResource, ...] = ()
    admin_metadata: AdminMetadata | None = None


@dataclass(frozen=True, slots=True)
class Description:
    title: tuple[DescriptiveValue, ...] = ()
    contributor: tuple[Contributor, ...] = ()
    event: tuple[Event, ...] = ()
    form: tuple[DescriptiveValue, ...] = ()
    geographic: tuple[Geographic, ...] = ()
    language: tuple[Language, ...] = ()
    note: tuple[DescriptiveValue, ...] = ()
    identifier: tuple[DescriptiveValue, ...] = ()
    subject: tuple[DescriptiveValue, ...] = ()
    access: DescriptiveAccess | None = None
    related_resource: tuple[RelatedResource, ...] = ()
    admin_metadata: AdminMetadata | None = None
    purl: str | None = None


def contributor_from_dict(data: Mapping[str, object]) -> Contributor:
    return Contributor(
        name=values_from_list(data.get("name")),
        type=_opt_str(data.get("type")),
        status=_opt_str(data.get("status")),
        role=values_from_list(data.get("role")),
        identifier=values_from_list(data.get("identifier")),
        note=values_from_list(data.get("note")),
        value_language=value_language_from_dict(data.get("valueLanguage")),
        value_at=_opt_str(data.get("valueAt")),
        parallel_contributor=tuple(
            contributor_from_dict(item)
            for item in mappings_in(data.get("parallelContributor"))
        ),
    )


def event_from_dict(data: Mapping[str, object]) -> Event:
    return Event(
        type=_opt_str(data.get("type")),
        display_label=_opt_str(data.get("displayLabel")),
        date=values_from_list(data.get("date")),
        contributor=tuple(
            contributor_from_dict(item) for item in mappings_in(data.get("contributor"))
        ),
        location=values_from_list(data.get("location")),
        identifier=values_from_list(data.get("identifier")),
        note=values_from_list(data.get("note")),
        value_language=value_language_from_dict(data.get("valueLanguage")),
        parallel_event=tuple(
            event_from_dict(item) for item in mappings_in(data.get("parallelEvent"))
        ),
    )


def language_from_dict(data: Mapping[str, object]) -> Language:
    script = as_mapping(data.get("script"))
    return Language(
        value=_opt_str(data.get("value")),
        code=_opt_str(data.get("code")),
        uri=_opt_str(data.get("uri")),
        source=source_from_dict(data.get("source")),
        status=_opt_str(data.get("status")),
        display_label=_opt_str(data.get("displayLabel")),
        script=DescriptiveValue.from_dict(script) if script is not None else None,
        applies_to=values_from_list(data.get("appliesTo")),
    )


def access_from_dict(data: object) -> DescriptiveAccess | None:
    mapping = as_mapping(data)
    if mapping is None:
        return None
    return DescriptiveAccess(
        url=values_from_list(mapping.get("url")),
        physical_location=values_from_list(mapping.get("physicalLocation")),
        digital_location=values_from_list(mapping.get("digitalLocation")),
        access_contact=values_from_list(mapping.get("accessContact")),
        note=values_from_list(mapping.get("note")),
    )


def admin_metadata_from_dict(data: object) -> AdminMetadata | None:
    mapping = as_mapping(data)
    if mapping is None:
        return None
    return AdminMetadata(
        contributor=tuple(
            contributor_from_dict(item)
            for item in mappings_in(mapping.get("contributor"))
        ),
        event=tuple(event_from_dict(item) for item in mappings_in(mapping.get("event"))),
        language=tuple(
            language_from_dict(item) for item in mappings_in(mapping.get("language"))
        ),
        note=values_from_list(mapping.get("note")),
        metadata_standard=values_from_list(mapping.get("metadataStandard")),
        identifier=values_from_list(mapping.get("identifier")),
    )


def related_resource_from_dict(data: Mapping[str, object]) -> RelatedResource:
    return RelatedResource(
        type=_opt_str(data.get("type")),
        status=_opt_str(data.get("status")),
        display_label=_opt_str(data.get("displayLabel")),
        value_at=_opt_str(data.get("valueAt")),
        title=values_from_list(data.get("title")),
        contributor=tuple(
            contributor_from_dict(item) for item in mappings_in(data.get("contributor"))
        ),
        event=tuple(event_from_dict(item) for item in mappings_in(data.get("event"))),
        form=values_from_list(data.get("form")),
        language=tuple(
            language_from_dict(item) for item in mappings_in(data.get("language"))
        ),
        note=values_from_list(data.get("note")),
        identifier=values_from_list(data.get("identifier")),
        subject=values_from_list(data.get("subject")),
        purl=_opt_str(data.get("purl")),
        access=access_from_dict(data.get("access")),
        related_resource=tuple(
            related_resource_from_dict(item)
            for item in mappings_in(data.get("relatedResource"))
        ),
        admin_metadata=admin_metadata_from_dict(data.get("adminMetadata")),
    )


def description_from_dict(data: Mapping[str, object]) -> Description:
    """Build a ``Description`` graph from camelCase Cocina JSON."""
    if as_mapping(data) is None:
        raise MappingError("description", data, "expected a JSON object")
    return Description(
        title=values_from_list(data.get("title")),
        contributor=tuple(
            contributor_from_dict(item) for item in mappings_in(data.get("contributor"))
        ),
        event=tuple(event_from_dict(item) for item in mappings_in(data.get("event"))),
        form=values_from_list(data.get("form")),
        geographic=tuple(
            Geographic(
                form=values_from_list(item.get("form")),
                subject=values_from_list(item.get("subject")),
            )
            for item in mappings_in(data.get("geographic"))
        ),
        language=tuple(
            language_from_dict(item) for item in mappings_in(data.get("language"))
        ),
        note=values_from_list(data.get("note")),
        identifier=values_from_list(data.get("identifier")),
        subject=values_from_list(data.get("subject")),
        access=access_from_dict(data.get("access")),
        related_resource=tuple(
            related_resource_from_dict(item)
            for item in mappings_in(data.get("relatedResource"))
        ),
        admin_metadata=admin_metadata_from_dict(data.get("adminMetadata")),
        purl=_opt_str(data.get("purl")),
    )


def _opt_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)
