"""originInfo writer.

An event renders as one ``originInfo``. When its locations, publishers, dates
or edition notes carry parallel values, the event is split into one
``originInfo`` per script, all sharing one altRepGroup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cocina_transpiler.domain.entities.descriptive_value import (
    DescriptiveValue,
    Leaf,
    Structured,
)

from .constants import ALT_REP_GROUP
from .elements import add_element, authority_attrs, language_attrs

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cocina_transpiler.domain.entities.description import Contributor, Event

    from ..xml_utils import XmlElement
    from .context import WriterContext

EVENT_TYPES: dict[str, str] = {
    "creation": "production",
    "copyright": "copyright notice",
}
DATE_TAGS: dict[str, str] = {
    "creation": "dateCreated",
    "publication": "dateIssued",
    "copyright": "copyrightDate",
    "capture": "dateCaptured",
    "validity": "dateValid",
    "modification": "dateModified",
}
DEFAULT_DATE_TAG = "dateOther"
DEFAULT_EVENT_TYPE = "production"
PUBLISHER_ROLE_CODE = "pbl"
PUBLISHER_ROLE = "publisher"
LATIN_SCRIPT = "Latn"
NO_SCRIPT = ""


def _empty_values() -> list[DescriptiveValue]:
    return []


def _empty_dates() -> list[tuple[str, DescriptiveValue]]:
    return []


@dataclass(slots=True)
class _Origin:
    lang: str | None = None
    places: list[DescriptiveValue] = field(default_factory=_empty_values)
    publishers: list[DescriptiveValue] = field(default_factory=_empty_values)
    dates: list[tuple[str, DescriptiveValue]] = field(default_factory=_empty_dates)
    editions: list[DescriptiveValue] = field(default_factory=_empty_values)


def write_events(
    parent: XmlElement, events: Sequence[Event], context: WriterContext
) -> None:
    for index, event in enumerate(events):
        event_type = event_type_for(event.type, first=index == 0)
        if event.parallel_event:
            _write_parallel_events(parent, event, event_type, context)
        elif _has_parallel_values(event):
            _write_translated(parent, event, event_type, context)
        else:
            origin = _collect(event, _Origin())
            attrs = {
                "eventType": event_type,
                "displayLabel": event.display_label,
                **language_attrs(event.value_language),
            }
            _write_origin(parent, event, origin, attrs, with_notes=True)


def event_type_for(cocina_type: str | None, *, first: bool) -> str | None:
    """MODS eventType; only the first untyped event defaults to production."""
    if cocina_type is None:
        return DEFAULT_EVENT_TYPE if first else None
    return EVENT_TYPES.get(cocina_type, cocina_type)


def date_tag_for(event: Event, date: DescriptiveValue) -> str:
    return DATE_TAGS.get(date.type or event.type or "", DEFAULT_DATE_TAG)


def is_publisher(contributor: Contributor) -> bool:
    if not contributor.role:
        return True
    return any(
        role.code == PUBLISHER_ROLE_CODE
        or (role.value or "").strip().lower() == PUBLISHER_ROLE
        for role in contributor.role
    )


def _collect(event: Event, origin: _Origin) -> _Origin:
    origin.places.extend(event.location)
    origin.publishers.extend(
        contributor.name[0]
        for contributor in event.contributor
        if contributor.name and is_publisher(contributor)
    )
    origin.dates.extend((date_tag_for(event, date), date) for date in event.date)
    origin.editions.extend(note for note in event.note if note.type == "edition")
    return origin


def _has_parallel_values(event: Event) -> bool:
    values = [*event.location, *event.date]
    values.extend(note for note in event.note if note.type == "edition")
    values.extend(c.name[0] for c in event.contributor if c.name)
    return any(value.parallel_value for value in values)


def _write_parallel_events(
    parent: XmlElement, event: Event, event_type: str | None, context: WriterContext
) -> None:
    group = context.groups.next_alt_rep_group()
    for parallel in event.parallel_event:
        origin = _collect(parallel, _Origin())
        attrs = {
            "eventType": event_type_for(parallel.type, first=False) or event_type,
            "displayLabel": parallel.display_label or event.display_label,
            ALT_REP_GROUP: group,
            **language_attrs(parallel.value_language),
        }
        _write_origin(parent, parallel, origin, attrs, with_notes=True)


def _write_translated(
    parent: XmlElement, event: Event, event_type: str | None, context: WriterContext
) -> None:
    group = context.groups.next_alt_rep_group()
    origins: dict[str, _Origin] = {}

    def origin_for(value: DescriptiveValue) -> _Origin:
        script = value.script or NO_SCRIPT
        origin = origins.setdefault(script, _Origin())
        if value.lang:
            origin.lang = value.lang
        return origin

    for location in event.location:
        for variant in location.parallel_value or (location,):
            origin_for(variant).places.append(variant)
    for contributor in event.contributor:
        if not contributor.name or not is_publisher(contributor):
            continue
        name = contributor.name[0]
        for variant in name.parallel_value or (name,):
            origin_for(variant).publishers.append(variant)
    for date in event.date:
        tag_name = date_tag_for(event, date)
        for variant in date.parallel_value or (date,):
            origin_for(variant).dates.append((tag_name, variant))
    for note in event.note:
        if note.type != "edition":
            continue
        for variant in note.parallel_value or (note,):
            origin_for(variant).editions.append(variant)

    if NO_SCRIPT in origins and LATIN_SCRIPT in origins:
        unscripted = origins.pop(NO_SCRIPT)
        latin = origins[LATIN_SCRIPT]
        latin.places.extend(unscripted.places)
        latin.publishers.extend(unscripted.publishers)
        latin.dates.extend(unscripted.dates)
        latin.editions.extend(unscripted.editions)
        latin.lang = latin.lang or unscripted.lang

    for script, origin in origins.items():
        attrs = {
            "script": script or None,
            ALT_REP_GROUP: group,
            "eventType": event_type,
            "lang": origin.lang,
            "displayLabel": event.display_label,
        }
        _write_origin(
            parent,
            event,
            origin,
            attrs,
            with_notes=script in (NO_SCRIPT, LATIN_SCRIPT),
        )


def _write_origin(
    parent: XmlElement,
    event: Event,
    origin: _Origin,
    attrs: dict[str, str | None],
    *,
    with_notes: bool,
) -> None:
    origin_info = add_element(parent, "originInfo", attrs=attrs)
    for location in origin.places:
        _write_place(origin_info, location)
    for name in origin.publishers:
        add_element(
            origin_info,
            "publisher",
            name.flat_text() or "",
            {
                **language_attrs(name.value_language),
                "transliteration": name.standard.value if name.standard else None,
            },
        )
    for tag_name, date in origin.dates:
        _write_date(origin_info, tag_name, date)
    for edition in origin.editions:
        add_element(origin_info, "edition", edition.value)
    if not with_notes:
        return
    for note in event.note:
        if note.type == "issuance":
            add_element(origin_info, "issuance", note.value)
        elif note.type == "frequency":
            add_element(
                origin_info,
                "frequency",
                note.value,
                authority_attrs(note.source, note.uri),
            )


def _write_place(origin_info: XmlElement, location: DescriptiveValue) -> None:
    if location.value is None and location.code is None and not location.value_at:
        return
    place = add_element(
        origin_info,
        "place",
        attrs={"supplied": "yes" if location.type == "supplied" else None},
    )
    attrs = authority_attrs(location.source, location.uri)
    if location.value is not None:
        add_element(place, "placeTerm", location.value, {"type": "text", **attrs})
    if location.code is not None:
        add_element(place, "placeTerm", location.code, {"type": "code", **attrs})


def _write_date(origin_info: XmlElement, tag_name: str, date: DescriptiveValue) -> None:
    shape = date.shape
    if isinstance(shape, Leaf):
        add_element(origin_info, tag_name, shape.text, _date_attrs(tag_name, date, date))
    elif isinstance(shape, Structured):
        for position, part in enumerate(shape.parts):
            attrs = _date_attrs(tag_name, part, date, key_range_start=position == 0)
            if part.type in ("start", "end"):
                attrs["point"] = part.type
            add_element(origin_info, tag_name, part.value or "", attrs)


def _date_attrs(
    tag_name: str,
    date: DescriptiveValue,
    parent: DescriptiveValue,
    *,
    key_range_start: bool = True,
) -> dict[str, str | None]:
    encoding = date.encoding or parent.encoding
    attrs: dict[str, str | None] = {
        "encoding": encoding.code if encoding else None,
        "qualifier": date.qualifier or parent.qualifier,
        "keyDate": "yes"
        if date.is_primary or (parent.is_primary and key_range_start)
        else None,
    }
    if tag_name == DEFAULT_DATE_TAG:
        attrs["type"] = date.first_note_value("date type") or parent.first_note_value(
            "date type"
        )
    return attrs
