"""``subject`` and ``classification`` writer.

Dispatch happens on the value shape first and the Cocina ``type`` second.
Authority lands on the outer ``subject`` when the whole subject carries a
source, and on the individual children when only the terms carry one.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from cocina_transpiler.domain.entities.descriptive_value import (
    DescriptiveValue,
    Leaf,
    Parallel,
    Structured,
)

from .constants import ALT_REP_GROUP
from .contributor_writer import NAME_TYPES, write_name_parts
from .elements import XLINK_HREF, add_element, authority_attrs
from .title_writer import write_title_info

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..xml_utils import XmlElement
    from .context import WriterContext

CLASSIFICATION = "classification"
MAP_COORDINATES = "map coordinates"
MAP_SCALE = "map scale"
MAP_PROJECTION = "map projection"
CARTOGRAPHIC_TAGS: dict[str, str] = {MAP_SCALE: "scale", MAP_PROJECTION: "projection"}
CARTOGRAPHIC_FORM_TYPES = frozenset(CARTOGRAPHIC_TAGS)

# Cocina subject types that are not plain ``topic`` elements.
TERM_TAGS: dict[str, str] = {
    "topic": "topic",
    "genre": "genre",
    "occupation": "occupation",
    "time": "temporal",
    "place": "geographic",
}
# Child order inside one structured subject; unknown tags keep input order after these.
CHILD_ORDER: tuple[str, ...] = (
    "topic",
    "name",
    "titleInfo",
    "genre",
    "geographic",
    "temporal",
)
HIERARCHY_LEVELS: tuple[str, ...] = (
    "continent",
    "country",
    "province",
    "region",
    "state",
    "territory",
    "county",
    "city",
    "citySection",
    "island",
    "area",
    "extraterrestrialArea",
)
_HIERARCHY_TYPES: dict[str, str] = {
    "continent": "continent",
    "country": "country",
    "province": "province",
    "region": "region",
    "state": "state",
    "territory": "territory",
    "county": "county",
    "city": "city",
    "city section": "citySection",
    "island": "island",
    "area": "area",
    "extraterrestrial area": "extraterrestrialArea",
}
NAF = "naf"
LCSH = "lcsh"


def write_subjects(
    parent: XmlElement,
    subjects: Sequence[DescriptiveValue],
    context: WriterContext,
    *,
    forms: Sequence[DescriptiveValue] = (),
) -> None:
    for subject in subjects:
        if subject.type == CLASSIFICATION:
            write_classification(parent, subject)
            continue
        shape = subject.shape
        if isinstance(shape, Parallel):
            _write_parallel(parent, subject, shape.variants, context, forms)
        elif isinstance(shape, Structured):
            _write_structured(parent, subject, shape.parts, forms)
        elif isinstance(shape, Leaf) or subject.code is not None:
            _write_basic(parent, subject, forms)
        else:
            add_element(parent, "subject", attrs=_subject_attrs(subject))


def write_classification(parent: XmlElement, subject: DescriptiveValue) -> None:
    source = subject.source
    add_element(
        parent,
        "classification",
        subject.value or "",
        {
            **authority_attrs(source, subject.uri),
            "edition": classification_edition(source.version if source else None),
            "displayLabel": subject.display_label,
        },
    )


def classification_edition(version: str | None) -> str | None:
    """Edition number from a source version such as ``"11th edition"``."""
    if not version:
        return None
    match = re.search(r"\d+", version)
    return match.group(0) if match else None


def subject_authority(code: str | None) -> str | None:
    return LCSH if code == NAF else code


def _subject_attrs(subject: DescriptiveValue) -> dict[str, str | None]:
    return {
        "authority": subject_authority(subject.source.code) if subject.source else None,
        "authorityURI": subject.source.uri if subject.source else None,
        "valueURI": None,
        "displayLabel": subject.display_label,
        XLINK_HREF: subject.value_at,
    }


def _term_attrs(term: DescriptiveValue) -> dict[str, str | None]:
    attrs = authority_attrs(term.source, term.uri) if term.source else {"valueURI": term.uri}
    attrs["encoding"] = term.encoding.code if term.encoding else None
    return attrs


def _write_basic(
    parent: XmlElement, subject: DescriptiveValue, forms: Sequence[DescriptiveValue]
) -> None:
    attrs: dict[str, str | None] = {
        "authority": None,
        "displayLabel": subject.display_label,
        XLINK_HREF: subject.value_at,
        **_language(subject),
    }
    if subject.source and subject.type != "place":
        attrs["authority"] = subject_authority(subject.source.code)
    term_attrs = (
        _term_attrs(subject)
        if subject.uri
        else {"encoding": subject.encoding.code if subject.encoding else None}
    )
    if subject.type == "place" and subject.source:
        term_attrs = {**term_attrs, "authority": subject.source.code}
    subject_element = add_element(parent, "subject", attrs=attrs)
    write_term(subject_element, subject, term_attrs, forms=forms)


def _write_structured(
    parent: XmlElement,
    subject: DescriptiveValue,
    parts: tuple[DescriptiveValue, ...],
    forms: Sequence[DescriptiveValue],
) -> None:
    attrs = _subject_attrs(subject)
    attrs["valueURI"] = subject.uri
    if subject.source is None:
        attrs["authority"] = subject_authority(_shared_term_authority(parts))
    subject_element = add_element(parent, "subject", attrs={**attrs, **_language(subject)})

    if subject.type == "place" and _is_hierarchical(parts):
        _write_hierarchical_geographic(subject_element, parts)
    elif subject.type == "time" and _is_range(parts):
        for part in parts:
            encoding = part.encoding or subject.encoding
            add_element(
                subject_element,
                "temporal",
                part.value or "",
                {"point": part.type, "encoding": encoding.code if encoding else None},
            )
    elif subject.type in NAME_TYPES or subject.type == "title":
        # The structured value is one name (or title) broken into its parts.
        write_term(subject_element, subject, {}, forms=forms)
    else:
        children = [
            (_child_rank(part, subject.type), position, part)
            for position, part in enumerate(parts)
        ]
        for _rank, _position, part in sorted(children, key=lambda item: item[:2]):
            term_attrs = _term_attrs(part) if part.source or part.uri else {}
            write_term(subject_element, part, term_attrs, forms=forms, default_type=subject.type)


def _write_parallel(
    parent: XmlElement,
    subject: DescriptiveValue,
    variants: tuple[DescriptiveValue, ...],
    context: WriterContext,
    forms: Sequence[DescriptiveValue],
) -> None:
    if _is_place(subject, variants):
        subject_element = add_element(
            parent, "subject", attrs={"displayLabel": subject.display_label}
        )
        for variant in variants:
            _write_geographic(subject_element, variant)
        return
    group = context.groups.next_alt_rep_group()
    for variant in variants:
        source = variant.source or subject.source
        attrs = {
            "lang": variant.lang,
            "script": variant.script,
            ALT_REP_GROUP: group,
            "authority": subject_authority(source.code) if source else None,
            "displayLabel": variant.display_label or subject.display_label,
        }
        subject_element = add_element(parent, "subject", attrs=attrs)
        variant_shape = variant.shape
        if isinstance(variant_shape, Structured):
            for part in variant_shape.parts:
                write_term(
                    subject_element,
                    part,
                    _term_attrs(part) if part.source or part.uri else {},
                    forms=forms,
                    default_type=variant.type or subject.type,
                )
        else:
            term_attrs = _term_attrs(variant) if variant.uri else {}
            write_term(
                subject_element,
                variant,
                term_attrs,
                forms=forms,
                default_type=subject.type,
            )


def write_term(
    subject_element: XmlElement,
    term: DescriptiveValue,
    attrs: dict[str, str | None],
    *,
    forms: Sequence[DescriptiveValue] = (),
    default_type: str | None = None,
) -> None:
    """Write one subject child element for ``term``."""
    term_type = term.type or default_type or "topic"
    if term_type in NAME_TYPES:
        name_element = add_element(
            subject_element, "name", attrs={"type": NAME_TYPES[term_type], **attrs}
        )
        write_name_parts(name_element, term)
    elif term_type == "title":
        write_title_info(subject_element, term, attrs)
    elif term_type == MAP_COORDINATES:
        write_cartographics(subject_element, term, forms)
    elif term_type == "place":
        _write_geographic(subject_element, term, attrs)
    else:
        add_element(
            subject_element,
            TERM_TAGS.get(term_type, "topic"),
            term.flat_text(" -- ") or term.code or "",
            attrs,
        )


def write_cartographics(
    subject_element: XmlElement,
    coordinates: DescriptiveValue,
    forms: Sequence[DescriptiveValue],
) -> None:
    cartographics = add_element(subject_element, "cartographics")
    for form_type, tag_name in CARTOGRAPHIC_TAGS.items():
        for form in forms:
            if form.type == form_type and is_coordinates_form(form) and form.value:
                add_element(cartographics, tag_name, form.value)
    add_element(cartographics, "coordinates", coordinates.value or "")


def is_coordinates_form(form: DescriptiveValue) -> bool:
    """Unsourced scale and projection forms share the coordinates' ``cartographics``."""
    return (
        form.type in CARTOGRAPHIC_FORM_TYPES
        and form.source is None
        and form.uri is None
        and form.display_label is None
    )


def has_map_coordinates(subjects: Sequence[DescriptiveValue]) -> bool:
    return any(_has_type(subject, MAP_COORDINATES) for subject in subjects)


def _has_type(value: DescriptiveValue, value_type: str) -> bool:
    if value.type == value_type:
        return True
    children = (*value.structured_value, *value.parallel_value)
    return any(_has_type(child, value_type) for child in children)


def _write_geographic(
    subject_element: XmlElement,
    place: DescriptiveValue,
    attrs: dict[str, str | None] | None = None,
) -> None:
    if place.code is not None:
        add_element(
            subject_element,
            "geographicCode",
            place.code,
            {"authority": place.source.code if place.source else None},
        )
        return
    place_attrs = dict(attrs or {})
    if place.source and "authority" not in place_attrs:
        place_attrs["authority"] = place.source.code
    if place.uri and "valueURI" not in place_attrs:
        place_attrs.update(authority_attrs(place.source, place.uri))
    add_element(subject_element, "geographic", place.value or "", place_attrs)


def _write_hierarchical_geographic(
    subject_element: XmlElement, parts: tuple[DescriptiveValue, ...]
) -> None:
    hierarchy = add_element(subject_element, "hierarchicalGeographic")
    for level in HIERARCHY_LEVELS:
        for part in parts:
            if _HIERARCHY_TYPES[part.type or ""] == level:
                add_element(hierarchy, level, part.value or "")


def _is_hierarchical(parts: tuple[DescriptiveValue, ...]) -> bool:
    return all(part.type in _HIERARCHY_TYPES for part in parts)


def _is_range(parts: tuple[DescriptiveValue, ...]) -> bool:
    return all(part.type in ("start", "end") for part in parts)


def _is_place(subject: DescriptiveValue, variants: tuple[DescriptiveValue, ...]) -> bool:
    if subject.type == "place":
        return True
    return all(variant.type == "place" for variant in variants) and any(
        variant.code is not None for variant in variants
    )


def _shared_term_authority(parts: tuple[DescriptiveValue, ...]) -> str | None:
    codes = {part.source.code if part.source else None for part in parts}
    if len(codes) == 1:
        return codes.pop()
    return None


def _child_rank(part: DescriptiveValue, default_type: str | None) -> int:
    term_type = part.type or default_type or "topic"
    if term_type in NAME_TYPES:
        tag_name = "name"
    elif term_type == "title":
        tag_name = "titleInfo"
    else:
        tag_name = TERM_TAGS.get(term_type, "")
    if tag_name in CHILD_ORDER:
        return CHILD_ORDER.index(tag_name)
    return len(CHILD_ORDER)


def _language(subject: DescriptiveValue) -> dict[str, str | None]:
    return {"lang": subject.lang, "script": subject.script}
