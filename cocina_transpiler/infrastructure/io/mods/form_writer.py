"""``genre``, ``typeOfResource`` and ``physicalDescription`` writer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cocina_transpiler.domain.entities.descriptive_value import DescriptiveValue

from .constants import MODS_RESOURCE_TYPES, SELF_DEPOSIT_RESOURCE_TYPES
from .elements import USAGE_PRIMARY, add_element, authority_attrs
from .subject_writer import (
    CARTOGRAPHIC_FORM_TYPES,
    CARTOGRAPHIC_TAGS,
    has_map_coordinates,
    is_coordinates_form,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..xml_utils import XmlElement

RESOURCE_TYPE = "resource type"
H2_TYPE_PREFIX = "H2 "
# typeOfResource values that MODS expresses as flags on the element instead.
RESOURCE_TYPE_FLAGS = frozenset({"collection", "manuscript"})
# physicalDescription children, in output order.
PHYSICAL_TAGS: dict[str, str] = {
    "form": "form",
    "material": "form",
    "technique": "form",
    "carrier": "form",
    "media": "form",
    "reformatting quality": "reformattingQuality",
    "media type": "internetMediaType",
    "extent": "extent",
    "digital origin": "digitalOrigin",
}
PHYSICAL_ORDER: tuple[str, ...] = (
    "form",
    "reformattingQuality",
    "internetMediaType",
    "extent",
    "digitalOrigin",
    "note",
)


def write_forms(
    parent: XmlElement,
    forms: Sequence[DescriptiveValue],
    *,
    subjects: Sequence[DescriptiveValue] = (),
) -> None:
    """Write the forms not already consumed by a map coordinates subject."""
    physical: list[DescriptiveValue] = []
    resource_types: list[DescriptiveValue] = []
    with_coordinates = has_map_coordinates(subjects)
    for form in forms:
        if form.type in CARTOGRAPHIC_FORM_TYPES:
            if not (with_coordinates and is_coordinates_form(form)):
                _write_cartographic_subject(parent, form)
            continue
        if is_self_deposit_resource_type(form):
            _write_h2_genres(parent, form)
        elif is_mods_resource_type(form):
            resource_types.append(form)
        elif form.type in PHYSICAL_TAGS or (form.type is None and form.note):
            physical.append(form)
        else:
            _write_genre(parent, form)
    _write_types_of_resource(parent, resource_types)
    if physical:
        write_physical_description(parent, physical)


def is_self_deposit_resource_type(form: DescriptiveValue) -> bool:
    return bool(
        form.type == RESOURCE_TYPE
        and form.source
        and form.source.value == SELF_DEPOSIT_RESOURCE_TYPES
    )


def is_mods_resource_type(form: DescriptiveValue) -> bool:
    return bool(
        form.type == RESOURCE_TYPE and form.source and form.source.value == MODS_RESOURCE_TYPES
    )


def _write_h2_genres(parent: XmlElement, form: DescriptiveValue) -> None:
    for part in form.structured_value:
        add_element(parent, "genre", part.value or "", {"type": f"{H2_TYPE_PREFIX}{part.type}"})


def _write_genre(parent: XmlElement, form: DescriptiveValue) -> None:
    genre_type = form.type if form.type not in (None, "genre", RESOURCE_TYPE) else None
    add_element(
        parent,
        "genre",
        form.value or "",
        {
            "type": genre_type,
            **authority_attrs(form.source, form.uri),
            "displayLabel": form.display_label,
            "usage": USAGE_PRIMARY if form.is_primary else None,
            "lang": form.lang,
            "script": form.script,
        },
    )


def _write_cartographic_subject(parent: XmlElement, form: DescriptiveValue) -> None:
    subject = add_element(
        parent,
        "subject",
        attrs={
            **authority_attrs(form.source, form.uri),
            "displayLabel": form.display_label,
        },
    )
    cartographics = add_element(subject, "cartographics")
    add_element(cartographics, CARTOGRAPHIC_TAGS[form.type or ""], form.value or "")


def _write_types_of_resource(
    parent: XmlElement, resource_types: list[DescriptiveValue]
) -> None:
    flags = {
        form.value: "yes"
        for form in resource_types
        if form.value in RESOURCE_TYPE_FLAGS
    }
    values = [form for form in resource_types if form.value not in RESOURCE_TYPE_FLAGS]
    if not values and flags:
        add_element(parent, "typeOfResource", attrs=flags)
        return
    for index, form in enumerate(values):
        attrs = {
            **(flags if index == 0 else {}),
            "usage": USAGE_PRIMARY if form.is_primary else None,
            "displayLabel": form.display_label,
        }
        add_element(parent, "typeOfResource", form.value or "", attrs)


def write_physical_description(
    parent: XmlElement, forms: Sequence[DescriptiveValue]
) -> None:
    children: list[tuple[str, DescriptiveValue]] = []
    for form in forms:
        if form.type in PHYSICAL_TAGS:
            children.append((PHYSICAL_TAGS[form.type], form))
        children.extend(("note", note) for note in form.note)
    children.sort(key=lambda child: PHYSICAL_ORDER.index(child[0]))

    physical_description = add_element(parent, "physicalDescription")
    for tag_name, value in children:
        if tag_name == "form":
            attrs = {
                "type": value.type if value.type != "form" else None,
                **authority_attrs(value.source, value.uri),
            }
        elif tag_name == "note":
            attrs = {"displayLabel": value.display_label, "type": value.type}
        else:
            attrs = {}
        add_element(physical_description, tag_name, value.value or "", attrs)
