"""``relatedItem`` writer.

A related resource is a nested description: its content is written with the
same writers as the top-level record, sharing the caller's group allocator so
altRepGroup ids stay unique across the whole document.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import replace
from typing import TYPE_CHECKING

from cocina_transpiler.domain.entities.description import RelatedResource
from cocina_transpiler.domain.entities.descriptive_value import DescriptiveValue

from .elements import XLINK_HREF, add_element

if TYPE_CHECKING:
    from ..xml_utils import XmlElement
    from .group_allocator import GroupAllocator

ContentWriter = Callable[["XmlElement", RelatedResource, "GroupAllocator"], None]

RELATED_ITEM_TYPES: dict[str, str | None] = {
    "has original version": "original",
    "has other format": "otherFormat",
    "has part": "constituent",
    "has version": "otherVersion",
    "in series": "series",
    "part of": "host",
    "preceded by": "preceding",
    "related to": None,
    "reviewed by": "reviewOf",
    "referenced by": "isReferencedBy",
    "references": "references",
    "succeeded by": "succeeding",
}
PART_NOTE = "part"
OTHER_RELATION_NOTE = "other relation type"
DETAIL_VALUE_TYPES = ("number", "caption", "title")
PART_VALUE_TYPES = ("text", "date")


def write_related_resources(
    parent: XmlElement,
    related_resources: Sequence[RelatedResource],
    groups: GroupAllocator,
    write_content: ContentWriter,
) -> None:
    """Write one ``relatedItem`` per related resource.

    Resources that only point elsewhere (``value_at``) are written last as
    bare ``xlink:href`` references.
    """
    for related in related_resources:
        if related.value_at:
            continue
        related_item = add_element(parent, "relatedItem", attrs=related_item_attrs(related))
        content_notes = tuple(
            note
            for note in related.note
            if note.type not in (PART_NOTE, OTHER_RELATION_NOTE)
        )
        write_content(related_item, replace(related, note=content_notes), groups)
        write_part(
            related_item, tuple(note for note in related.note if note.type == PART_NOTE)
        )

    for related in related_resources:
        if related.value_at:
            add_element(parent, "relatedItem", attrs={XLINK_HREF: related.value_at})


def related_item_attrs(related: RelatedResource) -> dict[str, str | None]:
    attrs: dict[str, str | None] = {
        "type": RELATED_ITEM_TYPES.get(related.type, related.type) if related.type else None,
        "displayLabel": related.display_label,
    }
    other_type = next(
        (note for note in related.note if note.type == OTHER_RELATION_NOTE), None
    )
    if other_type is not None:
        attrs["otherType"] = other_type.value
        attrs["otherTypeURI"] = other_type.uri
        attrs["otherTypeAuth"] = other_type.source.value if other_type.source else None
    return attrs


def write_part(related_item: XmlElement, part_notes: Sequence[DescriptiveValue]) -> None:
    if not part_notes:
        return
    part = add_element(related_item, "part")
    for note in part_notes:
        grouped = note.grouped_value or note.structured_value
        values = {value.type: value.value for value in grouped if value.type}
        details = [value for value in grouped if value.type in DETAIL_VALUE_TYPES]
        if details:
            detail = add_element(part, "detail", attrs={"type": values.get("detail type")})
            for value in details:
                add_element(detail, value.type or "", value.value)
        for value in grouped:
            if value.type in PART_VALUE_TYPES:
                add_element(part, value.type or "", value.value)
        if values.get("list"):
            extent = add_element(part, "extent", attrs={"unit": values.get("extent unit")})
            add_element(extent, "list", values["list"])
