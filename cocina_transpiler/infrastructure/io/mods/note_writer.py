from __future__ import annotations

from typing import TYPE_CHECKING

from cocina_transpiler.domain.entities.descriptive_value import (
    DescriptiveValue,
    Parallel,
)

from .constants import ALT_REP_GROUP
from .elements import XLINK_HREF, add_element, authority_attrs

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..xml_utils import XmlElement
    from .context import WriterContext

NOTE_TAGS: dict[str, str] = {
    "summary": "abstract",
    "abstract": "abstract",
    "table of contents": "tableOfContents",
    "target audience": "targetAudience",
}
TABLE_OF_CONTENTS_SEPARATOR = " -- "


def write_notes(
    parent: XmlElement, notes: Sequence[DescriptiveValue], context: WriterContext
) -> None:
    for note in notes:
        shape = note.shape
        if isinstance(shape, Parallel):
            group = context.groups.next_alt_rep_group()
            for variant in shape.variants:
                write_note(
                    parent,
                    variant,
                    note_type=note.type,
                    extra_attrs={
                        ALT_REP_GROUP: group,
                        "lang": variant.lang,
                        "script": variant.script,
                    },
                )
        else:
            write_note(parent, note)


def write_note(
    parent: XmlElement,
    note: DescriptiveValue,
    *,
    note_type: str | None = None,
    extra_attrs: dict[str, str | None] | None = None,
) -> None:
    cocina_type = note.type or note_type
    tag_name = NOTE_TAGS.get(cocina_type or "", "note")
    attrs: dict[str, str | None] = {
        "displayLabel": note.display_label,
        "lang": note.lang,
        "script": note.script,
        XLINK_HREF: note.value_at,
    }
    if tag_name == "note":
        attrs["type"] = cocina_type
    if tag_name == "targetAudience":
        attrs.update(authority_attrs(note.source, note.uri))
    attrs.update(extra_attrs or {})
    add_element(parent, tag_name, note_text(note, tag_name), attrs)


def note_text(note: DescriptiveValue, tag_name: str) -> str:
    if tag_name == "tableOfContents":
        return note.flat_text(TABLE_OF_CONTENTS_SEPARATOR) or ""
    return note.flat_text() or ""
