"""``recordInfo`` writer for descriptive admin metadata."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .elements import add_element, authority_attrs
from .identifier_writer import mods_identifier_type
from .language_writer import write_languages

if TYPE_CHECKING:
    from cocina_transpiler.domain.entities.description import AdminMetadata

    from ..xml_utils import XmlElement

RECORD_DATE_TAGS: tuple[tuple[str, str], ...] = (
    ("creation", "recordCreationDate"),
    ("modification", "recordChangeDate"),
)


def write_admin_metadata(parent: XmlElement, admin_metadata: AdminMetadata | None) -> None:
    if admin_metadata is None:
        return
    record_info = add_element(parent, "recordInfo")
    write_languages(record_info, admin_metadata.language, tag_name="languageOfCataloging")

    for contributor in admin_metadata.contributor:
        if not contributor.name:
            continue
        source = contributor.name[0]
        add_element(
            record_info,
            "recordContentSource",
            source.code if source.code is not None else source.value,
            authority_attrs(source.source, source.uri),
        )

    for standard in admin_metadata.metadata_standard:
        if standard.uri:
            add_element(
                record_info,
                "descriptionStandard",
                attrs={
                    "authority": standard.code,
                    "authorityURI": standard.source.uri if standard.source else None,
                    "valueURI": standard.uri,
                },
            )
        else:
            add_element(
                record_info,
                "descriptionStandard",
                standard.code if standard.code is not None else standard.value,
            )

    for note in admin_metadata.note:
        if note.type == "record origin":
            add_element(record_info, "recordOrigin", note.value)

    for event_type, tag_name in RECORD_DATE_TAGS:
        for event in admin_metadata.event:
            if event.type != event_type:
                continue
            for date in event.date:
                add_element(
                    record_info,
                    tag_name,
                    date.value,
                    {"encoding": date.encoding.code if date.encoding else None},
                )

    for identifier in admin_metadata.identifier:
        add_element(
            record_info,
            "recordIdentifier",
            identifier.value if identifier.value is not None else identifier.uri,
            {
                "displayLabel": identifier.display_label,
                "source": "uri" if identifier.uri else mods_identifier_type(identifier.type),
                "invalid": "yes" if identifier.is_invalid else None,
            },
        )
