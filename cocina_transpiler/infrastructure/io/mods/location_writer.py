"""``accessCondition`` and ``location`` writer.

The object's PURL, when known, is always the last ``url`` of the location and
is marked ``usage="primary display"``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .elements import add_element, authority_attrs

if TYPE_CHECKING:
    from cocina_transpiler.domain.entities.description import DescriptiveAccess
    from cocina_transpiler.domain.entities.descriptive_value import DescriptiveValue

    from ..xml_utils import XmlElement

PRIMARY_DISPLAY = "primary display"
SHELF_LOCATOR = "shelf locator"
ACCESS_CONDITION_TYPES: dict[str, str] = {
    "access restriction": "restriction on access",
}


def write_location(
    parent: XmlElement, access: DescriptiveAccess | None, purl: str | None
) -> None:
    if access is None and purl is None:
        return
    if access is not None:
        for note in access.note:
            add_element(
                parent,
                "accessCondition",
                note.value,
                {
                    "type": ACCESS_CONDITION_TYPES.get(note.type or "", note.type),
                    "displayLabel": note.display_label,
                },
            )
    if purl is None and not (access is not None and access.has_location):
        return

    location = add_element(parent, "location")
    if access is not None:
        for physical in access.physical_location:
            if physical.type != SHELF_LOCATOR:
                add_element(
                    location,
                    "physicalLocation",
                    physical.value if physical.value is not None else physical.code,
                    _descriptive_attrs(physical),
                )
        for contact in access.access_contact:
            add_element(
                location,
                "physicalLocation",
                contact.value,
                {"type": "repository", **_descriptive_attrs(contact)},
            )
        for physical in access.physical_location:
            if physical.type == SHELF_LOCATOR:
                add_element(location, "shelfLocator", physical.value)
        for url in access.url:
            add_element(
                location,
                "url",
                url.value,
                {
                    "usage": PRIMARY_DISPLAY if url.is_primary else None,
                    "displayLabel": url.display_label,
                    "note": url.note[0].value if url.note else None,
                },
            )
    if purl is not None:
        add_element(location, "url", purl, {"usage": PRIMARY_DISPLAY})


def _descriptive_attrs(value: DescriptiveValue) -> dict[str, str | None]:
    return {
        **authority_attrs(value.source, value.uri),
        "script": value.script,
        "lang": value.lang,
        "displayLabel": value.display_label,
    }
