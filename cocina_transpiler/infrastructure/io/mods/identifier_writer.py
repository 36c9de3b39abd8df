from __future__ import annotations

from typing import TYPE_CHECKING

from .elements import add_element

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cocina_transpiler.domain.entities.descriptive_value import DescriptiveValue

    from ..xml_utils import XmlElement

# Cocina identifier types whose MODS spelling differs; anything else passes through.
IDENTIFIER_TYPES: dict[str, str] = {
    "ARK": "ark",
    "DOI": "doi",
    "EAN": "ean",
    "Handle": "hdl",
    "ISBN": "isbn",
    "ISMN": "ismn",
    "ISRC": "isrc",
    "ISSN": "issn",
    "ISSN-L": "issn-l",
    "ISTC": "istc",
    "LCCN": "lccn",
    "local": "local",
    "matrix number": "matrix number",
    "music plate": "music plate",
    "music publisher": "music publisher",
    "SICI": "sici",
    "stock number": "stock number",
    "UPC": "upc",
    "URI": "uri",
    "URN": "urn",
    "videorecording identifier": "videorecording identifier",
}


def mods_identifier_type(cocina_type: str | None) -> str | None:
    if cocina_type is None:
        return None
    return IDENTIFIER_TYPES.get(cocina_type, cocina_type)


def identifier_attrs(identifier: DescriptiveValue) -> dict[str, str | None]:
    identifier_type = mods_identifier_type(identifier.type)
    if identifier_type is None and identifier.value is None and identifier.uri:
        identifier_type = "uri"
    return {
        "type": identifier_type,
        "displayLabel": identifier.display_label,
        "invalid": "yes" if identifier.is_invalid else None,
    }


def write_identifiers(
    parent: XmlElement,
    identifiers: Sequence[DescriptiveValue],
    *,
    tag_name: str = "identifier",
) -> None:
    for identifier in identifiers:
        add_element(
            parent,
            tag_name,
            identifier.value if identifier.value is not None else identifier.uri,
            identifier_attrs(identifier),
        )
