"""Element construction helpers shared by the MODS writers."""

from collections.abc import Mapping
from xml.etree import ElementTree as ET

from cocina_transpiler.domain.entities.descriptive_value import (
    DescriptiveValue,
    Source,
    ValueLanguage,
)

from ..xml_utils import XmlElement, attr, compact_attrs, tag
from .constants import MODS_NS, NAMESPACE_PREFIXES, XLINK_NS

for _prefix, _uri in NAMESPACE_PREFIXES.items():
    ET.register_namespace(_prefix, _uri)

XLINK_HREF = attr(XLINK_NS, "href")
USAGE_PRIMARY = "primary"


def mods_tag(name: str) -> str:
    return tag(MODS_NS, name)


def add_element(
    parent: XmlElement,
    name: str,
    text: str | None = None,
    attrs: Mapping[str, str | None] | None = None,
) -> XmlElement:
    element = ET.SubElement(parent, mods_tag(name), attrib=compact_attrs(attrs or {}))
    if text is not None:
        element.text = text
    return element


def authority_attrs(
    source: Source | None, value_uri: str | None = None
) -> dict[str, str | None]:
    return {
        "authority": source.code if source else None,
        "authorityURI": source.uri if source else None,
        "valueURI": value_uri,
    }


def value_authority_attrs(value: DescriptiveValue) -> dict[str, str | None]:
    return authority_attrs(value.source, value.uri)


def language_attrs(value_language: ValueLanguage | None) -> dict[str, str | None]:
    if value_language is None:
        return {}
    return {"lang": value_language.code, "script": value_language.script_code}


def primary_variant_index(variants: tuple[DescriptiveValue, ...]) -> int:
    """Index of the variant rendered with ``usage="primary"``.

    The first variant with ``status: primary`` wins; otherwise the first one.
    """
    for index, variant in enumerate(variants):
        if variant.is_primary:
            return index
    return 0
