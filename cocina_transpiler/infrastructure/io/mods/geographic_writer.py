"""Geospatial ``extension`` writer.

Geographic metadata is carried in MODS as an RDF description embedded in
``<extension displayLabel="geo">``: Dublin Core format/type/coverage plus GML
geometry for bounding boxes and center points.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING
from xml.etree import ElementTree as ET

from cocina_transpiler.domain.entities.descriptive_value import DescriptiveValue

from ..xml_utils import attr, compact_attrs, tag
from .constants import (
    DC_NS,
    DEFAULT_GEO_FORMAT,
    DEFAULT_GEO_TYPE,
    GMD_NS,
    GML_NS,
    RDF_NS,
)
from .elements import add_element

if TYPE_CHECKING:
    from cocina_transpiler.domain.entities.description import Geographic

    from ..xml_utils import XmlElement

GEO_DISPLAY_LABEL = "geo"
BOUNDING_BOX = "bounding box coordinates"
POINT = "point coordinates"
COVERAGE = "coverage"
DCMI_TYPE_SOURCE = "DCMI Type Vocabulary"


def _add(
    parent: XmlElement,
    namespace: str,
    name: str,
    text: str | None = None,
    attrs: Mapping[str, str | None] | None = None,
) -> XmlElement:
    element = ET.SubElement(parent, tag(namespace, name), attrib=compact_attrs(attrs or {}))
    if text is not None:
        element.text = text
    return element


def write_geographic(
    parent: XmlElement, geographics: Sequence[Geographic], about: str | None
) -> None:
    """Write one geo extension per ``Geographic`` entry.

    Args:
        parent: The ``mods`` element.
        geographics: Geographic entries of the description.
        about: Resource URI placed on ``rdf:Description/@rdf:about``, omitted when
            ``None``.
    """
    for geographic in geographics:
        extension = add_element(
            parent, "extension", attrs={"displayLabel": GEO_DISPLAY_LABEL}
        )
        rdf = _add(extension, RDF_NS, "RDF")
        description = _add(rdf, RDF_NS, "Description", attrs={attr(RDF_NS, "about"): about})
        _add(description, DC_NS, "format", geo_format(geographic.form))
        _add(description, DC_NS, "type", geo_type(geographic.form))
        for subject in geographic.subject:
            if subject.type == BOUNDING_BOX:
                _write_bounding_box(description, subject)
            elif subject.type == POINT:
                _write_point(description, subject)
            elif subject.type == COVERAGE:
                _write_coverage(description, subject)


def geo_format(forms: Sequence[DescriptiveValue]) -> str:
    media_type = _form_value(forms, "media type") or DEFAULT_GEO_FORMAT
    data_format = _form_value(forms, "data format")
    if data_format:
        return f"{media_type}; format={data_format}"
    return media_type


def geo_type(forms: Sequence[DescriptiveValue]) -> str:
    type_value = _form_value(forms, "type")
    if type_value:
        return type_value
    for form in forms:
        if form.type == "media type" and form.source and form.source.value == DCMI_TYPE_SOURCE:
            return form.value or DEFAULT_GEO_TYPE
    return DEFAULT_GEO_TYPE


def _form_value(forms: Sequence[DescriptiveValue], form_type: str) -> str | None:
    for form in forms:
        if form.type == form_type and form.value:
            return form.value
    return None


def _coordinates(subject: DescriptiveValue) -> dict[str, str]:
    return {
        part.type: part.value
        for part in subject.structured_value
        if part.type and part.value is not None
    }


def _write_bounding_box(description: XmlElement, subject: DescriptiveValue) -> None:
    coords = _coordinates(subject)
    bounded_by = _add(description, GML_NS, "boundedBy")
    envelope = _add(
        bounded_by,
        GML_NS,
        "Envelope",
        attrs={attr(GML_NS, "srsName"): subject.standard.code if subject.standard else None},
    )
    _add(envelope, GML_NS, "lowerCorner", f"{coords.get('west', '')} {coords.get('south', '')}")
    _add(envelope, GML_NS, "upperCorner", f"{coords.get('east', '')} {coords.get('north', '')}")


def _write_point(description: XmlElement, subject: DescriptiveValue) -> None:
    coords = _coordinates(subject)
    center = _add(description, GMD_NS, "centerPoint")
    point = _add(center, GML_NS, "Point", attrs={attr(GML_NS, "id"): "ID"})
    _add(point, GML_NS, "pos", f"{coords.get('latitude', '')} {coords.get('longitude', '')}")


def _write_coverage(description: XmlElement, subject: DescriptiveValue) -> None:
    _add(
        description,
        DC_NS,
        "coverage",
        attrs={
            attr(RDF_NS, "resource"): subject.uri,
            attr(DC_NS, "language"): subject.lang,
            attr(DC_NS, "title"): subject.value,
        },
    )
