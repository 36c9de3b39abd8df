"""Tests for the geo extension."""

from cocina_transpiler.domain.entities.descriptive_value import DescriptiveValue
from cocina_transpiler.infrastructure.io.mods.constants import (
    DC_NS,
    GMD_NS,
    GML_NS,
    MODS_NS,
    RDF_NS,
)
from cocina_transpiler.infrastructure.io.mods.geographic_writer import geo_format, geo_type

NS = {"mods": MODS_NS, "rdf": RDF_NS, "dc": DC_NS, "gml": GML_NS, "gmd": GMD_NS}
BOUNDING_BOX = {
    "structuredValue": [
        {"value": "-122.19", "type": "west"},
        {"value": "37.40", "type": "south"},
        {"value": "-122.15", "type": "east"},
        {"value": "37.44", "type": "north"},
    ],
    "type": "bounding box coordinates",
}


def _geo(mods, *subjects, form=()):
    return mods(
        {
            "title": [{"value": "Map"}],
            "geographic": [{"form": list(form), "subject": list(subjects)}],
        }
    )


def _description(root):
    return root.find("mods:extension/rdf:RDF/rdf:Description", NS)


class TestBoundingBox:
    """Envelope output for bounding boxes."""

    def test_envelope_without_standard_has_no_srs_name(self, mods):
        root = _geo(mods, BOUNDING_BOX)

        envelope = _description(root).find("gml:boundedBy/gml:Envelope", NS)
        assert envelope.attrib == {}
        assert envelope.findtext("gml:lowerCorner", namespaces=NS) == "-122.19 37.40"
        assert envelope.findtext("gml:upperCorner", namespaces=NS) == "-122.15 37.44"

    def test_standard_code_becomes_srs_name(self, mods):
        root = _geo(mods, {**BOUNDING_BOX, "standard": {"code": "EPSG:4326"}})

        envelope = _description(root).find("gml:boundedBy/gml:Envelope", NS)
        assert envelope.get(f"{{{GML_NS}}}srsName") == "EPSG:4326"


class TestGeoExtension:
    """Extension wrapper, format, type and other subjects."""

    def test_wrapper_and_defaults(self, mods):
        root = _geo(mods)

        extension = root.find("mods:extension", NS)
        assert extension.get("displayLabel") == "geo"
        description = _description(root)
        assert (
            description.get(f"{{{RDF_NS}}}about")
            == "http://purl.stanford.edu/bc123df4567"
        )
        assert description.findtext("dc:format", namespaces=NS) == "image/jpeg"
        assert description.findtext("dc:type", namespaces=NS) == "Image"

    def test_format_and_type_from_forms(self, mods):
        root = _geo(
            mods,
            form=[
                {"value": "application/x-esri-shapefile", "type": "media type"},
                {"value": "Shapefile", "type": "data format"},
                {"value": "Dataset#Polygon", "type": "type"},
            ],
        )

        description = _description(root)
        assert (
            description.findtext("dc:format", namespaces=NS)
            == "application/x-esri-shapefile; format=Shapefile"
        )
        assert description.findtext("dc:type", namespaces=NS) == "Dataset#Polygon"

    def test_point(self, mods):
        root = _geo(
            mods,
            {
                "structuredValue": [
                    {"value": "37.43", "type": "latitude"},
                    {"value": "-122.17", "type": "longitude"},
                ],
                "type": "point coordinates",
            },
        )

        pos = _description(root).find("gmd:centerPoint/gml:Point/gml:pos", NS)
        assert pos.text == "37.43 -122.17"

    def test_coverage(self, mods):
        root = _geo(
            mods,
            {
                "value": "Stanford",
                "type": "coverage",
                "uri": "http://sws.geonames.org/5398563/",
                "valueLanguage": {"code": "eng"},
            },
        )

        coverage = _description(root).find("dc:coverage", NS)
        assert coverage.attrib == {
            f"{{{RDF_NS}}}resource": "http://sws.geonames.org/5398563/",
            f"{{{DC_NS}}}language": "eng",
            f"{{{DC_NS}}}title": "Stanford",
        }

    def test_geo_type_from_dcmi_media_type(self):
        forms = [
            DescriptiveValue.from_dict(
                {
                    "value": "Dataset",
                    "type": "media type",
                    "source": {"value": "DCMI Type Vocabulary"},
                }
            )
        ]

        assert geo_type(forms) == "Dataset"
        assert geo_format(forms) == "Dataset"

    def test_no_geographic_no_extension(self, mods):
        root = mods({"title": [{"value": "Text"}]})

        assert root.find("mods:extension", NS) is None
