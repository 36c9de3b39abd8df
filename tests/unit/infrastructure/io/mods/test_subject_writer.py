"""Tests for subject and classification output."""

import pytest

from cocina_transpiler.infrastructure.io.mods.constants import MODS_NS
from cocina_transpiler.infrastructure.io.mods.subject_writer import (
    classification_edition,
    subject_authority,
)
from cocina_transpiler.infrastructure.io.xml_utils import local_name

NS = {"mods": MODS_NS}
LCSH = {"code": "lcsh", "uri": "http://id.loc.gov/authorities/subjects/"}


def _tags(element):
    return [local_name(child.tag) for child in element]


def _subjects(mods, *subjects, form=()):
    root = mods({"title": [{"value": "Title"}], "subject": list(subjects), "form": list(form)})
    return root.findall("mods:subject", NS)


class TestBasicSubjects:
    """Single-term subjects."""

    def test_topic_with_authority(self, mods):
        (subject,) = _subjects(mods, {"value": "Cats", "type": "topic", "source": {"code": "lcsh"}})

        assert subject.attrib == {"authority": "lcsh"}
        assert _tags(subject) == ["topic"]
        assert subject.find("mods:topic", NS).attrib == {}

    def test_topic_with_uri_carries_term_authority(self, mods):
        (subject,) = _subjects(
            mods,
            {
                "value": "Cats",
                "type": "topic",
                "source": LCSH,
                "uri": "http://id.loc.gov/authorities/subjects/sh85021262",
            },
        )

        topic = subject.find("mods:topic", NS)
        assert topic.get("authority") == "lcsh"
        assert topic.get("authorityURI") == LCSH["uri"]
        assert topic.get("valueURI") == "http://id.loc.gov/authorities/subjects/sh85021262"

    def test_untyped_subject_is_topic(self, mods):
        (subject,) = _subjects(mods, {"value": "Dogs"})

        assert subject.findtext("mods:topic", namespaces=NS) == "Dogs"

    def test_naf_name_subject_renders_as_lcsh(self, mods):
        (subject,) = _subjects(
            mods, {"value": "Stanford, Jane", "type": "person", "source": {"code": "naf"}}
        )

        assert subject.get("authority") == "lcsh"
        name = subject.find("mods:name", NS)
        assert name.get("type") == "personal"
        assert name.findtext("mods:namePart", namespaces=NS) == "Stanford, Jane"
        assert name.find("mods:role", NS) is None

    def test_geographic_code(self, mods):
        (subject,) = _subjects(
            mods, {"code": "n-us-ca", "type": "place", "source": {"code": "marcgac"}}
        )

        assert subject.attrib == {}
        assert _tags(subject) == ["geographicCode"]
        code = subject.find("mods:geographicCode", NS)
        assert code.text == "n-us-ca"
        assert code.get("authority") == "marcgac"

    def test_cartographics_pull_scale_and_projection_from_forms(self, mods):
        root = mods(
            {
                "title": [{"value": "Map"}],
                "subject": [{"value": "W 122°--W 121°/N 38°--N 37°", "type": "map coordinates"}],
                "form": [
                    {"value": "Scale 1:100,000", "type": "map scale"},
                    {"value": "Conic proj.", "type": "map projection"},
                ],
            }
        )

        cartographics = root.find("mods:subject/mods:cartographics", NS)
        assert _tags(cartographics) == ["scale", "projection", "coordinates"]
        assert cartographics.findtext("mods:scale", namespaces=NS) == "Scale 1:100,000"
        # Scale and projection are not repeated as genres.
        assert root.find("mods:genre", NS) is None

    def test_sourced_projection_gets_its_own_cartographic_subject(self, mods):
        subjects = _subjects(
            mods,
            {"value": "E 72°--E 148°/N 13°--N 18°", "type": "map coordinates"},
            form=[
                {"value": "Scale not given.", "type": "map scale"},
                {"value": "Custom projection", "type": "map projection"},
                {
                    "value": "EPSG::4326",
                    "type": "map projection",
                    "displayLabel": "WGS84",
                    "uri": "http://opengis.net/def/crs/EPSG/0/4326",
                    "source": {"code": "EPSG"},
                },
            ],
        )

        coordinates, projection = subjects
        assert coordinates.attrib == {}
        assert _tags(coordinates.find("mods:cartographics", NS)) == [
            "scale",
            "projection",
            "coordinates",
        ]
        assert coordinates.findtext("mods:cartographics/mods:projection", namespaces=NS) == (
            "Custom projection"
        )
        assert projection.attrib == {
            "authority": "EPSG",
            "valueURI": "http://opengis.net/def/crs/EPSG/0/4326",
            "displayLabel": "WGS84",
        }
        assert _tags(projection.find("mods:cartographics", NS)) == ["projection"]
        assert projection.findtext("mods:cartographics/mods:projection", namespaces=NS) == (
            "EPSG::4326"
        )

    def test_classification_with_edition(self, mods):
        root = mods(
            {
                "title": [{"value": "Title"}],
                "subject": [
                    {
                        "value": "G9801.S12 2015 .Z3",
                        "type": "classification",
                        "source": {"code": "lcc", "version": "11th edition"},
                    }
                ],
            }
        )

        classification = root.find("mods:classification", NS)
        assert classification.text == "G9801.S12 2015 .Z3"
        assert classification.get("authority") == "lcc"
        assert classification.get("edition") == "11"
        assert root.find("mods:subject", NS) is None


class TestStructuredSubjects:
    """Multi-part subjects."""

    def test_children_in_fixed_order(self, mods):
        (subject,) = _subjects(
            mods,
            {
                "structuredValue": [
                    {"value": "20th century", "type": "time"},
                    {"value": "France", "type": "place"},
                    {"value": "Poetry", "type": "genre"},
                    {"value": "Cats", "type": "topic"},
                ],
                "source": {"code": "lcsh"},
            },
        )

        assert subject.get("authority") == "lcsh"
        assert _tags(subject) == ["topic", "genre", "geographic", "temporal"]
        assert subject.find("mods:topic", NS).attrib == {}

    def test_part_level_authority(self, mods):
        (subject,) = _subjects(
            mods,
            {
                "structuredValue": [
                    {
                        "value": "Cats",
                        "type": "topic",
                        "source": {"code": "lcsh"},
                        "uri": "http://id.loc.gov/authorities/subjects/sh1",
                    },
                    {
                        "value": "France",
                        "type": "place",
                        "source": {"code": "lcsh"},
                        "uri": "http://id.loc.gov/authorities/subjects/sh2",
                    },
                ]
            },
        )

        assert subject.get("authority") == "lcsh"
        topic = subject.find("mods:topic", NS)
        assert topic.get("authority") == "lcsh"
        assert topic.get("valueURI") == "http://id.loc.gov/authorities/subjects/sh1"
        geographic = subject.find("mods:geographic", NS)
        assert geographic.get("valueURI") == "http://id.loc.gov/authorities/subjects/sh2"

    def test_mixed_part_authorities_stay_on_parts(self, mods):
        (subject,) = _subjects(
            mods,
            {
                "structuredValue": [
                    {"value": "Cats", "type": "topic", "source": {"code": "lcsh"}},
                    {"value": "Chats", "type": "topic", "source": {"code": "ram"}},
                ]
            },
        )

        assert subject.get("authority") is None
        assert [topic.get("authority") for topic in subject] == ["lcsh", "ram"]

    def test_name_title_subject(self, mods):
        (subject,) = _subjects(
            mods,
            {
                "structuredValue": [
                    {"value": "Hamlet", "type": "title"},
                    {"value": "Shakespeare, William", "type": "person"},
                ],
                "source": {"code": "lcsh"},
            },
        )

        assert subject.get("authority") == "lcsh"
        assert _tags(subject) == ["name", "titleInfo"]
        assert subject.findtext("mods:titleInfo/mods:title", namespaces=NS) == "Hamlet"

    def test_hierarchical_geographic_keeps_present_levels_in_order(self, mods):
        (subject,) = _subjects(
            mods,
            {
                "structuredValue": [
                    {"value": "Palo Alto", "type": "city"},
                    {"value": "United States", "type": "country"},
                    {"value": "North America", "type": "continent"},
                ],
                "type": "place",
            },
        )

        hierarchy = subject.find("mods:hierarchicalGeographic", NS)
        assert _tags(hierarchy) == ["continent", "country", "city"]

    def test_hierarchical_geographic_keeps_repeated_levels(self, mods):
        (subject,) = _subjects(
            mods,
            {
                "structuredValue": [
                    {"value": "Palo Alto", "type": "city"},
                    {"value": "United States", "type": "country"},
                    {"value": "Menlo Park", "type": "city"},
                ],
                "type": "place",
            },
        )

        hierarchy = subject.find("mods:hierarchicalGeographic", NS)
        assert _tags(hierarchy) == ["country", "city", "city"]
        assert [child.text for child in hierarchy] == [
            "United States",
            "Palo Alto",
            "Menlo Park",
        ]

    def test_temporal_range(self, mods):
        (subject,) = _subjects(
            mods,
            {
                "structuredValue": [
                    {"value": "1890", "type": "start"},
                    {"value": "1910", "type": "end"},
                ],
                "type": "time",
                "encoding": {"code": "w3cdtf"},
            },
        )

        temporals = subject.findall("mods:temporal", NS)
        assert [(t.get("point"), t.text) for t in temporals] == [
            ("start", "1890"),
            ("end", "1910"),
        ]
        assert {t.get("encoding") for t in temporals} == {"w3cdtf"}

    def test_structured_person_subject_is_one_name(self, mods):
        (subject,) = _subjects(
            mods,
            {
                "structuredValue": [
                    {"value": "Stanford, Jane", "type": "name"},
                    {"value": "1828-1905", "type": "life dates"},
                ],
                "type": "person",
            },
        )

        assert _tags(subject) == ["name"]
        assert len(subject.findall("mods:name/mods:namePart", NS)) == 2


class TestParallelSubjects:
    """Parallel subjects."""

    def test_parallel_topics_share_alt_rep_group(self, mods):
        subjects = _subjects(
            mods,
            {
                "parallelValue": [
                    {"value": "Cats", "valueLanguage": {"code": "eng"}},
                    {"value": "Chats", "valueLanguage": {"code": "fre"}},
                ],
                "source": {"code": "lcsh"},
            },
        )

        assert len(subjects) == 2
        assert [s.get("lang") for s in subjects] == ["eng", "fre"]
        assert {s.get("altRepGroup") for s in subjects} == {"1"}
        assert {s.get("authority") for s in subjects} == {"lcsh"}

    def test_parallel_place_stays_in_one_subject(self, mods):
        subjects = _subjects(
            mods,
            {
                "parallelValue": [
                    {"value": "Russia", "type": "place"},
                    {"code": "e-ru", "type": "place", "source": {"code": "marcgac"}},
                ],
                "type": "place",
            },
        )

        assert len(subjects) == 1
        assert _tags(subjects[0]) == ["geographic", "geographicCode"]

    def test_parallel_code_only_places_are_geographic_codes(self, mods):
        (subject,) = _subjects(
            mods,
            {
                "parallelValue": [
                    {"code": "n-us-ca", "source": {"code": "marcgac"}},
                    {"code": "US-CA", "source": {"code": "iso3166"}},
                ],
                "type": "place",
            },
        )

        codes = subject.findall("mods:geographicCode", NS)
        assert _tags(subject) == ["geographicCode", "geographicCode"]
        assert [(code.text, code.get("authority")) for code in codes] == [
            ("n-us-ca", "marcgac"),
            ("US-CA", "iso3166"),
        ]


@pytest.mark.parametrize(
    ("version", "expected"),
    [("11th edition", "11"), ("edition 23", "23"), ("no digits", None), (None, None)],
)
def test_classification_edition(version, expected):
    assert classification_edition(version) == expected


def test_subject_authority_maps_naf_to_lcsh():
    assert subject_authority("naf") == "lcsh"
    assert subject_authority("fast") == "fast"
    assert subject_authority(None) is None
