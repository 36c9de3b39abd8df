"""Tests for originInfo output."""

import pytest

from cocina_transpiler.infrastructure.io.mods.constants import MODS_NS
from cocina_transpiler.infrastructure.io.mods.event_writer import event_type_for
from cocina_transpiler.infrastructure.io.xml_utils import local_name

NS = {"mods": MODS_NS}


def _tags(element):
    return [local_name(child.tag) for child in element]


def _describe(*events):
    return {"title": [{"value": "Title"}], "event": list(events)}


class TestOriginInfo:
    """Single-script events."""

    def test_publication_event_child_order(self, mods):
        root = mods(
            _describe(
                {
                    "type": "publication",
                    "date": [
                        {"value": "1935", "encoding": {"code": "w3cdtf"}, "status": "primary"}
                    ],
                    "contributor": [
                        {
                            "name": [{"value": "Gollancz"}],
                            "role": [{"value": "publisher", "code": "pbl"}],
                        },
                        {"name": [{"value": "Sayers"}], "role": [{"value": "author"}]},
                    ],
                    "location": [{"value": "London"}],
                    "note": [
                        {"value": "monographic", "type": "issuance"},
                        {"value": "1st ed.", "type": "edition"},
                    ],
                }
            )
        )

        origin_info = root.find("mods:originInfo", NS)
        assert origin_info.get("eventType") == "publication"
        assert _tags(origin_info) == ["place", "publisher", "dateIssued", "edition", "issuance"]
        date = origin_info.find("mods:dateIssued", NS)
        assert date.text == "1935"
        assert date.get("encoding") == "w3cdtf"
        assert date.get("keyDate") == "yes"
        assert origin_info.findtext("mods:publisher", namespaces=NS) == "Gollancz"
        place_term = origin_info.find("mods:place/mods:placeTerm", NS)
        assert place_term.get("type") == "text"
        assert place_term.text == "London"

    def test_place_code(self, mods):
        root = mods(
            _describe(
                {
                    "type": "publication",
                    "location": [{"code": "enk", "source": {"code": "marccountry"}}],
                }
            )
        )

        place_term = root.find("mods:originInfo/mods:place/mods:placeTerm", NS)
        assert place_term.attrib == {"type": "code", "authority": "marccountry"}
        assert place_term.text == "enk"

    def test_creation_and_copyright_types(self, mods):
        root = mods(
            _describe(
                {"type": "creation", "date": [{"value": "1900"}]},
                {"type": "copyright", "date": [{"value": "1901"}]},
            )
        )

        creation, copyright_ = root.findall("mods:originInfo", NS)
        assert creation.get("eventType") == "production"
        assert _tags(creation) == ["dateCreated"]
        assert copyright_.get("eventType") == "copyright notice"
        assert _tags(copyright_) == ["copyrightDate"]

    def test_untyped_events(self, mods):
        root = mods(
            _describe(
                {"date": [{"value": "1900"}]},
                {"date": [{"value": "1950", "note": [{"value": "reprint", "type": "date type"}]}]},
            )
        )

        first, second = root.findall("mods:originInfo", NS)
        assert first.get("eventType") == "production"
        assert second.get("eventType") is None
        other_date = second.find("mods:dateOther", NS)
        assert other_date.text == "1950"
        assert other_date.get("type") == "reprint"

    def test_date_range(self, mods):
        root = mods(
            _describe(
                {
                    "type": "creation",
                    "date": [
                        {
                            "structuredValue": [
                                {"value": "1900", "type": "start"},
                                {"value": "1910", "type": "end"},
                            ],
                            "encoding": {"code": "w3cdtf"},
                            "qualifier": "approximate",
                            "status": "primary",
                        }
                    ],
                }
            )
        )

        start, end = root.findall("mods:originInfo/mods:dateCreated", NS)
        assert start.attrib == {
            "encoding": "w3cdtf",
            "qualifier": "approximate",
            "keyDate": "yes",
            "point": "start",
        }
        assert end.attrib == {"encoding": "w3cdtf", "qualifier": "approximate", "point": "end"}

    def test_contributor_without_role_is_a_publisher(self, mods):
        root = mods(
            _describe({"type": "publication", "contributor": [{"name": [{"value": "Press"}]}]})
        )

        assert root.findtext("mods:originInfo/mods:publisher", namespaces=NS) == "Press"


class TestParallelEvents:
    """Events with parallel values are split per script."""

    def test_parallel_publisher_splits_by_script(self, mods):
        root = mods(
            _describe(
                {
                    "type": "publication",
                    "contributor": [
                        {
                            "name": [
                                {
                                    "parallelValue": [
                                        {
                                            "value": "Издательство",
                                            "valueLanguage": {
                                                "code": "rus",
                                                "valueScript": {"code": "Cyrl"},
                                            },
                                        },
                                        {
                                            "value": "Izdatelʹstvo",
                                            "valueLanguage": {
                                                "code": "rus",
                                                "valueScript": {"code": "Latn"},
                                            },
                                        },
                                    ]
                                }
                            ],
                            "role": [{"value": "publisher"}],
                        }
                    ],
                    "date": [{"value": "1950"}],
                    "note": [{"value": "monographic", "type": "issuance"}],
                }
            )
        )

        origin_infos = root.findall("mods:originInfo", NS)
        assert [info.get("script") for info in origin_infos] == ["Cyrl", "Latn"]
        assert {info.get("altRepGroup") for info in origin_infos} == {"1"}
        cyrillic, latin = origin_infos
        assert cyrillic.findtext("mods:publisher", namespaces=NS) == "Издательство"
        assert cyrillic.find("mods:issuance", NS) is None
        # The unscripted date joins the Latin origin, which also carries the notes.
        assert _tags(latin) == ["publisher", "dateIssued", "issuance"]

    def test_parallel_event(self, mods):
        root = mods(
            _describe(
                {
                    "parallelEvent": [
                        {"location": [{"value": "Moskva"}], "valueLanguage": {"code": "rus"}},
                        {"location": [{"value": "Moscow"}], "valueLanguage": {"code": "eng"}},
                    ]
                }
            )
        )

        origin_infos = root.findall("mods:originInfo", NS)
        assert len(origin_infos) == 2
        assert [info.get("lang") for info in origin_infos] == ["rus", "eng"]
        assert all(info.get("eventType") == "production" for info in origin_infos)
        assert {info.get("altRepGroup") for info in origin_infos} == {"1"}


@pytest.mark.parametrize(
    ("cocina_type", "first", "expected"),
    [
        (None, True, "production"),
        (None, False, None),
        ("creation", False, "production"),
        ("copyright", True, "copyright notice"),
        ("publication", True, "publication"),
    ],
)
def test_event_type_for(cocina_type, first, expected):
    assert event_type_for(cocina_type, first=first) == expected
