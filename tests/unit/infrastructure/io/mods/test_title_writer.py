"""Tests for titleInfo output."""

from cocina_transpiler.infrastructure.io.mods.constants import MODS_NS, XLINK_NS
from cocina_transpiler.infrastructure.io.xml_utils import local_name

NS = {"mods": MODS_NS}


def _tags(element):
    return [local_name(child.tag) for child in element]


class TestBasicTitles:
    """Leaf and structured titles."""

    def test_single_title(self, mods):
        root = mods({"title": [{"value": "Gaudy night"}]})

        title_infos = root.findall("mods:titleInfo", NS)
        assert len(title_infos) == 1
        assert title_infos[0].attrib == {}
        assert _tags(title_infos[0]) == ["title"]
        assert title_infos[0].findtext("mods:title", namespaces=NS) == "Gaudy night"

    def test_structured_title_parts_in_fixed_order(self, mods):
        root = mods(
            {
                "title": [
                    {
                        "structuredValue": [
                            {"value": "Part one", "type": "part name"},
                            {"value": "1", "type": "part number"},
                            {"value": "a novel", "type": "subtitle"},
                            {"value": "Gaudy night", "type": "main title"},
                            {"value": "The", "type": "nonsorting characters"},
                        ]
                    }
                ]
            }
        )

        title_info = root.find("mods:titleInfo", NS)
        assert _tags(title_info) == ["nonSort", "title", "subTitle", "partNumber", "partName"]
        assert title_info.findtext("mods:subTitle", namespaces=NS) == "a novel"

    def test_nonsort_padded_to_character_count(self, mods):
        root = mods(
            {
                "title": [
                    {
                        "structuredValue": [
                            {"value": "The", "type": "nonsorting characters"},
                            {"value": "Gaudy night", "type": "main title"},
                        ],
                        "note": [{"value": "4", "type": "nonsorting character count"}],
                    }
                ]
            }
        )

        assert root.findtext("mods:titleInfo/mods:nonSort", namespaces=NS) == "The "

    def test_supplied_title(self, mods):
        root = mods({"title": [{"value": "Untitled", "type": "supplied"}]})

        assert root.find("mods:titleInfo", NS).attrib == {"supplied": "yes"}

    def test_typed_title_passes_type_through(self, mods):
        root = mods(
            {"title": [{"value": "Main"}, {"value": "Other", "type": "alternative"}]}
        )

        title_infos = root.findall("mods:titleInfo", NS)
        assert title_infos[1].get("type") == "alternative"

    def test_primary_title_gets_usage(self, mods):
        root = mods({"title": [{"value": "Main", "status": "primary"}]})

        assert root.find("mods:titleInfo", NS).get("usage") == "primary"

    def test_value_at_title_is_a_link(self, mods):
        root = mods({"title": [{"valueAt": "http://example.org/title"}]})

        title_info = root.find("mods:titleInfo", NS)
        assert title_info.get(f"{{{XLINK_NS}}}href") == "http://example.org/title"
        assert len(title_info) == 0

    def test_malformed_title_leaves_empty_title_info(self, mods):
        root = mods({"title": [{"type": "main title"}]})

        title_info = root.find("mods:titleInfo", NS)
        assert title_info is not None
        assert len(title_info) == 0

    def test_grouped_title_writes_one_title_info_per_value(self, mods):
        root = mods(
            {
                "title": [
                    {
                        "groupedValue": [
                            {"value": "Gaudy night"},
                            {"value": "Busman's honeymoon", "type": "alternative"},
                        ]
                    }
                ]
            }
        )

        title_infos = root.findall("mods:titleInfo", NS)
        assert [info.findtext("mods:title", namespaces=NS) for info in title_infos] == [
            "Gaudy night",
            "Busman's honeymoon",
        ]
        assert [info.get("type") for info in title_infos] == [None, "alternative"]
        assert "altRepGroup" not in title_infos[0].attrib


class TestParallelTitles:
    """Parallel titles become sibling titleInfo elements sharing an altRepGroup."""

    def test_parallel_title_variants(self, mods):
        root = mods(
            {
                "title": [
                    {
                        "parallelValue": [
                            {
                                "value": "Война и мир",
                                "valueLanguage": {"code": "rus", "valueScript": {"code": "Cyrl"}},
                            },
                            {
                                "value": "Voĭna i mir",
                                "type": "transliterated",
                                "valueLanguage": {"code": "rus", "valueScript": {"code": "Latn"}},
                            },
                            {"value": "War and peace", "status": "primary"},
                        ]
                    }
                ]
            }
        )

        title_infos = root.findall("mods:titleInfo", NS)
        assert len(title_infos) == 3
        assert {info.get("altRepGroup") for info in title_infos} == {"1"}
        assert [info.get("usage") for info in title_infos] == [None, None, "primary"]
        assert title_infos[0].get("lang") == "rus"
        assert title_infos[0].get("script") == "Cyrl"
        assert title_infos[1].get("type") == "translated"

    def test_first_variant_is_primary_without_status(self, mods):
        root = mods(
            {"title": [{"parallelValue": [{"value": "A"}, {"value": "B"}]}]}
        )

        usages = [info.get("usage") for info in root.findall("mods:titleInfo", NS)]
        assert usages == ["primary", None]

    def test_each_parallel_title_gets_its_own_group(self, mods):
        root = mods(
            {
                "title": [
                    {"parallelValue": [{"value": "A"}, {"value": "B"}]},
                    {"parallelValue": [{"value": "C"}, {"value": "D"}]},
                ]
            }
        )

        groups = [info.get("altRepGroup") for info in root.findall("mods:titleInfo", NS)]
        assert groups == ["1", "1", "2", "2"]


class TestUniformTitles:
    """Uniform titles are linked to their contributor with a nameTitleGroup."""

    def test_associated_name_note_links_contributor(self, mods):
        root = mods(
            {
                "title": [
                    {"value": "Hamlet"},
                    {
                        "value": "Hamlet",
                        "type": "uniform",
                        "note": [{"value": "Shakespeare, William", "type": "associated name"}],
                    },
                ],
                "contributor": [
                    {"name": [{"value": "Shakespeare, William"}], "type": "person"},
                    {"name": [{"value": "Other, Person"}], "type": "person"},
                ],
            }
        )

        assert _tags(root) == ["titleInfo", "titleInfo", "name", "name"]
        uniform, grouped_name = root[1], root[2]
        assert uniform.get("type") == "uniform"
        assert uniform.get("nameTitleGroup") == "1"
        assert grouped_name.get("nameTitleGroup") == "1"
        assert grouped_name.findtext("mods:namePart", namespaces=NS) == "Shakespeare, William"
        assert root[3].get("nameTitleGroup") is None

    def test_name_part_of_structured_uniform_title(self, mods):
        root = mods(
            {
                "title": [
                    {
                        "structuredValue": [
                            {"value": "Shakespeare, William", "type": "name"},
                            {"value": "Hamlet", "type": "title"},
                        ],
                        "type": "uniform",
                    }
                ],
                "contributor": [{"name": [{"value": "Shakespeare, William"}]}],
            }
        )

        title_info, name = root.findall("mods:titleInfo", NS)[0], root.find("mods:name", NS)
        assert _tags(title_info) == ["title"]
        assert title_info.get("nameTitleGroup") == name.get("nameTitleGroup") == "1"
        # A grouped contributor without a type is treated as a person.
        assert name.get("type") == "personal"

    def test_unmatched_uniform_title_has_no_group(self, mods):
        root = mods(
            {
                "title": [{"value": "Hamlet", "type": "uniform"}],
                "contributor": [{"name": [{"value": "Nobody"}]}],
            }
        )

        assert root.find("mods:titleInfo", NS).get("nameTitleGroup") is None
        assert root.find("mods:name", NS).get("nameTitleGroup") is None
