"""Tests for relatedItem output."""

from cocina_transpiler.infrastructure.io.mods.constants import MODS_NS, XLINK_NS
from cocina_transpiler.infrastructure.io.xml_utils import local_name

NS = {"mods": MODS_NS}


def _tags(element):
    return [local_name(child.tag) for child in element]


def _related(mods, *related):
    root = mods({"title": [{"value": "Title"}], "relatedResource": list(related)})
    return root.findall("mods:relatedItem", NS)


class TestRelatedItems:
    """relatedItem output."""

    def test_type_mapping_and_content(self, mods):
        host, untyped = _related(
            mods,
            {
                "type": "part of",
                "title": [{"value": "Series"}],
                "contributor": [{"name": [{"value": "Editor, Some"}], "type": "person"}],
            },
            {"type": "related to", "title": [{"value": "Other"}]},
        )

        assert host.get("type") == "host"
        assert _tags(host) == ["titleInfo", "name"]
        assert untyped.get("type") is None
        assert untyped.findtext("mods:titleInfo/mods:title", namespaces=NS) == "Other"

    def test_value_at_items_are_written_last(self, mods):
        items = _related(
            mods,
            {"valueAt": "https://example.org/related"},
            {"type": "has part", "title": [{"value": "Chapter"}]},
        )

        assert items[0].get("type") == "constituent"
        assert items[1].attrib == {f"{{{XLINK_NS}}}href": "https://example.org/related"}

    def test_part_details(self, mods):
        (item,) = _related(
            mods,
            {
                "type": "part of",
                "title": [{"value": "Journal"}],
                "note": [
                    {
                        "type": "part",
                        "groupedValue": [
                            {"value": "volume", "type": "detail type"},
                            {"value": "3", "type": "number"},
                            {"value": "pages", "type": "extent unit"},
                            {"value": "10-20", "type": "list"},
                        ],
                    },
                    {"value": "Plain note"},
                ],
            },
        )

        assert _tags(item) == ["titleInfo", "note", "part"]
        part = item.find("mods:part", NS)
        assert _tags(part) == ["detail", "extent"]
        detail = part.find("mods:detail", NS)
        assert detail.get("type") == "volume"
        assert detail.findtext("mods:number", namespaces=NS) == "3"
        extent = part.find("mods:extent", NS)
        assert extent.get("unit") == "pages"
        assert extent.findtext("mods:list", namespaces=NS) == "10-20"

    def test_other_relation_type(self, mods):
        (item,) = _related(
            mods,
            {
                "title": [{"value": "Source"}],
                "note": [
                    {
                        "value": "isDerivedFrom",
                        "type": "other relation type",
                        "uri": "https://example.org/relations/isDerivedFrom",
                        "source": {"value": "DataCite relationType"},
                    }
                ],
            },
        )

        assert item.get("otherType") == "isDerivedFrom"
        assert item.get("otherTypeURI") == "https://example.org/relations/isDerivedFrom"
        assert item.get("otherTypeAuth") == "DataCite relationType"
        assert _tags(item) == ["titleInfo"]

    def test_nested_related_items_share_group_ids(self, mods):
        root = mods(
            {
                "title": [{"parallelValue": [{"value": "A"}, {"value": "B"}]}],
                "relatedResource": [
                    {
                        "type": "part of",
                        "title": [{"parallelValue": [{"value": "C"}, {"value": "D"}]}],
                    }
                ],
            }
        )

        top = [t.get("altRepGroup") for t in root.findall("mods:titleInfo", NS)]
        nested = [
            t.get("altRepGroup") for t in root.findall("mods:relatedItem/mods:titleInfo", NS)
        ]
        assert top == ["1", "1"]
        assert nested == ["2", "2"]

    def test_related_purl_and_access(self, mods):
        (item,) = _related(
            mods,
            {
                "title": [{"value": "Other"}],
                "purl": "https://purl.stanford.edu/cd234fg5678",
                "access": {"url": [{"value": "https://example.org"}]},
            },
        )

        urls = item.findall("mods:location/mods:url", NS)
        assert [u.text for u in urls] == [
            "https://example.org",
            "https://purl.stanford.edu/cd234fg5678",
        ]
