"""Tests for structural MODS comparison."""

from cocina_transpiler.infrastructure.io.mods.equivalence import ModsEquivalence, normalize_text

MODS = '<mods xmlns="http://www.loc.gov/mods/v3">{}</mods>'


class TestModsEquivalence:
    """Tests for ModsEquivalence."""

    def test_identical_documents(self):
        document = MODS.format("<titleInfo><title>Gaudy night</title></titleInfo>")

        assert ModsEquivalence().equivalent(document, document)

    def test_whitespace_is_ignored(self):
        expected = MODS.format("<titleInfo><title>Gaudy night</title></titleInfo>")
        actual = MODS.format(
            "\n  <titleInfo>\n    <title>  Gaudy\n night </title>\n  </titleInfo>\n"
        )

        assert ModsEquivalence().equivalent(expected, actual)

    def test_text_difference(self):
        expected = MODS.format("<titleInfo><title>Gaudy night</title></titleInfo>")
        actual = MODS.format("<titleInfo><title>Busman's honeymoon</title></titleInfo>")

        differences = ModsEquivalence().compare(expected, actual)

        assert len(differences) == 1
        assert differences[0].startswith("/mods/titleInfo[0]/title[0]: expected text")

    def test_element_order_matters(self):
        expected = MODS.format("<titleInfo/><name/>")
        actual = MODS.format("<name/><titleInfo/>")

        assert not ModsEquivalence().equivalent(expected, actual)

    def test_missing_attribute(self):
        expected = MODS.format('<titleInfo type="uniform"/>')
        actual = MODS.format("<titleInfo/>")

        (difference,) = ModsEquivalence().compare(expected, actual)

        assert "@type" in difference
        assert "'uniform'" in difference

    def test_child_count_difference(self):
        expected = MODS.format("<titleInfo/><name/>")
        actual = MODS.format("<titleInfo/>")

        differences = ModsEquivalence().compare(expected, actual)

        assert differences == ["/mods: expected 2 child elements (titleInfo, name), found 1 (titleInfo)"]

    def test_group_ids_may_be_renumbered(self):
        expected = MODS.format(
            '<titleInfo altRepGroup="1"/><titleInfo altRepGroup="1"/>'
            '<note altRepGroup="2"/><note altRepGroup="2"/>'
        )
        actual = MODS.format(
            '<titleInfo altRepGroup="7"/><titleInfo altRepGroup="7"/>'
            '<note altRepGroup="3"/><note altRepGroup="3"/>'
        )

        assert ModsEquivalence().equivalent(expected, actual)

    def test_group_ids_must_correspond_one_to_one(self):
        expected = MODS.format('<titleInfo altRepGroup="1"/><note altRepGroup="2"/>')
        actual = MODS.format('<titleInfo altRepGroup="1"/><note altRepGroup="1"/>')

        (difference,) = ModsEquivalence().compare(expected, actual)

        assert "does not correspond" in difference

    def test_comparator_is_reusable(self):
        comparator = ModsEquivalence()
        first = MODS.format('<titleInfo altRepGroup="1"/>')
        second = MODS.format('<titleInfo altRepGroup="2"/>')

        assert comparator.equivalent(first, second)
        assert comparator.equivalent(first, first)


def test_normalize_text():
    assert normalize_text("  a \n b  ") == "a b"
    assert normalize_text(None) == ""
