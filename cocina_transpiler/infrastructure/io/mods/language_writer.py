from __future__ import annotations

from typing import TYPE_CHECKING

from .elements import add_element, authority_attrs

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cocina_transpiler.domain.entities.description import Language

    from ..xml_utils import XmlElement


def write_languages(
    parent: XmlElement, languages: Sequence[Language], *, tag_name: str = "language"
) -> None:
    """Write ``language`` (or ``languageOfCataloging``) elements."""
    for language in languages:
        attrs: dict[str, str | None] = {"usage": language.status}
        if tag_name == "language":
            attrs["displayLabel"] = language.display_label
            attrs["objectPart"] = (
                language.applies_to[0].value if language.applies_to else None
            )
        element = add_element(parent, tag_name, attrs=attrs)
        write_language_terms(element, language)


def write_language_terms(element: XmlElement, language: Language) -> None:
    term_attrs = authority_attrs(language.source, language.uri)
    if language.value is not None:
        add_element(element, "languageTerm", language.value, {"type": "text", **term_attrs})
    if language.code is not None:
        add_element(element, "languageTerm", language.code, {"type": "code", **term_attrs})
    script = language.script
    if script is None:
        return
    script_attrs = authority_attrs(script.source, script.uri)
    if script.value is not None:
        add_element(element, "scriptTerm", script.value, {"type": "text", **script_attrs})
    if script.code is not None:
        add_element(element, "scriptTerm", script.code, {"type": "code", **script_attrs})
