from __future__ import annotations

from typing import TYPE_CHECKING

from cocina_transpiler.domain.entities.descriptive_value import (
    DescriptiveValue,
    Empty,
    Leaf,
    Parallel,
    Structured,
)

from .constants import ALT_REP_GROUP, NAME_TITLE_GROUP
from .contributor_writer import write_contributor
from .elements import XLINK_HREF, USAGE_PRIMARY, add_element, primary_variant_index

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cocina_transpiler.domain.entities.description import Contributor

    from ..xml_utils import XmlElement
    from .context import WriterContext

TITLE_PART_TAGS: dict[str, str] = {
    "nonsorting characters": "nonSort",
    "main title": "title",
    "title": "title",
    "subtitle": "subTitle",
    "part number": "partNumber",
    "part name": "partName",
}
TITLE_PART_ORDER: tuple[str, ...] = (
    "nonSort",
    "title",
    "subTitle",
    "partNumber",
    "partName",
)
NAME_TYPES = frozenset(
    {"name", "forename", "surname", "life dates", "term of address", "activity dates"}
)
NONSORTING_COUNT_NOTE = "nonsorting character count"


def write_titles(
    parent: XmlElement,
    titles: Sequence[DescriptiveValue],
    context: WriterContext,
    *,
    contributors: Sequence[Contributor] = (),
    extra_attrs: dict[str, str | None] | None = None,
) -> None:
    """Append one ``titleInfo`` per title (one per variant for parallel titles).

    Contributors linked to a uniform title through a nameTitleGroup are written
    immediately after that title.
    """
    for index, title in enumerate(titles):
        _write_title(parent, title, index, context, extra_attrs or {})
        for contributor_index in context.name_title_groups.contributors_for_title(index):
            write_contributor(
                parent, contributors[contributor_index], contributor_index, context
            )


def title_info_attrs(title: DescriptiveValue) -> dict[str, str | None]:
    attrs: dict[str, str | None] = {
        "usage": title.status,
        "script": title.script,
        "lang": title.lang,
        "displayLabel": title.display_label,
        "valueURI": title.uri,
        "authorityURI": title.source.uri if title.source else None,
        "authority": title.source.code if title.source else None,
        "transliteration": title.standard.value if title.standard else None,
    }
    if title.type == "supplied":
        attrs["supplied"] = "yes"
    elif title.type != "transliterated":
        attrs["type"] = title.type
    return attrs


def _write_title(
    parent: XmlElement,
    title: DescriptiveValue,
    index: int,
    context: WriterContext,
    extra_attrs: dict[str, str | None],
) -> None:
    if title.value_at:
        add_element(parent, "titleInfo", attrs={XLINK_HREF: title.value_at})
        return
    shape = title.shape
    if isinstance(shape, Parallel):
        _write_parallel(parent, title, shape.variants, index, context, extra_attrs)
        return
    if isinstance(shape, Empty) and title.grouped_value:
        # Grouped titles are written as independent basic titles.
        for grouped in title.grouped_value:
            write_title_info(parent, grouped, {**title_info_attrs(grouped), **extra_attrs})
        return
    attrs = {
        **title_info_attrs(title),
        **extra_attrs,
        NAME_TITLE_GROUP: context.name_title_groups.title_group(index),
    }
    write_title_info(parent, title, attrs)


def _write_parallel(
    parent: XmlElement,
    title: DescriptiveValue,
    variants: tuple[DescriptiveValue, ...],
    index: int,
    context: WriterContext,
    extra_attrs: dict[str, str | None],
) -> None:
    group = context.groups.next_alt_rep_group()
    primary_index = primary_variant_index(variants)
    for variant_index, variant in enumerate(variants):
        attrs = {**title_info_attrs(variant), **extra_attrs, ALT_REP_GROUP: group}
        if title.type == "uniform":
            attrs["type"] = "uniform"
        elif variant.type == "transliterated":
            attrs["type"] = "translated"
        attrs["usage"] = USAGE_PRIMARY if variant_index == primary_index else None
        attrs[NAME_TITLE_GROUP] = context.name_title_groups.title_group(
            index, variant_index
        )
        write_title_info(parent, variant, attrs)


def write_title_info(
    parent: XmlElement, title: DescriptiveValue, attrs: dict[str, str | None]
) -> None:
    title_info = add_element(parent, "titleInfo", attrs=attrs)
    shape = title.shape
    if isinstance(shape, Leaf):
        add_element(title_info, "title", shape.text)
    elif isinstance(shape, Structured):
        for part_tag, text in _title_parts(title):
            add_element(title_info, part_tag, text)
    elif isinstance(shape, (Parallel, Empty)):
        # Nested parallel values and malformed titles leave an empty titleInfo.
        return


def _title_parts(title: DescriptiveValue) -> list[tuple[str, str]]:
    parts: list[tuple[str, str]] = []
    for part in _flatten(title):
        if part.type in NAME_TYPES or part.note or part.value is None:
            continue
        part_tag = TITLE_PART_TAGS.get(part.type or "")
        if part_tag is None:
            continue
        text = part.value
        if part_tag == "nonSort":
            text = _pad_nonsort(text, title)
        parts.append((part_tag, text))
    parts.sort(key=lambda item: TITLE_PART_ORDER.index(item[0]))
    return parts


def _flatten(title: DescriptiveValue) -> list[DescriptiveValue]:
    leaves = [part for part in title.structured_value if part.value is not None]
    nodes = [
        part
        for part in title.structured_value
        if part.structured_value and part.type != "name"
    ]
    return leaves + [leaf for node in nodes for leaf in _flatten(node)]


def _pad_nonsort(text: str, title: DescriptiveValue) -> str:
    raw_count = title.first_note_value(NONSORTING_COUNT_NOTE)
    if raw_count is None or not raw_count.strip().isdigit():
        return text
    return text.ljust(int(raw_count))
