from __future__ import annotations

from typing import TYPE_CHECKING

from cocina_transpiler.domain.entities.descriptive_value import (
    DescriptiveValue,
    Empty,
    Leaf,
    Parallel,
    Structured,
)

from .constants import (
    ALT_REP_GROUP,
    DATACITE_PREFIX,
    MARC_RELATOR,
    NAME_TITLE_GROUP,
    SELF_DEPOSIT_CONTRIBUTOR_TYPES,
)
from .elements import (
    XLINK_HREF,
    USAGE_PRIMARY,
    add_element,
    authority_attrs,
    primary_variant_index,
)
from .identifier_writer import mods_identifier_type

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cocina_transpiler.domain.entities.description import Contributor

    from ..xml_utils import XmlElement
    from .context import WriterContext

# Legacy MODS name types. "event" is not a MODS name type, so it renders as
# corporate and keeps its role; "conference" is native and drops the role.
NAME_TYPES: dict[str, str] = {
    "person": "personal",
    "organization": "corporate",
    "family": "family",
    "conference": "conference",
    "event": "corporate",
}
NAME_PART_TYPES: dict[str, str] = {
    "surname": "family",
    "forename": "given",
    "term of address": "termsOfAddress",
    "life dates": "date",
    "activity dates": "date",
}
# Grouped name types written as alternativeName, with their altType.
ALTERNATIVE_NAME_TYPES: dict[str, str | None] = {"pseudonym": "pseudonym", "alternative": None}
ROLELESS_TYPES = frozenset({"conference"})
UNSPECIFIED_OTHERS = "unspecified others"
UNCITED_DESCRIPTION = "not included in citation"
MARC_RELATOR_URI = "http://id.loc.gov/vocabulary/relators/"


def write_contributors(
    parent: XmlElement, contributors: Sequence[Contributor], context: WriterContext
) -> None:
    for index, contributor in enumerate(contributors):
        if context.name_title_groups.is_grouped(index):
            continue
        write_contributor(parent, contributor, index, context)


def write_contributor(
    parent: XmlElement,
    contributor: Contributor,
    index: int,
    context: WriterContext,
    *,
    with_roles: bool = True,
) -> None:
    if contributor.type == UNSPECIFIED_OTHERS:
        add_element(add_element(parent, "name"), "etal")
        return
    if not contributor.name:
        return
    first_name = contributor.name[0]
    if isinstance(first_name.shape, Parallel):
        _write_parallel_names(parent, contributor, index, context, with_roles=with_roles)
        return
    group = context.name_title_groups.contributor_group(index)
    attrs = {
        "type": name_type_for(contributor.type, group),
        NAME_TITLE_GROUP: group,
        "lang": first_name.lang,
        "script": first_name.script,
        **authority_attrs(first_name.source, first_name.uri),
        "displayLabel": first_name.display_label,
        "usage": USAGE_PRIMARY if contributor.is_primary else None,
        XLINK_HREF: first_name.value_at,
    }
    name_element = add_element(parent, "name", attrs=attrs)
    for name in contributor.name:
        write_name_parts(name_element, name)
    _write_details(name_element, contributor, with_roles=with_roles)


def name_type_for(contributor_type: str | None, name_title_group: str | None) -> str | None:
    if contributor_type in NAME_TYPES:
        return NAME_TYPES[contributor_type]
    return "personal" if name_title_group else None


def write_name_parts(name_element: XmlElement, name: DescriptiveValue) -> None:
    shape = name.shape
    if isinstance(shape, Structured):
        for part in shape.parts:
            if part.structured_value:
                write_name_parts(name_element, part)
            else:
                _write_name_part(name_element, part, part.value or "")
    elif isinstance(shape, Leaf):
        if name.type == "display":
            add_element(name_element, "displayForm", shape.text)
        else:
            _write_name_part(name_element, name, shape.text)
    elif isinstance(shape, Parallel):
        for variant in shape.variants:
            write_name_parts(name_element, variant)
    elif isinstance(shape, Empty):
        if name.grouped_value:
            _write_grouped_parts(name_element, name.grouped_value)
        else:
            add_element(name_element, "namePart", "")


def _write_grouped_parts(
    name_element: XmlElement, grouped: tuple[DescriptiveValue, ...]
) -> None:
    """Grouped names hold the primary name next to its pseudonyms and alternatives."""
    for part in grouped:
        alt_type = part.type or ""
        if alt_type in ALTERNATIVE_NAME_TYPES:
            add_element(
                name_element,
                "alternativeName",
                part.value or "",
                {"altType": ALTERNATIVE_NAME_TYPES[alt_type], XLINK_HREF: part.value_at},
            )
        else:
            write_name_parts(name_element, part)


def _write_name_part(name_element: XmlElement, part: DescriptiveValue, text: str) -> None:
    add_element(
        name_element,
        "namePart",
        text,
        {"type": NAME_PART_TYPES.get(part.type or ""), XLINK_HREF: part.value_at},
    )


def _write_parallel_names(
    parent: XmlElement,
    contributor: Contributor,
    index: int,
    context: WriterContext,
    *,
    with_roles: bool,
) -> None:
    first_name = contributor.name[0]
    variants = first_name.parallel_value
    group = context.groups.next_alt_rep_group()
    primary_index = primary_variant_index(variants)
    for variant_index, variant in enumerate(variants):
        name_title_group = context.name_title_groups.contributor_group(
            index, variant_index
        )
        attrs = {
            "type": name_type_for(contributor.type, name_title_group),
            NAME_TITLE_GROUP: name_title_group,
            ALT_REP_GROUP: group,
            "lang": variant.lang,
            "script": variant.script,
            **authority_attrs(variant.source, variant.uri),
            "usage": USAGE_PRIMARY if variant_index == primary_index else None,
            "transliteration": variant.standard.value
            if variant.type == "transliteration" and variant.standard
            else None,
            XLINK_HREF: first_name.value_at,
        }
        name_element = add_element(parent, "name", attrs=attrs)
        write_name_parts(name_element, variant)
        _write_details(name_element, contributor, with_roles=with_roles)


def _write_details(
    name_element: XmlElement, contributor: Contributor, *, with_roles: bool
) -> None:
    for identifier in contributor.identifier:
        add_element(
            name_element,
            "nameIdentifier",
            identifier.value or identifier.uri,
            {
                "displayLabel": identifier.display_label,
                "typeURI": identifier.source.uri if identifier.source else None,
                "type": mods_identifier_type(identifier.type),
                "invalid": "yes" if identifier.is_invalid else None,
            },
        )
    for note in contributor.note:
        if note.type == "affiliation":
            add_element(name_element, "affiliation", note.value)
        elif note.type == "description":
            add_element(name_element, "description", note.value)
        elif note.type == "citation status" and note.value == "false":
            add_element(name_element, "description", UNCITED_DESCRIPTION)
    if with_roles:
        for role in roles_to_write(contributor):
            write_role(name_element, role)


def roles_to_write(contributor: Contributor) -> list[DescriptiveValue]:
    """Roles rendered for a contributor, after vocabulary de-duplication.

    Self-deposit and DataCite roles duplicate a marcrelator role when one is
    present, so they are dropped. Without a marcrelator role only the first
    role's text is kept.
    """
    if contributor.type in ROLELESS_TYPES or not contributor.role:
        return []
    if any(is_marc_relator(role) for role in contributor.role):
        return [role for role in contributor.role if not _is_deposit_role(role)]
    return [DescriptiveValue(value=contributor.role[0].value)]


def write_role(name_element: XmlElement, role: DescriptiveValue) -> None:
    role_element = add_element(name_element, "role")
    attrs = authority_attrs(role.source, role.uri)
    if role.code:
        add_element(role_element, "roleTerm", role.code, {"type": "code", **attrs})
    if role.value is not None:
        add_element(role_element, "roleTerm", role.value, {"type": "text", **attrs})


def is_marc_relator(role: DescriptiveValue) -> bool:
    if role.source is None:
        return False
    return role.source.code == MARC_RELATOR or role.source.uri == MARC_RELATOR_URI


def _is_deposit_role(role: DescriptiveValue) -> bool:
    if role.source is None or role.source.value is None:
        return False
    return role.source.value == SELF_DEPOSIT_CONTRIBUTOR_TYPES or role.source.value.startswith(
        DATACITE_PREFIX
    )
