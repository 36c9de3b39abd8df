"""Pre-pass linking uniform titles to the contributor names they are built from.

A uniform title names its contributor either through an ``associated name``
note or through a ``name`` part of its structured value. The index built here
maps each matched title variant and contributor name variant to one shared
nameTitleGroup id, so the Title and Contributor writers never rescan each
other's input.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TypeAlias

from cocina_transpiler.domain.entities.description import Contributor
from cocina_transpiler.domain.entities.descriptive_value import DescriptiveValue

from .group_allocator import GroupAllocator

NameKey: TypeAlias = tuple[tuple[str, str], ...]
VariantRef: TypeAlias = tuple[int, int]

UNIFORM = "uniform"
ASSOCIATED_NAME = "associated name"
NAME_PART = "name"


def name_key(value: DescriptiveValue) -> NameKey | None:
    if value.value:
        return (("", value.value.strip()),)
    if value.structured_value:
        pairs: list[tuple[str, str]] = []
        for part in value.structured_value:
            nested = name_key(part)
            if nested is None:
                continue
            if part.value:
                pairs.append((part.type or "", part.value.strip()))
            else:
                pairs.extend(nested)
        return tuple(pairs) or None
    return None


def variants_of(value: DescriptiveValue) -> tuple[DescriptiveValue, ...]:
    return value.parallel_value or (value,)


def title_name_keys(title_variant: DescriptiveValue) -> list[NameKey]:
    keys: list[NameKey] = []
    for note in title_variant.notes_of_type(ASSOCIATED_NAME):
        if (key := name_key(note)) is not None:
            keys.append(key)
    for part in title_variant.parts_of_type(NAME_PART):
        if (key := name_key(part)) is not None:
            keys.append(key)
    return keys


def _empty_groups() -> dict[VariantRef, str]:
    return {}


def _empty_members() -> dict[int, list[int]]:
    return {}


@dataclass(slots=True)
class NameTitleGroupIndex:
    title_groups: dict[VariantRef, str] = field(default_factory=_empty_groups)
    contributor_groups: dict[VariantRef, str] = field(default_factory=_empty_groups)
    members: dict[int, list[int]] = field(default_factory=_empty_members)

    @classmethod
    def build(
        cls,
        titles: Sequence[DescriptiveValue],
        contributors: Sequence[Contributor],
        groups: GroupAllocator,
    ) -> NameTitleGroupIndex:
        index = cls()
        if not titles or not contributors:
            return index
        lookup: dict[NameKey, list[VariantRef]] = {}
        for contributor_index, contributor in enumerate(contributors):
            if not contributor.name:
                continue
            for variant_index, name in enumerate(variants_of(contributor.name[0])):
                if (key := name_key(name)) is not None:
                    lookup.setdefault(key, []).append((contributor_index, variant_index))

        grouped: set[int] = set()
        for title_index, title in enumerate(titles):
            if title.type != UNIFORM:
                continue
            for variant_index, variant in enumerate(variants_of(title)):
                refs = [
                    ref for key in title_name_keys(variant) for ref in lookup.get(key, [])
                ]
                if not refs:
                    continue
                group = groups.next_name_title_group()
                index.title_groups[(title_index, variant_index)] = group
                for ref in refs:
                    index.contributor_groups.setdefault(ref, group)
                    contributor_index = ref[0]
                    if contributor_index not in grouped:
                        grouped.add(contributor_index)
                        index.members.setdefault(title_index, []).append(
                            contributor_index
                        )
        return index

    def title_group(self, title_index: int, variant_index: int = 0) -> str | None:
        return self.title_groups.get((title_index, variant_index))

    def contributor_group(
        self, contributor_index: int, variant_index: int = 0
    ) -> str | None:
        return self.contributor_groups.get((contributor_index, variant_index))

    def contributors_for_title(self, title_index: int) -> list[int]:
        return self.members.get(title_index, [])

    def is_grouped(self, contributor_index: int) -> bool:
        return any(
            contributor_index in members for members in self.members.values()
        )
