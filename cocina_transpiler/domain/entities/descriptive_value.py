"""Immutable Cocina descriptive value types.

``DescriptiveValue`` is the building block for titles, subjects, forms, notes,
identifiers and contributor names. Every value has exactly one shape:

* ``Leaf`` - a plain ``value`` (an empty string is still a leaf)
* ``Structured`` - an ordered list of typed parts
* ``Parallel`` - equivalent variants in different languages or scripts
* ``Empty`` - nothing populated, or more than one of the above (malformed)
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TypeAlias, cast

PRIMARY = "primary"
INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class Source:
    code: str | None = None
    uri: str | None = None
    value: str | None = None
    version: str | None = None
    note: tuple[DescriptiveValue, ...] = ()


@dataclass(frozen=True, slots=True)
class ValueScript:
    code: str | None = None
    value: str | None = None
    uri: str | None = None
    source: Source | None = None


@dataclass(frozen=True, slots=True)
class ValueLanguage:
    code: str | None = None
    value: str | None = None
    uri: str | None = None
    source: Source | None = None
    value_script: ValueScript | None = None

    @property
    def script_code(self) -> str | None:
        return self.value_script.code if self.value_script else None


@dataclass(frozen=True, slots=True)
class Leaf:
    text: str


@dataclass(frozen=True, slots=True)
class Structured:
    parts: tuple[DescriptiveValue, ...]


@dataclass(frozen=True, slots=True)
class Parallel:
    variants: tuple[DescriptiveValue, ...]


@dataclass(frozen=True, slots=True)
class Empty:
    pass


ValueShape: TypeAlias = Leaf | Structured | Parallel | Empty


@dataclass(frozen=True, slots=True)
class DescriptiveValue:
    value: str | None = None
    structured_value: tuple[DescriptiveValue, ...] = ()
    parallel_value: tuple[DescriptiveValue, ...] = ()
    grouped_value: tuple[DescriptiveValue, ...] = ()
    type: str | None = None
    status: str | None = None
    code: str | None = None
    uri: str | None = None
    source: Source | None = None
    display_label: str | None = None
    encoding: Source | None = None
    standard: Source | None = None
    qualifier: str | None = None
    note: tuple[DescriptiveValue, ...] = ()
    value_language: ValueLanguage | None = None
    value_at: str | None = None

    @property
    def shape(self) -> ValueShape:
        populated = sum(
            (
                self.value is not None,
                bool(self.structured_value),
                bool(self.parallel_value),
            )
        )
        if populated != 1:
            return Empty()
        if self.value is not None:
            return Leaf(self.value)
        if self.structured_value:
            return Structured(self.structured_value)
        return Parallel(self.parallel_value)

    @property
    def is_primary(self) -> bool:
        return self.status == PRIMARY

    @property
    def is_invalid(self) -> bool:
        return self.status == INVALID

    @property
    def lang(self) -> str | None:
        return self.value_language.code if self.value_language else None

    @property
    def script(self) -> str | None:
        return self.value_language.script_code if self.value_language else None

    def notes_of_type(self, note_type: str) -> tuple[DescriptiveValue, ...]:
        return tuple(note for note in self.note if note.type == note_type)

    def first_note_value(self, note_type: str) -> str | None:
        for note in self.note:
            if note.type == note_type:
                return note.value
        return None

    def parts_of_type(self, part_type: str) -> tuple[DescriptiveValue, ...]:
        return tuple(part for part in self.structured_value if part.type == part_type)

    def flat_text(self, separator: str = " ") -> str | None:
        """Leaf text, or the structured parts' leaf text joined by ``separator``."""
        if self.value is not None:
            return self.value
        if self.structured_value:
            parts = [part.flat_text(separator) for part in self.structured_value]
            return separator.join(part for part in parts if part)
        return None

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> DescriptiveValue:
        return cls(
            value=_opt_str(data.get("value")),
            structured_value=values_from_list(data.get("structuredValue")),
            parallel_value=values_from_list(data.get("parallelValue")),
            grouped_value=values_from_list(data.get("groupedValue")),
            type=_opt_str(data.get("type")),
            status=_opt_str(data.get("status")),
            code=_opt_str(data.get("code")),
            uri=_opt_str(data.get("uri")),
            source=source_from_dict(data.get("source")),
            display_label=_opt_str(data.get("displayLabel")),
            encoding=source_from_dict(data.get("encoding")),
            standard=source_from_dict(data.get("standard")),
            qualifier=_opt_str(data.get("qualifier")),
            note=values_from_list(data.get("note")),
            value_language=value_language_from_dict(data.get("valueLanguage")),
            value_at=_opt_str(data.get("valueAt")),
        )


def source_from_dict(data: object) -> Source | None:
    mapping = as_mapping(data)
    if mapping is None:
        return None
    return Source(
        code=_opt_str(mapping.get("code")),
        uri=_opt_str(mapping.get("uri")),
        value=_opt_str(mapping.get("value")),
        version=_opt_str(mapping.get("version")),
        note=values_from_list(mapping.get("note")),
    )


def value_language_from_dict(data: object) -> ValueLanguage | None:
    mapping = as_mapping(data)
    if mapping is None:
        return None
    script = as_mapping(mapping.get("valueScript"))
    return ValueLanguage(
        code=_opt_str(mapping.get("code")),
        value=_opt_str(mapping.get("value")),
        uri=_opt_str(mapping.get("uri")),
        source=source_from_dict(mapping.get("source")),
        value_script=None
        if script is None
        else ValueScript(
            code=_opt_str(script.get("code")),
            value=_opt_str(script.get("value")),
            uri=_opt_str(script.get("uri")),
            source=source_from_dict(script.get("source")),
        ),
    )


def values_from_list(data: object) -> tuple[DescriptiveValue, ...]:
    return tuple(DescriptiveValue.from_dict(item) for item in mappings_in(data))


def mappings_in(data: object) -> list[Mapping[str, object]]:
    if not isinstance(data, Sequence) or isinstance(data, str):
        return []
    return [item for item in (as_mapping(entry) for entry in data) if item is not None]


def as_mapping(data: object) -> Mapping[str, object] | None:
    if isinstance(data, Mapping):
        return cast("Mapping[str, object]", data)
    return None


def _opt_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)
