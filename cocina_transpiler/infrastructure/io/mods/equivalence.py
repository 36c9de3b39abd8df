"""Structural comparison of two MODS documents.

Two documents are equivalent when they have the same elements in the same
order, the same attributes and the same whitespace-normalized text. Group ids
(altRepGroup, nameTitleGroup) only need to correspond one-to-one: ``1``/``2``
in one document may be ``2``/``1`` in the other.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from xml.etree import ElementTree as ET

from ..xml_utils import XmlElement, local_name
from .constants import ALT_REP_GROUP, NAME_TITLE_GROUP

GROUP_ATTRIBUTES: frozenset[str] = frozenset({ALT_REP_GROUP, NAME_TITLE_GROUP})


def normalize_text(text: str | None) -> str:
    return " ".join((text or "").split())


def _empty_mapping() -> dict[tuple[str, str], str]:
    return {}


@dataclass(slots=True)
class ModsEquivalence:
    """Reports the differences between an expected and an actual document."""

    _forward: dict[tuple[str, str], str] = field(default_factory=_empty_mapping)
    _backward: dict[tuple[str, str], str] = field(default_factory=_empty_mapping)

    def compare(
        self, expected: str | XmlElement, actual: str | XmlElement
    ) -> list[str]:
        self._forward.clear()
        self._backward.clear()
        differences: list[str] = []
        expected_root = _as_element(expected)
        self._compare(
            expected_root, _as_element(actual), f"/{local_name(expected_root.tag)}", differences
        )
        return differences

    def equivalent(self, expected: str | XmlElement, actual: str | XmlElement) -> bool:
        return not self.compare(expected, actual)

    def _compare(
        self,
        expected: XmlElement,
        actual: XmlElement,
        path: str,
        differences: list[str],
    ) -> None:
        if expected.tag != actual.tag:
            differences.append(f"{path}: expected <{expected.tag}>, found <{actual.tag}>")
            return
        self._compare_attributes(expected, actual, path, differences)
        expected_text = normalize_text(expected.text)
        actual_text = normalize_text(actual.text)
        if expected_text != actual_text:
            differences.append(
                f"{path}: expected text {expected_text!r}, found {actual_text!r}"
            )

        expected_children = _children(expected)
        actual_children = _children(actual)
        if len(expected_children) != len(actual_children):
            differences.append(
                f"{path}: expected {len(expected_children)} child elements "
                f"({_tags(expected_children)}), found {len(actual_children)} "
                f"({_tags(actual_children)})"
            )
        for index, (expected_child, actual_child) in enumerate(
            zip(expected_children, actual_children, strict=False)
        ):
            child_path = f"{path}/{local_name(expected_child.tag)}[{index}]"
            self._compare(expected_child, actual_child, child_path, differences)

    def _compare_attributes(
        self,
        expected: XmlElement,
        actual: XmlElement,
        path: str,
        differences: list[str],
    ) -> None:
        for name in sorted(set(expected.attrib) | set(actual.attrib)):
            expected_value = expected.attrib.get(name)
            actual_value = actual.attrib.get(name)
            if expected_value is None or actual_value is None:
                differences.append(
                    f"{path}/@{local_name(name)}: expected {expected_value!r}, "
                    f"found {actual_value!r}"
                )
            elif name in GROUP_ATTRIBUTES:
                if not self._groups_correspond(name, expected_value, actual_value):
                    differences.append(
                        f"{path}/@{name}: group {expected_value!r} does not "
                        f"correspond to {actual_value!r}"
                    )
            elif normalize_text(expected_value) != normalize_text(actual_value):
                differences.append(
                    f"{path}/@{local_name(name)}: expected {expected_value!r}, "
                    f"found {actual_value!r}"
                )

    def _groups_correspond(self, name: str, expected: str, actual: str) -> bool:
        mapped = self._forward.setdefault((name, expected), actual)
        reverse = self._backward.setdefault((name, actual), expected)
        return mapped == actual and reverse == expected


def _as_element(document: str | XmlElement) -> XmlElement:
    if isinstance(document, str):
        return ET.fromstring(document)
    return document


def _children(element: XmlElement) -> list[XmlElement]:
    # Comments and processing instructions have a non-string tag.
    return [child for child in element if isinstance(child.tag, str)]


def _tags(elements: list[XmlElement]) -> str:
    return ", ".join(local_name(element.tag) for element in elements)
