from collections.abc import Mapping
from typing import TYPE_CHECKING, TypeAlias
from xml.etree import ElementTree as ET
from xml.etree.ElementTree import Element

if TYPE_CHECKING:
    XmlElement: TypeAlias = Element[str]
else:
    XmlElement: TypeAlias = Element


def tag(namespace: str, name: str) -> str:
    return f"{{{namespace}}}{name}"


def attr(namespace: str, name: str) -> str:
    return f"{{{namespace}}}{name}"


def compact_attrs(attrs: Mapping[str, str | None]) -> dict[str, str]:
    return {key: value for key, value in attrs.items() if value is not None}


def local_name(qualified: str) -> str:
    return qualified.rsplit("}", 1)[-1]


def to_xml_string(root: XmlElement, *, pretty: bool = True) -> str:
    tree = ET.ElementTree(root)
    if pretty:
        ET.indent(tree, space="  ")
    return ET.tostring(root, encoding="unicode", xml_declaration=True)
