from __future__ import annotations

from typing import TYPE_CHECKING, override
from xml.etree import ElementTree as ET

from ...application.ports.services import ModsTransformerPort
from .mods.constants import MODS_VERSION
from .mods.descriptive_transformer import DEFAULT_PURL_BASE_URL, transform
from .xml_utils import to_xml_string

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.description import Description
    from .xml_utils import XmlElement


class ModsGenerator(ModsTransformerPort):
    pass

    def __init__(
        self,
        *,
        purl_base_url: str = DEFAULT_PURL_BASE_URL,
        mods_version: str = MODS_VERSION,
        pretty_print: bool = True,
    ) -> None:
        super().__init__()
        self.purl_base_url = purl_base_url
        self.mods_version = mods_version
        self.pretty_print = pretty_print

    def build(
        self, description: Description, druid: str, *, purl: str | None = None
    ) -> XmlElement:
        return transform(
            description,
            druid,
            purl=purl,
            purl_base_url=self.purl_base_url,
            mods_version=self.mods_version,
        )

    @override
    def generate(
        self, description: Description, druid: str, *, purl: str | None = None
    ) -> str:
        root = self.build(description, druid, purl=purl)
        return to_xml_string(root, pretty=self.pretty_print)

    @override
    def write(
        self,
        description: Description,
        druid: str,
        output_path: Path,
        *,
        purl: str | None = None,
    ) -> None:
        root = self.build(description, druid, purl=purl)
        tree = ET.ElementTree(root)
        if self.pretty_print:
            ET.indent(tree, space="  ")
        output_path.parent.mkdir(parents=True, exist_ok=True)
        tree.write(output_path, xml_declaration=True, encoding="UTF-8")
