"""``versionMetadata`` document for a repository object.

One ``version`` element per object version, in version order, each holding its
description. The document is unnamespaced.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from xml.etree import ElementTree as ET

from .xml_utils import to_xml_string

if TYPE_CHECKING:
    from ...domain.entities.repository_object import RepositoryObject
    from .xml_utils import XmlElement


def build_version_metadata(repository_object: RepositoryObject) -> XmlElement:
    root = ET.Element("versionMetadata", {"objectId": repository_object.external_identifier})
    for object_version in sorted(repository_object.versions, key=lambda v: v.version):
        version_element = ET.SubElement(root, "version", {"versionId": str(object_version.version)})
        description = ET.SubElement(version_element, "description")
        description.text = object_version.description or ""
    return root


def version_xml(repository_object: RepositoryObject, *, pretty: bool = True) -> str:
    return to_xml_string(build_version_metadata(repository_object), pretty=pretty)
