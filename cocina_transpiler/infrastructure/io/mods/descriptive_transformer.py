"""Cocina description → MODS 3.6 document.

The writers run in a fixed order. A fresh ``GroupAllocator`` is created for
every call, so altRepGroup and nameTitleGroup ids restart at 1 per document
and nothing is shared between calls.
"""

from __future__ import annotations

from xml.etree import ElementTree as ET

from cocina_transpiler.domain.entities.description import Description, RelatedResource

from ..xml_utils import XmlElement, attr
from .admin_metadata_writer import write_admin_metadata
from .constants import MODS_SCHEMA_LOCATION_TEMPLATE, MODS_VERSION, XSI_NS
from .context import WriterContext
from .contributor_writer import write_contributors
from .elements import mods_tag
from .event_writer import write_events
from .form_writer import write_forms
from .geographic_writer import write_geographic
from .group_allocator import GroupAllocator
from .identifier_writer import write_identifiers
from .language_writer import write_languages
from .location_writer import write_location
from .name_title_groups import NameTitleGroupIndex
from .note_writer import write_notes
from .related_resource_writer import write_related_resources
from .subject_writer import write_subjects
from .title_writer import write_titles

DEFAULT_PURL_BASE_URL = "http://purl.stanford.edu"
DRUID_PREFIX = "druid:"


def bare_druid(druid: str) -> str:
    return druid.removeprefix(DRUID_PREFIX)


def purl_for(druid: str, base_url: str = DEFAULT_PURL_BASE_URL) -> str:
    return f"{base_url.rstrip('/')}/{bare_druid(druid)}"


def schema_location(mods_version: str = MODS_VERSION) -> str:
    return MODS_SCHEMA_LOCATION_TEMPLATE.format(version=mods_version.replace(".", "-"))


def transform(
    description: Description,
    druid: str,
    *,
    purl: str | None = None,
    purl_base_url: str = DEFAULT_PURL_BASE_URL,
    mods_version: str = MODS_VERSION,
) -> XmlElement:
    """Build the MODS ``mods`` element for one Cocina description.

    Args:
        description: The description to map.
        druid: Object identifier; used for the geo extension's ``rdf:about``.
        purl: Public URL written as the primary display location. Falls back
            to ``description.purl``; no PURL location is written when both are
            missing.
        purl_base_url: Base for the geo extension resource URI.
        mods_version: Value of ``mods/@version``.

    Returns:
        The root ``mods`` element.
    """
    root: XmlElement = ET.Element(
        mods_tag("mods"),
        attrib={
            "version": mods_version,
            attr(XSI_NS, "schemaLocation"): schema_location(mods_version),
        },
    )
    groups = GroupAllocator()
    context = _context_for(description, groups)
    location_purl = purl or description.purl

    write_titles_and_contributors(root, description, context)
    write_events(root, description.event, context)
    write_geographic(root, description.geographic, purl_for(druid, purl_base_url))
    write_subjects(root, description.subject, context, forms=description.form)
    write_forms(root, description.form, subjects=description.subject)
    write_languages(root, description.language)
    write_notes(root, description.note, context)
    write_identifiers(root, description.identifier)
    write_related_resources(root, description.related_resource, groups, write_related_content)
    write_location(root, description.access, location_purl)
    write_admin_metadata(root, description.admin_metadata)
    return root


def write_related_content(
    related_item: XmlElement, related: RelatedResource, groups: GroupAllocator
) -> None:
    """Write a related resource's own descriptive content inside ``relatedItem``."""
    context = _context_for(related, groups)
    write_titles_and_contributors(related_item, related, context)
    write_events(related_item, related.event, context)
    write_subjects(related_item, related.subject, context, forms=related.form)
    write_forms(related_item, related.form, subjects=related.subject)
    write_languages(related_item, related.language)
    write_notes(related_item, related.note, context)
    write_identifiers(related_item, related.identifier)
    write_related_resources(
        related_item, related.related_resource, groups, write_related_content
    )
    write_location(related_item, related.access, related.purl)
    write_admin_metadata(related_item, related.admin_metadata)


def write_titles_and_contributors(
    parent: XmlElement,
    content: Description | RelatedResource,
    context: WriterContext,
) -> None:
    write_titles(parent, content.title, context, contributors=content.contributor)
    write_contributors(parent, content.contributor, context)


def _context_for(
    content: Description | RelatedResource, groups: GroupAllocator
) -> WriterContext:
    return WriterContext(
        groups=groups,
        name_title_groups=NameTitleGroupIndex.build(
            content.title, content.contributor, groups
        ),
    )
