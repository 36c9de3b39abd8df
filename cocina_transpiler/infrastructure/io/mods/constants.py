from typing import Final

MODS_NS: Final[str] = "http://www.loc.gov/mods/v3"
XLINK_NS: Final[str] = "http://www.w3.org/1999/xlink"
XSI_NS: Final[str] = "http://www.w3.org/2001/XMLSchema-instance"
RDF_NS: Final[str] = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
GML_NS: Final[str] = "http://www.opengis.net/gml/3.2/"
GMD_NS: Final[str] = "http://www.isotc211.org/2005/gmd"
DC_NS: Final[str] = "http://purl.org/dc/elements/1.1/"

MODS_VERSION: Final[str] = "3.6"
MODS_SCHEMA_LOCATION_TEMPLATE: Final[str] = (
    "http://www.loc.gov/mods/v3 http://www.loc.gov/standards/mods/v3/mods-{version}.xsd"
)

NAMESPACE_PREFIXES: Final[dict[str, str]] = {
    "": MODS_NS,
    "xlink": XLINK_NS,
    "xsi": XSI_NS,
    "rdf": RDF_NS,
    "gml": GML_NS,
    "gmd": GMD_NS,
    "dc": DC_NS,
}

ALT_REP_GROUP: Final[str] = "altRepGroup"
NAME_TITLE_GROUP: Final[str] = "nameTitleGroup"

# Controlled vocabulary labels carried in Cocina ``source.value`` / ``source.code``.
MARC_RELATOR: Final[str] = "marcrelator"
SELF_DEPOSIT_CONTRIBUTOR_TYPES: Final[str] = "Stanford self-deposit contributor types"
SELF_DEPOSIT_RESOURCE_TYPES: Final[str] = "Stanford self-deposit resource types"
DATACITE_PREFIX: Final[str] = "DataCite"
MODS_RESOURCE_TYPES: Final[str] = "MODS resource types"

DEFAULT_GEO_FORMAT: Final[str] = "image/jpeg"
DEFAULT_GEO_TYPE: Final[str] = "Image"
