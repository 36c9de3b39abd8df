"""Domain entities.

Core domain objects: the Cocina descriptive value model, the pydantic Cocina
schema and repository objects with their versions.
"""

from .description import (
    AdminMetadata,
    Contributor,
    Description,
    DescriptiveAccess,
    Event,
    Geographic,
    Language,
    RelatedResource,
    description_from_dict,
)
from .descriptive_value import (
    DescriptiveValue,
    Empty,
    Leaf,
    Parallel,
    Source,
    Structured,
    ValueLanguage,
    ValueScript,
)
from .repository_object import RepositoryObject, RepositoryObjectVersion, UserVersion

__all__ = [
    "AdminMetadata",
    "Contributor",
    "Description",
    "DescriptiveAccess",
    "DescriptiveValue",
    "Empty",
    "Event",
    "Geographic",
    "Language",
    "Leaf",
    "Parallel",
    "RelatedResource",
    "RepositoryObject",
    "RepositoryObjectVersion",
    "Source",
    "Structured",
    "UserVersion",
    "ValueLanguage",
    "ValueScript",
    "description_from_dict",
]
