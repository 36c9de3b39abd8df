"""Infrastructure I/O layer.

This package contains adapters for reading Cocina JSON and writing MODS and
versionMetadata XML.

Architecture note:
- Avoid re-exporting symbols from here; import from the defining modules.
- Application DTOs live in cocina_transpiler.application.models.
"""

from .exceptions import (
    CocinaFileError,
    CocinaFileNotFoundError,
    CocinaFileParseError,
    CocinaFileShapeError,
)
from .mods_generator import ModsGenerator

__all__ = [
    "CocinaFileError",
    "CocinaFileNotFoundError",
    "CocinaFileParseError",
    "CocinaFileShapeError",
    "ModsGenerator",
]
