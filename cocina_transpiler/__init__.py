"""Cocina Transpiler package.

This package maps Cocina descriptive metadata to MODS XML and manages the
version lifecycle of repository objects.

Features:
- MODS 3.6 generation from Cocina descriptions
- Structural MODS equivalence checks
- Version open/close with optimistic locking and user versions
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("cocina-transpiler")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# Core exports
from cocina_transpiler.domain.entities.description import (
    Description,
    description_from_dict,
)
from cocina_transpiler.infrastructure.io.mods.descriptive_transformer import transform
from cocina_transpiler.infrastructure.io.mods.equivalence import ModsEquivalence

__all__ = [
    "__version__",
    # MODS
    "transform",
    "ModsEquivalence",
    # Descriptive model
    "Description",
    "description_from_dict",
]
