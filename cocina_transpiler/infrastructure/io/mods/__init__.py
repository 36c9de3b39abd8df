"""MODS 3.6 generation from Cocina descriptions (infrastructure).

Keep this package's public surface minimal; import implementation details from
their defining modules.
"""

from .constants import MODS_NS, MODS_VERSION
from .descriptive_transformer import transform
from .equivalence import ModsEquivalence
from .group_allocator import GroupAllocator

__all__ = [
    "MODS_NS",
    "MODS_VERSION",
    "GroupAllocator",
    "ModsEquivalence",
    "transform",
]
