from dataclasses import dataclass, field

from .group_allocator import GroupAllocator
from .name_title_groups import NameTitleGroupIndex


@dataclass(slots=True)
class WriterContext:
    """State shared by the writers of one transformation pass."""

    groups: GroupAllocator = field(default_factory=GroupAllocator)
    name_title_groups: NameTitleGroupIndex = field(default_factory=NameTitleGroupIndex)
