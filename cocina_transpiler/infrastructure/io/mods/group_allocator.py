from dataclasses import dataclass


@dataclass(slots=True)
class GroupAllocator:
    """Hands out altRepGroup and nameTitleGroup ids for one transformation.

    Both counters start at 1 and only increase. A new allocator is created for
    every ``transform`` call and is never shared between calls.
    """

    _alt_rep_group: int = 0
    _name_title_group: int = 0

    def next_alt_rep_group(self) -> str:
        self._alt_rep_group += 1
        return str(self._alt_rep_group)

    def next_name_title_group(self) -> str:
        self._name_title_group += 1
        return str(self._name_title_group)
