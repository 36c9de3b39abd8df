from dataclasses import dataclass, field

DruidVersion = tuple[str, int]


def _empty_keys() -> set[DruidVersion]:
    return set()


@dataclass(slots=True)
class StaticWorkflowState:
    """Workflow answers fixed up front.

    Objects are considered accessioned unless listed in ``not_accessioned``;
    accessioning and assembling are opt-in per ``(druid, version)``.
    """

    not_accessioned: set[DruidVersion] = field(default_factory=_empty_keys)
    accessioning: set[DruidVersion] = field(default_factory=_empty_keys)
    assembling: set[DruidVersion] = field(default_factory=_empty_keys)

    def is_accessioned(self, druid: str, version: int) -> bool:
        return (druid, version) not in self.not_accessioned

    def is_accessioning(self, druid: str, version: int) -> bool:
        return (druid, version) in self.accessioning

    def is_assembling(self, druid: str, version: int) -> bool:
        return (druid, version) in self.assembling
