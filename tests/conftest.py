from collections.abc import Callable, Mapping

import pytest

from cocina_transpiler.domain.entities.description import description_from_dict
from cocina_transpiler.infrastructure.io.mods.descriptive_transformer import transform
from cocina_transpiler.infrastructure.io.xml_utils import XmlElement

DRUID = "druid:bc123df4567"

ModsBuilder = Callable[..., XmlElement]


@pytest.fixture
def mods() -> ModsBuilder:
    """Transform a camelCase Cocina description dict and return the ``mods`` root."""

    def build(
        description: Mapping[str, object],
        *,
        druid: str = DRUID,
        purl: str | None = None,
    ) -> XmlElement:
        return transform(description_from_dict(description), druid, purl=purl)

    return build


@pytest.fixture(autouse=True)
def _isolated_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables out of config-dependent tests."""
    for name in (
        "PURL_BASE_URL",
        "MODS_VERSION",
        "MODS_PRETTY_PRINT",
        "USER_VERSION_MODE",
        "SYNC_WITH_PRESERVATION",
    ):
        monkeypatch.delenv(name, raising=False)
