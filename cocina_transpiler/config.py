from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .application.models import DEFAULT_USER_VERSION_MODE, UserVersionMode
from .infrastructure.io.mods.constants import MODS_VERSION
from .infrastructure.io.mods.descriptive_transformer import DEFAULT_PURL_BASE_URL

SUPPORTED_MODS_VERSIONS: frozenset[str] = frozenset({"3.3", "3.4", "3.5", "3.6", "3.7"})
DEFAULT_CONFIG_FILE = "cocina_transpiler.toml"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True, slots=True)
class TranspilerConfig:
    purl_base_url: str = DEFAULT_PURL_BASE_URL
    mods_version: str = MODS_VERSION
    pretty_print: bool = True
    user_version_mode: UserVersionMode = DEFAULT_USER_VERSION_MODE
    sync_with_preservation: bool = False

    def __post_init__(self) -> None:
        if not self.purl_base_url.startswith(("http://", "https://")):
            raise ValueError(
                f"purl_base_url must be an http(s) URL, got {self.purl_base_url!r}"
            )
        if self.mods_version not in SUPPORTED_MODS_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_MODS_VERSIONS))
            raise ValueError(
                f"mods_version must be one of {supported}, got {self.mods_version!r}"
            )
        object.__setattr__(
            self, "user_version_mode", UserVersionMode.parse(self.user_version_mode)
        )

    @classmethod
    def from_env(cls) -> TranspilerConfig:
        return cls(
            purl_base_url=os.getenv("PURL_BASE_URL", DEFAULT_PURL_BASE_URL).rstrip("/"),
            mods_version=os.getenv("MODS_VERSION", MODS_VERSION),
            pretty_print=_coerce_bool(
                os.getenv("MODS_PRETTY_PRINT", "true"), key="MODS_PRETTY_PRINT"
            ),
            user_version_mode=UserVersionMode.parse(
                os.getenv("USER_VERSION_MODE", DEFAULT_USER_VERSION_MODE.value)
            ),
            sync_with_preservation=_coerce_bool(
                os.getenv("SYNC_WITH_PRESERVATION", "false"),
                key="SYNC_WITH_PRESERVATION",
            ),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> TranspilerConfig:
        config = TranspilerConfig.from_env()
        if config_file is None:
            config_file = Path(DEFAULT_CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except (OSError, tomllib.TOMLDecodeError, ValueError) as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: TranspilerConfig
    ) -> TranspilerConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        mods_section = _get_table(data, "mods")
        versioning = _get_table(data, "versioning")
        purl_base_url = base_config.purl_base_url
        if value := mods_section.get("purl_base_url"):
            purl_base_url = str(value).rstrip("/")
        mods_version = base_config.mods_version
        if (value := mods_section.get("version")) is not None:
            mods_version = str(value)
        pretty_print = base_config.pretty_print
        if (value := mods_section.get("pretty_print")) is not None:
            pretty_print = _coerce_bool(value, key="mods.pretty_print")
        user_version_mode = base_config.user_version_mode
        if (value := versioning.get("user_version_mode")) is not None:
            user_version_mode = UserVersionMode.parse(str(value))
        sync_with_preservation = base_config.sync_with_preservation
        if (value := versioning.get("sync_with_preservation")) is not None:
            sync_with_preservation = _coerce_bool(
                value, key="versioning.sync_with_preservation"
            )
        return TranspilerConfig(
            purl_base_url=purl_base_url,
            mods_version=mods_version,
            pretty_print=pretty_print,
            user_version_mode=user_version_mode,
            sync_with_preservation=sync_with_preservation,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_bool(value: object, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    raise ValueError(f"{key} must be a boolean, got {value!r}")
