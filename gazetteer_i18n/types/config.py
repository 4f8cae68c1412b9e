"""
Configuration for gazetteer processing.

Holds the namespace, country root, language pair, input column layout and
output file naming used by every service.
"""
from __future__ import annotations

import configparser
from dataclasses import dataclass, fields, replace
from pathlib import Path

CONFIG_SECTION = "gazetteer"

_INT_FIELDS = ("level_column", "id_column", "target_column", "source_column", "parent_id_column")


@dataclass(frozen=True)
class GazetteerConfig:
    """Immutable configuration - defaults describe the Cambodian gazetteer."""

    namespace: str = "addresshierarchy"
    country_token: str = "cambodia"
    source_country_name: str = "ព្រះរាជាណាចក្រកម្ពុជា"
    target_country_name: str = "Kingdom of Cambodia"
    source_locale: str = "km_KH"
    target_locale: str = "en"
    source_language: str = "Khmer"
    target_language: str = "English"
    path_separator: str = ","
    log_file_name: str = "log.txt"

    # Input column positions
    level_column: int = 0
    id_column: int = 1
    target_column: int = 2
    source_column: int = 3
    parent_id_column: int = 4

    def __post_init__(self):
        if not self.namespace:
            raise ValueError("namespace must not be empty")
        if not self.country_token:
            raise ValueError("country_token must not be empty")
        if not self.path_separator:
            raise ValueError("path_separator must not be empty")
        columns = self.columns
        if any(column < 0 for column in columns):
            raise ValueError("column positions must be >= 0")
        if len(set(columns)) != len(columns):
            raise ValueError("column positions must be distinct")

    @classmethod
    def create_default(cls) -> GazetteerConfig:
        return cls()

    @classmethod
    def from_ini(cls, path: str | Path, base: GazetteerConfig | None = None) -> GazetteerConfig:
        """Read overrides from the ``[gazetteer]`` section of an ini file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"config file not found: {path}")

        parser = configparser.ConfigParser()
        parser.read(path, encoding="utf-8-sig")
        base = base or cls.create_default()
        if not parser.has_section(CONFIG_SECTION):
            return base

        known = {f.name for f in fields(cls)}
        overrides: dict[str, object] = {}
        for key, value in parser.items(CONFIG_SECTION):
            if key not in known:
                raise ValueError(f"unknown config key '{key}' in {path}")
            if key in _INT_FIELDS:
                try:
                    overrides[key] = int(value)
                except ValueError:
                    raise ValueError(f"config key '{key}' must be an integer, got '{value}'") from None
            else:
                overrides[key] = value
        return base.with_overrides(**overrides)

    def with_overrides(self, **overrides) -> GazetteerConfig:
        return replace(self, **overrides)

    @property
    def columns(self) -> tuple[int, ...]:
        return (self.level_column, self.id_column, self.target_column, self.source_column, self.parent_id_column)

    @property
    def namespace_prefix(self) -> str:
        return self.namespace + "."

    @property
    def country_identifier(self) -> str:
        return self.namespace_prefix + self.country_token

    @property
    def hierarchy_file_name(self) -> str:
        return f"{self.namespace}.csv"

    @property
    def source_properties_file_name(self) -> str:
        return f"{self.namespace}_{self.source_locale}.properties"

    @property
    def target_properties_file_name(self) -> str:
        return f"{self.namespace}_{self.target_locale}.properties"
