"""
Record types for gazetteer processing.

This module contains the administrative level enumeration, the immutable
input record and the hierarchy entry stored by the hierarchy index.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Level(str, Enum):
    """The four fixed administrative levels, values as spelled in the gazetteer."""

    PROVINCE = "Province"
    DISTRICT = "District"
    COMMUNE = "Commune"
    VILLAGE = "Village"

    @property
    def parent(self) -> Level | None:
        """Level one step up the hierarchy, ``None`` for Province."""
        return PARENT_LEVELS[self]

    @classmethod
    def parse(cls, value: str) -> Level:
        """Return the level named ``value`` (surrounding whitespace ignored)."""
        try:
            return cls(value.strip())
        except ValueError:
            raise ValueError(f"unknown level '{value}'") from None


# Village -> Commune -> District -> Province -> root
PARENT_LEVELS: dict[Level, Level | None] = {
    Level.VILLAGE: Level.COMMUNE,
    Level.COMMUNE: Level.DISTRICT,
    Level.DISTRICT: Level.PROVINCE,
    Level.PROVINCE: None,
}

LEAF_LEVEL = Level.VILLAGE


@dataclass(frozen=True)
class GazetteerRecord:
    """One gazetteer row."""

    level: Level
    id: str
    parent_id: str
    name_source: str
    name_target: str


@dataclass(frozen=True)
class HierarchyEntry:
    """Entry of the hierarchy index, named by its source-language name."""

    id: str
    level: Level
    name: str
    parent_id: str

    @classmethod
    def from_record(cls, record: GazetteerRecord) -> HierarchyEntry:
        return cls(id=record.id, level=record.level, name=record.name_source, parent_id=record.parent_id)

    def as_dict(self) -> dict[str, str]:
        """Serializable view used in error reports."""
        return {"id": self.id, "level": self.level.value, "name": self.name, "parentId": self.parent_id}
