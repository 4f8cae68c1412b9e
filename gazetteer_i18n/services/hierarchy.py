"""
Hierarchy index service.

Indexes gazetteer records by level and id. Parent references are not checked
here; broken links surface during path resolution.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from gazetteer_i18n.types import GazetteerRecord, HierarchyEntry, Level

HierarchyIndex = Mapping[Level, Mapping[str, HierarchyEntry]]


class HierarchyIndexService:
    """Builds the level -> id -> entry index."""

    def index(self, records: Iterable[GazetteerRecord]) -> HierarchyIndex:
        levels: dict[Level, dict[str, HierarchyEntry]] = {}
        for record in records:
            # last record with the same (level, id) wins
            levels.setdefault(record.level, {})[record.id] = HierarchyEntry.from_record(record)
        return MappingProxyType({level: MappingProxyType(entries) for level, entries in levels.items()})

    @staticmethod
    def lookup(index: HierarchyIndex, level: Level, entry_id: str) -> HierarchyEntry | None:
        """Entry at ``(level, entry_id)``; ``None`` when the level or the id is missing."""
        return index.get(level, {}).get(entry_id)

    @staticmethod
    def entries_at(index: HierarchyIndex, level: Level) -> list[HierarchyEntry]:
        return list(index.get(level, {}).values())
