"""
Path resolution service.

Walks each village up through commune and district to its province and
collects the message identifier of every entry on the way. A missing parent
fails the whole leaf: the broken entry is reported once and no partial path
is returned.
"""
from __future__ import annotations

import json
from typing import Mapping

from gazetteer_i18n.services.hierarchy import HierarchyIndex, HierarchyIndexService
from gazetteer_i18n.types import HierarchyEntry, LogSink, ResolutionResult


class PathResolutionService:
    """Resolves leaf entries into identifier paths ordered Province first."""

    def resolve(
        self,
        entry: HierarchyEntry,
        index: HierarchyIndex,
        reverse: Mapping[str, str],
        log: LogSink | None = None,
    ) -> ResolutionResult:
        log = log if log is not None else LogSink()
        path: list[str] = []
        current = entry

        # at most one step per level, the chain ends at Province
        while True:
            identifier = reverse.get(current.name)
            if identifier is None:
                message = f"No identifier found for entry: {self.describe_entry(current)}"
                log.error(message)
                return ResolutionResult.failure(message)
            path.insert(0, identifier)

            parent_level = current.level.parent
            if parent_level is None:
                return ResolutionResult.success_with_path(path)

            parent = HierarchyIndexService.lookup(index, parent_level, current.parent_id)
            if parent is None:
                message = f"No parent found for entry: {self.describe_entry(current)}"
                log.error(message)
                return ResolutionResult.failure(message)
            current = parent

    @staticmethod
    def describe_entry(entry: HierarchyEntry) -> str:
        return json.dumps(entry.as_dict(), ensure_ascii=False, separators=(",", ":"))
