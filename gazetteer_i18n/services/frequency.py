"""
Frequency aggregation for name translations.

Counts how often each translation was observed for a word. Both mapping levels
keep first-seen insertion order, which the dictionary reducer relies on for
its tie-break.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping


class FrequencyTable:
    """word -> (translation -> occurrence count)."""

    def __init__(self):
        self._counts: dict[str, dict[str, int]] = {}

    def observe(self, word: str, translation: str) -> None:
        weights = self._counts.setdefault(word, {})
        weights[translation] = weights.get(translation, 0) + 1

    def candidates(self, word: str) -> Mapping[str, int]:
        """Candidates for ``word`` in first-seen order (empty if never observed)."""
        return MappingProxyType(self._counts.get(word, {}))

    def words(self) -> Iterator[str]:
        return iter(self._counts)

    def items(self) -> Iterator[tuple[str, Mapping[str, int]]]:
        for word, weights in self._counts.items():
            yield word, MappingProxyType(weights)

    def as_dict(self) -> dict[str, dict[str, int]]:
        return {word: dict(weights) for word, weights in self._counts.items()}

    def __contains__(self, word: str) -> bool:
        return word in self._counts

    def __len__(self) -> int:
        return len(self._counts)


class FrequencyAggregationService:
    """Builds one frequency table per translation direction."""

    def __init__(self):
        self.source_to_target = FrequencyTable()
        self.target_to_source = FrequencyTable()

    def observe_pair(self, source_name: str, target_name: str) -> None:
        self.source_to_target.observe(source_name, target_name)
        self.target_to_source.observe(target_name, source_name)

    def observe_records(self, records) -> FrequencyTable:
        """Observe every record in both directions; returns the source -> target table."""
        for record in records:
            self.observe_pair(record.name_source, record.name_target)
        return self.source_to_target
