"""
Dictionary reduction service.

Collapses the one-to-many translation frequencies into a one-to-one
dictionary. The most frequent translation wins; on equal counts the
translation seen first is kept.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from gazetteer_i18n.types import LogSink, ReductionResult

if TYPE_CHECKING:
    from gazetteer_i18n.services.frequency import FrequencyTable


class DictionaryReductionService:
    """Picks a single best translation per word."""

    def reduce(self, table: FrequencyTable, log: LogSink | None = None) -> ReductionResult:
        log = log if log is not None else LogSink()
        dictionary: dict[str, str] = {}

        for word, weights in table.items():
            if not weights:
                continue

            best_translation, _ = self.best_candidate(weights)
            dictionary[word] = best_translation

            if len(weights) > 1:
                log.warning(
                    f"'{word}' was translated as '{best_translation}'. "
                    f"The encountered translations were: {self.describe_candidates(weights)}",
                )

        return ReductionResult(dictionary=dictionary, log=log)

    @staticmethod
    def best_candidate(weights) -> tuple[str, int]:
        """Return (translation, count) with the strictly highest count, first seen on ties."""
        best_translation = ""
        best_count = 0
        for translation, count in weights.items():
            if count > best_count:
                best_translation = translation
                best_count = count
        return best_translation, best_count

    @staticmethod
    def describe_candidates(weights) -> str:
        """Pipe-delimited ``'candidate'(count)`` tokens, e.g. ``|'a'(2)|'b'(1)|``."""
        return "|" + "".join(f"'{translation}'({count})|" for translation, count in weights.items())
