"""
Identifier generation service.

Turns every (word -> translation) pair of the reduced dictionary into a
namespaced message identifier such as ``addresshierarchy.tonleBassac``.
Identifiers are camel-cased translations with quotes and dashes stripped;
when two words end up with the same identifier the later one gets a numeric
suffix (``.2``, ``.3``, ...).
"""
from __future__ import annotations

from typing import Mapping

from gazetteer_i18n.text_processing import camel_case
from gazetteer_i18n.types import GazetteerConfig, IdentifierTables, LogSink

QUOTE = "'"
DASH = "-"
FIRST_SUFFIX = 2


class IdentifierGenerationService:
    """Generates unique message identifiers and their lookup tables."""

    def __init__(self, config: GazetteerConfig):
        self._config = config

    def generate(self, dictionary: Mapping[str, str], log: LogSink | None = None) -> IdentifierTables:
        log = log if log is not None else LogSink()
        forward: dict[str, str] = {}
        reverse: dict[str, str] = {}

        for word, translation in dictionary.items():
            base = self.candidate_identifier(translation, log)
            identifier = self._resolve_collision(base, word, translation, forward, log)
            forward[identifier] = word
            reverse[word] = identifier

        return IdentifierTables(forward=forward, reverse=reverse, log=log)

    def candidate_identifier(self, translation: str, log: LogSink | None = None) -> str:
        """Namespace prefix + cleaned camel-case token, before collision handling."""
        return self._config.namespace_prefix + self.clean_token(translation, log)

    def clean_token(self, translation: str, log: LogSink | None = None) -> str:
        token = camel_case(translation)
        # both checks always run
        if QUOTE in token:
            if log is not None:
                log.info(f"'{translation}' contained ' (quotes) and were removed.")
            token = token.replace(QUOTE, "")
        if DASH in token:
            if log is not None:
                log.info(f"'{translation}' contained - (dashes) and were removed.")
            token = token.replace(DASH, "")
        return token

    def _resolve_collision(
        self,
        base: str,
        word: str,
        translation: str,
        forward: Mapping[str, str],
        log: LogSink,
    ) -> str:
        identifier = base
        suffix = FIRST_SUFFIX - 1
        while identifier in forward:
            suffix += 1
            identifier = f"{base}.{suffix}"
            log.warning(
                f"'{translation}' is the {self._config.target_language} translation for other "
                f"{self._config.source_language} names than '{word}', appending a suffix: {identifier}",
            )
        return identifier
