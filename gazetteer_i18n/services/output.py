"""
Output assembly service.

Renders the address hierarchy table, the two message property tables and the
log resource from a build result, and writes them into a target directory.
"""
from __future__ import annotations

import logging
from pathlib import Path

from gazetteer_i18n.types import BuildResult, GazetteerConfig

logger = logging.getLogger(__name__)


class OutputAssemblyService:
    """Renders and persists the four output artifacts."""

    def __init__(self, config: GazetteerConfig):
        self._config = config

    def render_address_hierarchy(self, result: BuildResult) -> str:
        separator = self._config.path_separator
        return "".join(
            separator.join((self._config.country_identifier, *line.identifiers)) + "\n"
            for line in result.address_lines
        )

    def render_source_properties(self, result: BuildResult) -> str:
        lines = [f"{self._config.country_identifier}={self._config.source_country_name}"]
        lines.extend(f"{identifier}={word}" for identifier, word in result.identifiers.forward.items())
        return "".join(line + "\n" for line in lines)

    def render_target_properties(self, result: BuildResult) -> str:
        lines = [f"{self._config.country_identifier}={self._config.target_country_name}"]
        lines.extend(
            f"{identifier}={result.dictionary[word]}" for identifier, word in result.identifiers.forward.items()
        )
        return "".join(line + "\n" for line in lines)

    def render_log(self, result: BuildResult) -> str:
        return result.log.render()

    def render_all(self, result: BuildResult) -> dict[str, str]:
        """File name -> content, in write order (log last)."""
        config = self._config
        return {
            config.hierarchy_file_name: self.render_address_hierarchy(result),
            config.source_properties_file_name: self.render_source_properties(result),
            config.target_properties_file_name: self.render_target_properties(result),
            config.log_file_name: self.render_log(result),
        }

    def write(self, result: BuildResult, target_dir: str | Path) -> list[Path]:
        target_dir = Path(target_dir)
        target_dir.mkdir(parents=True, exist_ok=True)

        written = []
        for file_name, content in self.render_all(result).items():
            path = target_dir / file_name
            path.write_text(content, encoding="utf-8")
            logger.debug(f"Wrote {path} ({len(content)} characters)")
            written.append(path)
        return written
