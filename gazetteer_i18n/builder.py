"""
Address Hierarchy Builder

This module turns a flat bilingual gazetteer (Province, District, Commune,
Village rows with a parent reference each) into message-keyed address
hierarchy data and message property files.

## Overview

The `AddressHierarchyBuilder` runs a fixed, single-pass pipeline:

1. **Frequency Aggregation**: counts every observed (source name, target name) pair
2. **Dictionary Reduction**: keeps the most frequent translation per source name
3. **Identifier Generation**: derives unique `addresshierarchy.*` message keys
4. **Hierarchy Indexing**: indexes entries by level and id
5. **Path Resolution**: walks every village up to its province
6. **Output Assembly**: renders the address CSV, two property files and the log

## Outputs

- `addresshierarchy.csv`: `addresshierarchy.cambodia,<province>,<district>,<commune>,<village>`
- `addresshierarchy_km_KH.properties`: message key -> Khmer name
- `addresshierarchy_en.properties`: message key -> English name
- `log.txt`: `SEVERITY,message` lines

## Data Quality Log

Nothing in the data aborts a run. Problems are written to the log instead:
- `WARNING`: a name had several translations, or two names share a message key
- `INFO`: quotes or dashes were removed from a message key
- `ERROR`: a malformed input row, or an entry whose parent does not exist
  (the village is left out of the address CSV)

## Usage

```python
from gazetteer_i18n import AddressHierarchyBuilder

builder = AddressHierarchyBuilder()
result = builder.run("gazetteer.csv", "target")
print(result.resolved_count, result.dropped_count)

# In-memory use
result = builder.build(records)
lines = builder.output.render_address_hierarchy(result)
```
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from gazetteer_i18n.services import (
    DictionaryReductionService,
    FrequencyAggregationService,
    GazetteerReader,
    HierarchyIndexService,
    IdentifierGenerationService,
    OutputAssemblyService,
    PathResolutionService,
)
from gazetteer_i18n.types import (
    LEAF_LEVEL,
    AddressLine,
    BuildResult,
    GazetteerConfig,
    GazetteerRecord,
    LogSink,
    Severity,
)

logger = logging.getLogger(__name__)


class AddressHierarchyBuilder:
    """Main address hierarchy pipeline."""

    def __init__(self, config: GazetteerConfig | None = None):
        self._config = config or GazetteerConfig.create_default()
        self.reader = GazetteerReader(self._config)
        self._reducer = DictionaryReductionService()
        self._identifier_service = IdentifierGenerationService(self._config)
        self._hierarchy_service = HierarchyIndexService()
        self._resolution_service = PathResolutionService()
        self.output = OutputAssemblyService(self._config)

    @property
    def config(self) -> GazetteerConfig:
        return self._config

    def build(self, records: Iterable[GazetteerRecord], log: LogSink | None = None) -> BuildResult:
        """Run every stage on in-memory records and return all intermediate tables."""
        log = log if log is not None else LogSink()
        records = list(records)

        aggregator = FrequencyAggregationService()
        table = aggregator.observe_records(records)
        logger.debug(f"Observed {len(records)} records, {len(table)} distinct source names")

        reduction = self._reducer.reduce(table, log)
        identifiers = self._identifier_service.generate(reduction.dictionary, log)
        hierarchy = self._hierarchy_service.index(records)

        address_lines = []
        dropped = []
        for leaf in self._hierarchy_service.entries_at(hierarchy, LEAF_LEVEL):
            resolution = self._resolution_service.resolve(leaf, hierarchy, identifiers.reverse, log)
            if resolution.success:
                address_lines.append(AddressLine(leaf=leaf, identifiers=resolution.identifiers))
            else:
                dropped.append(leaf)

        logger.info(
            f"Resolved {len(address_lines)} of {len(address_lines) + len(dropped)} villages, "
            f"{len(identifiers.forward)} identifiers, {log.count(Severity.ERROR)} errors",
        )

        return BuildResult(
            source_to_target=table.as_dict(),
            target_to_source=aggregator.target_to_source.as_dict(),
            dictionary=reduction.dictionary,
            identifiers=identifiers,
            hierarchy=hierarchy,
            address_lines=tuple(address_lines),
            dropped_leaves=tuple(dropped),
            log=log,
        )

    def build_from_file(self, input_path: str | Path) -> BuildResult:
        log = LogSink()
        records = self.reader.read(input_path, log)
        return self.build(records, log)

    def run(self, input_path: str | Path, target_dir: str | Path) -> BuildResult:
        """Read the gazetteer, build, and write all four artifacts (log last)."""
        result = self.build_from_file(input_path)
        self.output.write(result, target_dir)
        return result
