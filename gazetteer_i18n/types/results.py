"""
Result types for gazetteer processing.

This module contains the data-quality log sink, the success/failure result of
path resolution and the immutable containers returned by each pipeline stage.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

from gazetteer_i18n.paths import logger

if TYPE_CHECKING:
    from gazetteer_i18n.types.records import HierarchyEntry, Level


class Severity(str, Enum):
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.value)


@dataclass(frozen=True)
class LogEntry:
    """One data-quality event."""

    severity: Severity
    message: str

    def render(self) -> str:
        return f"{self.severity.value},{self.message}"


class LogSink:
    """
    Append-only buffer of data-quality events.

    Entries keep emission order and are never deduplicated. Each entry is also
    forwarded to the package logger at the matching level.
    """

    def __init__(self):
        self._entries: list[LogEntry] = []

    def append(self, severity: Severity, message: str) -> LogEntry:
        entry = LogEntry(severity, message)
        self._entries.append(entry)
        logger.log(severity.logging_level, message)
        return entry

    def info(self, message: str) -> LogEntry:
        return self.append(Severity.INFO, message)

    def warning(self, message: str) -> LogEntry:
        return self.append(Severity.WARNING, message)

    def error(self, message: str) -> LogEntry:
        return self.append(Severity.ERROR, message)

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        return tuple(self._entries)

    def count(self, severity: Severity) -> int:
        return sum(1 for entry in self._entries if entry.severity is severity)

    def render(self) -> str:
        """Log resource text: one ``SEVERITY,message`` line per entry."""
        return "".join(entry.render() + "\n" for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)


@dataclass(frozen=True)
class ResolutionResult:
    """Result of resolving one leaf entry - success carries the identifier path."""

    success: bool
    identifiers: tuple[str, ...] = ()
    error_message: str | None = None

    @classmethod
    def success_with_path(cls, identifiers: list[str] | tuple[str, ...]) -> ResolutionResult:
        return cls(success=True, identifiers=tuple(identifiers), error_message=None)

    @classmethod
    def failure(cls, error_message: str) -> ResolutionResult:
        return cls(success=False, identifiers=(), error_message=error_message)


@dataclass(frozen=True)
class ReductionResult:
    """Output of the dictionary reducer."""

    dictionary: Mapping[str, str]
    log: LogSink

    def __post_init__(self):
        object.__setattr__(self, "dictionary", MappingProxyType(dict(self.dictionary)))


@dataclass(frozen=True)
class IdentifierTables:
    """Forward (identifier -> word) and reverse (word -> identifier) tables."""

    forward: Mapping[str, str]
    reverse: Mapping[str, str]
    log: LogSink

    def __post_init__(self):
        object.__setattr__(self, "forward", MappingProxyType(dict(self.forward)))
        object.__setattr__(self, "reverse", MappingProxyType(dict(self.reverse)))


@dataclass(frozen=True)
class AddressLine:
    """A resolved leaf and its identifier path, Province first."""

    leaf: HierarchyEntry
    identifiers: tuple[str, ...]


@dataclass(frozen=True)
class BuildResult:
    """Every stage output of one run plus the shared log."""

    source_to_target: Mapping[str, Mapping[str, int]]
    target_to_source: Mapping[str, Mapping[str, int]]
    dictionary: Mapping[str, str]
    identifiers: IdentifierTables
    hierarchy: Mapping[Level, Mapping[str, HierarchyEntry]]
    address_lines: tuple[AddressLine, ...]
    dropped_leaves: tuple[HierarchyEntry, ...]
    log: LogSink = field(default_factory=LogSink)

    @property
    def resolved_count(self) -> int:
        return len(self.address_lines)

    @property
    def dropped_count(self) -> int:
        return len(self.dropped_leaves)
