"""
Types package for gazetteer processing.

This package contains record types, result types, the log sink and the
configuration class used throughout the address hierarchy pipeline.
"""

from gazetteer_i18n.types.config import GazetteerConfig
from gazetteer_i18n.types.records import LEAF_LEVEL, PARENT_LEVELS, GazetteerRecord, HierarchyEntry, Level
from gazetteer_i18n.types.results import (
    AddressLine,
    BuildResult,
    IdentifierTables,
    LogEntry,
    LogSink,
    ReductionResult,
    ResolutionResult,
    Severity,
)

__all__ = [
    "LEAF_LEVEL",
    "PARENT_LEVELS",
    "AddressLine",
    "BuildResult",
    "GazetteerConfig",
    "GazetteerRecord",
    "HierarchyEntry",
    "IdentifierTables",
    "Level",
    "LogEntry",
    "LogSink",
    "ReductionResult",
    "ResolutionResult",
    "Severity",
]
