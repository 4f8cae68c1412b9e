"""
Services package for gazetteer processing.

This package contains all service classes used by the address hierarchy
builder, organized by pipeline stage.
"""

from gazetteer_i18n.services.dictionary import DictionaryReductionService
from gazetteer_i18n.services.frequency import FrequencyAggregationService, FrequencyTable
from gazetteer_i18n.services.hierarchy import HierarchyIndex, HierarchyIndexService
from gazetteer_i18n.services.identifiers import IdentifierGenerationService
from gazetteer_i18n.services.output import OutputAssemblyService
from gazetteer_i18n.services.reader import GazetteerReader
from gazetteer_i18n.services.resolution import PathResolutionService

__all__ = [
    "DictionaryReductionService",
    "FrequencyAggregationService",
    "FrequencyTable",
    "GazetteerReader",
    "HierarchyIndex",
    "HierarchyIndexService",
    "IdentifierGenerationService",
    "OutputAssemblyService",
    "PathResolutionService",
]
