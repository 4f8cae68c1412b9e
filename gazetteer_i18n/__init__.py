"""
gazetteer_i18n: Address Hierarchy Message Builder

Converts a bilingual multi-level gazetteer into an address hierarchy CSV keyed
by translation messages, plus the message property files for both languages.
"""

__version__ = "0.1.0"

__all__ = ["AddressHierarchyBuilder", "GazetteerConfig"]

def __getattr__(name):
    """Lazy import to keep ``import gazetteer_i18n`` cheap."""
    if name == "AddressHierarchyBuilder":
        from .builder import AddressHierarchyBuilder
        return AddressHierarchyBuilder
    if name == "GazetteerConfig":
        from .types import GazetteerConfig
        return GazetteerConfig
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
