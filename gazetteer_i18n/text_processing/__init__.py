"""Text processing utilities for identifier generation."""

from gazetteer_i18n.text_processing.camel_case import camel_case

__all__ = ["camel_case"]
