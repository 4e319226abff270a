"""Font Identity
=============

Typed font descriptors (family, weight, style), resolution of legacy font names
into descriptors, and lossless conversion to and from a document model's font
representation. A small release client for fetching published builds ships
alongside.
"""

__version__ = "0.1.0"
__author__ = "fontident developers"

from .core.exceptions import (
    FontIdentError,
    FontNotFoundError,
    IntegrityViolationError,
    WrongEnumerationFamilyError,
)
from .fonts import (
    DEFAULT_CATALOG,
    DocumentFont,
    EnumFamily,
    EnumItem,
    FontDescriptor,
    LegacyFontCatalog,
    StyleKind,
    WeightScale,
    from_document_font,
    to_document_font,
)

__all__ = [
    "DEFAULT_CATALOG",
    "DocumentFont",
    "EnumFamily",
    "EnumItem",
    "FontDescriptor",
    "FontIdentError",
    "FontNotFoundError",
    "IntegrityViolationError",
    "LegacyFontCatalog",
    "StyleKind",
    "WeightScale",
    "WrongEnumerationFamilyError",
    "from_document_font",
    "to_document_font",
]
