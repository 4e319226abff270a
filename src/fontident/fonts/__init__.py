"""Font Identity Module
====================

Font descriptors (family, weight, style), the legacy font name catalog and the
conversion boundary to the document model's font representation.
"""

from .catalog import DEFAULT_CATALOG, LEGACY_FONT_TABLE, CatalogEntry, FontData, LegacyFontCatalog
from .conversion import from_document_font, to_document_font
from .enums import EnumFamily, EnumItem, StyleKind, WeightScale, family_of
from .external import DocumentFont, DocumentFontStyle, DocumentFontWeight
from .models import FontDescriptor

__all__ = [
    "DEFAULT_CATALOG",
    "LEGACY_FONT_TABLE",
    "CatalogEntry",
    "DocumentFont",
    "DocumentFontStyle",
    "DocumentFontWeight",
    "EnumFamily",
    "EnumItem",
    "FontData",
    "FontDescriptor",
    "LegacyFontCatalog",
    "StyleKind",
    "WeightScale",
    "family_of",
    "from_document_font",
    "to_document_font",
]
