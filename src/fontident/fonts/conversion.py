"""
Document Font Conversion
========================

Two-way mapping between FontDescriptor and the document model's DocumentFont.

Both sides agree on the same nine weight codes and two style codes, so conversion is
lossless. A code the document model produces that this library does not recognise
means the two have drifted apart and is reported as an IntegrityViolationError.
"""

import logging

from fontident.core.exceptions import FontNotFoundError, IntegrityViolationError

from .enums import StyleKind, WeightScale
from .external import DocumentFont, DocumentFontStyle, DocumentFontWeight
from .models import FontDescriptor

logger = logging.getLogger(__name__)


def weight_to_document(weight: WeightScale) -> DocumentFontWeight:
    try:
        return DocumentFontWeight(weight.to_code())
    except ValueError as e:
        logger.error(f"Document model has no weight for code {weight.to_code()}")
        raise IntegrityViolationError("weight", weight.to_code()) from e


def weight_from_document(weight: DocumentFontWeight | int) -> WeightScale:
    try:
        return WeightScale.from_code(int(weight))
    except (FontNotFoundError, TypeError, ValueError) as e:
        logger.error(f"Unrecognised document weight code: {weight!r}")
        raise IntegrityViolationError("weight", weight) from e


def style_to_document(style: StyleKind) -> DocumentFontStyle:
    try:
        return DocumentFontStyle(style.to_code())
    except ValueError as e:
        logger.error(f"Document model has no style for code {style.to_code()}")
        raise IntegrityViolationError("style", style.to_code()) from e


def style_from_document(style: DocumentFontStyle | int) -> StyleKind:
    try:
        return StyleKind.from_code(int(style))
    except (FontNotFoundError, TypeError, ValueError) as e:
        logger.error(f"Unrecognised document style code: {style!r}")
        raise IntegrityViolationError("style", style) from e


def to_document_font(descriptor: FontDescriptor) -> DocumentFont:
    """Convert a descriptor into the document model's form. No cached face is ever produced."""
    return DocumentFont(
        family=descriptor.family,
        weight=weight_to_document(descriptor.weight),
        style=style_to_document(descriptor.style),
        cached_face_id=None,
    )


def from_document_font(font: DocumentFont) -> FontDescriptor:
    """
    Convert a document font back into a descriptor.

    The cached face identifier is dropped.

    Raises:
        IntegrityViolationError: If the weight or style code is not recognised
    """
    return FontDescriptor(
        font.family,
        weight_from_document(font.weight),
        style_from_document(font.style),
    )
