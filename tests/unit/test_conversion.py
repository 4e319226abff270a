"""Tests for conversion between FontDescriptor and the document font model."""

import pytest
from pydantic import ValidationError

from fontident.core.exceptions import FontNotFoundError, IntegrityViolationError
from fontident.fonts import (
    DocumentFont,
    DocumentFontStyle,
    DocumentFontWeight,
    FontDescriptor,
    StyleKind,
    WeightScale,
    from_document_font,
    to_document_font,
)
from fontident.fonts.conversion import style_from_document, weight_from_document


class TestToDocumentFont:
    """Test descriptor to document conversion."""

    def test_fields_mapped(self, italic_descriptor):
        font = to_document_font(italic_descriptor)

        assert font.family == "Test"
        assert font.weight is DocumentFontWeight.EXTRA_BOLD
        assert font.weight == 800
        assert font.style is DocumentFontStyle.ITALIC
        assert font.cached_face_id is None

    @pytest.mark.parametrize("weight", list(WeightScale))
    def test_weight_codes_agree(self, weight):
        assert int(to_document_font(FontDescriptor("F", weight)).weight) == weight.to_code()


class TestFromDocumentFont:
    """Test document to descriptor conversion."""

    def test_round_trip(self, italic_descriptor):
        """Test that converting out and back yields an equal descriptor."""
        assert from_document_font(to_document_font(italic_descriptor)) == italic_descriptor

    def test_cached_face_dropped(self):
        font = DocumentFont(
            family="rbxasset://fonts/families/Arial.json",
            weight=DocumentFontWeight.BOLD,
            style=DocumentFontStyle.NORMAL,
            cached_face_id="rbxasset://fonts/arialbd.ttf",
        )

        assert from_document_font(font) == FontDescriptor.from_enum("ArialBold")

    def test_document_validates_codes(self):
        with pytest.raises(ValidationError):
            DocumentFont(family="Arial", weight=450)

    def test_unknown_weight_is_integrity_violation(self):
        font = DocumentFont.create_unchecked("Arial", weight=450, style=0)

        with pytest.raises(IntegrityViolationError) as exc_info:
            from_document_font(font)
        assert exc_info.value.field == "weight"
        assert exc_info.value.code == 450

    def test_unknown_style_is_integrity_violation(self):
        font = DocumentFont.create_unchecked("Arial", weight=400, style=2)

        with pytest.raises(IntegrityViolationError) as exc_info:
            from_document_font(font)
        assert exc_info.value.field == "style"

    def test_integrity_violation_is_not_a_lookup_error(self):
        """Test that not-found handlers do not catch integrity violations."""
        with pytest.raises(IntegrityViolationError) as exc_info:
            weight_from_document(1000)
        assert not isinstance(exc_info.value, LookupError | FontNotFoundError)

    def test_field_helpers(self):
        assert weight_from_document(DocumentFontWeight.THIN) is WeightScale.THIN
        assert style_from_document(1) is StyleKind.ITALIC
