"""
Document Font Model
===================

The external document model's own representation of a font reference. Weight and
style are encoded as small integers through the document model's enumerations, and
fonts carry an opaque cached face identifier unrelated to identity.
"""

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class DocumentFontWeight(IntEnum):
    """Font weight codes as stored by the document model."""

    THIN = 100
    EXTRA_LIGHT = 200
    LIGHT = 300
    REGULAR = 400
    MEDIUM = 500
    SEMI_BOLD = 600
    BOLD = 700
    EXTRA_BOLD = 800
    HEAVY = 900


class DocumentFontStyle(IntEnum):
    """Font style codes as stored by the document model."""

    NORMAL = 0
    ITALIC = 1


class DocumentFont(BaseModel):
    """Font reference as written into and read out of a document."""

    model_config = ConfigDict(frozen=True)

    family: str = Field(..., description="Font family resource locator")
    weight: DocumentFontWeight = Field(DocumentFontWeight.REGULAR, description="Weight code")
    style: DocumentFontStyle = Field(DocumentFontStyle.NORMAL, description="Style code")
    cached_face_id: str | None = Field(None, description="Opaque cached face identifier")

    @classmethod
    def create_unchecked(
        cls, family: str, weight: int, style: int, cached_face_id: str | None = None
    ) -> "DocumentFont":
        """Create DocumentFont without validation, as a drifted document model might."""
        return cls.model_construct(
            family=family, weight=weight, style=style, cached_face_id=cached_face_id
        )
