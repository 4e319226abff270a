"""
Basic Usage Examples
====================

This module demonstrates basic usage patterns for fontident.
"""

from fontident import (
    DEFAULT_CATALOG,
    EnumItem,
    FontDescriptor,
    FontNotFoundError,
    StyleKind,
    WeightScale,
    WrongEnumerationFamilyError,
    from_document_font,
    to_document_font,
)


def example_legacy_fonts():
    """
    Resolving legacy font names into descriptors.
    """
    print("=== Legacy Fonts ===")

    for name in ["SourceSansBold", "GothamBlack", "Unknown"]:
        try:
            descriptor = FontDescriptor.from_enum(name)
            print(f"✅ {name}: {descriptor} (bold={descriptor.bold})")
        except FontNotFoundError as e:
            print(f"❌ {e}")

    print(f"   📚 {len(DEFAULT_CATALOG.mapped_names())} legacy names resolve")


def example_field_access():
    """
    Reading and writing descriptor fields.
    """
    print("\n=== Field Access ===")

    descriptor = FontDescriptor.from_name("Roboto", WeightScale.SEMI_BOLD)
    print(f"   Weight: {descriptor.weight_item}, Bold: {descriptor.bold}")

    descriptor.bold = False
    print(f"   After bold=False: {descriptor.weight}")

    try:
        descriptor.weight = EnumItem.of(StyleKind.ITALIC)
    except WrongEnumerationFamilyError as e:
        print(f"❌ {e}")


def example_document_conversion():
    """
    Moving a descriptor across the document model boundary.
    """
    print("\n=== Document Conversion ===")

    descriptor = FontDescriptor("Test", WeightScale.EXTRA_BOLD, StyleKind.ITALIC)
    document_font = to_document_font(descriptor)
    print(f"   Document form: {document_font.model_dump()}")
    print(f"   Round trip equal: {from_document_font(document_font) == descriptor}")


if __name__ == "__main__":
    example_legacy_fonts()
    example_field_access()
    example_document_conversion()
