"""
Font data models and types.
"""

from typing import Any

from fontident.core.exceptions import (
    InvalidAssetIdError,
    InvalidBoldValueError,
    WrongEnumerationFamilyError,
)

from .enums import EnumFamily, EnumItem, StyleKind, WeightScale, family_of

FAMILY_PATH_TEMPLATE = "rbxasset://fonts/families/{name}.json"
ASSET_ID_TEMPLATE = "rbxassetid://{asset_id}"


def _actual_family(value: Any) -> EnumFamily | str:
    family = family_of(value)
    return family if family is not None else type(value).__name__


class FontDescriptor:
    """
    Identity of a text font: which family, weight and style a piece of text references.

    Descriptors are plain values owned by their caller. The family is not validated;
    weight and style assignments only accept enumerators of the matching family.
    """

    __slots__ = ("family", "_weight", "_style")

    def __init__(
        self,
        family: str,
        weight: WeightScale = WeightScale.REGULAR,
        style: StyleKind = StyleKind.NORMAL,
    ):
        self.family = family
        self.weight = weight
        self.style = style

    @classmethod
    def from_enum(cls, item: EnumItem | str) -> "FontDescriptor":
        """
        Resolve a legacy font name into a descriptor.

        Args:
            item: Legacy font name, or an EnumItem tagged with the LegacyFont family

        Returns:
            Descriptor for the legacy font

        Raises:
            WrongEnumerationFamilyError: If an EnumItem of another family is given
            FontNotFoundError: If the name is unknown or has no mapping
        """
        from .catalog import DEFAULT_CATALOG

        if isinstance(item, str):
            name = item
        elif isinstance(item, EnumItem) and item.family is EnumFamily.LEGACY_FONT:
            name = item.name
        else:
            raise WrongEnumerationFamilyError(EnumFamily.LEGACY_FONT, _actual_family(item))

        return DEFAULT_CATALOG.resolve(name)

    @classmethod
    def from_name(
        cls,
        name: str,
        weight: WeightScale = WeightScale.REGULAR,
        style: StyleKind = StyleKind.NORMAL,
    ) -> "FontDescriptor":
        """Build a descriptor for a built-in font family referenced by its short name."""
        return cls(FAMILY_PATH_TEMPLATE.format(name=name), weight, style)

    @classmethod
    def from_id(
        cls,
        asset_id: int,
        weight: WeightScale = WeightScale.REGULAR,
        style: StyleKind = StyleKind.NORMAL,
    ) -> "FontDescriptor":
        """Build a descriptor for an uploaded font family referenced by its asset id."""
        if not isinstance(asset_id, int) or isinstance(asset_id, bool) or asset_id < 0:
            raise InvalidAssetIdError(asset_id)
        return cls(ASSET_ID_TEMPLATE.format(asset_id=asset_id), weight, style)

    @property
    def weight(self) -> WeightScale:
        return self._weight

    @weight.setter
    def weight(self, value: WeightScale | EnumItem) -> None:
        family = family_of(value)
        if family is not EnumFamily.WEIGHT_SCALE:
            raise WrongEnumerationFamilyError(EnumFamily.WEIGHT_SCALE, _actual_family(value))
        if isinstance(value, EnumItem):
            value = WeightScale.parse_name(value.name)
        self._weight = value

    @property
    def style(self) -> StyleKind:
        return self._style

    @style.setter
    def style(self, value: StyleKind | EnumItem) -> None:
        family = family_of(value)
        if family is not EnumFamily.STYLE_KIND:
            raise WrongEnumerationFamilyError(EnumFamily.STYLE_KIND, _actual_family(value))
        if isinstance(value, EnumItem):
            value = StyleKind.parse_name(value.name)
        self._style = value

    @property
    def weight_item(self) -> EnumItem:
        """Weight as a tagged enumerator, the form host layers expose."""
        return EnumItem.of(self._weight)

    @property
    def style_item(self) -> EnumItem:
        return EnumItem.of(self._style)

    @property
    def bold(self) -> bool:
        return self._weight.is_bold

    @bold.setter
    def bold(self, value: bool) -> None:
        # Lossy: any other weight previously set is discarded
        if not isinstance(value, bool):
            raise InvalidBoldValueError(value)
        self._weight = WeightScale.BOLD if value else WeightScale.REGULAR

    def copy(self) -> "FontDescriptor":
        return FontDescriptor(self.family, self._weight, self._style)

    def to_dict(self) -> dict[str, str]:
        """Export the descriptor with canonical enumerator names."""
        return {
            "family": self.family,
            "weight": self._weight.to_name(),
            "style": self._style.to_name(),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FontDescriptor):
            return NotImplemented
        return (
            self.family == other.family
            and self._weight is other._weight
            and self._style is other._style
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"FontDescriptor(family={self.family!r}, weight=WeightScale.{self._weight.name}, "
            f"style=StyleKind.{self._style.name})"
        )

    def __str__(self) -> str:
        return f"{self.family}, {self._weight}, {self._style}"
