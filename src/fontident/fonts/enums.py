"""
Font Enumerations
=================

Closed enumerations describing font weight and style, plus the family tagging used
to recognise enumerators handed over by a host layer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from fontident.core.exceptions import FontNotFoundError


class EnumFamily(Enum):
    """Closed enumeration families known to this library."""

    LEGACY_FONT = "LegacyFont"
    WEIGHT_SCALE = "WeightScale"
    STYLE_KIND = "StyleKind"

    def __str__(self) -> str:
        return self.value


class WeightScale(Enum):
    """Named font weights and their canonical numeric codes."""

    THIN = 100
    EXTRA_LIGHT = 200
    LIGHT = 300
    REGULAR = 400
    MEDIUM = 500
    SEMI_BOLD = 600
    BOLD = 700
    EXTRA_BOLD = 800
    HEAVY = 900

    @property
    def family(self) -> EnumFamily:
        return EnumFamily.WEIGHT_SCALE

    @property
    def is_bold(self) -> bool:
        """Weights of SemiBold and above read as bold."""
        return self.value >= 600

    def to_code(self) -> int:
        return self.value

    def to_name(self) -> str:
        return _WEIGHT_NAMES[self]

    @classmethod
    def from_code(cls, code: int) -> "WeightScale":
        """
        Look up a weight by its numeric code.

        Raises:
            FontNotFoundError: If the code is not one of 100, 200, ..., 900
        """
        if isinstance(code, int) and not isinstance(code, bool):
            for weight in cls:
                if weight.value == code:
                    return weight
        raise FontNotFoundError(code, kind=EnumFamily.WEIGHT_SCALE.value)

    @classmethod
    def parse_name(cls, name: str) -> "WeightScale":
        """
        Look up a weight by its canonical name ("Thin", "ExtraLight", ...).

        Matching is exact and case-sensitive.

        Raises:
            FontNotFoundError: If the name is not a canonical weight name
        """
        try:
            return _WEIGHTS_BY_NAME[name]
        except (KeyError, TypeError):
            raise FontNotFoundError(name, kind=EnumFamily.WEIGHT_SCALE.value) from None

    def __str__(self) -> str:
        return self.to_name()


class StyleKind(Enum):
    """Named font styles and their canonical numeric codes."""

    NORMAL = 0
    ITALIC = 1

    @property
    def family(self) -> EnumFamily:
        return EnumFamily.STYLE_KIND

    def to_code(self) -> int:
        return self.value

    def to_name(self) -> str:
        return _STYLE_NAMES[self]

    @classmethod
    def from_code(cls, code: int) -> "StyleKind":
        """Look up a style by its numeric code, raising FontNotFoundError for anything but 0 or 1."""
        if isinstance(code, int) and not isinstance(code, bool):
            for style in cls:
                if style.value == code:
                    return style
        raise FontNotFoundError(code, kind=EnumFamily.STYLE_KIND.value)

    @classmethod
    def parse_name(cls, name: str) -> "StyleKind":
        """Look up a style by its canonical name, "Normal" or "Italic"."""
        try:
            return _STYLES_BY_NAME[name]
        except (KeyError, TypeError):
            raise FontNotFoundError(name, kind=EnumFamily.STYLE_KIND.value) from None

    def __str__(self) -> str:
        return self.to_name()


_WEIGHT_NAMES: dict[WeightScale, str] = {
    WeightScale.THIN: "Thin",
    WeightScale.EXTRA_LIGHT: "ExtraLight",
    WeightScale.LIGHT: "Light",
    WeightScale.REGULAR: "Regular",
    WeightScale.MEDIUM: "Medium",
    WeightScale.SEMI_BOLD: "SemiBold",
    WeightScale.BOLD: "Bold",
    WeightScale.EXTRA_BOLD: "ExtraBold",
    WeightScale.HEAVY: "Heavy",
}
_WEIGHTS_BY_NAME: dict[str, WeightScale] = {name: w for w, name in _WEIGHT_NAMES.items()}

_STYLE_NAMES: dict[StyleKind, str] = {
    StyleKind.NORMAL: "Normal",
    StyleKind.ITALIC: "Italic",
}
_STYLES_BY_NAME: dict[str, StyleKind] = {name: s for s, name in _STYLE_NAMES.items()}


@dataclass(frozen=True)
class EnumItem:
    """An enumerator as handed over by a host layer: a name tagged with its family."""

    family: EnumFamily
    name: str

    @classmethod
    def of(cls, member: WeightScale | StyleKind) -> "EnumItem":
        """Build the tagged form of a weight or style."""
        return cls(member.family, member.to_name())

    @classmethod
    def legacy_font(cls, name: str) -> "EnumItem":
        return cls(EnumFamily.LEGACY_FONT, name)

    def __str__(self) -> str:
        return f"{self.family.value}.{self.name}"


def family_of(value: Any) -> EnumFamily | None:
    """Return the enumeration family a value belongs to, or None for non-enumerators."""
    if isinstance(value, EnumItem):
        return value.family
    if isinstance(value, WeightScale | StyleKind):
        return value.family
    return None
