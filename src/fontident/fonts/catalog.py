"""
Legacy Font Catalog
===================

Static identity resolution from the closed vocabulary of legacy font names to
concrete font descriptors.
"""

import logging
from collections import Counter
from collections.abc import Iterable, Iterator
from typing import NamedTuple

from fontident.core.exceptions import CatalogIntegrityError, FontNotFoundError

from .enums import StyleKind, WeightScale
from .models import FAMILY_PATH_TEMPLATE, FontDescriptor

logger = logging.getLogger(__name__)


class FontData(NamedTuple):
    """Family locator, weight and style a legacy name resolves to."""

    family: str
    weight: WeightScale
    style: StyleKind


class CatalogEntry(NamedTuple):
    """A legacy font name and its mapping, or None for a reserved name."""

    name: str
    mapping: FontData | None


def _family(name: str) -> str:
    return FAMILY_PATH_TEMPLATE.format(name=name)


_REGULAR = WeightScale.REGULAR
_NORMAL = StyleKind.NORMAL

# fmt: off
LEGACY_FONT_TABLE: tuple[CatalogEntry, ...] = (
    CatalogEntry("Legacy",             FontData(_family("LegacyArial"),      _REGULAR,              _NORMAL)),
    CatalogEntry("Arial",              FontData(_family("Arial"),            _REGULAR,              _NORMAL)),
    CatalogEntry("ArialBold",          FontData(_family("Arial"),            WeightScale.BOLD,      _NORMAL)),
    CatalogEntry("SourceSans",         FontData(_family("SourceSansPro"),    _REGULAR,              _NORMAL)),
    CatalogEntry("SourceSansBold",     FontData(_family("SourceSansPro"),    WeightScale.BOLD,      _NORMAL)),
    CatalogEntry("SourceSansSemibold", FontData(_family("SourceSansPro"),    WeightScale.SEMI_BOLD, _NORMAL)),
    CatalogEntry("SourceSansLight",    FontData(_family("SourceSansPro"),    WeightScale.LIGHT,     _NORMAL)),
    CatalogEntry("SourceSansItalic",   FontData(_family("SourceSansPro"),    _REGULAR,              StyleKind.ITALIC)),
    CatalogEntry("Bodoni",             FontData(_family("AccanthisADFStd"),  _REGULAR,              _NORMAL)),
    CatalogEntry("Garamond",           FontData(_family("Guru"),             _REGULAR,              _NORMAL)),
    CatalogEntry("Cartoon",            FontData(_family("ComicNeueAngular"), _REGULAR,              _NORMAL)),
    CatalogEntry("Code",               FontData(_family("Inconsolata"),      _REGULAR,              _NORMAL)),
    CatalogEntry("Highway",            FontData(_family("HighwayGothic"),    _REGULAR,              _NORMAL)),
    CatalogEntry("SciFi",              FontData(_family("Zekton"),           _REGULAR,              _NORMAL)),
    CatalogEntry("Arcade",             FontData(_family("PressStart2P"),     _REGULAR,              _NORMAL)),
    CatalogEntry("Fantasy",            FontData(_family("Balthazar"),        _REGULAR,              _NORMAL)),
    CatalogEntry("Antique",            FontData(_family("RomanAntique"),     _REGULAR,              _NORMAL)),
    CatalogEntry("Gotham",             FontData(_family("GothamSSm"),        _REGULAR,              _NORMAL)),
    CatalogEntry("GothamMedium",       FontData(_family("GothamSSm"),        WeightScale.MEDIUM,    _NORMAL)),
    CatalogEntry("GothamBold",         FontData(_family("GothamSSm"),        WeightScale.BOLD,      _NORMAL)),
    CatalogEntry("GothamBlack",        FontData(_family("GothamSSm"),        WeightScale.HEAVY,     _NORMAL)),
    CatalogEntry("AmaticSC",           FontData(_family("AmaticSC"),         _REGULAR,              _NORMAL)),
    CatalogEntry("Bangers",            FontData(_family("Bangers"),          _REGULAR,              _NORMAL)),
    CatalogEntry("Creepster",          FontData(_family("Creepster"),        _REGULAR,              _NORMAL)),
    CatalogEntry("DenkOne",            FontData(_family("DenkOne"),          _REGULAR,              _NORMAL)),
    CatalogEntry("Fondamento",         FontData(_family("Fondamento"),       _REGULAR,              _NORMAL)),
    CatalogEntry("FredokaOne",         FontData(_family("FredokaOne"),       _REGULAR,              _NORMAL)),
    CatalogEntry("GrenzeGotisch",      FontData(_family("GrenzeGotisch"),    _REGULAR,              _NORMAL)),
    CatalogEntry("IndieFlower",        FontData(_family("IndieFlower"),      _REGULAR,              _NORMAL)),
    CatalogEntry("JosefinSans",        FontData(_family("JosefinSans"),      _REGULAR,              _NORMAL)),
    CatalogEntry("Jura",               FontData(_family("Jura"),             _REGULAR,              _NORMAL)),
    CatalogEntry("Kalam",              FontData(_family("Kalam"),            _REGULAR,              _NORMAL)),
    CatalogEntry("LuckiestGuy",        FontData(_family("LuckiestGuy"),      _REGULAR,              _NORMAL)),
    CatalogEntry("Merriweather",       FontData(_family("Merriweather"),     _REGULAR,              _NORMAL)),
    CatalogEntry("Michroma",           FontData(_family("Michroma"),         _REGULAR,              _NORMAL)),
    CatalogEntry("Nunito",             FontData(_family("Nunito"),           _REGULAR,              _NORMAL)),
    CatalogEntry("Oswald",             FontData(_family("Oswald"),           _REGULAR,              _NORMAL)),
    CatalogEntry("PatrickHand",        FontData(_family("PatrickHand"),      _REGULAR,              _NORMAL)),
    CatalogEntry("PermanentMarker",    FontData(_family("PermanentMarker"),  _REGULAR,              _NORMAL)),
    CatalogEntry("Roboto",             FontData(_family("Roboto"),           _REGULAR,              _NORMAL)),
    CatalogEntry("RobotoCondensed",    FontData(_family("RobotoCondensed"),  _REGULAR,              _NORMAL)),
    CatalogEntry("RobotoMono",         FontData(_family("RobotoMono"),       _REGULAR,              _NORMAL)),
    CatalogEntry("Sarpanch",           FontData(_family("Sarpanch"),         _REGULAR,              _NORMAL)),
    CatalogEntry("SpecialElite",       FontData(_family("SpecialElite"),     _REGULAR,              _NORMAL)),
    CatalogEntry("TitilliumWeb",       FontData(_family("TitilliumWeb"),     _REGULAR,              _NORMAL)),
    CatalogEntry("Ubuntu",             FontData(_family("Ubuntu"),           _REGULAR,              _NORMAL)),
    CatalogEntry("Unknown",            None),
)
# fmt: on


class LegacyFontCatalog:
    """
    Read-only, ordered table of legacy font names.

    Lookup is a linear scan for the first entry whose name matches exactly and whose
    mapping is present. A reserved name without a mapping resolves exactly like a
    name that is absent from the table.
    """

    def __init__(self, entries: Iterable[CatalogEntry]):
        self._entries: tuple[CatalogEntry, ...] = tuple(entries)

        duplicates = [
            name for name, count in Counter(e.name for e in self._entries).items() if count > 1
        ]
        if duplicates:
            raise CatalogIntegrityError(duplicates)

        logger.debug(
            f"Legacy font catalog built with {len(self._entries)} entries "
            f"({len(self.mapped_names())} mapped)"
        )

    def resolve(self, name: str) -> FontDescriptor:
        """
        Resolve a legacy font name.

        Raises:
            FontNotFoundError: If the name is absent or reserved without a mapping
        """
        for entry in self._entries:
            if entry.name == name and entry.mapping is not None:
                family, weight, style = entry.mapping
                return FontDescriptor(family, weight, style)
        raise FontNotFoundError(name)

    def get(self, name: str, default: FontDescriptor | None = None) -> FontDescriptor | None:
        try:
            return self.resolve(name)
        except FontNotFoundError:
            return default

    def names(self) -> list[str]:
        return [entry.name for entry in self._entries]

    def mapped_names(self) -> list[str]:
        """Names that resolve to a descriptor."""
        return [entry.name for entry in self._entries if entry.mapping is not None]

    def __contains__(self, name: object) -> bool:
        return any(entry.name == name for entry in self._entries)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"LegacyFontCatalog({len(self._entries)} entries)"


DEFAULT_CATALOG = LegacyFontCatalog(LEGACY_FONT_TABLE)
