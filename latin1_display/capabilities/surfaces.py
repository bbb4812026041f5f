"""Output surface backends consulted by the capability probe.

A surface answers one question: does it declare coverage for a character
code? Graphical surfaces answer from font cmaps; non-graphical surfaces
answer from their output encoding's safe characters and safe charsets.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Protocol

from fontTools.ttLib import TTFont, TTLibError

from ..charsets import owning_charsets
from .codepage_mapping import canonical_codec, charsets_for_codec, get_codec_name
from .loader import get_codepage_codec, get_profile_codepages

_LOGGER = logging.getLogger(__name__)


class Surface(Protocol):
    """Anything that can declare coverage for character codes."""

    def covers(self, code: int) -> bool:
        """Return True if the surface renders ``code`` natively."""


@dataclass(frozen=True)
class FontCoverage:
    """The set of character codes one font maps to glyphs."""

    name: str
    codes: frozenset[int] = field(default_factory=frozenset, repr=False)

    @classmethod
    def from_file(cls, path: str | Path, font_number: int = 0) -> FontCoverage:
        """Read coverage from the cmap tables of a TrueType/OpenType font.

        An unreadable font yields empty coverage, which makes every probe
        against it report "not displayable".

        Args:
            path: Font file path (``.ttf``, ``.otf`` or ``.ttc``).
            font_number: Font index inside a collection.

        Returns:
            The font's coverage.
        """
        path = Path(path)
        codes: set[int] = set()
        try:
            font = TTFont(path, lazy=True, fontNumber=font_number)
            try:
                cmap_table = font.get("cmap")
                if cmap_table is not None:
                    for table in cmap_table.tables:
                        if table.isUnicode():
                            codes.update(int(k) for k in table.cmap)
            finally:
                font.close()
        except (OSError, TTLibError) as err:
            _LOGGER.warning("Could not read font coverage from %s: %s", path, err)
        return cls(path.name, frozenset(codes))

    @classmethod
    def from_codes(cls, name: str, codes: Iterable[int]) -> FontCoverage:
        """Build coverage from an explicit set of codes."""
        return cls(name, frozenset(codes))

    def __contains__(self, code: object) -> bool:
        return code in self.codes


@dataclass
class FontSurface:
    """A graphical frame: its selected font plus the default fontset."""

    font: FontCoverage | None = None
    fontset: Sequence[FontCoverage] = ()

    def covers(self, code: int) -> bool:
        if self.font is not None and code in self.font:
            return True
        return any(code in member for member in self.fontset)


@dataclass
class EncodingSurface:
    """A non-graphical surface, described by its output encoding(s).

    Attributes:
        codecs: Canonical codec names the surface can emit.
        safe_chars: Codes declared safe regardless of encoding.
        safe_charsets: Charset identifiers declared safe as a whole.
    """

    codecs: tuple[str, ...] = ()
    safe_chars: frozenset[int] = frozenset()
    safe_charsets: frozenset[str] = frozenset()

    @classmethod
    def from_encoding(
        cls,
        encoding: str | None,
        safe_chars: Iterable[int] = (),
        safe_charsets: Iterable[str] = (),
    ) -> EncodingSurface:
        """Describe a terminal by its coding system name.

        Args:
            encoding: Terminal encoding (e.g. "utf-8", "iso-8859-7", "koi8-r").
            safe_chars: Extra codes the host declares safe.
            safe_charsets: Extra charsets the host declares safe.

        Returns:
            The surface. An unknown encoding gives a surface with no codecs.
        """
        codec = canonical_codec(encoding)
        charsets = set(safe_charsets)
        if codec is not None:
            charsets |= charsets_for_codec(codec)
        return cls(
            codecs=(codec,) if codec else (),
            safe_chars=frozenset(safe_chars),
            safe_charsets=frozenset(charsets),
        )

    @classmethod
    def from_printer_profile(cls, profile_key: str | None) -> EncodingSurface:
        """Describe an ESC/POS printer by the code pages its profile declares.

        Args:
            profile_key: Profile key in the python-escpos capability database,
                or empty/None for the common code pages.

        Returns:
            The surface covering every code page the printer can switch to.
        """
        codecs: list[str] = []
        charsets: set[str] = set()
        for codepage in get_profile_codepages(profile_key):
            codec = canonical_codec(
                get_codepage_codec(codepage) or get_codec_name(codepage)
            )
            if codec is None:
                _LOGGER.debug("Skipping code page '%s' without a codec", codepage)
                continue
            if codec not in codecs:
                codecs.append(codec)
                charsets |= charsets_for_codec(codec)
        _LOGGER.debug(
            "Printer profile '%s' renders %s natively", profile_key, sorted(charsets)
        )
        return cls(codecs=tuple(codecs), safe_charsets=frozenset(charsets))

    def covers(self, code: int) -> bool:
        if code in self.safe_chars:
            return True
        if not self.safe_charsets.isdisjoint(owning_charsets(code)):
            return True
        char = chr(code)
        for codec in self.codecs:
            try:
                char.encode(codec)
            except (UnicodeEncodeError, LookupError):
                continue
            return True
        return False
