"""Data types for charset substitution tables."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from ..const import (
    HIGH_HALF_OFFSET,
    LATIN1_LIMIT,
    PRINTABLE_RANGE_END,
    PRINTABLE_RANGE_START,
)


@dataclass(frozen=True)
class SubstitutionEntry:
    """How one character of a charset is shown on a Latin-1 surface.

    Exactly one of ``identity`` or ``mnemonic`` is set. An identity entry
    names a Latin-1 character with the same (or a near-identical) glyph and is
    written to the display table as-is; a mnemonic is an ASCII sequence that
    is decorated by the display format before being written.
    """

    char: str
    identity: str | None = None
    mnemonic: str | None = None
    alt_mnemonic: str | None = None

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"Entry source must be a single character: {self.char!r}")
        if (self.identity is None) == (self.mnemonic is None):
            raise ValueError(
                f"Entry for U+{ord(self.char):04X} needs exactly one of identity or mnemonic"
            )
        if self.alt_mnemonic is not None and self.mnemonic is None:
            raise ValueError(
                f"Entry for U+{ord(self.char):04X} has an alternate but no mnemonic"
            )

    @property
    def code(self) -> int:
        """Absolute character code of the source character."""
        return ord(self.char)


def sub(char: str, mnemonic: str, alt: str | None = None) -> SubstitutionEntry:
    """Build a mnemonic entry."""
    return SubstitutionEntry(char, mnemonic=mnemonic, alt_mnemonic=alt)


def same(char: str, identity: str) -> SubstitutionEntry:
    """Build an identity (shape match) entry."""
    return SubstitutionEntry(char, identity=identity)


@dataclass(frozen=True)
class CharsetDescriptor:
    """Registry record for one supported charset."""

    name: str
    codec: str
    entries: tuple[SubstitutionEntry, ...]
    identity_pass: bool
    probe_char: str
    range_start: int = PRINTABLE_RANGE_START
    range_end: int = PRINTABLE_RANGE_END
    _by_code: dict[int, SubstitutionEntry] = field(
        init=False, repr=False, compare=False
    )
    _printable: tuple[tuple[int, str], ...] = field(
        init=False, repr=False, compare=False
    )
    _codes: frozenset[int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        by_code: dict[int, SubstitutionEntry] = {}
        for entry in self.entries:
            if entry.code in by_code:
                raise ValueError(f"Duplicate entry U+{entry.code:04X} in {self.name}")
            by_code[entry.code] = entry
        object.__setattr__(self, "_by_code", by_code)
        object.__setattr__(self, "_printable", tuple(self._scan_printable()))
        object.__setattr__(
            self, "_codes", frozenset(ord(char) for _, char in self._printable)
        )

    @property
    def probe_code(self) -> int:
        """Code of the character probed to decide if substitution is needed."""
        return ord(self.probe_char)

    def _scan_printable(self) -> Iterator[tuple[int, str]]:
        """Yield ``(byte, char)`` for every printable character of the charset.

        Bytes the codec leaves undefined are skipped, and so are characters
        that already are Latin-1: those need no substitution.
        """
        for code in range(self.range_start, self.range_end + 1):
            byte = code + HIGH_HALF_OFFSET
            try:
                char = bytes([byte]).decode(self.codec)
            except UnicodeDecodeError:
                continue
            if ord(char) < LATIN1_LIMIT:
                continue
            yield byte, char

    def iter_printable(self) -> Iterator[tuple[int, str]]:
        """Iterate over ``(byte, char)`` pairs of the printable range."""
        return iter(self._printable)

    def printable_codes(self) -> list[int]:
        """Absolute character codes of the printable range."""
        return [ord(char) for _, char in self._printable]

    def entry_for(self, code: int) -> SubstitutionEntry | None:
        """Return the authored entry for ``code``, if any."""
        return self._by_code.get(code)

    def __contains__(self, code: object) -> bool:
        if not isinstance(code, int):
            return False
        return code in self._codes
