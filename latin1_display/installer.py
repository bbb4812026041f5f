"""Installs charset substitutions into a display table.

Installation follows a fixed precedence:

1. Latin-n charsets get an identity pass first: every printable character
   without a display table entry is shown as the Latin-1 character at the
   same byte.
2. Authored entries are written next and always overwrite identity entries.
3. Once per batch that substituted anything, gaps for extended punctuation
   and for characters with a legacy 8-bit equivalent are filled from a static
   equivalence table, unless the surface already has an adequate extended
   font. A batch whose charsets all render natively leaves the table alone.

The installer remembers what each code held before its first write, so a
reset restores the host's own entries instead of blindly clearing them.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
import logging

from .capabilities import CapabilityProbe
from .charsets import (
    EXTENDED_PUNCTUATION,
    LEGACY_EQUIVALENTS,
    UCS_TRANSLITERATIONS,
    CharsetDescriptor,
    get_charset,
    is_supported,
)
from .const import EXTENDED_FONT_PROBE_CHAR, SUPPORTED_CHARSETS
from .errors import InvalidCharset
from .format import FormatRule
from .host import DisplayHost
from .table import DisplayTable

_LOGGER = logging.getLogger(__name__)

_UNSET = object()


@dataclass
class InstallReport:
    """Outcome of one install batch."""

    installed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    fallback_written: int = 0


class TableInstaller:
    """Writes and clears substitution entries in a shared display table."""

    def __init__(
        self,
        table: DisplayTable,
        probe: CapabilityProbe,
        format_rule: FormatRule | None = None,
        host: DisplayHost | None = None,
    ) -> None:
        self._table = table
        self._probe = probe
        self.format_rule = format_rule or FormatRule()
        self._host = host or DisplayHost()
        self._previous: dict[int, object] = {}
        self._fallback_codes: set[int] = set()

    @property
    def table(self) -> DisplayTable:
        return self._table

    @property
    def probe(self) -> CapabilityProbe:
        return self._probe

    def _write(self, code: int, replacement: str) -> None:
        if code not in self._previous:
            self._previous[code] = self._table[code]
        self._table[code] = replacement

    def _restore(self, code: int) -> bool:
        previous = self._previous.pop(code, _UNSET)
        if previous is _UNSET:
            return False
        if previous is None:
            del self._table[code]
        else:
            self._table[code] = previous  # type: ignore[assignment]
        return True

    def install(
        self, charsets: Iterable[str] | str, force: bool = False
    ) -> InstallReport:
        """Install substitutions for a batch of charsets.

        Args:
            charsets: Charset identifiers. Order does not matter; valid
                charsets are processed in registry order.
            force: Substitute even when the surface can render a charset.

        Returns:
            What was installed, skipped, and filled by the fallback pass.

        Raises:
            InvalidCharset: If any identifier is unsupported. The valid
                charsets of the batch are installed first; a batch made up
                only of unsupported identifiers leaves the table untouched.
        """
        if isinstance(charsets, str):
            charsets = [charsets]
        requested = list(dict.fromkeys(charsets))
        invalid = [name for name in requested if not is_supported(name)]
        valid = [name for name in SUPPORTED_CHARSETS if name in requested]

        if invalid and not valid:
            _LOGGER.warning("Ignoring install of unsupported charset(s): %s", invalid)
            raise InvalidCharset(invalid)

        report = InstallReport()
        for name in valid:
            descriptor = get_charset(name)
            if not force and self._probe.can_display(descriptor.probe_code):
                _LOGGER.debug("Charset %s is displayable natively, skipping", name)
                report.skipped.append(name)
                continue
            written = self._install_charset(descriptor)
            _LOGGER.debug("Installed %d display entries for %s", written, name)
            report.installed.append(name)

        if force or (
            report.installed and not self._probe.can_display(EXTENDED_FONT_PROBE_CHAR)
        ):
            report.fallback_written = self.fill_gaps(EXTENDED_PUNCTUATION)
            report.fallback_written += self.fill_gaps(LEGACY_EQUIVALENTS)

        if invalid:
            _LOGGER.warning("Unsupported charset(s) in install batch: %s", invalid)
            raise InvalidCharset(invalid, report)
        return report

    def _install_charset(self, descriptor: CharsetDescriptor) -> int:
        written = 0
        if descriptor.identity_pass:
            for byte, char in descriptor.iter_printable():
                code = ord(char)
                if code not in self._table:
                    self._write(code, chr(byte))
                    written += 1
        for entry in descriptor.entries:
            self._write(entry.code, self.format_rule.replacement_for(entry))
            written += 1
        return written

    def fill_gaps(
        self, mapping: Mapping[int, int | str], only_undisplayable: bool = False
    ) -> int:
        """Fill display table gaps from a source mapping.

        For each ``target: source`` pair where the target has no entry yet,
        an integer source contributes its own display table entry if it has
        one and otherwise its character; a string source is used verbatim.

        Args:
            mapping: Target code to source code or literal string.
            only_undisplayable: Leave targets the probe can display alone.

        Returns:
            The number of entries written.
        """
        written = 0
        for target, source in mapping.items():
            if target in self._table:
                continue
            if only_undisplayable and self._probe.can_display(target):
                continue
            if isinstance(source, int):
                replacement = self._table[source]
                if replacement is None:
                    replacement = chr(source)
            else:
                replacement = source
            self._write(target, replacement)
            self._fallback_codes.add(target)
            written += 1
        return written

    def install_transliterations(self, force: bool = False) -> int:
        """Fill remaining gaps with the broad Unicode transliteration table."""
        written = self.fill_gaps(
            {ord(char): text for char, text in UCS_TRANSLITERATIONS.items()},
            only_undisplayable=not force,
        )
        _LOGGER.debug("Installed %d transliteration entries", written)
        return written

    def reset(self, charset: str) -> int:
        """Restore native rendering for one charset's printable range.

        Every code of the range that an install wrote goes back to what it
        held before, after which the host gets a chance to repaint.

        Returns:
            The number of entries restored.

        Raises:
            InvalidCharset: If the identifier is unsupported.
        """
        descriptor = get_charset(charset)
        codes = set(descriptor.printable_codes())
        codes.update(entry.code for entry in descriptor.entries)
        restored = sum(1 for code in sorted(codes) if self._restore(code))
        _LOGGER.debug("Restored %d display entries for %s", restored, charset)
        self._host.yield_once()
        return restored

    def reset_fallback(self) -> int:
        """Restore codes written by the fallback and transliteration passes."""
        restored = sum(1 for code in sorted(self._fallback_codes) if self._restore(code))
        self._fallback_codes.clear()
        _LOGGER.debug("Restored %d fallback display entries", restored)
        return restored

    def installed_codes(self) -> set[int]:
        """Codes currently holding an entry written by this installer."""
        return set(self._previous)
