"""Display session: the top-level substitution toggle for one output surface."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import logging
from typing import Any

from .capabilities import CapabilityProbe, Surface
from .charsets import supported_charsets
from .config import DisplayOptions
from .errors import InvalidCharset
from .format import FormatRule
from .host import DisplayHost
from .installer import InstallReport, TableInstaller
from .table import DisplayTable

_LOGGER = logging.getLogger(__name__)


class DisplaySession:
    """Owns the display table of one output surface and toggles substitution.

    The session is either inactive or active. Enabling installs the
    requested charsets (all of them when none are named); disabling resets
    every supported charset plus the fallback entries and asks the host for
    a full redraw. Both operations are safe to repeat.
    """

    def __init__(
        self,
        surface: Surface | None = None,
        table: DisplayTable | None = None,
        format_rule: FormatRule | None = None,
        host: DisplayHost | None = None,
    ) -> None:
        self.table = table if table is not None else DisplayTable()
        self.probe = CapabilityProbe(surface)
        self.host = host or DisplayHost()
        self.installer = TableInstaller(self.table, self.probe, format_rule, self.host)
        self._active = False
        self._enabled: list[str] = []

    @property
    def active(self) -> bool:
        return self._active

    @property
    def enabled_charsets(self) -> list[str]:
        """Charsets installed (not skipped) since the session was enabled."""
        return list(self._enabled)

    @property
    def format_rule(self) -> FormatRule:
        return self.installer.format_rule

    def enable(
        self,
        charsets: Iterable[str] | str = (),
        force: bool = False,
        transliterate: bool = False,
    ) -> InstallReport:
        """Install substitutions and mark the session active.

        Args:
            charsets: Charset identifiers; empty selects every supported one.
            force: Substitute even where the surface renders natively.
            transliterate: Also fill gaps from the broad Unicode table.

        Returns:
            The install report.

        Raises:
            InvalidCharset: If an identifier is unsupported. Valid charsets
                of the same request are still installed.
        """
        if isinstance(charsets, str):
            charsets = [charsets]
        names = list(charsets) or supported_charsets()
        try:
            report = self.installer.install(names, force=force)
        except InvalidCharset as err:
            if err.report is not None:
                if transliterate and err.report.installed:
                    self.installer.install_transliterations(force=force)
                self._mark_active(err.report.installed)
            raise
        if transliterate:
            self.installer.install_transliterations(force=force)
        self._mark_active(report.installed)
        _LOGGER.debug(
            "Display substitution enabled for %s (skipped %s)",
            report.installed,
            report.skipped,
        )
        return report

    def _mark_active(self, installed: list[str]) -> None:
        for name in installed:
            if name not in self._enabled:
                self._enabled.append(name)
        self._active = True

    def disable(self) -> None:
        """Restore native rendering everywhere and mark the session inactive."""
        for name in supported_charsets():
            self.installer.reset(name)
        self.installer.reset_fallback()
        self._enabled.clear()
        self._active = False
        _LOGGER.debug("Display substitution disabled")
        self.host.request_redraw()

    def apply_options(self, options: DisplayOptions | Mapping[str, Any]) -> None:
        """Bind host options to the session.

        Format and mnemonic preferences take effect for the next install; if
        the session stays enabled it is re-installed so existing entries pick
        them up.
        """
        if not isinstance(options, DisplayOptions):
            options = DisplayOptions.from_mapping(options)

        self.installer.format_rule = FormatRule(
            options.display_format, options.legacy_mnemonics
        )
        if not options.enabled:
            if self._active:
                self.disable()
            return
        if self._active:
            self.disable()
        self.enable(
            options.charsets,
            force=options.force,
            transliterate=options.ucs_transliteration,
        )
