"""Tests for the table installer."""

from unittest.mock import MagicMock

import pytest

from latin1_display import (
    CapabilityProbe,
    DisplayHost,
    DisplayTable,
    EncodingSurface,
    FontCoverage,
    FontSurface,
    FormatRule,
    InvalidCharset,
    TableInstaller,
    get_charset,
    supported_charsets,
)
from latin1_display.charsets import EXTENDED_PUNCTUATION, LEGACY_EQUIVALENTS


def _installer(
    table: DisplayTable,
    surface: EncodingSurface | FontSurface | None = None,
    format_rule: FormatRule | None = None,
    host: DisplayHost | None = None,
) -> TableInstaller:
    return TableInstaller(table, CapabilityProbe(surface), format_rule, host)


class TestForcedInstall:
    """Tests for installs that ignore the surface."""

    def test_every_printable_code_defined(self, table: DisplayTable) -> None:
        _installer(table).install(supported_charsets(), force=True)
        for name in supported_charsets():
            for code in get_charset(name).printable_codes():
                assert code in table, f"{name}: U+{code:04X} has no entry"

    def test_forced_ignores_capable_surface(
        self, table: DisplayTable, utf8_surface: EncodingSurface
    ) -> None:
        report = _installer(table, utf8_surface).install(["greek"], force=True)
        assert report.installed == ["greek"]
        assert table[ord("α")] == "{a*}"

    def test_greek_alpha(self, table: DisplayTable) -> None:
        _installer(table).install(["greek"], force=True)
        assert table[ord("α")] == "{a*}"
        assert table[ord("Α")] == "A"
        assert table[ord("μ")] == "µ"

    def test_authored_entry_beats_identity(self, table: DisplayTable) -> None:
        # Byte 0xFD is the dotless i in Latin-5 and y acute in Latin-1
        _installer(table).install(["latin-5"], force=True)
        assert table[ord("ı")] == "i"

    def test_authored_entry_beats_host_entry(self, table: DisplayTable) -> None:
        table[ord("ő")] = "o"
        _installer(table).install(["latin-2"], force=True)
        assert table[ord("ő")] == "{''o}"

    def test_legacy_mnemonics(self, table: DisplayTable) -> None:
        rule = FormatRule(legacy_mnemonics=True)
        _installer(table, format_rule=rule).install(["latin-2", "greek"], force=True)
        assert table[ord("Ą")] == "{A;}"
        assert table[ord("α")] == "{a*}"

    def test_custom_format(self, table: DisplayTable) -> None:
        _installer(table, format_rule=FormatRule("%s")).install("cyrillic", force=True)
        assert table.apply("жа") == "zha"

    def test_registry_order(self, table: DisplayTable) -> None:
        report = _installer(table).install(["cyrillic", "greek", "greek"], force=True)
        assert report.installed == ["greek", "cyrillic"]
        assert report.skipped == []


class TestProbedInstall:
    """Tests for installs that consult the surface."""

    def test_noop_when_surface_renders_everything(
        self, table: DisplayTable, utf8_surface: EncodingSurface
    ) -> None:
        table[0x41] = "a"
        before = table.snapshot()
        report = _installer(table, utf8_surface).install(supported_charsets())
        assert report.installed == []
        assert report.skipped == supported_charsets()
        assert report.fallback_written == 0
        assert table.snapshot() == before

    def test_skips_only_native_charsets(self, table: DisplayTable) -> None:
        surface = EncodingSurface.from_encoding("iso-8859-7")
        report = _installer(table, surface).install(["greek", "cyrillic"])
        assert report.skipped == ["greek"]
        assert report.installed == ["cyrillic"]
        assert ord("α") not in table
        assert table[ord("ж")] == "{zh}"

    def test_native_charset_without_extended_font(self, table: DisplayTable) -> None:
        surface = FontSurface(FontCoverage.from_codes("greek", range(0x370, 0x400)))
        report = _installer(table, surface).install(["greek"])
        assert report.skipped == ["greek"]
        assert report.fallback_written == 0
        assert len(table) == 0

    def test_declared_safe_charset_is_skipped(self, table: DisplayTable) -> None:
        surface = EncodingSurface.from_encoding("latin-1", safe_charsets=["latin-9"])
        report = _installer(table, surface).install(["latin-9", "latin-2"])
        assert report.skipped == ["latin-9"]
        assert report.installed == ["latin-2"]

    def test_no_surface_installs(self, table: DisplayTable) -> None:
        report = _installer(table).install(["hebrew"])
        assert report.installed == ["hebrew"]
        assert table[ord("א")] == "{A+}"


class TestInvalidCharsets:
    """Tests for unsupported identifiers."""

    def test_unknown_only_leaves_table_unchanged(self, table: DisplayTable) -> None:
        table[0x3B1] = "alpha"
        before = table.snapshot()
        with pytest.raises(InvalidCharset) as excinfo:
            _installer(table).install({"unknown-set"}, force=True)
        assert excinfo.value.names == ("unknown-set",)
        assert excinfo.value.report is None
        assert table.snapshot() == before

    def test_mixed_batch_installs_valid_then_raises(self, table: DisplayTable) -> None:
        with pytest.raises(InvalidCharset) as excinfo:
            _installer(table).install(["greek", "klingon"], force=True)
        assert excinfo.value.names == ("klingon",)
        assert excinfo.value.report.installed == ["greek"]
        assert table[ord("α")] == "{a*}"

    def test_reset_unknown_raises(self, table: DisplayTable) -> None:
        with pytest.raises(InvalidCharset):
            _installer(table).reset("klingon")


class TestFallbackPass:
    """Tests for the extended punctuation fallback."""

    def test_runs_without_extended_font(
        self, table: DisplayTable, latin1_surface: EncodingSurface
    ) -> None:
        report = _installer(table, latin1_surface).install(["cyrillic"])
        assert table[0x2018] == "`"
        assert table[0x2019] == "'"
        assert table[0x2014] == "--"
        assert table[0x2122] == "TM"
        assert table[0x2212] == "-"
        assert report.fallback_written == len(EXTENDED_PUNCTUATION) + len(
            LEGACY_EQUIVALENTS
        )

    def test_skipped_with_extended_font(self, table: DisplayTable) -> None:
        surface = FontSurface(FontCoverage.from_codes("quotes", [0x2018]))
        report = _installer(table, surface).install(["cyrillic"])
        assert report.fallback_written == 0
        assert 0x2019 not in table

    def test_keeps_charset_entries(self, table: DisplayTable) -> None:
        _installer(table).install(["greek"], force=True)
        # ISO 8859-7 carries its own quotation marks
        assert table[0x2018] == "{'6}"

    def test_runs_for_invalid_mixed_batch(self, table: DisplayTable) -> None:
        with pytest.raises(InvalidCharset):
            _installer(table).install(["cyrillic", "klingon"])
        assert table[0x2026] == "..."


class TestFillGaps:
    """Tests for fill_gaps."""

    def test_integer_source_without_entry(self, table: DisplayTable) -> None:
        written = _installer(table).fill_gaps({0x2018: 0x60})
        assert written == 1
        assert table[0x2018] == "`"

    def test_integer_source_copies_entry(self, table: DisplayTable) -> None:
        table[0x60] = "<grave>"
        _installer(table).fill_gaps({0x2018: 0x60})
        assert table[0x2018] == "<grave>"

    def test_string_source_verbatim(self, table: DisplayTable) -> None:
        _installer(table).fill_gaps({0x2026: "..."})
        assert table[0x2026] == "..."

    def test_existing_target_untouched(self, table: DisplayTable) -> None:
        table[0x2018] = "'"
        written = _installer(table).fill_gaps({0x2018: 0x60})
        assert written == 0
        assert table[0x2018] == "'"

    def test_only_undisplayable(self, table: DisplayTable) -> None:
        surface = FontSurface(FontCoverage.from_codes("quotes", [0x2018]))
        _installer(table, surface).fill_gaps(EXTENDED_PUNCTUATION, only_undisplayable=True)
        assert 0x2018 not in table
        assert table[0x2019] == "'"


class TestTransliterations:
    """Tests for the optional transliteration pass."""

    def test_fills_undisplayable(
        self, table: DisplayTable, latin1_surface: EncodingSurface
    ) -> None:
        written = _installer(table, latin1_surface).install_transliterations()
        assert written > 0
        assert table[ord("ﬁ")] == "fi"

    def test_skips_displayable(
        self, table: DisplayTable, utf8_surface: EncodingSurface
    ) -> None:
        assert _installer(table, utf8_surface).install_transliterations() == 0
        assert len(table) == 0

    def test_forced(self, table: DisplayTable, utf8_surface: EncodingSurface) -> None:
        _installer(table, utf8_surface).install_transliterations(force=True)
        assert table[ord("ﬁ")] == "fi"

    def test_reset_fallback_clears(self, table: DisplayTable) -> None:
        installer = _installer(table)
        installer.install_transliterations()
        installer.reset_fallback()
        assert len(table) == 0


class TestReset:
    """Tests for reset and reset_fallback."""

    def test_reset_clears_charset(self, table: DisplayTable) -> None:
        installer = _installer(table)
        installer.install(["greek"], force=True)
        restored = installer.reset("greek")
        assert restored > 0
        assert all(code not in table for code in get_charset("greek").printable_codes())

    def test_reset_restores_host_entry(self, table: DisplayTable) -> None:
        table[ord("ж")] = "zh!"
        installer = _installer(table)
        installer.install(["cyrillic"], force=True)
        assert table[ord("ж")] == "{zh}"
        installer.reset("cyrillic")
        assert table[ord("ж")] == "zh!"

    def test_reset_leaves_fallback(self, table: DisplayTable) -> None:
        installer = _installer(table)
        installer.install(["cyrillic"], force=True)
        installer.reset("cyrillic")
        assert table[0x2026] == "..."
        assert installer.reset_fallback() == len(EXTENDED_PUNCTUATION) + len(
            LEGACY_EQUIVALENTS
        )
        assert len(table) == 0

    def test_reset_not_installed(self, table: DisplayTable) -> None:
        table[ord("α")] = "alpha"
        assert _installer(table).reset("greek") == 0
        assert table[ord("α")] == "alpha"

    def test_reset_yields_to_host(self, table: DisplayTable) -> None:
        host = DisplayHost(on_yield=MagicMock())
        installer = _installer(table, host=host)
        installer.install(["arabic"], force=True)
        installer.reset("arabic")
        host.on_yield.assert_called_once_with()  # type: ignore[union-attr]

    def test_installed_codes(self, table: DisplayTable) -> None:
        installer = _installer(table)
        installer.install(["hebrew"], force=True)
        assert ord("א") in installer.installed_codes()
        installer.reset("hebrew")
        installer.reset_fallback()
        assert installer.installed_codes() == set()
