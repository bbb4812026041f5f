"""Tests for the display session."""

from unittest.mock import MagicMock

import pytest

from latin1_display import (
    DisplayHost,
    DisplayOptions,
    DisplaySession,
    DisplayTable,
    EncodingSurface,
    InvalidCharset,
    InvalidOptions,
    supported_charsets,
)


class TestEnableDisable:
    """Tests for enable and disable."""

    def test_enable_all(self, session: DisplaySession) -> None:
        report = session.enable()
        assert session.active
        assert report.installed == supported_charsets()
        assert session.enabled_charsets == supported_charsets()
        assert session.table.apply("αж") == "{a*}{zh}"

    def test_enable_subset(self, session: DisplaySession) -> None:
        session.enable(["cyrillic"])
        assert session.enabled_charsets == ["cyrillic"]
        assert ord("α") not in session.table

    def test_enable_single_name(self, session: DisplaySession) -> None:
        session.enable("greek")
        assert session.enabled_charsets == ["greek"]

    def test_enable_then_disable_restores_table(
        self, session: DisplaySession, table: DisplayTable
    ) -> None:
        table[ord("ж")] = "zh!"
        table[0x2026] = "~"
        table[0x41] = "a"
        before = table.snapshot()
        session.enable(force=True, transliterate=True)
        assert table.snapshot() != before
        session.disable()
        assert table.snapshot() == before
        assert not session.active
        assert session.enabled_charsets == []

    def test_enable_is_idempotent(
        self, session: DisplaySession, table: DisplayTable
    ) -> None:
        session.enable(["greek"])
        first = table.snapshot()
        session.enable(["greek"])
        assert table.snapshot() == first
        session.disable()
        assert len(table) == 0

    def test_disable_is_idempotent(
        self, session: DisplaySession, table: DisplayTable
    ) -> None:
        session.disable()
        session.enable()
        session.disable()
        session.disable()
        assert len(table) == 0
        assert not session.active

    def test_disable_requests_redraw(
        self, session: DisplaySession, host: DisplayHost
    ) -> None:
        session.disable()
        host.on_redraw.assert_called_once_with()  # type: ignore[union-attr]
        assert host.on_yield.call_count == len(supported_charsets())  # type: ignore[union-attr]

    def test_native_surface_skips(self, utf8_surface: EncodingSurface) -> None:
        session = DisplaySession(utf8_surface)
        report = session.enable()
        assert session.active
        assert report.skipped == supported_charsets()
        assert session.enabled_charsets == []
        assert len(session.table) == 0

    def test_transliterate(self, session: DisplaySession) -> None:
        session.enable(["greek"], transliterate=True)
        assert session.table.apply("ﬁ") == "fi"

    def test_default_host_without_hooks(self) -> None:
        session = DisplaySession()
        session.enable(["hebrew"])
        session.disable()
        assert len(session.table) == 0


class TestInvalidCharsets:
    """Tests for unsupported identifiers passed to the session."""

    def test_all_invalid(self, session: DisplaySession, table: DisplayTable) -> None:
        with pytest.raises(InvalidCharset):
            session.enable(["unknown-set"])
        assert not session.active
        assert len(table) == 0

    def test_mixed(self, session: DisplaySession) -> None:
        with pytest.raises(InvalidCharset) as excinfo:
            session.enable(["greek", "unknown-set"])
        assert excinfo.value.names == ("unknown-set",)
        assert session.active
        assert session.enabled_charsets == ["greek"]
        assert session.table[ord("α")] == "{a*}"

    def test_mixed_still_transliterates(self, session: DisplaySession) -> None:
        with pytest.raises(InvalidCharset):
            session.enable(["greek", "klingon"], transliterate=True)
        assert session.enabled_charsets == ["greek"]
        assert session.table[0x2020] == "+"

    def test_all_invalid_does_not_transliterate(
        self, session: DisplaySession, table: DisplayTable
    ) -> None:
        with pytest.raises(InvalidCharset):
            session.enable(["klingon"], transliterate=True)
        assert len(table) == 0


class TestApplyOptions:
    """Tests for binding host options."""

    def test_enable_from_mapping(self, session: DisplaySession) -> None:
        session.apply_options({"enabled": True, "charsets": ["greek"]})
        assert session.active
        assert session.table[ord("α")] == "{a*}"

    def test_format_change_reinstalls(self, session: DisplaySession) -> None:
        session.apply_options({"enabled": True, "charsets": "greek"})
        session.apply_options(
            {"enabled": True, "charsets": "greek", "display_format": "<%s>"}
        )
        assert session.format_rule.template == "<%s>"
        assert session.table[ord("α")] == "<a*>"

    def test_legacy_mnemonics(self, session: DisplaySession) -> None:
        session.apply_options(
            DisplayOptions(enabled=True, charsets=["latin-2"], legacy_mnemonics=True)
        )
        assert session.table[ord("Ą")] == "{A;}"

    def test_disable_from_options(
        self, session: DisplaySession, host: DisplayHost
    ) -> None:
        session.apply_options({"enabled": True})
        session.apply_options({"enabled": False})
        assert not session.active
        assert len(session.table) == 0
        host.on_redraw.assert_called()  # type: ignore[union-attr]

    def test_disabled_options_on_inactive_session(
        self, session: DisplaySession, host: DisplayHost
    ) -> None:
        session.apply_options({})
        assert not session.active
        host.on_redraw.assert_not_called()  # type: ignore[union-attr]

    def test_force_option(self, utf8_surface: EncodingSurface) -> None:
        session = DisplaySession(utf8_surface)
        session.apply_options({"enabled": True, "charsets": ["arabic"], "force": True})
        assert session.table[ord("ع")] == "{e+}"

    def test_invalid_options(self, session: DisplaySession) -> None:
        with pytest.raises(InvalidOptions):
            session.apply_options({"enabled": True, "charsets": ["klingon"]})
        assert not session.active


class TestHost:
    """Tests for the host bridge."""

    def test_hooks(self) -> None:
        redraw = MagicMock()
        yield_once = MagicMock()
        host = DisplayHost(redraw, yield_once)
        host.request_redraw()
        host.yield_once()
        redraw.assert_called_once_with()
        yield_once.assert_called_once_with()

    def test_missing_hooks_are_noops(self) -> None:
        host = DisplayHost()
        host.request_redraw()
        host.yield_once()
