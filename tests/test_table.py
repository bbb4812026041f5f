"""Tests for the display table."""

import pytest

from latin1_display import DisplayTable


class TestDisplayTable:
    """Tests for DisplayTable."""

    def test_missing_code_is_none(self) -> None:
        assert DisplayTable()[0x3B1] is None

    def test_set_and_get(self) -> None:
        table = DisplayTable()
        table[0x3B1] = "{a*}"
        assert table[0x3B1] == "{a*}"
        assert 0x3B1 in table
        assert len(table) == 1

    def test_initial_entries(self) -> None:
        table = DisplayTable({0x436: "zh", 0x3B1: "a"})
        assert list(table) == [0x3B1, 0x436]

    def test_empty_replacement_hides(self) -> None:
        table = DisplayTable({0x200E: ""})
        assert table.apply("a\u200eb") == "ab"

    def test_rejects_bad_code(self) -> None:
        table = DisplayTable()
        with pytest.raises(ValueError):
            table[-1] = "x"
        with pytest.raises(ValueError):
            table["a"] = "x"  # type: ignore[index]

    def test_rejects_non_string_replacement(self) -> None:
        with pytest.raises(TypeError):
            DisplayTable()[0x3B1] = 0x61  # type: ignore[assignment]

    def test_delete_missing_is_silent(self) -> None:
        table = DisplayTable()
        del table[0x3B1]
        assert len(table) == 0

    def test_clear_one(self) -> None:
        table = DisplayTable({0x436: "zh", 0x3B1: "a"})
        table.clear(0x436)
        assert table.snapshot() == {0x3B1: "a"}

    def test_clear_all(self) -> None:
        table = DisplayTable({0x436: "zh", 0x3B1: "a"})
        table.clear()
        assert len(table) == 0

    def test_get_default(self) -> None:
        assert DisplayTable().get(0x436, "?") == "?"

    def test_snapshot_is_a_copy(self) -> None:
        table = DisplayTable({0x436: "zh"})
        snapshot = table.snapshot()
        snapshot[0x3B1] = "a"
        assert 0x3B1 not in table

    def test_apply(self) -> None:
        table = DisplayTable({ord("α"): "{a*}", ord("β"): "{b*}"})
        assert table.apply("αβ x") == "{a*}{b*} x"

    def test_apply_empty_table(self) -> None:
        assert DisplayTable().apply("αβ") == "αβ"
