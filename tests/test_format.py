"""Tests for the display format rule."""

import pytest

from latin1_display import FormatRule, InvalidDisplayFormat, validate_display_format
from latin1_display.charsets.models import same, sub


class TestValidateDisplayFormat:
    """Tests for validate_display_format."""

    @pytest.mark.parametrize("template", ["{%s}", "%s", "<%s>", "[%s]%%"])
    def test_valid(self, template: str) -> None:
        assert validate_display_format(template) == template

    @pytest.mark.parametrize(
        "template",
        ["", "{}", "%s%s", "{%d}", "%(name)s", "%r", "%5s", "100%", "%c%%s", "%%s"],
    )
    def test_invalid(self, template: str) -> None:
        with pytest.raises(InvalidDisplayFormat):
            validate_display_format(template)

    def test_non_string(self) -> None:
        with pytest.raises(InvalidDisplayFormat):
            validate_display_format(None)  # type: ignore[arg-type]

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            FormatRule("no placeholder")


class TestFormatRule:
    """Tests for FormatRule."""

    def test_default_braces(self) -> None:
        assert FormatRule().render("X") == "{X}"

    def test_bare_template(self) -> None:
        assert FormatRule("%s").render("X") == "X"

    def test_literal_percent(self) -> None:
        assert FormatRule("%s%%").render("o/o") == "o/o%"

    def test_escaped_percent_before_placeholder(self) -> None:
        assert FormatRule("%%%s").render("X") == "%X"

    def test_choose_primary(self) -> None:
        assert FormatRule().choose(sub("Ą", ";A", "A;")) == ";A"

    def test_choose_legacy(self) -> None:
        rule = FormatRule(legacy_mnemonics=True)
        assert rule.choose(sub("Ą", ";A", "A;")) == "A;"

    def test_legacy_without_alternate_uses_primary(self) -> None:
        rule = FormatRule(legacy_mnemonics=True)
        assert rule.choose(sub("α", "a*")) == "a*"

    def test_choose_identity_raises(self) -> None:
        with pytest.raises(ValueError):
            FormatRule().choose(same("ı", "i"))

    def test_replacement_for_identity_is_unformatted(self) -> None:
        assert FormatRule().replacement_for(same("Α", "A")) == "A"

    def test_replacement_for_mnemonic(self) -> None:
        assert FormatRule("<%s>").replacement_for(sub("ж", "zh", "z%")) == "<zh>"
        rule = FormatRule("<%s>", legacy_mnemonics=True)
        assert rule.replacement_for(sub("ж", "zh", "z%")) == "<z%>"
