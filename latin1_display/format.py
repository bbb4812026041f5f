"""Display format rule for mnemonic substitutions."""

from __future__ import annotations

import re

from .charsets import SubstitutionEntry
from .const import DEFAULT_DISPLAY_FORMAT, DEFAULT_LEGACY_MNEMONICS
from .errors import InvalidDisplayFormat

_CONVERSION_RE = re.compile(r"%(.?)", re.DOTALL)


def validate_display_format(template: str) -> str:
    """Check that a template holds exactly one ``%s`` placeholder.

    ``%%`` may be used for a literal percent sign.

    Args:
        template: The display format template.

    Returns:
        The template, unchanged.

    Raises:
        InvalidDisplayFormat: If the template has no placeholder, several
            placeholders, or a placeholder other than ``%s``.
    """
    if not isinstance(template, str):
        raise InvalidDisplayFormat(f"Display format must be a string, got {template!r}")
    conversions = _CONVERSION_RE.findall(template)
    if conversions.count("s") != 1 or any(c not in ("s", "%") for c in conversions):
        raise InvalidDisplayFormat(f"Display format {template!r} must contain exactly one %s")
    return template


class FormatRule:
    """Decorates mnemonics and picks which mnemonic of an entry is shown."""

    def __init__(
        self,
        template: str = DEFAULT_DISPLAY_FORMAT,
        legacy_mnemonics: bool = DEFAULT_LEGACY_MNEMONICS,
    ) -> None:
        self._template = validate_display_format(template)
        self.legacy_mnemonics = legacy_mnemonics

    @property
    def template(self) -> str:
        return self._template

    def render(self, mnemonic: str) -> str:
        """Substitute a mnemonic into the template."""
        return self._template % (mnemonic,)

    def choose(self, entry: SubstitutionEntry) -> str:
        """Return the mnemonic shown for an entry under the current preference.

        Raises:
            ValueError: If the entry is an identity entry.
        """
        if entry.mnemonic is None:
            raise ValueError(f"Entry U+{entry.code:04X} has no mnemonic")
        if self.legacy_mnemonics and entry.alt_mnemonic is not None:
            return entry.alt_mnemonic
        return entry.mnemonic

    def replacement_for(self, entry: SubstitutionEntry) -> str:
        """Return what the display table should hold for an entry.

        Identity characters are used as-is; mnemonics are rendered.
        """
        if entry.identity is not None:
            return entry.identity
        return self.render(self.choose(entry))
