"""Host options controlling the display session."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import voluptuous as vol

from .const import (
    CHARSETS_ALL,
    CONF_CHARSETS,
    CONF_DISPLAY_FORMAT,
    CONF_ENABLED,
    CONF_FORCE,
    CONF_LEGACY_MNEMONICS,
    CONF_UCS_TRANSLITERATION,
    DEFAULT_DISPLAY_FORMAT,
    DEFAULT_ENABLED,
    DEFAULT_FORCE,
    DEFAULT_LEGACY_MNEMONICS,
    DEFAULT_UCS_TRANSLITERATION,
    SUPPORTED_CHARSETS,
)
from .errors import InvalidDisplayFormat, InvalidOptions
from .format import validate_display_format


def _display_format(value: Any) -> str:
    try:
        return validate_display_format(vol.Coerce(str)(value))
    except InvalidDisplayFormat as err:
        raise vol.Invalid(str(err)) from err


def _charset_selection(value: Any) -> list[str]:
    """Accept "all", a single identifier, or a list of identifiers."""
    if value is None or value == CHARSETS_ALL:
        return []
    if isinstance(value, str):
        value = [part.strip() for part in value.split(",") if part.strip()]
    if not isinstance(value, (list, tuple, set, frozenset)):
        raise vol.Invalid(f"Expected a charset list, got {value!r}")
    names = vol.Schema([vol.In([*SUPPORTED_CHARSETS, CHARSETS_ALL])])(list(value))
    if CHARSETS_ALL in names:
        return []
    return list(dict.fromkeys(names))


OPTIONS_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_ENABLED, default=DEFAULT_ENABLED): vol.Boolean(),
        vol.Optional(CONF_CHARSETS, default=CHARSETS_ALL): _charset_selection,
        vol.Optional(CONF_DISPLAY_FORMAT, default=DEFAULT_DISPLAY_FORMAT): _display_format,
        vol.Optional(
            CONF_LEGACY_MNEMONICS, default=DEFAULT_LEGACY_MNEMONICS
        ): vol.Boolean(),
        vol.Optional(CONF_FORCE, default=DEFAULT_FORCE): vol.Boolean(),
        vol.Optional(
            CONF_UCS_TRANSLITERATION, default=DEFAULT_UCS_TRANSLITERATION
        ): vol.Boolean(),
    }
)


@dataclass
class DisplayOptions:
    """Validated host options.

    An empty ``charsets`` list selects every supported charset.
    """

    enabled: bool = DEFAULT_ENABLED
    charsets: list[str] = field(default_factory=list)
    display_format: str = DEFAULT_DISPLAY_FORMAT
    legacy_mnemonics: bool = DEFAULT_LEGACY_MNEMONICS
    force: bool = DEFAULT_FORCE
    ucs_transliteration: bool = DEFAULT_UCS_TRANSLITERATION

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> DisplayOptions:
        """Validate a raw option mapping.

        Raises:
            InvalidOptions: If any option is missing its expected shape.
        """
        try:
            validated = OPTIONS_SCHEMA(dict(data or {}))
        except vol.Invalid as err:
            raise InvalidOptions(str(err)) from err
        return cls(
            enabled=validated[CONF_ENABLED],
            charsets=validated[CONF_CHARSETS],
            display_format=validated[CONF_DISPLAY_FORMAT],
            legacy_mnemonics=validated[CONF_LEGACY_MNEMONICS],
            force=validated[CONF_FORCE],
            ucs_transliteration=validated[CONF_UCS_TRANSLITERATION],
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            CONF_ENABLED: self.enabled,
            CONF_CHARSETS: list(self.charsets) or CHARSETS_ALL,
            CONF_DISPLAY_FORMAT: self.display_format,
            CONF_LEGACY_MNEMONICS: self.legacy_mnemonics,
            CONF_FORCE: self.force,
            CONF_UCS_TRANSLITERATION: self.ucs_transliteration,
        }
