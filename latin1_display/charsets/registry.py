"""Registry of supported charsets."""

from __future__ import annotations

import logging

from ..const import (
    CHARSET_ARABIC,
    CHARSET_CYRILLIC,
    CHARSET_GREEK,
    CHARSET_HEBREW,
    CHARSET_LATIN_2,
    CHARSET_LATIN_3,
    CHARSET_LATIN_4,
    CHARSET_LATIN_5,
    CHARSET_LATIN_8,
    CHARSET_LATIN_9,
    LATIN1_LIMIT,
    SUPPORTED_CHARSETS,
)
from ..errors import InvalidCharset
from .arabic import ARABIC_ENTRIES
from .cyrillic import CYRILLIC_ENTRIES
from .greek import GREEK_ENTRIES
from .hebrew import HEBREW_ENTRIES
from .latin import (
    LATIN_2_ENTRIES,
    LATIN_3_ENTRIES,
    LATIN_4_ENTRIES,
    LATIN_5_ENTRIES,
    LATIN_8_ENTRIES,
    LATIN_9_ENTRIES,
)
from .models import CharsetDescriptor, SubstitutionEntry

_LOGGER = logging.getLogger(__name__)

CHARSETS: dict[str, CharsetDescriptor] = {
    descriptor.name: descriptor
    for descriptor in (
        CharsetDescriptor(CHARSET_LATIN_2, "iso8859-2", LATIN_2_ENTRIES, True, "ő"),
        CharsetDescriptor(CHARSET_LATIN_3, "iso8859-3", LATIN_3_ENTRIES, True, "ħ"),
        CharsetDescriptor(CHARSET_LATIN_4, "iso8859-4", LATIN_4_ENTRIES, True, "ĸ"),
        CharsetDescriptor(CHARSET_LATIN_5, "iso8859-9", LATIN_5_ENTRIES, True, "ğ"),
        CharsetDescriptor(CHARSET_LATIN_8, "iso8859-14", LATIN_8_ENTRIES, True, "ẁ"),
        CharsetDescriptor(CHARSET_LATIN_9, "iso8859-15", LATIN_9_ENTRIES, True, "Š"),
        CharsetDescriptor(CHARSET_GREEK, "iso8859-7", GREEK_ENTRIES, False, "α"),
        CharsetDescriptor(CHARSET_HEBREW, "iso8859-8", HEBREW_ENTRIES, False, "א"),
        CharsetDescriptor(CHARSET_CYRILLIC, "iso8859-5", CYRILLIC_ENTRIES, False, "ж"),
        CharsetDescriptor(CHARSET_ARABIC, "iso8859-6", ARABIC_ENTRIES, False, "ع"),
    )
}


def supported_charsets() -> list[str]:
    """Get the supported charset identifiers in installation order."""
    return list(SUPPORTED_CHARSETS)


def get_charset(name: str) -> CharsetDescriptor:
    """Get the registry record for a charset.

    Args:
        name: Charset identifier (e.g. "latin-2", "greek").

    Returns:
        The charset descriptor.

    Raises:
        InvalidCharset: If the identifier is not supported.
    """
    try:
        return CHARSETS[name]
    except (KeyError, TypeError) as err:
        raise InvalidCharset(str(name)) from err


def is_supported(name: str) -> bool:
    """Check whether a charset identifier is supported."""
    return name in CHARSETS


def lookup_all(name: str) -> tuple[SubstitutionEntry, ...]:
    """Get the authored substitution entries of a charset, in table order.

    Raises:
        InvalidCharset: If the identifier is not supported.
    """
    return get_charset(name).entries


def printable_characters(name: str) -> list[str]:
    """Get the characters of a charset that may need substitution."""
    return [char for _, char in get_charset(name).iter_printable()]


def owning_charset(code: int) -> str | None:
    """Return the first supported charset whose printable range holds ``code``.

    Latin-1 codes belong to no charset here: they are always displayable.
    """
    if code < LATIN1_LIMIT:
        return None
    for name in SUPPORTED_CHARSETS:
        if code in CHARSETS[name]:
            return name
    _LOGGER.debug("No supported charset owns U+%04X", code)
    return None


def owning_charsets(code: int) -> set[str]:
    """Return every supported charset whose printable range holds ``code``.

    Several ISO 8859 sets share characters (Š is in Latin-2 and Latin-9, €
    in Latin-9 and Greek), so a code may belong to more than one charset.
    """
    if code < LATIN1_LIMIT:
        return set()
    return {name for name in SUPPORTED_CHARSETS if code in CHARSETS[name]}
