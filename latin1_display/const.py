"""Constants for the Latin-1 display substitution package."""

from __future__ import annotations

# Charset identifiers
CHARSET_LATIN_2 = "latin-2"
CHARSET_LATIN_3 = "latin-3"
CHARSET_LATIN_4 = "latin-4"
CHARSET_LATIN_5 = "latin-5"
CHARSET_LATIN_8 = "latin-8"
CHARSET_LATIN_9 = "latin-9"
CHARSET_GREEK = "greek"
CHARSET_HEBREW = "hebrew"
CHARSET_CYRILLIC = "cyrillic"
CHARSET_ARABIC = "arabic"

# Order matters: installation walks the charsets in this order
SUPPORTED_CHARSETS: list[str] = [
    CHARSET_LATIN_2,
    CHARSET_LATIN_3,
    CHARSET_LATIN_4,
    CHARSET_LATIN_5,
    CHARSET_LATIN_8,
    CHARSET_LATIN_9,
    CHARSET_GREEK,
    CHARSET_HEBREW,
    CHARSET_CYRILLIC,
    CHARSET_ARABIC,
]

# Printable code range of a 96-character ISO 8859 set; byte = code + 128
PRINTABLE_RANGE_START = 32
PRINTABLE_RANGE_END = 127
HIGH_HALF_OFFSET = 128

# Characters below this are pure Latin-1 and always displayable
LATIN1_LIMIT = 256

# Probed to decide whether the extended punctuation fallback is needed
EXTENDED_FONT_PROBE_CHAR = 0x2018  # LEFT SINGLE QUOTATION MARK

# Configuration keys
CONF_ENABLED = "enabled"
CONF_CHARSETS = "charsets"
CONF_DISPLAY_FORMAT = "display_format"
CONF_LEGACY_MNEMONICS = "legacy_mnemonics"
CONF_FORCE = "force"
CONF_UCS_TRANSLITERATION = "ucs_transliteration"

# Default values
DEFAULT_DISPLAY_FORMAT = "{%s}"
DEFAULT_ENABLED = False
DEFAULT_LEGACY_MNEMONICS = False
DEFAULT_FORCE = False
DEFAULT_UCS_TRANSLITERATION = False

# Selecting this in the charset option means every supported charset
CHARSETS_ALL = "all"
