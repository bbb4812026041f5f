"""Latin-1 display substitution.

Shows characters of the ISO 8859 charsets (Latin-2/3/4/5/8/9, Greek, Hebrew,
Cyrillic and Arabic) on output surfaces that can only render Latin-1, by
installing readable substitutes into a per-surface display table: a
near-identical Latin-1 glyph where one exists, and otherwise an ASCII
mnemonic decorated by a display format such as ``{%s}``.

Typical use::

    session = DisplaySession(EncodingSurface.from_encoding("latin-1"))
    session.enable(["greek"])
    session.table.apply("αβγ")  # "{a*}{b*}{g*}"
    session.disable()
"""

from __future__ import annotations

from .capabilities import (
    CapabilityProbe,
    EncodingSurface,
    FontCoverage,
    FontSurface,
    Surface,
)
from .charsets import (
    CharsetDescriptor,
    SubstitutionEntry,
    get_charset,
    lookup_all,
    printable_characters,
    supported_charsets,
)
from .config import OPTIONS_SCHEMA, DisplayOptions
from .errors import (
    InvalidCharset,
    InvalidDisplayFormat,
    InvalidOptions,
    Latin1DisplayError,
)
from .format import FormatRule, validate_display_format
from .host import DisplayHost
from .installer import InstallReport, TableInstaller
from .session import DisplaySession
from .table import DisplayTable

__all__ = [
    "OPTIONS_SCHEMA",
    "CapabilityProbe",
    "CharsetDescriptor",
    "DisplayHost",
    "DisplayOptions",
    "DisplaySession",
    "DisplayTable",
    "EncodingSurface",
    "FontCoverage",
    "FontSurface",
    "FormatRule",
    "InstallReport",
    "InvalidCharset",
    "InvalidDisplayFormat",
    "InvalidOptions",
    "Latin1DisplayError",
    "SubstitutionEntry",
    "Surface",
    "TableInstaller",
    "get_charset",
    "lookup_all",
    "printable_characters",
    "supported_charsets",
    "validate_display_format",
]
