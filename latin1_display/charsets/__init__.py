"""Per-charset substitution tables.

Each supported charset is described by a ``CharsetDescriptor`` held in a
registry keyed by identifier. A descriptor carries the charset's codec, its
authored substitution entries, whether an identity pass onto Latin-1 runs
before those entries, and the character probed to decide whether the output
surface needs substitution at all.

Latin-n sets share glyph shapes with Latin-1, so they get the identity pass
and override only the characters that differ. Greek, Hebrew, Cyrillic and
Arabic share no such shapes and list every character explicitly.
"""

from __future__ import annotations

from .fallback import EXTENDED_PUNCTUATION, LEGACY_EQUIVALENTS
from .models import CharsetDescriptor, SubstitutionEntry
from .registry import (
    CHARSETS,
    get_charset,
    is_supported,
    lookup_all,
    owning_charset,
    owning_charsets,
    printable_characters,
    supported_charsets,
)
from .transliterations import UCS_TRANSLITERATIONS

__all__ = [
    "CHARSETS",
    "EXTENDED_PUNCTUATION",
    "LEGACY_EQUIVALENTS",
    "UCS_TRANSLITERATIONS",
    "CharsetDescriptor",
    "SubstitutionEntry",
    "get_charset",
    "is_supported",
    "lookup_all",
    "owning_charset",
    "owning_charsets",
    "printable_characters",
    "supported_charsets",
]
