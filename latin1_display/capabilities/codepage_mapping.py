"""Codepage and encoding name mapping.

Output surfaces name their encoding in many spellings ("ISO_8859-2",
"latin2", "CP1251"). This module turns those names into canonical Python
codec names and finds the supported charsets a codec can render natively.
"""

from __future__ import annotations

import codecs
import logging

from ..charsets import CHARSETS

_LOGGER = logging.getLogger(__name__)

# Mapping from common codepage names to Python codec names
CODEPAGE_TO_CODEC: dict[str, str] = {
    "CP437": "cp437",
    "CP850": "cp850",
    "CP852": "cp852",
    "CP855": "cp855",
    "CP857": "cp857",
    "CP858": "cp858",
    "CP862": "cp862",
    "CP864": "cp864",
    "CP866": "cp866",
    "CP869": "cp869",
    "CP1250": "cp1250",
    "CP1251": "cp1251",
    "CP1252": "cp1252",
    "CP1253": "cp1253",
    "CP1254": "cp1254",
    "CP1255": "cp1255",
    "CP1256": "cp1256",
    "ISO_8859-1": "iso-8859-1",
    "ISO_8859-2": "iso-8859-2",
    "ISO_8859-3": "iso-8859-3",
    "ISO_8859-4": "iso-8859-4",
    "ISO_8859-5": "iso-8859-5",
    "ISO_8859-6": "iso-8859-6",
    "ISO_8859-7": "iso-8859-7",
    "ISO_8859-8": "iso-8859-8",
    "ISO_8859-9": "iso-8859-9",
    "ISO_8859-14": "iso-8859-14",
    "ISO_8859-15": "iso-8859-15",
    "LATIN1": "latin-1",
    "UTF-8": "utf-8",
}


def get_codec_name(codepage: str) -> str:
    """Get Python codec name for a codepage.

    Args:
        codepage: Codepage name (e.g., "CP437", "ISO_8859-1").

    Returns:
        Python codec name.
    """
    if codepage.upper() in CODEPAGE_TO_CODEC:
        return CODEPAGE_TO_CODEC[codepage.upper()]

    normalized = codepage.upper().replace("-", "_").replace(" ", "")

    if normalized.startswith("CP") and normalized[2:].isdigit():
        return f"cp{normalized[2:]}"

    if normalized.startswith("ISO_8859_") or normalized.startswith("ISO8859_"):
        num = normalized.split("_")[-1]
        return f"iso-8859-{num}"

    return codepage.lower()


def canonical_codec(name: str | None) -> str | None:
    """Resolve an encoding or codepage name to Python's canonical codec name.

    Args:
        name: Encoding name in any spelling.

    Returns:
        Canonical codec name (e.g. "iso8859-2"), or None if Python has no
        such codec.
    """
    if not name:
        return None
    try:
        return codecs.lookup(get_codec_name(name)).name
    except LookupError:
        _LOGGER.debug("Unknown encoding '%s'", name)
        return None


def charsets_for_codec(name: str | None) -> set[str]:
    """Get the supported charsets whose repertoire a codec renders natively.

    A charset qualifies when the codec is the charset's own codec, or when
    every printable character of the charset can be encoded with it.

    Args:
        name: Encoding name in any spelling.

    Returns:
        Set of charset identifiers, empty for unknown codecs.
    """
    codec = canonical_codec(name)
    if codec is None:
        return set()

    safe: set[str] = set()
    for charset_name, descriptor in CHARSETS.items():
        if canonical_codec(descriptor.codec) == codec:
            safe.add(charset_name)
            continue
        try:
            for _, char in descriptor.iter_printable():
                char.encode(codec)
        except UnicodeEncodeError:
            continue
        safe.add(charset_name)
    return safe
