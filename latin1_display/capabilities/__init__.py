"""Capabilities module for output surfaces.

This module decides whether an output surface can render a character
natively. Graphical surfaces are described by the fonts they use (coverage
read with fontTools); non-graphical surfaces by their output encoding, which
may come from a terminal coding system or from the code pages an ESC/POS
printer profile declares in the python-escpos capability database.
"""

from __future__ import annotations

from .codepage_mapping import (
    CODEPAGE_TO_CODEC,
    canonical_codec,
    charsets_for_codec,
    get_codec_name,
)
from .loader import (
    COMMON_CODEPAGES,
    clear_capabilities_cache,
    get_codepage_codec,
    get_profile_codepages,
)
from .probe import CapabilityProbe
from .surfaces import EncodingSurface, FontCoverage, FontSurface, Surface

__all__ = [
    "CODEPAGE_TO_CODEC",
    "COMMON_CODEPAGES",
    "CapabilityProbe",
    "EncodingSurface",
    "FontCoverage",
    "FontSurface",
    "Surface",
    "canonical_codec",
    "charsets_for_codec",
    "clear_capabilities_cache",
    "get_codec_name",
    "get_codepage_codec",
    "get_profile_codepages",
]
