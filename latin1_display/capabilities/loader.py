"""Loader for the ESC/POS printer capability database."""

from __future__ import annotations

from functools import lru_cache
import logging
from typing import Any

_LOGGER = logging.getLogger(__name__)

# Fallback when a profile is unknown or declares no usable code pages
COMMON_CODEPAGES = sorted(["CP437", "CP850", "CP852", "CP858", "CP1252", "ISO_8859-1"])


@lru_cache(maxsize=1)
def _get_capabilities() -> dict[str, Any]:
    """Load capabilities from python-escpos (cached).

    Returns:
        Dictionary containing 'profiles' and 'encodings' data.
    """
    # Late import: the database is parsed on first import
    from escpos.capabilities import CAPABILITIES  # noqa: PLC0415

    return CAPABILITIES  # type: ignore[no-any-return]


def get_profile_codepages(profile_key: str | None) -> list[str]:
    """Get list of codepages supported by a printer profile.

    Args:
        profile_key: Profile key, or empty/None for common codepages.

    Returns:
        Sorted list of codepage names supported by the profile.
    """
    if not profile_key:
        return COMMON_CODEPAGES.copy()

    capabilities = _get_capabilities()
    profiles = capabilities.get("profiles", {})

    if profile_key not in profiles:
        _LOGGER.debug("Unknown profile '%s', returning common codepages", profile_key)
        return COMMON_CODEPAGES.copy()

    profile = profiles[profile_key]
    code_pages = profile.get("codePages", {})

    unique_pages = set(code_pages.values())
    unique_pages.discard("Unknown")
    unique_pages.discard("")

    if not unique_pages:
        return COMMON_CODEPAGES.copy()

    return sorted(unique_pages)


def get_codepage_codec(codepage: str) -> str | None:
    """Get the Python codec the capability database declares for a codepage.

    Args:
        codepage: Codepage name as used in printer profiles.

    Returns:
        The ``python_encode`` codec name, or None when the database has none.
    """
    encodings = _get_capabilities().get("encodings", {})
    info = encodings.get(codepage)
    if isinstance(info, dict) and info.get("python_encode"):
        return str(info["python_encode"])
    return None


def clear_capabilities_cache() -> None:
    """Clear the capabilities cache.

    Useful for testing or when capabilities file changes.
    """
    _get_capabilities.cache_clear()
