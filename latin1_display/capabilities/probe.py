"""Display capability probe."""

from __future__ import annotations

import logging

from ..const import LATIN1_LIMIT
from .surfaces import Surface

_LOGGER = logging.getLogger(__name__)


class CapabilityProbe:
    """Answers whether the active output surface renders a character natively.

    The probe is read-only and never raises. Latin-1 is always displayable;
    anything else is delegated to the surface, and a surface that cannot
    answer (missing, or failing) counts as "not displayable", so callers
    substitute conservatively.
    """

    def __init__(self, surface: Surface | None = None) -> None:
        self._surface = surface

    @property
    def surface(self) -> Surface | None:
        """The surface currently probed."""
        return self._surface

    def set_surface(self, surface: Surface | None) -> None:
        """Switch to another output surface (e.g. a newly selected frame)."""
        self._surface = surface

    def can_display(self, code: int | str) -> bool:
        """Check whether a character is rendered natively.

        Args:
            code: Absolute character code, or a one-character string.

        Returns:
            True if the surface renders the character without substitution.
        """
        try:
            if isinstance(code, str):
                code = ord(code)
            if 0 <= code < LATIN1_LIMIT:
                return True
            if self._surface is None:
                return False
            return bool(self._surface.covers(code))
        except Exception as err:  # noqa: BLE001
            _LOGGER.debug("Capability probe failed for %r: %s", code, err)
            return False
