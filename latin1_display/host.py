"""Scheduling primitives provided by the hosting application."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import logging

_LOGGER = logging.getLogger(__name__)


@dataclass
class DisplayHost:
    """Bridge to the host's event loop.

    Attributes:
        on_redraw: Called to request a full redraw of the surface.
        on_yield: Called to let the host's event loop run once (e.g. to repaint
            after a charset was reset). No ordering guarantee beyond "after
            the writes that preceded it".
    """

    on_redraw: Callable[[], None] | None = None
    on_yield: Callable[[], None] | None = None

    def request_redraw(self) -> None:
        if self.on_redraw is None:
            _LOGGER.debug("Redraw requested with no host redraw hook")
            return
        self.on_redraw()

    def yield_once(self) -> None:
        if self.on_yield is not None:
            self.on_yield()
