"""Exceptions raised by the Latin-1 display substitution package."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class Latin1DisplayError(Exception):
    """Base class for all errors raised by this package."""


class InvalidCharset(Latin1DisplayError, ValueError):
    """Raised when a charset identifier is not supported.

    Attributes:
        names: The unsupported identifiers, in the order they were seen.
        report: The install report of the charsets that were processed
            alongside the unsupported ones, when there were any.
    """

    def __init__(self, names: str | Iterable[str], report: Any = None) -> None:
        if isinstance(names, str):
            names = [names]
        self.names: tuple[str, ...] = tuple(names)
        self.report = report
        super().__init__(f"Unsupported charset(s): {', '.join(self.names)}")


class InvalidDisplayFormat(Latin1DisplayError, ValueError):
    """Raised when a display format template is not a single-placeholder template."""


class InvalidOptions(Latin1DisplayError, ValueError):
    """Raised when host options fail validation."""
