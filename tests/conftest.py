from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from latin1_display import (
    DisplayHost,
    DisplaySession,
    DisplayTable,
    EncodingSurface,
)
from latin1_display.capabilities import clear_capabilities_cache

FAKE_CAPABILITIES: dict[str, Any] = {
    "profiles": {
        "greek-receipt": {
            "codePages": {"0": "CP437", "14": "ISO_8859-7", "255": "Unknown"},
        },
        "no-codepages": {"codePages": {}},
    },
    "encodings": {
        "CP437": {"name": "CP437", "python_encode": "cp437"},
        "ISO_8859-7": {"name": "ISO_8859-7", "python_encode": "iso8859_7"},
    },
}


@pytest.fixture(autouse=True)
def fresh_capabilities_cache() -> Generator[None, None, None]:
    """Never let a cached capability database leak between tests."""
    clear_capabilities_cache()
    yield
    clear_capabilities_cache()


@pytest.fixture
def fake_capabilities() -> Generator[dict[str, Any], None, None]:
    """Replace the python-escpos capability database with a small fake."""
    with patch(
        "latin1_display.capabilities.loader._get_capabilities",
        return_value=FAKE_CAPABILITIES,
    ):
        yield FAKE_CAPABILITIES


@pytest.fixture
def latin1_surface() -> EncodingSurface:
    """A terminal that can only emit Latin-1."""
    return EncodingSurface.from_encoding("latin-1")


@pytest.fixture
def utf8_surface() -> EncodingSurface:
    """A terminal that renders everything natively."""
    return EncodingSurface.from_encoding("utf-8")


@pytest.fixture
def host() -> DisplayHost:
    return DisplayHost(on_redraw=MagicMock(), on_yield=MagicMock())


@pytest.fixture
def table() -> DisplayTable:
    return DisplayTable()


@pytest.fixture
def session(
    latin1_surface: EncodingSurface, table: DisplayTable, host: DisplayHost
) -> DisplaySession:
    return DisplaySession(latin1_surface, table=table, host=host)
