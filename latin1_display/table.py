"""Per-surface display table."""

from __future__ import annotations

from collections.abc import Iterator, Mapping


class DisplayTable:
    """Maps absolute character codes to replacement strings.

    A code with no entry is drawn natively. A replacement is a single
    character or an ordered sequence of characters; the empty string hides
    the character. One table exists per output surface and is owned by the
    session driving that surface.
    """

    def __init__(self, entries: Mapping[int, str] | None = None) -> None:
        self._entries: dict[int, str] = {}
        if entries:
            for code, replacement in entries.items():
                self[code] = replacement

    def __getitem__(self, code: int) -> str | None:
        """Return the replacement for ``code``, or None for "no override"."""
        return self._entries.get(code)

    def __setitem__(self, code: int, replacement: str) -> None:
        if not isinstance(code, int) or code < 0:
            raise ValueError(f"Display table index must be a character code: {code!r}")
        if not isinstance(replacement, str):
            raise TypeError(f"Replacement for U+{code:04X} must be a string")
        self._entries[code] = replacement

    def __delitem__(self, code: int) -> None:
        self._entries.pop(code, None)

    def __contains__(self, code: object) -> bool:
        return code in self._entries

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, code: int, default: str | None = None) -> str | None:
        return self._entries.get(code, default)

    def clear(self, code: int | None = None) -> None:
        """Remove the entry for ``code``, or every entry when no code is given."""
        if code is None:
            self._entries.clear()
        else:
            self._entries.pop(code, None)

    def snapshot(self) -> dict[int, str]:
        """Return a copy of every entry."""
        return dict(self._entries)

    def apply(self, text: str) -> str:
        """Render text through the table, as the host does when drawing."""
        if not self._entries:
            return text
        return "".join(self._entries.get(ord(char), char) for char in text)
