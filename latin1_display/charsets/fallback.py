"""Static equivalence tables for the extended punctuation fallback pass.

Both tables map a target code (a character outside Latin-1) to its source:
an integer code whose display (or the character itself) stands in for the
target, or a literal ASCII string. The installer only writes targets that
have no display table entry yet.
"""

from __future__ import annotations

EXTENDED_PUNCTUATION: dict[int, int | str] = {
    0x2018: 0x60,  # LEFT SINGLE QUOTATION MARK -> GRAVE ACCENT
    0x2019: 0x27,  # RIGHT SINGLE QUOTATION MARK -> APOSTROPHE
    0x201C: 0x22,  # LEFT DOUBLE QUOTATION MARK -> QUOTATION MARK
    0x201D: 0x22,  # RIGHT DOUBLE QUOTATION MARK -> QUOTATION MARK
    0x2026: "...",  # HORIZONTAL ELLIPSIS
    0x2030: "o/oo",  # PER MILLE SIGN
    0x2039: 0x3C,  # SINGLE LEFT-POINTING ANGLE QUOTATION MARK -> LESS-THAN SIGN
    0x203A: 0x3E,  # SINGLE RIGHT-POINTING ANGLE QUOTATION MARK -> GREATER-THAN SIGN
    0x2013: 0x2D,  # EN DASH -> HYPHEN-MINUS
    0x2014: "--",  # EM DASH
    0x2122: "TM",  # TRADE MARK SIGN
}

# Characters whose glyph is shared with a character of the legacy 8-bit
# (ASCII / Latin-1) repertoire
LEGACY_EQUIVALENTS: dict[int, int | str] = {
    0x02B9: 0x27,  # MODIFIER LETTER PRIME -> APOSTROPHE
    0x02BC: 0x27,  # MODIFIER LETTER APOSTROPHE -> APOSTROPHE
    0x02C6: 0x5E,  # MODIFIER LETTER CIRCUMFLEX ACCENT -> CIRCUMFLEX ACCENT
    0x02CB: 0x60,  # MODIFIER LETTER GRAVE ACCENT -> GRAVE ACCENT
    0x02CD: 0x5F,  # MODIFIER LETTER LOW MACRON -> LOW LINE
    0x02DC: 0x7E,  # SMALL TILDE -> TILDE
    0x037E: 0x3B,  # GREEK QUESTION MARK -> SEMICOLON
    0x0387: 0xB7,  # GREEK ANO TELEIA -> MIDDLE DOT
    0x2010: 0x2D,  # HYPHEN -> HYPHEN-MINUS
    0x2011: 0x2D,  # NON-BREAKING HYPHEN -> HYPHEN-MINUS
    0x2012: 0x2D,  # FIGURE DASH -> HYPHEN-MINUS
    0x201A: 0x2C,  # SINGLE LOW-9 QUOTATION MARK -> COMMA
    0x2022: 0xB7,  # BULLET -> MIDDLE DOT
    0x2027: 0xB7,  # HYPHENATION POINT -> MIDDLE DOT
    0x2032: 0x27,  # PRIME -> APOSTROPHE
    0x2033: 0x22,  # DOUBLE PRIME -> QUOTATION MARK
    0x2044: 0x2F,  # FRACTION SLASH -> SOLIDUS
    0x2212: 0x2D,  # MINUS SIGN -> HYPHEN-MINUS
    0x2215: 0x2F,  # DIVISION SLASH -> SOLIDUS
    0x2216: 0x5C,  # SET MINUS -> REVERSE SOLIDUS
    0x2219: 0xB7,  # BULLET OPERATOR -> MIDDLE DOT
    0x2223: 0x7C,  # DIVIDES -> VERTICAL LINE
    0x2236: 0x3A,  # RATIO -> COLON
    0x223C: 0x7E,  # TILDE OPERATOR -> TILDE
    0x2329: 0x3C,  # LEFT-POINTING ANGLE BRACKET -> LESS-THAN SIGN
    0x232A: 0x3E,  # RIGHT-POINTING ANGLE BRACKET -> GREATER-THAN SIGN
}
