"""Broad Unicode to ASCII transliterations, in the manner of the Lynx browser.

This table is installed only when UCS transliteration is switched on, after
the charset and fallback passes, and only fills codes that still have no
display table entry. Replacements are written verbatim (no display format),
so they read like ordinary text.
"""

from __future__ import annotations

UCS_TRANSLITERATIONS: dict[str, str] = {
    # ==========================================================================
    # LATIN LETTERS OUTSIDE THE ISO 8859 SETS
    # ==========================================================================
    "ŉ": "'n",  # LATIN SMALL LETTER N PRECEDED BY APOSTROPHE
    "Œ": "OE",  # LATIN CAPITAL LIGATURE OE
    "œ": "oe",  # LATIN SMALL LIGATURE OE
    "ſ": "s",  # LATIN SMALL LETTER LONG S
    "ƒ": "f",  # LATIN SMALL LETTER F WITH HOOK
    "Ǆ": "DZ",  # LATIN CAPITAL LETTER DZ WITH CARON
    "ǆ": "dz",  # LATIN SMALL LETTER DZ WITH CARON
    "Ǉ": "LJ",  # LATIN CAPITAL LETTER LJ
    "ǉ": "lj",  # LATIN SMALL LETTER LJ
    "Ǌ": "NJ",  # LATIN CAPITAL LETTER NJ
    "ǌ": "nj",  # LATIN SMALL LETTER NJ
    "ə": "@",  # LATIN SMALL LETTER SCHWA
    "ﬀ": "ff",  # LATIN SMALL LIGATURE FF
    "ﬁ": "fi",  # LATIN SMALL LIGATURE FI
    "ﬂ": "fl",  # LATIN SMALL LIGATURE FL
    "ﬃ": "ffi",  # LATIN SMALL LIGATURE FFI
    "ﬄ": "ffl",  # LATIN SMALL LIGATURE FFL
    # ==========================================================================
    # QUOTES, DASHES AND SPACES
    # ==========================================================================
    "‛": "'",  # SINGLE HIGH-REVERSED-9 QUOTATION MARK
    "„": ",,",  # DOUBLE LOW-9 QUOTATION MARK
    "‟": '"',  # DOUBLE HIGH-REVERSED-9 QUOTATION MARK
    "‴": "'''",  # TRIPLE PRIME
    "‵": "`",  # REVERSED PRIME
    "―": "--",  # HORIZONTAL BAR
    "‖": "||",  # DOUBLE VERTICAL LINE
    "‗": "_",  # DOUBLE LOW LINE
    "†": "+",  # DAGGER
    "‡": "++",  # DOUBLE DAGGER
    "․": ".",  # ONE DOT LEADER
    "‥": "..",  # TWO DOT LEADER
    "⁃": "-",  # HYPHEN BULLET
    "\u2002": " ",  # EN SPACE
    "\u2003": " ",  # EM SPACE
    "\u2009": " ",  # THIN SPACE
    "\u200a": " ",  # HAIR SPACE
    "\u200b": "",  # ZERO WIDTH SPACE
    "\u202f": " ",  # NARROW NO-BREAK SPACE
    "\u3000": "  ",  # IDEOGRAPHIC SPACE
    # ==========================================================================
    # LETTERLIKE, CURRENCY AND NUMBER FORMS
    # ==========================================================================
    "₤": "L",  # LIRA SIGN
    "₧": "Pts",  # PESETA SIGN
    "€": "EUR",  # EURO SIGN
    "℃": "oC",  # DEGREE CELSIUS
    "℉": "oF",  # DEGREE FAHRENHEIT
    "№": "No.",  # NUMERO SIGN
    "℗": "(P)",  # SOUND RECORDING COPYRIGHT
    "℠": "SM",  # SERVICE MARK
    "Ω": "Ohm",  # OHM SIGN
    "⅓": " 1/3",  # VULGAR FRACTION ONE THIRD
    "⅔": " 2/3",  # VULGAR FRACTION TWO THIRDS
    "⅛": " 1/8",  # VULGAR FRACTION ONE EIGHTH
    "Ⅰ": "I",  # ROMAN NUMERAL ONE
    "Ⅱ": "II",  # ROMAN NUMERAL TWO
    "Ⅲ": "III",  # ROMAN NUMERAL THREE
    "Ⅳ": "IV",  # ROMAN NUMERAL FOUR
    "Ⅴ": "V",  # ROMAN NUMERAL FIVE
    "⁰": "^0",  # SUPERSCRIPT ZERO
    "⁴": "^4",  # SUPERSCRIPT FOUR
    "⁵": "^5",  # SUPERSCRIPT FIVE
    "₀": "_0",  # SUBSCRIPT ZERO
    "₁": "_1",  # SUBSCRIPT ONE
    "₂": "_2",  # SUBSCRIPT TWO
    # ==========================================================================
    # ARROWS AND MATHEMATICAL OPERATORS
    # ==========================================================================
    "←": "<-",  # LEFTWARDS ARROW
    "↑": "^",  # UPWARDS ARROW
    "→": "->",  # RIGHTWARDS ARROW
    "↓": "v",  # DOWNWARDS ARROW
    "↔": "<->",  # LEFT RIGHT ARROW
    "⇐": "<=",  # LEFTWARDS DOUBLE ARROW
    "⇒": "=>",  # RIGHTWARDS DOUBLE ARROW
    "⇔": "<=>",  # LEFT RIGHT DOUBLE ARROW
    "∀": "A",  # FOR ALL
    "∃": "E",  # THERE EXISTS
    "∅": "{}",  # EMPTY SET
    "∈": "(-",  # ELEMENT OF
    "∑": "Sum",  # N-ARY SUMMATION
    "√": "SQRT",  # SQUARE ROOT
    "∞": "inf",  # INFINITY
    "∧": "/\\",  # LOGICAL AND
    "∨": "\\/",  # LOGICAL OR
    "∩": "(U",  # INTERSECTION
    "∪": ")U",  # UNION
    "∫": "Int",  # INTEGRAL
    "∴": ".:",  # THEREFORE
    "≈": "~=",  # ALMOST EQUAL TO
    "≠": "!=",  # NOT EQUAL TO
    "≡": "==",  # IDENTICAL TO
    "≤": "<=",  # LESS-THAN OR EQUAL TO
    "≥": ">=",  # GREATER-THAN OR EQUAL TO
    "≪": "<<",  # MUCH LESS-THAN
    "≫": ">>",  # MUCH GREATER-THAN
    "⊂": "(C",  # SUBSET OF
    "⊃": ")C",  # SUPERSET OF
    # ==========================================================================
    # BOX DRAWING, BLOCKS AND SHAPES
    # ==========================================================================
    "─": "-",  # BOX DRAWINGS LIGHT HORIZONTAL
    "│": "|",  # BOX DRAWINGS LIGHT VERTICAL
    "┌": "+",  # BOX DRAWINGS LIGHT DOWN AND RIGHT
    "┐": "+",  # BOX DRAWINGS LIGHT DOWN AND LEFT
    "└": "+",  # BOX DRAWINGS LIGHT UP AND RIGHT
    "┘": "+",  # BOX DRAWINGS LIGHT UP AND LEFT
    "├": "+",  # BOX DRAWINGS LIGHT VERTICAL AND RIGHT
    "┤": "+",  # BOX DRAWINGS LIGHT VERTICAL AND LEFT
    "┬": "+",  # BOX DRAWINGS LIGHT DOWN AND HORIZONTAL
    "┴": "+",  # BOX DRAWINGS LIGHT UP AND HORIZONTAL
    "┼": "+",  # BOX DRAWINGS LIGHT VERTICAL AND HORIZONTAL
    "═": "=",  # BOX DRAWINGS DOUBLE HORIZONTAL
    "║": "|",  # BOX DRAWINGS DOUBLE VERTICAL
    "╔": "+",  # BOX DRAWINGS DOUBLE DOWN AND RIGHT
    "╗": "+",  # BOX DRAWINGS DOUBLE DOWN AND LEFT
    "╚": "+",  # BOX DRAWINGS DOUBLE UP AND RIGHT
    "╝": "+",  # BOX DRAWINGS DOUBLE UP AND LEFT
    "█": "#",  # FULL BLOCK
    "░": ".",  # LIGHT SHADE
    "▒": ":",  # MEDIUM SHADE
    "▓": "#",  # DARK SHADE
    "■": "#",  # BLACK SQUARE
    "□": "[]",  # WHITE SQUARE
    "○": "o",  # WHITE CIRCLE
    "●": "*",  # BLACK CIRCLE
    "★": "*",  # BLACK STAR
    "☐": "[ ]",  # BALLOT BOX
    "☑": "[x]",  # BALLOT BOX WITH CHECK
    "✓": "v",  # CHECK MARK
    "✗": "x",  # BALLOT X
}
