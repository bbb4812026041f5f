"""Substitution entries for ISO 8859-8 (Hebrew), using RFC 1345 mnemonics."""

from __future__ import annotations

from .models import SubstitutionEntry, sub

HEBREW_ENTRIES: tuple[SubstitutionEntry, ...] = (
    sub("‗", "=2"),  # DOUBLE LOW LINE
    sub("א", "A+"),  # HEBREW LETTER ALEF
    sub("ב", "B+"),  # HEBREW LETTER BET
    sub("ג", "G+"),  # HEBREW LETTER GIMEL
    sub("ד", "D+"),  # HEBREW LETTER DALET
    sub("ה", "H+"),  # HEBREW LETTER HE
    sub("ו", "W+"),  # HEBREW LETTER VAV
    sub("ז", "Z+"),  # HEBREW LETTER ZAYIN
    sub("ח", "X+"),  # HEBREW LETTER HET
    sub("ט", "Tj"),  # HEBREW LETTER TET
    sub("י", "J+"),  # HEBREW LETTER YOD
    sub("ך", "K%"),  # HEBREW LETTER FINAL KAF
    sub("כ", "K+"),  # HEBREW LETTER KAF
    sub("ל", "L+"),  # HEBREW LETTER LAMED
    sub("ם", "M%"),  # HEBREW LETTER FINAL MEM
    sub("מ", "M+"),  # HEBREW LETTER MEM
    sub("ן", "N%"),  # HEBREW LETTER FINAL NUN
    sub("נ", "N+"),  # HEBREW LETTER NUN
    sub("ס", "S+"),  # HEBREW LETTER SAMEKH
    sub("ע", "E+"),  # HEBREW LETTER AYIN
    sub("ף", "P%"),  # HEBREW LETTER FINAL PE
    sub("פ", "P+"),  # HEBREW LETTER PE
    sub("ץ", "Zj"),  # HEBREW LETTER FINAL TSADI
    sub("צ", "ZJ"),  # HEBREW LETTER TSADI
    sub("ק", "Q+"),  # HEBREW LETTER QOF
    sub("ר", "R+"),  # HEBREW LETTER RESH
    sub("ש", "Sh"),  # HEBREW LETTER SHIN
    sub("ת", "T+"),  # HEBREW LETTER TAV
    sub("\u200e", "LRM"),  # LEFT-TO-RIGHT MARK
    sub("\u200f", "RLM"),  # RIGHT-TO-LEFT MARK
)
