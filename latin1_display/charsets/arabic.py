"""Substitution entries for ISO 8859-6 (Arabic), using RFC 1345 mnemonics."""

from __future__ import annotations

from .models import SubstitutionEntry, sub

ARABIC_ENTRIES: tuple[SubstitutionEntry, ...] = (
    sub("،", ",+"),  # ARABIC COMMA
    sub("؛", ";+"),  # ARABIC SEMICOLON
    sub("؟", "?+"),  # ARABIC QUESTION MARK
    sub("ء", "H'"),  # ARABIC LETTER HAMZA
    sub("آ", "aM"),  # ARABIC LETTER ALEF WITH MADDA ABOVE
    sub("أ", "aH"),  # ARABIC LETTER ALEF WITH HAMZA ABOVE
    sub("ؤ", "wH"),  # ARABIC LETTER WAW WITH HAMZA ABOVE
    sub("إ", "ah"),  # ARABIC LETTER ALEF WITH HAMZA BELOW
    sub("ئ", "yH"),  # ARABIC LETTER YEH WITH HAMZA ABOVE
    sub("ا", "a+"),  # ARABIC LETTER ALEF
    sub("ب", "b+"),  # ARABIC LETTER BEH
    sub("ة", "tm"),  # ARABIC LETTER TEH MARBUTA
    sub("ت", "t+"),  # ARABIC LETTER TEH
    sub("ث", "tk"),  # ARABIC LETTER THEH
    sub("ج", "g+"),  # ARABIC LETTER JEEM
    sub("ح", "hk"),  # ARABIC LETTER HAH
    sub("خ", "x+"),  # ARABIC LETTER KHAH
    sub("د", "d+"),  # ARABIC LETTER DAL
    sub("ذ", "dk"),  # ARABIC LETTER THAL
    sub("ر", "r+"),  # ARABIC LETTER REH
    sub("ز", "z+"),  # ARABIC LETTER ZAIN
    sub("س", "s+"),  # ARABIC LETTER SEEN
    sub("ش", "sn"),  # ARABIC LETTER SHEEN
    sub("ص", "c+"),  # ARABIC LETTER SAD
    sub("ض", "dd"),  # ARABIC LETTER DAD
    sub("ط", "tj"),  # ARABIC LETTER TAH
    sub("ظ", "zH"),  # ARABIC LETTER ZAH
    sub("ع", "e+"),  # ARABIC LETTER AIN
    sub("غ", "i+"),  # ARABIC LETTER GHAIN
    sub("ـ", "++"),  # ARABIC TATWEEL
    sub("ف", "f+"),  # ARABIC LETTER FEH
    sub("ق", "q+"),  # ARABIC LETTER QAF
    sub("ك", "k+"),  # ARABIC LETTER KAF
    sub("ل", "l+"),  # ARABIC LETTER LAM
    sub("م", "m+"),  # ARABIC LETTER MEEM
    sub("ن", "n+"),  # ARABIC LETTER NOON
    sub("ه", "h+"),  # ARABIC LETTER HEH
    sub("و", "w+"),  # ARABIC LETTER WAW
    sub("ى", "j+"),  # ARABIC LETTER ALEF MAKSURA
    sub("ي", "y+"),  # ARABIC LETTER YEH
    sub("\u064b", ":+"),  # ARABIC FATHATAN
    sub("\u064c", "\"+"),  # ARABIC DAMMATAN
    sub("\u064d", "=+"),  # ARABIC KASRATAN
    sub("\u064e", "/+"),  # ARABIC FATHA
    sub("\u064f", "'+"),  # ARABIC DAMMA
    sub("\u0650", "1+"),  # ARABIC KASRA
    sub("\u0651", "3+"),  # ARABIC SHADDA
    sub("\u0652", "0+"),  # ARABIC SUKUN
)
