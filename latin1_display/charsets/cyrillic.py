"""Substitution entries for ISO 8859-5 (Cyrillic).

Letters whose glyph matches a Latin letter are shown as that letter. The
rest are transliterated; the RFC 1345 mnemonic is kept as the alternate.
"""

from __future__ import annotations

from .models import SubstitutionEntry, same, sub

CYRILLIC_ENTRIES: tuple[SubstitutionEntry, ...] = (
    sub("Ё", "Yo", "IO"),  # CYRILLIC CAPITAL LETTER IO
    sub("Ђ", "Dj", "D%"),  # CYRILLIC CAPITAL LETTER DJE
    sub("Ѓ", "Gj", "G%"),  # CYRILLIC CAPITAL LETTER GJE
    sub("Є", "Ye", "IE"),  # CYRILLIC CAPITAL LETTER UKRAINIAN IE
    same("Ѕ", "S"),  # CYRILLIC CAPITAL LETTER DZE
    same("І", "I"),  # CYRILLIC CAPITAL LETTER BYELORUSSIAN-UKRAINIAN I
    sub("Ї", "Yi", "YI"),  # CYRILLIC CAPITAL LETTER YI
    same("Ј", "J"),  # CYRILLIC CAPITAL LETTER JE
    sub("Љ", "Lj", "LJ"),  # CYRILLIC CAPITAL LETTER LJE
    sub("Њ", "Nj", "NJ"),  # CYRILLIC CAPITAL LETTER NJE
    sub("Ћ", "Ch'", "Ts"),  # CYRILLIC CAPITAL LETTER TSHE
    sub("Ќ", "Kj", "KJ"),  # CYRILLIC CAPITAL LETTER KJE
    sub("Ў", "(U", "V%"),  # CYRILLIC CAPITAL LETTER SHORT U
    sub("Џ", "Dz", "DZ"),  # CYRILLIC CAPITAL LETTER DZHE
    same("А", "A"),  # CYRILLIC CAPITAL LETTER A
    sub("Б", "B", "B="),  # CYRILLIC CAPITAL LETTER BE
    same("В", "B"),  # CYRILLIC CAPITAL LETTER VE
    sub("Г", "G", "G="),  # CYRILLIC CAPITAL LETTER GHE
    sub("Д", "D", "D="),  # CYRILLIC CAPITAL LETTER DE
    same("Е", "E"),  # CYRILLIC CAPITAL LETTER IE
    sub("Ж", "Zh", "Z%"),  # CYRILLIC CAPITAL LETTER ZHE
    sub("З", "Z", "Z="),  # CYRILLIC CAPITAL LETTER ZE
    sub("И", "I", "I="),  # CYRILLIC CAPITAL LETTER I
    sub("Й", "J", "J="),  # CYRILLIC CAPITAL LETTER SHORT I
    same("К", "K"),  # CYRILLIC CAPITAL LETTER KA
    sub("Л", "L", "L="),  # CYRILLIC CAPITAL LETTER EL
    same("М", "M"),  # CYRILLIC CAPITAL LETTER EM
    same("Н", "H"),  # CYRILLIC CAPITAL LETTER EN
    same("О", "O"),  # CYRILLIC CAPITAL LETTER O
    sub("П", "P", "P="),  # CYRILLIC CAPITAL LETTER PE
    same("Р", "P"),  # CYRILLIC CAPITAL LETTER ER
    same("С", "C"),  # CYRILLIC CAPITAL LETTER ES
    same("Т", "T"),  # CYRILLIC CAPITAL LETTER TE
    sub("У", "U", "U="),  # CYRILLIC CAPITAL LETTER U
    sub("Ф", "F", "F="),  # CYRILLIC CAPITAL LETTER EF
    same("Х", "X"),  # CYRILLIC CAPITAL LETTER HA
    sub("Ц", "C", "C="),  # CYRILLIC CAPITAL LETTER TSE
    sub("Ч", "Ch", "C%"),  # CYRILLIC CAPITAL LETTER CHE
    sub("Ш", "Sh", "S%"),  # CYRILLIC CAPITAL LETTER SHA
    sub("Щ", "Sch", "Sc"),  # CYRILLIC CAPITAL LETTER SHCHA
    sub("Ъ", "\"", "=\""),  # CYRILLIC CAPITAL LETTER HARD SIGN
    sub("Ы", "Y", "Y="),  # CYRILLIC CAPITAL LETTER YERU
    sub("Ь", "'", "%\""),  # CYRILLIC CAPITAL LETTER SOFT SIGN
    sub("Э", "`E", "JE"),  # CYRILLIC CAPITAL LETTER E
    sub("Ю", "Yu", "JU"),  # CYRILLIC CAPITAL LETTER YU
    sub("Я", "Ya", "JA"),  # CYRILLIC CAPITAL LETTER YA
    same("а", "a"),  # CYRILLIC SMALL LETTER A
    sub("б", "b", "b="),  # CYRILLIC SMALL LETTER BE
    sub("в", "v", "v="),  # CYRILLIC SMALL LETTER VE
    sub("г", "g", "g="),  # CYRILLIC SMALL LETTER GHE
    sub("д", "d", "d="),  # CYRILLIC SMALL LETTER DE
    same("е", "e"),  # CYRILLIC SMALL LETTER IE
    sub("ж", "zh", "z%"),  # CYRILLIC SMALL LETTER ZHE
    sub("з", "z", "z="),  # CYRILLIC SMALL LETTER ZE
    sub("и", "i", "i="),  # CYRILLIC SMALL LETTER I
    sub("й", "j", "j="),  # CYRILLIC SMALL LETTER SHORT I
    sub("к", "k", "k="),  # CYRILLIC SMALL LETTER KA
    sub("л", "l", "l="),  # CYRILLIC SMALL LETTER EL
    sub("м", "m", "m="),  # CYRILLIC SMALL LETTER EM
    sub("н", "n", "n="),  # CYRILLIC SMALL LETTER EN
    same("о", "o"),  # CYRILLIC SMALL LETTER O
    sub("п", "p", "p="),  # CYRILLIC SMALL LETTER PE
    same("р", "p"),  # CYRILLIC SMALL LETTER ER
    same("с", "c"),  # CYRILLIC SMALL LETTER ES
    sub("т", "t", "t="),  # CYRILLIC SMALL LETTER TE
    same("у", "y"),  # CYRILLIC SMALL LETTER U
    sub("ф", "f", "f="),  # CYRILLIC SMALL LETTER EF
    same("х", "x"),  # CYRILLIC SMALL LETTER HA
    sub("ц", "c", "c="),  # CYRILLIC SMALL LETTER TSE
    sub("ч", "ch", "c%"),  # CYRILLIC SMALL LETTER CHE
    sub("ш", "sh", "s%"),  # CYRILLIC SMALL LETTER SHA
    sub("щ", "sch", "sc"),  # CYRILLIC SMALL LETTER SHCHA
    sub("ъ", "\"", "='"),  # CYRILLIC SMALL LETTER HARD SIGN
    sub("ы", "y", "y="),  # CYRILLIC SMALL LETTER YERU
    sub("ь", "'", "%'"),  # CYRILLIC SMALL LETTER SOFT SIGN
    sub("э", "`e", "je"),  # CYRILLIC SMALL LETTER E
    sub("ю", "yu", "ju"),  # CYRILLIC SMALL LETTER YU
    sub("я", "ya", "ja"),  # CYRILLIC SMALL LETTER YA
    sub("№", "No", "N0"),  # NUMERO SIGN
    sub("ё", "yo", "io"),  # CYRILLIC SMALL LETTER IO
    sub("ђ", "dj", "d%"),  # CYRILLIC SMALL LETTER DJE
    sub("ѓ", "gj", "g%"),  # CYRILLIC SMALL LETTER GJE
    sub("є", "ye", "ie"),  # CYRILLIC SMALL LETTER UKRAINIAN IE
    same("ѕ", "s"),  # CYRILLIC SMALL LETTER DZE
    same("і", "i"),  # CYRILLIC SMALL LETTER BYELORUSSIAN-UKRAINIAN I
    sub("ї", "yi", "yi"),  # CYRILLIC SMALL LETTER YI
    same("ј", "j"),  # CYRILLIC SMALL LETTER JE
    sub("љ", "lj", "lj"),  # CYRILLIC SMALL LETTER LJE
    sub("њ", "nj", "nj"),  # CYRILLIC SMALL LETTER NJE
    sub("ћ", "ch'", "ts"),  # CYRILLIC SMALL LETTER TSHE
    sub("ќ", "kj", "kj"),  # CYRILLIC SMALL LETTER KJE
    sub("ў", "(u", "v%"),  # CYRILLIC SMALL LETTER SHORT U
    sub("џ", "dz", "dz"),  # CYRILLIC SMALL LETTER DZHE
)
