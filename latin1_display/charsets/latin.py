"""Override entries for the ISO 8859 Latin-n charsets.

Every Latin-n charset is first mapped onto Latin-1 by an identity pass (the
character at byte ``b`` is shown as the Latin-1 character at byte ``b``),
and the entries below then override that where the shapes differ.

Primary mnemonics put a diacritic marker in front of the base letter:

    `  grave        '  acute        ^  circumflex   <  caron
    (  breve        "  diaeresis    ~  tilde        o  ring
    ;  ogonek       ,  cedilla      .  dot above    -  macron
    /  stroke       '' double acute

Alternates use the RFC 1345 postfix convention (``C<``, ``A;``, ``U0``...)
and are shown when legacy mnemonics are selected.
"""

from __future__ import annotations

from .models import SubstitutionEntry, same, sub

LATIN_2_ENTRIES: tuple[SubstitutionEntry, ...] = (
    sub("Ą", ";A", "A;"),  # LATIN CAPITAL LETTER A WITH OGONEK
    sub("˘", "(", "'("),  # BREVE
    sub("Ł", "/L", "L/"),  # LATIN CAPITAL LETTER L WITH STROKE
    sub("Ľ", "<L", "L<"),  # LATIN CAPITAL LETTER L WITH CARON
    sub("Ś", "'S", "S'"),  # LATIN CAPITAL LETTER S WITH ACUTE
    sub("Š", "<S", "S<"),  # LATIN CAPITAL LETTER S WITH CARON
    sub("Ş", ",S", "S,"),  # LATIN CAPITAL LETTER S WITH CEDILLA
    sub("Ť", "<T", "T<"),  # LATIN CAPITAL LETTER T WITH CARON
    sub("Ź", "'Z", "Z'"),  # LATIN CAPITAL LETTER Z WITH ACUTE
    sub("Ž", "<Z", "Z<"),  # LATIN CAPITAL LETTER Z WITH CARON
    sub("Ż", ".Z", "Z."),  # LATIN CAPITAL LETTER Z WITH DOT ABOVE
    sub("ą", ";a", "a;"),  # LATIN SMALL LETTER A WITH OGONEK
    sub("˛", ";", "';"),  # OGONEK
    sub("ł", "/l", "l/"),  # LATIN SMALL LETTER L WITH STROKE
    sub("ľ", "<l", "l<"),  # LATIN SMALL LETTER L WITH CARON
    sub("ś", "'s", "s'"),  # LATIN SMALL LETTER S WITH ACUTE
    sub("ˇ", "<", "'<"),  # CARON
    sub("š", "<s", "s<"),  # LATIN SMALL LETTER S WITH CARON
    sub("ş", ",s", "s,"),  # LATIN SMALL LETTER S WITH CEDILLA
    sub("ť", "<t", "t<"),  # LATIN SMALL LETTER T WITH CARON
    sub("ź", "'z", "z'"),  # LATIN SMALL LETTER Z WITH ACUTE
    sub("˝", "''", "'\""),  # DOUBLE ACUTE ACCENT
    sub("ž", "<z", "z<"),  # LATIN SMALL LETTER Z WITH CARON
    sub("ż", ".z", "z."),  # LATIN SMALL LETTER Z WITH DOT ABOVE
    sub("Ŕ", "'R", "R'"),  # LATIN CAPITAL LETTER R WITH ACUTE
    sub("Ă", "(A", "A("),  # LATIN CAPITAL LETTER A WITH BREVE
    sub("Ĺ", "'L", "L'"),  # LATIN CAPITAL LETTER L WITH ACUTE
    sub("Ć", "'C", "C'"),  # LATIN CAPITAL LETTER C WITH ACUTE
    sub("Č", "<C", "C<"),  # LATIN CAPITAL LETTER C WITH CARON
    sub("Ę", ";E", "E;"),  # LATIN CAPITAL LETTER E WITH OGONEK
    sub("Ě", "<E", "E<"),  # LATIN CAPITAL LETTER E WITH CARON
    sub("Ď", "<D", "D<"),  # LATIN CAPITAL LETTER D WITH CARON
    sub("Đ", "/D", "D/"),  # LATIN CAPITAL LETTER D WITH STROKE
    sub("Ń", "'N", "N'"),  # LATIN CAPITAL LETTER N WITH ACUTE
    sub("Ň", "<N", "N<"),  # LATIN CAPITAL LETTER N WITH CARON
    sub("Ő", "''O", "O\""),  # LATIN CAPITAL LETTER O WITH DOUBLE ACUTE
    sub("Ř", "<R", "R<"),  # LATIN CAPITAL LETTER R WITH CARON
    sub("Ů", "oU", "U0"),  # LATIN CAPITAL LETTER U WITH RING ABOVE
    sub("Ű", "''U", "U\""),  # LATIN CAPITAL LETTER U WITH DOUBLE ACUTE
    sub("Ţ", ",T", "T,"),  # LATIN CAPITAL LETTER T WITH CEDILLA
    sub("ŕ", "'r", "r'"),  # LATIN SMALL LETTER R WITH ACUTE
    sub("ă", "(a", "a("),  # LATIN SMALL LETTER A WITH BREVE
    sub("ĺ", "'l", "l'"),  # LATIN SMALL LETTER L WITH ACUTE
    sub("ć", "'c", "c'"),  # LATIN SMALL LETTER C WITH ACUTE
    sub("č", "<c", "c<"),  # LATIN SMALL LETTER C WITH CARON
    sub("ę", ";e", "e;"),  # LATIN SMALL LETTER E WITH OGONEK
    sub("ě", "<e", "e<"),  # LATIN SMALL LETTER E WITH CARON
    sub("ď", "<d", "d<"),  # LATIN SMALL LETTER D WITH CARON
    sub("đ", "/d", "d/"),  # LATIN SMALL LETTER D WITH STROKE
    sub("ń", "'n", "n'"),  # LATIN SMALL LETTER N WITH ACUTE
    sub("ň", "<n", "n<"),  # LATIN SMALL LETTER N WITH CARON
    sub("ő", "''o", "o\""),  # LATIN SMALL LETTER O WITH DOUBLE ACUTE
    sub("ř", "<r", "r<"),  # LATIN SMALL LETTER R WITH CARON
    sub("ů", "ou", "u0"),  # LATIN SMALL LETTER U WITH RING ABOVE
    sub("ű", "''u", "u\""),  # LATIN SMALL LETTER U WITH DOUBLE ACUTE
    sub("ţ", ",t", "t,"),  # LATIN SMALL LETTER T WITH CEDILLA
    sub("˙", ".", "'."),  # DOT ABOVE
)

LATIN_3_ENTRIES: tuple[SubstitutionEntry, ...] = (
    sub("Ħ", "/H", "H/"),  # LATIN CAPITAL LETTER H WITH STROKE
    sub("˘", "(", "'("),  # BREVE
    sub("Ĥ", "^H", "H>"),  # LATIN CAPITAL LETTER H WITH CIRCUMFLEX
    sub("İ", ".I", "I."),  # LATIN CAPITAL LETTER I WITH DOT ABOVE
    sub("Ş", ",S", "S,"),  # LATIN CAPITAL LETTER S WITH CEDILLA
    sub("Ğ", "(G", "G("),  # LATIN CAPITAL LETTER G WITH BREVE
    sub("Ĵ", "^J", "J>"),  # LATIN CAPITAL LETTER J WITH CIRCUMFLEX
    sub("Ż", ".Z", "Z."),  # LATIN CAPITAL LETTER Z WITH DOT ABOVE
    sub("ħ", "/h", "h/"),  # LATIN SMALL LETTER H WITH STROKE
    sub("ĥ", "^h", "h>"),  # LATIN SMALL LETTER H WITH CIRCUMFLEX
    same("ı", "i"),  # LATIN SMALL LETTER DOTLESS I
    sub("ş", ",s", "s,"),  # LATIN SMALL LETTER S WITH CEDILLA
    sub("ğ", "(g", "g("),  # LATIN SMALL LETTER G WITH BREVE
    sub("ĵ", "^j", "j>"),  # LATIN SMALL LETTER J WITH CIRCUMFLEX
    sub("ż", ".z", "z."),  # LATIN SMALL LETTER Z WITH DOT ABOVE
    sub("Ċ", ".C", "C."),  # LATIN CAPITAL LETTER C WITH DOT ABOVE
    sub("Ĉ", "^C", "C>"),  # LATIN CAPITAL LETTER C WITH CIRCUMFLEX
    sub("Ġ", ".G", "G."),  # LATIN CAPITAL LETTER G WITH DOT ABOVE
    sub("Ĝ", "^G", "G>"),  # LATIN CAPITAL LETTER G WITH CIRCUMFLEX
    sub("Ŭ", "(U", "U("),  # LATIN CAPITAL LETTER U WITH BREVE
    sub("Ŝ", "^S", "S>"),  # LATIN CAPITAL LETTER S WITH CIRCUMFLEX
    sub("ċ", ".c", "c."),  # LATIN SMALL LETTER C WITH DOT ABOVE
    sub("ĉ", "^c", "c>"),  # LATIN SMALL LETTER C WITH CIRCUMFLEX
    sub("ġ", ".g", "g."),  # LATIN SMALL LETTER G WITH DOT ABOVE
    sub("ĝ", "^g", "g>"),  # LATIN SMALL LETTER G WITH CIRCUMFLEX
    sub("ŭ", "(u", "u("),  # LATIN SMALL LETTER U WITH BREVE
    sub("ŝ", "^s", "s>"),  # LATIN SMALL LETTER S WITH CIRCUMFLEX
    sub("˙", ".", "'."),  # DOT ABOVE
)

LATIN_4_ENTRIES: tuple[SubstitutionEntry, ...] = (
    sub("Ą", ";A", "A;"),  # LATIN CAPITAL LETTER A WITH OGONEK
    sub("ĸ", "kk", "kk"),  # LATIN SMALL LETTER KRA
    sub("Ŗ", ",R", "R,"),  # LATIN CAPITAL LETTER R WITH CEDILLA
    sub("Ĩ", "~I", "I?"),  # LATIN CAPITAL LETTER I WITH TILDE
    sub("Ļ", ",L", "L,"),  # LATIN CAPITAL LETTER L WITH CEDILLA
    sub("Š", "<S", "S<"),  # LATIN CAPITAL LETTER S WITH CARON
    sub("Ē", "-E", "E-"),  # LATIN CAPITAL LETTER E WITH MACRON
    sub("Ģ", ",G", "G,"),  # LATIN CAPITAL LETTER G WITH CEDILLA
    sub("Ŧ", "/T", "T/"),  # LATIN CAPITAL LETTER T WITH STROKE
    sub("Ž", "<Z", "Z<"),  # LATIN CAPITAL LETTER Z WITH CARON
    sub("ą", ";a", "a;"),  # LATIN SMALL LETTER A WITH OGONEK
    sub("˛", ";", "';"),  # OGONEK
    sub("ŗ", ",r", "r,"),  # LATIN SMALL LETTER R WITH CEDILLA
    sub("ĩ", "~i", "i?"),  # LATIN SMALL LETTER I WITH TILDE
    sub("ļ", ",l", "l,"),  # LATIN SMALL LETTER L WITH CEDILLA
    sub("ˇ", "<", "'<"),  # CARON
    sub("š", "<s", "s<"),  # LATIN SMALL LETTER S WITH CARON
    sub("ē", "-e", "e-"),  # LATIN SMALL LETTER E WITH MACRON
    sub("ģ", ",g", "g,"),  # LATIN SMALL LETTER G WITH CEDILLA
    sub("ŧ", "/t", "t/"),  # LATIN SMALL LETTER T WITH STROKE
    sub("Ŋ", "NG", "NG"),  # LATIN CAPITAL LETTER ENG
    sub("ž", "<z", "z<"),  # LATIN SMALL LETTER Z WITH CARON
    sub("ŋ", "ng", "ng"),  # LATIN SMALL LETTER ENG
    sub("Ā", "-A", "A-"),  # LATIN CAPITAL LETTER A WITH MACRON
    sub("Į", ";I", "I;"),  # LATIN CAPITAL LETTER I WITH OGONEK
    sub("Č", "<C", "C<"),  # LATIN CAPITAL LETTER C WITH CARON
    sub("Ę", ";E", "E;"),  # LATIN CAPITAL LETTER E WITH OGONEK
    sub("Ė", ".E", "E."),  # LATIN CAPITAL LETTER E WITH DOT ABOVE
    sub("Ī", "-I", "I-"),  # LATIN CAPITAL LETTER I WITH MACRON
    sub("Đ", "/D", "D/"),  # LATIN CAPITAL LETTER D WITH STROKE
    sub("Ņ", ",N", "N,"),  # LATIN CAPITAL LETTER N WITH CEDILLA
    sub("Ō", "-O", "O-"),  # LATIN CAPITAL LETTER O WITH MACRON
    sub("Ķ", ",K", "K,"),  # LATIN CAPITAL LETTER K WITH CEDILLA
    sub("Ų", ";U", "U;"),  # LATIN CAPITAL LETTER U WITH OGONEK
    sub("Ũ", "~U", "U?"),  # LATIN CAPITAL LETTER U WITH TILDE
    sub("Ū", "-U", "U-"),  # LATIN CAPITAL LETTER U WITH MACRON
    sub("ā", "-a", "a-"),  # LATIN SMALL LETTER A WITH MACRON
    sub("į", ";i", "i;"),  # LATIN SMALL LETTER I WITH OGONEK
    sub("č", "<c", "c<"),  # LATIN SMALL LETTER C WITH CARON
    sub("ę", ";e", "e;"),  # LATIN SMALL LETTER E WITH OGONEK
    sub("ė", ".e", "e."),  # LATIN SMALL LETTER E WITH DOT ABOVE
    sub("ī", "-i", "i-"),  # LATIN SMALL LETTER I WITH MACRON
    sub("đ", "/d", "d/"),  # LATIN SMALL LETTER D WITH STROKE
    sub("ņ", ",n", "n,"),  # LATIN SMALL LETTER N WITH CEDILLA
    sub("ō", "-o", "o-"),  # LATIN SMALL LETTER O WITH MACRON
    sub("ķ", ",k", "k,"),  # LATIN SMALL LETTER K WITH CEDILLA
    sub("ų", ";u", "u;"),  # LATIN SMALL LETTER U WITH OGONEK
    sub("ũ", "~u", "u?"),  # LATIN SMALL LETTER U WITH TILDE
    sub("ū", "-u", "u-"),  # LATIN SMALL LETTER U WITH MACRON
    sub("˙", ".", "'."),  # DOT ABOVE
)

LATIN_5_ENTRIES: tuple[SubstitutionEntry, ...] = (
    sub("Ğ", "(G", "G("),  # LATIN CAPITAL LETTER G WITH BREVE
    sub("İ", ".I", "I."),  # LATIN CAPITAL LETTER I WITH DOT ABOVE
    sub("Ş", ",S", "S,"),  # LATIN CAPITAL LETTER S WITH CEDILLA
    sub("ğ", "(g", "g("),  # LATIN SMALL LETTER G WITH BREVE
    same("ı", "i"),  # LATIN SMALL LETTER DOTLESS I
    sub("ş", ",s", "s,"),  # LATIN SMALL LETTER S WITH CEDILLA
)

LATIN_8_ENTRIES: tuple[SubstitutionEntry, ...] = (
    sub("Ḃ", ".B", "B."),  # LATIN CAPITAL LETTER B WITH DOT ABOVE
    sub("ḃ", ".b", "b."),  # LATIN SMALL LETTER B WITH DOT ABOVE
    sub("Ċ", ".C", "C."),  # LATIN CAPITAL LETTER C WITH DOT ABOVE
    sub("ċ", ".c", "c."),  # LATIN SMALL LETTER C WITH DOT ABOVE
    sub("Ḋ", ".D", "D."),  # LATIN CAPITAL LETTER D WITH DOT ABOVE
    sub("Ẁ", "`W", "W!"),  # LATIN CAPITAL LETTER W WITH GRAVE
    sub("Ẃ", "'W", "W'"),  # LATIN CAPITAL LETTER W WITH ACUTE
    sub("ḋ", ".d", "d."),  # LATIN SMALL LETTER D WITH DOT ABOVE
    sub("Ỳ", "`Y", "Y!"),  # LATIN CAPITAL LETTER Y WITH GRAVE
    sub("Ÿ", "\"Y", "Y:"),  # LATIN CAPITAL LETTER Y WITH DIAERESIS
    sub("Ḟ", ".F", "F."),  # LATIN CAPITAL LETTER F WITH DOT ABOVE
    sub("ḟ", ".f", "f."),  # LATIN SMALL LETTER F WITH DOT ABOVE
    sub("Ġ", ".G", "G."),  # LATIN CAPITAL LETTER G WITH DOT ABOVE
    sub("ġ", ".g", "g."),  # LATIN SMALL LETTER G WITH DOT ABOVE
    sub("Ṁ", ".M", "M."),  # LATIN CAPITAL LETTER M WITH DOT ABOVE
    sub("ṁ", ".m", "m."),  # LATIN SMALL LETTER M WITH DOT ABOVE
    sub("Ṗ", ".P", "P."),  # LATIN CAPITAL LETTER P WITH DOT ABOVE
    sub("ẁ", "`w", "w!"),  # LATIN SMALL LETTER W WITH GRAVE
    sub("ṗ", ".p", "p."),  # LATIN SMALL LETTER P WITH DOT ABOVE
    sub("ẃ", "'w", "w'"),  # LATIN SMALL LETTER W WITH ACUTE
    sub("Ṡ", ".S", "S."),  # LATIN CAPITAL LETTER S WITH DOT ABOVE
    sub("ỳ", "`y", "y!"),  # LATIN SMALL LETTER Y WITH GRAVE
    sub("Ẅ", "\"W", "W:"),  # LATIN CAPITAL LETTER W WITH DIAERESIS
    sub("ẅ", "\"w", "w:"),  # LATIN SMALL LETTER W WITH DIAERESIS
    sub("ṡ", ".s", "s."),  # LATIN SMALL LETTER S WITH DOT ABOVE
    sub("Ŵ", "^W", "W>"),  # LATIN CAPITAL LETTER W WITH CIRCUMFLEX
    sub("Ṫ", ".T", "T."),  # LATIN CAPITAL LETTER T WITH DOT ABOVE
    sub("Ŷ", "^Y", "Y>"),  # LATIN CAPITAL LETTER Y WITH CIRCUMFLEX
    sub("ŵ", "^w", "w>"),  # LATIN SMALL LETTER W WITH CIRCUMFLEX
    sub("ṫ", ".t", "t."),  # LATIN SMALL LETTER T WITH DOT ABOVE
    sub("ŷ", "^y", "y>"),  # LATIN SMALL LETTER Y WITH CIRCUMFLEX
)

LATIN_9_ENTRIES: tuple[SubstitutionEntry, ...] = (
    sub("€", "EUR", "Eu"),  # EURO SIGN
    sub("Š", "<S", "S<"),  # LATIN CAPITAL LETTER S WITH CARON
    sub("š", "<s", "s<"),  # LATIN SMALL LETTER S WITH CARON
    sub("Ž", "<Z", "Z<"),  # LATIN CAPITAL LETTER Z WITH CARON
    sub("ž", "<z", "z<"),  # LATIN SMALL LETTER Z WITH CARON
    sub("Œ", "OE", "OE"),  # LATIN CAPITAL LIGATURE OE
    sub("œ", "oe", "oe"),  # LATIN SMALL LIGATURE OE
    sub("Ÿ", "\"Y", "Y:"),  # LATIN CAPITAL LETTER Y WITH DIAERESIS
)
