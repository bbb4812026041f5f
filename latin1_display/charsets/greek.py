"""Substitution entries for ISO 8859-7 (Greek).

Capitals that share their shape with a Latin letter are shown as that
letter; everything else uses RFC 1345 mnemonics (letter followed by ``*``,
tonos marked with ``%``).
"""

from __future__ import annotations

from .models import SubstitutionEntry, same, sub

GREEK_ENTRIES: tuple[SubstitutionEntry, ...] = (
    sub("‘", "'6"),  # LEFT SINGLE QUOTATION MARK
    sub("’", "'9"),  # RIGHT SINGLE QUOTATION MARK
    sub("€", "EUR", "Eu"),  # EURO SIGN
    sub("₯", "Dr"),  # DRACHMA SIGN
    sub("ͺ", ",i", "j3"),  # GREEK YPOGEGRAMMENI
    sub("―", "--", "-3"),  # HORIZONTAL BAR
    same("΄", "´"),  # GREEK TONOS
    sub("΅", "'\"", "'%"),  # GREEK DIALYTIKA TONOS
    sub("Ά", "A%"),  # GREEK CAPITAL LETTER ALPHA WITH TONOS
    sub("Έ", "E%"),  # GREEK CAPITAL LETTER EPSILON WITH TONOS
    sub("Ή", "Y%"),  # GREEK CAPITAL LETTER ETA WITH TONOS
    sub("Ί", "I%"),  # GREEK CAPITAL LETTER IOTA WITH TONOS
    sub("Ό", "O%"),  # GREEK CAPITAL LETTER OMICRON WITH TONOS
    sub("Ύ", "U%"),  # GREEK CAPITAL LETTER UPSILON WITH TONOS
    sub("Ώ", "W%"),  # GREEK CAPITAL LETTER OMEGA WITH TONOS
    sub("ΐ", "i3"),  # GREEK SMALL LETTER IOTA WITH DIALYTIKA AND TONOS
    same("Α", "A"),  # GREEK CAPITAL LETTER ALPHA
    same("Β", "B"),  # GREEK CAPITAL LETTER BETA
    sub("Γ", "G*"),  # GREEK CAPITAL LETTER GAMMA
    sub("Δ", "D*"),  # GREEK CAPITAL LETTER DELTA
    same("Ε", "E"),  # GREEK CAPITAL LETTER EPSILON
    same("Ζ", "Z"),  # GREEK CAPITAL LETTER ZETA
    same("Η", "H"),  # GREEK CAPITAL LETTER ETA
    sub("Θ", "H*", "Th"),  # GREEK CAPITAL LETTER THETA
    same("Ι", "I"),  # GREEK CAPITAL LETTER IOTA
    same("Κ", "K"),  # GREEK CAPITAL LETTER KAPPA
    sub("Λ", "L*"),  # GREEK CAPITAL LETTER LAMDA
    same("Μ", "M"),  # GREEK CAPITAL LETTER MU
    same("Ν", "N"),  # GREEK CAPITAL LETTER NU
    sub("Ξ", "C*"),  # GREEK CAPITAL LETTER XI
    same("Ο", "O"),  # GREEK CAPITAL LETTER OMICRON
    sub("Π", "P*"),  # GREEK CAPITAL LETTER PI
    same("Ρ", "P"),  # GREEK CAPITAL LETTER RHO
    sub("Σ", "S*"),  # GREEK CAPITAL LETTER SIGMA
    same("Τ", "T"),  # GREEK CAPITAL LETTER TAU
    same("Υ", "Y"),  # GREEK CAPITAL LETTER UPSILON
    sub("Φ", "F*"),  # GREEK CAPITAL LETTER PHI
    same("Χ", "X"),  # GREEK CAPITAL LETTER CHI
    sub("Ψ", "Q*", "Ps"),  # GREEK CAPITAL LETTER PSI
    sub("Ω", "W*"),  # GREEK CAPITAL LETTER OMEGA
    sub("Ϊ", "J*"),  # GREEK CAPITAL LETTER IOTA WITH DIALYTIKA
    sub("Ϋ", "V*"),  # GREEK CAPITAL LETTER UPSILON WITH DIALYTIKA
    sub("ά", "a%"),  # GREEK SMALL LETTER ALPHA WITH TONOS
    sub("έ", "e%"),  # GREEK SMALL LETTER EPSILON WITH TONOS
    sub("ή", "y%"),  # GREEK SMALL LETTER ETA WITH TONOS
    sub("ί", "i%"),  # GREEK SMALL LETTER IOTA WITH TONOS
    sub("ΰ", "u3"),  # GREEK SMALL LETTER UPSILON WITH DIALYTIKA AND TONOS
    sub("α", "a*"),  # GREEK SMALL LETTER ALPHA
    sub("β", "b*"),  # GREEK SMALL LETTER BETA
    sub("γ", "g*"),  # GREEK SMALL LETTER GAMMA
    sub("δ", "d*"),  # GREEK SMALL LETTER DELTA
    sub("ε", "e*"),  # GREEK SMALL LETTER EPSILON
    sub("ζ", "z*"),  # GREEK SMALL LETTER ZETA
    sub("η", "y*"),  # GREEK SMALL LETTER ETA
    sub("θ", "h*", "th"),  # GREEK SMALL LETTER THETA
    sub("ι", "i*"),  # GREEK SMALL LETTER IOTA
    sub("κ", "k*"),  # GREEK SMALL LETTER KAPPA
    sub("λ", "l*"),  # GREEK SMALL LETTER LAMDA
    same("μ", "µ"),  # GREEK SMALL LETTER MU
    sub("ν", "n*"),  # GREEK SMALL LETTER NU
    sub("ξ", "c*"),  # GREEK SMALL LETTER XI
    same("ο", "o"),  # GREEK SMALL LETTER OMICRON
    sub("π", "p*"),  # GREEK SMALL LETTER PI
    sub("ρ", "r*"),  # GREEK SMALL LETTER RHO
    sub("ς", "*s"),  # GREEK SMALL LETTER FINAL SIGMA
    sub("σ", "s*"),  # GREEK SMALL LETTER SIGMA
    sub("τ", "t*"),  # GREEK SMALL LETTER TAU
    sub("υ", "u*"),  # GREEK SMALL LETTER UPSILON
    sub("φ", "f*"),  # GREEK SMALL LETTER PHI
    sub("χ", "x*"),  # GREEK SMALL LETTER CHI
    sub("ψ", "q*", "ps"),  # GREEK SMALL LETTER PSI
    sub("ω", "w*"),  # GREEK SMALL LETTER OMEGA
    sub("ϊ", "j*"),  # GREEK SMALL LETTER IOTA WITH DIALYTIKA
    sub("ϋ", "v*"),  # GREEK SMALL LETTER UPSILON WITH DIALYTIKA
    sub("ό", "o%"),  # GREEK SMALL LETTER OMICRON WITH TONOS
    sub("ύ", "u%"),  # GREEK SMALL LETTER UPSILON WITH TONOS
    sub("ώ", "w%"),  # GREEK SMALL LETTER OMEGA WITH TONOS
)
