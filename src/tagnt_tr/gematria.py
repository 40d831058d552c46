"""Greek gematria (isopsephy): standard, ordinal and reduced totals."""

from __future__ import annotations

import unicodedata

from tagnt_tr.models import Gematria

# Milesian numerals. Stigma, koppa and sampi carry 6, 90 and 900.
GREEK_VALUES = {
    "α": 1, "β": 2, "γ": 3, "δ": 4, "ε": 5, "ϛ": 6, "ζ": 7, "η": 8, "θ": 9,
    "ι": 10, "κ": 20, "λ": 30, "μ": 40, "ν": 50, "ξ": 60, "ο": 70, "π": 80, "ϟ": 90,
    "ρ": 100, "σ": 200, "ς": 200, "τ": 300, "υ": 400, "φ": 500, "χ": 600,
    "ψ": 700, "ω": 800, "ϡ": 900,
}  # fmt: skip

# Alphabet position; the numeral-only symbols have none.
GREEK_ORDINAL = {
    "α": 1, "β": 2, "γ": 3, "δ": 4, "ε": 5, "ζ": 6, "η": 7, "θ": 8,
    "ι": 9, "κ": 10, "λ": 11, "μ": 12, "ν": 13, "ξ": 14, "ο": 15, "π": 16,
    "ρ": 17, "σ": 18, "ς": 18, "τ": 19, "υ": 20, "φ": 21, "χ": 22, "ψ": 23, "ω": 24,
}  # fmt: skip

# Combining ypogegrammeni and its spacing form
IOTA_SUBSCRIPTS = ("\u0345", "\u037a")


def normalize_greek(text: str) -> str:
    """Strip accents and breathings, keeping iota subscripts as full iotas."""
    decomposed = unicodedata.normalize("NFD", text)
    for mark in IOTA_SUBSCRIPTS:
        decomposed = decomposed.replace(mark, "ι")
    return "".join(c for c in decomposed if not unicodedata.combining(c)).lower()


def reduce_digits(value: int) -> int:
    """Repeated digit sum, e.g. 24 -> 6, 19 -> 10 -> 1."""
    while value > 9:
        value = sum(int(d) for d in str(value))
    return value


def compute_greek(text: str) -> Gematria:
    standard = 0
    ordinal = 0
    reduced = 0

    for char in normalize_greek(text):
        standard += GREEK_VALUES.get(char, 0)
        ord_val = GREEK_ORDINAL.get(char)
        if ord_val is not None:
            ordinal += ord_val
            reduced += reduce_digits(ord_val)

    return Gematria(standard=standard, ordinal=ordinal, reduced=reduced)
