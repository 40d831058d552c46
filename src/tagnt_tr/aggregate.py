"""Fold parsed TR words into per-verse records."""

from __future__ import annotations

import re

from tagnt_tr.gematria import compute_greek
from tagnt_tr.models import Gematria, ParsedWord, VerseData, WordEntry

VerseKey = tuple[str, int, int]

# Whitespace before these is dropped when joining words (· and U+0387 ano teleia)
_PUNCT_SPACE_RE = re.compile("\\s+([,.;:!?\u00b7\u0387])")


def join_words(texts: list[str]) -> str:
    return _PUNCT_SPACE_RE.sub(r"\1", " ".join(texts))


def word_entry(word: ParsedWord, position: int) -> WordEntry:
    return WordEntry(
        position=position,
        text=word.greek,
        lemma=[word.strongs] if word.strongs else None,
        morph=f"robinson:{word.morph}" if word.morph else None,
        strongs=word.strongs or None,
        translation=word.translation or None,
        metadata={},
        gematria=compute_greek(word.greek),
    )


def build_verse(words: list[ParsedWord]) -> VerseData:
    """Build a verse record from the words that resolved to it.

    Words are ordered by their TAGNT word number and renumbered from 1, so
    gaps left by filtered words disappear. The verse gematria is the sum of
    the word values, never recomputed from the joined text.
    """
    ordered = sorted(words, key=lambda w: w.word_num)
    entries = [word_entry(w, idx) for idx, w in enumerate(ordered, start=1)]

    totals = Gematria()
    for entry in entries:
        totals = totals + entry.gematria

    return VerseData(
        text=join_words([e.text for e in entries]),
        words=entries,
        gematria=totals,
    )


def aggregate(verse_map: dict[VerseKey, list[ParsedWord]]) -> dict[VerseKey, VerseData]:
    return {key: build_verse(words) for key, words in verse_map.items()}
