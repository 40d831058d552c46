"""TAGNT reference tokens and Textus Receptus versification.

A reference token looks like ``Book.Ch.Vs{AltCh.AltVs}[KjvCh.KjvVs]#Word=Type``.
Both the brace and the bracket parts are optional. For TR words the brace
pair (the manuscript-tradition location) wins over the bracket pair (the
KJV renumbering); all other words keep their primary address.
"""

from __future__ import annotations

import re

from tagnt_tr.models import ParsedReference

REFERENCE_RE = re.compile(
    r"^([A-Za-z0-9]+)\.(\d+)\.(\d+)"
    r"(?:\{(\d+)\.(\d+)\})?"
    r"(?:\[(\d+)\.(\d+)\])?"
    r"#(\d+)=(.+)$"
)

# Loose prefix check used to tell data lines from boilerplate
REFERENCE_PREFIX_RE = re.compile(r"^[A-Za-z0-9]+\.\d+\.\d+")


def is_tr_word(word_type: str) -> bool:
    """True when the type flags mark the word as part of the TR.

    ``K`` is a TR word, ``k`` a minor TR variant. Parentheses around a flag
    do not change membership.
    """
    return "k" in word_type.replace("(", "").replace(")", "").lower()


def parse_reference(ref: str) -> ParsedReference | None:
    """Parse a reference token, returning None if it is malformed.

    Examples:
        Mat.1.1#01=NKO          -> Mat 1:1 word 1
        Jhn.7.53{8.1}#01=K(O)   -> Jhn 8:1 (alternate location, TR word)
        Php.1.16[1.17]#01=NKO   -> Php 1:17 (KJV versification, TR word)
    """
    match = REFERENCE_RE.match(ref)
    if not match:
        return None

    book, ch, vs, alt_ch, alt_vs, kjv_ch, kjv_vs, word_num, word_type = match.groups()

    chapter = int(ch)
    verse = int(vs)

    if is_tr_word(word_type):
        if alt_ch and alt_vs:
            chapter = int(alt_ch)
            verse = int(alt_vs)
        elif kjv_ch and kjv_vs:
            chapter = int(kjv_ch)
            verse = int(kjv_vs)

    if 0 in (chapter, verse, int(word_num)):
        return None

    return ParsedReference(
        book=book,
        chapter=chapter,
        verse=verse,
        word_num=int(word_num),
        type=word_type,
    )
