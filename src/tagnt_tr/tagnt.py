"""TAGNT line format: data-line detection and column parsing.

A data line is tab separated::

    Mat.1.1#01=NKO  Βίβλος (Biblos)  [The] book  G0976=N-NSF  βίβλος=book  ...

Everything else in the export (title blocks, ``#`` verse summaries, column
headers, indented notes) is skipped.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from tagnt_tr.aggregate import VerseKey
from tagnt_tr.models import ParsedWord
from tagnt_tr.reference import REFERENCE_PREFIX_RE, is_tr_word, parse_reference

logger = logging.getLogger(__name__)

# TAGNT book abbreviation -> OSIS
BOOK_MAP = {
    "Mat": "Matt", "Mrk": "Mark", "Luk": "Luke", "Jhn": "John",
    "Act": "Acts", "Rom": "Rom", "1Co": "1Cor", "2Co": "2Cor",
    "Gal": "Gal", "Eph": "Eph", "Php": "Phil", "Col": "Col",
    "1Th": "1Thess", "2Th": "2Thess", "1Ti": "1Tim", "2Ti": "2Tim",
    "Tit": "Titus", "Phm": "Phlm", "Heb": "Heb",
    "Jas": "Jas", "1Pe": "1Pet", "2Pe": "2Pet",
    "1Jn": "1John", "2Jn": "2John", "3Jn": "3John",
    "Jud": "Jude", "Rev": "Rev",
}  # fmt: skip

BOILERPLATE_PREFIXES = (
    "Word & Type",
    "TAGNT",
    "(This is",
    "All the",
    "Introduction",
    "Spreadsheet",
)

# ref, Greek, English, dStrongs=Grammar; gloss and editions may be absent
MIN_COLUMNS = 4

_DSTRONGS_RE = re.compile(r"^G(\d+)[A-Z]?=(.+)$")


def is_data_line(line: str) -> bool:
    if not line.strip():
        return False
    if line.startswith(("#", "=", "\t")) or line.startswith(BOILERPLATE_PREFIXES):
        return False
    if "\t" not in line:
        return False
    return bool(REFERENCE_PREFIX_RE.match(line))


def extract_greek(greek_col: str) -> str:
    """'Βίβλος (Biblos)' -> 'Βίβλος'"""
    return greek_col.split("(", 1)[0].strip()


def parse_dstrongs(dstrongs: str) -> tuple[str, str] | None:
    """'G0976=N-NSF' -> ('G976', 'N-NSF'); sense letters are dropped."""
    match = _DSTRONGS_RE.match(dstrongs.strip())
    if not match:
        return None
    num, morph = match.groups()
    return f"G{int(num)}", morph.strip()


def parse_line(line: str) -> ParsedWord | None:
    """Parse one TAGNT line into a TR word, or None if it should be skipped."""
    if not is_data_line(line):
        return None

    cols = line.rstrip("\r\n").split("\t")
    if len(cols) < MIN_COLUMNS:
        return None

    ref_col = cols[0].strip()
    if "#" not in ref_col:
        return None

    parsed = parse_reference(ref_col)
    if parsed is None:
        logger.debug("Malformed reference: %r", ref_col)
        return None

    if not is_tr_word(parsed.type):
        return None

    greek = extract_greek(cols[1])
    if not greek:
        logger.debug("No Greek text for %s", ref_col)
        return None

    osis = BOOK_MAP.get(parsed.book)
    if osis is None:
        logger.debug("Unknown book code %r in %s", parsed.book, ref_col)
        return None

    strongs_morph = parse_dstrongs(cols[3])
    strongs, morph = strongs_morph if strongs_morph else ("", "")

    return ParsedWord(
        book=osis,
        chapter=parsed.chapter,
        verse=parsed.verse,
        word_num=parsed.word_num,
        type=parsed.type,
        greek=greek,
        translation=cols[2].strip(),
        strongs=strongs,
        morph=morph,
        gloss=cols[4].strip() if len(cols) > 4 else "",
        editions=cols[5].strip() if len(cols) > 5 else "",
    )


def parse_tagnt_lines(
    lines: Iterable[str],
    verses: dict[VerseKey, list[ParsedWord]] | None = None,
) -> dict[VerseKey, list[ParsedWord]]:
    """Collect TR words by resolved verse key.

    Pass an existing ``verses`` map to merge several TAGNT files into one.
    """
    if verses is None:
        verses = {}

    kept = 0
    for line in lines:
        word = parse_line(line)
        if word is None:
            continue
        verses.setdefault((word.book, word.chapter, word.verse), []).append(word)
        kept += 1

    logger.info("Parsed %d TR words (%d verses so far)", kept, len(verses))
    return verses
