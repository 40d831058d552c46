"""Verse store for the imported edition: JSON files per verse.

Layout::

    <data_dir>/metadata.json
    <data_dir>/<OSIS book>/<chapter>/<verse>.json
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from tagnt_tr.models import BookInfo, EditionMetadata, VerseData

logger = logging.getLogger(__name__)

EDITION = "stepbible-tagnt-tr"

# Verse store root (override with TAGNT_DATA_DIR env var)
DATA_DIR = Path(
    os.environ.get(
        "TAGNT_DATA_DIR", Path(__file__).parent.parent.parent / "data" / EDITION
    )
)

METADATA = EditionMetadata(
    abbreviation=EDITION,
    name="Textus Receptus (STEPBible TAGNT)",
    language="Greek",
    license="CC BY 4.0",
    source="STEPBible",
    urls=[
        "https://www.stepbible.org",
        "https://github.com/STEPBible/STEPBible-Data",
    ],
    attribution={
        "source": "STEP Bible / Tyndale House Cambridge - CC BY 4.0",
        "data": "Translators Amalgamated Greek NT (TAGNT)",
    },
    filter="TR (K) manuscript source only",
    features=[
        "Complete TR text including Rom 16:25-27, 2 Cor 13:13-14, Phil 1:16-17",
        "Proper polytonic Greek with iota subscripts",
        "Robinson morphological tagging",
        "Strong's concordance numbers",
        "English translations",
    ],
)

# New Testament book name -> OSIS, in canonical order
BOOK_TO_OSIS = {
    "Matthew": "Matt", "Mark": "Mark", "Luke": "Luke", "John": "John",
    "Acts": "Acts", "Romans": "Rom", "1 Corinthians": "1Cor", "2 Corinthians": "2Cor",
    "Galatians": "Gal", "Ephesians": "Eph", "Philippians": "Phil", "Colossians": "Col",
    "1 Thessalonians": "1Thess", "2 Thessalonians": "2Thess", "1 Timothy": "1Tim",
    "2 Timothy": "2Tim", "Titus": "Titus", "Philemon": "Phlm", "Hebrews": "Heb",
    "James": "Jas", "1 Peter": "1Pet", "2 Peter": "2Pet", "1 John": "1John",
    "2 John": "2John", "3 John": "3John", "Jude": "Jude", "Revelation": "Rev",
}  # fmt: skip


class VerseNotFoundError(LookupError):
    pass


class ChapterNotFoundError(LookupError):
    pass


_OSIS_CODES = set(BOOK_TO_OSIS.values())


def to_osis(book: str) -> str | None:
    """Full English name or OSIS code -> OSIS code, None if not an NT book."""
    if book in _OSIS_CODES:
        return book
    return BOOK_TO_OSIS.get(book)


def _numeric_stem(path: Path) -> int:
    return int(path.stem)


class VerseStore:
    """JSON file-based verse storage."""

    def __init__(self, directory: Path = DATA_DIR) -> None:
        self.directory = Path(directory)

    def _chapter_dir(self, book: str, chapter: int) -> Path | None:
        osis = to_osis(book)
        if osis is None:
            return None
        return self.directory / osis / str(chapter)

    def save_verse(self, book: str, chapter: int, verse: int, data: VerseData) -> Path:
        chapter_dir = self._chapter_dir(book, chapter)
        if chapter_dir is None:
            raise ValueError(f"Unknown book: {book}")
        path = chapter_dir / f"{verse}.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(data.model_dump(), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        return path

    def save_metadata(self, metadata: EditionMetadata = METADATA) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / "metadata.json"
        path.write_text(
            json.dumps(metadata.model_dump(exclude_none=True), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        return path

    def metadata(self) -> EditionMetadata:
        """Stored metadata, falling back to the built-in edition metadata."""
        path = self.directory / "metadata.json"
        if not path.exists():
            return METADATA
        return EditionMetadata(**json.loads(path.read_text(encoding="utf-8")))

    def load_verse(self, book: str, chapter: int, verse: int) -> VerseData:
        chapter_dir = self._chapter_dir(book, chapter)
        path = chapter_dir / f"{verse}.json" if chapter_dir else None
        if path is None or not path.is_file():
            raise VerseNotFoundError(
                f"Verse {book} {chapter}:{verse} not found in {EDITION}"
            )
        return VerseData(**json.loads(path.read_text(encoding="utf-8")))

    def load_chapter(self, book: str, chapter: int) -> list[VerseData]:
        """All verses of a chapter in verse-number order."""
        chapter_dir = self._chapter_dir(book, chapter)
        if chapter_dir is None or not chapter_dir.is_dir():
            raise ChapterNotFoundError(f"Chapter {book} {chapter} not found in {EDITION}")

        files = sorted(
            (p for p in chapter_dir.glob("*.json") if p.stem.isdigit()),
            key=_numeric_stem,
        )
        return [VerseData(**json.loads(p.read_text(encoding="utf-8"))) for p in files]

    def list_books(self) -> list[BookInfo]:
        """All 27 NT books, with the number of chapters present in the store."""
        books = []
        for name, osis in BOOK_TO_OSIS.items():
            book_dir = self.directory / osis
            chapters = 0
            if book_dir.is_dir():
                chapters = sum(1 for d in book_dir.iterdir() if d.is_dir())
            books.append(BookInfo(name=name, osis=osis, chapters=chapters))
        return books
