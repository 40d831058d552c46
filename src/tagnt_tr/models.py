from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ParsedReference(BaseModel):
    book: str
    chapter: int = Field(ge=1)
    verse: int = Field(ge=1)
    word_num: int = Field(ge=1)
    type: str


class Gematria(BaseModel):
    standard: int = 0
    ordinal: int = 0
    reduced: int = 0

    def __add__(self, other: Gematria) -> Gematria:
        return Gematria(
            standard=self.standard + other.standard,
            ordinal=self.ordinal + other.ordinal,
            reduced=self.reduced + other.reduced,
        )


class ParsedWord(BaseModel):
    """A TR word taken from one TAGNT data line, at its resolved address."""

    book: str  # OSIS code
    chapter: int
    verse: int
    word_num: int
    type: str
    greek: str
    translation: str = ""
    strongs: str = ""
    morph: str = ""
    gloss: str = ""
    editions: str = ""


class WordEntry(BaseModel):
    position: int
    text: str
    lemma: list[str] | None = None
    morph: str | None = None
    strongs: str | None = None
    translation: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    gematria: Gematria


class VerseData(BaseModel):
    text: str
    words: list[WordEntry]
    gematria: Gematria


class EditionMetadata(BaseModel):
    abbreviation: str
    name: str
    language: str
    license: str
    source: str
    urls: list[str]
    attribution: dict[str, str] | None = None
    filter: str | None = None
    features: list[str] | None = None


class BookInfo(BaseModel):
    name: str
    osis: str
    chapters: int = 0
