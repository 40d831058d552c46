"""MCP tools for verse and chapter retrieval."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from tagnt_tr.source import ChapterNotFoundError, VerseNotFoundError, VerseStore


def register(mcp: FastMCP, store: VerseStore) -> None:
    @mcp.tool()
    def get_verse(book: str, chapter: int, verse: int) -> dict:
        """Get a Textus Receptus verse with word-level annotations.

        Each word carries: Greek text, Strong's number, Robinson morphology,
        English translation, and gematria (standard, ordinal, reduced).

        Args:
            book: Book name or OSIS code (e.g. "Matthew", "Matt", "1 John")
            chapter: Chapter number
            verse: Verse number
        """
        try:
            return store.load_verse(book, chapter, verse).model_dump()
        except VerseNotFoundError as e:
            return {"error": str(e)}

    @mcp.tool()
    def get_chapter(book: str, chapter: int) -> list[dict]:
        """Get every verse of a chapter, in verse order.

        Args:
            book: Book name or OSIS code (e.g. "Romans", "Rom")
            chapter: Chapter number
        """
        try:
            return [v.model_dump() for v in store.load_chapter(book, chapter)]
        except ChapterNotFoundError as e:
            return [{"error": str(e)}]

    @mcp.tool()
    def list_books() -> list[dict]:
        """List the 27 New Testament books with OSIS codes and chapter counts."""
        return [b.model_dump() for b in store.list_books()]
