"""MCP tools for Greek gematria."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from tagnt_tr.gematria import compute_greek


def register(mcp: FastMCP) -> None:
    @mcp.tool()
    def compute_gematria(text: str) -> dict:
        """Compute Greek gematria (isopsephy) for a word or phrase.

        Accents and breathings are ignored; an iota subscript counts as iota.
        Returns standard (Milesian numerals), ordinal (alphabet position) and
        reduced (digit sum of ordinal) totals.

        Args:
            text: Greek text, with or without diacritics (e.g. "λόγος")
        """
        return compute_greek(text).model_dump()
