"""Import the STEPBible TAGNT Textus Receptus into the verse store.

Downloads the two TAGNT files, keeps only TR (K) words and files them under
their TR address. ``{}`` alternate manuscript locations (John 7:53 as {8.1})
and ``[]`` KJV renumberings (Phil 1:16 as [1.17]) are honoured, so the TR-only
passages (Rom 16:25-27, 2 Cor 13:13-14, ...) come through intact.

Usage: tagnt-tr-import [--source-dir DIR] [--data-dir DIR] [--refresh]
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel

from tagnt_tr.aggregate import VerseKey, aggregate
from tagnt_tr.download import SOURCE_DIR, SourceUnavailableError, download_files, iter_lines
from tagnt_tr.models import ParsedWord
from tagnt_tr.source import DATA_DIR, VerseStore
from tagnt_tr.tagnt import parse_tagnt_lines

logger = logging.getLogger(__name__)

# Verses absent from critical editions that a complete TR must contain
TR_SPECIFIC_VERSES = [
    "Matt.17.21", "Matt.18.11", "Matt.23.14",
    "Mark.7.16", "Mark.9.44", "Mark.9.46", "Mark.11.26", "Mark.15.28",
    "Luke.17.36", "Luke.23.17",
    "John.5.4", "John.7.53",
    "Acts.8.37", "Acts.15.34", "Acts.24.7", "Acts.28.29",
    "Rom.16.24", "Rom.16.25", "Rom.16.26", "Rom.16.27",
    "1John.5.7",
    "2Cor.13.13", "2Cor.13.14",
    "Phil.1.16", "Phil.1.17",
]  # fmt: skip


class ImportSummary(BaseModel):
    verses_saved: int
    data_dir: str
    tr_specific: dict[str, bool]

    @property
    def missing(self) -> list[str]:
        return [ref for ref, present in self.tr_specific.items() if not present]


def verse_key_str(key: VerseKey) -> str:
    book, chapter, verse = key
    return f"{book}.{chapter}.{verse}"


def collect_words(source_files: Iterable[Path]) -> dict[VerseKey, list[ParsedWord]]:
    verse_map: dict[VerseKey, list[ParsedWord]] = {}
    for path in source_files:
        logger.info("Processing %s", path.name)
        parse_tagnt_lines(iter_lines(path), verse_map)
    return verse_map


def run_import(source_files: Iterable[Path], store: VerseStore) -> ImportSummary:
    verse_map = collect_words(source_files)
    logger.info("Found %d TR verses", len(verse_map))

    verses = aggregate(verse_map)
    for saved, ((book, chapter, verse), data) in enumerate(verses.items(), start=1):
        store.save_verse(book, chapter, verse, data)
        if saved % 1000 == 0:
            logger.info("Saved %d/%d verses ...", saved, len(verses))

    store.save_metadata()

    present = {verse_key_str(key) for key in verses}
    summary = ImportSummary(
        verses_saved=len(verses),
        data_dir=str(store.directory),
        tr_specific={ref: ref in present for ref in TR_SPECIFIC_VERSES},
    )
    logger.info("Imported %d TR verses to %s", summary.verses_saved, summary.data_dir)
    for ref in summary.missing:
        logger.warning("TR-specific verse missing: %s", ref)
    return summary


def main():
    """Run the TAGNT TR import."""
    parser = argparse.ArgumentParser(
        description="STEPBible TAGNT Textus Receptus importer",
    )
    parser.add_argument(
        "--source-dir",
        type=Path,
        default=SOURCE_DIR,
        help="Where downloaded TAGNT files are cached",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=DATA_DIR,
        help="Where verse JSON files are written",
    )
    parser.add_argument(
        "--refresh",
        action="store_true",
        help="Download the TAGNT files even if cached",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        files = download_files(args.source_dir, refresh=args.refresh)
        summary = run_import(files, VerseStore(args.data_dir))
    except SourceUnavailableError as e:
        logger.error("Import failed: %s", e)
        sys.exit(1)

    for ref, present in summary.tr_specific.items():
        print(f"  {'✓' if present else '✗'} {ref}")


if __name__ == "__main__":
    main()
