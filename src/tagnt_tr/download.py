"""Fetch and cache the STEPBible TAGNT source files."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

import requests

logger = logging.getLogger(__name__)

_BASE_URL = (
    "https://raw.githubusercontent.com/STEPBible/STEPBible-Data/master/"
    "Translators%20Amalgamated%20OT%2BNT/"
)

# Cached file name -> download URL
TAGNT_URLS = {
    "TAGNT-Mat-Jhn.txt": _BASE_URL
    + "TAGNT%20Mat-Jhn%20-%20Translators%20Amalgamated%20Greek%20NT%20-%20STEPBible.org%20CC-BY.txt",
    "TAGNT-Act-Rev.txt": _BASE_URL
    + "TAGNT%20Act-Rev%20-%20Translators%20Amalgamated%20Greek%20NT%20-%20STEPBible.org%20CC-BY.txt",
}

# Download cache (override with TAGNT_SOURCE_DIR env var)
SOURCE_DIR = Path(
    os.environ.get("TAGNT_SOURCE_DIR", Path(__file__).parent.parent.parent / "source")
)

REQUEST_TIMEOUT = 60  # seconds


class SourceUnavailableError(RuntimeError):
    """Raised when a TAGNT file can be neither read from cache nor downloaded."""


def fetch(url: str) -> str:
    try:
        response = requests.get(
            url, headers={"User-Agent": "Mozilla/5.0"}, timeout=REQUEST_TIMEOUT
        )
        response.raise_for_status()
    except requests.RequestException as e:
        raise SourceUnavailableError(f"Failed to download {url}: {e}") from e
    response.encoding = "utf-8"
    return response.text


def download_files(source_dir: Path = SOURCE_DIR, refresh: bool = False) -> list[Path]:
    """Return local paths of both TAGNT files, downloading any that are missing."""
    files = []
    for file_name, url in TAGNT_URLS.items():
        path = source_dir / file_name
        if path.exists() and not refresh:
            logger.info("Using cached %s", file_name)
            files.append(path)
            continue

        logger.info("Downloading %s ...", file_name)
        content = fetch(url)
        source_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        logger.info("Downloaded %s (%d bytes)", file_name, len(content))
        files.append(path)

    return files


def iter_lines(path: Path) -> Iterator[str]:
    try:
        with open(path, encoding="utf-8-sig") as f:
            yield from f
    except OSError as e:
        raise SourceUnavailableError(f"Cannot read {path}: {e}") from e
