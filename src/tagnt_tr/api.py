"""FastAPI HTTP layer over the imported TR verse store."""

from __future__ import annotations

import hmac
import logging
import os

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from tagnt_tr.gematria import compute_greek, normalize_greek
from tagnt_tr.source import ChapterNotFoundError, VerseNotFoundError, VerseStore

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="TAGNT Textus Receptus API",
    description="Greek New Testament (Textus Receptus) verses with gematria",
    version="0.1.0",
)

API_KEY = os.getenv("API_KEY")
if not API_KEY:
    logger.warning("API_KEY not set. All requests will be allowed.")


@app.middleware("http")
async def verify_api_key(request: Request, call_next):
    if API_KEY and request.url.path != "/health":
        key = request.headers.get("x-api-key", "")
        if not hmac.compare_digest(key, API_KEY):
            return JSONResponse(status_code=401, content={"detail": "Invalid API key"})
    return await call_next(request)


@app.get("/health")
def health():
    """Unauthenticated health check."""
    return {"status": "ok"}


store = VerseStore()


@app.get("/api/metadata")
def get_metadata():
    """Edition metadata: name, language, license and provenance."""
    return store.metadata().model_dump(exclude_none=True)


@app.get("/api/books")
def list_books():
    """List the New Testament books with chapter counts."""
    return [b.model_dump() for b in store.list_books()]


@app.get("/api/verse")
def get_verse(book: str, chapter: int, verse: int):
    """Get one verse with word-level morphology and gematria."""
    try:
        return store.load_verse(book, chapter, verse).model_dump()
    except VerseNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.get("/api/chapter")
def get_chapter(book: str, chapter: int):
    """Get all verses of a chapter in order."""
    try:
        return [v.model_dump() for v in store.load_chapter(book, chapter)]
    except ChapterNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.get("/api/gematria")
def get_gematria(text: str):
    """Compute standard, ordinal and reduced gematria for Greek text."""
    return {
        "text": text,
        "normalized": normalize_greek(text),
        "gematria": compute_greek(text).model_dump(),
    }


def main():
    """Run the API server."""
    import uvicorn

    port = int(os.environ.get("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
