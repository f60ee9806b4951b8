"""
FastAPI application for UH course search.

Run as a script:
    python app/app.py

Or as a module:
    uvicorn app.app:app --reload

Startup loads the ten campus catalogs from data/catalogs/ once (missing or
malformed files count as empty catalogs).

Endpoint:
    GET /api/programs-courses?q=...&keyword=...&campus=...&limit=...
        returns: {"success": true, "total": int, "results": [...]}
        errors:  500 {"success": false, "error": str}

Logs each query and wall-clock response time to stdout and logs/app.log
(rotating, 5 MB max, 3 backups).
"""

import asyncio
import logging
import logging.handlers
import os
import sys
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel

# Ensure project root is on sys.path when running as a script (python app/app.py)
sys.path.insert(0, str(Path(__file__).parent.parent))

from etl.catalog import DATA_DIR as DEFAULT_DATA_DIR, Campus, aggregate, load_catalogs
from search.matcher import filter_courses
from search.query import normalize_query

load_dotenv()

ROOT_DIR = Path(__file__).parent.parent
LOG_DIR  = Path(os.getenv("LOG_DIR", ROOT_DIR / "logs"))
LOG_FILE = LOG_DIR / "app.log"
DATA_DIR = Path(os.getenv("COURSE_DATA_DIR", DEFAULT_DATA_DIR))
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))

EMPTY_QUERY_MESSAGE = "Please include a search query (e.g., ?q=data)"
UNKNOWN_ERROR       = "Unknown error occurred"


def _setup_logging() -> None:
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    fmt = logging.Formatter("%(asctime)s  %(levelname)s  %(message)s")

    stream = logging.StreamHandler(sys.stdout)
    stream.setFormatter(fmt)

    # Rotate at 5 MB, keep 3 backups
    rotating = logging.handlers.RotatingFileHandler(
        LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
    )
    rotating.setFormatter(fmt)

    root = logging.getLogger()
    root.setLevel(logging.INFO)
    root.addHandler(stream)
    root.addHandler(rotating)

_setup_logging()
log = logging.getLogger("api")


# ---------------------------------------------------------------------------
# App + lifespan
# ---------------------------------------------------------------------------

_sources: list[tuple[Campus, Any]] | None = None


@asynccontextmanager
async def lifespan(_: FastAPI):
    global _sources

    log.info("Loading campus catalogs from %s…", DATA_DIR)
    _sources = load_catalogs(DATA_DIR)
    for campus, data in _sources:
        count = len(data) if isinstance(data, list) else 0
        log.info("  %-10s %5d courses", campus.key, count)

    yield  # server runs here


app = FastAPI(title="UH Course Search", lifespan=lifespan)


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

class SearchResponse(BaseModel):
    success: bool = True
    total: int
    message: str | None = None
    results: list[dict[str, Any]]


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------

@app.get(
    "/api/programs-courses",
    response_model=SearchResponse,
    response_model_exclude_unset=True,
    responses={500: {"model": ErrorResponse}},
)
def programs_courses(
    q: str | None = None,
    limit: str | None = None,
    campus: list[str] = Query(default=[]),
    keyword: list[str] = Query(default=[]),
):
    try:
        t0 = time.perf_counter()
        query = normalize_query(q, keywords=keyword, campuses=campus, limit=limit)

        if not query.terms:
            return SearchResponse(success=True, total=0, message=EMPTY_QUERY_MESSAGE, results=[])

        assert _sources is not None, "Course catalogs not loaded"
        courses = aggregate(_sources)
        total, results = filter_courses(courses, query)

        elapsed = time.perf_counter() - t0
        log.info(
            "terms=%r  campus=%r  limit=%d  hits=%d  %.3fs",
            query.terms, sorted(query.campuses), query.limit, total, elapsed,
        )
        return SearchResponse(success=True, total=total, results=results)

    except Exception as exc:
        log.exception("Error in /api/programs-courses")
        body = ErrorResponse(error=str(exc) or UNKNOWN_ERROR)
        return JSONResponse(status_code=500, content=body.model_dump())


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def _launch_server() -> None:
    config = uvicorn.Config(app, host=API_HOST, port=API_PORT, reload=False)
    server = uvicorn.Server(config)

    try:
        asyncio.get_running_loop()
    except RuntimeError:
        uvicorn.run(app, host=API_HOST, port=API_PORT, reload=False)
        return

    log.warning(
        "Detected an existing asyncio event loop; serving with create_task() instead of asyncio.run()."
    )
    asyncio.create_task(server.serve())


if __name__ == "__main__":
    log.info("=== UH Course Search — launching server on http://%s:%d ===", API_HOST, API_PORT)
    _launch_server()
