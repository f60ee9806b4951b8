"""
Catalog loading and aggregation for the UH system course catalogs.

Each campus ships one JSON file under data/catalogs/ holding a list of
loosely-typed course objects. Files are read once at startup; on every
request the raw sources are stamped with their campus and concatenated in
registry order.

Public API:
    CAMPUSES                       → tuple[Campus, ...]
    load_source(path)              → raw JSON value or None
    load_catalogs(data_dir)        → list[(Campus, raw)]
    tag_courses(data, campus)      → list[dict]
    aggregate(sources)             → list[dict]
"""

import json
import logging
from pathlib import Path
from typing import Any, NamedTuple

DATA_DIR = Path(__file__).parent.parent / "data" / "catalogs"

Course = dict[str, Any]

log = logging.getLogger(__name__)


class Campus(NamedTuple):
    key: str
    name: str
    filename: str


# Registry order is the order results come back in.
CAMPUSES: tuple[Campus, ...] = (
    Campus("hawaiicc",   "Hawai‘i Community College",         "hawaiicc_courses.json"),
    Campus("hilo",       "University of Hawai‘i at Hilo",     "hilo_courses.json"),
    Campus("honolulucc", "Honolulu Community College",        "honolulucc_courses.json"),
    Campus("kapiolani",  "Kapi‘olani Community College",      "kapiolani_courses.json"),
    Campus("kauai",      "Kaua‘i Community College",          "kauai_courses.json"),
    Campus("leeward",    "Leeward Community College",         "leeward_courses.json"),
    Campus("manoa",      "University of Hawai‘i at Mānoa",    "manoa_courses.json"),
    Campus("maui",       "University of Hawai‘i Maui College", "maui_courses.json"),
    Campus("pcatt",      "Pacific Center for Advanced Technology Training (PCATT)",
           "pcatt_courses.json"),
    Campus("west_oahu",  "University of Hawai‘i – West O‘ahu", "west_oahu_courses.json"),
)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def load_source(path: Path) -> Any:
    """Load one catalog file; return None if it is missing or not valid JSON."""
    if not path.exists():
        log.warning("Catalog file %s not found, treating as empty.", path.name)
        return None
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        log.warning("Could not read catalog %s (%s), treating as empty.", path.name, exc)
        return None


def load_catalogs(data_dir: Path = DATA_DIR) -> list[tuple[Campus, Any]]:
    """Read every registered campus file from data_dir, in registry order."""
    return [(campus, load_source(data_dir / campus.filename)) for campus in CAMPUSES]


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

def tag_courses(data: Any, campus: Campus) -> list[Course]:
    """
    Coerce a raw source into a list of course dicts tagged with campus.

    Anything that is not a list counts as an empty catalog. Elements that
    are not objects are dropped. The input records are copied, never
    modified.
    """
    if not isinstance(data, list):
        if data is not None:
            log.warning("Catalog for %s is a %s, not a list; ignoring it.",
                        campus.key, type(data).__name__)
        return []

    courses = [
        {**c, "campus": campus.name}
        for c in data
        if isinstance(c, dict)
    ]
    skipped = len(data) - len(courses)
    if skipped:
        log.debug("Dropped %d non-object entries from %s catalog.", skipped, campus.key)
    return courses


def aggregate(sources: list[tuple[Campus, Any]]) -> list[Course]:
    """Concatenate tagged courses from every source, preserving source order."""
    courses: list[Course] = []
    for campus, data in sources:
        courses.extend(tag_courses(data, campus))
    return courses
