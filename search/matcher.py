"""
Substring matcher over the aggregated course catalog.

A course is a hit when it passes the campus filter and at least one search
term is contained in its title, its department name, or its identifier
("<prefix> <number>", lowercased). Hits keep catalog order; there is no
scoring.

Public API:
    course_identifier(course)          → str
    matches_campus(course, campuses)   → bool
    matches_terms(course, terms)       → bool
    filter_courses(courses, query)     → (total, results)
"""

from collections.abc import Iterable
from typing import Any

from etl.catalog import CAMPUSES
from search.query import SearchQuery

Course = dict[str, Any]

_CAMPUS_KEYS = {c.name.lower(): c.key for c in CAMPUSES}


def _field(course: Course, name: str) -> str:
    value = course.get(name) or ""
    return value if isinstance(value, str) else str(value)


def course_identifier(course: Course) -> str:
    """'ICS' + '111' → 'ics 111'; either part may be missing."""
    return f"{_field(course, 'course_prefix')} {_field(course, 'course_number')}".strip().lower()


def matches_campus(course: Course, campuses: set[str]) -> bool:
    """
    True when no campus filter is set, or the course's campus name or key
    is one of the filter values (exact, case-insensitive).
    """
    if not campuses:
        return True
    name = _field(course, "campus").strip().lower()
    key  = _CAMPUS_KEYS.get(name, "")
    return (bool(name) and name in campuses) or (bool(key) and key in campuses)


def matches_terms(course: Course, terms: Iterable[str]) -> bool:
    title = _field(course, "course_title").lower()
    dept  = _field(course, "dept_name").lower()
    ident = course_identifier(course)

    for term in terms:
        if not term:
            continue
        if term in title or term in dept or (ident and term in ident):
            return True
    return False


def filter_courses(courses: Iterable[Course], query: SearchQuery) -> tuple[int, list[Course]]:
    """
    Return (total hits, first query.limit hits).

    total is counted before truncation.
    """
    hits = [
        c for c in courses
        if matches_campus(c, query.campuses) and matches_terms(c, query.terms)
    ]
    return len(hits), hits[: query.limit]
