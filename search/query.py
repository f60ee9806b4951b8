"""
Request parameter normalisation for course search.

Turns the raw q / keyword / campus / limit parameters into a SearchQuery:
    terms:     [q] + keywords, lowercased and trimmed, empties dropped
    campuses:  lowercased campus filter values (set semantics)
    limit:     int in [1, MAX_LIMIT], DEFAULT_LIMIT when missing or invalid
"""

import math
from collections.abc import Iterable

from pydantic import BaseModel

DEFAULT_LIMIT = 20
MAX_LIMIT     = 200


class SearchQuery(BaseModel):
    terms: list[str]
    campuses: set[str]
    limit: int


def parse_limit(value: str | None) -> int:
    """Parse the limit parameter, clamping to MAX_LIMIT and defaulting on anything else."""
    if value is None:
        return DEFAULT_LIMIT
    try:
        number = float(value)
    except ValueError:
        return DEFAULT_LIMIT
    if not math.isfinite(number) or number <= 0:
        return DEFAULT_LIMIT
    limit = min(math.floor(number), MAX_LIMIT)
    # 0 < number < 1 floors to zero
    return limit if limit >= 1 else DEFAULT_LIMIT


def split_values(values: Iterable[str]) -> list[str]:
    """Flatten repeated and comma-separated values, trimmed and lowercased, empties dropped."""
    out = []
    for value in values:
        for part in value.split(","):
            part = part.strip().lower()
            if part:
                out.append(part)
    return out


def normalize_query(
    q: str | None = None,
    keywords: Iterable[str] = (),
    campuses: Iterable[str] = (),
    limit: str | None = None,
) -> SearchQuery:
    primary = (q or "").strip().lower()
    terms = ([primary] if primary else []) + split_values(keywords)
    return SearchQuery(
        terms=terms,
        campuses=set(split_values(campuses)),
        limit=parse_limit(limit),
    )
