"""Academic program name → course prefixes used in the catalogs."""

from types import MappingProxyType

PROGRAM_PREFIX_MAP = MappingProxyType({
    "computer science":                ("ICS",),
    "information & computer sciences": ("ICS",),
    "electrical engineering":          ("EE", "ECE"),
    "business administration":         ("BUS", "FIN", "MKT"),
})


def get_prefixes_for_program(program: str) -> list[str] | None:
    """Prefixes for a lowercase program name, or None if the program is unknown."""
    prefixes = PROGRAM_PREFIX_MAP.get(program)
    return list(prefixes) if prefixes is not None else None
