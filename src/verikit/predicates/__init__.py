"""Predicate catalogs, one per value family."""

from verikit.core.errors import EXIT_USAGE, VerikitError
from verikit.predicates.booleans import BOOLEANS
from verikit.predicates.catalog import Catalog, Predicate
from verikit.predicates.collections import COLLECTIONS
from verikit.predicates.files import FILES
from verikit.predicates.maps import MAPS
from verikit.predicates.numbers import NUMBERS
from verikit.predicates.objects import OBJECTS
from verikit.predicates.strings import STRINGS

CATALOGS: dict[str, Catalog] = {
    "object": OBJECTS,
    "string": STRINGS,
    "number": NUMBERS,
    "bool": BOOLEANS,
    "collection": COLLECTIONS,
    "map": MAPS,
    "file": FILES,
}


def get_catalog(family: str) -> Catalog:
    try:
        return CATALOGS[family]
    except KeyError:
        known = ", ".join(sorted(CATALOGS))
        raise VerikitError(f"Unknown family '{family}' (expected one of: {known})", EXIT_USAGE) from None


__all__ = [
    "BOOLEANS",
    "CATALOGS",
    "COLLECTIONS",
    "Catalog",
    "FILES",
    "MAPS",
    "NUMBERS",
    "OBJECTS",
    "Predicate",
    "STRINGS",
    "get_catalog",
]
