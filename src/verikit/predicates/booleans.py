"""Boolean predicates."""

from __future__ import annotations

from typing import Optional

from verikit.predicates.catalog import Catalog, shows
from verikit.predicates.objects import OBJECTS

BOOLEANS = Catalog("bool", parent=OBJECTS)


@BOOLEANS.predicate("value is true", expected=shows(True))
def is_true(actual: Optional[bool]) -> bool:
    return actual is True


@BOOLEANS.predicate("value is false", expected=shows(False))
def is_false(actual: Optional[bool]) -> bool:
    return actual is False
