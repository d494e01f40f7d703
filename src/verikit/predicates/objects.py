"""Predicates applicable to any value."""

from __future__ import annotations

from typing import Any, Iterable

from verikit.predicates.catalog import Catalog, shows

OBJECTS = Catalog("object")


@OBJECTS.predicate("value equals the expected value", requires=(), diff=True)
def equals(actual: Any, expected: Any) -> bool:
    return actual == expected


@OBJECTS.predicate("value does not equal the expected value", requires=())
def not_equals(actual: Any, expected: Any) -> bool:
    return actual != expected


@OBJECTS.predicate("value is null", requires=(), expected=None)
def is_null(actual: Any) -> bool:
    return actual is None


@OBJECTS.predicate("value is not null", requires=(), expected=shows("<not null>"))
def is_not_null(actual: Any) -> bool:
    return actual is not None


@OBJECTS.predicate("value equals one of the expected values", requires=("candidates",),
                   expected="candidates")
def equals_any(actual: Any, candidates: Iterable[Any]) -> bool:
    return any(actual == c for c in candidates)


@OBJECTS.predicate("value equals none of the expected values", requires=("candidates",),
                   expected="candidates")
def equals_none(actual: Any, candidates: Iterable[Any]) -> bool:
    return all(actual != c for c in candidates)
