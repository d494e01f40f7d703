"""Mapping predicates.

An entry is a ``(key, value)`` pair; it is contained when the key is present
and its value compares equal. A None map fails everything except ``is_empty``.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from verikit.constants import EMPTY_MARKER
from verikit.predicates.catalog import Catalog, shows
from verikit.predicates.objects import OBJECTS

MAPS = Catalog("map", parent=OBJECTS)


def _has_entry(mapping: Mapping[Any, Any], key: Any, value: Any) -> bool:
    return key in mapping and mapping[key] == value


def _entry(arguments: dict[str, Any]) -> dict[Any, Any]:
    return {arguments.get("key"): arguments.get("value")}


@MAPS.predicate("value contains the expected entry", expected=_entry)
def contains(actual: Mapping[Any, Any], key: Any, value: Any) -> bool:
    return _has_entry(actual, key, value)


@MAPS.predicate("value does not contain the expected entry", expected=_entry)
def not_contains(actual: Mapping[Any, Any], key: Any, value: Any) -> bool:
    return not _has_entry(actual, key, value)


@MAPS.predicate("value contains all entries of the expected map",
                requires=("actual", "expected"))
def contains_all(actual: Mapping[Any, Any], expected: Mapping[Any, Any]) -> bool:
    return all(_has_entry(actual, k, v) for k, v in expected.items())


@MAPS.predicate("value does not contain all entries of the expected map",
                requires=("actual", "expected"))
def not_contains_all(actual: Mapping[Any, Any], expected: Mapping[Any, Any]) -> bool:
    return not contains_all(actual, expected)


@MAPS.predicate("value contains none of the entries of the expected map",
                requires=("actual", "expected"))
def contains_none(actual: Mapping[Any, Any], expected: Mapping[Any, Any]) -> bool:
    return not any(_has_entry(actual, k, v) for k, v in expected.items())


@MAPS.predicate("value is empty or contains the expected entry", expected=_entry)
def empty_or_contains(actual: Mapping[Any, Any], key: Any, value: Any) -> bool:
    return not actual or _has_entry(actual, key, value)


@MAPS.predicate("value is empty or does not contain the expected entry", expected=_entry)
def empty_or_not_contains(actual: Mapping[Any, Any], key: Any, value: Any) -> bool:
    return not actual or not _has_entry(actual, key, value)


@MAPS.predicate("value has the same entries as the expected map", requires=())
def equals(actual: Optional[Mapping[Any, Any]], expected: Optional[Mapping[Any, Any]]) -> bool:
    if actual is None or expected is None:
        return actual is expected
    return dict(actual) == dict(expected)


@MAPS.predicate("value is empty", requires=(), expected=shows(EMPTY_MARKER))
def is_empty(actual: Optional[Mapping[Any, Any]]) -> bool:
    return not actual


@MAPS.predicate("value is not empty", expected=shows("<Not Empty>"))
def is_not_empty(actual: Mapping[Any, Any]) -> bool:
    return bool(actual)


@MAPS.predicate("size of value equals {expected}", requires=("actual", "expected"))
def size_equals(actual: Mapping[Any, Any], expected: int) -> bool:
    return len(actual) == expected


@MAPS.predicate("size of value is greater than {expected}", requires=("actual", "expected"))
def size_is_greater_than(actual: Mapping[Any, Any], expected: int) -> bool:
    return len(actual) > expected


@MAPS.predicate("size of value is greater than or equal to {expected}",
                requires=("actual", "expected"))
def size_is_greater_than_or_equal(actual: Mapping[Any, Any], expected: int) -> bool:
    return len(actual) >= expected


@MAPS.predicate("size of value is less than {expected}", requires=("actual", "expected"))
def size_is_less_than(actual: Mapping[Any, Any], expected: int) -> bool:
    return len(actual) < expected


@MAPS.predicate("size of value is less than or equal to {expected}",
                requires=("actual", "expected"))
def size_is_less_than_or_equal(actual: Mapping[Any, Any], expected: int) -> bool:
    return len(actual) <= expected
