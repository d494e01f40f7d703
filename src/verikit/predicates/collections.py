"""Collection predicates.

The value is any iterable. It is materialized once per evaluation so that
generators are not exhausted half way through a check.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from verikit.constants import EMPTY_MARKER
from verikit.predicates.catalog import Catalog, shows
from verikit.predicates.objects import OBJECTS

COLLECTIONS = Catalog("collection", parent=OBJECTS)


def _items(values: Optional[Iterable[Any]]) -> list[Any]:
    return [] if values is None else list(values)


def _describe_fn(arguments: dict[str, Any]) -> str:
    fn = arguments.get("fn")
    return getattr(fn, "__name__", repr(fn))


@COLLECTIONS.predicate("value contains the expected record", requires=("actual", "expected"))
def contains(actual: Iterable[Any], expected: Any) -> bool:
    return expected in _items(actual)


@COLLECTIONS.predicate("value does not contain the expected record",
                       requires=("actual", "expected"))
def not_contains(actual: Iterable[Any], expected: Any) -> bool:
    return expected not in _items(actual)


@COLLECTIONS.predicate("value contains all expected records", requires=("actual", "expected"))
def contains_all(actual: Iterable[Any], expected: Iterable[Any]) -> bool:
    items = _items(actual)
    return all(e in items for e in expected)


@COLLECTIONS.predicate("value does not contain all expected records",
                       requires=("actual", "expected"))
def not_contains_all(actual: Iterable[Any], expected: Iterable[Any]) -> bool:
    items = _items(actual)
    return not all(e in items for e in expected)


@COLLECTIONS.predicate("value contains one of the expected records",
                       requires=("actual", "expected"))
def contains_any(actual: Iterable[Any], expected: Iterable[Any]) -> bool:
    items = _items(actual)
    return any(e in items for e in expected)


@COLLECTIONS.predicate("value contains none of the expected records",
                       requires=("actual", "expected"))
def contains_none(actual: Iterable[Any], expected: Iterable[Any]) -> bool:
    items = _items(actual)
    expected = _items(expected)
    # an empty expected list gives nothing to check against
    return bool(expected) and not any(e in items for e in expected)


@COLLECTIONS.predicate("value is empty", requires=(), expected=shows(EMPTY_MARKER))
def is_empty(actual: Optional[Iterable[Any]]) -> bool:
    return not _items(actual)


@COLLECTIONS.predicate("value is not empty", expected=shows("<Not Empty>"))
def is_not_empty(actual: Iterable[Any]) -> bool:
    return bool(_items(actual))


@COLLECTIONS.predicate("value is empty or contains the expected record", requires=())
def empty_or_contains(actual: Optional[Iterable[Any]], expected: Any) -> bool:
    items = _items(actual)
    return not items or expected in items


@COLLECTIONS.predicate("value is empty or does not contain the expected record", requires=())
def empty_or_not_contains(actual: Optional[Iterable[Any]], expected: Any) -> bool:
    items = _items(actual)
    return not items or expected not in items


@COLLECTIONS.predicate("size of value equals {expected}", requires=("actual", "expected"))
def size_equals(actual: Iterable[Any], expected: int) -> bool:
    return len(_items(actual)) == expected


@COLLECTIONS.predicate("size of value is greater than {expected}",
                       requires=("actual", "expected"))
def size_is_greater_than(actual: Iterable[Any], expected: int) -> bool:
    return len(_items(actual)) > expected


@COLLECTIONS.predicate("size of value is greater than or equal to {expected}",
                       requires=("actual", "expected"))
def size_is_greater_than_or_equal(actual: Iterable[Any], expected: int) -> bool:
    return len(_items(actual)) >= expected


@COLLECTIONS.predicate("size of value is less than {expected}", requires=("actual", "expected"))
def size_is_less_than(actual: Iterable[Any], expected: int) -> bool:
    return len(_items(actual)) < expected


@COLLECTIONS.predicate("size of value is less than or equal to {expected}",
                       requires=("actual", "expected"))
def size_is_less_than_or_equal(actual: Iterable[Any], expected: int) -> bool:
    return len(_items(actual)) <= expected


@COLLECTIONS.predicate("value has a record matching the condition", requires=("actual", "fn"),
                       expected=_describe_fn)
def has(actual: Iterable[Any], fn: Callable[[Any], bool]) -> bool:
    return any(fn(item) for item in _items(actual))


@COLLECTIONS.predicate("value has no record matching the condition", requires=("actual", "fn"),
                       expected=_describe_fn)
def has_not(actual: Iterable[Any], fn: Callable[[Any], bool]) -> bool:
    return not any(fn(item) for item in _items(actual))


@COLLECTIONS.predicate("value has the same records as the expected value",
                       requires=("actual", "expected"))
def equals(actual: Iterable[Any], expected: Iterable[Any]) -> bool:
    """Order-insensitive: same size and every record present on both sides."""
    items, others = _items(actual), _items(expected)
    if len(items) != len(others):
        return False
    return all(i in others for i in items) and all(o in items for o in others)


@COLLECTIONS.predicate("value does not have the same records as the expected value",
                       requires=("actual", "expected"))
def not_equals(actual: Iterable[Any], expected: Iterable[Any]) -> bool:
    return not equals(actual, expected)
