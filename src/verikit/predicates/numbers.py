"""Numeric predicates. A None value fails all of them."""

from __future__ import annotations

from numbers import Real

from verikit.predicates.catalog import Catalog
from verikit.predicates.objects import OBJECTS

NUMBERS = Catalog("number", parent=OBJECTS)


def _range(arguments: dict) -> list:
    return [arguments.get("lower"), arguments.get("upper")]


@NUMBERS.predicate("value is greater than the expected value", requires=("actual", "expected"))
def greater(actual: Real, expected: Real) -> bool:
    return actual > expected


@NUMBERS.predicate("value is greater than or equal to the expected value",
                   requires=("actual", "expected"))
def greater_or_equal(actual: Real, expected: Real) -> bool:
    return actual >= expected


@NUMBERS.predicate("value is less than the expected value", requires=("actual", "expected"))
def less(actual: Real, expected: Real) -> bool:
    return actual < expected


@NUMBERS.predicate("value is less than or equal to the expected value",
                   requires=("actual", "expected"))
def less_or_equal(actual: Real, expected: Real) -> bool:
    return actual <= expected


@NUMBERS.predicate("value is between {lower} and {upper} inclusive",
                   requires=("actual", "lower", "upper"), expected=_range)
def between_inclusive(actual: Real, lower: Real, upper: Real) -> bool:
    return lower <= actual <= upper


@NUMBERS.predicate("value is between {lower} and {upper} exclusive",
                   requires=("actual", "lower", "upper"), expected=_range)
def between_exclusive(actual: Real, lower: Real, upper: Real) -> bool:
    return lower < actual < upper


@NUMBERS.predicate("value is not between {lower} and {upper} inclusive",
                   requires=("actual", "lower", "upper"), expected=_range)
def not_between_inclusive(actual: Real, lower: Real, upper: Real) -> bool:
    return not lower <= actual <= upper


@NUMBERS.predicate("value is not between {lower} and {upper} exclusive",
                   requires=("actual", "lower", "upper"), expected=_range)
def not_between_exclusive(actual: Real, lower: Real, upper: Real) -> bool:
    return not lower < actual < upper


@NUMBERS.predicate("value equals the expected value within {precision}",
                   requires=("actual", "expected", "precision"))
def equals_p(actual: Real, expected: Real, precision: Real) -> bool:
    return abs(actual - expected) <= precision


@NUMBERS.predicate("value does not equal the expected value within {precision}",
                   requires=("actual", "expected", "precision"))
def not_equals_p(actual: Real, expected: Real, precision: Real) -> bool:
    return abs(actual - expected) > precision
