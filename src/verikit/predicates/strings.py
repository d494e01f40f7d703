"""String predicates.

Null handling is decided per predicate. Most entries list the arguments that
must be present in ``requires``; entries with ``requires=()`` deal with
``None`` themselves because their rule is not a plain "fail on None".
"""

from __future__ import annotations

import re
from typing import Any, Iterable, Optional, Pattern, Union

from verikit.constants import BLANK_MARKER, EMPTY_MARKER
from verikit.predicates import _text
from verikit.predicates.catalog import Catalog, Predicate, shows
from verikit.predicates.objects import OBJECTS

STRINGS = Catalog("string", parent=OBJECTS)

_BOTH = ("actual", "expected")
_UNSET = object()


def _overloaded(middle: str):
    """Expected reporter for ``(..., middle, expected=_UNSET)`` signatures."""

    def _expected(arguments: dict[str, Any]) -> Any:
        expected = arguments.get("expected", _UNSET)
        return arguments.get(middle) if expected is _UNSET else expected

    return _expected


# -- equality --------------------------------------------------------------

@STRINGS.predicate("value equals the expected value ignoring case", requires=(), diff=True)
def equals_ignore_case(actual: Optional[str], expected: Optional[str]) -> bool:
    if actual is None or expected is None:
        return actual is expected
    return _text.equals_ignore_case(actual, expected)


@STRINGS.predicate("value does not equal the expected value ignoring case", requires=())
def not_equals_ignore_case(actual: Optional[str], expected: Optional[str]) -> bool:
    if actual is None or expected is None:
        return (actual is None) != (expected is None)
    return not _text.equals_ignore_case(actual, expected)


@STRINGS.predicate("value equals the expected value ignoring white spaces", requires=(), diff=True)
def equals_ignore_white_spaces(actual: Optional[str], expected: Optional[str]) -> bool:
    if actual is None or expected is None:
        return actual is expected
    return _text.delete_whitespace(actual) == _text.delete_whitespace(expected)


@STRINGS.predicate("value does not equal the expected value ignoring white spaces", requires=())
def not_equals_ignore_white_spaces(actual: Optional[str], expected: Optional[str]) -> bool:
    if actual is None or expected is None:
        return (actual is None) != (expected is None)
    return _text.delete_whitespace(actual) != _text.delete_whitespace(expected)


# -- set membership --------------------------------------------------------

@STRINGS.predicate("value equals one of the expected values ignoring case",
                   requires=("candidates",), expected="candidates")
def equals_any_ignore_case(actual: Optional[str], candidates: Iterable[Optional[str]]) -> bool:
    if actual is None:
        return any(c is None for c in candidates)
    return any(c is not None and _text.equals_ignore_case(actual, c) for c in candidates)


@STRINGS.predicate("value equals none of the expected values",
                   requires=("actual", "candidates"), expected="candidates")
def equals_none(actual: str, candidates: Iterable[Optional[str]]) -> bool:
    return all(actual != c for c in candidates)


@STRINGS.predicate("value equals none of the expected values ignoring case",
                   requires=("actual", "candidates"), expected="candidates")
def equals_none_ignore_case(actual: str, candidates: Iterable[Optional[str]]) -> bool:
    return not any(c is not None and _text.equals_ignore_case(actual, c) for c in candidates)


@STRINGS.predicate("value contains one of the expected values",
                   requires=("actual", "candidates"), expected="candidates")
def contains_any(actual: str, candidates: Iterable[Optional[str]]) -> bool:
    return any(c is not None and c in actual for c in candidates)


@STRINGS.predicate("value contains one of the expected values ignoring case",
                   requires=("actual", "candidates"), expected="candidates")
def contains_any_ignore_case(actual: str, candidates: Iterable[Optional[str]]) -> bool:
    return any(c is not None and _text.contains_ignore_case(actual, c) for c in candidates)


# -- anchoring -------------------------------------------------------------

@STRINGS.predicate("value starts with the expected value", requires=_BOTH)
def starts_with(actual: str, expected: str) -> bool:
    return actual.startswith(expected)


@STRINGS.predicate("value starts with the expected value ignoring case", requires=_BOTH)
def starts_with_ignore_case(actual: str, expected: str) -> bool:
    return _text.starts_with_ignore_case(actual, expected)


@STRINGS.predicate("value starts with one of the expected values",
                   requires=("actual", "candidates"), expected="candidates")
def starts_with_any(actual: str, candidates: Iterable[Optional[str]]) -> bool:
    return any(c is not None and actual.startswith(c) for c in candidates)


@STRINGS.predicate("value starts with none of the expected values",
                   requires=("actual", "candidates"), expected="candidates")
def starts_with_none(actual: str, candidates: Iterable[Optional[str]]) -> bool:
    return not any(c is not None and actual.startswith(c) for c in candidates)


@STRINGS.predicate("value does not start with the expected value", requires=_BOTH)
def not_starts_with(actual: str, expected: str) -> bool:
    return not actual.startswith(expected)


@STRINGS.predicate("value does not start with the expected value ignoring case", requires=_BOTH)
def not_starts_with_ignore_case(actual: str, expected: str) -> bool:
    return not _text.starts_with_ignore_case(actual, expected)


@STRINGS.predicate("value ends with the expected value", requires=_BOTH)
def ends_with(actual: str, expected: str) -> bool:
    return actual.endswith(expected)


@STRINGS.predicate("value ends with the expected value ignoring case", requires=_BOTH)
def ends_with_ignore_case(actual: str, expected: str) -> bool:
    return _text.ends_with_ignore_case(actual, expected)


@STRINGS.predicate("value ends with one of the expected values",
                   requires=("actual", "candidates"), expected="candidates")
def ends_with_any(actual: str, candidates: Iterable[Optional[str]]) -> bool:
    return any(c is not None and actual.endswith(c) for c in candidates)


@STRINGS.predicate("value ends with none of the expected values",
                   requires=("actual", "candidates"), expected="candidates")
def ends_with_none(actual: str, candidates: Iterable[Optional[str]]) -> bool:
    return not any(c is not None and actual.endswith(c) for c in candidates)


@STRINGS.predicate("value does not end with the expected value", requires=_BOTH)
def not_ends_with(actual: str, expected: str) -> bool:
    return not actual.endswith(expected)


@STRINGS.predicate("value does not end with the expected value ignoring case", requires=_BOTH)
def not_ends_with_ignore_case(actual: str, expected: str) -> bool:
    return not _text.ends_with_ignore_case(actual, expected)


# -- containment -----------------------------------------------------------

@STRINGS.predicate("value contains the expected value", requires=_BOTH)
def contains(actual: str, expected: str) -> bool:
    return expected in actual


@STRINGS.predicate("value contains the expected value ignoring case", requires=_BOTH)
def contains_ignore_case(actual: str, expected: str) -> bool:
    return _text.contains_ignore_case(actual, expected)


@STRINGS.predicate("value does not contain the expected value", requires=_BOTH)
def not_contains(actual: str, expected: str) -> bool:
    return expected not in actual


@STRINGS.predicate("value does not contain the expected value ignoring case", requires=_BOTH)
def not_contains_ignore_case(actual: str, expected: str) -> bool:
    return not _text.contains_ignore_case(actual, expected)


# -- character classes -----------------------------------------------------

@STRINGS.predicate("value is blank", requires=(), expected=shows(BLANK_MARKER))
def is_blank(actual: Optional[str]) -> bool:
    return _text.is_blank(actual)


@STRINGS.predicate("value is not blank", expected=shows("<Not Blank>"))
def is_not_blank(actual: str) -> bool:
    return not _text.is_blank(actual)


@STRINGS.predicate("value is empty", requires=(), expected=shows(EMPTY_MARKER))
def is_empty(actual: Optional[str]) -> bool:
    return _text.is_empty(actual)


@STRINGS.predicate("value is not empty", expected=shows("<Not Empty>"))
def is_not_empty(actual: str) -> bool:
    return not _text.is_empty(actual)


def _register_class(key: str, label: str, check, with_or_forms: bool = False) -> None:
    """Register ``is_<key>`` and ``is_not_<key>``, plus the empty/blank-or forms.

    Every form here fails on a None value.
    """
    title = "<" + key.replace("_", " ").title() + ">"

    def positive(actual: str) -> bool:
        return check(actual)

    def negative(actual: str) -> bool:
        return not check(actual)

    forms = [
        (f"is_{key}", positive, f"value contains only {label}", title),
        (f"is_not_{key}", negative, f"value does not contain only {label}", f"<Not {title[1:]}"),
    ]
    if with_or_forms:
        def empty_or(actual: str) -> bool:
            return actual == "" or check(actual)

        def empty_or_not(actual: str) -> bool:
            return actual == "" or not check(actual)

        def blank_or(actual: str) -> bool:
            return _text.is_blank(actual) or check(actual)

        def blank_or_not(actual: str) -> bool:
            return _text.is_blank(actual) or not check(actual)

        forms += [
            (f"is_empty_or_{key}", empty_or,
             f"value is empty or contains only {label}", title),
            (f"is_empty_or_not_{key}", empty_or_not,
             f"value is empty or does not contain only {label}", f"<Not {title[1:]}"),
            (f"is_blank_or_{key}", blank_or,
             f"value is blank or contains only {label}", title),
            (f"is_blank_or_not_{key}", blank_or_not,
             f"value is blank or does not contain only {label}", f"<Not {title[1:]}"),
        ]
    for name, fn, description, shown in forms:
        STRINGS.add(Predicate(name, fn, description, ("actual",), shows(shown)))


_register_class("alpha", "alpha characters", _text.is_alpha, with_or_forms=True)
_register_class("alpha_space", "alpha or space characters", _text.is_alpha_space)
_register_class("alphanumeric", "alpha-numeric characters", _text.is_alphanumeric,
                with_or_forms=True)
_register_class("alphanumeric_space", "alpha-numeric or space characters",
                _text.is_alphanumeric_space)
_register_class("numeric", "numeric characters", _text.is_numeric, with_or_forms=True)
_register_class("numeric_space", "numeric or space characters", _text.is_numeric_space)
_register_class("ascii_printable", "ascii printable characters", _text.is_ascii_printable)


def _register_length_bounded(key: str, label: str, check) -> None:
    """Register ``is_<key>_with_length`` and its empty/blank-or forms.

    The class check must hold and the length must lie in
    ``[min_length, max_length]``; an empty (or blank) value passes the
    ``_or_`` forms regardless of the bounds. None fails all of them.
    """

    def in_bounds(actual: str, min_length: int, max_length: int) -> bool:
        return check(actual) and min_length <= len(actual) <= max_length

    def bounded(actual: str, min_length: int, max_length: int) -> bool:
        return in_bounds(actual, min_length, max_length)

    def empty_or_bounded(actual: str, min_length: int, max_length: int) -> bool:
        return actual == "" or in_bounds(actual, min_length, max_length)

    def blank_or_bounded(actual: str, min_length: int, max_length: int) -> bool:
        return _text.is_blank(actual) or in_bounds(actual, min_length, max_length)

    title = "<" + key.title() + ">"

    def shown(arguments: dict[str, Any]) -> str:
        return f"{title} length [{arguments['min_length']}, {arguments['max_length']}]"

    requires = ("actual", "min_length", "max_length")
    bounds = "with length between {min_length} and {max_length}"
    for name, fn, description in (
        (f"is_{key}_with_length", bounded, f"value contains only {label} {bounds}"),
        (f"is_empty_or_{key}_with_length", empty_or_bounded,
         f"value is empty or contains only {label} {bounds}"),
        (f"is_blank_or_{key}_with_length", blank_or_bounded,
         f"value is blank or contains only {label} {bounds}"),
    ):
        STRINGS.add(Predicate(name, fn, description, requires, shown))


_register_length_bounded("alphanumeric", "alpha-numeric characters", _text.is_alphanumeric)
_register_length_bounded("numeric", "numeric characters", _text.is_numeric)


# -- ordering and length ---------------------------------------------------

@STRINGS.predicate("result of comparison with {other} is {expected}", requires=("expected",))
def compare(actual: Optional[str], other: Optional[str], expected: int) -> bool:
    return _text.compare(actual, other) == expected


@STRINGS.predicate("result of comparison with {other} ignoring case is {expected}",
                   requires=("expected",))
def compare_ignore_case(actual: Optional[str], other: Optional[str], expected: int) -> bool:
    return _text.compare_ignore_case(actual, other) == expected


@STRINGS.predicate("value length equals {expected}")
def length_equals(actual: str, expected: int) -> bool:
    return len(actual) == expected


@STRINGS.predicate("value length does not equal {expected}", requires=())
def length_not_equals(actual: Optional[str], expected: int) -> bool:
    # a None value has no length, so it never equals one
    return actual is None or len(actual) != expected


# -- positional extraction -------------------------------------------------

@STRINGS.predicate("left {length} characters of value equal the expected value",
                   requires=_BOTH, diff=True)
def left_value_equals(actual: str, length: int, expected: str) -> bool:
    return _text.left(actual, length) == expected


@STRINGS.predicate("left {length} characters of value do not equal the expected value",
                   requires=_BOTH)
def left_value_not_equals(actual: str, length: int, expected: str) -> bool:
    return _text.left(actual, length) != expected


@STRINGS.predicate("right {length} characters of value equal the expected value",
                   requires=_BOTH, diff=True)
def right_value_equals(actual: str, length: int, expected: str) -> bool:
    return _text.right(actual, length) == expected


@STRINGS.predicate("right {length} characters of value do not equal the expected value",
                   requires=_BOTH)
def right_value_not_equals(actual: str, length: int, expected: str) -> bool:
    return _text.right(actual, length) != expected


@STRINGS.predicate("{length} characters of value from position {position} equal the expected value",
                   requires=_BOTH, diff=True)
def mid_value_equals(actual: str, position: int, length: int, expected: str) -> bool:
    return _text.mid(actual, position, length) == expected


@STRINGS.predicate(
    "{length} characters of value from position {position} do not equal the expected value",
    requires=_BOTH)
def mid_value_not_equals(actual: str, position: int, length: int, expected: str) -> bool:
    return _text.mid(actual, position, length) != expected


def _substring_args(end: Any, expected: Any) -> tuple[Optional[int], Any]:
    if expected is _UNSET:
        return None, end
    return end, expected


@STRINGS.predicate("substring of value from {start} equals the expected value",
                   expected=_overloaded("end"))
def substring_equals(actual: str, start: int, end: Any, expected: Any = _UNSET) -> bool:
    """``substring_equals(start, expected)`` or ``substring_equals(start, end, expected)``."""
    end, expected = _substring_args(end, expected)
    return expected is not None and _text.substring(actual, start, end) == expected


@STRINGS.predicate("substring of value from {start} does not equal the expected value",
                   expected=_overloaded("end"))
def substring_not_equals(actual: str, start: int, end: Any, expected: Any = _UNSET) -> bool:
    end, expected = _substring_args(end, expected)
    return expected is not None and _text.substring(actual, start, end) != expected


@STRINGS.predicate("substring of value before {separator} equals the expected value",
                   requires=_BOTH, diff=True)
def substring_before_equals(actual: str, separator: Optional[str], expected: str) -> bool:
    return _text.substring_before(actual, separator) == expected


@STRINGS.predicate("substring of value before {separator} does not equal the expected value",
                   requires=_BOTH)
def substring_before_not_equals(actual: str, separator: Optional[str], expected: str) -> bool:
    return _text.substring_before(actual, separator) != expected


@STRINGS.predicate("substring of value before last {separator} equals the expected value",
                   requires=_BOTH, diff=True)
def substring_before_last_equals(actual: str, separator: Optional[str], expected: str) -> bool:
    return _text.substring_before_last(actual, separator) == expected


@STRINGS.predicate(
    "substring of value before last {separator} does not equal the expected value",
    requires=_BOTH)
def substring_before_last_not_equals(actual: str, separator: Optional[str], expected: str) -> bool:
    return _text.substring_before_last(actual, separator) != expected


@STRINGS.predicate("substring of value after {separator} equals the expected value",
                   requires=_BOTH, diff=True)
def substring_after_equals(actual: str, separator: Optional[str], expected: str) -> bool:
    return _text.substring_after(actual, separator) == expected


@STRINGS.predicate("substring of value after {separator} does not equal the expected value",
                   requires=_BOTH)
def substring_after_not_equals(actual: str, separator: Optional[str], expected: str) -> bool:
    return _text.substring_after(actual, separator) != expected


@STRINGS.predicate("substring of value after last {separator} equals the expected value",
                   requires=_BOTH, diff=True)
def substring_after_last_equals(actual: str, separator: Optional[str], expected: str) -> bool:
    return _text.substring_after_last(actual, separator) == expected


@STRINGS.predicate(
    "substring of value after last {separator} does not equal the expected value",
    requires=_BOTH)
def substring_after_last_not_equals(actual: str, separator: Optional[str], expected: str) -> bool:
    return _text.substring_after_last(actual, separator) != expected


@STRINGS.predicate("substring of value between {open_} and {close} equals the expected value",
                   requires=_BOTH)
def substring_between_equals(actual: str, open_: Optional[str], close: Optional[str],
                             expected: str) -> bool:
    return _text.substring_between(actual, open_, close) == expected


@STRINGS.predicate(
    "substring of value between {open_} and {close} does not equal the expected value",
    requires=_BOTH)
def substring_between_not_equals(actual: str, open_: Optional[str], close: Optional[str],
                                 expected: str) -> bool:
    return _text.substring_between(actual, open_, close) != expected


@STRINGS.predicate("substrings of value between {open_} and {close} equal the expected values",
                   requires=_BOTH)
def substrings_between_equals(actual: str, open_: Optional[str], close: Optional[str],
                              expected: Iterable[str]) -> bool:
    found = _text.substrings_between(actual, open_, close)
    return found is not None and found == list(expected)


@STRINGS.predicate(
    "substrings of value between {open_} and {close} do not equal the expected values",
    requires=_BOTH)
def substrings_between_not_equals(actual: str, open_: Optional[str], close: Optional[str],
                                  expected: Iterable[str]) -> bool:
    found = _text.substrings_between(actual, open_, close)
    return found is not None and found != list(expected)


@STRINGS.predicate("substrings of value between {open_} and {close} contain the expected value",
                   requires=_BOTH)
def substrings_between_contains(actual: str, open_: Optional[str], close: Optional[str],
                                expected: str) -> bool:
    found = _text.substrings_between(actual, open_, close)
    return found is not None and expected in found


@STRINGS.predicate(
    "substrings of value between {open_} and {close} do not contain the expected value",
    requires=_BOTH)
def substrings_between_not_contains(actual: str, open_: Optional[str], close: Optional[str],
                                    expected: str) -> bool:
    return expected not in (_text.substrings_between(actual, open_, close) or [])


# -- transform then compare ------------------------------------------------

@STRINGS.predicate("value after removing {remove} equals the expected value",
                   requires=_BOTH, diff=True)
def remove_equals(actual: str, remove: Optional[str], expected: str) -> bool:
    return _text.remove(actual, remove) == expected


@STRINGS.predicate("value after removing {remove} does not equal the expected value",
                   requires=_BOTH)
def remove_not_equals(actual: str, remove: Optional[str], expected: str) -> bool:
    return _text.remove(actual, remove) != expected


@STRINGS.predicate("value after removing {remove} ignoring case equals the expected value",
                   requires=_BOTH, diff=True)
def remove_ignore_case_equals(actual: str, remove: Optional[str], expected: str) -> bool:
    return _text.remove_ignore_case(actual, remove) == expected


@STRINGS.predicate(
    "value after removing {remove} ignoring case does not equal the expected value",
    requires=_BOTH)
def remove_ignore_case_not_equals(actual: str, remove: Optional[str], expected: str) -> bool:
    return _text.remove_ignore_case(actual, remove) != expected


@STRINGS.predicate("value after removing {remove} from start equals the expected value",
                   requires=_BOTH, diff=True)
def remove_start_equals(actual: str, remove: Optional[str], expected: str) -> bool:
    return _text.remove_start(actual, remove) == expected


@STRINGS.predicate("value after removing {remove} from start does not equal the expected value",
                   requires=_BOTH)
def remove_start_not_equals(actual: str, remove: Optional[str], expected: str) -> bool:
    return _text.remove_start(actual, remove) != expected


@STRINGS.predicate(
    "value after removing {remove} from start ignoring case equals the expected value",
    requires=_BOTH, diff=True)
def remove_start_ignore_case_equals(actual: str, remove: Optional[str], expected: str) -> bool:
    return _text.remove_start_ignore_case(actual, remove) == expected


@STRINGS.predicate(
    "value after removing {remove} from start ignoring case does not equal the expected value",
    requires=_BOTH)
def remove_start_ignore_case_not_equals(actual: str, remove: Optional[str], expected: str) -> bool:
    return _text.remove_start_ignore_case(actual, remove) != expected


@STRINGS.predicate("value after removing {remove} from end equals the expected value",
                   requires=_BOTH, diff=True)
def remove_end_equals(actual: str, remove: Optional[str], expected: str) -> bool:
    return _text.remove_end(actual, remove) == expected


@STRINGS.predicate("value after removing {remove} from end does not equal the expected value",
                   requires=_BOTH)
def remove_end_not_equals(actual: str, remove: Optional[str], expected: str) -> bool:
    return _text.remove_end(actual, remove) != expected


@STRINGS.predicate(
    "value after removing {remove} from end ignoring case equals the expected value",
    requires=_BOTH, diff=True)
def remove_end_ignore_case_equals(actual: str, remove: Optional[str], expected: str) -> bool:
    return _text.remove_end_ignore_case(actual, remove) == expected


@STRINGS.predicate(
    "value after removing {remove} from end ignoring case does not equal the expected value",
    requires=_BOTH)
def remove_end_ignore_case_not_equals(actual: str, remove: Optional[str], expected: str) -> bool:
    return _text.remove_end_ignore_case(actual, remove) != expected


@STRINGS.predicate(
    "value after replacing {search} with {replacement} equals the expected value",
    requires=_BOTH, diff=True)
def replace_equals(actual: str, search: Optional[str], replacement: Optional[str],
                   expected: str) -> bool:
    return _text.replace(actual, search, replacement) == expected


@STRINGS.predicate(
    "value after replacing {search} with {replacement} does not equal the expected value",
    requires=_BOTH)
def replace_not_equals(actual: str, search: Optional[str], replacement: Optional[str],
                       expected: str) -> bool:
    return _text.replace(actual, search, replacement) != expected


@STRINGS.predicate(
    "value after replacing {search} with {replacement} ignoring case equals the expected value",
    requires=_BOTH, diff=True)
def replace_ignore_case_equals(actual: str, search: Optional[str], replacement: Optional[str],
                               expected: str) -> bool:
    return _text.replace_ignore_case(actual, search, replacement) == expected


@STRINGS.predicate(
    "value after replacing {search} with {replacement} ignoring case "
    "does not equal the expected value",
    requires=_BOTH)
def replace_ignore_case_not_equals(actual: str, search: Optional[str],
                                   replacement: Optional[str], expected: str) -> bool:
    return _text.replace_ignore_case(actual, search, replacement) != expected


@STRINGS.predicate(
    "value after replacing first {search} with {replacement} equals the expected value",
    requires=_BOTH, diff=True)
def replace_once_equals(actual: str, search: Optional[str], replacement: Optional[str],
                        expected: str) -> bool:
    return _text.replace(actual, search, replacement, 1) == expected


@STRINGS.predicate(
    "value after replacing first {search} with {replacement} does not equal the expected value",
    requires=_BOTH)
def replace_once_not_equals(actual: str, search: Optional[str], replacement: Optional[str],
                            expected: str) -> bool:
    return _text.replace(actual, search, replacement, 1) != expected


@STRINGS.predicate(
    "value after replacing first {search} with {replacement} ignoring case "
    "equals the expected value",
    requires=_BOTH, diff=True)
def replace_once_ignore_case_equals(actual: str, search: Optional[str],
                                    replacement: Optional[str], expected: str) -> bool:
    return _text.replace_ignore_case(actual, search, replacement, 1) == expected


@STRINGS.predicate(
    "value after replacing first {search} with {replacement} ignoring case "
    "does not equal the expected value",
    requires=_BOTH)
def replace_once_ignore_case_not_equals(actual: str, search: Optional[str],
                                        replacement: Optional[str], expected: str) -> bool:
    return _text.replace_ignore_case(actual, search, replacement, 1) != expected


@STRINGS.predicate("reversed value equals the expected value", requires=_BOTH, diff=True)
def reverse_equals(actual: str, expected: str) -> bool:
    return _text.reverse(actual) == expected


@STRINGS.predicate("reversed value does not equal the expected value", requires=_BOTH)
def reverse_not_equals(actual: str, expected: str) -> bool:
    return _text.reverse(actual) != expected


@STRINGS.predicate("trimmed value equals the expected value", requires=_BOTH, diff=True)
def trimmed_value_equals(actual: str, expected: str) -> bool:
    return _text.trim(actual) == expected


@STRINGS.predicate("trimmed value does not equal the expected value", requires=_BOTH)
def trimmed_value_not_equals(actual: str, expected: str) -> bool:
    return _text.trim(actual) != expected


def _truncate_args(offset: int, width: Any, expected: Any) -> tuple[int, Optional[int], Any]:
    if expected is _UNSET:
        return offset, None, width
    return offset, width, expected


@STRINGS.predicate("truncated value equals the expected value", expected=_overloaded("width"))
def truncated_value_equals(actual: str, offset: int, width: Any, expected: Any = _UNSET) -> bool:
    """``truncated_value_equals(width, expected)`` or ``(offset, width, expected)``."""
    offset, width, expected = _truncate_args(offset, width, expected)
    return expected is not None and _text.truncate(actual, offset, width) == expected


@STRINGS.predicate("truncated value does not equal the expected value",
                   expected=_overloaded("width"))
def truncated_value_not_equals(actual: str, offset: int, width: Any,
                               expected: Any = _UNSET) -> bool:
    offset, width, expected = _truncate_args(offset, width, expected)
    return expected is not None and _text.truncate(actual, offset, width) != expected


@STRINGS.predicate("value stripped of {chars} equals the expected value",
                   requires=_BOTH, diff=True)
def striped_value(actual: str, chars: Optional[str], expected: str) -> bool:
    return _text.strip(actual, chars) == expected


@STRINGS.predicate("value stripped of {chars} does not equal the expected value",
                   requires=_BOTH)
def striped_value_not(actual: str, chars: Optional[str], expected: str) -> bool:
    return _text.strip(actual, chars) != expected


@STRINGS.predicate("value stripped of {chars} at start equals the expected value",
                   requires=_BOTH, diff=True)
def striped_start_value(actual: str, chars: Optional[str], expected: str) -> bool:
    return _text.strip_start(actual, chars) == expected


@STRINGS.predicate("value stripped of {chars} at start does not equal the expected value",
                   requires=_BOTH)
def striped_start_value_not(actual: str, chars: Optional[str], expected: str) -> bool:
    return _text.strip_start(actual, chars) != expected


@STRINGS.predicate("value stripped of {chars} at end equals the expected value",
                   requires=_BOTH, diff=True)
def striped_end_value(actual: str, chars: Optional[str], expected: str) -> bool:
    return _text.strip_end(actual, chars) == expected


@STRINGS.predicate("value stripped of {chars} at end does not equal the expected value",
                   requires=_BOTH)
def striped_end_value_not(actual: str, chars: Optional[str], expected: str) -> bool:
    return _text.strip_end(actual, chars) != expected


@STRINGS.predicate("value centered with {pad} to length {size} equals the expected value",
                   requires=_BOTH, diff=True)
def center_pad_equals(actual: str, size: int, pad: Optional[str], expected: str) -> bool:
    return _text.center(actual, size, pad) == expected


@STRINGS.predicate(
    "value centered with {pad} to length {size} does not equal the expected value",
    requires=_BOTH)
def center_pad_not_equals(actual: str, size: int, pad: Optional[str], expected: str) -> bool:
    return _text.center(actual, size, pad) != expected


@STRINGS.predicate("value left padded with {pad} to length {size} equals the expected value",
                   requires=_BOTH, diff=True)
def left_pad_equals(actual: str, size: int, pad: Optional[str], expected: str) -> bool:
    return _text.left_pad(actual, size, pad) == expected


@STRINGS.predicate(
    "value left padded with {pad} to length {size} does not equal the expected value",
    requires=_BOTH)
def left_pad_not_equals(actual: str, size: int, pad: Optional[str], expected: str) -> bool:
    return _text.left_pad(actual, size, pad) != expected


@STRINGS.predicate("value right padded with {pad} to length {size} equals the expected value",
                   requires=_BOTH, diff=True)
def right_pad_equals(actual: str, size: int, pad: Optional[str], expected: str) -> bool:
    return _text.right_pad(actual, size, pad) == expected


@STRINGS.predicate(
    "value right padded with {pad} to length {size} does not equal the expected value",
    requires=_BOTH)
def right_pad_not_equals(actual: str, size: int, pad: Optional[str], expected: str) -> bool:
    return _text.right_pad(actual, size, pad) != expected


# -- patterns --------------------------------------------------------------

PatternLike = Union[str, Pattern[str]]


def _fullmatch(pattern: PatternLike, text: str) -> bool:
    if isinstance(pattern, re.Pattern):
        return pattern.fullmatch(text) is not None
    return re.fullmatch(pattern, text) is not None


@STRINGS.predicate("value matches the expected pattern", requires=("actual", "pattern"),
                   expected="pattern")
def matches(actual: str, pattern: PatternLike) -> bool:
    return _fullmatch(pattern, actual)


@STRINGS.predicate("value does not match the expected pattern", requires=("actual", "pattern"),
                   expected="pattern")
def not_matches(actual: str, pattern: PatternLike) -> bool:
    return not _fullmatch(pattern, actual)


@STRINGS.predicate("value matches one of the expected patterns",
                   requires=("actual", "patterns"), expected="patterns")
def match_any(actual: str, patterns: Iterable[Optional[PatternLike]]) -> bool:
    return any(p is not None and _fullmatch(p, actual) for p in patterns)


@STRINGS.predicate("value matches none of the expected patterns",
                   requires=("actual", "patterns"), expected="patterns")
def match_none(actual: str, patterns: Iterable[Optional[PatternLike]]) -> bool:
    return not any(p is not None and _fullmatch(p, actual) for p in patterns)


# -- counting --------------------------------------------------------------

@STRINGS.predicate("value contains {substring} exactly {expected} times", requires=_BOTH)
def number_of_matches_equals(actual: str, substring: Optional[str], expected: int) -> bool:
    return _text.count_matches(actual, substring) == expected


@STRINGS.predicate("value does not contain {substring} exactly {expected} times",
                   requires=_BOTH)
def number_of_matches_not_equals(actual: str, substring: Optional[str], expected: int) -> bool:
    return _text.count_matches(actual, substring) != expected
