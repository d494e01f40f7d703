"""String helpers used by the string predicates.

All of these expect non-None text unless stated otherwise; the predicates
apply their null rules before calling in.
"""

from __future__ import annotations

import re
from typing import Optional

_WHITESPACE = re.compile(r"\s+")


# -- case handling ---------------------------------------------------------

def _fold(ch: str) -> str:
    upper = ch.upper()
    if len(upper) != 1:
        upper = ch
    lower = upper.lower()
    return lower if len(lower) == 1 else upper


def chars_equal_ignore_case(a: str, b: str) -> bool:
    return a == b or a.upper() == b.upper() or a.lower() == b.lower()


def equals_ignore_case(a: str, b: str) -> bool:
    """Character-wise case-insensitive equality; lengths must match."""
    if len(a) != len(b):
        return False
    return all(chars_equal_ignore_case(x, y) for x, y in zip(a, b))


def region_matches_ignore_case(text: str, offset: int, other: str) -> bool:
    if offset < 0 or offset + len(other) > len(text):
        return False
    return equals_ignore_case(text[offset:offset + len(other)], other)


def index_of_ignore_case(text: str, search: str) -> int:
    for i in range(len(text) - len(search) + 1):
        if region_matches_ignore_case(text, i, search):
            return i
    return -1


def contains_ignore_case(text: str, search: str) -> bool:
    return index_of_ignore_case(text, search) >= 0


def starts_with_ignore_case(text: str, prefix: str) -> bool:
    return region_matches_ignore_case(text, 0, prefix)


def ends_with_ignore_case(text: str, suffix: str) -> bool:
    return region_matches_ignore_case(text, len(text) - len(suffix), suffix)


# -- ordering --------------------------------------------------------------

def _compare_chars(a: str, b: str) -> int:
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    return len(a) - len(b)


def compare(a: Optional[str], b: Optional[str]) -> int:
    """Lexicographic difference; None sorts before any string."""
    if a is None or b is None:
        if a is b:
            return 0
        return -1 if a is None else 1
    return _compare_chars(a, b)


def compare_ignore_case(a: Optional[str], b: Optional[str]) -> int:
    if a is None or b is None:
        return compare(a, b)
    return _compare_chars("".join(map(_fold, a)), "".join(map(_fold, b)))


# -- character classes -----------------------------------------------------

def is_empty(s: Optional[str]) -> bool:
    return not s


def is_blank(s: Optional[str]) -> bool:
    return s is None or s.strip() == ""


def is_alpha(s: str) -> bool:
    return s.isalpha()


def is_alpha_space(s: str) -> bool:
    return all(c == " " or c.isalpha() for c in s)


def _is_letter_or_digit(c: str) -> bool:
    return c.isalpha() or c.isdecimal()


def is_alphanumeric(s: str) -> bool:
    return s != "" and all(map(_is_letter_or_digit, s))


def is_alphanumeric_space(s: str) -> bool:
    return all(c == " " or _is_letter_or_digit(c) for c in s)


def is_numeric(s: str) -> bool:
    return s.isdecimal()


def is_numeric_space(s: str) -> bool:
    return all(c == " " or c.isdecimal() for c in s)


def is_ascii_printable(s: str) -> bool:
    return all(32 <= ord(c) < 127 for c in s)


def delete_whitespace(s: str) -> str:
    return _WHITESPACE.sub("", s)


# -- positional extraction -------------------------------------------------

def left(s: str, length: int) -> str:
    if length < 0:
        return ""
    return s[:length]


def right(s: str, length: int) -> str:
    if length < 0:
        return ""
    if length >= len(s):
        return s
    return s[len(s) - length:]


def mid(s: str, position: int, length: int) -> str:
    if length < 0 or position > len(s):
        return ""
    position = max(position, 0)
    return s[position:position + length]


def substring(s: str, start: int, end: Optional[int] = None) -> str:
    return s[start:end]


def substring_before(s: str, separator: Optional[str]) -> str:
    if separator is None:
        return s
    if separator == "":
        return ""
    index = s.find(separator)
    return s if index < 0 else s[:index]


def substring_after(s: str, separator: Optional[str]) -> str:
    if separator is None:
        return ""
    if separator == "":
        return s
    index = s.find(separator)
    return "" if index < 0 else s[index + len(separator):]


def substring_before_last(s: str, separator: Optional[str]) -> str:
    if not separator:
        return s
    index = s.rfind(separator)
    return s if index < 0 else s[:index]


def substring_after_last(s: str, separator: Optional[str]) -> str:
    if not separator:
        return ""
    index = s.rfind(separator)
    if index < 0 or index == len(s) - len(separator):
        return ""
    return s[index + len(separator):]


def substring_between(
    s: Optional[str], open_: Optional[str], close: Optional[str]
) -> Optional[str]:
    if s is None or open_ is None or close is None:
        return None
    start = s.find(open_)
    if start < 0:
        return None
    end = s.find(close, start + len(open_))
    if end < 0:
        return None
    return s[start + len(open_):end]


def substrings_between(
    s: Optional[str], open_: Optional[str], close: Optional[str]
) -> Optional[list[str]]:
    """Every substring delimited by *open_* and *close*, or None when none is found."""
    if s is None or not open_ or not close:
        return None
    found: list[str] = []
    pos = 0
    while pos < len(s) - len(close):
        start = s.find(open_, pos)
        if start < 0:
            break
        start += len(open_)
        end = s.find(close, start)
        if end < 0:
            break
        found.append(s[start:end])
        pos = end + len(close)
    return found or None


# -- transforms ------------------------------------------------------------

def remove(s: str, target: Optional[str]) -> str:
    if not target:
        return s
    return s.replace(target, "")


def remove_ignore_case(s: str, target: Optional[str]) -> str:
    return replace_ignore_case(s, target, "")


def remove_start(s: str, target: Optional[str]) -> str:
    if target and s.startswith(target):
        return s[len(target):]
    return s


def remove_start_ignore_case(s: str, target: Optional[str]) -> str:
    if target and starts_with_ignore_case(s, target):
        return s[len(target):]
    return s


def remove_end(s: str, target: Optional[str]) -> str:
    if target and s.endswith(target):
        return s[:len(s) - len(target)]
    return s


def remove_end_ignore_case(s: str, target: Optional[str]) -> str:
    if target and ends_with_ignore_case(s, target):
        return s[:len(s) - len(target)]
    return s


def replace(s: str, search: Optional[str], replacement: Optional[str], count: int = -1) -> str:
    if not search or replacement is None:
        return s
    return s.replace(search, replacement, count)


def replace_ignore_case(
    s: str, search: Optional[str], replacement: Optional[str], count: int = -1
) -> str:
    if not search or replacement is None:
        return s
    pattern = re.compile(re.escape(search), re.IGNORECASE)
    return pattern.sub(lambda _m: replacement, s, count=max(count, 0))


def reverse(s: str) -> str:
    return s[::-1]


def trim(s: str) -> str:
    """Strip control characters and spaces (code point <= 32) from both ends."""
    start, end = 0, len(s)
    while start < end and ord(s[start]) <= 32:
        start += 1
    while end > start and ord(s[end - 1]) <= 32:
        end -= 1
    return s[start:end]


def strip(s: str, chars: Optional[str]) -> str:
    return s.strip(chars) if chars is None or chars else s


def strip_start(s: str, chars: Optional[str]) -> str:
    return s.lstrip(chars) if chars is None or chars else s


def strip_end(s: str, chars: Optional[str]) -> str:
    return s.rstrip(chars) if chars is None or chars else s


def truncate(s: str, offset: int, width: Optional[int] = None) -> str:
    """``truncate(s, w)`` keeps the first *w* characters; ``truncate(s, off, w)`` starts at *off*."""
    if width is None:
        offset, width = 0, offset
    offset = max(offset, 0)
    width = max(width, 0)
    return s[offset:offset + width]


def _padding(pad: str, count: int) -> str:
    if count <= 0:
        return ""
    repeats = count // len(pad) + 1
    return (pad * repeats)[:count]


def left_pad(s: str, size: int, pad: Optional[str] = " ") -> str:
    if pad is None:
        return s
    pad = pad or " "
    return _padding(pad, size - len(s)) + s


def right_pad(s: str, size: int, pad: Optional[str] = " ") -> str:
    if pad is None:
        return s
    pad = pad or " "
    return s + _padding(pad, size - len(s))


def center(s: str, size: int, pad: Optional[str] = " ") -> str:
    if pad is None or size <= 0:
        return s
    pad = pad or " "
    pads = size - len(s)
    if pads <= 0:
        return s
    s = left_pad(s, len(s) + pads // 2, pad)
    return right_pad(s, size, pad)


def count_matches(s: str, sub: Optional[str]) -> int:
    if not sub:
        return 0
    return s.count(sub)
