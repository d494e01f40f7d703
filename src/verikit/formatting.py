"""Failure/pass message building. Nothing in here raises on bad input."""

from __future__ import annotations

import difflib
import re
from typing import Any, Sequence

from verikit.constants import (
    FAIL_PREFIX,
    MAX_DIFF_LENGTH,
    MISSING_MARKER,
    NULL_MARKER,
    PASS_PREFIX,
)

_PLACEHOLDER = re.compile(r"%%|%[sd]|\{\{|\}\}|\{(\d*)\}")


def render_value(value: Any) -> str:
    """Render an actual/expected value for a message."""
    if value is None:
        return NULL_MARKER
    if isinstance(value, str):
        return value
    if isinstance(value, re.Pattern):
        return value.pattern
    if isinstance(value, (list, tuple, set, frozenset)):
        return "[" + ", ".join(render_value(v) for v in value) + "]"
    try:
        return str(value)
    except Exception:
        return f"<{type(value).__name__}>"


def format_message(template: str | None, params: Sequence[Any] | None = None) -> str:
    """Substitute positional placeholders in *template*.

    ``%s``/``%d`` and ``{}`` consume parameters in order, ``{N}`` picks by index.
    ``%%``, ``{{`` and ``}}`` are literals. A placeholder without a matching
    parameter renders as ``<missing>``; surplus parameters are ignored.
    """
    if template is None:
        return ""
    values = list(params or ())
    counter = {"next": 0}

    def _param(index: int) -> str:
        if 0 <= index < len(values):
            return render_value(values[index])
        return MISSING_MARKER

    def _sub(match: re.Match) -> str:
        token = match.group(0)
        if token == "%%":
            return "%"
        if token == "{{":
            return "{"
        if token == "}}":
            return "}"
        if match.group(1):
            return _param(int(match.group(1)))
        index = counter["next"]
        counter["next"] += 1
        return _param(index)

    return _PLACEHOLDER.sub(_sub, template)


def default_message(description: str, prefix: str = "") -> str:
    if not prefix or not prefix.strip():
        return f"Verify {description}."
    return f"Verify {prefix.strip()} {description}."


def context_name(context: Any) -> str | None:
    """Name a calling test context for message attribution."""
    if context is None:
        return None
    if isinstance(context, str):
        return context or None
    for attr in ("nodeid", "__qualname__", "__name__", "name"):
        name = getattr(context, attr, None)
        if isinstance(name, str) and name:
            return name
    return type(context).__name__


def inline_diff(expected: str, actual: str) -> str:
    """Mark deletions from *expected* as ``[-x-]`` and insertions as ``{+y+}``."""
    out: list[str] = []
    matcher = difflib.SequenceMatcher(None, expected, actual, autojunk=False)
    for op, e1, e2, a1, a2 in matcher.get_opcodes():
        if op == "equal":
            out.append(expected[e1:e2])
            continue
        if op in ("delete", "replace"):
            out.append(f"[-{expected[e1:e2]}-]")
        if op in ("insert", "replace"):
            out.append(f"{{+{actual[a1:a2]}+}}")
    return "".join(out)


def build_message(
    message: str,
    expected: Any,
    actual: Any,
    passed: bool,
    context: Any = None,
    diff: bool = False,
    waited_s: float | None = None,
) -> str:
    """Compose the final PASS/FAIL line handed to the log and the failure."""
    exp = render_value(expected)
    act = render_value(actual)
    parts = [PASS_PREFIX if passed else FAIL_PREFIX]
    name = context_name(context)
    if name:
        parts.append(f"[{name}] ")
    parts.append(message.strip())
    if (
        not passed
        and diff
        and isinstance(expected, str)
        and isinstance(actual, str)
        and max(len(expected), len(actual)) <= MAX_DIFF_LENGTH
    ):
        parts.append(f"\nDiff: '{inline_diff(exp, act)}',\nExp: '{exp}',\nAct: '{act}'")
    else:
        parts.append(f" Exp: '{exp}', Act: '{act}'")
    if waited_s is not None and not passed:
        parts.append(f" (waited {waited_s:.2f}s)")
    return "".join(parts)
