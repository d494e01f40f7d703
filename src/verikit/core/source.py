"""Value sources: zero-argument accessors producing the value under test."""

from __future__ import annotations

import shlex
import subprocess
from typing import Any, Callable, Sequence, TypeVar

T = TypeVar("T")

ValueSource = Callable[[], T]


def fixed(value: T) -> ValueSource[T]:
    """Source that always returns *value*."""

    def _source() -> T:
        return value

    return _source


def sequence(*values: Any) -> ValueSource[Any]:
    """Source that returns *values* one per call, then keeps returning the last one."""
    if not values:
        raise ValueError("sequence() needs at least one value")
    state = {"i": 0}

    def _source() -> Any:
        i = min(state["i"], len(values) - 1)
        state["i"] += 1
        return values[i]

    return _source


def command_output(
    command: str | Sequence[str],
    timeout_s: float | None = None,
    strip: bool = True,
) -> ValueSource[str]:
    """Source that runs *command* and returns its stdout.

    The exit status is not checked; a failing command simply yields whatever
    it printed. A string command is split with shell rules, not run in a shell.
    """
    argv = shlex.split(command) if isinstance(command, str) else list(command)

    def _source() -> str:
        proc = subprocess.run(
            argv, capture_output=True, text=True, timeout=timeout_s, check=False
        )
        out = proc.stdout
        return out.strip() if strip else out

    return _source
