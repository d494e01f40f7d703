"""Bounded polling of a value source against a predicate."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from verikit.constants import DEFAULT_POLL_MS, DEFAULT_WAIT_S

T = TypeVar("T")


@dataclass(frozen=True)
class WaitResult(Generic[T]):
    """Terminal state of one polling run."""

    value: T | None
    satisfied: bool
    ticks: int
    elapsed_s: float

    @property
    def timed_out(self) -> bool:
        return not self.satisfied


def wait_until(
    source: Callable[[], T],
    predicate: Callable[[T], bool],
    timeout_s: float = DEFAULT_WAIT_S,
    poll_ms: int = DEFAULT_POLL_MS,
) -> WaitResult[T]:
    """Poll *source* until *predicate* holds or *timeout_s* elapses.

    Each tick fetches a value and tests it. Another tick is only started if it
    can begin before the deadline, so ``timeout_s=0`` evaluates exactly once
    without sleeping. The last observed value is returned in both outcomes.

    An exception raised by a tick does not stop polling; it is re-raised if
    the run ends unsatisfied and the final tick was the one that raised.
    """
    poll_s = max(poll_ms, 0) / 1000.0
    start = time.monotonic()
    deadline = start + max(timeout_s, 0)
    ticks = 0
    value: T | None = None
    last_exc: BaseException | None = None
    while True:
        ticks += 1
        try:
            value = source()
            ok = bool(predicate(value))
            last_exc = None
        except Exception as exc:
            ok = False
            last_exc = exc
        if ok:
            return WaitResult(value, True, ticks, time.monotonic() - start)
        if timeout_s <= 0 or time.monotonic() + poll_s > deadline:
            break
        time.sleep(poll_s)

    if last_exc is not None:
        raise last_exc
    return WaitResult(value, False, ticks, time.monotonic() - start)


def wait_for(
    source: Callable[[], Any],
    predicate: Callable[[Any], bool],
    timeout_s: float = DEFAULT_WAIT_S,
    poll_ms: int = DEFAULT_POLL_MS,
) -> bool:
    """Query form of :func:`wait_until`: True if the predicate held in time."""
    return wait_until(source, predicate, timeout_s=timeout_s, poll_ms=poll_ms).satisfied
