"""Verifier facade: binds a value source to a predicate catalog.

Every catalog entry is reachable as ``verify_<name>(...)`` (raises
:class:`VerificationError` on failure, returns the verifier for chaining) and
``wait_<name>(...)`` (polls and returns a bool).
"""

from __future__ import annotations

import functools
import os
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable, Sequence

from verikit.config import VerifySettings, WaitConfig
from verikit.core.errors import VerificationError
from verikit.core.source import fixed
from verikit.formatting import build_message, context_name, default_message, format_message
from verikit.predicates import BOOLEANS, COLLECTIONS, FILES, MAPS, NUMBERS, OBJECTS, STRINGS
from verikit.predicates.catalog import Catalog, Predicate
from verikit.runner.logging import VerificationLog
from verikit.waits import wait_until


@dataclass(frozen=True)
class PredicateInvocation:
    """One evaluated verify call."""

    operation: str
    actual: Any
    expected: Any
    passed: bool
    waited_s: float | None = None
    message: str = ""


class Verifier:
    """Checks the value produced by *source* against named predicates.

    With ``use_waiter`` the source is polled until the predicate holds or the
    wait timeout elapses; otherwise it is called exactly once per check.
    """

    __slots__ = ("_source", "_use_waiter", "_wait", "_settings", "_log")

    catalog: Catalog = OBJECTS

    def __init__(
        self,
        source: Callable[[], Any],
        use_waiter: bool = False,
        wait: WaitConfig | None = None,
        settings: VerifySettings | None = None,
        log: VerificationLog | None = None,
    ):
        if not callable(source):
            raise TypeError(f"source must be callable, got {type(source).__name__}")
        settings = settings or VerifySettings()
        object.__setattr__(self, "_source", source)
        object.__setattr__(self, "_use_waiter", bool(use_waiter))
        object.__setattr__(self, "_wait", wait or settings.wait)
        object.__setattr__(self, "_settings", settings)
        object.__setattr__(self, "_log", log)

    @classmethod
    def of(cls, value: Any, **kwargs: Any) -> Verifier:
        """Verifier around a fixed value."""
        return cls(fixed(value), **kwargs)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def use_waiter(self) -> bool:
        return self._use_waiter

    @property
    def wait_config(self) -> WaitConfig:
        return self._wait

    @property
    def settings(self) -> VerifySettings:
        return self._settings

    def waiting(self, timeout_s: float | None = None, poll_ms: int | None = None) -> Verifier:
        """Copy of this verifier in wait mode, optionally with other wait bounds."""
        wait = self._wait.model_copy(update=_wait_updates(timeout_s, poll_ms))
        return type(self)(self._source, True, wait, self._settings, self._log)

    # -- checks ------------------------------------------------------------

    def verify(
        self,
        name: str,
        *args: Any,
        context: Any = None,
        message: str | None = None,
        params: Sequence[Any] | None = None,
        **kwargs: Any,
    ) -> Verifier:
        """Evaluate predicate *name*; raise VerificationError if it does not hold."""
        predicate = self.catalog.get(name)
        args, kwargs = _materialize(args, kwargs)
        actual, passed, waited_s = self._evaluate(predicate, args, kwargs, self._use_waiter)
        arguments = predicate.bind(actual, args, kwargs)
        expected = predicate.expected_value(arguments)
        if message:
            text = format_message(message, params)
        else:
            text = default_message(predicate.describe(arguments), self._settings.message_prefix)
        full = build_message(
            text,
            expected,
            actual,
            passed,
            context=context,
            diff=predicate.diff and self._settings.print_diff,
            waited_s=waited_s,
        )
        invocation = PredicateInvocation(name, actual, expected, passed, waited_s, full)
        if self._log is not None:
            self._log.record(
                name, expected, actual, passed, full,
                context=context_name(context), waited_s=waited_s,
            )
        if not passed:
            raise VerificationError(full, invocation)
        return self

    def wait(
        self,
        name: str,
        *args: Any,
        timeout_s: float | None = None,
        poll_ms: int | None = None,
        **kwargs: Any,
    ) -> bool:
        """Poll until predicate *name* holds. Returns False on timeout instead of raising."""
        predicate = self.catalog.get(name)
        args, kwargs = _materialize(args, kwargs)
        wait = self._wait.model_copy(update=_wait_updates(timeout_s, poll_ms))
        _, passed, _ = self._evaluate(predicate, args, kwargs, True, wait)
        return passed

    def _evaluate(
        self,
        predicate: Predicate,
        args: tuple,
        kwargs: dict[str, Any],
        use_waiter: bool,
        wait: WaitConfig | None = None,
    ) -> tuple[Any, bool, float | None]:
        # bad arguments are a programming error; surface them before fetching
        predicate.bind(None, args, kwargs)

        def test(value: Any) -> bool:
            return predicate.test(predicate.bind(value, args, kwargs))

        if not use_waiter:
            value = self._source()
            return value, test(value), None
        wait = wait or self._wait
        result = wait_until(self._source, test, timeout_s=wait.timeout_s, poll_ms=wait.poll_ms)
        return result.value, result.satisfied, result.elapsed_s

    # -- dynamic verify_<name> / wait_<name> -------------------------------

    def __getattr__(self, attr: str) -> Any:
        if not attr.startswith("_"):
            for prefix, method in (("verify_", self.verify), ("wait_", self.wait)):
                if attr.startswith(prefix) and attr[len(prefix):] in self.catalog:
                    return functools.partial(method, attr[len(prefix):])
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {attr!r}")

    def __dir__(self) -> list[str]:
        names = set(super().__dir__())
        for name in self.catalog.names():
            names.update((f"verify_{name}", f"wait_{name}"))
        return sorted(names)

    def __repr__(self) -> str:
        mode = "wait" if self._use_waiter else "once"
        return f"{type(self).__name__}({self.catalog.family}, {mode})"


def _materialize(args: tuple, kwargs: dict[str, Any]) -> tuple[tuple, dict[str, Any]]:
    """Turn one-shot iterators into lists so every poll tick sees the same arguments."""

    def _once(value: Any) -> Any:
        return list(value) if isinstance(value, Iterator) else value

    return tuple(map(_once, args)), {k: _once(v) for k, v in kwargs.items()}


def _wait_updates(timeout_s: float | None, poll_ms: int | None) -> dict[str, Any]:
    updates: dict[str, Any] = {}
    if timeout_s is not None:
        updates["timeout_s"] = timeout_s
    if poll_ms is not None:
        updates["poll_ms"] = poll_ms
    return updates


class ObjectVerifier(Verifier):
    __slots__ = ()
    catalog = OBJECTS


class StringVerifier(Verifier):
    __slots__ = ()
    catalog = STRINGS


class NumberVerifier(Verifier):
    __slots__ = ()
    catalog = NUMBERS


class BoolVerifier(Verifier):
    __slots__ = ()
    catalog = BOOLEANS


class CollectionVerifier(Verifier):
    __slots__ = ()
    catalog = COLLECTIONS


class MapVerifier(Verifier):
    __slots__ = ()
    catalog = MAPS


class FileVerifier(Verifier):
    __slots__ = ()
    catalog = FILES


VERIFIERS: dict[str, type[Verifier]] = {
    "object": ObjectVerifier,
    "string": StringVerifier,
    "number": NumberVerifier,
    "bool": BoolVerifier,
    "collection": CollectionVerifier,
    "map": MapVerifier,
    "file": FileVerifier,
}


def family_of(value: Any) -> str:
    """Pick the catalog family matching the type of *value*."""
    if isinstance(value, str):
        return "string"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, Real):
        return "number"
    if isinstance(value, Mapping):
        return "map"
    if isinstance(value, os.PathLike):
        return "file"
    if isinstance(value, Iterable) and not isinstance(value, bytes):
        return "collection"
    return "object"


def verifier_for(value: Any, **kwargs: Any) -> Verifier:
    """Typed verifier around a fixed value, chosen by the value's type."""
    return VERIFIERS[family_of(value)].of(value, **kwargs)
