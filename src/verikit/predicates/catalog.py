"""Named predicate lookup tables.

A catalog maps a predicate name to a :class:`Predicate`: the evaluation
function, a default description and the arguments that must not be ``None``
for the predicate to have a chance of passing. Predicates whose null handling
is not a plain "fail on None" rule leave ``requires`` empty and handle ``None``
in their body.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Union

from verikit.core.errors import UnknownPredicateError
from verikit.formatting import render_value

# Names an argument to report as "expected", or computes it from the bound arguments.
ExpectedSpec = Union[str, Callable[[dict[str, Any]], Any], None]


def shows(value: Any) -> Callable[[dict[str, Any]], Any]:
    """Report a fixed *value* as the expected side of a message."""
    return lambda _arguments: value


class _Rendered(dict):
    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


@dataclass(frozen=True)
class Predicate:
    name: str
    fn: Callable[..., bool]
    description: str
    requires: tuple[str, ...] = ()
    expected: ExpectedSpec = "expected"
    diff: bool = False
    signature: inspect.Signature = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "signature", inspect.signature(self.fn))

    @property
    def parameters(self) -> list[str]:
        """Argument names after the actual value."""
        return list(self.signature.parameters)[1:]

    def bind(self, actual: Any, args: tuple = (), kwargs: dict | None = None) -> dict[str, Any]:
        try:
            bound = self.signature.bind(actual, *args, **(kwargs or {}))
        except TypeError as exc:
            raise TypeError(f"{self.name}{self.signature}: {exc}") from None
        bound.apply_defaults()
        return dict(bound.arguments)

    def expected_value(self, arguments: dict[str, Any]) -> Any:
        if self.expected is None:
            return None
        if callable(self.expected):
            return self.expected(arguments)
        return arguments.get(self.expected)

    def describe(self, arguments: dict[str, Any]) -> str:
        rendered = _Rendered({k: render_value(v) for k, v in arguments.items()})
        return self.description.format_map(rendered)

    def test(self, arguments: dict[str, Any]) -> bool:
        for name in self.requires:
            if arguments.get(name) is None:
                return False
        return bool(self.fn(**arguments))

    def evaluate(self, actual: Any, *args: Any, **kwargs: Any) -> bool:
        return self.test(self.bind(actual, args, kwargs))


class Catalog:
    """Lookup table of predicates for one value family.

    A catalog with a *parent* falls back to the parent's entries for names
    it does not define itself.
    """

    def __init__(self, family: str, parent: Catalog | None = None):
        self.family = family
        self.parent = parent
        self._entries: dict[str, Predicate] = {}

    def predicate(
        self,
        description: str,
        requires: tuple[str, ...] = ("actual",),
        expected: ExpectedSpec = "expected",
        diff: bool = False,
        name: str | None = None,
    ) -> Callable[[Callable[..., bool]], Callable[..., bool]]:
        """Decorator registering a function under its own name (or *name*)."""

        def decorator(fn: Callable[..., bool]) -> Callable[..., bool]:
            key = name or fn.__name__.rstrip("_")
            self.add(Predicate(key, fn, description, tuple(requires), expected, diff))
            return fn

        return decorator

    def add(self, predicate: Predicate) -> None:
        if predicate.name in self._entries:
            raise ValueError(f"Predicate '{predicate.name}' already registered in {self.family}")
        self._entries[predicate.name] = predicate

    def get(self, name: str) -> Predicate:
        entry = self.find(name)
        if entry is None:
            raise UnknownPredicateError(name, self.family)
        return entry

    def find(self, name: str) -> Predicate | None:
        if name in self._entries:
            return self._entries[name]
        if self.parent is not None:
            return self.parent.find(name)
        return None

    def names(self) -> list[str]:
        names = set(self._entries)
        if self.parent is not None:
            names.update(self.parent.names())
        return sorted(names)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    def __iter__(self) -> Iterator[Predicate]:
        for name in self.names():
            yield self.get(name)

    def __len__(self) -> int:
        return len(self.names())

    def __repr__(self) -> str:
        return f"Catalog({self.family!r}, {len(self)} predicates)"
