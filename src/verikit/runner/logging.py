"""Structured per-verification logging."""

from __future__ import annotations

import json
import pathlib
import sys
import time
from typing import Any, TextIO

from verikit.formatting import render_value


class VerificationLog:
    """Append-only JSON-lines log of verify calls.

    Failed records are always echoed to *stream* (stderr by default); passed
    records only when *echo_passed* is set; *echo* turns echoing off entirely.
    Without a *path* nothing is written to disk.
    """

    def __init__(
        self,
        path: str | pathlib.Path | None = None,
        echo_passed: bool = False,
        stream: TextIO | None = None,
        echo: bool = True,
    ):
        self._log_path = pathlib.Path(path) if path else None
        self.echo_passed = echo_passed
        self.echo = echo
        self._stream = stream
        self._fh = None

    @property
    def path(self) -> pathlib.Path | None:
        return self._log_path

    def open(self) -> VerificationLog:
        if self._log_path is not None and self._fh is None:
            self._log_path.parent.mkdir(parents=True, exist_ok=True)
            self._fh = open(self._log_path, "a", encoding="utf-8")
        return self

    def close(self) -> None:
        if self._fh:
            self._fh.close()
            self._fh = None

    def __enter__(self) -> VerificationLog:
        return self.open()

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def record(
        self,
        operation: str,
        expected: Any,
        actual: Any,
        passed: bool,
        message: str,
        context: str | None = None,
        waited_s: float | None = None,
    ) -> dict[str, Any]:
        entry = {
            "timestamp": time.time(),
            "context": context,
            "operation": operation,
            "expected": _jsonable(expected),
            "actual": _jsonable(actual),
            "passed": passed,
            "waited_s": waited_s,
            "message": message,
        }
        line = json.dumps(entry, ensure_ascii=False, default=str)
        if self._fh:
            self._fh.write(line + "\n")
            self._fh.flush()
        if self.echo and (not passed or self.echo_passed):
            print(message, file=self._stream or sys.stderr)
        return entry

    def read_last_n(self, n: int = 20) -> list[dict[str, Any]]:
        if self._log_path is None or not self._log_path.exists():
            return []
        lines = self._log_path.read_text(encoding="utf-8").strip().splitlines()
        return [json.loads(l) for l in lines[-n:]]


def _jsonable(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return render_value(value)
