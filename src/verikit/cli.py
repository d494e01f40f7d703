"""CLI entry point: click-based commands."""

from __future__ import annotations

import json
import pathlib
import sys
import typing
from collections.abc import Iterable, Mapping
from numbers import Real
from typing import Any, Optional, Tuple

import click
import yaml

from verikit import __version__
from verikit.constants import NULL_MARKER
from verikit.core.errors import (
    EXIT_OK,
    EXIT_USAGE,
    EXIT_VERIFICATION_FAILED,
    VerificationError,
    VerikitError,
)
from verikit.predicates import CATALOGS
from verikit.predicates.catalog import Predicate


@click.group()
@click.version_option(version=__version__, prog_name="verikit")
def main() -> None:
    """verikit: named predicate checks with bounded waiting."""


def _fail(exc: VerikitError) -> None:
    click.echo(f"Error: {exc}", err=True)
    sys.exit(exc.exit_code)


def _settings():
    from verikit.config import load_settings

    try:
        return load_settings()
    except VerikitError as exc:
        _fail(exc)


# ── argument coercion ─────────────────────────────────────────────

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def _parse_bool(raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def _parse_number(raw: str) -> Real:
    try:
        return int(raw)
    except ValueError:
        return float(raw)


def coerce(raw: str, hint: Any) -> Any:
    """Convert a command-line string to the type a predicate argument expects.

    ``<NULL>`` always means None. Lists and untyped arguments are read as YAML.
    """
    if raw == NULL_MARKER:
        return None
    if typing.get_origin(hint) is typing.Union:
        members = [a for a in typing.get_args(hint) if a is not type(None)]
        if str in members:
            return raw
        hint = members[0] if members else Any
    if hint is str:
        return raw
    if hint is bool:
        return _parse_bool(raw)
    if hint is int:
        return int(raw)
    if hint in (float, Real):
        return _parse_number(raw)
    if typing.get_origin(hint) in (Iterable, list, tuple):
        value = yaml.safe_load(raw)
        return value if isinstance(value, list) else [value]
    return yaml.safe_load(raw)


def _argument_hints(predicate: Predicate) -> list[Any]:
    hints = typing.get_type_hints(predicate.fn)
    return [hints.get(name, Any) for name in predicate.parameters]


def _coerce_args(predicate: Predicate, raw_args: Tuple[str, ...]) -> list[Any]:
    hints = _argument_hints(predicate)
    values = []
    for i, raw in enumerate(raw_args):
        hint = hints[i] if i < len(hints) else Any
        try:
            values.append(coerce(raw, hint))
        except ValueError as exc:
            raise click.BadParameter(str(exc), param_hint=f"argument {i + 1}") from exc
    return values


_VALUE_HINTS = {
    "string": str,
    "number": Real,
    "bool": bool,
    "collection": Iterable[Any],
    "map": Mapping[Any, Any],
    "file": str,
    "object": Any,
}


# ── check ─────────────────────────────────────────────────────────

@main.command()
@click.argument("value")
@click.argument("predicate")
@click.argument("args", nargs=-1)
@click.option("--family", type=click.Choice(sorted(CATALOGS)), default="string",
              show_default=True, help="Predicate family to look PREDICATE up in.")
@click.option("--command", "is_command", is_flag=True,
              help="Treat VALUE as a command; its stdout is the value checked.")
@click.option("--wait/--no-wait", default=False, help="Poll until the predicate holds.")
@click.option("--timeout", "timeout_s", type=float, default=None, help="Wait timeout in seconds.")
@click.option("--poll-ms", type=int, default=None, help="Wait poll interval in milliseconds.")
@click.option("--message", default=None, help="Message template used instead of the default.")
def check(
    value: str,
    predicate: str,
    args: Tuple[str, ...],
    family: str,
    is_command: bool,
    wait: bool,
    timeout_s: Optional[float],
    poll_ms: Optional[int],
    message: Optional[str],
) -> None:
    """Check VALUE against PREDICATE with ARGS.

    Use <NULL> for a None argument. Exits 0 when the predicate holds and 1
    when it does not.
    """
    from verikit.core.source import command_output, fixed
    from verikit.runner.logging import VerificationLog
    from verikit.verifier import VERIFIERS

    settings = _settings()
    entry = CATALOGS[family].find(predicate)
    if entry is None:
        click.echo(f"Unknown {family} predicate '{predicate}'", err=True)
        click.echo("  Hint: run `verikit predicates` to list the available names.", err=True)
        sys.exit(EXIT_USAGE)

    coerced = _coerce_args(entry, args)
    if is_command:
        source = command_output(value)
    else:
        try:
            source = fixed(coerce(value, _VALUE_HINTS[family]))
        except ValueError as exc:
            raise click.BadParameter(str(exc), param_hint="VALUE") from exc

    with VerificationLog(settings.log_path, echo=False) as log:
        verifier = VERIFIERS[family](source, settings=settings, log=log)
        if wait:
            verifier = verifier.waiting(timeout_s=timeout_s, poll_ms=poll_ms)
        try:
            verifier.verify(predicate, *coerced, context="cli", message=message)
        except VerificationError as exc:
            click.echo(str(exc), err=True)
            sys.exit(EXIT_VERIFICATION_FAILED)
        except TypeError as exc:
            click.echo(f"Invalid arguments for '{predicate}': {exc}", err=True)
            sys.exit(EXIT_USAGE)
    click.echo("PASSED")
    sys.exit(EXIT_OK)


# ── run ───────────────────────────────────────────────────────────

@main.command()
@click.argument("file_path", metavar="FILE")
@click.option("--log", "log_path", default=None, help="JSON-lines log file (overrides settings).")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON.")
def run(file_path: str, log_path: Optional[str], as_json: bool) -> None:
    """Run a YAML check file. Exits 0 if every check passes, 1 on the first failure."""
    from verikit.runner.logging import VerificationLog
    from verikit.testing.checks import CheckFile, run_checks

    settings = _settings()
    try:
        check_file = CheckFile.from_file(pathlib.Path(file_path))
        with VerificationLog(log_path or settings.log_path, echo=False) as log:
            report = run_checks(check_file, log=log, settings=settings)
    except VerikitError as exc:
        _fail(exc)

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2, ensure_ascii=False, default=str))
    elif report.passed:
        click.echo(f"Running checks '{check_file.id}'...")
        click.echo(f"PASSED ({report.checks_run} checks)")
    else:
        click.echo(f"Running checks '{check_file.id}'...")
        click.echo(f"FAILED at check {report.checks_run}")
        for f in report.failures:
            click.echo(f"  - {f['check']}: {f['message']}")
    sys.exit(EXIT_OK if report.passed else EXIT_VERIFICATION_FAILED)


# ── predicates ────────────────────────────────────────────────────

@main.command()
@click.option("--family", type=click.Choice(sorted(CATALOGS)), default=None,
              help="Only list this family.")
def predicates(family: Optional[str]) -> None:
    """List the available predicates and their descriptions."""
    families = [family] if family else sorted(CATALOGS)
    for name in families:
        catalog = CATALOGS[name]
        click.echo(f"{name}:")
        for entry in catalog:
            params = ", ".join(entry.parameters)
            click.echo(f"  {entry.name}({params})  {entry.description}")


# ── init ──────────────────────────────────────────────────────────

@main.command()
@click.option("--path", default=None, help="Settings file to create (default ./verikit.json).")
def init(path: Optional[str]) -> None:
    """Write a default settings file."""
    from verikit.config import SettingsStore

    store = SettingsStore(path)
    if store.ensure_default():
        click.echo(f"Created {store.path}")
    else:
        click.echo(f"{store.path} already exists")
