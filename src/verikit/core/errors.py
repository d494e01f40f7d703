"""Custom exception hierarchy and CLI exit codes."""

from __future__ import annotations

from typing import Any

# Exit codes
EXIT_OK = 0
EXIT_VERIFICATION_FAILED = 1
EXIT_USAGE = 2
EXIT_CHECK_FILE_ERROR = 3
EXIT_SETTINGS_ERROR = 4

# Human-readable descriptions keyed by exit code
_EXIT_DESCRIPTIONS = {
    EXIT_OK: "Success",
    EXIT_VERIFICATION_FAILED: "Verification failed",
    EXIT_USAGE: "Invalid usage (unknown predicate or bad arguments)",
    EXIT_CHECK_FILE_ERROR: "Check file could not be loaded",
    EXIT_SETTINGS_ERROR: "Settings file or environment override is invalid",
}


def exit_description(code: int) -> str:
    """Return a human-readable description for *code*."""
    return _EXIT_DESCRIPTIONS.get(code, f"Unknown error (code {code})")


class VerikitError(Exception):
    """Base exception; carries an exit code."""

    exit_code = EXIT_VERIFICATION_FAILED

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class VerificationError(VerikitError, AssertionError):
    """A predicate was not satisfied, by mismatch or by wait timeout.

    This is the only failure kind raised by verify calls. The message is the
    public contract; ``invocation`` holds the evaluated operation for callers
    that want the structured form.
    """

    def __init__(self, message: str, invocation: Any = None):
        super().__init__(message, EXIT_VERIFICATION_FAILED)
        self.invocation = invocation


class UnknownPredicateError(VerikitError, LookupError):
    """No predicate with the requested name exists in the catalog."""

    def __init__(self, name: str, family: str = ""):
        family_part = f" in the '{family}' catalog" if family else ""
        hint = "  Hint: run `verikit predicates` to list the available names."
        super().__init__(f"Unknown predicate '{name}'{family_part}.\n{hint}", EXIT_USAGE)
        self.name = name
        self.family = family


class CheckFileError(VerikitError):
    """Check file definition is malformed."""

    def __init__(self, message: str):
        super().__init__(message, EXIT_CHECK_FILE_ERROR)


class SettingsError(VerikitError):
    """Settings file or environment override is malformed."""

    def __init__(self, message: str):
        super().__init__(message, EXIT_SETTINGS_ERROR)
