"""Global constants."""

import pathlib

DEFAULT_WAIT_S = 5.0
DEFAULT_POLL_MS = 10
SETTINGS_FILE = str(pathlib.Path.cwd() / "verikit.json")

# Environment overrides for VerifySettings
ENV_WAIT_S = "VERIKIT_WAIT_S"
ENV_POLL_MS = "VERIKIT_POLL_MS"
ENV_MESSAGE_PREFIX = "VERIKIT_MESSAGE_PREFIX"
ENV_ECHO_PASSED = "VERIKIT_ECHO_PASSED"
ENV_LOG_PATH = "VERIKIT_LOG_PATH"

# Message rendering
NULL_MARKER = "<NULL>"
MISSING_MARKER = "<missing>"
BLANK_MARKER = "<Blank>"
EMPTY_MARKER = "<Empty>"
PASS_PREFIX = "PASS ::> "
FAIL_PREFIX = "FAIL ::> "

# Diff output is skipped above this many characters per side
MAX_DIFF_LENGTH = 2000
