"""Settings management: wait defaults, message prefix, logging."""

from __future__ import annotations

import json
import os
import pathlib
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError

from verikit.constants import (
    DEFAULT_POLL_MS,
    DEFAULT_WAIT_S,
    ENV_ECHO_PASSED,
    ENV_LOG_PATH,
    ENV_MESSAGE_PREFIX,
    ENV_POLL_MS,
    ENV_WAIT_S,
    SETTINGS_FILE,
)
from verikit.core.errors import SettingsError


class WaitConfig(BaseModel):
    timeout_s: float = Field(default=DEFAULT_WAIT_S, ge=0)
    poll_ms: int = Field(default=DEFAULT_POLL_MS, ge=0)

    @property
    def poll_s(self) -> float:
        return self.poll_ms / 1000.0


class VerifySettings(BaseModel):
    wait: WaitConfig = Field(default_factory=WaitConfig)
    message_prefix: str = ""
    print_diff: bool = True
    echo_passed: bool = False
    log_path: Optional[str] = None


class SettingsStore:
    """Manages verikit.json read/write."""

    def __init__(self, path: str | pathlib.Path | None = None):
        self.path = pathlib.Path(path or SETTINGS_FILE)

    def _load_raw(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise SettingsError(f"Settings file {self.path} is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {self.path} must contain a JSON object")
        return data

    def load(self) -> VerifySettings:
        try:
            return VerifySettings(**self._load_raw())
        except ValidationError as exc:
            raise SettingsError(f"Invalid settings in {self.path}: {exc}") from exc

    def save(self, settings: VerifySettings) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(settings.model_dump(exclude_none=True), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )

    def ensure_default(self) -> bool:
        """Write default settings if no file exists. Returns True when created."""
        if self.path.exists():
            return False
        self.save(VerifySettings())
        return True


def _env_bool(raw: str) -> bool:
    return raw.strip().lower() in ("1", "true", "yes", "on")


def apply_env_overrides(
    settings: VerifySettings, environ: dict[str, str] | None = None
) -> VerifySettings:
    """Return a copy of *settings* with VERIKIT_* environment overrides applied."""
    env = os.environ if environ is None else environ
    wait = settings.wait.model_dump()
    updates: dict[str, Any] = {}
    try:
        if ENV_WAIT_S in env:
            wait["timeout_s"] = float(env[ENV_WAIT_S])
        if ENV_POLL_MS in env:
            wait["poll_ms"] = int(env[ENV_POLL_MS])
        updates["wait"] = WaitConfig(**wait)
    except (ValueError, ValidationError) as exc:
        raise SettingsError(f"Invalid wait override in environment: {exc}") from exc
    if ENV_MESSAGE_PREFIX in env:
        updates["message_prefix"] = env[ENV_MESSAGE_PREFIX]
    if ENV_ECHO_PASSED in env:
        updates["echo_passed"] = _env_bool(env[ENV_ECHO_PASSED])
    if ENV_LOG_PATH in env:
        updates["log_path"] = env[ENV_LOG_PATH] or None
    return settings.model_copy(update=updates)


def load_settings(
    path: str | pathlib.Path | None = None, environ: dict[str, str] | None = None
) -> VerifySettings:
    """Load settings from *path* (default ./verikit.json) plus environment overrides."""
    return apply_env_overrides(SettingsStore(path).load(), environ)
