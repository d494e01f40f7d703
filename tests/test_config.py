"""Tests for settings management."""

import json

import pytest

from verikit.config import (
    SettingsStore,
    VerifySettings,
    WaitConfig,
    apply_env_overrides,
    load_settings,
)
from verikit.core.errors import SettingsError


def test_wait_config_defaults():
    w = WaitConfig()
    assert w.timeout_s == 5.0
    assert w.poll_ms == 10
    assert w.poll_s == pytest.approx(0.01)


def test_wait_config_rejects_negative():
    with pytest.raises(ValueError):
        WaitConfig(timeout_s=-1)
    with pytest.raises(ValueError):
        WaitConfig(poll_ms=-5)


def test_verify_settings_defaults():
    s = VerifySettings()
    assert s.message_prefix == ""
    assert s.print_diff is True
    assert s.echo_passed is False
    assert s.log_path is None


def test_settings_store_missing_file_gives_defaults(tmp_path):
    store = SettingsStore(tmp_path / "verikit.json")
    assert store.load() == VerifySettings()


def test_settings_store_roundtrip(tmp_path):
    path = tmp_path / "conf" / "verikit.json"
    store = SettingsStore(path)
    store.save(VerifySettings(wait=WaitConfig(timeout_s=2, poll_ms=50), message_prefix="Login"))
    assert path.exists()
    loaded = store.load()
    assert loaded.wait.timeout_s == 2
    assert loaded.wait.poll_ms == 50
    assert loaded.message_prefix == "Login"


def test_ensure_default(tmp_path):
    path = tmp_path / "verikit.json"
    store = SettingsStore(path)
    assert store.ensure_default() is True
    assert path.exists()
    assert store.ensure_default() is False
    data = json.loads(path.read_text())
    assert data["wait"]["timeout_s"] == 5.0


def test_settings_store_invalid_json(tmp_path):
    path = tmp_path / "verikit.json"
    path.write_text("{broken")
    with pytest.raises(SettingsError):
        SettingsStore(path).load()


def test_settings_store_not_an_object(tmp_path):
    path = tmp_path / "verikit.json"
    path.write_text("[1, 2]")
    with pytest.raises(SettingsError):
        SettingsStore(path).load()


def test_settings_store_invalid_values(tmp_path):
    path = tmp_path / "verikit.json"
    path.write_text(json.dumps({"wait": {"timeout_s": -3}}))
    with pytest.raises(SettingsError):
        SettingsStore(path).load()


def test_env_overrides():
    env = {
        "VERIKIT_WAIT_S": "1.5",
        "VERIKIT_POLL_MS": "25",
        "VERIKIT_MESSAGE_PREFIX": "Cart",
        "VERIKIT_ECHO_PASSED": "yes",
        "VERIKIT_LOG_PATH": "out/verify.jsonl",
    }
    s = apply_env_overrides(VerifySettings(), env)
    assert s.wait.timeout_s == 1.5
    assert s.wait.poll_ms == 25
    assert s.message_prefix == "Cart"
    assert s.echo_passed is True
    assert s.log_path == "out/verify.jsonl"


def test_env_overrides_leave_original_untouched():
    original = VerifySettings()
    apply_env_overrides(original, {"VERIKIT_WAIT_S": "9"})
    assert original.wait.timeout_s == 5.0


def test_env_override_invalid_number():
    with pytest.raises(SettingsError):
        apply_env_overrides(VerifySettings(), {"VERIKIT_POLL_MS": "fast"})


def test_load_settings_combines_file_and_env(tmp_path):
    path = tmp_path / "verikit.json"
    SettingsStore(path).save(VerifySettings(message_prefix="File"))
    s = load_settings(path, environ={"VERIKIT_WAIT_S": "0"})
    assert s.message_prefix == "File"
    assert s.wait.timeout_s == 0
