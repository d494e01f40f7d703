"""Tests for message formatting."""

import re

from verikit.formatting import (
    build_message,
    context_name,
    default_message,
    format_message,
    inline_diff,
    render_value,
)


def test_render_value():
    assert render_value(None) == "<NULL>"
    assert render_value("abc") == "abc"
    assert render_value(3) == "3"
    assert render_value(re.compile(r"\d+")) == r"\d+"
    assert render_value(["a", None]) == "[a, <NULL>]"


def test_format_percent_placeholders():
    assert format_message("%s#%s", ["a", "b"]) == "a#b"
    assert format_message("count=%d", [3]) == "count=3"


def test_format_brace_placeholders():
    assert format_message("{} and {}", [1, 2]) == "1 and 2"
    assert format_message("{1} before {0}", ["x", "y"]) == "y before x"


def test_format_literals():
    assert format_message("100%% {{done}}", []) == "100% {done}"


def test_format_missing_params_never_raises():
    assert format_message("%s/%s", ["a"]) == "a/<missing>"
    assert format_message("{3}", ["a"]) == "<missing>"
    assert format_message("%s", None) == "<missing>"
    assert format_message(None, ["a"]) == ""


def test_format_surplus_params_ignored():
    assert format_message("only %s", ["a", "b", "c"]) == "only a"


def test_format_null_param():
    assert format_message("value %s", [None]) == "value <NULL>"


def test_default_message():
    assert default_message("value is blank") == "Verify value is blank."
    assert default_message("value is blank", "Login") == "Verify Login value is blank."
    assert default_message("value is blank", "  ") == "Verify value is blank."


def test_context_name():
    def test_something():
        pass

    assert context_name(None) is None
    assert context_name("suite") == "suite"
    assert context_name(test_something).endswith("test_something")
    assert context_name(object()) == "object"


def test_inline_diff():
    assert inline_diff("some string", "some strong") == "some str[-i-]{+o+}ng"
    assert inline_diff("abc", "abc") == "abc"


def test_build_message_fail():
    msg = build_message("Verify value equals the expected value.", "a", None, False)
    assert msg == "FAIL ::> Verify value equals the expected value. Exp: 'a', Act: '<NULL>'"


def test_build_message_pass_with_context():
    msg = build_message("Verify x.", 1, 1, True, context="login")
    assert msg.startswith("PASS ::> [login] Verify x.")


def test_build_message_diff_only_on_failure():
    failed = build_message("m", "abc", "abd", False, diff=True)
    assert "Diff: 'ab[-c-]{+d+}'" in failed
    passed = build_message("m", "abc", "abc", True, diff=True)
    assert "Diff" not in passed


def test_build_message_waited():
    msg = build_message("m", "ready", "loading", False, waited_s=1.234)
    assert msg.endswith("(waited 1.23s)")
