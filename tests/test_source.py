"""Tests for value sources."""

import sys

import pytest

from verikit.core.source import command_output, fixed, sequence


def test_fixed_returns_same_value():
    source = fixed("abc")
    assert source() == "abc"
    assert source() == "abc"


def test_fixed_none():
    assert fixed(None)() is None


def test_sequence_repeats_last():
    source = sequence(1, 2)
    assert [source() for _ in range(4)] == [1, 2, 2, 2]


def test_sequence_needs_values():
    with pytest.raises(ValueError):
        sequence()


def test_command_output_strips():
    source = command_output([sys.executable, "-c", "print('  hello  ')"])
    assert source() == "hello"


def test_command_output_no_strip():
    source = command_output([sys.executable, "-c", "print('hi')"], strip=False)
    assert source() == "hi\n"
