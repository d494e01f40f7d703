"""Tests for the string predicates and their null handling."""

import re

import pytest

from verikit.predicates import STRINGS

S = "  some string    "


def holds(name, actual, *args):
    return STRINGS.get(name).evaluate(actual, *args)


# -- equality --------------------------------------------------------------

def test_equals_with_nulls():
    assert holds("equals", "a", "a")
    assert holds("equals", None, None)
    assert not holds("equals", "a", None)
    assert not holds("equals", None, "a")


def test_not_equals_is_not_plain_negation():
    assert holds("not_equals", None, "x")
    assert holds("not_equals", "x", None)
    assert not holds("not_equals", None, None)
    assert not holds("not_equals", "x", "x")


def test_equals_ignore_case():
    assert holds("equals_ignore_case", "  Some String ", "  SOME string ")
    assert holds("equals_ignore_case", None, None)
    assert not holds("equals_ignore_case", "a", None)
    assert not holds("equals_ignore_case", "ab", "a")
    assert holds("not_equals_ignore_case", None, "x")
    assert not holds("not_equals_ignore_case", "abc", "ABC")
    assert not holds("not_equals_ignore_case", None, None)


def test_equals_ignore_white_spaces():
    assert holds("equals_ignore_white_spaces", "  some \t string\n", "somestring")
    assert not holds("equals_ignore_white_spaces", "some", None)
    assert holds("not_equals_ignore_white_spaces", None, "some")
    assert not holds("not_equals_ignore_white_spaces", " a b ", "ab")


# -- set membership --------------------------------------------------------

def test_equals_any():
    assert holds("equals_any", "b", ["a", "b"])
    assert not holds("equals_any", "c", ["a", "b"])
    assert holds("equals_any", None, ["a", None])
    assert not holds("equals_any", None, ["a"])
    assert not holds("equals_any", "a", None)


def test_equals_any_ignore_case():
    assert holds("equals_any_ignore_case", "B", ["a", "b"])
    assert holds("equals_any_ignore_case", None, [None])
    assert not holds("equals_any_ignore_case", "B", [None, "c"])


def test_equals_none():
    assert holds("equals_none", "c", ["a", "b"])
    assert not holds("equals_none", "a", ["a"])
    assert not holds("equals_none", None, ["a"])
    assert not holds("equals_none", None, [None])
    assert not holds("equals_none_ignore_case", "A", ["a"])
    assert holds("equals_none_ignore_case", "A", [None, "b"])


def test_contains_any():
    assert holds("contains_any", S, ["xyz", "str"])
    assert not holds("contains_any", "abc", [None])
    assert holds("contains_any", "abc", [""])
    assert not holds("contains_any", None, ["a"])
    assert holds("contains_any_ignore_case", S, ["STR"])
    assert not holds("contains_any_ignore_case", S, ["XYZ"])


# -- anchoring -------------------------------------------------------------

def test_starts_with():
    assert holds("starts_with", "some", "so")
    assert not holds("starts_with", None, "s")
    assert not holds("starts_with", "s", None)
    assert holds("starts_with_ignore_case", "Some", "sO")
    assert holds("not_starts_with", "some", "x")
    assert not holds("not_starts_with", None, "x")
    assert not holds("not_starts_with_ignore_case", "Some", "SO")


def test_starts_with_any_and_none_skip_null_candidates():
    assert holds("starts_with_any", "some", [None, "so"])
    assert not holds("starts_with_any", "some", [None])
    assert holds("starts_with_none", "some", [None, "x"])
    assert not holds("starts_with_none", "some", ["s"])


def test_ends_with():
    assert holds("ends_with", "string", "ing")
    assert holds("ends_with_ignore_case", "string", "ING")
    assert holds("ends_with_any", "string", ["x", "ing"])
    assert not holds("ends_with_none", "string", ["ing"])
    assert not holds("not_ends_with_ignore_case", "String", "ING")
    assert holds("not_ends_with", "string", "x")
    assert not holds("ends_with", None, "g")


# -- containment -----------------------------------------------------------

def test_contains_ignore_case_scenario():
    assert holds("contains_ignore_case", S, "STRING")
    assert not holds("not_contains_ignore_case", S, "STRING")


def test_containment_with_nulls_fails():
    assert not holds("contains", None, "a")
    assert not holds("contains", "abc", None)
    assert not holds("not_contains", None, "a")
    assert not holds("not_contains", "abc", None)
    assert holds("not_contains", "abc", "x")


# -- character classes -----------------------------------------------------

def test_blank_and_empty():
    assert holds("is_blank", None)
    assert holds("is_blank", "  ")
    assert not holds("is_blank", " a ")
    assert holds("is_empty", None)
    assert holds("is_empty", "")
    assert not holds("is_empty", " ")
    assert not holds("is_not_blank", None)
    assert not holds("is_not_empty", None)
    assert holds("is_not_blank", "a")


def test_alpha():
    assert holds("is_alpha", "abc")
    assert not holds("is_alpha", "ab1")
    assert not holds("is_alpha", "")
    assert not holds("is_alpha", None)
    assert holds("is_not_alpha", "ab1")
    assert not holds("is_not_alpha", None)
    assert holds("is_alpha_space", " aiu ajk sn")
    assert not holds("is_alpha_space", "1 aiu ajk sn")
    assert holds("is_not_alpha_space", "1aiul ajk sn")


def test_alphanumeric():
    assert holds("is_alphanumeric", "ai1ul90jksn")
    assert not holds("is_alphanumeric", "ai1 ul")
    assert not holds("is_alphanumeric", "")
    assert holds("is_alphanumeric_space", " ai1ul90 ajk sn")
    assert holds("is_not_alphanumeric_space", "ai1ul90jks!n")
    assert not holds("is_not_alphanumeric_space", None)


def test_alphanumeric_accepts_non_ascii_letters():
    assert holds("is_alpha", "café")
    assert holds("is_alphanumeric", "café1")
    assert holds("is_alphanumeric", "塲9")
    assert holds("is_alphanumeric_space", "café 1")
    assert not holds("is_not_alphanumeric", "straße2")
    assert holds("is_not_alphanumeric", "café-1")


def test_numeric():
    assert holds("is_numeric", "2345678")
    assert not holds("is_numeric", "")
    assert holds("is_numeric_space", " 1254 786 1")
    assert not holds("is_numeric_space", "2345A678")
    assert holds("is_not_numeric_space", "234567!8")


def test_ascii_printable():
    assert holds("is_ascii_printable", "5rtfghuik")
    assert not holds("is_ascii_printable", "tab\there")
    assert holds("is_not_ascii_printable", "bell\u0007")
    assert not holds("is_not_ascii_printable", None)


def test_empty_or_and_blank_or_forms():
    assert holds("is_empty_or_alpha", "")
    assert holds("is_empty_or_alpha", "abc")
    assert not holds("is_empty_or_alpha", "a1")
    assert not holds("is_empty_or_alpha", None)
    assert holds("is_blank_or_numeric", "  ")
    assert holds("is_blank_or_numeric", "12")
    assert not holds("is_blank_or_numeric", None)
    assert holds("is_empty_or_not_alphanumeric", "a b")
    assert not holds("is_empty_or_not_alphanumeric", "ab1")
    assert holds("is_blank_or_not_alpha", "a1")
    assert not holds("is_blank_or_not_alpha", "abc")


def test_length_bounded_class_checks():
    assert holds("is_numeric_with_length", "1234", 2, 4)
    assert not holds("is_numeric_with_length", "12345", 2, 4)
    assert not holds("is_numeric_with_length", "1", 2, 4)
    assert not holds("is_numeric_with_length", "12a", 1, 5)
    assert not holds("is_numeric_with_length", None, 0, 5)
    assert holds("is_empty_or_numeric_with_length", "", 2, 4)
    assert holds("is_empty_or_numeric_with_length", "123", 2, 4)
    assert not holds("is_empty_or_numeric_with_length", "  ", 2, 4)
    assert not holds("is_empty_or_numeric_with_length", None, 2, 4)
    assert holds("is_blank_or_numeric_with_length", "  ", 2, 4)
    assert not holds("is_blank_or_numeric_with_length", "1", 2, 4)
    assert holds("is_empty_or_alphanumeric_with_length", "ab12", 1, 4)
    assert not holds("is_empty_or_alphanumeric_with_length", "ab 12", 1, 10)
    assert holds("is_blank_or_alphanumeric_with_length", " ", 3, 4)
    assert not holds("is_blank_or_alphanumeric_with_length", "abcde", 3, 4)
    assert not holds("is_blank_or_alphanumeric_with_length", None, 3, 4)


# -- ordering and length ---------------------------------------------------

def test_compare():
    assert holds("compare", "  SOME", "  some", -32)
    assert holds("compare", None, None, 0)
    assert holds("compare", None, "a", -1)
    assert holds("compare", "a", None, 1)
    assert holds("compare", "abc", "ab", 1)
    assert not holds("compare", "a", "a", None)


def test_compare_ignore_case():
    assert holds("compare_ignore_case", "some string", "some xtring", -5)
    assert holds("compare_ignore_case", "SOME", "some", 0)


@pytest.mark.parametrize("n", [-1, 0, 3, 100])
def test_length_of_null(n):
    assert not holds("length_equals", None, n)
    assert holds("length_not_equals", None, n)


def test_length():
    assert holds("length_equals", "abc", 3)
    assert not holds("length_not_equals", "abc", 3)


# -- positional extraction -------------------------------------------------

def test_left_right_mid():
    s = "some string"
    assert holds("left_value_equals", s, 4, "some")
    assert holds("left_value_equals", s, -1, "")
    assert holds("left_value_equals", s, 50, s)
    assert not holds("left_value_equals", None, 2, "so")
    assert not holds("left_value_equals", s, 2, None)
    assert holds("left_value_not_equals", s, 2, "xx")
    assert holds("right_value_equals", s, 6, "string")
    assert holds("right_value_equals", s, -2, "")
    assert holds("mid_value_equals", s, 5, 3, "str")
    assert holds("mid_value_equals", s, -3, 4, "some")
    assert holds("mid_value_equals", s, 50, 2, "")
    assert holds("mid_value_not_equals", s, 0, 4, "xxxx")


def test_substring_overloads():
    s = "some string"
    assert holds("substring_equals", s, 5, "string")
    assert holds("substring_equals", s, 5, 8, "str")
    assert holds("substring_equals", s, -6, "string")
    assert not holds("substring_equals", s, 5, None)
    assert holds("substring_not_equals", s, 0, 4, "xxxx")
    assert not holds("substring_not_equals", None, 0, "x")


def test_substring_before_after():
    assert holds("substring_before_equals", "a.b.c", ".", "a")
    assert holds("substring_before_last_equals", "a.b.c", ".", "a.b")
    assert holds("substring_after_equals", "a.b.c", ".", "b.c")
    assert holds("substring_after_last_equals", "a.b.c", ".", "c")
    assert holds("substring_after_equals", "abc", None, "")
    assert holds("substring_before_equals", "abc", None, "abc")
    assert holds("substring_before_equals", "abc", "", "")
    assert holds("substring_before_last_equals", "abc", "x", "abc")
    assert holds("substring_after_last_equals", "abc", "", "")
    assert not holds("substring_after_not_equals", "a.b", ".", "b")


def test_substring_between():
    assert holds("substring_between_equals", "<a><b>", "<", ">", "a")
    assert holds("substring_between_not_equals", "abc", "[", "]", "x")
    assert not holds("substring_between_equals", "abc", None, "]", "x")


def test_substrings_between():
    assert holds("substrings_between_equals", "[a][b]", "[", "]", ["a", "b"])
    assert not holds("substrings_between_equals", "abc", "[", "]", [])
    assert not holds("substrings_between_not_equals", "abc", "[", "]", ["a"])
    assert holds("substrings_between_not_equals", "[a]", "[", "]", ["b"])
    assert holds("substrings_between_contains", "[a][b]", "[", "]", "b")
    assert holds("substrings_between_not_contains", "[a]", None, "]", "a")
    assert not holds("substrings_between_not_contains", "[a]", "[", "]", "a")


# -- transforms ------------------------------------------------------------

def test_remove_family():
    assert holds("remove_equals", "queued", "ue", "qd")
    assert holds("remove_equals", "abc", None, "abc")
    assert holds("remove_ignore_case_equals", "queUEd", "ue", "qd")
    assert holds("remove_start_equals", "www.domain.com", "www.", "domain.com")
    assert holds("remove_start_ignore_case_equals", "WWW.domain.com", "www.", "domain.com")
    assert holds("remove_end_equals", "www.domain.com", ".com", "www.domain")
    assert holds("remove_end_ignore_case_equals", "www.domain.COM", ".com", "www.domain")
    assert not holds("remove_not_equals", "abc", None, "abc")
    assert not holds("remove_equals", None, "a", "")


def test_replace_family():
    assert holds("replace_equals", "aba", "a", "z", "zbz")
    assert holds("replace_once_equals", "aba", "a", "z", "zba")
    assert holds("replace_ignore_case_equals", "AbA", "a", "z", "zbz")
    assert holds("replace_once_ignore_case_equals", "AbA", "a", "z", "zbA")
    assert holds("replace_equals", "aba", None, "z", "aba")
    assert holds("replace_equals", "aba", "a", None, "aba")
    assert holds("replace_ignore_case_equals", "a.b", ".", "\\1", "a\\1b")
    assert holds("replace_not_equals", "aba", "a", "z", "aba")


def test_reverse_scenario():
    assert holds("reverse_equals", "  some string   s ", " s   gnirts emos  ")
    assert not holds("reverse_not_equals", "ab", "ba")
    assert not holds("reverse_equals", None, None)


def test_trim_and_truncate():
    assert holds("trimmed_value_equals", "\t some \n", "some")
    assert holds("truncated_value_equals", "abcdefg", 4, "abcd")
    assert holds("truncated_value_equals", "abcdefg", 2, 3, "cde")
    assert holds("truncated_value_equals", "abc", -1, "")
    assert holds("truncated_value_not_equals", "abcdefg", 4, "abc")
    assert not holds("truncated_value_equals", "abc", 2, None)


def test_striped_value_null_chars_strips_whitespace():
    assert holds("striped_value", S, None, "some string")
    assert holds("striped_value", S, " ", "some string")
    assert holds("striped_value", "xxabcyy", "xy", "abc")
    assert holds("striped_value", "  ab ", "", "  ab ")
    assert holds("striped_start_value", "  ab  ", None, "ab  ")
    assert holds("striped_end_value", "  ab  ", None, "  ab")
    assert holds("striped_value_not", S, None, S)
    assert not holds("striped_value", None, None, "")


def test_padding():
    assert holds("center_pad_equals", "ab", 6, "*", "**ab**")
    assert holds("center_pad_equals", "a", 4, "yz", "yayz")
    assert holds("center_pad_equals", "abc", 2, "*", "abc")
    assert holds("left_pad_equals", "bat", 5, "yz", "yzbat")
    assert holds("left_pad_equals", "bat", 8, "yz", "yzyzybat")
    assert holds("left_pad_equals", "bat", 5, "", "  bat")
    assert holds("left_pad_equals", "bat", 5, None, "bat")
    assert holds("right_pad_equals", "bat", 5, "yz", "batyz")
    assert holds("right_pad_not_equals", "bat", 5, "yz", "bat")


@pytest.mark.parametrize("pad", ["*", "xyz", None, ""])
def test_left_pad_shorter_size_keeps_value(pad):
    assert holds("left_pad_equals", "some", 3, pad, "some")


# -- patterns and counting -------------------------------------------------

def test_matches_is_whole_string():
    assert holds("matches", "abc123", r"[a-z]+\d+")
    assert not holds("matches", "abc123", r"[a-z]+")
    assert holds("matches", "abc123", re.compile(r"\w+"))
    assert holds("not_matches", "abc123", r"\d+")


def test_patterns_with_nulls_fail_both_ways():
    assert not holds("matches", None, ".*")
    assert not holds("not_matches", None, "x")
    assert not holds("not_matches", "abc", None)


def test_match_any_and_none():
    assert holds("match_any", "abc", [None, "x", "a.c"])
    assert not holds("match_any", "abc", ["x"])
    assert holds("match_none", "abc", ["x", None])
    assert not holds("match_none", None, ["x"])


def test_number_of_matches():
    assert holds("number_of_matches_equals", "ababab", "ab", 3)
    assert holds("number_of_matches_equals", "ababab", None, 0)
    assert holds("number_of_matches_equals", "ababab", "", 0)
    assert not holds("number_of_matches_equals", None, "a", 0)
    assert holds("number_of_matches_not_equals", "aaa", "a", 2)
