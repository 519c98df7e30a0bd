"""Tests for text helpers."""

from __future__ import annotations

from slugger.utils.text import is_ascii_alnum, separator_run_pattern, to_text


def test_to_text_variants():
    """Coercion covers None, booleans, numbers and bytes."""
    assert to_text(None) == ""
    assert to_text(True) == "true"
    assert to_text(False) == "false"
    assert to_text(0) == "0"
    assert to_text(-12) == "-12"
    assert to_text(1.0) == "1.0"
    assert to_text(bytearray(b"abc")) == "abc"
    assert to_text(b"\xff") == "�"
    assert to_text("text") == "text"


def test_is_ascii_alnum():
    """Only ASCII letters and digits qualify."""
    assert is_ascii_alnum("a")
    assert is_ascii_alnum("Z")
    assert is_ascii_alnum("7")
    assert not is_ascii_alnum("é")
    assert not is_ascii_alnum("٣")
    assert not is_ascii_alnum("-")
    assert not is_ascii_alnum("ab")


def test_separator_run_pattern_is_literal():
    """Metacharacters in separators are escaped."""
    assert separator_run_pattern(".").sub("-", "a...b") == "a-b"
    assert separator_run_pattern("a-z").sub("+", "bmz-a") == "bm+"
    assert separator_run_pattern("^").fullmatch("^^^")


def test_separator_run_pattern_cached():
    """Patterns are compiled once per separator."""
    assert separator_run_pattern("_") is separator_run_pattern("_")
