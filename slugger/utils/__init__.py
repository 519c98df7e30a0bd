"""Utility helpers for slugger."""

from slugger.utils.text import is_ascii_alnum, separator_run_pattern, to_text

__all__ = ["is_ascii_alnum", "separator_run_pattern", "to_text"]
