"""Utility functions for Word Drill."""

from .format_utils import format_correct_marks, format_miss_marks, format_word_line

__all__ = ["format_miss_marks", "format_correct_marks", "format_word_line"]
