"""Base exception classes for Word Drill."""


class WordDrillException(Exception):
    """Base exception for all Word Drill errors.

    All custom exceptions in the word_drill package should inherit
    from this base class for consistent error handling.
    """

    pass
