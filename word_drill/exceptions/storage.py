"""Persistence related exceptions."""

from .base import WordDrillException


class StorageError(WordDrillException):
    """Raised when a blob store read or write fails."""

    pass


class StateDecodeError(WordDrillException):
    """Raised when a persisted learning-state document is malformed."""

    pass
