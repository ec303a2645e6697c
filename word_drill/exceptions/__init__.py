"""Custom exceptions for Word Drill."""

from .base import WordDrillException
from .catalog import CatalogParseError, CatalogValidationError
from .engine import InvalidViewModeError
from .storage import StateDecodeError, StorageError

__all__ = [
    "WordDrillException",
    "CatalogParseError",
    "CatalogValidationError",
    "StorageError",
    "StateDecodeError",
    "InvalidViewModeError",
]
