"""Word catalog loading exceptions."""

from .base import WordDrillException


class CatalogParseError(WordDrillException):
    """Raised when a catalog file cannot be read or decoded."""

    pass


class CatalogValidationError(WordDrillException):
    """Raised when a catalog contains malformed word records."""

    pass
