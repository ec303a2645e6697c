"""Learning engine exceptions."""

from .base import WordDrillException


class InvalidViewModeError(WordDrillException):
    """Raised when an unknown view mode is requested."""

    pass
