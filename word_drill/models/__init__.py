"""Data models for Word Drill."""

from .history import HistoryEntry
from .stats import LearningStats
from .view import ViewMode
from .word import LearningWord, WordRecord, WordState

__all__ = [
    "WordRecord",
    "LearningWord",
    "WordState",
    "LearningStats",
    "HistoryEntry",
    "ViewMode",
]
