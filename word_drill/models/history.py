"""Data model for undo history entries."""

from dataclasses import dataclass, field

from .stats import LearningStats
from .word import LearningWord


@dataclass
class HistoryEntry:
    """Engine state captured before a review action.

    Entries must own their data: callers store deep copies so that later
    in-place changes to the live queue never leak into history.
    """

    queue: list[LearningWord] = field(default_factory=list)
    current_index: int = 0
    stats: LearningStats = field(default_factory=LearningStats)
    translation_visible: bool = False
