"""Configuration classes for Word Drill."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class DrillConfig:
    """Immutable configuration for a drilling session.

    The engine reads its thresholds and offsets from here, so a frozen
    instance keeps them stable for the whole session.
    """

    # Paging
    words_per_page: int = 70

    # Undo
    history_limit: int = 50

    # Mastery thresholds
    max_miss_count: int = 4
    mastery_threshold: int = 10  # Correct answers required once miss_count hits the cap

    # Reinsertion offsets
    known_reinsert_offset: int = 5
    missed_reinsert_offset: int = 2
    short_queue_length: int = 2  # At or below this length missed words go to the end

    # Set progression
    clean_set_miss_limit: int = 3
    hq_sets_to_advance: int = 3

    # Storage
    storage_backend: str = "json"  # "json" files or a "sqlite" database
    data_dir: Path = field(default_factory=lambda: Path.home() / ".word_drill")
    catalog_key: str = "word-catalog"
    state_key: str = "learning-state"

    def __post_init__(self):
        """Convert string paths to Path objects and check paging bounds."""
        if isinstance(self.data_dir, str):
            object.__setattr__(self, "data_dir", Path(self.data_dir))
        if self.words_per_page < 1:
            raise ValueError(f"words_per_page must be positive, got {self.words_per_page}")
        if self.history_limit < 0:
            raise ValueError(f"history_limit must not be negative, got {self.history_limit}")
