"""Data model for learning progress statistics."""

import math
from dataclasses import dataclass
from typing import Any


@dataclass
class LearningStats:
    """Progress through the paged catalog."""

    current_page: int = 0  # 0-indexed
    total_pages: int = 0
    hq_sets: int = 0  # Consecutive clean passes on the current page
    missed_in_current_set: int = 0  # Every miss event, repeats included
    words_per_page: int = 70

    @staticmethod
    def count_pages(catalog_size: int, words_per_page: int) -> int:
        """Number of pages needed to hold the catalog."""
        return math.ceil(catalog_size / words_per_page)

    @property
    def has_next_page(self) -> bool:
        """Check if there is a page after the current one."""
        return self.current_page + 1 < self.total_pages

    def to_dict(self) -> dict[str, Any]:
        return {
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
            "hqSets": self.hq_sets,
            "missedInCurrentSet": self.missed_in_current_set,
            "wordsPerPage": self.words_per_page,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LearningStats":
        return cls(
            current_page=int(data.get("currentPage", 0)),
            total_pages=int(data.get("totalPages", 0)),
            hq_sets=int(data.get("hqSets", 0)),
            missed_in_current_set=int(data.get("missedInCurrentSet", 0)),
            words_per_page=int(data.get("wordsPerPage", 70)),
        )
