"""What happens when a page's queue has been cleared."""

import logging

from word_drill.config import DrillConfig
from word_drill.models import LearningStats, LearningWord, WordRecord
from word_drill.services.mastery_tracker import MasteryTracker
from word_drill.services.page_slicer import PageSlicer

logger = logging.getLogger(__name__)


class SetProgression:
    """Scores a cleared pass and picks the next queue.

    A pass is clean when it had at most ``clean_set_miss_limit`` misses.
    After ``hq_sets_to_advance`` clean passes the next page is loaded;
    otherwise the same page starts over with fresh counters. Clean passes
    count cumulatively per page: a failed pass does not reset them.
    """

    def __init__(self, config: DrillConfig, slicer: PageSlicer, tracker: MasteryTracker):
        self.clean_set_miss_limit = config.clean_set_miss_limit
        self.hq_sets_to_advance = config.hq_sets_to_advance
        self.slicer = slicer
        self.tracker = tracker

    def fresh_page(self, catalog: list[WordRecord], page: int) -> list[LearningWord]:
        """Zero-state queue for a page."""
        return self.tracker.build_queue(self.slicer.slice_page(catalog, page))

    def complete_set(self, stats: LearningStats, catalog: list[WordRecord]) -> list[LearningWord]:
        """Update stats for a cleared pass and return the next queue.

        Args:
            stats: Learning stats, updated in place
            catalog: Full catalog

        Returns:
            The next queue; empty when the last page has been mastered
        """
        if stats.missed_in_current_set <= self.clean_set_miss_limit:
            stats.hq_sets += 1

        if stats.hq_sets >= self.hq_sets_to_advance:
            if not stats.has_next_page:
                logger.info("All pages mastered")
                return []
            stats.current_page += 1
            stats.hq_sets = 0
            stats.missed_in_current_set = 0
            logger.info(f"Advancing to page {stats.current_page + 1}/{stats.total_pages}")
            return self.fresh_page(catalog, stats.current_page)

        logger.info(
            f"Restarting page {stats.current_page + 1} "
            f"({stats.hq_sets}/{self.hq_sets_to_advance} clean passes, "
            f"{stats.missed_in_current_set} misses)"
        )
        stats.missed_in_current_set = 0
        return self.fresh_page(catalog, stats.current_page)
