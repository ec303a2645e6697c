"""Read-only projections of engine state for display."""

from word_drill.models import LearningWord, ViewMode, WordRecord

from .mastery_tracker import MasteryTracker
from .page_slicer import PageSlicer


class ViewProjector:
    """Derives display word lists from the queue without touching it.

    Catalog-ordered views (V3, V4) pair each catalog record with a live
    queue word by (headword, part of speech). Duplicate pairs in the
    catalog cannot be told apart, so they all show the first live match.
    Records with no live word get a throwaway zero-state word.
    """

    def __init__(self, slicer: PageSlicer, tracker: MasteryTracker):
        self.slicer = slicer
        self.tracker = tracker

    def project(
        self,
        mode: ViewMode,
        queue: list[LearningWord],
        current_word: LearningWord | None,
        catalog: list[WordRecord],
        current_page: int,
    ) -> list[LearningWord]:
        """Build the word list for a view mode.

        Args:
            mode: Display layout
            queue: Live learning queue (not modified)
            current_word: Word under the cursor, or None if the queue is empty
            catalog: Full catalog in original order
            current_page: Active page number

        Returns:
            A new list; live words are shared with the queue, synthesized
            words are not.
        """
        if mode == ViewMode.V1:
            return [current_word] if current_word is not None else []
        if mode == ViewMode.V2:
            return list(queue)
        if mode == ViewMode.V3:
            return self._match_catalog_order(self.slicer.slice_page(catalog, current_page), queue)
        return self._match_catalog_order(list(enumerate(catalog)), queue)

    def _match_catalog_order(
        self, records: list[tuple[int, WordRecord]], queue: list[LearningWord]
    ) -> list[LearningWord]:
        live: dict[tuple[str, str], LearningWord] = {}
        for word in queue:
            live.setdefault(word.record.match_key, word)

        projected = []
        for offset, record in records:
            word = live.get(record.match_key)
            if word is None:
                word = self.tracker.create_learning_word(record, offset)
            projected.append(word)
        return projected
