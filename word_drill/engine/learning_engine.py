"""Learning queue engine: the single entry point for drilling a catalog."""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING

from word_drill.config import DrillConfig, create_default_config
from word_drill.exceptions import InvalidViewModeError, StorageError
from word_drill.models import HistoryEntry, LearningStats, LearningWord, ViewMode, WordRecord
from word_drill.services import (
    HistoryLog,
    MasteryTracker,
    PageSlicer,
    ProgressStore,
    ViewProjector,
)

from .learning_queue import LearningQueue
from .progression import SetProgression

if TYPE_CHECKING:
    from word_drill.interfaces import BlobStore, PresenterProtocol

logger = logging.getLogger(__name__)


class LearningEngine:
    """Owns the catalog, the active page's queue, stats and undo history.

    Every operation runs to completion synchronously. After each change
    the state is written to the blob store if one was given; write
    failures are logged and reported to the presenter but never undo the
    in-memory change.
    """

    def __init__(
        self,
        catalog: list[WordRecord] | None = None,
        config: DrillConfig | None = None,
        store: BlobStore | None = None,
        presenter: PresenterProtocol | None = None,
    ):
        """Initialize the engine on page 0 of a catalog.

        Args:
            catalog: Validated word records (may be empty)
            config: Engine configuration, defaults if omitted
            store: Optional blob store for persistence
            presenter: Optional presenter for storage warnings
        """
        self.config = config or create_default_config()
        self.presenter = presenter
        self.progress_store = (
            ProgressStore(store, self.config.catalog_key, self.config.state_key)
            if store is not None
            else None
        )

        self.slicer = PageSlicer(self.config.words_per_page)
        self.tracker = MasteryTracker(self.config)
        self.progression = SetProgression(self.config, self.slicer, self.tracker)
        self.projector = ViewProjector(self.slicer, self.tracker)
        self.history = HistoryLog(self.config.history_limit)

        self._catalog: list[WordRecord] = list(catalog or [])
        self._queue = LearningQueue(self.config, self.tracker)
        self._stats = LearningStats(words_per_page=self.config.words_per_page)
        self._view_mode = ViewMode.V1
        self._start_fresh()

    @classmethod
    def restore(
        cls,
        store: BlobStore,
        config: DrillConfig | None = None,
        presenter: PresenterProtocol | None = None,
    ) -> LearningEngine:
        """Create an engine from previously saved documents.

        Resumes the saved queue when the learning-state document holds a
        non-empty queue for a page that exists in the saved catalog;
        otherwise starts page 0 of the saved catalog. Unreadable
        documents count as missing.
        """
        engine = cls(config=config, store=store, presenter=presenter)
        progress_store = ProgressStore(store, engine.config.catalog_key, engine.config.state_key)
        engine.progress_store = progress_store

        engine._catalog = progress_store.load_catalog()
        saved = progress_store.load_state()
        total_pages = engine.slicer.total_pages(engine._catalog)

        if saved is not None and saved.queue and 0 <= saved.stats.current_page < total_pages:
            engine._queue.replace(saved.queue, saved.current_index)
            engine._stats = saved.stats
            engine._stats.words_per_page = engine.config.words_per_page
            engine._stats.total_pages = total_pages
            engine._view_mode = saved.view_mode
            logger.info(
                f"Resumed page {engine._stats.current_page + 1} with {len(saved.queue)} words"
            )
        else:
            if saved is not None:
                if saved.queue:
                    logger.warning(
                        f"Saved queue does not fit the saved catalog "
                        f"(page {saved.stats.current_page + 1} of {total_pages}), starting over"
                    )
                engine._view_mode = saved.view_mode
            engine._start_fresh()
        return engine

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def catalog(self) -> list[WordRecord]:
        return list(self._catalog)

    @property
    def queue(self) -> list[LearningWord]:
        """Live queue in drill order (a new list of the live words)."""
        return list(self._queue.words)

    @property
    def current_index(self) -> int:
        return self._queue.current_index

    @property
    def translation_visible(self) -> bool:
        return self._queue.translation_visible

    @property
    def stats(self) -> LearningStats:
        """Copy of the current stats."""
        return copy.copy(self._stats)

    @property
    def view_mode(self) -> ViewMode:
        return self._view_mode

    @property
    def is_finished(self) -> bool:
        """True when there is no word left to drill."""
        return self._queue.is_empty

    def current_word(self) -> LearningWord | None:
        """Word to show, or None when the queue is empty."""
        return self._queue.current_word()

    def can_undo(self) -> bool:
        return self.history.can_undo

    def get_words_for_view(self, mode: ViewMode | str | None = None) -> list[LearningWord]:
        """Project the state for a view mode (current mode by default)."""
        view_mode = self._coerce_view_mode(mode) if mode is not None else self._view_mode
        return self.projector.project(
            view_mode,
            self._queue.words,
            self._queue.current_word(),
            self._catalog,
            self._stats.current_page,
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def reveal(self) -> None:
        self._queue.reveal()

    def hide(self) -> None:
        self._queue.hide()

    def mark_known(self) -> None:
        """Record a correct answer for the current word.

        No-op when the queue is empty. Clearing the queue triggers set
        completion, which reloads the page or advances to the next one.
        """
        if self._queue.is_empty:
            return

        self._push_history()
        self._queue.mark_known()

        if self._queue.is_empty:
            next_queue = self.progression.complete_set(self._stats, self._catalog)
            self._queue.replace(next_queue, 0)

        self._persist_state()

    def mark_missed(self) -> None:
        """Record a miss for the current word. No-op when the queue is empty."""
        if self._queue.is_empty:
            return

        self._push_history()
        self._queue.mark_missed()
        self._stats.missed_in_current_set += 1
        self._persist_state()

    def undo(self) -> bool:
        """Restore the state from before the last review action.

        Returns:
            True if something was undone, False if the history was empty
        """
        entry = self.history.pop()
        if entry is None:
            return False

        self._queue.replace(entry.queue, entry.current_index)
        self._queue.translation_visible = entry.translation_visible
        self._stats = entry.stats
        self._persist_state()
        return True

    def set_view_mode(self, mode: ViewMode | str) -> None:
        """Switch the display layout.

        Raises:
            InvalidViewModeError: If the mode is not one of v1..v4
        """
        self._view_mode = self._coerce_view_mode(mode)
        self._persist_state()

    def load_catalog(self, records: list[WordRecord]) -> None:
        """Replace the catalog and start over from page 0.

        Records are expected to be validated already (see CatalogService).
        """
        self._catalog = list(records)
        self._start_fresh()
        self._persist_catalog()
        self._persist_state()
        logger.info(
            f"Loaded catalog of {len(self._catalog)} words ({self._stats.total_pages} pages)"
        )

    def reset(self) -> None:
        """Restart the current catalog from page 0 with zeroed progress."""
        self._start_fresh()
        self._persist_state()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _start_fresh(self) -> None:
        self._stats = LearningStats(
            current_page=0,
            total_pages=self.slicer.total_pages(self._catalog),
            words_per_page=self.config.words_per_page,
        )
        self._queue.replace(self.progression.fresh_page(self._catalog, 0), 0)
        self._queue.hide()
        self.history.clear()

    def _push_history(self) -> None:
        # HistoryLog deep-copies on push
        self.history.push(
            HistoryEntry(
                queue=self._queue.words,
                current_index=self._queue.current_index,
                stats=self._stats,
                translation_visible=self._queue.translation_visible,
            )
        )

    @staticmethod
    def _coerce_view_mode(mode: ViewMode | str) -> ViewMode:
        if isinstance(mode, ViewMode):
            return mode
        try:
            return ViewMode(mode)
        except ValueError as e:
            raise InvalidViewModeError(f"Unknown view mode: {mode!r}") from e

    def _persist_catalog(self) -> None:
        if self.progress_store is None:
            return
        try:
            self.progress_store.save_catalog(self._catalog)
        except (StorageError, OSError) as e:
            self._report_storage_failure("catalog", e)

    def _persist_state(self) -> None:
        if self.progress_store is None:
            return
        try:
            self.progress_store.save_state(
                self._queue.words, self._queue.current_index, self._stats, self._view_mode
            )
        except (StorageError, OSError) as e:
            self._report_storage_failure("learning state", e)

    def _report_storage_failure(self, what: str, error: Exception) -> None:
        logger.warning(f"Failed to save {what}: {error}")
        if self.presenter is not None:
            self.presenter.show_warning(f"Progress not saved ({what}): {error}")
