"""Ordered working set of learning words for the active page."""

from word_drill.config import DrillConfig
from word_drill.models import LearningWord
from word_drill.services.mastery_tracker import MasteryTracker


class LearningQueue:
    """Learning words in drill order, with a cursor and a reveal flag.

    Known words leave the queue or are deferred ``known_reinsert_offset``
    positions. Missed words are pushed ``missed_reinsert_offset``
    positions back, or to the end of a short queue. The cursor is not
    moved by a miss, so it then points at whichever word slid into its
    slot.
    """

    def __init__(
        self,
        config: DrillConfig,
        tracker: MasteryTracker,
        words: list[LearningWord] | None = None,
        current_index: int = 0,
    ):
        self.tracker = tracker
        self.known_reinsert_offset = config.known_reinsert_offset
        self.missed_reinsert_offset = config.missed_reinsert_offset
        self.short_queue_length = config.short_queue_length
        self.words: list[LearningWord] = words if words is not None else []
        self.current_index = current_index
        self.translation_visible = False
        self.clamp_index()

    def __len__(self) -> int:
        return len(self.words)

    @property
    def is_empty(self) -> bool:
        return not self.words

    def current_word(self) -> LearningWord | None:
        """Word under the cursor, or None when the page is cleared."""
        if not self.words:
            return None
        return self.words[self.current_index]

    def reveal(self) -> None:
        self.translation_visible = True

    def hide(self) -> None:
        self.translation_visible = False

    def replace(self, words: list[LearningWord], current_index: int = 0) -> None:
        """Swap in a new set of words and reset the cursor."""
        self.words = words
        self.current_index = current_index
        self.clamp_index()

    def clamp_index(self) -> None:
        """Keep the cursor on a valid position (0 for an empty queue)."""
        if not self.words:
            self.current_index = 0
        elif self.current_index > len(self.words) - 1:
            self.current_index = len(self.words) - 1
        elif self.current_index < 0:
            self.current_index = 0

    def mark_known(self) -> bool:
        """Apply a correct answer to the current word.

        Returns:
            True if a word was processed, False if the queue is empty
        """
        word = self.current_word()
        if word is None:
            return False

        learned = self.tracker.register_correct(word)
        del self.words[self.current_index]
        if learned:
            self.clamp_index()
        else:
            target = min(self.current_index + self.known_reinsert_offset, len(self.words))
            self.words.insert(target, word)

        self.translation_visible = False
        return True

    def mark_missed(self) -> bool:
        """Apply a miss to the current word and push it back.

        Returns:
            True if a word was processed, False if the queue is empty
        """
        word = self.current_word()
        if word is None:
            return False

        self.tracker.register_miss(word)
        del self.words[self.current_index]
        if len(self.words) <= self.short_queue_length:
            target = len(self.words)
        else:
            target = min(self.current_index + self.missed_reinsert_offset, len(self.words))
        self.words.insert(target, word)

        self.translation_visible = False
        return True
