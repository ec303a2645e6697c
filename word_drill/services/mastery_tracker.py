"""Per-word mastery counters and their thresholds."""

from word_drill.config import DrillConfig
from word_drill.models import LearningWord, WordRecord, WordState


class MasteryTracker:
    """Creates learning words and applies review outcomes to their counters.

    A word that was never missed is learned on its first correct answer.
    A missed word needs one correct answer, or ``mastery_threshold``
    correct answers in a row once its miss count reaches the cap.
    """

    def __init__(self, config: DrillConfig):
        self.max_miss_count = config.max_miss_count
        self.mastery_threshold = config.mastery_threshold

    @staticmethod
    def make_id(record: WordRecord, offset: int) -> str:
        """Id from the headword and catalog offset.

        Not unique when the same headword sits at the same offset of two
        different catalogs; ids are only compared within one catalog.
        """
        return f"{record.headword}-{offset}"

    def create_learning_word(self, record: WordRecord, offset: int) -> LearningWord:
        """Fresh learning word with zeroed counters."""
        return LearningWord(record=record, id=self.make_id(record, offset))

    def build_queue(self, page_records: list[tuple[int, WordRecord]]) -> list[LearningWord]:
        """Materialize a page (offset, record pairs) into a fresh queue."""
        return [self.create_learning_word(record, offset) for offset, record in page_records]

    def required_correct(self, word: LearningWord) -> int:
        """Correct answers after a miss needed before the word is learned."""
        return self.mastery_threshold if word.miss_count >= self.max_miss_count else 1

    def register_miss(self, word: LearningWord) -> None:
        """Apply a miss: bump (capped) miss count and restart confirmation."""
        word.miss_count = min(word.miss_count + 1, self.max_miss_count)
        word.correct_after_miss = 0
        word.state = WordState.CONSOLIDATING

    def register_correct(self, word: LearningWord) -> bool:
        """Apply a correct answer.

        Returns:
            True if the word is now learned and should leave the queue
        """
        if word.miss_count == 0:
            word.state = WordState.LEARNED
            return True

        word.correct_after_miss += 1
        if word.correct_after_miss >= self.required_correct(word):
            word.state = WordState.LEARNED
            return True
        return False
