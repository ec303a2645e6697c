"""Null presenter for testing (no output)."""

from word_drill.models import LearningStats, LearningWord, ViewMode


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_success(self, message: str) -> None:
        """Display a success message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_word(self, word: LearningWord, translation_visible: bool) -> None:
        """Display the current word (no-op)."""
        pass

    def show_stats(self, stats: LearningStats) -> None:
        """Display page progress (no-op)."""
        pass

    def show_view(self, words: list[LearningWord], mode: ViewMode) -> None:
        """Display a projected word list (no-op)."""
        pass
