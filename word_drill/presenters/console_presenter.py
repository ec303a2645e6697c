"""Console presenter for CLI output."""

from word_drill.models import LearningStats, LearningWord, ViewMode
from word_drill.utils import format_word_line


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_word(self, word: LearningWord, translation_visible: bool) -> None:
        """Display the word being drilled, with its translation if revealed."""
        print("\n" + "=" * 60)
        print(format_word_line(word, ViewMode.V1))
        if not translation_visible:
            print("  (press Enter to reveal)")
            return

        for i, definition in enumerate(word.definitions, 1):
            print(f"  {i}. {definition}")
        for example in word.examples:
            print(f"     > {example}")

    def show_stats(self, stats: LearningStats) -> None:
        """Display page progress."""
        page = stats.current_page + 1 if stats.total_pages else 0
        print(f"\nPage {page} / {stats.total_pages}")
        print(f"  Clean passes: {stats.hq_sets}")
        print(f"  Missed this pass: {stats.missed_in_current_set}")

    def show_view(self, words: list[LearningWord], mode: ViewMode) -> None:
        """Display a projected word list."""
        print(f"\nView {mode.value} ({len(words)} words):")
        print("=" * 60)
        for i, word in enumerate(words, 1):
            print(f"{i:3d}. {format_word_line(word, mode)}")
