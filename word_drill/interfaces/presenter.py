"""Presenter protocol for output abstraction."""

from typing import Protocol

from word_drill.models import LearningStats, LearningWord, ViewMode


class PresenterProtocol(Protocol):
    """Interface for presenting output to user (CLI, GUI, etc).

    This protocol abstracts all output operations, allowing the same
    engine to work with different presentation layers.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_success(self, message: str) -> None:
        """Display a success message.

        Args:
            message: The success message to display
        """
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: The warning message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_word(self, word: LearningWord, translation_visible: bool) -> None:
        """Display the word currently being drilled.

        Args:
            word: The current learning word
            translation_visible: Whether definitions and examples are revealed
        """
        ...

    def show_stats(self, stats: LearningStats) -> None:
        """Display page progress.

        Args:
            stats: Snapshot of the learning statistics
        """
        ...

    def show_view(self, words: list[LearningWord], mode: ViewMode) -> None:
        """Display a projected word list.

        Args:
            words: Words produced by the view projector
            mode: Layout the words were projected for
        """
        ...
