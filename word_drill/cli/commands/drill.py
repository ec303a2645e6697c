"""CLI command for an interactive drilling session."""

from collections.abc import Callable

from word_drill.engine import LearningEngine
from word_drill.interfaces import PresenterProtocol
from word_drill.models import ViewMode
from word_drill.presenters import ConsolePresenter

from .common import open_engine

HELP_TEXT = (
    "Enter: reveal | k: known | m: missed | u: undo | "
    "1-4: view mode | v: show view | s: status | q: quit"
)

VIEW_KEYS = {"1": ViewMode.V1, "2": ViewMode.V2, "3": ViewMode.V3, "4": ViewMode.V4}


def handle_key(engine: LearningEngine, presenter: PresenterProtocol, key: str) -> bool:
    """Apply one keypress to the engine.

    Known and missed only count once the translation is revealed.

    Returns:
        False when the session should end
    """
    key = key.strip().lower()

    if key == "q":
        return False
    if key == "":
        engine.reveal()
    elif key == "k":
        if engine.translation_visible:
            engine.mark_known()
        else:
            presenter.show_info("Reveal the translation first")
    elif key == "m":
        if engine.translation_visible:
            engine.mark_missed()
        else:
            presenter.show_info("Reveal the translation first")
    elif key == "u":
        if not engine.undo():
            presenter.show_info("Nothing to undo")
    elif key in VIEW_KEYS:
        engine.set_view_mode(VIEW_KEYS[key])
        presenter.show_info(f"View mode: {engine.view_mode.value}")
    elif key == "v":
        presenter.show_view(engine.get_words_for_view(), engine.view_mode)
    elif key == "s":
        presenter.show_stats(engine.stats)
    else:
        presenter.show_info(HELP_TEXT)
    return True


def run_session(
    engine: LearningEngine,
    presenter: PresenterProtocol,
    input_func: Callable[[str], str] = input,
) -> None:
    """Prompt for keys until the user quits or every word is learned."""
    presenter.show_info(HELP_TEXT)
    presenter.show_stats(engine.stats)

    while True:
        word = engine.current_word()
        if word is None:
            presenter.show_success("Congratulations! You have learned all the words!")
            return

        presenter.show_word(word, engine.translation_visible)
        try:
            key = input_func("> ")
        except EOFError:
            return
        if not handle_key(engine, presenter, key):
            return


def drill_command(args, input_func: Callable[[str], str] | None = None) -> int:
    """Execute the drill subcommand.

    Args:
        args: Parsed command-line arguments
        input_func: Source of keypresses, defaults to input()

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()
    engine = open_engine(args, presenter)

    if not engine.catalog:
        presenter.show_warning("No word list loaded. Use 'word_drill load <file>' first.")
        return 1

    try:
        run_session(engine, presenter, input_func or input)
    except KeyboardInterrupt:
        presenter.show_info("\nSession interrupted, progress saved")
    return 0
