"""CLI command for restarting the current word list."""

from word_drill.presenters import ConsolePresenter

from .common import open_engine


def reset_command(args) -> int:
    """Execute the reset subcommand."""
    presenter = ConsolePresenter()
    engine = open_engine(args, presenter)

    if not engine.catalog:
        presenter.show_warning("No word list loaded. Use 'word_drill load <file>' first.")
        return 1

    engine.reset()
    presenter.show_success("Progress reset to page 1")
    return 0
