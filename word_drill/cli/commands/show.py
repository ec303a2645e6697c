"""CLI command for listing words in a view layout."""

from word_drill.presenters import ConsolePresenter

from .common import open_engine


def show_command(args) -> int:
    """Execute the show subcommand."""
    presenter = ConsolePresenter()
    engine = open_engine(args, presenter)

    if not engine.catalog:
        presenter.show_warning("No word list loaded. Use 'word_drill load <file>' first.")
        return 1

    if args.mode is not None:
        engine.set_view_mode(args.mode)

    presenter.show_view(engine.get_words_for_view(), engine.view_mode)
    return 0
