"""CLI command for showing page progress."""

from word_drill.presenters import ConsolePresenter

from .common import open_engine


def status_command(args) -> int:
    """Execute the status subcommand."""
    presenter = ConsolePresenter()
    engine = open_engine(args, presenter)

    if not engine.catalog:
        presenter.show_warning("No word list loaded. Use 'word_drill load <file>' first.")
        return 1

    presenter.show_stats(engine.stats)
    presenter.show_info(f"  Words left in queue: {len(engine.queue)}")
    if engine.is_finished:
        presenter.show_success("All words learned")
    return 0
