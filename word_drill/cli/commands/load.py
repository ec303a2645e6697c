"""CLI command for loading a word list."""

from pathlib import Path

from word_drill.exceptions import WordDrillException
from word_drill.presenters import ConsolePresenter
from word_drill.services import CatalogService

from .common import open_engine


def load_command(args) -> int:
    """Execute the load subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()

    try:
        records = CatalogService().load_file(Path(args.file))
    except WordDrillException as e:
        presenter.show_error(str(e))
        return 1

    engine = open_engine(args, presenter)
    engine.load_catalog(records)

    stats = engine.stats
    presenter.show_success(f"Loaded {len(records)} words ({stats.total_pages} pages)")
    return 0
