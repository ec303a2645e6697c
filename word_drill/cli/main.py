"""Main CLI entry point for word_drill."""

import argparse
import sys

from word_drill import __version__
from word_drill.cli.commands import drill, load, reset, show, status
from word_drill.exceptions import WordDrillException
from word_drill.models import ViewMode
from word_drill.presenters import ConsolePresenter


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="word_drill",
        description="Drill vocabulary one word at a time",
        epilog="Use 'word_drill <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Folder for saved words, progress and config (default: ~/.word_drill)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # word_drill load <file>
    load_parser = subparsers.add_parser(
        "load",
        help="Load a word list and start from the first page",
        description="Validate a JSON word list and replace the current catalog",
    )
    load_parser.add_argument("file", help="Path to word list (.json or .txt containing JSON)")

    # word_drill drill
    subparsers.add_parser(
        "drill",
        help="Start an interactive drilling session",
        description="Reveal words and mark them known or missed; progress is saved as you go",
    )

    # word_drill show
    show_parser = subparsers.add_parser(
        "show",
        help="List words in one of the view layouts",
        description="v1: current word, v2: queue order, v3: page order, v4: whole catalog",
    )
    show_parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ViewMode],
        default=None,
        help="View layout (default: last used)",
    )

    # word_drill status
    subparsers.add_parser(
        "status",
        help="Show page progress",
        description="Show current page, clean passes and misses in the current pass",
    )

    # word_drill reset
    subparsers.add_parser(
        "reset",
        help="Restart the current word list from the first page",
        description="Discard progress and start the loaded word list over",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    commands = {
        "load": load.load_command,
        "drill": drill.drill_command,
        "show": show.show_command,
        "status": status.status_command,
        "reset": reset.reset_command,
    }
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        return 1

    try:
        return command(args)
    except WordDrillException as e:
        ConsolePresenter().show_error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
