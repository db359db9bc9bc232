"""Command-line entry point for procfind."""

import argparse
import logging
import sys

from procfind.autocomplete import AutocompleteProvider
from procfind.config import DEFAULT_LOG_LEVEL, LOG_FORMAT
from procfind.errors import SnapshotError
from procfind.index import ProcessIndex
from procfind.lookup import ProcessLookup
from procfind.repl import install_completer, run_repl
from procfind.source import PsutilProcessSource

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="procfind",
        description="Find a running process by name or pid. Append sort:memory or sort:cpu to reorder matches.",
    )
    parser.add_argument("--tui", action="store_true", help="Use the full-screen interface instead of the prompt")
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else DEFAULT_LOG_LEVEL,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point for procfind."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    source = PsutilProcessSource()
    try:
        index = ProcessIndex.from_source(source)
    except SnapshotError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    lookup = ProcessLookup(index, source)
    provider = AutocompleteProvider(index)

    if args.tui:
        from procfind.app import ProcfindApp

        ProcfindApp(lookup, provider).run()
        return 0

    install_completer(provider)
    return run_repl(lookup)


if __name__ == "__main__":
    sys.exit(main())
