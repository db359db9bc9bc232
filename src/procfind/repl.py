"""Blocking read-eval-print loop for process lookups."""

import logging
import sys
from collections.abc import Callable
from typing import TextIO

from procfind.autocomplete import AutocompleteProvider
from procfind.config import PROMPT
from procfind.errors import DetailLookupError, NoMatchError
from procfind.formatting import format_bytes, format_duration
from procfind.lookup import ProcessLookup
from procfind.models import ProcessDetail

try:
    import readline
except ImportError:  # Windows has no readline; run without completion
    readline = None

logger = logging.getLogger(__name__)


class ReadlineCompleter:
    """Adapts an AutocompleteProvider to readline's completer protocol."""

    def __init__(self, provider: AutocompleteProvider) -> None:
        self._provider = provider
        self._matches: list[str] = []

    def __call__(self, text: str, state: int) -> str | None:
        """Return the state-th suggestion for text, or None when exhausted."""
        if state == 0:
            self._matches = self._provider.complete(text)
        if state < len(self._matches):
            return self._matches[state]
        return None


def _uses_libedit() -> bool:
    """Check whether readline is backed by libedit, as on macOS."""
    backend = getattr(readline, "backend", None)
    if backend is not None:
        return backend == "editline"
    return "libedit" in (readline.__doc__ or "")


def _tab_binding() -> str:
    """The init line that binds Tab to completion for the active backend."""
    if _uses_libedit():
        return "bind ^I rl_complete"
    return "tab: complete"


def install_completer(provider: AutocompleteProvider) -> bool:
    """
    Hook tab completion into readline, completing the whole line.

    Returns:
        True if readline is available and the completer was installed.
    """
    if readline is None:
        logger.debug("readline unavailable, tab completion disabled")
        return False

    readline.set_completer(ReadlineCompleter(provider))
    # Complete the whole line so "<pid> - <name>" suggestions replace it
    readline.set_completer_delims("")
    readline.parse_and_bind(_tab_binding())
    return True


def render_detail(detail: ProcessDetail) -> str:
    """Render the detail block printed for a matched process."""
    return "\n".join(
        [
            f"PID: {detail.pid}",
            f"Name: {detail.name}",
            f"Memory Usage: {format_bytes(detail.memory_bytes)}",
            f"CPU Time: {format_duration(detail.cpu_time_ms)}",
            f"CPU Usage: {int(detail.cpu_percent)}%",
        ]
    )


def run_repl(
    lookup: ProcessLookup,
    *,
    prompt: str = PROMPT,
    read_line: Callable[[str], str] = input,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """
    Read queries until interrupt or end of input, printing the best match for each.

    Args:
        lookup: Resolves queries and fetches details.
        prompt: Prompt shown before each line.
        read_line: Reads one line; raises EOFError or KeyboardInterrupt to stop.
        out: Stream for results. Defaults to stdout.
        err: Stream for per-query errors. Defaults to stderr.

    Returns:
        The process exit status, always 0.
    """
    out = out or sys.stdout
    err = err or sys.stderr

    while True:
        try:
            line = read_line(prompt)
        except KeyboardInterrupt:
            print("CTRL-C", file=out)
            break
        except EOFError:
            print("CTRL-D", file=out)
            break

        try:
            candidate = lookup.resolve(line)
            detail = lookup.describe(candidate.pid)
        except KeyboardInterrupt:
            # Interrupted mid-query, e.g. a slow CPU time lookup
            print("CTRL-C", file=out)
            break
        except NoMatchError as exc:
            print(f"Error: {exc}", file=err)
            continue
        except DetailLookupError as exc:
            print(f"Error: {exc}", file=err)
            continue

        print(render_detail(detail), file=out)

    return 0
