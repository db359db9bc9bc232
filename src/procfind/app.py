"""procfind - Textual front end."""

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal
from textual.widgets import DataTable, Footer, Input, OptionList, Static

from procfind.autocomplete import AutocompleteProvider
from procfind.errors import DetailLookupError, NoMatchError
from procfind.formatting import format_bytes, format_duration
from procfind.lookup import ProcessLookup
from procfind.models import ProcessDetail, ScoredCandidate


class DetailPanel(Static):
    """Panel showing the details of the selected process."""

    DEFAULT_CSS = """
    DetailPanel {
        width: 1fr;
        height: auto;
        min-height: 7;
        padding: 1;
        background: $surface;
    }
    """

    def __init__(self, *args, **kwargs) -> None:
        """Initialize DetailPanel."""
        # Process names are shown verbatim, never parsed as markup
        super().__init__("No process selected", *args, markup=False, **kwargs)
        self._detail: ProcessDetail | None = None

    @property
    def detail(self) -> ProcessDetail | None:
        """Get the process currently shown."""
        return self._detail

    def show_detail(self, detail: ProcessDetail) -> None:
        """Display the given process details."""
        self._detail = detail
        self.update(
            f"PID     {detail.pid}\n"
            f"Name    {detail.name}\n"
            f"Memory  {format_bytes(detail.memory_bytes)}\n"
            f"CPU     {format_duration(detail.cpu_time_ms)} ({int(detail.cpu_percent)}%)"
        )

    def clear_detail(self) -> None:
        """Reset the panel to its empty state."""
        self._detail = None
        self.update("No process selected")


class MatchTable(Container):
    """Container for the table of ranked matches."""

    DEFAULT_CSS = """
    MatchTable {
        height: 1fr;
        border: solid $primary;
    }
    """

    def __init__(self, *args, **kwargs) -> None:
        """Initialize MatchTable."""
        super().__init__(*args, **kwargs)
        self._current_pids: list[int] = []

    @property
    def pids(self) -> list[int]:
        """Get the pids shown, in ranked order."""
        return list(self._current_pids)

    def compose(self) -> ComposeResult:
        """Compose the match table."""
        yield DataTable(id="match-table")

    def on_mount(self) -> None:
        """Initialize the data table when mounted."""
        table = self.query_one("#match-table", DataTable)
        table.cursor_type = "row"

        table.add_column("SCORE", key="score", width=6)
        table.add_column("PID", key="pid", width=8)
        table.add_column("RES", key="rss", width=12)
        table.add_column("Name", key="name")

    def update_matches(self, matches: list[ScoredCandidate]) -> None:
        """Replace the table contents with the given matches."""
        table = self.query_one("#match-table", DataTable)
        table.clear()
        for match in matches:
            table.add_row(
                f"{match.score:.2f}",
                str(match.pid),
                format_bytes(match.memory_bytes),
                Text(match.name),
                key=str(match.pid),
            )
        self._current_pids = [match.pid for match in matches]


class ProcfindApp(App):
    """Main procfind application."""

    TITLE = "procfind"
    SUB_TITLE = "Find a process by name or pid"

    CSS = """
    Screen {
        layout: vertical;
    }

    #query {
        dock: top;
    }

    Horizontal {
        height: auto;
    }

    #suggestions {
        width: 1fr;
        height: 9;
    }
    """

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, lookup: ProcessLookup, autocomplete: AutocompleteProvider) -> None:
        """Initialize the ProcfindApp."""
        super().__init__()
        self._lookup = lookup
        self._autocomplete = autocomplete
        self._selected: ScoredCandidate | None = None
        self._last_error: str | None = None

    @property
    def selected(self) -> ScoredCandidate | None:
        """Get the match chosen by the last query."""
        return self._selected

    @property
    def last_error(self) -> str | None:
        """Get the error reported by the last query, if any."""
        return self._last_error

    def compose(self) -> ComposeResult:
        """Compose the application layout."""
        yield Input(placeholder="Enter PID or process name (sort:memory, sort:cpu)", id="query")
        yield Horizontal(
            OptionList(id="suggestions"),
            DetailPanel(id="detail"),
        )
        yield MatchTable()
        yield Footer()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Refresh suggestions for the text typed so far."""
        suggestions = self.query_one("#suggestions", OptionList)
        suggestions.clear_options()
        if event.value:
            suggestions.add_options(Text(s) for s in self._autocomplete.complete(event.value))

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Copy the chosen suggestion into the query input."""
        query_input = self.query_one("#query", Input)
        query_input.value = str(event.option.prompt)
        query_input.focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Resolve the submitted query and show the best match."""
        self.run_query(event.value)

    def run_query(self, raw: str) -> None:
        """Rank processes for a raw query and display the top one."""
        detail_panel = self.query_one("#detail", DetailPanel)
        match_table = self.query_one(MatchTable)

        matches = self._lookup.best_matches(raw)
        match_table.update_matches(matches)
        self._selected = matches[0] if matches else None

        if self._selected is None:
            self._report_error(NoMatchError(raw))
            return

        try:
            detail = self._lookup.describe(self._selected.pid)
        except DetailLookupError as exc:
            self._report_error(exc)
            return

        self._last_error = None
        detail_panel.show_detail(detail)

    def _report_error(self, exc: Exception) -> None:
        """Clear the detail panel and notify the user of a failed query."""
        self._last_error = str(exc)
        self.query_one("#detail", DetailPanel).clear_detail()
        self.notify(str(exc), severity="error")
