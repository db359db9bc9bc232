"""Prefix-based suggestions for the line editor."""

from procfind.index import ProcessIndex


class AutocompleteProvider:
    """
    Suggests "<pid> - <name>" strings for the text typed so far.

    A record matches when its name starts with the text (ignoring case) or
    its pid starts with the text. Matches come back in index order with no
    scoring and no limit. This never touches the OS.
    """

    def __init__(self, index: ProcessIndex) -> None:
        self._index = index

    def complete(self, text: str) -> list[str]:
        """Get every suggestion for the given prefix."""
        text_lower = text.lower()
        return [
            record.display
            for record in self._index
            if record.name.lower().startswith(text_lower) or str(record.pid).startswith(text)
        ]
