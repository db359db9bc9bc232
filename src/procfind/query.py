"""Parsing of raw query lines into a search term and sort directive."""

from dataclasses import dataclass

from procfind.config import CPU_DIRECTIVE, DIRECTIVE_TOKEN, MEMORY_DIRECTIVE
from procfind.models import SortDirective


@dataclass(slots=True, frozen=True)
class ParsedQuery:
    """A query split into what to search for and how to order the results."""

    term: str
    directive: SortDirective


def parse_query(raw: str) -> ParsedQuery:
    """
    Split a raw input line into a search term and a sort directive.

    The term is everything before the first "sort:", stripped. The directive
    is detected by plain substring search over the whole line, so a name that
    contains "sort:memory" also selects memory ordering. Unknown directives
    are ignored.
    """
    term = raw.split(DIRECTIVE_TOKEN, 1)[0].strip()

    if MEMORY_DIRECTIVE in raw:
        directive = SortDirective.MEMORY
    elif CPU_DIRECTIVE in raw:
        directive = SortDirective.CPU_TIME
    else:
        directive = SortDirective.NONE

    return ParsedQuery(term=term, directive=directive)
