"""Resolution of raw queries to processes."""

import logging

from procfind.errors import NoMatchError
from procfind.index import ProcessIndex
from procfind.models import ProcessDetail, ScoredCandidate
from procfind.query import parse_query
from procfind.ranking import Ranker
from procfind.scoring import score_index
from procfind.source import ProcessSource

logger = logging.getLogger(__name__)


class ProcessLookup:
    """
    Matches queries against one process index and fetches details from a source.

    The index is only read; the source is used for CPU time ordering and for
    the detail of the selected process.
    """

    def __init__(self, index: ProcessIndex, source: ProcessSource, ranker: Ranker | None = None) -> None:
        self._index = index
        self._source = source
        self._ranker = ranker or Ranker(cpu_time=source.cpu_time)

    @property
    def index(self) -> ProcessIndex:
        """Get the process index."""
        return self._index

    def best_matches(self, raw: str) -> list[ScoredCandidate]:
        """Get all candidates for a raw query, best first."""
        query = parse_query(raw)
        if not query.term:
            return []

        candidates = score_index(query.term, self._index)
        matches = self._ranker.rank(candidates, query.directive)
        logger.debug(
            "Query %r (%s): %d of %d processes matched",
            query.term,
            query.directive.value,
            len(matches),
            len(candidates),
        )
        return matches

    def resolve(self, raw: str) -> ScoredCandidate:
        """
        Get the single best match for a raw query.

        Raises:
            NoMatchError: If nothing scores above the threshold.
        """
        matches = self.best_matches(raw)
        if not matches:
            raise NoMatchError(raw)
        return matches[0]

    def describe(self, pid: int) -> ProcessDetail:
        """
        Fetch current details for a matched pid.

        Raises:
            DetailLookupError: If the process is gone or denies access.
        """
        return self._source.detail(pid)
