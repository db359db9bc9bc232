"""The once-built, read-only process index."""

import logging
from collections.abc import Iterable, Iterator, Sequence

from procfind.models import ProcessRecord
from procfind.source import ProcessSource

logger = logging.getLogger(__name__)


class ProcessIndex(Sequence[ProcessRecord]):
    """
    Immutable, ordered snapshot of process records.

    Records keep the order they were enumerated in, which later stable sorts
    use to break ties. Pids are unique within an index.
    """

    __slots__ = ("_records",)

    def __init__(self, records: Iterable[ProcessRecord]) -> None:
        """
        Initialize the index.

        Args:
            records: Process records in enumeration order.

        Raises:
            ValueError: If two records share a pid.
        """
        self._records: tuple[ProcessRecord, ...] = tuple(records)
        seen: set[int] = set()
        for record in self._records:
            if record.pid in seen:
                raise ValueError(f"Duplicate pid {record.pid} in process snapshot")
            seen.add(record.pid)

    @classmethod
    def from_source(cls, source: ProcessSource) -> "ProcessIndex":
        """Build an index from a single snapshot of the given source."""
        index = cls(source.snapshot())
        logger.debug("Built process index with %d records", len(index))
        return index

    def __getitem__(self, item):
        return self._records[item]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ProcessRecord]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"ProcessIndex({len(self._records)} records)"
