"""Data models for procfind."""

from dataclasses import dataclass
from enum import Enum


@dataclass(slots=True, frozen=True)
class ProcessRecord:
    """Immutable record of a process captured at snapshot time."""

    pid: int
    name: str
    memory_bytes: int  # Resident set size

    @property
    def display(self) -> str:
        """The "<pid> - <name>" string shown in suggestions."""
        return f"{self.pid} - {self.name}"


@dataclass(slots=True, frozen=True)
class ScoredCandidate:
    """A process record paired with its similarity to a query."""

    score: float  # 0.0 - 1.0
    pid: int
    name: str
    memory_bytes: int


@dataclass(slots=True, frozen=True)
class ProcessDetail:
    """Freshly fetched details for the process selected by a query."""

    pid: int
    name: str
    memory_bytes: int
    cpu_time_ms: int
    cpu_percent: float


class SortDirective(Enum):
    """Alternate orderings a query can request."""

    NONE = "none"
    MEMORY = "memory"
    CPU_TIME = "cpu"
