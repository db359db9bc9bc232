"""Exceptions raised by procfind."""


class ProcfindError(Exception):
    """Base class for all procfind errors."""


class SnapshotError(ProcfindError):
    """The process table itself could not be enumerated."""


class PerProcessError(ProcfindError):
    """A lookup for a single pid failed."""

    def __init__(self, pid: int, message: str) -> None:
        super().__init__(message)
        self.pid = pid


class DetailLookupError(PerProcessError):
    """The selected process vanished or denied access before its details were read."""


class NoMatchError(ProcfindError):
    """No process scored above the match threshold."""

    def __init__(self, query: str) -> None:
        super().__init__(f"No matching process found for input '{query}'")
        self.query = query
