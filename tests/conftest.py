"""Shared fixtures for procfind tests."""

import pytest

from procfind.errors import DetailLookupError, PerProcessError
from procfind.index import ProcessIndex
from procfind.models import ProcessDetail, ProcessRecord


class FakeProcessSource:
    """In-memory process source with scriptable per-pid failures."""

    def __init__(
        self,
        records: list[ProcessRecord],
        cpu_times: dict[int, int] | None = None,
        vanished: set[int] | None = None,
    ) -> None:
        self.records = records
        self.cpu_times = cpu_times or {}
        self.vanished = vanished or set()
        self.cpu_time_calls: list[int] = []

    def snapshot(self) -> list[ProcessRecord]:
        return list(self.records)

    def cpu_time(self, pid: int) -> int:
        self.cpu_time_calls.append(pid)
        if pid in self.vanished:
            raise PerProcessError(pid, f"Unable to retrieve CPU times for PID {pid}")
        return self.cpu_times.get(pid, 0)

    def detail(self, pid: int) -> ProcessDetail:
        if pid in self.vanished:
            raise DetailLookupError(pid, f"Unable to retrieve the process info for PID {pid}")
        record = next(r for r in self.records if r.pid == pid)
        return ProcessDetail(
            pid=pid,
            name=record.name,
            memory_bytes=record.memory_bytes,
            cpu_time_ms=self.cpu_times.get(pid, 0),
            cpu_percent=1.5,
        )


@pytest.fixture
def records() -> list[ProcessRecord]:
    """The sshd/nginx/nginx-worker process table."""
    return [
        ProcessRecord(pid=100, name="sshd", memory_bytes=2048000),
        ProcessRecord(pid=205, name="nginx", memory_bytes=4096000),
        ProcessRecord(pid=999, name="nginx-worker", memory_bytes=1024000),
    ]


@pytest.fixture
def index(records) -> ProcessIndex:
    return ProcessIndex(records)


@pytest.fixture
def source(records) -> FakeProcessSource:
    return FakeProcessSource(records, cpu_times={100: 60000, 205: 10, 999: 5000})
