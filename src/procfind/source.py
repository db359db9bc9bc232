"""Process data collection for procfind, backed by psutil."""

import logging
import time
from typing import Protocol

import psutil

from procfind.errors import DetailLookupError, PerProcessError, SnapshotError
from procfind.models import ProcessDetail, ProcessRecord

logger = logging.getLogger(__name__)

# Errors that only affect a single process
_PER_PROCESS_ERRORS = (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess)


class ProcessSource(Protocol):
    """Anything that can enumerate processes and look up a single pid."""

    def snapshot(self) -> list[ProcessRecord]: ...

    def cpu_time(self, pid: int) -> int: ...

    def detail(self, pid: int) -> ProcessDetail: ...


def _cpu_time_ms(cpu_times) -> int:
    return int((cpu_times.user + cpu_times.system) * 1000)


class PsutilProcessSource:
    """
    Process source that reads the live process table using psutil.

    Processes that die mid-enumeration, deny access, or are zombies are
    skipped. Only a failure of the enumeration itself is fatal.
    """

    def snapshot(self) -> list[ProcessRecord]:
        """
        Collect a record for every readable process.

        Raises:
            SnapshotError: If the process table cannot be enumerated.
        """
        records: list[ProcessRecord] = []

        try:
            # Unreadable attributes come back as None rather than raising
            for proc in psutil.process_iter(attrs=["pid", "name", "memory_info"]):
                record = self._record_from_info(proc.info)
                if record is not None:
                    records.append(record)
        except (psutil.Error, OSError) as exc:
            raise SnapshotError(f"Unable to list processes: {exc}") from exc

        logger.info("Captured %d processes", len(records))
        return records

    @staticmethod
    def _record_from_info(info: dict) -> ProcessRecord | None:
        """Build a record from process_iter info, or None if a field is unreadable."""
        pid = info.get("pid", 0)
        # pid 0 is the kernel's idle/swapper task on some platforms
        if not pid:
            return None

        name = info.get("name")
        mem_info = info.get("memory_info")
        if not name or mem_info is None:
            logger.debug("Skipping pid %d: name or memory info unavailable", pid)
            return None

        return ProcessRecord(pid=pid, name=name, memory_bytes=mem_info.rss)

    def cpu_time(self, pid: int) -> int:
        """
        Get the total (user + system) CPU time of a process in milliseconds.

        Raises:
            PerProcessError: If the process has exited or denies access.
        """
        try:
            return _cpu_time_ms(psutil.Process(pid).cpu_times())
        except _PER_PROCESS_ERRORS as exc:
            raise PerProcessError(pid, f"Unable to retrieve CPU times for PID {pid}") from exc

    def detail(self, pid: int) -> ProcessDetail:
        """
        Fetch current details of a process for display.

        Raises:
            DetailLookupError: If the process has exited or denies access.
        """
        try:
            proc = psutil.Process(pid)
            with proc.oneshot():
                name = proc.name()
                memory_rss = proc.memory_info().rss
                cpu_time_ms = _cpu_time_ms(proc.cpu_times())
                create_time = proc.create_time()
        except _PER_PROCESS_ERRORS as exc:
            raise DetailLookupError(pid, f"Unable to retrieve the process info for PID {pid}") from exc

        # Average usage over the process lifetime
        uptime = time.time() - create_time
        cpu_percent = (cpu_time_ms / 1000 / uptime) * 100 if uptime > 0 else 0.0

        return ProcessDetail(
            pid=pid,
            name=name,
            memory_bytes=memory_rss,
            cpu_time_ms=cpu_time_ms,
            cpu_percent=cpu_percent,
        )
