"""Process snapshot collection for memusage."""

import logging

import psutil

from memusage.models import ProcessRecord

logger = logging.getLogger(__name__)

# Attributes to fetch in oneshot
ATTRS = ["pid", "name", "memory_info"]


def collect_snapshot() -> list[ProcessRecord]:
    """
    Collect a single snapshot of all visible processes.

    Uses psutil.process_iter() with the oneshot() context manager.
    Processes that exit or deny access during the walk are skipped.
    """
    records: list[ProcessRecord] = []

    for proc in psutil.process_iter(attrs=ATTRS):
        try:
            with proc.oneshot():
                info = proc.info

                # Memory info is None when access was denied
                mem_info = info.get("memory_info")
                resident = mem_info.rss if mem_info else 0
                virtual = mem_info.vms if mem_info else 0

                records.append(
                    ProcessRecord(
                        pid=info.get("pid", proc.pid),
                        name=info.get("name") or "",
                        resident_bytes=resident,
                        virtual_bytes=virtual,
                    )
                )

        except (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess) as exc:
            logger.debug("Skipping pid %s: %s", proc.pid, exc)
            continue

    return records
