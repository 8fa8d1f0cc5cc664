"""Tests for process snapshot collection."""

import os
from types import SimpleNamespace

import psutil

from memusage import monitor
from memusage.models import ProcessRecord
from memusage.monitor import collect_snapshot


class _FakeProcess:
    """Stand-in for psutil.Process with pre-filled info."""

    def __init__(self, pid, info=None, error=None):
        self.pid = pid
        self.info = info
        self._error = error

    def oneshot(self):
        if self._error is not None:
            raise self._error
        return self

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def test_collect_snapshot_returns_records():
    """Test collect_snapshot returns a list of ProcessRecord."""
    records = collect_snapshot()

    assert isinstance(records, list)
    assert len(records) > 0
    for record in records:
        assert isinstance(record, ProcessRecord)
        assert isinstance(record.resident_bytes, int)
        assert isinstance(record.virtual_bytes, int)


def test_collect_snapshot_includes_current_process():
    records = collect_snapshot()
    own = [record for record in records if record.pid == os.getpid()]

    assert len(own) == 1
    assert own[0].resident_bytes > 0
    assert own[0].virtual_bytes >= own[0].resident_bytes


def test_collect_snapshot_skips_vanished_processes(monkeypatch):
    """Test processes that exit or deny access mid-walk are skipped."""
    procs = [
        _FakeProcess(1, {"pid": 1, "name": "init", "memory_info": SimpleNamespace(rss=10, vms=20)}),
        _FakeProcess(2, error=psutil.NoSuchProcess(2)),
        _FakeProcess(3, error=psutil.AccessDenied(3)),
        _FakeProcess(4, error=psutil.ZombieProcess(4)),
    ]
    monkeypatch.setattr(monitor.psutil, "process_iter", lambda attrs=None: iter(procs))

    records = collect_snapshot()

    assert records == [ProcessRecord(pid=1, name="init", resident_bytes=10, virtual_bytes=20)]


def test_collect_snapshot_defaults_missing_fields(monkeypatch):
    procs = [_FakeProcess(9, {"pid": 9, "name": None, "memory_info": None})]
    monkeypatch.setattr(monitor.psutil, "process_iter", lambda attrs=None: iter(procs))

    records = collect_snapshot()

    assert records == [ProcessRecord(pid=9, name="", resident_bytes=0, virtual_bytes=0)]
