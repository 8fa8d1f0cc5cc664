"""Shared fixtures for memusage tests."""

import pytest

from memusage.models import ProcessRecord


@pytest.fixture()
def bash_snapshot():
    return [
        ProcessRecord(pid=200, name="rebash-helper", resident_bytes=2_048_000, virtual_bytes=8_192_000),
        ProcessRecord(pid=1, name="systemd", resident_bytes=12_000_000, virtual_bytes=170_000_000),
        ProcessRecord(pid=100, name="bash", resident_bytes=5_242_880, virtual_bytes=10_485_760),
    ]
