"""Data models for memusage."""

from dataclasses import dataclass
from enum import Enum


class UnitSystem(Enum):
    """Numeric base and labels used to render byte counts."""

    DECIMAL = "decimal"
    BINARY = "binary"

    @property
    def base(self) -> int:
        """Get the multiplier between two consecutive units."""
        return 1000 if self is UnitSystem.DECIMAL else 1024

    @property
    def labels(self) -> tuple[str, ...]:
        """Get the unit labels, smallest first."""
        if self is UnitSystem.DECIMAL:
            return ("B", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
        return ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB")


@dataclass(slots=True, frozen=True)
class ProcessRecord:
    """Immutable snapshot of a single process as reported by the OS."""

    pid: int
    name: str | bytes  # Raw OS name, not guaranteed to be valid text
    resident_bytes: int
    virtual_bytes: int


@dataclass(slots=True, frozen=True)
class MatchedRow:
    """A process that passed the name filter, ready for display."""

    pid: str
    name: str
    match_offset: int  # Sort key only, never displayed
    memory: str
    virtual_memory: str
