"""Process selection by name substring."""

import logging
from collections.abc import Iterable

from memusage.models import MatchedRow, ProcessRecord, UnitSystem
from memusage.units import format_memory

logger = logging.getLogger(__name__)


def decode_name(name: str | bytes) -> str | None:
    """
    Return the process name as text, or None if it is not valid text.

    psutil hands back undecodable names as str with lone surrogates, so text
    is checked by encoding it as well.
    """
    try:
        if isinstance(name, bytes):
            return name.decode("utf-8")
        name.encode("utf-8")
    except UnicodeError:
        return None
    return name


def select(
    snapshot: Iterable[ProcessRecord],
    target: str,
    unit_system: UnitSystem,
) -> list[MatchedRow]:
    """
    Select processes whose name contains target and format their memory.

    Rows are ordered by where the target first appears in the name; processes
    with the same offset keep their snapshot order.
    """
    rows: list[MatchedRow] = []

    for record in snapshot:
        name = decode_name(record.name)
        if name is None:
            logger.warning(
                "Failed to convert name of pid %s: invalid unicode %r",
                record.pid,
                record.name,
            )
            continue

        match_offset = name.find(target)
        if match_offset < 0:
            continue

        rows.append(
            MatchedRow(
                pid=str(record.pid),
                name=name,
                match_offset=match_offset,
                memory=format_memory(record.resident_bytes, unit_system),
                virtual_memory=format_memory(record.virtual_bytes, unit_system),
            )
        )

    rows.sort(key=lambda row: row.match_offset)
    return rows
