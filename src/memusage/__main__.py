"""Allow running memusage with ``python -m memusage``."""

from memusage.app import run

run()
