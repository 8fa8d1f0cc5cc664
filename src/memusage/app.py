"""memusage - Command-line entry point."""

import argparse
import logging
import sys
from collections.abc import Callable, Iterable, Sequence
from typing import NoReturn

from memusage.matcher import select
from memusage.models import ProcessRecord, UnitSystem
from memusage.monitor import collect_snapshot
from memusage.table import render_text

USAGE = """\
Usage: memusage <process> [prefix]

Arguments:
  Required:
                      <process>
                      The name of the target process to monitor.

  Optional:
                      [prefix]
                      Format for displaying memory sizes:
                      `decimal` for base 10 (default),
                      `binary` for base 2.

Example:
  memusage my_process decimal
  memusage my_process binary"""


class UsageError(Exception):
    """Raised when the command line cannot be parsed."""


class ArgumentParser(argparse.ArgumentParser):
    """Parser that reports errors as UsageError instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def parse_prefix(value: str) -> UnitSystem:
    """Map a case-insensitive prefix name to a UnitSystem."""
    try:
        return UnitSystem(value.lower())
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid prefix '{value}'") from None


def build_parser() -> ArgumentParser:
    """Build the command-line parser."""
    parser = ArgumentParser(prog="memusage", add_help=False)
    parser.add_argument("process")
    parser.add_argument(
        "prefix",
        nargs="?",
        type=parse_prefix,
        default=UnitSystem.DECIMAL,
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """
    Parse the command line.

    Every argument is positional, so a filter such as "-bash" is taken
    literally rather than as an option.
    """
    if argv is None:
        argv = sys.argv[1:]
    return build_parser().parse_args(["--", *argv])


def configure_logging() -> None:
    """Send memusage warnings to stderr as 'LEVEL: message' lines."""
    logger = logging.getLogger("memusage")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.WARNING)


def main(
    argv: Sequence[str] | None = None,
    snapshot_source: Callable[[], Iterable[ProcessRecord]] = collect_snapshot,
) -> int:
    """
    Run memusage and return the exit status.

    Args:
        argv: Command-line arguments without the program name.
        snapshot_source: Callable returning the process snapshot.
    """
    configure_logging()

    try:
        args = parse_args(argv)
    except UsageError as exc:
        print(f"{exc}\n{USAGE}", file=sys.stderr)
        return 1

    rows = select(snapshot_source(), args.process, args.prefix)
    print(render_text(rows))
    return 0


def run() -> None:
    """Entry point for the memusage console script."""
    sys.exit(main())


if __name__ == "__main__":
    run()
