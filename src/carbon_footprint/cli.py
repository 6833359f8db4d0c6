"""Command-line entry point for the carbon footprint report.

Without arguments the reference emitters are reported to stdout. Failures are
reported on stderr with a non-zero exit status.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .report import build_reference_emitters, run
from .writers import build_footprint_table, format_footprint_table

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

LOGGER = logging.getLogger("carbon_footprint.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Report CO2 footprints for the reference building, car and bicycle."
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging threshold for diagnostics written to stderr (default: WARNING).",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="After the per-emitter reports, print a table of footprints and shares.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    status = run(build_reference_emitters, stdout=sys.stdout, stderr=sys.stderr)
    if status == 0 and args.summary:
        LOGGER.info("Writing footprint summary table")
        table = build_footprint_table(build_reference_emitters())
        sys.stdout.write(format_footprint_table(table) + "\n")
    return status


if __name__ == "__main__":
    sys.exit(main())
