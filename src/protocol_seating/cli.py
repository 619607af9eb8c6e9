"""Command line interface for protocol seating."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .csv_loader import load_guests, save_plan
from .plan import DEFAULT_TITLE, build_plan, format_plan

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Protocol seating arrangement for a single row")
    parser.add_argument("--guests", required=True, type=Path, help="Path to guests.csv")
    parser.add_argument("--title", default=DEFAULT_TITLE, help="Title printed above the plan.")
    parser.add_argument("--out-plan", type=Path,
                        help="Write plan CSV: seat,serial,label.")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log placement details.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point used by ``protocol-seating`` and ``python -m protocol_seating.cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    guests = load_guests(args.guests)
    plan = build_plan(guests, title=args.title)

    if not plan.ok:
        print(format_plan(plan), file=sys.stderr)
        return 1

    print(format_plan(plan))

    if args.out_plan:
        out = save_plan(plan, args.out_plan)
        LOGGER.info("Wrote %d seats to %s", len(plan.arrangement), out)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
