"""
Command-line front end.

Usage:
    stud-ev Ah Kh Qh Jh
    stud-ev Ac Kc 2d 3d --paytable paytable.json
    stud-ev 9c 9d 2h 4s --config config/generous.yaml --log-level DEBUG
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from stud_ev.ev.enumerator import compute_ev
from stud_ev.ev.report import format_report
from stud_ev.shared.config_loader import load_config
from stud_ev.shared.payout import load_payout_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stud-ev",
        description=(
            "Expected value of the final hand with two player cards and two "
            "community cards known. Enumerates the last community card."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "cards",
        nargs="*",
        metavar="CARD",
        help="Player 1, Player 2, Board 1, Board 2 (e.g., Ah Kd 7c 10s)",
    )
    parser.add_argument(
        "--paytable",
        help="JSON or YAML file with a complete payout table",
    )
    parser.add_argument(
        "--config",
        help="YAML config file (payout overrides, log level)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=args.log_level or config.system.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        payout_table = load_payout_table(args.paytable) if args.paytable else config.payout
        result = compute_ev(args.cards, payout_table)
    except (FileNotFoundError, ValueError) as e:
        # EVInputError is a ValueError, as are unparseable card strings
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_report(result, payout_table))
    return 0


if __name__ == "__main__":
    sys.exit(main())
