"""
Command-Line Interface for the registrar engine.

This module provides the command-line entry point. It parses arguments,
wires up a Registrar over a data directory of exported JSON files and
lets the Registrar display the results.

COMMANDS:
---------
    registrar progress 1042                 # progress report for a student
    registrar window "Spring 2026" --credits 110 --today 2025-11-05
    registrar windows "Spring 2026" --verify   # check schedule completeness
    registrar waiver 7 --approve instructor_1 --approve advisor
"""

import argparse
import logging
import sys
from datetime import date

from .data import DataLoader
from .models import ApprovalEvent, ApprovalParty, DenialPolicy
from .registrar import Registrar


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="registrar",
        description="Academic progress and registration eligibility reports",
    )
    parser.add_argument("--data-dir", default=None,
                        help="Directory of exported registrar data (default: ./data)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log skipped rows and state transitions")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("progress", help="GPA, SBC and degree progress for a student")
    p.add_argument("student_id")

    p = sub.add_parser("window", help="Which registration window applies today")
    p.add_argument("term", help='Term label, e.g. "Spring 2026"')
    p.add_argument("--credits", type=float, required=True, help="Earned credits")
    p.add_argument("--standing", default=None, help="Class standing (default: from credits)")
    p.add_argument("--today", type=date.fromisoformat, default=None,
                   help="Evaluate as of this date (YYYY-MM-DD)")

    p = sub.add_parser("windows", help="Show a term's registration schedule")
    p.add_argument("term")
    p.add_argument("--verify", action="store_true",
                   help="Report class standings/credit ranges with no window")

    p = sub.add_parser("waiver", help="Apply approval decisions to a time-conflict waiver")
    p.add_argument("waiver_id", type=int)
    p.add_argument("--approve", action="append", default=[],
                   choices=[party.value for party in ApprovalParty])
    p.add_argument("--deny", action="append", default=[],
                   choices=[party.value for party in ApprovalParty])
    p.add_argument("--policy", default=DenialPolicy.FINAL.value,
                   choices=[policy.value for policy in DenialPolicy])
    return parser


def main(argv=None) -> int:
    """Entry point for `registrar` / `python -m registrar`."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    loader = DataLoader(args.data_dir)

    try:
        if args.command == "progress":
            Registrar(loader).run_progress(args.student_id)

        elif args.command == "window":
            result = Registrar(loader).run_window_check(
                args.term, args.credits, args.today or date.today(), args.standing
            )
            return 0 if result.allowed else 1

        elif args.command == "windows":
            gaps = Registrar(loader).run_schedule(args.term, verify=args.verify)
            return 1 if gaps else 0

        elif args.command == "waiver":
            events = [ApprovalEvent(ApprovalParty(p), True) for p in args.approve]
            events += [ApprovalEvent(ApprovalParty(p), False) for p in args.deny]
            registrar = Registrar(loader, denial_policy=DenialPolicy(args.policy))
            if registrar.run_waiver(args.waiver_id, events) is None:
                return 1

    except FileNotFoundError as e:
        print(f"registrar: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
