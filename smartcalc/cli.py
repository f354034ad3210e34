"""Command-line front end: evaluate, plot as a table, or compute a loan."""

from __future__ import annotations

import argparse
import sys

from smartcalc.credit import TermUnit, annuity, differentiated, to_months
from smartcalc.evaluator import MAX_LEN, calculate
from smartcalc.graph import GraphSettings, default_settings, sample
from smartcalc.validation import ExpressionError

TOO_LONG = "TOO_LONG"
_PLAIN_X = 1.0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="smartcalc", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    calc = commands.add_parser(
        "calc", help="evaluate an expression; one with x is sampled over a range"
    )
    calc.add_argument("expression")
    defaults = default_settings()
    calc.add_argument("--x-min", type=float, default=defaults.x_min)
    calc.add_argument("--x-max", type=float, default=defaults.x_max)
    calc.add_argument("--y-min", type=float, default=defaults.y_min)
    calc.add_argument("--y-max", type=float, default=defaults.y_max)
    calc.add_argument("--step", type=float, default=defaults.step)

    credit = commands.add_parser("credit", help="compute loan payments")
    credit.add_argument("principal", type=float)
    credit.add_argument("term", type=float)
    credit.add_argument("rate", type=float, help="annual interest rate, percent")
    credit.add_argument(
        "--unit", choices=[unit.value for unit in TermUnit], default="months"
    )
    credit.add_argument(
        "--kind", choices=["annuity", "differentiated"], default="annuity"
    )
    return parser


def _run_calc(args: argparse.Namespace) -> None:
    expression = args.expression
    if len(expression) > MAX_LEN:
        raise ExpressionError(TOO_LONG)
    if "x" in expression:
        settings = GraphSettings(
            x_max=args.x_max,
            y_max=args.y_max,
            x_min=args.x_min,
            y_min=args.y_min,
            step=args.step,
        )
        for x, y in sample(expression, settings):
            print(f"{x:g} {y:g}")
    else:
        print(calculate(expression, _PLAIN_X).strip())


def _run_credit(args: argparse.Namespace) -> None:
    term = to_months(args.term, args.unit)
    if args.kind == "annuity":
        summary = annuity(args.principal, term, args.rate)
        monthly = summary.payments[0] if summary.payments else 0.0
        print(f"monthly payment: {monthly:g}")
    else:
        summary = differentiated(args.principal, term, args.rate)
        for month, payment in enumerate(summary.payments, start=1):
            print(f"month {month}: {payment:g}")
    print(f"total payment: {summary.total_payment:g}")
    print(f"overpayment: {summary.overpayment:g}")


def main(argv: list[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "calc":
            _run_calc(args)
        else:
            _run_credit(args)
    except ExpressionError as error:
        print(error.code, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())