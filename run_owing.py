#!/usr/bin/env python3
"""
Entry point: prints what customers owe and when it is due.

- Zero args: auto-detects the latest orders CSV and uses today's date
- Optional flags: --input, --as-of, --outdir
- Single invoice: --customer NAME --amount 10 --amount 10
"""
import argparse
import locale
import logging
from pathlib import Path

from config import Clock
from logging_config import configure_logging
from owing import Invoice, Order, OwingError, print_owing
from pipeline import build_all, parse_as_of
from utils import parse_money

logger = logging.getLogger(__name__)


def _use_user_locale() -> None:
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logger.warning("Could not activate the user's date locale (%s); using the default.", e)


def _single_invoice(customer: str, amounts: list[str]) -> Invoice:
    orders = []
    for a in amounts:
        try:
            orders.append(Order(amount=parse_money(a)))
        except ValueError as e:
            raise SystemExit(f"Invalid --amount: {e}") from None
    return Invoice(customer=customer, orders=orders)


def main(argv=None):
    ap = argparse.ArgumentParser("Customer Owes Reporter")
    ap.add_argument("--input", help="Path to orders CSV (customer, amount). If omitted, we auto-detect.",
                    default=None)
    ap.add_argument("--as-of", help="Reference 'today' in YYYY-MM-DD (default: today).", default=None)
    ap.add_argument("--outdir", help="Also save one report file per customer under this directory.", default=None)
    ap.add_argument("--customer", help="Report a single invoice for this customer instead of a CSV.", default=None)
    ap.add_argument("--amount", help="Order amount for --customer (repeatable).", action="append", default=[])
    args = ap.parse_args(argv)

    configure_logging()
    _use_user_locale()

    try:
        if args.customer is not None:
            invoice = _single_invoice(args.customer, args.amount)
            print_owing(invoice, Clock(fixed=parse_as_of(args.as_of)))
        else:
            if args.amount:
                ap.error("--amount requires --customer")
            build_all(
                input_csv=args.input,
                as_of_str=args.as_of,
                outdir=Path(args.outdir) if args.outdir else None,
            )
    except OwingError as e:
        raise SystemExit(f"Invalid invoice: {e}") from None


if __name__ == "__main__":
    main()
