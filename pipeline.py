#!/usr/bin/env python3
"""
Customer Owes batch runner.

- Reads an orders CSV export (one row per order, customer + amount)
- One invoice per customer; a blank amount adds no order
- Prints every customer's owing report
- Optionally keeps report files per day per customer:
    <outdir>/<Customer>/<slug>_owing_YYYYMMDD.txt
  Overwrite same-day; keep different days.
"""
import logging
from datetime import date
from pathlib import Path

import pandas as pd

from config import Clock, Settings
from owing import Invoice, Order, InvalidOrderError, owing_lines
from utils import ALIASES, pick, clean_str, parse_money, autodetect_csv, clean_folder_name, report_file_name

logger = logging.getLogger(__name__)


def parse_as_of(as_of_str: str | None) -> date | None:
    if not as_of_str:
        return None
    try:
        return date.fromisoformat(as_of_str)
    except ValueError:
        raise SystemExit(f"Invalid as-of date {as_of_str!r}; expected YYYY-MM-DD.") from None


def load_invoices(input_csv) -> list[Invoice]:
    try:
        raw0 = pd.read_csv(input_csv, dtype=str, encoding="utf-8-sig", on_bad_lines="error", keep_default_na=False)
    except pd.errors.ParserError as e:
        # e.g. an unquoted "1,234.50" splits into an extra field
        raise InvalidOrderError(f"{input_csv}: malformed row ({e})") from e
    raw0.columns = [c.strip() for c in raw0.columns]

    cols = {k: pick(raw0, v) for k, v in ALIASES.items()}
    for critical in ("name", "amount"):
        if not cols[critical]:
            raise SystemExit(f"Missing required column for '{critical}'. Found columns: {list(raw0.columns)}")

    df = pd.DataFrame({
        "customer": raw0[cols["name"]].map(clean_str),
        "amount_raw": raw0[cols["amount"]].map(clean_str),
    })

    blank = df["customer"].str.len() == 0
    dropped = int(blank.sum())
    if dropped:
        logger.warning("Dropped %d rows without a customer in %s", dropped, input_csv)
    df = df.loc[~blank]

    invoices = {}
    for idx, r in df.iterrows():
        inv = invoices.setdefault(r["customer"], Invoice(customer=r["customer"]))
        try:
            amount = parse_money(r["amount_raw"])
        except ValueError as e:
            # +2: header line + 1-based rows
            raise InvalidOrderError(f"{input_csv} line {idx + 2}: {e}") from e
        if amount is None:
            continue
        if amount < 0:
            raise InvalidOrderError(f"{input_csv} line {idx + 2}: amount {r['amount_raw']!r} is negative")
        inv.orders.append(Order(amount=amount))

    return [invoices[c] for c in sorted(invoices)]


def write_report(invoice: Invoice, lines: list[str], base_root: Path, as_of: date) -> Path:
    cust_dir = base_root / clean_folder_name(invoice.customer)
    cust_dir.mkdir(parents=True, exist_ok=True)
    path = cust_dir / report_file_name(invoice.customer, as_of)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def build_all(input_csv: str | None, as_of_str: str | None, outdir: Path | None, out=None) -> list[Invoice]:
    as_of = parse_as_of(as_of_str)
    settings = Settings(clock=Clock(fixed=as_of), output_root=outdir.resolve() if outdir else None)

    # Input CSV (auto-detect allowed)
    if not input_csv:
        input_csv = autodetect_csv([Path.cwd(), Path.cwd() / "input", Path.home() / "Downloads"])
    if not input_csv:
        raise SystemExit("No CSV found. Provide --input or place a CSV in ./, ./input, or ~/Downloads.")
    input_csv = Path(input_csv)

    invoices = load_invoices(input_csv)
    if not invoices:
        raise SystemExit(f"No customers found in {input_csv}.")

    if settings.output_root:
        settings.output_root.mkdir(parents=True, exist_ok=True)

    for inv in invoices:
        lines = owing_lines(inv, settings.clock)
        for line in lines:
            print(line, file=out)
        if settings.output_root:
            path = write_report(inv, lines, settings.output_root, settings.clock.today())
            logger.debug("Wrote %s", path)

    if settings.output_root:
        logger.info("Built %d reports into %s", len(invoices), settings.output_root)
    return invoices
