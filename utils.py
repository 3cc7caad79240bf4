"""
Helpers: parsing, aliases, formatting, file finding, slugging.
"""
import math
import numbers
import re
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path

import pandas as pd
from slugify import slugify

_re_money_noise = re.compile(r"[,$\s]")


def clean_str(x):
    if x is None: return ""
    # handles pandas NaN too
    if isinstance(x, float) and pd.isna(x): return ""
    return str(x).strip()


def is_amount(x) -> bool:
    """True for finite int/float/Decimal values (bools excluded)."""
    if isinstance(x, bool) or not isinstance(x, (numbers.Real, Decimal)):
        return False
    try:
        return math.isfinite(x)
    except (TypeError, ValueError, OverflowError):
        return False


def parse_money(x):
    """Parse an export cell into a number; blank -> None, garbage -> ValueError."""
    s = clean_str(x)
    if not s: return None
    s = _re_money_noise.sub("", s)
    try:
        value = Decimal(s)
    except InvalidOperation:
        raise ValueError(f"not a number: {x!r}") from None
    if not value.is_finite():
        raise ValueError(f"not a finite number: {x!r}")
    result = int(value) if value == value.to_integral_value() else float(value)
    if not is_amount(result):
        # too large for a float
        raise ValueError(f"amount out of range: {x!r}")
    return result


def fmt_amount(x) -> str:
    if isinstance(x, float) and x.is_integer():
        return str(int(x))
    return str(x)


def fmt_short_date(d: date) -> str:
    # %x follows the active LC_TIME locale
    return d.strftime("%x")


def clean_folder_name(name: str) -> str:
    s = str(name or "")
    out = slugify(s, lowercase=False, separator=" ", max_length=120)
    out = out.replace("/", "-").replace("\\", "-")
    return out.strip() or "Unknown"


def report_file_name(customer: str, as_of: date) -> str:
    # first 3 words of the customer name, slugified, date without dashes
    first3 = " ".join(str(customer).split()[:3])
    return f"{slugify(first3) or 'unknown'}_owing_{as_of.strftime('%Y%m%d')}.txt"


# Column aliases...
ALIASES = {
    "name": ["Name", "Customer", "Customer Name", "Customer_Name"],
    "amount": ["Amount", "Order Amount", "Order_Amount", "Open Balance", "Open_Balance", "Balance"],
}


def pick(df: pd.DataFrame, keys: list[str]) -> str | None:
    for k in keys:
        if k in df.columns: return k
    return None


def _looks_like_orders(path: Path) -> bool:
    try:
        header = pd.read_csv(path, nrows=0, encoding="utf-8-sig")
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError):
        return False
    header.columns = [str(c).strip() for c in header.columns]
    return all(pick(header, ALIASES[k]) for k in ("name", "amount"))


def autodetect_csv(search_dirs: list[Path]) -> str | None:
    """Newest orders-looking CSV that has customer and amount columns."""
    seen = {p.resolve(): p for d in search_dirs if d.exists() for p in d.glob("*.csv")}
    cands = [p for p in seen.values() if _looks_like_orders(p)]
    if not cands: return None
    score = lambda p: sum(s in p.name.lower() for s in ["order", "invoice", "owing", "customer"])
    return str(max(cands, key=lambda p: (score(p), p.stat().st_mtime)))
