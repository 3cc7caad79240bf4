"""
Invoice reporter: what a customer owes and when it is due.

print_owing(invoice) validates the invoice, sums its orders, stamps
invoice.due_date (today + DUE_IN_DAYS) and writes six lines:

    ***********************
    **** Customer owes ****
    ***********************
    name: <customer>
    amount: <outstanding>
    due: <due date, locale short format>

Invalid input raises before anything is written.
"""
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal

from jinja2 import Environment, BaseLoader, StrictUndefined

from config import DUE_IN_DAYS, Clock
from templates import BANNER_TXT, DETAILS_TXT
from utils import is_amount, fmt_amount, fmt_short_date

_MISSING = object()

# Text output: no HTML escaping of customer names
_env = Environment(loader=BaseLoader(), autoescape=False, undefined=StrictUndefined)
_t_banner = _env.from_string(BANNER_TXT)
_t_details = _env.from_string(DETAILS_TXT)


class OwingError(ValueError):
    """Base class for rejected invoice input."""


class InvalidInvoiceError(OwingError):
    pass


class InvalidOrderError(OwingError):
    pass


@dataclass(frozen=True)
class Order:
    amount: int | float | Decimal


@dataclass
class Invoice:
    customer: str
    orders: list[Order] = field(default_factory=list)
    due_date: date | None = None


# ---------- Validation ----------
def _validate(invoice) -> None:
    if invoice is None:
        raise InvalidInvoiceError("invoice is required")
    customer = getattr(invoice, "customer", None)
    if not isinstance(customer, str):
        raise InvalidInvoiceError(f"customer must be a string, got {customer!r}")
    orders = getattr(invoice, "orders", None)
    if orders is None:
        raise InvalidInvoiceError(f"invoice for {customer!r} has no orders sequence")
    if isinstance(orders, (str, bytes)) or not isinstance(orders, Sequence):
        raise InvalidInvoiceError(f"orders must be a sequence, got {type(orders).__name__}")
    for i, order in enumerate(orders):
        amount = getattr(order, "amount", _MISSING)
        if amount is _MISSING:
            raise InvalidOrderError(f"order #{i} for {customer!r} has no amount")
        if not is_amount(amount):
            raise InvalidOrderError(f"order #{i} for {customer!r}: amount {amount!r} is not a finite number")
        if amount < 0:
            raise InvalidOrderError(f"order #{i} for {customer!r}: amount {amount!r} is negative")


# ---------- Computation ----------
def calculate_outstanding(invoice):
    """Sum of all order amounts; 0 when there are no orders."""
    try:
        return sum((o.amount for o in invoice.orders), 0)
    except TypeError as e:
        # e.g. Decimal + float
        raise InvalidOrderError(f"order amounts for {invoice.customer!r} cannot be summed: {e}") from e


def record_due_date(invoice, clock: Clock) -> date:
    invoice.due_date = clock.today() + timedelta(days=DUE_IN_DAYS)
    return invoice.due_date


# ---------- Rendering ----------
def banner_lines() -> list[str]:
    return _t_banner.render().splitlines()


def detail_lines(invoice, outstanding) -> list[str]:
    return _t_details.render(
        customer=invoice.customer,
        amount=fmt_amount(outstanding),
        due=fmt_short_date(invoice.due_date),
    ).splitlines()


def owing_lines(invoice, clock: Clock | None = None) -> list[str]:
    """Validate, compute and stamp the due date; return the report lines unwritten."""
    _validate(invoice)
    outstanding = calculate_outstanding(invoice)
    record_due_date(invoice, clock or Clock())
    return banner_lines() + detail_lines(invoice, outstanding)


def print_owing(invoice, clock: Clock | None = None, out=None) -> None:
    """Write the owing report for ``invoice`` to ``out`` (stdout by default)."""
    for line in owing_lines(invoice, clock):
        print(line, file=out)
