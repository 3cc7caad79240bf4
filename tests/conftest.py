import locale
import os
import sys
from datetime import date

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from config import Clock


@pytest.fixture
def clock():
    return Clock(fixed=date(2025, 1, 5))


@pytest.fixture
def orders_csv(tmp_path):
    def _write(text, name="orders.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def c_locale():
    """Pin LC_TIME to "C" so %x renders as MM/DD/YY."""
    previous = locale.setlocale(locale.LC_TIME)
    locale.setlocale(locale.LC_TIME, "C")
    yield
    locale.setlocale(locale.LC_TIME, previous)
