import pytest
import sys
import os

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from theater_billing.engine import CurrencyFormat, USD, format_currency


@pytest.mark.parametrize("cents, expected", [
    (0, "$0.00"),
    (5, "$0.05"),
    (40000, "$400.00"),
    (173000, "$1,730.00"),
    (123456789, "$1,234,567.89"),
    (-2550, "-$25.50"),
])
def test_usd(cents, expected):
    assert format_currency(cents) == expected
    assert format_currency(cents, USD) == expected


def test_custom_separators():
    fmt = CurrencyFormat(symbol="€", thousands_separator=".", decimal_separator=",")
    assert format_currency(123456789, fmt) == "€1.234.567,89"


def test_no_minor_digits():
    yen = CurrencyFormat(symbol="¥", minor_digits=0)
    assert format_currency(1730, yen) == "¥1,730"
