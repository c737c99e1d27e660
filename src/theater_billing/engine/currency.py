"""Currency formatting for integer minor-unit amounts."""
from dataclasses import dataclass


@dataclass(frozen=True)
class CurrencyFormat:
    """How to display an amount held in minor units (e.g. cents)."""
    symbol: str = "$"
    minor_digits: int = 2
    thousands_separator: str = ","
    decimal_separator: str = "."


USD = CurrencyFormat()


def format_currency(minor_units: int, currency: CurrencyFormat = USD) -> str:
    """
    Format an integer amount of minor units, e.g. 173000 -> "$1,730.00".

    Uses integer arithmetic only; negative amounts get a leading minus sign.
    """
    sign = "-" if minor_units < 0 else ""
    major, minor = divmod(abs(minor_units), 10 ** currency.minor_digits)
    whole = f"{major:,}".replace(",", currency.thousands_separator)
    if currency.minor_digits:
        return f"{sign}{currency.symbol}{whole}{currency.decimal_separator}{minor:0{currency.minor_digits}d}"
    return f"{sign}{currency.symbol}{whole}"
