#!/usr/bin/env python
"""
Print statements for invoices.

Usage:
    python scripts/print_statement.py [invoices.json] [--plays plays.csv]
"""
import argparse
import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from theater_billing.config.settings import get_settings
from theater_billing.data.catalog import load_plays, load_invoices
from theater_billing.engine import StatementBuilder, StatementError


def main(argv=None):
    parser = argparse.ArgumentParser(description="Print customer statements")
    parser.add_argument('invoices', nargs='?', type=Path, help="Invoices JSON (default: bundled sample)")
    parser.add_argument('--plays', type=Path, help="Plays CSV (default: bundled sample)")
    args = parser.parse_args(argv)

    settings = get_settings()
    builder = StatementBuilder(currency=settings.currency)

    try:
        plays = load_plays(args.plays, settings=settings)
        invoices = load_invoices(args.invoices, settings=settings)
    except (FileNotFoundError, ValueError) as e:
        print(f"ERROR: {e}")
        return 1

    for invoice in invoices:
        try:
            print(builder.statement(invoice, plays))
        except StatementError as e:
            print(f"ERROR: statement for {invoice.customer} failed: {e}")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
