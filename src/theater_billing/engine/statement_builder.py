"""
Statement Builder - resolves performances, prices them and renders the report.

A statement is built completely before anything is rendered, so a failing
performance never yields a partial statement.
"""
from typing import Mapping, Optional

from .currency import USD, CurrencyFormat, format_currency
from .errors import UnknownPlayID
from .models import Invoice, Performance, Play, Statement, StatementLine
from .pricing_engine import PricingEngine


class StatementBuilder:
    """Builds and renders customer statements for invoices."""

    def __init__(self, engine: Optional[PricingEngine] = None, currency: Optional[CurrencyFormat] = None):
        self.engine = engine or PricingEngine()
        self.currency = currency or USD

    def build(self, invoice: Invoice, plays: Mapping[str, Play]) -> Statement:
        """
        Price every performance of an invoice.

        Args:
            invoice: Customer invoice with performances in line order
            plays: Play lookup keyed by play id

        Returns:
            Statement with one line per performance and the totals

        Raises:
            UnknownPlayID, UnknownPlayType, InvalidAudience
        """
        statement = Statement(customer=invoice.customer)

        for performance in invoice.performances:
            line = self._build_line(performance, plays)
            statement.lines.append(line)
            statement.total_amount += line.amount
            statement.total_volume_credits += line.volume_credits

        return statement

    def _build_line(self, performance: Performance, plays: Mapping[str, Play]) -> StatementLine:
        play = plays.get(performance.play_id)
        if play is None:
            raise UnknownPlayID(performance.play_id)

        charge = self.engine.price(play.type, performance.audience)
        return StatementLine(
            play_id=performance.play_id,
            play_name=play.name,
            play_type=charge.play_type,
            audience=performance.audience,
            amount=charge.amount,
            volume_credits=charge.volume_credits,
            trace=charge.trace,
        )

    def render_text(self, statement: Statement) -> str:
        """Render a built statement as the plain-text report."""
        result = f"Statement for {statement.customer}\n"
        for line in statement.lines:
            result += f"  {line.play_name}: {format_currency(line.amount, self.currency)} ({line.audience} seats)\n"
        result += f"Amount owed is {format_currency(statement.total_amount, self.currency)}\n"
        result += f"You earned {statement.total_volume_credits} credits\n"
        return result

    def statement(self, invoice: Invoice, plays: Mapping[str, Play]) -> str:
        """Build and render the statement for an invoice."""
        return self.render_text(self.build(invoice, plays))


def statement(invoice: Invoice, plays: Mapping[str, Play], currency: CurrencyFormat = USD) -> str:
    """Render the plain-text statement for an invoice using the standard pricing rules."""
    return StatementBuilder(currency=currency).statement(invoice, plays)
