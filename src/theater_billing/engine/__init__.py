"""Engine subpackage - core pricing and statement logic."""
from .pricing_engine import PricingEngine, amount, volume_credits
from .pricing_rules import PlayType, PricingRule, PRICING_RULES
from .statement_builder import StatementBuilder, statement
from .currency import CurrencyFormat, USD, format_currency
from .models import Play, Performance, Invoice, Charge, Statement, StatementLine
from .errors import StatementError, UnknownPlayID, UnknownPlayType, InvalidAudience

__all__ = [
    'PricingEngine', 'amount', 'volume_credits',
    'PlayType', 'PricingRule', 'PRICING_RULES',
    'StatementBuilder', 'statement',
    'CurrencyFormat', 'USD', 'format_currency',
    'Play', 'Performance', 'Invoice', 'Charge', 'Statement', 'StatementLine',
    'StatementError', 'UnknownPlayID', 'UnknownPlayType', 'InvalidAudience',
]
