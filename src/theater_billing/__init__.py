"""
Theater Billing Package

Computes customer statements for theatrical performances.
Prices each performance by play type and audience, accumulates volume
credits and renders a plain-text statement.
"""

__version__ = "1.0.0"
