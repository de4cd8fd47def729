"""Seat pricing, partner commission and profitability calculators."""

__version__ = "0.1.0"
