"""
Banking System

A small teaching bank built around classic object-oriented patterns:
account and loan factories, a customer builder, transaction prototypes,
a currency converter adapter and process-wide session registries.
All monetary values use Decimal.
"""

__version__ = "1.0.0"
