"""
Error types raised by the pricing and ledger engine.
"""


class LedgerError(Exception):
    """Base error for pricing and ledger failures."""


class ValidationError(LedgerError):
    """Raised when a record is missing a required field or repeats an id."""


class DomainError(LedgerError):
    """Raised when a record is well-formed but violates a business rule."""
