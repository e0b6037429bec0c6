"""
Exception Hierarchy Module

Errors raised by the banking core. Every error carries a human-readable
message plus optional context so the presentation shell can show it and
let the user retry.
"""

from typing import Any, Dict, Optional


class BankingError(Exception):
    """
    Base exception for all banking errors

    Attributes:
        message: Human-readable error description
        context: Additional information about the failed operation
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class InvalidArgumentError(BankingError, ValueError):
    """
    Raised when a factory is asked for a variant it does not know

    Example:
        >>> raise InvalidArgumentError("Unknown account type", context={"type": "gold"})
    """


class NotFoundError(BankingError, LookupError):
    """Raised when a named prototype template is not registered"""


class DomainError(BankingError, ValueError):
    """
    Raised for loan parameters outside the valid domain

    This exception should be raised when:
    - Principal is zero or negative
    - Annual interest rate is negative
    - Term in months is zero or negative
    """


class FormatError(BankingError, ValueError):
    """Raised when a numeric field receives non-numeric input"""
