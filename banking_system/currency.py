"""
Currency Module

Decimal helpers for monetary input and display, ISO 4217 currency codes,
and the currency converter adapter that puts the legacy fixed-rate
conversion routine behind the CurrencyConverter interface.
NEVER uses float for monetary values.
"""

from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, getcontext
from enum import Enum
from typing import Any, Optional, Union
import re

from .config import get_config
from .exceptions import FormatError, InvalidArgumentError
from .logging_config import get_logger

# Set global decimal context for financial precision
getcontext().prec = 28

logger = get_logger(__name__)


class Currency(Enum):
    """ISO 4217 Currency Codes with precision info"""
    USD = ("USD", 2)  # US Dollar
    EUR = ("EUR", 2)  # Euro
    GBP = ("GBP", 2)  # British Pound
    JPY = ("JPY", 0)  # Japanese Yen, no minor unit
    CAD = ("CAD", 2)  # Canadian Dollar
    CHF = ("CHF", 2)  # Swiss Franc

    def __init__(self, code: str, precision: int):
        self.code = code
        self.precision = precision

    @classmethod
    def from_code(cls, code: str) -> 'Currency':
        """Look up a currency by its code, ignoring case and whitespace"""
        normalized = (code or "").strip().upper()
        try:
            return cls[normalized]
        except KeyError:
            raise InvalidArgumentError("Unknown currency", context={"currency": code}) from None


def to_decimal(value: Any, field_name: str = "amount") -> Decimal:
    """
    Convert a user-supplied number to Decimal

    Args:
        value: int, float, str or Decimal
        field_name: Name of the field, used in the error message

    Returns:
        Decimal value

    Raises:
        FormatError: If the value is not a finite number
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool) or value is None:
        raise FormatError(f"{field_name} must be a number", context={field_name: value})
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise FormatError(f"{field_name} must be a number", context={field_name: value}) from None

    if not result.is_finite():
        raise FormatError(f"{field_name} must be a finite number", context={field_name: value})
    return result


def decimal_from_string(value: str) -> Decimal:
    """
    Convert display-formatted text to Decimal, handling common formats

    Strips currency symbols and whitespace and treats a lone comma
    followed by at most two digits as a decimal separator.

    Raises:
        FormatError: If string cannot be converted to valid Decimal
    """
    if not value or not isinstance(value, str):
        raise FormatError("Value must be a non-empty string")

    # Remove currency symbols and whitespace
    clean_value = re.sub(r'[^\d.,\-+]', '', value.strip())

    if ',' in clean_value and '.' in clean_value:
        # Both comma and dot - comma is the thousands separator
        clean_value = clean_value.replace(',', '')
    elif clean_value.count(',') == 1 and len(clean_value.split(',')[1]) <= 2:
        clean_value = clean_value.replace(',', '.')
    else:
        clean_value = clean_value.replace(',', '')

    return to_decimal(clean_value, field_name="value")


def format_amount(amount: Decimal, places: Optional[int] = None) -> str:
    """Format an amount for display, rounded half-up with thousands separators"""
    if places is None:
        places = get_config().display_precision
    amount = to_decimal(amount)
    try:
        rounded = amount.quantize(Decimal('0.1') ** places, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # More digits than the context precision; let format() round instead
        rounded = amount
    return f"{rounded:,.{places}f}"


def _code(currency: Union[str, Currency]) -> str:
    if isinstance(currency, Currency):
        return currency.code
    return currency.strip().upper()


class CurrencyConverter(ABC):
    """Converts amounts to and from the reference currency"""

    @abstractmethod
    def convert_to_reference(self, amount: Decimal, from_currency: Union[str, Currency]) -> Decimal:
        """Convert an amount in from_currency into the reference currency"""

    @abstractmethod
    def convert_from_reference(self, amount: Decimal, to_currency: Union[str, Currency]) -> Decimal:
        """Convert an amount in the reference currency into to_currency"""


class LegacyCurrencyConverter:
    """
    Fixed-rate converter with a three-argument interface

    Applies the same multiplier whatever the direction, so converting
    there and back does not return the starting amount.
    """

    def __init__(self, rate: Optional[Decimal] = None):
        if rate is None:
            rate = get_config().legacy_conversion_rate
        self.rate = to_decimal(rate, field_name="rate")

    def convert(self, from_currency: str, to_currency: str, amount: Decimal) -> Decimal:
        return to_decimal(amount) * self.rate


class CurrencyConverterAdapter(CurrencyConverter):
    """Adapts LegacyCurrencyConverter to the CurrencyConverter interface"""

    def __init__(self, legacy_converter: LegacyCurrencyConverter,
                 reference_currency: Optional[str] = None):
        self.legacy_converter = legacy_converter
        self.reference_currency = _code(reference_currency or get_config().reference_currency)

    def convert_to_reference(self, amount: Decimal, from_currency: Union[str, Currency]) -> Decimal:
        result = self.legacy_converter.convert(_code(from_currency), self.reference_currency, amount)
        logger.debug("Converted %s %s to %s %s", amount, _code(from_currency),
                     result, self.reference_currency)
        return result

    def convert_from_reference(self, amount: Decimal, to_currency: Union[str, Currency]) -> Decimal:
        result = self.legacy_converter.convert(self.reference_currency, _code(to_currency), amount)
        logger.debug("Converted %s %s to %s %s", amount, self.reference_currency,
                     result, _code(to_currency))
        return result
