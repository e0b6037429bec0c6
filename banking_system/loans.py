"""
Loan Module

Loan products, the factory that creates them, and the equal-installment
payment math: monthly payment, amortization schedule and total interest.
"""

from decimal import Decimal, DivisionByZero, InvalidOperation, Overflow
from dataclasses import dataclass
from enum import Enum
from typing import Any, List

from .currency import to_decimal
from .exceptions import DomainError, FormatError, InvalidArgumentError
from .logging_config import get_logger

logger = get_logger(__name__)

MONTHS_PER_YEAR = Decimal('12')


class LoanType(Enum):
    """Loan products"""
    HOME = ("home", "Home Loan")
    CAR = ("car", "Car Loan")
    PERSONAL = ("personal", "Personal Loan")

    def __init__(self, key: str, label: str):
        self.key = key
        self.label = label


@dataclass
class AmortizationEntry:
    """Single entry in amortization schedule"""
    payment_number: int
    payment_amount: Decimal
    principal_amount: Decimal
    interest_amount: Decimal
    remaining_balance: Decimal


def to_term_months(value: Any) -> int:
    """Convert a user-supplied term to a whole number of months"""
    try:
        term = to_decimal(value, field_name="term_months")
    except FormatError:
        raise FormatError("term_months must be a whole number", context={"term_months": value}) from None
    if term != term.to_integral_value():
        raise FormatError("term_months must be a whole number", context={"term_months": value})
    return int(term)


def calculate_monthly_payment(principal: Decimal, annual_rate: Decimal, term_months: int) -> Decimal:
    """
    Calculate the equal monthly installment for a loan

    Standard formula: P * r / (1 - (1 + r)^-n), with r the monthly rate.
    A zero rate repays the principal in equal parts.

    Args:
        principal: Amount borrowed
        annual_rate: Annual interest rate, e.g. 0.05 for 5%
        term_months: Number of monthly payments

    Returns:
        Unrounded monthly payment

    Raises:
        DomainError: If term_months is not positive, annual_rate is negative,
            or the payment is too large to represent
        FormatError: If an argument is not a number
    """
    principal = to_decimal(principal, field_name="principal")
    annual_rate = to_decimal(annual_rate, field_name="annual_interest_rate")
    term_months = to_term_months(term_months)

    if term_months <= 0:
        raise DomainError("Loan term must be at least one month", context={"term_months": term_months})
    if annual_rate < 0:
        raise DomainError("Interest rate cannot be negative", context={"annual_interest_rate": annual_rate})

    try:
        monthly_rate = annual_rate / MONTHS_PER_YEAR
        if monthly_rate == 0:
            return principal / Decimal(term_months)

        factor = (Decimal('1') + monthly_rate) ** term_months
        # Rates below the working precision leave factor at exactly 1
        if factor == 1:
            return principal / Decimal(term_months)
        return principal * (monthly_rate * factor) / (factor - Decimal('1'))
    except (Overflow, DivisionByZero, InvalidOperation):
        raise DomainError("Loan parameters are out of range", context={
            "principal": principal,
            "annual_interest_rate": annual_rate,
            "term_months": term_months
        }) from None


@dataclass(frozen=True)
class Loan:
    """Loan with fixed terms; payments are derived on demand"""
    loan_type: LoanType
    principal: Decimal
    annual_interest_rate: Decimal
    term_months: int

    def __post_init__(self):
        object.__setattr__(self, 'principal', to_decimal(self.principal, field_name="principal"))
        object.__setattr__(self, 'annual_interest_rate',
                           to_decimal(self.annual_interest_rate, field_name="annual_interest_rate"))
        object.__setattr__(self, 'term_months', to_term_months(self.term_months))

        if self.principal <= 0:
            raise DomainError("Principal must be positive", context={"principal": self.principal})
        if self.annual_interest_rate < 0:
            raise DomainError("Interest rate cannot be negative",
                              context={"annual_interest_rate": self.annual_interest_rate})
        if self.term_months <= 0:
            raise DomainError("Loan term must be at least one month",
                              context={"term_months": self.term_months})

    @property
    def loan_type_label(self) -> str:
        return self.loan_type.label

    @property
    def monthly_rate(self) -> Decimal:
        return self.annual_interest_rate / MONTHS_PER_YEAR

    @property
    def monthly_payment(self) -> Decimal:
        """Scheduled monthly payment, recalculated on every access"""
        return calculate_monthly_payment(self.principal, self.annual_interest_rate, self.term_months)

    def amortization_schedule(self) -> List[AmortizationEntry]:
        """Generate the equal installment amortization schedule"""
        schedule = []
        payment_amount = self.monthly_payment
        monthly_rate = self.monthly_rate
        remaining_balance = self.principal

        for payment_num in range(1, self.term_months + 1):
            interest_amount = remaining_balance * monthly_rate
            principal_amount = payment_amount - interest_amount

            # Final payment settles the exact remaining balance
            if payment_num == self.term_months or principal_amount > remaining_balance:
                principal_amount = remaining_balance
                payment_amount = principal_amount + interest_amount

            remaining_balance = remaining_balance - principal_amount

            schedule.append(AmortizationEntry(
                payment_number=payment_num,
                payment_amount=payment_amount,
                principal_amount=principal_amount,
                interest_amount=interest_amount,
                remaining_balance=remaining_balance
            ))

            if remaining_balance == 0:
                break

        return schedule

    def total_interest(self) -> Decimal:
        """Total interest paid over the life of the loan"""
        return sum((entry.interest_amount for entry in self.amortization_schedule()), Decimal('0'))


def create_loan(type_name: str, principal, annual_rate, term_months) -> Loan:
    """
    Create a loan of the named type

    Args:
        type_name: "home", "car" or "personal" (case-insensitive)
        principal: Amount borrowed
        annual_rate: Annual interest rate as a decimal fraction
        term_months: Number of monthly payments

    Returns:
        Created Loan object

    Raises:
        InvalidArgumentError: If type_name is not a known loan type
        FormatError: If a numeric argument is not a number
        DomainError: If the loan parameters are out of range
    """
    key = (type_name or "").strip().lower()
    for loan_type in LoanType:
        if loan_type.key == key:
            loan = Loan(
                loan_type=loan_type,
                principal=principal,
                annual_interest_rate=annual_rate,
                term_months=term_months
            )
            logger.debug("Created %s: principal=%s rate=%s term=%s", loan_type.label,
                         loan.principal, loan.annual_interest_rate, loan.term_months)
            return loan

    raise InvalidArgumentError("Unknown loan type", context={"loan_type": type_name})
