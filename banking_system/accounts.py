"""
Account Management Module

Bank accounts and the factory that opens them. Every account starts with
a zero balance and changes only through deposits and withdrawals.
"""

from decimal import Decimal
from dataclasses import dataclass, field
from enum import Enum

from .currency import to_decimal
from .exceptions import InvalidArgumentError
from .logging_config import get_logger

logger = get_logger(__name__)


class AccountType(Enum):
    """Banking account types"""
    SAVINGS = ("savings", "Savings Account")
    CHECKING = ("checking", "Checking Account")
    LOAN = ("loan", "Loan Account")

    def __init__(self, key: str, label: str):
        self.key = key
        self.label = label


@dataclass
class Account:
    """
    Bank account holding a single running balance

    No minimum balance is enforced: a withdrawal larger than the balance
    leaves the account negative.
    """
    account_number: str
    account_type: AccountType
    balance: Decimal = field(default_factory=lambda: Decimal('0'))

    @property
    def account_type_label(self) -> str:
        """Display name of the account type"""
        return self.account_type.label

    def deposit(self, amount) -> Decimal:
        """Add amount to the balance and return the new balance"""
        self.balance += to_decimal(amount)
        return self.balance

    def withdraw(self, amount) -> Decimal:
        """Subtract amount from the balance and return the new balance"""
        self.balance -= to_decimal(amount)
        return self.balance


def create_account(type_name: str, account_number: str) -> Account:
    """
    Open a new zero-balance account

    Args:
        type_name: "savings", "checking" or "loan" (case-insensitive)
        account_number: Caller-chosen account identifier

    Returns:
        Created Account object

    Raises:
        InvalidArgumentError: If type_name is not a known account type
    """
    key = (type_name or "").strip().lower()
    for account_type in AccountType:
        if account_type.key == key:
            account = Account(account_number=account_number, account_type=account_type)
            logger.debug("Created %s %s", account_type.label, account_number)
            return account

    raise InvalidArgumentError("Unknown account type", context={"account_type": type_name})
