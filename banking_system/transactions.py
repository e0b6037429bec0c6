"""
Transaction Module

Transaction records and the prototype registry that hands out fresh
copies of named transaction templates.
"""

import copy
from decimal import Decimal
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from .currency import to_decimal
from .exceptions import NotFoundError
from .logging_config import get_logger

logger = get_logger(__name__)


class TransactionType(Enum):
    """Types of banking transactions"""
    REGULAR_PAYMENT = "Regular Payment"

    @property
    def label(self) -> str:
        return self.value


@dataclass
class Transaction:
    """
    Transfer of an amount between two accounts

    The transaction id is assigned by the caller after copying a template;
    uniqueness is not enforced.
    """
    transaction_id: str
    from_account: str
    to_account: str
    amount: Decimal
    transaction_type: TransactionType = TransactionType.REGULAR_PAYMENT

    def __post_init__(self):
        self.amount = to_decimal(self.amount)

    @property
    def transaction_type_label(self) -> str:
        return self.transaction_type.label

    def clone(self) -> 'Transaction':
        """Return a deep copy sharing no mutable state with this transaction"""
        return copy.deepcopy(self)


class TransactionPrototypeRegistry:
    """Fixed set of named transaction templates"""

    def __init__(self, prototypes: Optional[Dict[str, Transaction]] = None):
        # Own copies so later changes to the caller's objects don't leak in
        self._prototypes = {name: txn.clone() for name, txn in (prototypes or {}).items()}

    def names(self) -> List[str]:
        """Registered template names"""
        return list(self._prototypes)

    def get_prototype(self, name: str) -> Transaction:
        """
        Get a fresh copy of a named template

        Raises:
            NotFoundError: If no template is registered under name
        """
        prototype = self._prototypes.get(name)
        if prototype is None:
            raise NotFoundError("No prototype found", context={"prototype": name})
        return prototype.clone()


def default_prototypes() -> Dict[str, Transaction]:
    """Templates available when the application starts"""
    return {
        "monthlyPayment": Transaction(
            transaction_id="T000",
            from_account="A001",
            to_account="A002",
            amount=Decimal('100.00'),
            transaction_type=TransactionType.REGULAR_PAYMENT
        ),
    }


# Registry populated once at import
prototype_registry = TransactionPrototypeRegistry(default_prototypes())


def get_prototype_registry() -> TransactionPrototypeRegistry:
    """Get the application-wide prototype registry"""
    return prototype_registry
