"""
Customer Module

Immutable customer profiles and the builder used to assemble them one
field at a time. Fields left unset stay empty; nothing is validated.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class Customer:
    """Customer profile snapshot"""
    name: Optional[str] = None
    national_id: Optional[str] = None
    addresses: Tuple[str, ...] = ()
    phone_numbers: Tuple[str, ...] = ()
    emails: Tuple[str, ...] = ()

    def __post_init__(self):
        # Store sequences as tuples so a built customer never changes
        for name in ('addresses', 'phone_numbers', 'emails'):
            object.__setattr__(self, name, tuple(getattr(self, name) or ()))


class CustomerBuilder:
    """
    Staged construction of a Customer

    Setters may be called in any order and each returns the builder:

        customer = (CustomerBuilder()
                    .set_name("Alice")
                    .set_national_id("X123")
                    .add_email("alice@example.com")
                    .build())
    """

    def __init__(self):
        self._name: Optional[str] = None
        self._national_id: Optional[str] = None
        self._addresses: List[str] = []
        self._phone_numbers: List[str] = []
        self._emails: List[str] = []

    def set_name(self, name: str) -> 'CustomerBuilder':
        self._name = name
        return self

    def set_national_id(self, national_id: str) -> 'CustomerBuilder':
        self._national_id = national_id
        return self

    def set_addresses(self, addresses: Iterable[str]) -> 'CustomerBuilder':
        self._addresses = list(addresses or ())
        return self

    def set_phone_numbers(self, phone_numbers: Iterable[str]) -> 'CustomerBuilder':
        self._phone_numbers = list(phone_numbers or ())
        return self

    def set_emails(self, emails: Iterable[str]) -> 'CustomerBuilder':
        self._emails = list(emails or ())
        return self

    def add_address(self, address: str) -> 'CustomerBuilder':
        self._addresses.append(address)
        return self

    def add_phone_number(self, phone_number: str) -> 'CustomerBuilder':
        self._phone_numbers.append(phone_number)
        return self

    def add_email(self, email: str) -> 'CustomerBuilder':
        self._emails.append(email)
        return self

    def build(self) -> Customer:
        """Snapshot the staged fields into an immutable Customer"""
        return Customer(
            name=self._name,
            national_id=self._national_id,
            addresses=tuple(self._addresses),
            phone_numbers=tuple(self._phone_numbers),
            emails=tuple(self._emails)
        )
