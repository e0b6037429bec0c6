"""Shared fixtures for the banking test suite"""

import pytest

from banking_system.console import BankingConsole
from banking_system.session import SessionManager, TransactionManager
from banking_system.transactions import TransactionPrototypeRegistry, default_prototypes


@pytest.fixture
def session():
    return SessionManager()


@pytest.fixture
def transactions():
    return TransactionManager()


@pytest.fixture
def registry():
    return TransactionPrototypeRegistry(default_prototypes())


@pytest.fixture
def console(session, transactions, registry):
    return BankingConsole(session=session, transactions=transactions, registry=registry)
