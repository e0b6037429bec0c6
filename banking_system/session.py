"""
Session Module

Process-wide registries: the logged-in user and the list of recorded
transactions. One instance of each is created when the module is first
imported and shared for the life of the process.
"""

from typing import List, Optional

from .logging_config import get_logger, log_action
from .transactions import Transaction

logger = get_logger(__name__)


class SessionManager:
    """Tracks the currently logged-in user"""

    def __init__(self):
        self._current_user_id: Optional[str] = None

    @property
    def current_user_id(self) -> Optional[str]:
        return self._current_user_id

    @property
    def is_authenticated(self) -> bool:
        return self._current_user_id is not None

    def authenticate(self, username: Optional[str], password: Optional[str]) -> bool:
        """
        Log a user in

        Any non-blank username is accepted and the password is not checked.

        Returns:
            True if the user is now logged in
        """
        if username is None or not username.strip():
            log_action(logger, "warning", "Login rejected: blank username", action="login")
            return False

        self._current_user_id = username
        log_action(logger, "info", "User logged in", user_id=username, action="login")
        return True

    def logout(self) -> None:
        if self._current_user_id is not None:
            log_action(logger, "info", "User logged out",
                       user_id=self._current_user_id, action="logout")
        self._current_user_id = None


class TransactionManager:
    """Append-only record of transactions in the order they were added"""

    def __init__(self):
        self._transactions: List[Transaction] = []

    def add_transaction(self, transaction: Transaction) -> None:
        self._transactions.append(transaction)
        log_action(
            logger, "info", "Transaction recorded",
            action="add_transaction",
            resource=transaction.transaction_id,
            extra={
                "type": transaction.transaction_type_label,
                "from_account": transaction.from_account,
                "to_account": transaction.to_account,
                "amount": str(transaction.amount)
            }
        )

    def get_all_transactions(self) -> List[Transaction]:
        """All recorded transactions, oldest first"""
        return list(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)


# Global registry instances
session_manager = SessionManager()
transaction_manager = TransactionManager()


def get_session_manager() -> SessionManager:
    """Get global session manager"""
    return session_manager


def get_transaction_manager() -> TransactionManager:
    """Get global transaction manager"""
    return transaction_manager
