"""
Interactive banking console

Text front end for the banking core: a login prompt followed by a menu
with account, loan, transaction and currency screens. Each screen handler
returns the line to display; errors from the core are shown as messages
and the user can try again.
"""

from getpass import getpass
from typing import Callable, Dict, List, Optional

from .accounts import create_account
from .config import get_config
from .currency import (
    Currency, CurrencyConverter, CurrencyConverterAdapter, LegacyCurrencyConverter, format_amount
)
from .exceptions import BankingError
from .forms import AccountForm, ConversionForm, LoanForm, LoginForm, parse_form
from .loans import create_loan
from .logging_config import get_logger, log_action, setup_logging
from .session import SessionManager, TransactionManager, get_session_manager, get_transaction_manager
from .transactions import TransactionPrototypeRegistry, get_prototype_registry

logger = get_logger(__name__)

MENU = """
1) Create account
2) Create loan
3) Create monthly payment (prototype)
4) Clone monthly payment transaction
5) List transactions
6) Convert currency
7) Logout and quit
"""


class BankingConsole:
    """Screen handlers wired to the banking core"""

    def __init__(
        self,
        session: Optional[SessionManager] = None,
        transactions: Optional[TransactionManager] = None,
        registry: Optional[TransactionPrototypeRegistry] = None,
        converter: Optional[CurrencyConverter] = None
    ):
        self.session = session or get_session_manager()
        self.transactions = transactions or get_transaction_manager()
        self.registry = registry or get_prototype_registry()
        self.converter = converter or CurrencyConverterAdapter(LegacyCurrencyConverter())
        self.template_name = get_config().monthly_payment_template

    def login(self, username: str, password: str) -> bool:
        form = parse_form(LoginForm, {"username": username, "password": password})
        return self.session.authenticate(form.username, form.password)

    def logout(self) -> str:
        user = self.session.current_user_id
        self.session.logout()
        return f"Goodbye, {user}." if user else "Not logged in."

    def create_account(self, account_type: str, account_number: str) -> str:
        try:
            form = parse_form(AccountForm, {"account_type": account_type,
                                            "account_number": account_number})
            account = create_account(form.account_type, form.account_number)
        except BankingError as e:
            return f"Error creating account: {e}"

        log_action(logger, "info", "Account created", user_id=self.session.current_user_id,
                   action="create_account", resource=account.account_number)
        return f"Created: {account.account_type_label} with Number: {account.account_number}"

    def create_loan(self, loan_type: str, principal: str, interest_rate: str, term_months: str) -> str:
        try:
            form = parse_form(LoanForm, {
                "loan_type": loan_type,
                "principal": principal,
                "interest_rate": interest_rate,
                "term_months": term_months
            })
            loan = create_loan(form.loan_type, form.principal, form.interest_rate, form.term_months)
            payment = loan.monthly_payment
        except BankingError as e:
            return f"Error creating loan: {e}"

        log_action(logger, "info", "Loan created", user_id=self.session.current_user_id,
                   action="create_loan", extra={"type": loan.loan_type_label,
                                                "principal": str(loan.principal)})
        return f"Created {loan.loan_type_label} - Monthly Payment: {format_amount(payment)}"

    def create_transaction_from_prototype(self, transaction_id: str = "T001") -> str:
        try:
            txn = self.registry.get_prototype(self.template_name)
        except BankingError:
            return "No prototype found."

        txn.transaction_id = transaction_id
        self.transactions.add_transaction(txn)
        return f"Created Transaction from Prototype: {txn.transaction_type_label} ID:{txn.transaction_id}"

    def clone_transaction(self, transaction_id: str = "T002") -> str:
        try:
            txn = self.registry.get_prototype(self.template_name)
        except BankingError:
            return "No prototype found."

        cloned = txn.clone()
        cloned.transaction_id = transaction_id
        self.transactions.add_transaction(cloned)
        return f"Cloned Transaction: {cloned.transaction_type_label} ID:{cloned.transaction_id}"

    def list_transactions(self) -> List[str]:
        return [
            f"{txn.transaction_id}: {txn.transaction_type_label} "
            f"{txn.from_account} -> {txn.to_account} {format_amount(txn.amount)}"
            for txn in self.transactions.get_all_transactions()
        ]

    def convert_currency(self, amount: str, currency: str) -> str:
        try:
            form = parse_form(ConversionForm, {"amount": amount, "currency": currency})
            source = Currency.from_code(form.currency)
            reference = Currency.from_code(get_config().reference_currency)
            result = self.converter.convert_to_reference(form.amount, source)
        except BankingError as e:
            return f"Error converting currency: {e}"

        return (f"{format_amount(form.amount, source.precision)} {source.code} = "
                f"{format_amount(result, reference.precision)} {reference.code}")


def prompt_login(console: BankingConsole, ask: Callable[[str], str] = input,
                 ask_secret: Callable[[str], str] = getpass,
                 show: Callable[[str], None] = print) -> bool:
    """Ask for credentials until login succeeds; False if the user gives up"""
    while True:
        try:
            username = ask("Username: ")
            password = ask_secret("Password: ")
        except (EOFError, KeyboardInterrupt):
            return False

        if console.login(username, password):
            return True
        show("Login failed.")


def run_menu(console: BankingConsole, ask: Callable[[str], str] = input,
             show: Callable[[str], None] = print) -> None:
    """Main menu loop"""
    def show_transactions() -> None:
        for line in console.list_transactions() or ["No transactions."]:
            show(line)

    handlers: Dict[str, Callable[[], None]] = {
        "1": lambda: show(console.create_account(ask("Account type (savings/checking/loan): "),
                                                 ask("Account number: "))),
        "2": lambda: show(console.create_loan(ask("Loan type (home/car/personal): "),
                                              ask("Principal: "),
                                              ask("Interest rate (decimal) [0.05]: "),
                                              ask("Term (months) [360]: "))),
        "3": lambda: show(console.create_transaction_from_prototype()),
        "4": lambda: show(console.clone_transaction()),
        "5": show_transactions,
        "6": lambda: show(console.convert_currency(ask("Amount: "), ask("Currency: "))),
    }

    while True:
        show(MENU)
        try:
            choice = ask("> ").strip()
            if choice != "7":
                handler = handlers.get(choice)
                if handler is None:
                    show("Unknown option.")
                    continue
                handler()
                continue
        except (EOFError, KeyboardInterrupt):
            pass

        show(console.logout())
        return


def main() -> int:
    """Console entry point"""
    config = get_config()
    setup_logging(config.log_level, "banking_system", config.log_format)

    console = BankingConsole()
    if not prompt_login(console):
        return 0

    print(f"🏦 Welcome, {console.session.current_user_id}")
    run_menu(console)
    return 0
