"""
Test suite for console module

Tests the screen handlers, the login prompt and the menu loop using
scripted input.
"""

from banking_system.console import BankingConsole, prompt_login, run_menu
from banking_system.transactions import TransactionPrototypeRegistry


def scripted(answers):
    """Return an input function that replays answers in order"""
    replies = iter(answers)

    def ask(prompt=""):
        try:
            return next(replies)
        except StopIteration:
            raise EOFError from None

    return ask


class TestAccountScreen:
    """Test create_account handler"""

    def test_create(self, console):
        assert console.create_account("Savings", "123") == "Created: Savings Account with Number: 123"

    def test_unknown_type(self, console):
        message = console.create_account("gold", "123")

        assert message.startswith("Error creating account: Unknown account type")


class TestLoanScreen:
    """Test create_loan handler"""

    def test_create(self, console):
        message = console.create_loan("Home", "200000", "0.05", "360")

        assert message == "Created Home Loan - Monthly Payment: 1,073.64"

    def test_defaults(self, console):
        message = console.create_loan("car", "200000", "", "")

        assert message == "Created Car Loan - Monthly Payment: 1,073.64"

    def test_non_numeric_input(self, console):
        message = console.create_loan("home", "abc", "0.05", "360")

        assert message.startswith("Error creating loan: Invalid input")

    def test_zero_term(self, console):
        message = console.create_loan("home", "1000", "0.05", "0")

        assert message.startswith("Error creating loan: Loan term must be at least one month")

    def test_unknown_type(self, console):
        assert console.create_loan("boat", "1000", "0.05", "12").startswith("Error creating loan")

    def test_tiny_rate(self, console):
        message = console.create_loan("home", "1200", "1E-30", "12")

        assert message == "Created Home Loan - Monthly Payment: 100.00"

    def test_huge_term_reported(self, console):
        message = console.create_loan("home", "200000", "0.05", "1000000000")

        assert message.startswith("Error creating loan: Loan parameters are out of range")

    def test_formatted_principal(self, console):
        message = console.create_loan("home", "$200,000.00", "0.05", "360")

        assert message == "Created Home Loan - Monthly Payment: 1,073.64"

    def test_payment_wider_than_precision(self, console):
        message = console.create_loan("home", "1000000000000000000000000000000", "0", "1")

        assert message == "Created Home Loan - Monthly Payment: 1,000,000,000,000,000,000,000,000,000,000.00"


class TestTransactionScreen:
    """Test prototype and clone handlers"""

    def test_create_from_prototype(self, console, transactions):
        message = console.create_transaction_from_prototype()

        assert message == "Created Transaction from Prototype: Regular Payment ID:T001"
        assert [t.transaction_id for t in transactions.get_all_transactions()] == ["T001"]

    def test_clone(self, console, transactions):
        console.create_transaction_from_prototype()
        message = console.clone_transaction()

        assert message == "Cloned Transaction: Regular Payment ID:T002"
        recorded = transactions.get_all_transactions()
        assert [t.transaction_id for t in recorded] == ["T001", "T002"]
        assert recorded[0] is not recorded[1]

    def test_template_untouched(self, console, registry):
        console.create_transaction_from_prototype()

        assert registry.get_prototype("monthlyPayment").transaction_id == "T000"

    def test_missing_prototype(self, session, transactions):
        console = BankingConsole(session=session, transactions=transactions,
                                 registry=TransactionPrototypeRegistry())

        assert console.create_transaction_from_prototype() == "No prototype found."
        assert console.clone_transaction() == "No prototype found."
        assert transactions.get_all_transactions() == []

    def test_list(self, console):
        console.create_transaction_from_prototype()

        assert console.list_transactions() == ["T001: Regular Payment A001 -> A002 100.00"]


class TestCurrencyScreen:
    """Test convert_currency handler"""

    def test_convert(self, console):
        assert console.convert_currency("100", "eur") == "100.00 EUR = 85.00 USD"

    def test_unknown_currency(self, console):
        assert console.convert_currency("100", "XYZ").startswith("Error converting currency")

    def test_bad_amount(self, console):
        assert console.convert_currency("lots", "EUR").startswith("Error converting currency")

    def test_source_precision(self, console):
        """Test amounts are shown with each currency's own minor units"""
        assert console.convert_currency("100", "JPY") == "100 JPY = 85.00 USD"

    def test_formatted_amount(self, console):
        assert console.convert_currency("1,000.00", "EUR") == "1,000.00 EUR = 850.00 USD"


class TestLogin:
    """Test login handler and prompt"""

    def test_login(self, console, session):
        assert console.login("alice", "")
        assert session.current_user_id == "alice"

    def test_login_blank(self, console):
        assert not console.login("  ", "x")

    def test_prompt_retries_until_success(self, console, session):
        shown = []
        ok = prompt_login(console, ask=scripted(["", "alice"]),
                          ask_secret=scripted(["x", "pw"]), show=shown.append)

        assert ok
        assert shown == ["Login failed."]
        assert session.current_user_id == "alice"

    def test_prompt_gives_up_on_eof(self, console, session):
        assert not prompt_login(console, ask=scripted([]), ask_secret=scripted([]),
                                show=lambda line: None)
        assert session.current_user_id is None

    def test_logout(self, console, session):
        console.login("alice", "pw")

        assert console.logout() == "Goodbye, alice."
        assert session.current_user_id is None


class TestMenu:
    """Test run_menu"""

    def test_session(self, console, session, transactions):
        session.authenticate("alice", "pw")
        shown = []
        run_menu(console, ask=scripted([
            "1", "checking", "C-1",
            "2", "personal", "200000", "0.05", "360",
            "3",
            "9",
            "5",
            "7",
        ]), show=shown.append)

        assert "Created: Checking Account with Number: C-1" in shown
        assert "Created Personal Loan - Monthly Payment: 1,073.64" in shown
        assert "Created Transaction from Prototype: Regular Payment ID:T001" in shown
        assert "Unknown option." in shown
        assert "T001: Regular Payment A001 -> A002 100.00" in shown
        assert shown[-1] == "Goodbye, alice."
        assert session.current_user_id is None

    def test_eof_logs_out(self, console, session):
        session.authenticate("alice", "pw")
        shown = []
        run_menu(console, ask=scripted([]), show=shown.append)

        assert shown[-1] == "Goodbye, alice."

    def test_eof_inside_screen_logs_out(self, console, session):
        """Test end of input while a screen is asking for fields"""
        session.authenticate("alice", "pw")
        shown = []
        run_menu(console, ask=scripted(["1"]), show=shown.append)

        assert shown[-1] == "Goodbye, alice."
        assert session.current_user_id is None

    def test_interrupt_inside_screen_logs_out(self, console, session):
        session.authenticate("alice", "pw")
        answers = iter(["2", "home"])

        def ask(prompt=""):
            try:
                return next(answers)
            except StopIteration:
                raise KeyboardInterrupt from None

        shown = []
        run_menu(console, ask=ask, show=shown.append)

        assert shown[-1] == "Goodbye, alice."

    def test_empty_transaction_list(self, console):
        shown = []
        run_menu(console, ask=scripted(["5", "7"]), show=shown.append)

        assert "No transactions." in shown
