"""Interactive menus for the bank console."""

import logging

from src.console.prompt import InputFunc, PrintFunc, PromptField, ask
from src.models.exceptions import (
    BankError,
    TooManyAttemptsError,
)
from src.services import validators
from src.services.bank_service import BankService

logger = logging.getLogger(__name__)

MAIN_MENU_OPTIONS = (1, 2, 3)
DASHBOARD_OPTIONS = (1, 2, 3, 4)

NAME_FIELD = PromptField(
    "Enter your name: ",
    validators.valid_name,
    "Invalid name! Name should only contain alphabetic characters.",
)
MOBILE_FIELD = PromptField(
    "Enter your mobile number: ",
    validators.valid_mobile,
    "Invalid mobile number! It should be 10 digits.",
)
AGE_FIELD = PromptField(
    "Enter your age: ",
    validators.valid_age,
    "Invalid age! You must be above 18 to create an account.",
    validators.to_int,
)
NOMINEE_FIELD = PromptField(
    "Enter nominee name: ",
    validators.valid_name,
    "Invalid nominee name! Name should only contain alphabetic characters.",
)
SIGNUP_PASSWORD_FIELD = PromptField(
    "Enter your password: ",
    validators.valid_password,
    "Invalid password! Password must be at least 6 characters.",
)
ACCOUNT_NUMBER_FIELD = PromptField(
    "Enter your account number: ",
    validators.valid_account_number,
    "Invalid account number.",
)
PASSWORD_FIELD = PromptField(
    "Enter your password: ",
    validators.valid_password,
    "Invalid password.",
)
TARGET_ACCOUNT_FIELD = PromptField(
    "Enter the account number to transfer to: ",
    validators.valid_account_number,
    "Invalid account number.",
)

AMOUNT_ERROR = "Invalid amount. Please enter a valid positive number."


def amount_field(prompt: str) -> PromptField:
    return PromptField(prompt, validators.valid_amount, AMOUNT_ERROR, validators.to_amount)


def menu_field(options) -> PromptField:
    return PromptField(
        "Choose an option: ",
        validators.valid_menu_option(options),
        "Invalid option. Please try again.",
        validators.to_int,
    )


class BankConsole:
    """Top-level controller driving the menus over a BankService."""

    def __init__(
        self,
        service: BankService,
        input_func: InputFunc = input,
        print_func: PrintFunc = print,
        max_attempts: int = 3,
        currency_symbol: str = "$",
    ):
        """
        Args:
            service: The bank service holding all accounts
            input_func: Shows a prompt and reads one line
            print_func: Writes one line
            max_attempts: Attempts allowed per prompt and per step-up check
            currency_symbol: Prefix for displayed amounts
        """
        self._service = service
        self._input = input_func
        self._print = print_func
        self._max_attempts = max_attempts
        self._currency = currency_symbol

    def _ask(self, field: PromptField):
        return ask(field, self._input, self._print, self._max_attempts)

    def _money(self, amount: float) -> str:
        return f"{self._currency}{amount:.2f}"

    def run(self) -> None:
        """Show the top menu until the user exits."""
        while True:
            self._print("Welcome to the Bank System")
            self._print("1. Signup")
            self._print("2. Login")
            self._print("3. Exit")
            try:
                option = self._ask(menu_field(MAIN_MENU_OPTIONS))
            except TooManyAttemptsError:
                continue

            if option == 1:
                self.signup()
            elif option == 2:
                self.login()
            elif option == 3:
                self._print("Thank you for using the Bank System.")
                logger.info("Session ended")
                return

    def signup(self) -> None:
        try:
            name = self._ask(NAME_FIELD)
            mobile = self._ask(MOBILE_FIELD)
            age = self._ask(AGE_FIELD)
            nominee = self._ask(NOMINEE_FIELD)
            password = self._ask(SIGNUP_PASSWORD_FIELD)
        except TooManyAttemptsError:
            return

        try:
            account = self._service.signup(name, mobile, age, nominee, password)
        except BankError as err:
            self._print(str(err))
            return
        self._print(f"Signup successful! Your account number is: {account.account_number}")

    def login(self) -> None:
        try:
            account_number = self._ask(ACCOUNT_NUMBER_FIELD)
            password = self._ask(PASSWORD_FIELD)
        except TooManyAttemptsError:
            return

        try:
            self._service.authenticate(account_number, password)
        except BankError as err:
            self._print(str(err))
            return
        self._print("Login successful!")
        self.dashboard(account_number)

    def dashboard(self, account_number: str) -> None:
        """Per-account menu, entered after a successful login."""
        while True:
            account = self._service.get_account(account_number)
            self._print("")
            self._print(f"Account Dashboard for {account.name}")
            self._print(f"Account Balance: {self._money(account.balance)}")
            self._print("1. Deposit")
            self._print("2. Withdraw")
            self._print("3. Transaction")
            self._print("4. Logout")
            try:
                option = self._ask(menu_field(DASHBOARD_OPTIONS))
            except TooManyAttemptsError:
                continue

            if option == 4:
                self._print("Logged out successfully.")
                return
            action = {1: self.deposit, 2: self.withdraw, 3: self.transaction}[option]
            try:
                action(account_number)
            except TooManyAttemptsError:
                pass
            except BankError as err:
                self._print(str(err))

    def deposit(self, account_number: str) -> None:
        amount = self._ask(amount_field(f"Enter amount to deposit: {self._currency}"))
        self._service.deposit(account_number, amount)
        self._print(f"Successfully deposited {self._money(amount)}.")

    def withdraw(self, account_number: str) -> None:
        if not self.verify_password(account_number):
            return
        amount = self._ask(amount_field(f"Enter amount to withdraw: {self._currency}"))
        self._service.withdraw(account_number, amount)
        self._print(f"Successfully withdrew {self._money(amount)}.")

    def transaction(self, account_number: str) -> None:
        if not self.verify_password(account_number):
            return
        target = self._ask(TARGET_ACCOUNT_FIELD)
        if not self._service.account_exists(target):
            self._print("Target account does not exist.")
            return
        if target == account_number:
            self._print("Cannot transfer to the same account.")
            return
        amount = self._ask(amount_field(f"Enter the amount to transfer: {self._currency}"))
        self._service.transfer(account_number, target, amount)
        self._print(f"Successfully transferred {self._money(amount)} to account {target}.")

    def verify_password(self, account_number: str) -> bool:
        """Ask for the password again before a sensitive action."""
        for _ in range(self._max_attempts):
            try:
                password = self._ask(PASSWORD_FIELD)
            except TooManyAttemptsError:
                password = None
            if password is not None and self._service.verify_password(account_number, password):
                return True
            self._print("Incorrect password. Please try again.")
        self._print("Too many incorrect password attempts. Action aborted.")
        return False
