"""Bank service for business logic layer."""

import logging
import secrets
from typing import Callable

from src.models.account import Account
from src.models.exceptions import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    AuthenticationError,
    InsufficientBalanceError,
    InvalidAmountError,
    InvalidFieldError,
    InvalidTransferError,
)
from src.repositories.account_repo import AccountRepository
from src.services import validators

logger = logging.getLogger(__name__)


class BankService:
    """Service layer for banking operations."""

    def __init__(
        self,
        account_repo: AccountRepository,
        account_prefix: str = "1234",
        random_digits: int = 12,
        max_number_retries: int = 10,
        randbelow: Callable[[int], int] = secrets.randbelow,
    ):
        """
        Initialize the BankService with a repository.

        Args:
            account_repo: Repository for account data access
            account_prefix: Fixed leading digits of every account number
            random_digits: Number of random digits appended to the prefix
            max_number_retries: How many fresh numbers to draw on collision
            randbelow: Random source returning an int in [0, n)
        """
        self._account_repo = account_repo
        self._account_prefix = account_prefix
        self._random_digits = random_digits
        self._max_number_retries = max_number_retries
        self._randbelow = randbelow

    def _generate_account_number(self) -> str:
        """Prefix followed by a zero-padded random number."""
        number = self._randbelow(10 ** self._random_digits)
        return self._account_prefix + str(number).zfill(self._random_digits)

    def _require_account(self, account_number: str) -> Account:
        account = self._account_repo.find_by_account_no(account_number)
        if account is None:
            raise AccountNotFoundError(f"Account {account_number} not found")
        return account

    @staticmethod
    def _check_amount(amount: float) -> None:
        if not validators.valid_amount(amount):
            raise InvalidAmountError(
                f"Invalid amount {amount}. Amount must be a finite number greater than zero."
            )

    def signup(
        self,
        name: str,
        mobile: str,
        age: int,
        nominee: str,
        password: str,
    ) -> Account:
        """
        Open a new account with a zero balance.

        Args:
            name: The account holder's name
            mobile: Ten digit mobile number
            age: Age in years, must be above 18
            nominee: The nominee's name
            password: Plaintext password, at least 6 characters

        Returns:
            The created Account

        Raises:
            InvalidFieldError: If any field fails validation
            AccountAlreadyExistsError: If no free account number was found
        """
        checks = (
            (validators.valid_name(name), "Invalid name! Name should only contain alphabetic characters."),
            (validators.valid_mobile(mobile), "Invalid mobile number! It should be 10 digits."),
            (validators.valid_age(age), "Invalid age! You must be above 18 to create an account."),
            (validators.valid_name(nominee), "Invalid nominee name! Name should only contain alphabetic characters."),
            (validators.valid_password(password), "Invalid password! Password must be at least 6 characters."),
        )
        for ok, message in checks:
            if not ok:
                raise InvalidFieldError(message)

        for _ in range(self._max_number_retries):
            account = Account(
                account_number=self._generate_account_number(),
                name=name,
                mobile=mobile,
                age=age,
                nominee=nominee,
                password=password,
                balance=0.0,
            )
            try:
                self._account_repo.create(account)
            except AccountAlreadyExistsError:
                logger.warning("Account number collision on %s, retrying", account.account_number)
                continue
            logger.info(
                "Opened account %s (%d accounts open)",
                account.account_number, self._account_repo.count(),
            )
            return account

        raise AccountAlreadyExistsError("Could not allocate a free account number")

    def get_account(self, account_number: str) -> Account:
        """
        Fetch an account.

        Raises:
            AccountNotFoundError: If the account doesn't exist
        """
        return self._require_account(account_number)

    def account_exists(self, account_number: str) -> bool:
        """Check whether an account number is in use."""
        return self._account_repo.exists(account_number)

    def authenticate(self, account_number: str, password: str) -> Account:
        """
        Check login credentials.

        Both a missing account and a wrong password give the same error, so
        the caller cannot tell which one was wrong.

        Raises:
            AuthenticationError: If the credentials don't match
        """
        account = self._account_repo.find_by_account_no(account_number)
        if account is None or not account.check_password(password):
            logger.warning("Failed login for account %s", account_number)
            raise AuthenticationError("Invalid account number or password.")
        logger.info("Account %s logged in", account_number)
        return account

    def verify_password(self, account_number: str, password: str) -> bool:
        """Step-up check before a withdrawal or transfer."""
        account = self._require_account(account_number)
        verified = account.check_password(password)
        if not verified:
            logger.warning("Step-up verification failed for account %s", account_number)
        return verified

    def deposit(self, account_number: str, amount: float) -> Account:
        """
        Deposit funds into an account.

        Args:
            account_number: The account to credit
            amount: The amount to deposit, must be positive

        Returns:
            The updated Account

        Raises:
            AccountNotFoundError: If the account doesn't exist
            InvalidAmountError: If the amount is zero, negative or not finite
        """
        self._require_account(account_number)
        self._check_amount(amount)

        self._account_repo.update_balance(account_number, amount)
        logger.info("Deposited %.2f into account %s", amount, account_number)
        return self._account_repo.find_by_account_no(account_number)

    def withdraw(self, account_number: str, amount: float) -> Account:
        """
        Withdraw funds from an account.

        Args:
            account_number: The account to debit
            amount: The amount to withdraw, must be positive

        Returns:
            The updated Account

        Raises:
            AccountNotFoundError: If the account doesn't exist
            InvalidAmountError: If the amount is zero, negative or not finite
            InsufficientBalanceError: If the amount exceeds the balance
        """
        account = self._require_account(account_number)
        self._check_amount(amount)

        if amount > account.balance:
            logger.warning(
                "Withdrawal of %.2f from account %s denied: balance %.2f",
                amount, account_number, account.balance,
            )
            raise InsufficientBalanceError("Insufficient balance.")

        self._account_repo.update_balance(account_number, -amount)
        logger.info("Withdrew %.2f from account %s", amount, account_number)
        return self._account_repo.find_by_account_no(account_number)

    def transfer(
        self, from_account: str, to_account: str, amount: float
    ) -> tuple[Account, Account]:
        """
        Transfer funds between two accounts.

        Args:
            from_account: The sender account number
            to_account: The receiver account number
            amount: The amount to transfer, must be positive

        Returns:
            A tuple of the updated (sender, receiver) accounts

        Raises:
            AccountNotFoundError: If either account doesn't exist
            InvalidTransferError: If sender and receiver are the same
            InvalidAmountError: If the amount is zero, negative or not finite
            InsufficientBalanceError: If the amount exceeds the sender's balance
        """
        sender = self._require_account(from_account)
        if not self._account_repo.exists(to_account):
            raise AccountNotFoundError("Target account does not exist.")

        if from_account == to_account:
            raise InvalidTransferError("Cannot transfer to the same account.")
        self._check_amount(amount)

        if amount > sender.balance:
            logger.warning(
                "Transfer of %.2f from account %s denied: balance %.2f",
                amount, from_account, sender.balance,
            )
            raise InsufficientBalanceError("Insufficient balance.")

        self._account_repo.move_balance(from_account, to_account, amount)
        logger.info("Transferred %.2f from account %s to %s", amount, from_account, to_account)
        return (
            self._account_repo.find_by_account_no(from_account),
            self._account_repo.find_by_account_no(to_account),
        )
