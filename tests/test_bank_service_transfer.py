"""Tests for BankService transfer operations."""

import sqlite3
import pytest

from src.models.exceptions import (
    AccountNotFoundError,
    InsufficientBalanceError,
    InvalidAmountError,
    InvalidTransferError,
)
from src.repositories.account_repo import AccountRepository
from src.services.bank_service import BankService


@pytest.fixture
def in_memory_db():
    """Create an in-memory SQLite database for testing."""
    conn = sqlite3.connect(":memory:")
    yield conn
    conn.close()


@pytest.fixture
def account_repo(in_memory_db):
    """Create an AccountRepository instance with a fresh database."""
    repo = AccountRepository(in_memory_db)
    repo.create_table()
    return repo


@pytest.fixture
def bank_service(account_repo):
    """Create a BankService instance with the repository."""
    return BankService(account_repo=account_repo)


@pytest.fixture
def sender_no(bank_service, account_repo):
    """Sender account funded with 10000."""
    account_no = bank_service.signup("Alice", "1111111111", 25, "Bob", "secret1").account_number
    account_repo.update_balance(account_no, 10000.0)
    return account_no


@pytest.fixture
def receiver_no(bank_service):
    """Empty receiver account."""
    return bank_service.signup("Bob", "2222222222", 40, "Alice", "secret2").account_number


def test_transfer_success(bank_service, account_repo, sender_no, receiver_no):
    """Transfer between accounts."""
    sender, receiver = bank_service.transfer(sender_no, receiver_no, 2500.0)

    assert sender.balance == 7500.0
    assert receiver.balance == 2500.0
    assert account_repo.find_by_account_no(sender_no).balance == 7500.0
    assert account_repo.find_by_account_no(receiver_no).balance == 2500.0


@pytest.mark.parametrize("amount", [0.5, 2500.25, 10000.0])
def test_transfer_preserves_total(bank_service, sender_no, receiver_no, amount):
    """The sum of both balances is unchanged by a transfer."""
    before = (
        bank_service.get_account(sender_no).balance
        + bank_service.get_account(receiver_no).balance
    )

    sender, receiver = bank_service.transfer(sender_no, receiver_no, amount)

    assert sender.balance + receiver.balance == before


def test_transfer_insufficient_balance(bank_service, account_repo, sender_no, receiver_no):
    """Should raise InsufficientBalanceError and move nothing."""
    with pytest.raises(InsufficientBalanceError):
        bank_service.transfer(sender_no, receiver_no, 10000.01)

    assert account_repo.find_by_account_no(sender_no).balance == 10000.0
    assert account_repo.find_by_account_no(receiver_no).balance == 0.0


def test_transfer_target_not_found(bank_service, account_repo, sender_no):
    """Should raise AccountNotFoundError for a missing target."""
    with pytest.raises(AccountNotFoundError) as exc_info:
        bank_service.transfer(sender_no, "1234999999999999", 10.0)

    assert str(exc_info.value) == "Target account does not exist."
    assert account_repo.find_by_account_no(sender_no).balance == 10000.0


def test_transfer_sender_not_found(bank_service, receiver_no):
    """Should raise AccountNotFoundError for a missing sender."""
    with pytest.raises(AccountNotFoundError):
        bank_service.transfer("1234999999999999", receiver_no, 10.0)


def test_transfer_to_same_account(bank_service, sender_no):
    """Should raise InvalidTransferError."""
    with pytest.raises(InvalidTransferError):
        bank_service.transfer(sender_no, sender_no, 10.0)


@pytest.mark.parametrize("amount", [0.0, -50.0])
def test_transfer_non_positive_amount(bank_service, account_repo, sender_no, receiver_no, amount):
    """Should raise InvalidAmountError."""
    with pytest.raises(InvalidAmountError):
        bank_service.transfer(sender_no, receiver_no, amount)

    assert account_repo.find_by_account_no(receiver_no).balance == 0.0


def test_transfer_non_finite_amount(bank_service, account_repo, sender_no, receiver_no):
    """Should raise InvalidAmountError."""
    with pytest.raises(InvalidAmountError):
        bank_service.transfer(sender_no, receiver_no, float("inf"))

    assert account_repo.find_by_account_no(sender_no).balance == 10000.0
    assert account_repo.find_by_account_no(receiver_no).balance == 0.0
