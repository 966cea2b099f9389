"""Data models for the banking system."""

from .account import Account
from .exceptions import (
    BankError,
    AccountNotFoundError,
    AccountAlreadyExistsError,
    InsufficientBalanceError,
    InvalidAmountError,
    InvalidTransferError,
    InvalidFieldError,
    AuthenticationError,
    TooManyAttemptsError,
)

__all__ = [
    "Account",
    "BankError",
    "AccountNotFoundError",
    "AccountAlreadyExistsError",
    "InsufficientBalanceError",
    "InvalidAmountError",
    "InvalidTransferError",
    "InvalidFieldError",
    "AuthenticationError",
    "TooManyAttemptsError",
]
