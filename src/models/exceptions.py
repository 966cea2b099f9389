"""Custom exceptions for the banking system."""


class BankError(Exception):
    """Base exception for all banking-related errors."""
    pass


class AccountNotFoundError(BankError):
    """Raised when an account cannot be found."""
    pass


class AccountAlreadyExistsError(BankError):
    """Raised when attempting to create an account that already exists."""
    pass


class InsufficientBalanceError(BankError):
    """Raised when an account has insufficient balance for a transaction."""
    pass


class InvalidAmountError(BankError):
    """Raised when an invalid amount is provided (e.g., zero or negative)."""
    pass


class InvalidTransferError(BankError):
    """Raised when a transfer is invalid (e.g., same sender and receiver)."""
    pass


class InvalidFieldError(BankError):
    """Raised when a signup field fails validation."""
    pass


class AuthenticationError(BankError):
    """Raised when an account number and password do not match."""
    pass


class TooManyAttemptsError(BankError):
    """Raised when input stays invalid after the maximum number of attempts."""
    pass
