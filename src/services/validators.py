"""Field validation predicates shared by the service and console layers."""

import math
import re
from typing import Callable, Collection

NAME_PATTERN = re.compile(r"[A-Za-z\s]+")
MOBILE_PATTERN = re.compile(r"[0-9]{10}")
ACCOUNT_NUMBER_PATTERN = re.compile(r"[0-9]{16}")
INTEGER_PATTERN = re.compile(r"[0-9]+")
DECIMAL_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")

MIN_AGE = 18
MIN_PASSWORD_LENGTH = 6


def valid_name(name: str) -> bool:
    """Letters and whitespace only, at least one character."""
    return NAME_PATTERN.fullmatch(name) is not None


def valid_mobile(mobile: str) -> bool:
    return MOBILE_PATTERN.fullmatch(mobile) is not None


def valid_age(age: int) -> bool:
    return age > MIN_AGE


def valid_password(password: str) -> bool:
    return len(password) >= MIN_PASSWORD_LENGTH


def valid_account_number(account_number: str) -> bool:
    return ACCOUNT_NUMBER_PATTERN.fullmatch(account_number) is not None


def valid_amount(amount: float) -> bool:
    return math.isfinite(amount) and amount > 0


def valid_menu_option(options: Collection[int]) -> Callable[[int], bool]:
    """
    Build a predicate accepting only the given menu option codes.

    Args:
        options: The option codes the menu handles

    Returns:
        A predicate returning True for members of options
    """
    allowed = frozenset(options)

    def predicate(option: int) -> bool:
        return option in allowed

    return predicate


def to_int(text: str) -> int:
    """Parse a plain run of ASCII digits.

    Raises:
        ValueError: If text is anything else (signs, underscores, other scripts)
    """
    if INTEGER_PATTERN.fullmatch(text) is None:
        raise ValueError(f"Not a whole number: {text!r}")
    return int(text)


def to_amount(text: str) -> float:
    """Parse an ASCII decimal amount such as ``12``, ``12.5`` or ``.5``.

    Raises:
        ValueError: If text is not a plain decimal (``inf``, ``nan``, exponents)
    """
    if DECIMAL_PATTERN.fullmatch(text) is None:
        raise ValueError(f"Not an amount: {text!r}")
    return float(text)
