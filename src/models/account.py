"""Account data model."""

from dataclasses import dataclass


@dataclass
class Account:
    """Represents a bank account."""

    account_number: str
    name: str
    mobile: str
    age: int
    nominee: str
    password: str
    balance: float = 0.0

    def check_password(self, password: str) -> bool:
        """Compare a candidate password against the stored one."""
        return self.password == password
