"""Account repository for database operations."""

import sqlite3

from src.models.account import Account
from src.models.exceptions import AccountAlreadyExistsError


class AccountRepository:
    """Repository for Account data access operations.

    Accounts are keyed by account number. The connection is expected to be an
    in-memory SQLite database, so nothing outlives the process.
    """

    def __init__(self, conn: sqlite3.Connection):
        """
        Initialize the repository with a database connection.

        Args:
            conn: SQLite database connection
        """
        self._conn = conn
        self._conn.row_factory = sqlite3.Row

    def create_table(self) -> None:
        """Create the Accounts table if it doesn't exist."""
        cursor = self._conn.cursor()
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS Accounts (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                Account TEXT UNIQUE,
                Name TEXT,
                Mobile TEXT,
                Age INTEGER,
                Nominee TEXT,
                Password TEXT,
                Balance REAL
            )
        """
        )
        self._conn.commit()

    def find_by_account_no(self, account_no: str) -> Account | None:
        """
        Find an account by account number.

        Args:
            account_no: The account number to search for

        Returns:
            Account object if found, None otherwise
        """
        cursor = self._conn.cursor()
        cursor.execute(
            "SELECT Account, Name, Mobile, Age, Nominee, Password, Balance "
            "FROM Accounts WHERE Account = ?",
            (account_no,),
        )
        row = cursor.fetchone()

        if row is None:
            return None

        return Account(
            account_number=row["Account"],
            name=row["Name"],
            mobile=row["Mobile"],
            age=row["Age"],
            nominee=row["Nominee"],
            password=row["Password"],
            balance=row["Balance"],
        )

    def create(self, account: Account) -> None:
        """
        Create a new account.

        Args:
            account: The Account object to create

        Raises:
            AccountAlreadyExistsError: If an account with the same account number already exists
        """
        cursor = self._conn.cursor()
        try:
            cursor.execute(
                """
                INSERT INTO Accounts (Account, Name, Mobile, Age, Nominee, Password, Balance)
                VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
                (
                    account.account_number,
                    account.name,
                    account.mobile,
                    account.age,
                    account.nominee,
                    account.password,
                    account.balance,
                ),
            )
            self._conn.commit()
        except sqlite3.IntegrityError:
            self._conn.rollback()
            raise AccountAlreadyExistsError(
                f"Account {account.account_number} already exists"
            )

    def exists(self, account_no: str) -> bool:
        """
        Check if an account exists.

        Args:
            account_no: The account number to check

        Returns:
            True if the account exists, False otherwise
        """
        cursor = self._conn.cursor()
        cursor.execute("SELECT 1 FROM Accounts WHERE Account = ?", (account_no,))
        return cursor.fetchone() is not None

    def update_balance(self, account_no: str, delta: float) -> None:
        """
        Update the balance by adding delta.

        Args:
            account_no: The account number to update
            delta: The amount to add (can be negative)
        """
        cursor = self._conn.cursor()
        cursor.execute(
            "UPDATE Accounts SET Balance = Balance + ? WHERE Account = ?",
            (delta, account_no),
        )
        self._conn.commit()

    def move_balance(self, from_account: str, to_account: str, amount: float) -> None:
        """
        Debit one account and credit another in a single transaction.

        Either both updates are committed or neither is.

        Args:
            from_account: The account number to debit
            to_account: The account number to credit
            amount: The amount to move
        """
        with self._conn:
            self._conn.execute(
                "UPDATE Accounts SET Balance = Balance - ? WHERE Account = ?",
                (amount, from_account),
            )
            self._conn.execute(
                "UPDATE Accounts SET Balance = Balance + ? WHERE Account = ?",
                (amount, to_account),
            )

    def count(self) -> int:
        """Return the number of stored accounts."""
        cursor = self._conn.cursor()
        cursor.execute("SELECT COUNT(*) FROM Accounts")
        return cursor.fetchone()[0]
