"""Configuration management for the bank console."""
import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Configuration settings for the bank console.

    Every field has a default, so the console runs with no environment at
    all. Settings.load() applies optional overrides from the environment.
    """

    # Storage (in-memory only, lost on exit)
    db_path: str = ':memory:'

    # Account numbers
    account_prefix: str = '1234'
    account_random_digits: int = 12
    max_account_number_retries: int = 10

    # Input handling
    max_attempts: int = 3

    # Display
    currency_symbol: str = '$'

    # Logging
    log_file: str | None = None
    log_level: str = 'INFO'

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings, applying overrides from environment variables.

        Returns:
            Settings: A Settings instance with environment overrides applied.

        Raises:
            ValueError: If BANK_MAX_ATTEMPTS is set but is not a positive integer.
        """
        settings = cls()

        log_file = os.getenv('BANK_LOG_FILE')
        if log_file:
            settings.log_file = log_file

        log_level = os.getenv('BANK_LOG_LEVEL')
        if log_level:
            settings.log_level = log_level.upper()

        max_attempts = os.getenv('BANK_MAX_ATTEMPTS')
        if max_attempts:
            try:
                settings.max_attempts = int(max_attempts)
            except ValueError:
                raise ValueError("BANK_MAX_ATTEMPTS must be a positive integer")
            if settings.max_attempts < 1:
                raise ValueError("BANK_MAX_ATTEMPTS must be a positive integer")

        return settings
