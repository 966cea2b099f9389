"""Tests for configuration management."""
import pytest
from config.settings import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ('BANK_LOG_FILE', 'BANK_LOG_LEVEL', 'BANK_MAX_ATTEMPTS'):
        monkeypatch.delenv(name, raising=False)


def test_settings_defaults():
    """Test that all default values are correctly set."""
    settings = Settings()

    assert settings.db_path == ':memory:'
    assert settings.account_prefix == '1234'
    assert settings.account_random_digits == 12
    assert settings.max_account_number_retries == 10
    assert settings.max_attempts == 3
    assert settings.currency_symbol == '$'
    assert settings.log_file is None
    assert settings.log_level == 'INFO'


def test_settings_load_without_environment():
    """With nothing set, load() gives the defaults."""
    assert Settings.load() == Settings()


def test_settings_load(monkeypatch):
    """Test loading overrides from environment variables."""
    monkeypatch.setenv('BANK_LOG_FILE', 'bank.log')
    monkeypatch.setenv('BANK_LOG_LEVEL', 'debug')
    monkeypatch.setenv('BANK_MAX_ATTEMPTS', '5')

    settings = Settings.load()

    assert settings.log_file == 'bank.log'
    assert settings.log_level == 'DEBUG'
    assert settings.max_attempts == 5


@pytest.mark.parametrize('value', ['three', '0', '-2'])
def test_settings_load_invalid_max_attempts(monkeypatch, value):
    """Test that loading fails when BANK_MAX_ATTEMPTS is not a positive integer."""
    monkeypatch.setenv('BANK_MAX_ATTEMPTS', value)

    with pytest.raises(ValueError, match="BANK_MAX_ATTEMPTS must be a positive integer"):
        Settings.load()
