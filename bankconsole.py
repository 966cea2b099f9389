import logging
import sqlite3
import sys

from dotenv import load_dotenv

from config.settings import Settings
from src.console.bank_console import BankConsole
from src.repositories.account_repo import AccountRepository
from src.services.bank_service import BankService

logger = logging.getLogger('src')


def setup_logging(settings: Settings) -> None:
    logger.setLevel(settings.log_level)
    # keep log records off the interactive console
    logger.propagate = False
    if settings.log_file:
        handler = logging.FileHandler(filename=settings.log_file, encoding='utf-8', mode='w')
        handler.setFormatter(logging.Formatter('%(asctime)s:%(levelname)s:%(name)s: %(message)s'))
    else:
        handler = logging.NullHandler()
    logger.addHandler(handler)


def build_console(settings: Settings, conn: sqlite3.Connection, **io) -> BankConsole:
    account_repo = AccountRepository(conn)
    account_repo.create_table()
    service = BankService(
        account_repo=account_repo,
        account_prefix=settings.account_prefix,
        random_digits=settings.account_random_digits,
        max_number_retries=settings.max_account_number_retries,
    )
    return BankConsole(
        service,
        max_attempts=settings.max_attempts,
        currency_symbol=settings.currency_symbol,
        **io,
    )


def main() -> int:
    load_dotenv()
    settings = Settings.load()
    setup_logging(settings)

    conn = sqlite3.connect(settings.db_path)
    try:
        build_console(settings, conn, input_func=input, print_func=print).run()
    except (EOFError, KeyboardInterrupt):
        logger.warning("Input closed, exiting")
        print()
        return 1
    finally:
        conn.close()
    return 0


if __name__ == '__main__':
    sys.exit(main())
