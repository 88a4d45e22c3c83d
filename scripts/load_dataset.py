#!/usr/bin/env python3
"""
Load the transaction dataset into the configured store without the API.

Usage: from project root:
  python scripts/load_dataset.py                 # remote dataset_url from settings
  python scripts/load_dataset.py data/sample.json
  python scripts/load_dataset.py -v data/sample.json   # DEBUG logging
"""

import asyncio
import sys
from pathlib import Path

from txn_report.config.logging_config import setup_logging
from txn_report.config.settings import get_settings
from txn_report.core.exceptions import AppError
from txn_report.providers import FileDatasetProvider, HttpDatasetProvider
from txn_report.repositories.sqlalchemy import (
    get_session_factory,
    init_db,
    SqlAlchemyTransactionRepository,
)
from txn_report.services import DatasetService


def main(argv: list[str]) -> int:
    verbose = "-v" in argv
    argv = [a for a in argv if a != "-v"]
    setup_logging("DEBUG" if verbose else None)
    settings = get_settings()

    if argv:
        provider = FileDatasetProvider(Path(argv[0]))
    else:
        provider = HttpDatasetProvider(
            url=settings.dataset_url,
            timeout_seconds=settings.dataset_fetch_timeout_seconds,
        )

    init_db()
    service = DatasetService(
        transaction_repo=SqlAlchemyTransactionRepository(get_session_factory()),
        provider=provider,
    )
    try:
        count = asyncio.run(service.initialize())
    except AppError as e:
        print(f"✗ {e.message}")
        return 1

    print(f"✓ Loaded {count} transactions from {provider.source}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
