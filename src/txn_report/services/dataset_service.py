"""Dataset initialisation service."""

import asyncio
import logging

from txn_report.core.exceptions import UpstreamError
from txn_report.domain.models import Transaction
from txn_report.providers.dataset_provider import DatasetProvider
from txn_report.repositories.protocols import TransactionRepository

logger = logging.getLogger(__name__)


class DatasetService:
    """Replaces the stored transactions with the provider's dataset."""

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        provider: DatasetProvider,
    ):
        self._transactions = transaction_repo
        self._provider = provider

    async def initialize(self) -> int:
        """
        Fetch the dataset and replace the store contents with it.

        Returns the number of transactions inserted. Fetch failures raise
        ``UpstreamError`` before the store is touched, as do records whose
        fields cannot be read; store failures raise ``StoreError``.
        """
        records = await self._provider.fetch()
        try:
            transactions = [Transaction.from_record(r) for r in records]
        except (ValueError, TypeError, OverflowError) as exc:
            raise UpstreamError(self._provider.source, f"malformed record: {exc}") from exc

        inserted = await asyncio.to_thread(self._transactions.replace_all, transactions)
        logger.info("Loaded %d transactions from %s", inserted, self._provider.source)
        return inserted
