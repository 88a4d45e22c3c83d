"""Dataset providers module."""

from txn_report.providers.dataset_provider import DatasetProvider
from txn_report.providers.http_provider import HttpDatasetProvider
from txn_report.providers.file_provider import FileDatasetProvider

__all__ = [
    "DatasetProvider",
    "HttpDatasetProvider",
    "FileDatasetProvider",
]
