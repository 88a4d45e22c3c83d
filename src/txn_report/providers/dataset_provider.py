"""Dataset provider protocol."""

from typing import Any, Protocol


class DatasetProvider(Protocol):
    """
    Source of raw transaction records.

    Implementations return a list of transaction-shaped dicts and raise
    ``UpstreamError`` when the source cannot be read.
    """

    @property
    def source(self) -> str:
        """Human-readable location of the dataset."""
        ...

    async def fetch(self) -> list[dict[str, Any]]:
        """Fetch every record from the source."""
        ...
