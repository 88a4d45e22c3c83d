"""Local JSON file dataset provider."""

import json
from pathlib import Path
from typing import Any

from txn_report.core.exceptions import UpstreamError
from txn_report.providers.http_provider import ensure_records


class FileDatasetProvider:
    """Reads the dataset from a JSON file on disk (offline loading)."""

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def source(self) -> str:
        return str(self._path)

    async def fetch(self) -> list[dict[str, Any]]:
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise UpstreamError(self.source, str(exc)) from exc
        return ensure_records(payload, self.source)
