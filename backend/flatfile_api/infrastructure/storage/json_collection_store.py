"""JSON-file collection store — one file per collection, read and written whole.

Storage layout:
    <data_dir>/<collection>        — a top-level JSON array of objects
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from flatfile_api.application.interfaces import CollectionStore
from flatfile_api.domain.exceptions import CollectionLoadError, CollectionSaveError

logger = logging.getLogger(__name__)


class JsonCollectionStore(CollectionStore):
    """Infrastructure adapter persisting collections as pretty-printed JSON files.

    Every ``save`` overwrites the file in full. There is no locking: two
    requests mutating the same collection concurrently both read the old
    contents and the later save wins.
    """

    def __init__(self, data_dir: str | Path):
        self._data_dir = Path(data_dir)

    def path_for(self, name: str) -> Path:
        return self._data_dir / name

    # ── Load / Save ─────────────────────────────────────────────────

    async def load(self, name: str) -> list[dict[str, Any]]:
        try:
            return await asyncio.to_thread(self._read, self.path_for(name))
        except (OSError, ValueError) as exc:
            logger.error("Error loading collection %s: %s", name, exc)
            raise CollectionLoadError(name) from exc

    async def save(self, name: str, records: list[dict[str, Any]]) -> None:
        try:
            await asyncio.to_thread(self._write, self.path_for(name), records)
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Error saving collection %s: %s", name, exc)
            raise CollectionSaveError(name) from exc
        logger.debug("Saved %d records to %s", len(records), name)

    # ── Startup ─────────────────────────────────────────────────────

    def ensure_collections(self, names: list[str]) -> list[str]:
        """Create the data directory and an empty array for each missing file.

        Returns the names of the collections that were created.
        """
        self._data_dir.mkdir(parents=True, exist_ok=True)
        created = []
        for name in names:
            path = self.path_for(name)
            if not path.exists():
                self._write(path, [])
                created.append(name)
                logger.info("Created empty collection: %s", path)
        return created

    # ── File I/O (runs in a worker thread) ──────────────────────────

    @staticmethod
    def _read(path: Path) -> list[dict[str, Any]]:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise ValueError(f"{path} does not contain a JSON array of objects")
        return data

    @staticmethod
    def _write(path: Path, records: list[dict[str, Any]]) -> None:
        text = json.dumps(records, indent=2, ensure_ascii=False, allow_nan=False)
        path.write_text(text + "\n", encoding="utf-8")
