"""Shared read-modify-write plumbing for services backed by a JSON collection."""

from typing import Any, Generic, TypeVar

from flatfile_api.application.interfaces import CollectionStore
from flatfile_api.domain.entities import Record
from flatfile_api.domain.exceptions import EntityNotFoundError

RecordT = TypeVar("RecordT", bound=Record)


class CollectionService(Generic[RecordT]):
    """Loads the whole collection on every call and saves it back after writes.

    No state is kept between calls: the collection file is the only source
    of truth.
    """

    record_type: type[RecordT]

    def __init__(self, store: CollectionStore, collection: str):
        self._store = store
        self._collection = collection

    async def _load(self) -> list[RecordT]:
        raw = await self._store.load(self._collection)
        return [self.record_type.from_dict(item) for item in raw]

    async def _save(self, records: list[RecordT]) -> None:
        await self._store.save(self._collection, [r.to_dict() for r in records])

    def _index_of(self, records: list[RecordT], record_id: Any) -> int:
        for index, record in enumerate(records):
            if record.id == record_id:
                return index
        raise EntityNotFoundError(self.record_type.entity_name, record_id)

    async def _get(self, record_id: Any) -> RecordT:
        records = await self._load()
        return records[self._index_of(records, record_id)]

    async def _update(self, record_id: Any, payload: dict[str, Any]) -> RecordT:
        records = await self._load()
        index = self._index_of(records, record_id)
        records[index] = records[index].merged(payload)
        await self._save(records)
        return records[index]

    async def _delete(self, record_id: Any) -> RecordT:
        records = await self._load()
        removed = records.pop(self._index_of(records, record_id))
        await self._save(records)
        return removed
