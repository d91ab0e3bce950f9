"""Unit tests for the JSON-file collection store."""

import json

import pytest

from flatfile_api.domain.exceptions import CollectionLoadError, CollectionSaveError
from flatfile_api.infrastructure.storage.json_collection_store import JsonCollectionStore


@pytest.fixture
def store(tmp_path) -> JsonCollectionStore:
    return JsonCollectionStore(tmp_path)


@pytest.mark.asyncio
async def test_save_then_load_round_trip(store: JsonCollectionStore):
    records = [
        {"id": 2, "name": "Zeta", "tags": ["a", "b"]},
        {"id": 1, "name": "Ünïcode", "price": 9.5, "meta": {"nested": True}},
    ]
    await store.save("items.json", records)
    assert await store.load("items.json") == records


@pytest.mark.asyncio
async def test_save_writes_pretty_json_and_overwrites(store: JsonCollectionStore, tmp_path):
    await store.save("items.json", [{"id": 1}, {"id": 2}])
    await store.save("items.json", [{"id": 3}])

    text = (tmp_path / "items.json").read_text(encoding="utf-8")
    assert json.loads(text) == [{"id": 3}]
    assert text.startswith("[\n  {")


@pytest.mark.asyncio
async def test_load_missing_file(store: JsonCollectionStore):
    with pytest.raises(CollectionLoadError) as exc_info:
        await store.load("missing.json")
    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "Could not load data from missing.json"
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


@pytest.mark.asyncio
async def test_load_invalid_json(store: JsonCollectionStore, tmp_path):
    (tmp_path / "broken.json").write_text("[{not json", encoding="utf-8")
    with pytest.raises(CollectionLoadError):
        await store.load("broken.json")


@pytest.mark.asyncio
@pytest.mark.parametrize("content", ['{"id": 1}', "[1, 2]", '"text"'])
async def test_load_rejects_non_array_of_objects(store: JsonCollectionStore, tmp_path, content):
    (tmp_path / "odd.json").write_text(content, encoding="utf-8")
    with pytest.raises(CollectionLoadError):
        await store.load("odd.json")


@pytest.mark.asyncio
async def test_save_into_missing_directory(tmp_path):
    store = JsonCollectionStore(tmp_path / "does-not-exist")
    with pytest.raises(CollectionSaveError) as exc_info:
        await store.save("items.json", [])
    assert exc_info.value.message == "Could not save data to items.json"


@pytest.mark.asyncio
async def test_save_unserializable_record(store: JsonCollectionStore):
    with pytest.raises(CollectionSaveError):
        await store.save("items.json", [{"id": 1, "when": object()}])


@pytest.mark.asyncio
async def test_save_rejects_non_finite_numbers(store: JsonCollectionStore):
    await store.save("items.json", [{"id": 1, "price": 1.0}])
    with pytest.raises(CollectionSaveError):
        await store.save("items.json", [{"id": 1, "price": float("nan")}])
    assert await store.load("items.json") == [{"id": 1, "price": 1.0}]


@pytest.mark.asyncio
async def test_ensure_collections_creates_only_missing(tmp_path):
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "users.json").write_text('[{"id": "1"}]', encoding="utf-8")
    store = JsonCollectionStore(data_dir)

    created = store.ensure_collections(["users.json", "products.json"])

    assert created == ["products.json"]
    assert await store.load("products.json") == []
    assert await store.load("users.json") == [{"id": "1"}]
