"""End-to-end tests: HTTP routes against real JSON files on disk."""

import json

import pytest
from httpx import ASGITransport, AsyncClient

from flatfile_api.infrastructure.dependencies import get_collection_store
from flatfile_api.infrastructure.storage.json_collection_store import JsonCollectionStore
from flatfile_api.main import app


@pytest.fixture
def data_dir(tmp_path, sample_users, sample_products):
    (tmp_path / "users.json").write_text(json.dumps(sample_users), encoding="utf-8")
    (tmp_path / "products.json").write_text(json.dumps(sample_products), encoding="utf-8")
    app.dependency_overrides[get_collection_store] = lambda: JsonCollectionStore(tmp_path)
    yield tmp_path
    app.dependency_overrides.clear()


def _read(path):
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.mark.asyncio
async def test_user_lifecycle_persists_to_disk(data_dir, sample_users):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        created = await client.post("/api/v1/users", json={"id": "abc", "name": "Ada"})
        assert created.status_code == 201
        assert _read(data_dir / "users.json")[-1] == {"id": "abc", "name": "Ada"}

        patched = await client.patch("/api/v1/users/abc", json={"role": "admin"})
        assert patched.json()["data"]["user"] == {"id": "abc", "name": "Ada", "role": "admin"}

        deleted = await client.delete("/api/v1/users/abc")
        assert deleted.status_code == 200

    assert _read(data_dir / "users.json") == sample_users


@pytest.mark.asyncio
async def test_products_written_in_order(data_dir, sample_products):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        await client.post("/api/v1/products", json={"name": "Third", "price": 5})

    stored = _read(data_dir / "products.json")
    assert [p["id"] for p in stored] == [1, 2, 3]
    assert stored[:2] == sample_products


@pytest.mark.asyncio
async def test_corrupt_collection_is_a_500(data_dir):
    (data_dir / "products.json").write_text("{oops", encoding="utf-8")
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/products")

    assert response.status_code == 500
    body = response.json()
    assert body["status"] == "error"
    assert body["message"] == "Could not load data from products.json"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method,path,body",
    [
        ("POST", "/api/v1/products", b'{"name": "X", "price": NaN}'),
        ("PATCH", "/api/v1/products/1", b'{"price": Infinity}'),
        ("POST", "/api/v1/users", b'{"name": "Y", "scores": [1, -Infinity]}'),
    ],
)
async def test_non_finite_numbers_are_rejected(data_dir, sample_users, sample_products, method, path, body):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.request(
            method, path, content=body, headers={"content-type": "application/json"}
        )

    assert response.status_code == 400
    assert response.json()["status"] == "error"
    assert _read(data_dir / "products.json") == sample_products
    assert _read(data_dir / "users.json") == sample_users


@pytest.mark.asyncio
async def test_product_without_id_does_not_break_numbering(data_dir):
    (data_dir / "products.json").write_text('[{"name": "noid"}, {"id": 4, "name": "Four"}]', encoding="utf-8")
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post("/api/v1/products", json={"name": "New"})

    assert response.status_code == 201
    assert response.json()["data"]["product"]["id"] == 5
    assert _read(data_dir / "products.json")[-1] == {"id": 5, "name": "New"}
