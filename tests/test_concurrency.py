# tests/test_concurrency.py
import asyncio

import httpx

from conftest import HEADERS


async def _create_task(ac, i):
    return await ac.post(
        "/api/products",
        json={"name": f"Item {i}", "price": 10 + i, "category": "bulk"},
        headers=HEADERS,
    )


async def _run_creates(app, n):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        return await asyncio.gather(*(_create_task(ac, i) for i in range(n)))


async def _run_deletes(app, product_id, n):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        return await asyncio.gather(*(
            ac.delete(f"/api/products/{product_id}", headers=HEADERS) for _ in range(n)
        ))


def test_concurrent_creates_get_unique_ids(app, store):
    results = asyncio.run(_run_creates(app, 25))
    assert all(r.status_code == 201 for r in results)
    ids = [r.json()["id"] for r in results]
    assert len(set(ids)) == 25
    assert len(store) == 28


def test_concurrent_deletes_of_one_product(app, store):
    results = asyncio.run(_run_deletes(app, "2", 5))
    statuses = sorted(r.status_code for r in results)
    assert statuses == [200, 404, 404, 404, 404]
    assert store.find_by_id("2") is None
