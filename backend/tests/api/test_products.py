"""Product routes: filtered pagination, categories, create/update/delete.

Invariants:
    - total is the same on every page of one filter
    - len(data) <= limit; limit clamped to [1, 100]
    - category filter is case-insensitive; lowStock means quantity < 5
    - Invalid bodies → 400 with per-field details and nothing persisted
"""

import pytest


async def _list(client, **params) -> dict:
    res = await client.get("/api/products", params=params)
    assert res.status_code == 200, res.text
    return res.json()


# --- Listing ------------------------------------------------------------------

async def test_list_products_empty_page(client):
    body = await _list(client)
    assert body == {"data": [], "total": 0, "page": 1, "limit": 10}


async def test_list_products_sorted_by_name_with_store_ref(
    client, make_store, make_product,
):
    store = await make_store("Tech Haven")
    for name in ("Keyboard", "Cable", "Mouse"):
        await make_product(store["id"], name=name)

    body = await _list(client)
    assert [p["name"] for p in body["data"]] == ["Cable", "Keyboard", "Mouse"]
    assert body["data"][0]["store"] == {"id": store["id"], "name": "Tech Haven"}
    assert set(body["data"][0]) >= {
        "id", "storeId", "name", "category", "price", "quantityInStock",
        "createdAt", "store",
    }


async def test_pagination_windows_and_total_are_stable(
    client, make_store, make_product,
):
    store = await make_store()
    names = [f"Item {c}" for c in "ABCDEFG"]
    for name in reversed(names):
        await make_product(store["id"], name=name)

    pages = [await _list(client, page=p, limit=3) for p in (1, 2, 3, 4)]

    assert [len(p["data"]) for p in pages] == [3, 3, 1, 0]
    assert {p["total"] for p in pages} == {7}
    assert [p["page"] for p in pages] == [1, 2, 3, 4]
    seen = [item["name"] for p in pages for item in p["data"]]
    assert seen == names


async def test_total_invariant_under_limit_changes(client, make_store, make_product):
    store = await make_store()
    for i in range(5):
        await make_product(store["id"], name=f"P{i}", category="snacks")

    totals = {
        (await _list(client, category="snacks", limit=limit))["total"]
        for limit in (1, 2, 5, 50)
    }
    assert totals == {5}


@pytest.mark.parametrize("raw_limit, expected", [
    ("500", 100), ("0", 10), ("-5", 1), ("abc", 10), ("7", 7),
])
async def test_limit_is_clamped(client, raw_limit, expected):
    body = await _list(client, limit=raw_limit)
    assert body["limit"] == expected


@pytest.mark.parametrize("raw_page", ["0", "-2", "xyz"])
async def test_invalid_page_falls_back_to_first(client, raw_page):
    body = await _list(client, page=raw_page)
    assert body["page"] == 1


async def test_huge_page_returns_empty_window(client, make_store, make_product):
    store = await make_store()
    await make_product(store["id"])

    body = await _list(client, page=str(10**20))
    assert body["data"] == []
    assert body["total"] == 1
    assert body["page"] == 2**31 - 1


async def test_filter_by_store(client, make_store, make_product):
    a = await make_store("A")
    b = await make_store("B")
    await make_product(a["id"], name="A1")
    await make_product(b["id"], name="B1")
    await make_product(b["id"], name="B2")

    body = await _list(client, storeId=b["id"])
    assert body["total"] == 2
    assert {p["storeId"] for p in body["data"]} == {b["id"]}


async def test_category_filter_is_case_insensitive(client, make_store, make_product):
    store = await make_store()
    await make_product(store["id"], name="Tomatoes", category="Produce")
    await make_product(store["id"], name="Milk", category="dairy")

    upper = await _list(client, category="Produce")
    lower = await _list(client, category="produce")
    assert upper == lower
    assert [p["name"] for p in lower["data"]] == ["Tomatoes"]
    assert lower["data"][0]["category"] == "produce"


async def test_price_range_is_inclusive(client, make_store, make_product):
    store = await make_store()
    for name, price in (("Cheap", 1.0), ("Low", 5.0), ("Mid", 7.5), ("High", 10.0), ("Lux", 99.0)):
        await make_product(store["id"], name=name, price=price)

    body = await _list(client, minPrice="5", maxPrice="10")
    assert sorted(p["name"] for p in body["data"]) == ["High", "Low", "Mid"]


async def test_unparseable_price_bounds_are_ignored(client, make_store, make_product):
    store = await make_store()
    await make_product(store["id"], name="One", price=3.0)
    await make_product(store["id"], name="Two", price=30.0)

    body = await _list(client, minPrice="abc", maxPrice="")
    assert body["total"] == 2


async def test_low_stock_excludes_threshold_boundary(client, make_store, make_product):
    store = await make_store()
    for qty in (0, 4, 5, 6):
        await make_product(store["id"], name=f"Qty {qty}", quantityInStock=qty)

    body = await _list(client, lowStock="true")
    assert sorted(p["quantityInStock"] for p in body["data"]) == [0, 4]
    assert all(p["quantityInStock"] < 5 for p in body["data"])

    unfiltered = await _list(client, lowStock="false")
    assert unfiltered["total"] == 4


async def test_filters_combine(client, make_store, make_product):
    a = await make_store("A")
    b = await make_store("B")
    await make_product(a["id"], name="Match", category="dairy", price=4.0, quantityInStock=2)
    await make_product(a["id"], name="Too pricey", category="dairy", price=40.0, quantityInStock=2)
    await make_product(a["id"], name="Well stocked", category="dairy", price=4.0, quantityInStock=20)
    await make_product(b["id"], name="Other store", category="dairy", price=4.0, quantityInStock=2)

    body = await _list(
        client, storeId=a["id"], category="DAIRY", maxPrice="10", lowStock="true",
    )
    assert [p["name"] for p in body["data"]] == ["Match"]
    assert body["total"] == 1


# --- Categories ---------------------------------------------------------------

async def test_categories_distinct_and_sorted(client, make_store, make_product):
    a = await make_store("A")
    b = await make_store("B")
    await make_product(a["id"], name="1", category="Snacks")
    await make_product(a["id"], name="2", category="dairy")
    await make_product(a["id"], name="3", category="snacks")
    await make_product(b["id"], name="4", category="electronics")

    res = await client.get("/api/products/categories")
    assert res.status_code == 200
    assert res.json() == ["dairy", "electronics", "snacks"]

    scoped = await client.get("/api/products/categories", params={"storeId": a["id"]})
    assert scoped.json() == ["dairy", "snacks"]


# --- Detail -------------------------------------------------------------------

async def test_get_product_includes_full_store(client, make_store, make_product):
    store = await make_store("Green Market")
    product = await make_product(store["id"], name="Apples")

    res = await client.get(f"/api/products/{product['id']}")
    assert res.status_code == 200
    body = res.json()
    assert body["id"] == product["id"]
    assert body["store"]["id"] == store["id"]
    assert body["store"]["name"] == "Green Market"
    assert "createdAt" in body["store"]


async def test_get_missing_product_returns_404_envelope(client):
    res = await client.get("/api/products/nonexistent-product-id-12345")
    assert res.status_code == 404
    error = res.json()["error"]
    assert isinstance(error["message"], str)
    assert error["code"] == "RESOURCE_NOT_FOUND"


# --- Create -------------------------------------------------------------------

async def test_create_product_normalizes_category(client, make_store):
    store = await make_store("A")
    res = await client.post("/api/products", json={
        "storeId": store["id"], "name": "Widget", "category": "Tools",
        "price": 9.99, "quantityInStock": 3,
    })
    assert res.status_code == 201
    body = res.json()
    assert body["category"] == "tools"
    assert body["price"] == 9.99
    assert body["quantityInStock"] == 3
    assert body["store"] == {"id": store["id"], "name": "A"}


async def test_create_product_coerces_numeric_strings(client, make_store):
    store = await make_store()
    res = await client.post("/api/products", json={
        "storeId": store["id"], "name": "Soda", "category": "beverages",
        "price": "1.25", "quantityInStock": "12",
    })
    assert res.status_code == 201
    assert res.json()["price"] == 1.25
    assert res.json()["quantityInStock"] == 12


@pytest.mark.parametrize("overrides, bad_field", [
    ({"price": 0}, "price"),
    ({"price": -3.5}, "price"),
    ({"quantityInStock": 2.5}, "quantityInStock"),
    ({"quantityInStock": -1}, "quantityInStock"),
    ({"name": ""}, "name"),
    ({"category": "   "}, "category"),
    ({"storeId": ""}, "storeId"),
    ({"quantityInStock": 10**20}, "quantityInStock"),
    ({"quantityInStock": 2**31}, "quantityInStock"),
    ({"quantityInStock": True}, "quantityInStock"),
    ({"price": True}, "price"),
    ({"name": "n" * 256}, "name"),
    ({"category": "c" * 101}, "category"),
])
async def test_create_product_rejects_invalid_field(
    client, make_store, overrides, bad_field,
):
    store = await make_store()
    body = {
        "storeId": store["id"], "name": "Widget", "category": "tools",
        "price": 9.99, "quantityInStock": 3,
    }
    body.update(overrides)

    res = await client.post("/api/products", json=body)
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["message"] == "Validation failed"
    assert list(error["details"]) == [bad_field]

    assert (await _list(client))["total"] == 0


async def test_create_product_reports_each_invalid_field(client):
    res = await client.post("/api/products", json={"price": 0, "quantityInStock": "x"})
    assert res.status_code == 400
    details = res.json()["error"]["details"]
    assert set(details) == {"storeId", "name", "category", "price", "quantityInStock"}
    assert all(isinstance(msgs, list) and msgs for msgs in details.values())


async def test_create_product_for_unknown_store_is_rejected(client):
    res = await client.post("/api/products", json={
        "storeId": "no-such-store", "name": "Widget", "category": "tools",
        "price": 1, "quantityInStock": 1,
    })
    assert res.status_code == 400
    assert res.json()["error"]["details"] == {"storeId": ["Store not found"]}
    assert (await _list(client))["total"] == 0


# --- Update -------------------------------------------------------------------

async def test_update_product_is_partial(client, make_store, make_product):
    store = await make_store()
    product = await make_product(store["id"], name="Widget", price=2.5, quantityInStock=8)

    res = await client.put(f"/api/products/{product['id']}", json={"name": "Gadget"})
    assert res.status_code == 200
    body = res.json()
    assert body["name"] == "Gadget"
    assert body["price"] == 2.5
    assert body["quantityInStock"] == 8
    assert body["category"] == product["category"]


async def test_update_product_normalizes_category(client, make_store, make_product):
    store = await make_store()
    product = await make_product(store["id"])
    res = await client.put(f"/api/products/{product['id']}", json={"category": "Hardware"})
    assert res.json()["category"] == "hardware"


async def test_update_product_can_move_between_stores(client, make_store, make_product):
    a = await make_store("A")
    b = await make_store("B")
    product = await make_product(a["id"])

    res = await client.put(f"/api/products/{product['id']}", json={"storeId": b["id"]})
    assert res.status_code == 200
    assert res.json()["storeId"] == b["id"]
    assert res.json()["store"]["name"] == "B"


async def test_update_product_to_unknown_store_is_rejected(client, make_store, make_product):
    store = await make_store()
    product = await make_product(store["id"])
    res = await client.put(f"/api/products/{product['id']}", json={"storeId": "ghost"})
    assert res.status_code == 400
    assert "storeId" in res.json()["error"]["details"]

    again = await client.get(f"/api/products/{product['id']}")
    assert again.json()["storeId"] == store["id"]


async def test_update_product_rejects_invalid_values(client, make_store, make_product):
    store = await make_store()
    product = await make_product(store["id"], quantityInStock=4)
    res = await client.put(
        f"/api/products/{product['id']}", json={"quantityInStock": -1, "price": 0},
    )
    assert res.status_code == 400
    assert set(res.json()["error"]["details"]) == {"quantityInStock", "price"}

    again = await client.get(f"/api/products/{product['id']}")
    assert again.json()["quantityInStock"] == 4


async def test_update_product_rejects_quantity_beyond_column_range(
    client, make_store, make_product,
):
    store = await make_store()
    product = await make_product(store["id"], quantityInStock=4)
    res = await client.put(
        f"/api/products/{product['id']}", json={"quantityInStock": 10**20},
    )
    assert res.status_code == 400
    assert list(res.json()["error"]["details"]) == ["quantityInStock"]

    at_limit = await client.put(
        f"/api/products/{product['id']}", json={"quantityInStock": 2**31 - 1},
    )
    assert at_limit.status_code == 200
    assert at_limit.json()["quantityInStock"] == 2**31 - 1


async def test_update_missing_product_returns_404(client):
    res = await client.put("/api/products/missing", json={"name": "X"})
    assert res.status_code == 404
    assert "message" in res.json()["error"]


# --- Delete -------------------------------------------------------------------

async def test_delete_product(client, make_store, make_product):
    store = await make_store()
    product = await make_product(store["id"])

    res = await client.delete(f"/api/products/{product['id']}")
    assert res.status_code == 204
    assert res.content == b""
    assert (await client.get(f"/api/products/{product['id']}")).status_code == 404

    detail = await client.get(f"/api/stores/{store['id']}")
    assert detail.json()["products"] == []


async def test_delete_missing_product_returns_404(client):
    res = await client.delete("/api/products/missing")
    assert res.status_code == 404


# --- Scenario -----------------------------------------------------------------

async def test_low_stock_scenario_follows_quantity_updates(client):
    store = (await client.post("/api/stores", json={"name": "A"})).json()
    widget = (await client.post("/api/products", json={
        "storeId": store["id"], "name": "Widget", "category": "Tools",
        "price": 9.99, "quantityInStock": 3,
    })).json()

    low = await _list(client, lowStock="true")
    assert widget["id"] in [p["id"] for p in low["data"]]

    res = await client.put(f"/api/products/{widget['id']}", json={"quantityInStock": 10})
    assert res.status_code == 200

    low = await _list(client, lowStock="true")
    assert widget["id"] not in [p["id"] for p in low["data"]]
