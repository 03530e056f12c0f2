from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from kitchen.services.tags import resolve_tags


def _location_id(client: TestClient, name: str) -> int:
    locations = {location["name"]: location["id"] for location in client.get("/locations").json()}
    return locations[name]


def test_default_locations_are_seeded(client: TestClient) -> None:
    response = client.get("/locations")
    assert response.status_code == 200
    assert [location["name"] for location in response.json()] == ["Fridge", "Freezer", "Pantry"]


def test_create_item_and_list_by_location(client: TestClient, create_product) -> None:
    product_id = create_product(image_url="https://img.test/milk.jpg", tags="DAIRY")
    fridge = _location_id(client, "Fridge")

    response = client.post(
        "/item",
        json={
            "product_id": product_id,
            "location_id": fridge,
            "quantity": 2,
            "expiration_date": "2026-11-02",
            "frozen_date": "",
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Item added successfully"

    items = client.get(f"/items/{fridge}").json()
    assert items == [
        {
            "id": body["itemId"],
            "product_id": product_id,
            "location_id": fridge,
            "quantity": 2,
            "expiration_date": "2026-11-02",
            "frozen_date": None,
            "product_name": "Whole Milk",
            "image_url": "https://img.test/milk.jpg",
            "ean13": "4006381333931",
            "product_code": None,
            "tags": ["DAIRY"],
        }
    ]
    assert client.get(f"/items/{_location_id(client, 'Pantry')}").json() == []


def test_items_are_ordered_by_expiration(client: TestClient, create_product) -> None:
    product_id = create_product()
    freezer = _location_id(client, "Freezer")

    for expiration in (None, "2027-01-15", "2026-12-01"):
        response = client.post(
            "/item",
            json={
                "product_id": product_id,
                "location_id": freezer,
                "quantity": 1,
                "expiration_date": expiration,
                "frozen_date": "2026-10-01",
            },
        )
        assert response.status_code == 200

    items = client.get(f"/items/{freezer}").json()
    assert [item["expiration_date"] for item in items] == ["2026-12-01", "2027-01-15", None]
    assert all(item["frozen_date"] == "2026-10-01" for item in items)


def test_create_item_for_unknown_product_fails(client: TestClient) -> None:
    fridge = _location_id(client, "Fridge")

    response = client.post(
        "/item",
        json={"product_id": 999, "location_id": fridge, "quantity": 1, "tags": "NEW"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Product not found"

    assert client.get(f"/items/{fridge}").json() == []
    assert client.get("/tags").json() == []


def test_create_item_for_unknown_location_fails(client: TestClient, create_product) -> None:
    product_id = create_product()

    response = client.post(
        "/item",
        json={"product_id": product_id, "location_id": 999, "quantity": 1, "tags": "NEW"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Location not found"
    assert client.get("/tags").json() == []


def test_create_item_rejects_negative_quantity(client: TestClient, create_product) -> None:
    product_id = create_product()
    fridge = _location_id(client, "Fridge")

    response = client.post(
        "/item",
        json={"product_id": product_id, "location_id": fridge, "quantity": -1},
    )
    assert response.status_code == 400
    assert client.get(f"/items/{fridge}").json() == []


def test_item_tags_are_attached_to_the_product(client: TestClient, create_product) -> None:
    product_id = create_product(tags="DAIRY")
    pantry = _location_id(client, "Pantry")

    response = client.post(
        "/item",
        json={"product_id": product_id, "location_id": pantry, "quantity": 1, "tags": "dairy, Opened"},
    )
    assert response.status_code == 200

    product = client.get(f"/products/{product_id}").json()
    assert product["tags"] == ["DAIRY", "OPENED"]

    items = client.get(f"/items/{pantry}").json()
    assert items[0]["tags"] == ["DAIRY", "OPENED"]


def test_list_items_rejects_non_integer_location(client: TestClient) -> None:
    assert client.get("/items/fridge").status_code == 400


def test_store_error_rolls_back_item_creation(client: TestClient, create_product, monkeypatch) -> None:
    product_id = create_product(tags="DAIRY")
    fridge = _location_id(client, "Fridge")

    def failing_resolve_tags(db, raw):
        resolve_tags(db, raw)
        raise OperationalError("INSERT INTO product_tags", {}, Exception("disk I/O error"))

    monkeypatch.setattr("kitchen.services.inventory.resolve_tags", failing_resolve_tags)

    response = client.post(
        "/item",
        json={"product_id": product_id, "location_id": fridge, "quantity": 1, "tags": "OPENED"},
    )
    assert response.status_code == 500
    assert response.json() == {"detail": "Unable to add item"}

    assert client.get(f"/items/{fridge}").json() == []
    assert client.get(f"/products/{product_id}").json()["tags"] == ["DAIRY"]
    assert [tag["name"] for tag in client.get("/tags").json()] == ["DAIRY"]
