from fastapi.testclient import TestClient

from kitchen.services import tags as tag_service
from kitchen.services.tags import parse_tag_list


def test_parse_tag_list_normalizes_and_deduplicates() -> None:
    assert parse_tag_list(" dairy, Milk ,,DAIRY , ") == ["DAIRY", "MILK"]
    assert parse_tag_list(["organic", " Organic", "vegan"]) == ["ORGANIC", "VEGAN"]
    assert parse_tag_list(None) == []


def test_create_tag_stores_uppercase_name(client: TestClient) -> None:
    response = client.post("/tag", json={"name": "  Frozen Veg "})
    assert response.status_code == 201
    tag = response.json()
    assert tag["name"] == "FROZEN VEG"
    assert isinstance(tag["id"], int)

    listing = client.get("/tags")
    assert listing.status_code == 200
    assert listing.json() == [tag]


def test_create_tag_conflicts_case_insensitively(client: TestClient) -> None:
    first = client.post("/tag", json={"name": "Milk"})
    assert first.status_code == 201

    second = client.post("/tag", json={"name": "MILK"})
    assert second.status_code == 409
    body = second.json()
    assert body["tag"] == first.json()
    assert "already exists" in body["detail"]

    assert len(client.get("/tags").json()) == 1


def test_create_tag_requires_name(client: TestClient) -> None:
    assert client.post("/tag", json={}).status_code == 400
    assert client.post("/tag", json={"name": "   "}).status_code == 400
    assert client.get("/tags").json() == []


def test_tags_are_listed_by_name(client: TestClient) -> None:
    for name in ("snacks", "bakery", "meat"):
        client.post("/tag", json={"name": name})

    names = [tag["name"] for tag in client.get("/tags").json()]
    assert names == ["BAKERY", "MEAT", "SNACKS"]


def test_tag_created_concurrently_is_reused(client: TestClient, monkeypatch) -> None:
    existing = client.post("/tag", json={"name": "Dairy"}).json()

    real_lookup = tag_service.get_tag_by_name
    lookups = []

    # The first lookup misses, as if another request inserted the tag just after it
    def stale_lookup(db, name):
        lookups.append(name)
        if len(lookups) == 1:
            return None
        return real_lookup(db, name)

    monkeypatch.setattr(tag_service, "get_tag_by_name", stale_lookup)

    response = client.post("/product", json={"product_name": "Milk", "ean13": "4006381333931", "tags": "dairy"})
    assert response.status_code == 201

    product_id = response.json()["productId"]
    assert client.get(f"/products/{product_id}").json()["tags"] == ["DAIRY"]
    assert client.get("/tags").json() == [existing]
