from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from kitchen.core.config import Settings
from kitchen.core.rate_limiter import limiter
from kitchen.main import create_app


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'kitchen.db'}",
        DEFAULT_LOCATIONS=["Fridge", "Freezer", "Pantry"],
        OPENFOODFACTS_URL="https://off.example.test",
    )


@pytest.fixture
def client(settings: Settings):
    limiter.reset()
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def create_product(client: TestClient):
    def _create(**fields) -> int:
        payload = {"product_name": "Whole Milk", "ean13": "4006381333931", **fields}
        response = client.post("/product", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["productId"]

    return _create
