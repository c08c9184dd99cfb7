"""
pytest configuration and fixtures.
"""

from typing import Any, Callable, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from grubdash.core.config import IdStrategy, Settings
from grubdash.main import create_app


@pytest.fixture
def settings() -> Settings:
    """Test settings: no .env file, short counter ids."""
    return Settings(_env_file=None, id_strategy=IdStrategy.COUNTER)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """A fresh application with empty collections."""
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Test client with the application lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def dish_data() -> dict[str, Any]:
    """Valid dish fields."""
    return {
        "name": "Taco",
        "description": "spicy",
        "price": 5,
        "image_url": "http://x",
    }


@pytest.fixture
def order_data() -> dict[str, Any]:
    """Valid order fields."""
    return {
        "deliverTo": "308 Negra Arroyo Lane, Albuquerque, NM",
        "mobileNumber": "(505) 143-3369",
        "dishes": [
            {"id": "90c3d873684bf381dfab29034b5bba73", "name": "Falafel bagel", "price": 6, "quantity": 2},
        ],
    }


@pytest.fixture
def create_dish(client: TestClient, dish_data: dict[str, Any]) -> Callable[..., dict[str, Any]]:
    """Create a dish through the API and return the stored record."""
    def _create(**overrides: Any) -> dict[str, Any]:
        response = client.post("/dishes", json={"data": {**dish_data, **overrides}})
        assert response.status_code == 201, response.text
        return response.json()["data"]
    return _create


@pytest.fixture
def create_order(client: TestClient, order_data: dict[str, Any]) -> Callable[..., dict[str, Any]]:
    """Create an order through the API and return the stored record."""
    def _create(**overrides: Any) -> dict[str, Any]:
        response = client.post("/orders", json={"data": {**order_data, **overrides}})
        assert response.status_code == 201, response.text
        return response.json()["data"]
    return _create


@pytest.fixture
def set_status(client: TestClient) -> Callable[[dict[str, Any], str], dict[str, Any]]:
    """Move an existing order to ``status`` through PUT."""
    def _set(order: dict[str, Any], status: str) -> dict[str, Any]:
        response = client.put(f"/orders/{order['id']}", json={"data": {**order, "status": status}})
        assert response.status_code == 200, response.text
        return response.json()["data"]
    return _set
