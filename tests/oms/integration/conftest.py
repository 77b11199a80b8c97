import pytest
from fastapi.testclient import TestClient
from oms.api.application import create_app
from oms.domain import oms


@pytest.fixture()
def client():
    return TestClient(create_app(oms))


@pytest.fixture()
def api_user(client):
    response = client.post("/api/users", json={"name": "Juan Pérez", "email": "juan@example.com"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture()
def api_product(client):
    response = client.post("/api/products", json={"name": "Laptop Dell XPS 13", "price": 1200.0, "stock": 15})
    assert response.status_code == 201
    return response.json()
