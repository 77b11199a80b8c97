"""Integration tests for the user, product and health endpoints."""


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "domain": "oms"}


class TestUserApi:
    def test_create_user(self, client):
        response = client.post("/api/users", json={"name": "María García", "email": "maria@example.com"})
        assert response.status_code == 201
        data = response.json()
        assert data["id"]
        assert data["name"] == "María García"
        assert data["email"] == "maria@example.com"
        assert data["created_at"]

    def test_list_users(self, client, api_user):
        response = client.get("/api/users")
        assert response.status_code == 200
        assert [user["id"] for user in response.json()] == [api_user["id"]]

    def test_get_user(self, client, api_user):
        response = client.get(f"/api/users/{api_user['id']}")
        assert response.status_code == 200
        assert response.json()["email"] == "juan@example.com"

    def test_get_unknown_user(self, client):
        response = client.get("/api/users/missing-user")
        assert response.status_code == 404
        assert response.json()["error"] == "UserNotFoundError"

    def test_duplicate_email(self, client, api_user):
        response = client.post("/api/users", json={"name": "Someone Else", "email": "juan@example.com"})
        assert response.status_code == 400
        assert "email" in response.json()["messages"]

    def test_invalid_email(self, client):
        response = client.post("/api/users", json={"name": "Bad", "email": "not-an-email"})
        assert response.status_code == 400

    def test_missing_name(self, client):
        response = client.post("/api/users", json={"email": "someone@example.com"})
        assert response.status_code == 400
        assert "name" in response.json()["messages"]


class TestProductApi:
    def test_create_product(self, client):
        response = client.post("/api/products", json={"name": "iPhone 15 Pro", "price": 999.0, "stock": 25})
        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "iPhone 15 Pro"
        assert data["price"] == 999.0
        assert data["stock"] == 25

    def test_list_products(self, client, api_product):
        response = client.get("/api/products")
        assert response.status_code == 200
        assert [product["id"] for product in response.json()] == [api_product["id"]]

    def test_get_product(self, client, api_product):
        response = client.get(f"/api/products/{api_product['id']}")
        assert response.status_code == 200
        assert response.json()["stock"] == 15

    def test_get_unknown_product(self, client):
        response = client.get("/api/products/missing-product")
        assert response.status_code == 404
        assert response.json()["error"] == "ProductNotFoundError"

    def test_negative_price(self, client):
        response = client.post("/api/products", json={"name": "Broken", "price": -1.0, "stock": 1})
        assert response.status_code == 400
        assert response.json()["error"] == "RequestValidationError"
        assert "price" in response.json()["messages"]


class TestRequestId:
    def test_generated_when_missing(self, client):
        response = client.get("/api/users")
        assert response.headers["X-Request-ID"]

    def test_echoed_when_given(self, client):
        response = client.get("/api/users", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"
