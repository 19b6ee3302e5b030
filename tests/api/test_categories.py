"""Tests for category admin API endpoints."""

from fastapi.testclient import TestClient


class TestAuthentication:
    """Tests for admin API key authentication."""

    def test_missing_api_key(self, client: TestClient) -> None:
        """Should reject requests without Authorization header."""
        response = client.get("/admin/categories/search-model")

        assert response.status_code == 401
        data = response.json()
        assert data["error_code"] == "UNAUTHORIZED"
        assert data["request_id"]

    def test_wrong_scheme(self, client: TestClient) -> None:
        """Should reject non-bearer credentials."""
        response = client.get(
            "/admin/categories/search-model",
            headers={"Authorization": "Basic abc"},
        )

        assert response.status_code == 401
        assert response.json()["error_code"] == "UNAUTHORIZED"

    def test_invalid_api_key(self, client: TestClient) -> None:
        """Should reject an unknown API key."""
        response = client.get(
            "/admin/categories/search-model",
            headers={"Authorization": "Bearer wrong-key"},
        )

        assert response.status_code == 401
        assert response.json()["error_code"] == "INVALID_API_KEY"


class TestCategoryGrid:
    """Tests for the category grid endpoints."""

    def test_search_model(self, auth_client: TestClient) -> None:
        """Should return stores and grid settings."""
        response = auth_client.get("/admin/categories/search-model")

        assert response.status_code == 200
        data = response.json()
        assert [s["value"] for s in data["available_stores"]] == ["0", "1", "2"]
        assert data["page"] == 1
        assert data["page_size"] == 15

    def test_list(self, auth_client: TestClient) -> None:
        """Should return one page of categories with breadcrumbs."""
        response = auth_client.post(
            "/admin/categories/list",
            json={"page": 1, "page_size": 3},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 6
        assert [row["breadcrumb"] for row in data["data"]] == [
            "Computers",
            "Computers >> Desktops",
            "Computers >> Notebooks",
        ]

    def test_list_rejects_page_zero(self, auth_client: TestClient) -> None:
        """Should validate the 1-based page number."""
        response = auth_client.post("/admin/categories/list", json={"page": 0})

        assert response.status_code == 422


class TestCategoryForm:
    """Tests for the category edit form endpoints."""

    def test_new(self, auth_client: TestClient) -> None:
        """Should return defaults for a new category."""
        response = auth_client.get("/admin/categories/new")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == 0
        assert data["page_size"] == 6
        assert data["page_size_options"] == "6, 3, 9"
        assert data["published"] is True
        assert data["available_categories"][0] == {
            "text": "[None]",
            "value": "0",
            "selected": False,
        }

    def test_existing(self, auth_client: TestClient) -> None:
        """Should return the category with its selections."""
        response = auth_client.get("/admin/categories/1")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Computers"
        assert data["selected_discount_ids"] == [1]
        assert data["selected_customer_role_ids"] == [1, 2]
        assert data["locales"][1]["name"] == "Computer"
        assert data["category_product_search_model"]["category_id"] == 1

    def test_not_found(self, auth_client: TestClient) -> None:
        """Should return 404 for an unknown category."""
        response = auth_client.get("/admin/categories/999")

        assert response.status_code == 404
        data = response.json()
        assert data["error_code"] == "CATEGORY_NOT_FOUND"
        assert data["details"] == {"category_id": 999}

    def test_deleted_is_not_found(self, auth_client: TestClient) -> None:
        """Should return 404 for a deleted category."""
        response = auth_client.get("/admin/categories/7")

        assert response.status_code == 404


class TestCategoryProducts:
    """Tests for the products-in-category endpoint."""

    def test_list(self, auth_client: TestClient) -> None:
        """Should list product associations of the category."""
        response = auth_client.post(
            "/admin/categories/2/products",
            json={"page": 1, "page_size": 15},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert [row["product_name"] for row in data["data"]] == [
            "Lenovo IdeaCentre",
            "Digital Storm VANQUISH",
            "Build your own computer",
        ]

    def test_unknown_category(self, auth_client: TestClient) -> None:
        """Should return 404 for an unknown category."""
        response = auth_client.post("/admin/categories/999/products", json={})

        assert response.status_code == 404


class TestAddProduct:
    """Tests for the product picker endpoints."""

    def test_search_model(self, auth_client: TestClient) -> None:
        """Should return filter options."""
        response = auth_client.get("/admin/categories/add-product/search-model")

        assert response.status_code == 200
        data = response.json()
        assert [t["value"] for t in data["available_product_types"]] == ["0", "5", "10"]
        assert data["available_vendors"][0]["text"] == "All"

    def test_list(self, auth_client: TestClient) -> None:
        """Should return matching products."""
        response = auth_client.post(
            "/admin/categories/add-product/list",
            json={"search_product_name": "apple", "page": 1, "page_size": 10},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["data"][0]["name"] == "Apple MacBook Pro"
        assert data["data"][0]["product_type_id"] == 10
