"""Integration tests for standardized error responses."""

from unittest.mock import patch

import pytest

pytestmark = pytest.mark.integration


def _assert_envelope(data):
    assert "type" in data
    assert "errors" in data
    assert isinstance(data["errors"], list)
    assert data["errors"]
    assert "code" in data["errors"][0]
    assert "detail" in data["errors"][0]


class TestStandardizedErrors:
    def test_not_found_has_standard_format(self, api_client):
        response = api_client.get(
            "/api/v1/products/00000000-0000-0000-0000-000000000000/"
        )
        assert response.status_code == 404
        _assert_envelope(response.json())

    def test_validation_error_has_standard_format(self, api_client):
        response = api_client.post("/api/v1/products/", data="{", content_type="application/json")
        assert response.status_code == 400
        _assert_envelope(response.json())

    def test_invalid_paging_has_standard_format(self, api_client):
        response = api_client.get("/api/v1/products/?category=c&size=0")
        assert response.status_code == 400
        _assert_envelope(response.json())

    def test_store_failure_is_generic_server_error(self, api_client):
        with patch(
            "modules.products.repositories.django_repository."
            "ProductDjangoRepository.find_distinct_categories",
            side_effect=RuntimeError("relation products does not exist"),
        ):
            response = api_client.get("/api/v1/products/categories/")

        assert response.status_code == 500
        data = response.json()
        _assert_envelope(data)
        assert data["type"] == "server_error"
        assert "relation products" not in response.content.decode()
