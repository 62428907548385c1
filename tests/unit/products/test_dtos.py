"""Unit tests for Product DTOs.

Covers:
- ProductDTO: optional id, from_entity factory, frozen immutability.
- CreateProductDTO / UpdateProductDTO: required fields.
- ProductListQueryDTO: defaults and coercion of query-string values.
- ProductPageDTO: from_page factory.
"""

from __future__ import annotations

from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from modules.core.pagination import Page
from modules.products.dtos import (
    CreateProductDTO,
    ProductDTO,
    ProductListQueryDTO,
    ProductPageDTO,
    UpdateProductDTO,
)
from modules.products.models import Product

pytestmark = pytest.mark.unit


class TestProductDTO:
    def test_id_defaults_to_none(self):
        assert ProductDTO(category="c", name="n").id is None

    def test_is_frozen(self):
        dto = ProductDTO(category="c", name="n")
        with pytest.raises(ValidationError):
            dto.name = "changed"

    def test_from_entity(self):
        row = Product.objects.create(category="tools", name="Hammer")

        dto = ProductDTO.from_entity(row)

        assert dto == ProductDTO(id=row.id, category="tools", name="Hammer")


class TestCreateProductDTO:
    def test_valid(self):
        dto = CreateProductDTO(category="c", name="n")
        assert (dto.category, dto.name) == ("c", "n")

    @pytest.mark.parametrize("missing", ["category", "name"])
    def test_missing_field_raises(self, missing):
        data = {"category": "c", "name": "n"}
        del data[missing]
        with pytest.raises(ValidationError) as exc_info:
            CreateProductDTO.model_validate(data)
        assert exc_info.value.errors()[0]["loc"] == (missing,)

    def test_null_name_raises(self):
        with pytest.raises(ValidationError):
            CreateProductDTO.model_validate({"category": "c", "name": None})

    def test_extra_fields_ignored(self):
        dto = CreateProductDTO.model_validate({"category": "c", "name": "n", "id": "x"})
        assert not hasattr(dto, "id")


class TestUpdateProductDTO:
    def test_keeps_uuid_ids(self):
        product_id = uuid4()
        dto = UpdateProductDTO(id=product_id, category="c", name="n")
        assert dto.id == product_id

    def test_keeps_string_ids_opaque(self):
        dto = UpdateProductDTO(id="not-a-uuid", category="c", name="n")
        assert dto.id == "not-a-uuid"

    def test_requires_both_fields(self):
        with pytest.raises(ValidationError):
            UpdateProductDTO.model_validate({"id": str(uuid4()), "name": "n"})


class TestProductListQueryDTO:
    def test_page_defaults_to_zero(self):
        assert ProductListQueryDTO(category="c", size=10).page == 0

    def test_coerces_query_strings(self):
        dto = ProductListQueryDTO.model_validate(
            {"category": "c", "page": "2", "size": "15"}
        )
        assert (dto.page, dto.size) == (2, 15)

    def test_does_not_range_check_size(self):
        assert ProductListQueryDTO(category="c", size=0).size == 0

    def test_non_numeric_size_raises(self):
        with pytest.raises(ValidationError):
            ProductListQueryDTO.model_validate({"category": "c", "size": "ten"})


class TestProductPageDTO:
    def test_from_page(self):
        items = [ProductDTO(id=uuid4(), category="c", name=str(i)) for i in range(3)]

        dto = ProductPageDTO.from_page(
            Page(items=items, total_elements=7, page=1, size=3)
        )

        assert dto.items == items
        assert dto.total_elements == 7
        assert dto.total_pages == 3
        assert dto.page == 1
        assert all(isinstance(item.id, UUID) for item in dto.items)
