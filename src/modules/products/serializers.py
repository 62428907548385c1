"""Product DRF serializers for API output and schema documentation.

The serializers operate at the Interface layer (API Views).  They read
the immutable DTOs returned by ``ProductService``; request bodies are
decoded into Pydantic DTOs from ``dtos.py``, so ``ProductInputSerializer``
only describes the body for the OpenAPI schema.
"""

from __future__ import annotations

from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    """Read-only representation of a ``ProductDTO``."""

    id = serializers.UUIDField(read_only=True)
    category = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)


class ProductInputSerializer(serializers.Serializer):
    """Body of create and update requests."""

    category = serializers.CharField()
    name = serializers.CharField()


class ProductPageSerializer(serializers.Serializer):
    """Read-only representation of a ``ProductPageDTO``."""

    items = ProductSerializer(many=True, read_only=True)
    total_pages = serializers.IntegerField(read_only=True)
    total_elements = serializers.IntegerField(read_only=True)
    page = serializers.IntegerField(read_only=True)
