"""
Catalog form serializers.
Validate payloads before they are sent to the backend.
"""
from rest_framework import serializers

from apps.core.utils import OBJECT_ID_PATTERN

OBJECT_ID_REGEX = OBJECT_ID_PATTERN.pattern


class CategorySerializer(serializers.Serializer):
    """Category form."""
    name = serializers.CharField(max_length=100)
    description = serializers.CharField(required=False, allow_blank=True)
    image = serializers.CharField(required=False, allow_blank=True)
    icon = serializers.CharField(required=False, allow_blank=True)
    parentId = serializers.RegexField(OBJECT_ID_REGEX, required=False, allow_null=True, allow_blank=True)
    order = serializers.IntegerField(required=False, min_value=0)
    isActive = serializers.BooleanField(required=False)


class BrandSerializer(serializers.Serializer):
    """Brand form."""
    name = serializers.CharField(max_length=100)
    logo = serializers.CharField(required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)
    website = serializers.URLField(required=False, allow_blank=True)
    isActive = serializers.BooleanField(required=False)


class ProductSerializer(serializers.Serializer):
    """Product form (main fields; the rest is passed through untouched)."""
    name = serializers.CharField(min_length=2, max_length=200)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    originalPrice = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True
    )
    categoryId = serializers.RegexField(OBJECT_ID_REGEX)
    brandId = serializers.RegexField(OBJECT_ID_REGEX, required=False, allow_null=True, allow_blank=True)
    vendorId = serializers.RegexField(OBJECT_ID_REGEX)
    stock = serializers.ChoiceField(choices=['in_stock', 'low_stock', 'out_of_stock'], required=False)
    stockQuantity = serializers.IntegerField(min_value=0, required=False)
    taxRate = serializers.DecimalField(max_digits=5, decimal_places=2, min_value=0, max_value=100, required=False)
    isActive = serializers.BooleanField(required=False)
