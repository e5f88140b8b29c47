"""
Review form serializers.
"""
from rest_framework import serializers

from apps.core.utils import OBJECT_ID_PATTERN


class ProductReviewSerializer(serializers.Serializer):
    """Storefront review form."""
    productId = serializers.RegexField(OBJECT_ID_PATTERN.pattern)
    orderId = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    rating = serializers.IntegerField(min_value=1, max_value=5)
    comment = serializers.CharField(max_length=1000, required=False, allow_blank=True)
    images = serializers.ListField(child=serializers.URLField(), required=False)
