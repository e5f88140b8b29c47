"""
Checkout form serializers.
"""
from rest_framework import serializers

from apps.core.utils import OBJECT_ID_PATTERN

SHIPPING_OPTIONS = ('standard', 'express')


class OrderItemSerializer(serializers.Serializer):
    productId = serializers.RegexField(OBJECT_ID_PATTERN.pattern)
    quantity = serializers.IntegerField(min_value=1)
    price = serializers.FloatField(min_value=0)
    variant = serializers.CharField(required=False, allow_blank=True)


class CheckoutSerializer(serializers.Serializer):
    """Order placement form."""
    items = OrderItemSerializer(many=True, allow_empty=False)
    shippingAddress = serializers.DictField()
    paymentMethod = serializers.CharField()
    couponCode = serializers.CharField(required=False, allow_blank=True)
    shippingOption = serializers.ChoiceField(choices=SHIPPING_OPTIONS, required=False)
