"""
Delivery staff form serializers.
"""
from rest_framework import serializers


class DeliveryBoySerializer(serializers.Serializer):
    """Delivery boy form used by the admin console."""
    name = serializers.CharField(max_length=100)
    email = serializers.EmailField()
    password = serializers.CharField(min_length=6, required=False, write_only=True)
    phone = serializers.RegexField(r'^\d{10}$')
    address = serializers.CharField(required=False, allow_blank=True)
    vehicleType = serializers.CharField(required=False, allow_blank=True)
    vehicleNumber = serializers.CharField(required=False, allow_blank=True)
    isActive = serializers.BooleanField(required=False)
