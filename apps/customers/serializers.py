"""
Customer form serializers.
"""
from rest_framework import serializers


class CustomerSerializer(serializers.Serializer):
    """Customer edit form."""
    name = serializers.CharField(max_length=100)
    email = serializers.EmailField(required=False)
    phone = serializers.RegexField(r'^\d{10}$', required=False, allow_blank=True)
    isActive = serializers.BooleanField(required=False)


class AddressSerializer(serializers.Serializer):
    """Storefront address form."""
    name = serializers.CharField(max_length=50, required=False, allow_blank=True)
    fullName = serializers.CharField(max_length=100)
    phone = serializers.RegexField(r'^\d{10}$')
    address = serializers.CharField(max_length=200)
    city = serializers.CharField(max_length=100)
    state = serializers.CharField(max_length=100)
    zipCode = serializers.CharField(max_length=20)
    country = serializers.CharField(max_length=100)
    isDefault = serializers.BooleanField(required=False)
