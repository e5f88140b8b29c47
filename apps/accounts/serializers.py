"""
Account serializers.
"""
from rest_framework import serializers

OTP_REGEX = r'^\d{6}$'
PHONE_REGEX = r'^\d{10}$'


class LoginSerializer(serializers.Serializer):
    """Login serializer."""
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class RegisterSerializer(serializers.Serializer):
    """Customer registration serializer."""
    name = serializers.CharField(min_length=2, max_length=50)
    email = serializers.EmailField()
    password = serializers.CharField(min_length=6, write_only=True)
    phone = serializers.RegexField(PHONE_REGEX, required=False)


class AddressSerializer(serializers.Serializer):
    street = serializers.CharField(required=False, allow_blank=True)
    city = serializers.CharField(required=False, allow_blank=True)
    state = serializers.CharField(required=False, allow_blank=True)
    zipCode = serializers.CharField(required=False, allow_blank=True)
    country = serializers.CharField(required=False, allow_blank=True)


class VendorRegisterSerializer(serializers.Serializer):
    """Vendor registration serializer."""
    name = serializers.CharField(min_length=2, max_length=50)
    email = serializers.EmailField()
    password = serializers.CharField(min_length=6, write_only=True)
    phone = serializers.CharField()
    storeName = serializers.CharField(min_length=2, max_length=100)
    storeDescription = serializers.CharField(max_length=500, required=False, allow_blank=True)
    address = AddressSerializer(required=False)


class DeliveryRegisterSerializer(serializers.Serializer):
    """Delivery partner registration serializer."""
    name = serializers.CharField(min_length=2, max_length=50)
    email = serializers.EmailField()
    password = serializers.CharField(min_length=6, write_only=True)
    phone = serializers.RegexField(PHONE_REGEX)
    address = serializers.CharField(required=False, allow_blank=True)
    vehicleType = serializers.CharField(required=False, allow_blank=True)
    vehicleNumber = serializers.CharField(required=False, allow_blank=True)


class OtpSerializer(serializers.Serializer):
    email = serializers.EmailField()
    otp = serializers.RegexField(OTP_REGEX)


class ResetPasswordSerializer(serializers.Serializer):
    """Reset password serializer."""
    email = serializers.EmailField()
    password = serializers.CharField(min_length=6, write_only=True)
    confirmPassword = serializers.CharField(write_only=True)

    def validate(self, attrs):
        if attrs['password'] != attrs['confirmPassword']:
            raise serializers.ValidationError({'confirmPassword': 'Confirm password must match password.'})
        return attrs


class ChangePasswordSerializer(serializers.Serializer):
    """Change password serializer."""
    currentPassword = serializers.CharField()
    newPassword = serializers.CharField(min_length=6)
