"""
Marketing form serializers.
"""
from rest_framework import serializers

COUPON_TYPES = ['percentage', 'fixed', 'freeship']
BANNER_TYPES = ['home_slider', 'festival_offer', 'banner', 'hero', 'promotional', 'side_banner']
CAMPAIGN_TYPES = ['flash_sale', 'daily_deal', 'special_offer', 'festival', 'email', 'push', 'sms']


class CouponSerializer(serializers.Serializer):
    """Coupon form."""
    code = serializers.CharField(max_length=30, trim_whitespace=True)
    name = serializers.CharField(required=False, allow_blank=True)
    type = serializers.ChoiceField(choices=COUPON_TYPES)
    value = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    minOrderValue = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    maxDiscount = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True
    )
    usageLimit = serializers.IntegerField(required=False, allow_null=True)
    isActive = serializers.BooleanField(required=False)
    startsAt = serializers.DateTimeField(required=False, allow_null=True)
    expiresAt = serializers.DateTimeField(required=False, allow_null=True)

    def validate(self, attrs):
        if attrs.get('type') == 'percentage' and attrs.get('value') is not None and attrs['value'] > 100:
            raise serializers.ValidationError('Percentage coupons cannot exceed 100')
        starts, expires = attrs.get('startsAt'), attrs.get('expiresAt')
        if starts and expires and expires <= starts:
            raise serializers.ValidationError('Expiry must be after the start date')
        return attrs


class BannerSerializer(serializers.Serializer):
    """Banner form."""
    title = serializers.CharField(required=False, allow_blank=True)
    subtitle = serializers.CharField(required=False, allow_blank=True)
    image = serializers.CharField()
    link = serializers.CharField(required=False, allow_blank=True)
    type = serializers.ChoiceField(choices=BANNER_TYPES, required=False)
    order = serializers.IntegerField(required=False, min_value=0)
    isActive = serializers.BooleanField(required=False)


class CampaignSerializer(serializers.Serializer):
    """Campaign form."""
    name = serializers.CharField(max_length=200)
    slug = serializers.SlugField(required=False, allow_blank=True)
    type = serializers.ChoiceField(choices=CAMPAIGN_TYPES)
    status = serializers.ChoiceField(choices=['draft', 'active', 'completed'], required=False)
    discountType = serializers.ChoiceField(choices=['percentage', 'fixed'], required=False)
    discountValue = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    startDate = serializers.DateTimeField(required=False, allow_null=True)
    endDate = serializers.DateTimeField(required=False, allow_null=True)
    isActive = serializers.BooleanField(required=False)

    def validate(self, attrs):
        start, end = attrs.get('startDate'), attrs.get('endDate')
        if start and end and end <= start:
            raise serializers.ValidationError('End date must be after the start date')
        return attrs
