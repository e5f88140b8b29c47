"""
Admin broadcast form serializers.
"""
from rest_framework import serializers

AUDIENCES = ['all', 'customers', 'vendors', 'delivery']


class PushNotificationSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=100)
    message = serializers.CharField(max_length=500)
    audience = serializers.ChoiceField(choices=AUDIENCES, required=False)


class CustomMessageSerializer(serializers.Serializer):
    recipientId = serializers.CharField()
    recipientType = serializers.ChoiceField(choices=['user', 'vendor', 'delivery'], required=False)
    title = serializers.CharField(max_length=100)
    message = serializers.CharField(max_length=1000)
