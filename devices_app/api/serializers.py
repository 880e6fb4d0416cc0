"""
Serializers for the device pairing endpoints (input validation only).
"""

from rest_framework import serializers


class PairRequestSerializer(serializers.Serializer):
    device_type = serializers.CharField(
        max_length=64, required=False, allow_blank=True, allow_null=True)


class ActivateSerializer(serializers.Serializer):
    user_code = serializers.CharField(max_length=32, trim_whitespace=True)


class PollQuerySerializer(serializers.Serializer):
    device_code = serializers.CharField(max_length=128)
