"""
Serializers for Playgate users.

- DeviceUserSerializer: minimal identity returned to a device once pairing succeeds.
"""

from rest_framework import serializers

from ..models import UserProfile


class DeviceUserSerializer(serializers.ModelSerializer):
    """
    Public-facing identity for a paired device.
    Excludes sensitive fields such as password or permissions.
    """
    name = serializers.SerializerMethodField()

    class Meta:
        model = UserProfile
        fields = ["id", "name", "email"]
        read_only_fields = fields

    def get_name(self, obj):
        return obj.get_display_name()
