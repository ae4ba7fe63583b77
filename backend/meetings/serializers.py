from rest_framework import serializers

from .invites import meeting_link
from .models import ScheduledCall


class EmailListField(serializers.ListField):
    """Accepts a list of addresses or one comma separated string."""

    child = serializers.EmailField()

    def to_internal_value(self, data):
        if isinstance(data, str):
            data = data.split(",")
        if isinstance(data, (list, tuple)):
            data = [e.strip() if isinstance(e, str) else e for e in data]
            data = [e for e in data if e != ""]
        return super().to_internal_value(data)


class ScheduleCallSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    description = serializers.CharField(required=False, allow_blank=True, default="")
    starts_at = serializers.DateTimeField()
    ends_at = serializers.DateTimeField(required=False, allow_null=True, default=None)
    emails = EmailListField(required=False, default=list)

    def validate(self, attrs):
        if attrs["ends_at"] is not None and attrs["ends_at"] < attrs["starts_at"]:
            raise serializers.ValidationError({"ends_at": "must not be before starts_at"})
        return attrs


class InviteSerializer(serializers.Serializer):
    emails = EmailListField(min_length=1)


class CalendarWindowSerializer(serializers.Serializer):
    start = serializers.DateTimeField(required=False)
    end = serializers.DateTimeField(required=False)

    def validate(self, attrs):
        if "start" in attrs and "end" in attrs and attrs["end"] <= attrs["start"]:
            raise serializers.ValidationError({"end": "must be after start"})
        return attrs


class ScheduledCallSerializer(serializers.ModelSerializer):
    link = serializers.SerializerMethodField()

    class Meta:
        model = ScheduledCall
        fields = [
            "id",
            "title",
            "description",
            "starts_at",
            "ends_at",
            "owner_id",
            "organization_id",
            "created_on",
            "link",
        ]
        read_only_fields = fields

    def get_link(self, obj):
        return meeting_link(obj)
