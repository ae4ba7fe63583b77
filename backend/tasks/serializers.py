from rest_framework import serializers

from .models import Task


class TaskInputSerializer(serializers.Serializer):
    # every field is required on create and on edit
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(allow_blank=True, trim_whitespace=False)
    department = serializers.CharField(max_length=255, allow_blank=True)
    assigned_to = serializers.CharField(max_length=255, allow_blank=True)
    severity = serializers.IntegerField(min_value=1, max_value=4)


class TaskStatusSerializer(serializers.Serializer):
    status = serializers.CharField(max_length=32)


class TaskSerializer(serializers.ModelSerializer):
    class Meta:
        model = Task
        fields = [
            "id",
            "name",
            "description",
            "department",
            "assigned_to",
            "severity",
            "status",
            "owner_id",
            "organization_id",
            "created_by_id",
            "updated_by_id",
            "created_on",
            "updated_on",
        ]
        read_only_fields = fields


class BoardColumnSerializer(serializers.Serializer):
    status = serializers.CharField()
    tasks = TaskSerializer(many=True)


class BoardProgressSerializer(serializers.Serializer):
    completed = serializers.IntegerField()
    total = serializers.IntegerField()
    percentage = serializers.FloatField()
