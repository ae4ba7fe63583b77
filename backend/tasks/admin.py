from django.contrib import admin
from .models import Task


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ["name", "status", "severity", "owner_id", "organization_id", "created_on"]
    list_filter = ["status", "severity", "department"]
    search_fields = ["name", "description", "assigned_to"]
