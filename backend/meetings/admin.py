from django.contrib import admin
from .models import ScheduledCall


@admin.register(ScheduledCall)
class ScheduledCallAdmin(admin.ModelAdmin):
    list_display = ["title", "description", "starts_at", "ends_at", "owner_id", "organization_id"]
    list_filter = ["organization_id"]
    search_fields = ["title", "description"]
