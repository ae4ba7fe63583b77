import uuid

from django.db import models
from django.utils import timezone

DEFAULT_DESCRIPTION = "Scheduled Meeting"


class ScheduledCall(models.Model):
    """
    A call booked from the calendar. The id doubles as the call id in the
    meeting link. Calls made outside any organization have no organization_id.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner_id = models.CharField(max_length=255)
    organization_id = models.CharField(max_length=255, blank=True, null=True)
    title = models.CharField(max_length=255, blank=True, default="")
    description = models.TextField(blank=True, default=DEFAULT_DESCRIPTION)
    starts_at = models.DateTimeField()
    ends_at = models.DateTimeField()
    created_on = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "scheduled_calls"
        ordering = ["starts_at"]
        indexes = [
            models.Index(fields=["owner_id", "organization_id", "starts_at"], name="calls_scope_start_idx"),
        ]

    def __str__(self):
        return f"{self.title or self.description} @ {self.starts_at:%Y-%m-%d %H:%M}"
