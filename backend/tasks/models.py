from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone


class TaskStatus(models.TextChoices):
    TODO = "To Do", "To Do"
    IN_PROGRESS = "In Progress", "In Progress"
    DONE = "Done", "Done"


# board columns, left to right
BOARD_COLUMNS = (TaskStatus.TODO, TaskStatus.IN_PROGRESS, TaskStatus.DONE)


class Task(models.Model):
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    department = models.CharField(max_length=255, blank=True, default="")
    assigned_to = models.CharField(max_length=255, blank=True, default="")
    severity = models.PositiveSmallIntegerField(
        default=1, validators=[MinValueValidator(1), MaxValueValidator(4)]
    )
    owner_id = models.CharField(max_length=255)
    organization_id = models.CharField(max_length=255)
    created_by_id = models.CharField(max_length=255)
    updated_by_id = models.CharField(max_length=255, blank=True, null=True)
    # free-form on purpose: status writes are not checked against TaskStatus
    status = models.CharField(max_length=32, default=TaskStatus.TODO)
    created_on = models.DateTimeField(default=timezone.now)
    updated_on = models.DateTimeField(blank=True, null=True)

    class Meta:
        db_table = "tasks"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["owner_id", "organization_id"], name="tasks_scope_idx"),
        ]

    def __str__(self):
        return f"{self.name} ({self.status})"
