"""
Task persistence, always filtered by tenant scope.

Status and edit writes are single UPDATE statements with no version check,
so concurrent writers resolve as last write wins.
"""
import logging

from django.utils import timezone

from .models import Task, TaskStatus

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "description", "department", "assigned_to", "severity")


def _scoped(scope):
    return Task.objects.filter(owner_id=scope.owner_id, organization_id=scope.organization_id)


def get_tasks(scope):
    return list(_scoped(scope).order_by("id"))


def get_task(task_id, scope):
    """Raises Task.DoesNotExist when the id is unknown or outside the scope."""
    return _scoped(scope).get(id=task_id)


def add_task(scope, name, description, department, assigned_to, severity):
    task = Task.objects.create(
        name=name,
        description=description,
        department=department,
        assigned_to=assigned_to,
        severity=severity,
        owner_id=scope.owner_id,
        organization_id=scope.organization_id,
        created_by_id=scope.user_id,
        status=TaskStatus.TODO,
    )
    logger.info("Task created id=%s %s", task.id, scope)
    return task


def update_task(task_id, scope, name, description, department, assigned_to, severity):
    # full overwrite, no partial patch
    updated = _scoped(scope).filter(id=task_id).update(
        name=name,
        description=description,
        department=department,
        assigned_to=assigned_to,
        severity=severity,
        updated_by_id=scope.user_id,
        updated_on=timezone.now(),
    )
    if not updated:
        raise Task.DoesNotExist(f"task {task_id} not found")
    logger.info("Task edited id=%s by=%s %s", task_id, scope.user_id, scope)


def set_task_state(task_id, status, scope):
    updated = _scoped(scope).filter(id=task_id).update(
        status=status,
        updated_by_id=scope.user_id,
        updated_on=timezone.now(),
    )
    if not updated:
        raise Task.DoesNotExist(f"task {task_id} not found")
    logger.info("Task status id=%s status=%r by=%s", task_id, status, scope.user_id)


def toggle_task_done(task_id, scope):
    task = get_task(task_id, scope)
    new_status = TaskStatus.TODO if task.status == TaskStatus.DONE else TaskStatus.DONE
    set_task_state(task_id, new_status, scope)
    return new_status
