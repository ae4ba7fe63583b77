import logging

from django.db.models import Q

from .models import DEFAULT_DESCRIPTION, ScheduledCall

logger = logging.getLogger(__name__)


def _scoped(scope):
    calls = ScheduledCall.objects.filter(owner_id=scope.owner_id)
    if scope.is_personal:
        return calls.filter(organization_id__isnull=True)
    return calls.filter(organization_id=scope.active_organization_id)


def list_calls(scope, start=None, end=None):
    """Calls for the active organization (or personal ones), optionally those overlapping [start, end)."""
    calls = _scoped(scope)
    if start is not None:
        # half-open window; zero-length calls count when they start inside it
        calls = calls.filter(Q(ends_at__gt=start) | Q(starts_at__gte=start))
    if end is not None:
        calls = calls.filter(starts_at__lt=end)
    return list(calls.order_by("starts_at"))


def get_call(call_id, scope):
    return _scoped(scope).get(id=call_id)


def schedule_call(scope, starts_at, ends_at=None, title="", description=""):
    call = ScheduledCall.objects.create(
        owner_id=scope.owner_id,
        organization_id=scope.active_organization_id,
        title=title,
        description=description or DEFAULT_DESCRIPTION,
        starts_at=starts_at,
        ends_at=ends_at or starts_at,
    )
    logger.info("Call scheduled id=%s starts_at=%s %s", call.id, call.starts_at.isoformat(), scope)
    return call
