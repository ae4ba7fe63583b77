from dataclasses import dataclass


@dataclass(frozen=True)
class TenantScope:
    """
    (owner id, organization id) pair that filters every task row.

    With no active organization the user works in a personal workspace and
    the organization id falls back to the user id.
    """
    user_id: str
    active_organization_id: str | None = None

    @property
    def owner_id(self):
        return self.user_id

    @property
    def organization_id(self):
        return self.active_organization_id or self.user_id

    @property
    def is_personal(self):
        return not self.active_organization_id

    @classmethod
    def from_request(cls, request):
        return cls(request.user.user_id, request.user.organization_id)

    def __str__(self):
        return f"owner={self.owner_id} org={self.organization_id}"
