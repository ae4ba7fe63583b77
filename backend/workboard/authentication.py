"""
Request identity for the API.

Sign-in happens at the hosted identity provider; the front end forwards the
signed-in user id and the active organization id as request headers.
"""
from django.conf import settings
from rest_framework.authentication import BaseAuthentication


class Principal:
    """The acting user and, when one is active, their organization."""

    is_authenticated = True
    is_anonymous = False

    def __init__(self, user_id, organization_id=None):
        self.user_id = user_id
        self.organization_id = organization_id or None

    @property
    def pk(self):
        return self.user_id

    def __str__(self):
        return self.user_id


class IdentityHeaderAuthentication(BaseAuthentication):
    def authenticate(self, request):
        user_id = (request.headers.get(settings.IDENTITY_USER_HEADER) or "").strip()
        if not user_id:
            return None
        org_id = (request.headers.get(settings.IDENTITY_ORGANIZATION_HEADER) or "").strip()
        return Principal(user_id, org_id), None

    def authenticate_header(self, request):
        # makes DRF answer 401 instead of 403
        return settings.IDENTITY_USER_HEADER
