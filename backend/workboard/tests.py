from django.test import RequestFactory, TestCase, override_settings
from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.request import Request

from .authentication import IdentityHeaderAuthentication
from .exceptions import GENERIC_ERROR, api_exception_handler
from .scope import TenantScope


class IdentityHeaderAuthenticationTests(TestCase):
    def authenticate(self, **headers):
        request = Request(RequestFactory().get("/", **headers))
        return IdentityHeaderAuthentication().authenticate(request)

    def test_no_user_header(self):
        self.assertIsNone(self.authenticate())
        self.assertIsNone(self.authenticate(HTTP_X_USER_ID="   "))

    def test_user_and_organization(self):
        principal, _ = self.authenticate(HTTP_X_USER_ID="user_a", HTTP_X_ORGANIZATION_ID="org_1")
        self.assertTrue(principal.is_authenticated)
        self.assertEqual(principal.user_id, "user_a")
        self.assertEqual(principal.organization_id, "org_1")

    def test_blank_organization_means_personal(self):
        principal, _ = self.authenticate(HTTP_X_USER_ID="user_a", HTTP_X_ORGANIZATION_ID="")
        self.assertIsNone(principal.organization_id)

    @override_settings(IDENTITY_USER_HEADER="X-Auth-User")
    def test_header_name_is_configurable(self):
        principal, _ = self.authenticate(HTTP_X_AUTH_USER="user_c")
        self.assertEqual(principal.user_id, "user_c")


class TenantScopeTests(TestCase):
    def test_organization_falls_back_to_user(self):
        scope = TenantScope("user_a")
        self.assertEqual((scope.owner_id, scope.organization_id), ("user_a", "user_a"))
        self.assertTrue(scope.is_personal)

    def test_active_organization(self):
        scope = TenantScope("user_a", "org_1")
        self.assertEqual((scope.owner_id, scope.organization_id), ("user_a", "org_1"))
        self.assertFalse(scope.is_personal)


class ExceptionHandlerTests(TestCase):
    def test_unexpected_errors_become_generic_500(self):
        with self.assertLogs("workboard.exceptions", level="ERROR"):
            response = api_exception_handler(RuntimeError("boom"), {"view": None})
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data, {"error": GENERIC_ERROR})

    def test_api_errors_pass_through(self):
        response = api_exception_handler(NotFound(), {"view": None})
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
