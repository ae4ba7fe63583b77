# backend/meetings/tests.py
import datetime
import smtplib
import uuid
from unittest import mock

from django.core import mail
from django.test import TestCase, override_settings
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from workboard.scope import TenantScope
from . import store
from .invites import meeting_link, send_meeting_invite
from .models import ScheduledCall
from .serializers import EmailListField


def at(day, hour=9):
    return timezone.make_aware(datetime.datetime(2026, 11, day, hour, 0))


class ScheduledCallStoreTests(TestCase):
    def test_organization_and_personal_calls_are_kept_apart(self):
        org_scope = TenantScope("user_a", "org_1")
        personal = TenantScope("user_a")
        org_call = store.schedule_call(org_scope, at(3), at(3, 10), title="Standup")
        own_call = store.schedule_call(personal, at(4))

        self.assertEqual([c.id for c in store.list_calls(org_scope)], [org_call.id])
        self.assertEqual([c.id for c in store.list_calls(personal)], [own_call.id])
        self.assertEqual(store.list_calls(TenantScope("user_a", "org_2")), [])
        self.assertEqual(store.list_calls(TenantScope("user_b", "org_1")), [])

    def test_defaults(self):
        call = store.schedule_call(TenantScope("user_a"), at(5))
        self.assertEqual(call.description, "Scheduled Meeting")
        self.assertEqual(call.ends_at, call.starts_at)
        self.assertIsNone(call.organization_id)

    def test_window_keeps_overlapping_calls(self):
        scope = TenantScope("user_a", "org_1")
        early = store.schedule_call(scope, at(1), at(1, 10))
        spanning = store.schedule_call(scope, at(9, 23), at(10, 1))
        late = store.schedule_call(scope, at(20))

        calls = store.list_calls(scope, start=at(10, 0), end=at(20, 0))
        self.assertEqual([c.id for c in calls], [spanning.id])
        self.assertEqual(len(store.list_calls(scope)), 3)
        self.assertNotIn(early.id, [c.id for c in calls])
        self.assertNotIn(late.id, [c.id for c in calls])

    def test_window_edges(self):
        scope = TenantScope("user_a", "org_1")
        ends_at_start = store.schedule_call(scope, at(10, 9), at(10, 10))
        instant_at_start = store.schedule_call(scope, at(10, 10))
        starts_at_end = store.schedule_call(scope, at(10, 11), at(10, 12))

        calls = store.list_calls(scope, start=at(10, 10), end=at(10, 11))
        self.assertEqual([c.id for c in calls], [instant_at_start.id])
        self.assertNotIn(ends_at_start.id, [c.id for c in calls])
        self.assertNotIn(starts_at_end.id, [c.id for c in calls])

    @override_settings(MEETING_BASE_URL="https://work.example.com/")
    def test_meeting_link(self):
        call = store.schedule_call(TenantScope("user_a"), at(5))
        self.assertEqual(meeting_link(call), f"https://work.example.com/meeting/{call.id}")


class InviteTests(TestCase):
    def setUp(self):
        self.call = store.schedule_call(TenantScope("user_a"), at(6), title="Planning", description="Q1 plan")

    def test_sends_link(self):
        self.assertTrue(send_meeting_invite(self.call, ["a@example.com", "b@example.com"]))
        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(mail.outbox[0].to, ["a@example.com", "b@example.com"])
        self.assertIn(meeting_link(self.call), mail.outbox[0].body)
        self.assertIn("Planning", mail.outbox[0].subject)

    def test_no_recipients_sends_nothing(self):
        self.assertFalse(send_meeting_invite(self.call, []))
        self.assertEqual(len(mail.outbox), 0)

    @mock.patch("meetings.invites.send_mail", side_effect=smtplib.SMTPException("down"))
    def test_smtp_failure_is_reported_not_raised(self, _send_mail):
        with self.assertLogs("meetings.invites", level="ERROR"):
            self.assertFalse(send_meeting_invite(self.call, ["a@example.com"]))
        self.assertTrue(ScheduledCall.objects.filter(id=self.call.id).exists())

    def test_header_injection_is_reported_not_raised(self):
        call = store.schedule_call(TenantScope("user_a"), at(6), title="Planning\r\nBcc: x@example.com")
        with self.assertLogs("meetings.invites", level="ERROR"):
            self.assertFalse(send_meeting_invite(call, ["a@example.com"]))
        self.assertEqual(len(mail.outbox), 0)


class EmailListFieldTests(TestCase):
    def test_comma_separated_string(self):
        field = EmailListField()
        self.assertEqual(
            field.to_internal_value(" a@example.com, ,b@example.com "),
            ["a@example.com", "b@example.com"],
        )


class ScheduledCallAPITests(APITestCase):
    def setUp(self):
        self.client.credentials(HTTP_X_USER_ID="user_a", HTTP_X_ORGANIZATION_ID="org_1")

    def test_schedule_with_invite(self):
        payload = {
            "title": "Design review",
            "starts_at": "2026-11-03T15:00:00Z",
            "ends_at": "2026-11-03T16:00:00Z",
            "emails": "a@example.com, b@example.com",
        }
        res = self.client.post(reverse("call-list"), payload, format="json")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED, res.data)
        self.assertTrue(res.data["invite_sent"])
        self.assertEqual(res.data["organization_id"], "org_1")
        self.assertEqual(res.data["description"], "Scheduled Meeting")
        self.assertTrue(res.data["link"].endswith(f"/meeting/{res.data['id']}"))
        self.assertEqual(mail.outbox[0].to, ["a@example.com", "b@example.com"])

    def test_schedule_without_emails(self):
        res = self.client.post(reverse("call-list"), {"starts_at": "2026-11-03T15:00:00Z"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertFalse(res.data["invite_sent"])
        self.assertEqual(len(mail.outbox), 0)

    @mock.patch("meetings.invites.send_mail", side_effect=smtplib.SMTPException("down"))
    def test_failed_invite_keeps_call(self, _send_mail):
        res = self.client.post(
            reverse("call-list"),
            {"starts_at": "2026-11-03T15:00:00Z", "emails": ["a@example.com"]},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertFalse(res.data["invite_sent"])
        self.assertTrue(ScheduledCall.objects.filter(id=res.data["id"]).exists())

    def test_newline_in_title_keeps_call_without_invite(self):
        res = self.client.post(
            reverse("call-list"),
            {
                "title": "Standup\nBcc: x@example.com",
                "starts_at": "2026-11-03T15:00:00Z",
                "emails": ["a@example.com"],
            },
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_201_CREATED, res.data)
        self.assertFalse(res.data["invite_sent"])
        self.assertEqual(ScheduledCall.objects.count(), 1)
        self.assertEqual(len(mail.outbox), 0)

        url = reverse("call-invite", kwargs={"call_id": res.data["id"]})
        res = self.client.post(url, {"emails": ["a@example.com"]}, format="json")
        self.assertEqual(res.status_code, status.HTTP_502_BAD_GATEWAY)

    def test_schedule_validation(self):
        res = self.client.post(
            reverse("call-list"),
            {"starts_at": "2026-11-03T15:00:00Z", "ends_at": "2026-11-03T14:00:00Z"},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("ends_at", res.data["validation_errors"])

        res = self.client.post(
            reverse("call-list"),
            {"starts_at": "2026-11-03T15:00:00Z", "emails": ["not-an-email"]},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("emails", res.data["validation_errors"])

        res = self.client.post(reverse("call-list"), {"title": "No time"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("starts_at", res.data["validation_errors"])

    def test_list_with_window(self):
        for starts in ("2026-11-03T15:00:00Z", "2026-12-03T15:00:00Z"):
            self.client.post(reverse("call-list"), {"starts_at": starts}, format="json")

        res = self.client.get(reverse("call-list"))
        self.assertEqual(len(res.data["calls"]), 2)

        res = self.client.get(reverse("call-list"), {"start": "2026-11-01T00:00:00Z", "end": "2026-12-01T00:00:00Z"})
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(len(res.data["calls"]), 1)

        res = self.client.get(reverse("call-list"), {"start": "yesterday"})
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_detail_and_invite_are_scoped(self):
        res = self.client.post(reverse("call-list"), {"starts_at": "2026-11-03T15:00:00Z"}, format="json")
        call_id = res.data["id"]

        res = self.client.get(reverse("call-detail", kwargs={"call_id": call_id}))
        self.assertEqual(res.status_code, status.HTTP_200_OK)

        res = self.client.post(
            reverse("call-invite", kwargs={"call_id": call_id}), {"emails": ["c@example.com"]}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(mail.outbox[-1].to, ["c@example.com"])

        # personal workspace of the same user does not see org calls
        self.client.credentials(HTTP_X_USER_ID="user_a")
        res = self.client.get(reverse("call-detail", kwargs={"call_id": call_id}))
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        res = self.client.get(reverse("call-detail", kwargs={"call_id": uuid.uuid4()}))
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_invite_requires_recipients(self):
        res = self.client.post(reverse("call-list"), {"starts_at": "2026-11-03T15:00:00Z"}, format="json")
        url = reverse("call-invite", kwargs={"call_id": res.data["id"]})
        res = self.client.post(url, {"emails": ""}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    @mock.patch("meetings.invites.send_mail", side_effect=smtplib.SMTPException("down"))
    def test_invite_failure_is_502(self, _send_mail):
        call = store.schedule_call(TenantScope("user_a", "org_1"), at(7))
        res = self.client.post(
            reverse("call-invite", kwargs={"call_id": call.id}), {"emails": ["c@example.com"]}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_502_BAD_GATEWAY)
        self.assertEqual(res.data["error"], "Failed to send email invite")
