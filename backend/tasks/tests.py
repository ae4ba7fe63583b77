# backend/tasks/tests.py
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from workboard.scope import TenantScope
from . import store
from .board import build_board, progress
from .models import Task, TaskStatus


def task_fields(**overrides):
    fields = {
        "name": "Ship release",
        "description": "Tag and publish",
        "department": "Engineering",
        "assigned_to": "user_b",
        "severity": 2,
    }
    fields.update(overrides)
    return fields


class TaskStoreTests(TestCase):
    def setUp(self):
        self.scope = TenantScope("user_a", "org_1")

    def test_add_task_starts_in_todo(self):
        task = store.add_task(self.scope, **task_fields())
        self.assertEqual(task.status, TaskStatus.TODO)
        self.assertEqual(task.owner_id, "user_a")
        self.assertEqual(task.organization_id, "org_1")
        self.assertEqual(task.created_by_id, "user_a")
        self.assertIsNone(task.updated_by_id)
        self.assertIsNone(task.updated_on)

    def test_listing_is_scoped_to_owner_and_organization(self):
        task = store.add_task(self.scope, **task_fields())
        self.assertEqual([t.id for t in store.get_tasks(self.scope)], [task.id])
        # same owner in another org, another owner in the same org
        self.assertEqual(store.get_tasks(TenantScope("user_a", "org_2")), [])
        self.assertEqual(store.get_tasks(TenantScope("user_b", "org_1")), [])
        self.assertEqual(store.get_tasks(TenantScope("user_a")), [])

    def test_personal_workspace_uses_user_id_as_organization(self):
        personal = TenantScope("user_a")
        task = store.add_task(personal, **task_fields())
        self.assertEqual(task.organization_id, "user_a")
        self.assertTrue(personal.is_personal)
        self.assertEqual([t.id for t in store.get_tasks(personal)], [task.id])

    def test_set_status_records_acting_user(self):
        task = store.add_task(self.scope, **task_fields())
        store.set_task_state(task.id, TaskStatus.DONE, self.scope)
        task.refresh_from_db()
        self.assertEqual(task.status, "Done")
        self.assertEqual(task.updated_by_id, "user_a")
        self.assertIsNotNone(task.updated_on)

    def test_set_status_does_not_check_known_values(self):
        task = store.add_task(self.scope, **task_fields())
        store.set_task_state(task.id, "Blocked", self.scope)
        task.refresh_from_db()
        self.assertEqual(task.status, "Blocked")

    def test_set_status_outside_scope_is_not_found(self):
        task = store.add_task(self.scope, **task_fields())
        with self.assertRaises(Task.DoesNotExist):
            store.set_task_state(task.id, TaskStatus.DONE, TenantScope("user_b", "org_1"))
        task.refresh_from_db()
        self.assertEqual(task.status, TaskStatus.TODO)

    def test_last_status_write_wins(self):
        task = store.add_task(self.scope, **task_fields())
        other_tab = TenantScope("user_a", "org_1")
        store.set_task_state(task.id, TaskStatus.IN_PROGRESS, self.scope)
        store.set_task_state(task.id, TaskStatus.DONE, other_tab)
        task.refresh_from_db()
        self.assertEqual(task.status, TaskStatus.DONE)

    def test_update_overwrites_all_editable_fields(self):
        task = store.add_task(self.scope, **task_fields())
        store.set_task_state(task.id, TaskStatus.IN_PROGRESS, self.scope)
        store.update_task(
            task.id,
            self.scope,
            **task_fields(name="Renamed", description="", department="Ops", assigned_to="", severity=4),
        )
        task.refresh_from_db()
        self.assertEqual(task.name, "Renamed")
        self.assertEqual(task.description, "")
        self.assertEqual(task.department, "Ops")
        self.assertEqual(task.assigned_to, "")
        self.assertEqual(task.severity, 4)
        # identity, scope and status untouched
        self.assertEqual(task.owner_id, "user_a")
        self.assertEqual(task.organization_id, "org_1")
        self.assertEqual(task.status, TaskStatus.IN_PROGRESS)

    def test_toggle_done_flips_between_done_and_todo(self):
        task = store.add_task(self.scope, **task_fields())
        self.assertEqual(store.toggle_task_done(task.id, self.scope), TaskStatus.DONE)
        self.assertEqual(store.toggle_task_done(task.id, self.scope), TaskStatus.TODO)
        store.set_task_state(task.id, TaskStatus.IN_PROGRESS, self.scope)
        self.assertEqual(store.toggle_task_done(task.id, self.scope), TaskStatus.DONE)


class BoardTests(TestCase):
    def test_columns_keep_list_order_and_skip_unknown_status(self):
        scope = TenantScope("user_a", "org_1")
        a = store.add_task(scope, **task_fields(name="A"))
        b = store.add_task(scope, **task_fields(name="B"))
        c = store.add_task(scope, **task_fields(name="C"))
        d = store.add_task(scope, **task_fields(name="D"))
        store.set_task_state(b.id, TaskStatus.DONE, scope)
        store.set_task_state(d.id, "Archived", scope)

        columns, summary = build_board(store.get_tasks(scope))
        self.assertEqual([col["status"] for col in columns], ["To Do", "In Progress", "Done"])
        self.assertEqual([t.id for t in columns[0]["tasks"]], [a.id, c.id])
        self.assertEqual(columns[1]["tasks"], [])
        self.assertEqual([t.id for t in columns[2]["tasks"]], [b.id])
        self.assertEqual(summary, {"completed": 1, "total": 4, "percentage": 25.0})

    def test_progress_of_empty_board(self):
        self.assertEqual(progress([]), {"completed": 0, "total": 0, "percentage": 0.0})


class TaskAPITests(APITestCase):
    def setUp(self):
        self.client.credentials(HTTP_X_USER_ID="user_a", HTTP_X_ORGANIZATION_ID="org_1")

    def create_task(self, **overrides):
        res = self.client.post(reverse("task-list"), task_fields(**overrides), format="json")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED, res.data)
        return res.data

    def test_requires_identity(self):
        self.client.credentials()
        res = self.client.get(reverse("task-list"))
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_create_and_list(self):
        created = self.create_task()
        self.assertEqual(created["status"], "To Do")
        self.assertEqual(created["organization_id"], "org_1")

        res = self.client.get(reverse("task-list"))
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([t["id"] for t in res.data["tasks"]], [created["id"]])

        self.client.credentials(HTTP_X_USER_ID="user_a", HTTP_X_ORGANIZATION_ID="org_2")
        res = self.client.get(reverse("task-list"))
        self.assertEqual(res.data["tasks"], [])

    def test_create_requires_all_fields(self):
        res = self.client.post(reverse("task-list"), {"name": "Only a name"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        for field in ("description", "department", "assigned_to", "severity"):
            self.assertIn(field, res.data["validation_errors"])

    def test_severity_must_be_between_one_and_four(self):
        res = self.client.post(reverse("task-list"), task_fields(severity=5), format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("severity", res.data["validation_errors"])

    def test_status_update_via_drag(self):
        created = self.create_task()
        url = reverse("task-status", kwargs={"task_id": created["id"]})
        res = self.client.patch(url, {"status": "Done"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)

        res = self.client.get(reverse("task-detail", kwargs={"task_id": created["id"]}))
        self.assertEqual(res.data["status"], "Done")
        self.assertEqual(res.data["updated_by_id"], "user_a")

    def test_status_update_requires_status(self):
        created = self.create_task()
        url = reverse("task-status", kwargs={"task_id": created["id"]})
        res = self.client.patch(url, {"status": ""}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_full_edit(self):
        created = self.create_task()
        url = reverse("task-detail", kwargs={"task_id": created["id"]})
        res = self.client.put(url, task_fields(name="Edited", severity=3), format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["name"], "Edited")
        self.assertEqual(res.data["severity"], 3)
        self.assertEqual(res.data["id"], created["id"])
        self.assertEqual(res.data["owner_id"], "user_a")

    def test_edit_rejects_partial_payload(self):
        created = self.create_task()
        url = reverse("task-detail", kwargs={"task_id": created["id"]})
        res = self.client.put(url, {"name": "Edited"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_other_tenant_gets_404(self):
        created = self.create_task()
        self.client.credentials(HTTP_X_USER_ID="user_b", HTTP_X_ORGANIZATION_ID="org_1")
        detail = reverse("task-detail", kwargs={"task_id": created["id"]})
        self.assertEqual(self.client.get(detail).status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(
            self.client.put(detail, task_fields(), format="json").status_code,
            status.HTTP_404_NOT_FOUND,
        )
        res = self.client.patch(
            reverse("task-status", kwargs={"task_id": created["id"]}), {"status": "Done"}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(Task.objects.get(id=created["id"]).status, "To Do")

    def test_toggle(self):
        created = self.create_task()
        url = reverse("task-toggle", kwargs={"task_id": created["id"]})
        self.assertEqual(self.client.post(url).data["status"], "Done")
        self.assertEqual(self.client.post(url).data["status"], "To Do")

    def test_board(self):
        first = self.create_task(name="First")
        self.create_task(name="Second")
        self.client.patch(
            reverse("task-status", kwargs={"task_id": first["id"]}), {"status": "In Progress"}, format="json"
        )
        res = self.client.get(reverse("task-board"))
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        names = {col["status"]: [t["name"] for t in col["tasks"]] for col in res.data["columns"]}
        self.assertEqual(names, {"To Do": ["Second"], "In Progress": ["First"], "Done": []})
        self.assertEqual(res.data["progress"], {"completed": 0, "total": 2, "percentage": 0.0})
