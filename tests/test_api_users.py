"""API tests for admin user management and the protected default admin."""

import unittest

from app.core.security import verify_password
from app.models import RadioStation, User
from tests.api_base import ApiTestCase


class TestUserAdmin(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.admin = self.make_user("admin", role="admin")
        self.alice = self.make_user("alice")
        self.admin_headers = self.auth("admin")

    def test_non_admin_gets_403_on_every_user_route(self) -> None:
        headers = self.auth("alice")
        self.assertEqual(self.client.get("/admin/users", headers=headers).status_code, 403)
        resp = self.client.post(
            "/admin/users",
            json={"username": "mallory", "password": "password123", "role": "admin"},
            headers=headers,
        )
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json(), {"error": "Admin access required"})
        self.assertEqual(
            self.client.put(f"/admin/users/{self.alice.id}", json={"role": "admin"}, headers=headers).status_code,
            403,
        )
        self.assertEqual(self.client.delete(f"/admin/users/{self.admin.id}", headers=headers).status_code, 403)

    def test_list_users_hides_secrets(self) -> None:
        rows = self.client.get("/admin/users", headers=self.admin_headers).json()
        self.assertEqual([r["username"] for r in rows], ["admin", "alice"])
        self.assertEqual(
            set(rows[0]),
            {"id", "username", "enabled", "must_change_password", "role", "global_radios_enabled"},
        )

    def test_create_user(self) -> None:
        resp = self.client.post(
            "/admin/users",
            json={"username": "bob", "password": "password123", "role": "user", "enabled": True},
            headers=self.admin_headers,
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        body = resp.json()
        self.assertEqual(body["username"], "bob")
        self.assertTrue(body["must_change_password"])
        self.assertTrue(body["global_radios_enabled"])

    def test_create_user_validation(self) -> None:
        cases = [
            ({"username": "bob", "password": "short", "role": "user"}, "Password must be at least 8 characters"),
            ({"username": "bob", "password": "password123", "role": "root"}, "Invalid role"),
            ({"username": "alice", "password": "password123", "role": "user"}, "Invalid data or duplicate username"),
        ]
        for body, message in cases:
            resp = self.client.post("/admin/users", json=body, headers=self.admin_headers)
            self.assertEqual(resp.status_code, 400, body)
            self.assertEqual(resp.json()["error"], message)
        resp = self.client.post(
            "/admin/users",
            json={"username": "bo", "password": "password123", "role": "user"},
            headers=self.admin_headers,
        )
        self.assertEqual(resp.status_code, 400)

    def test_update_user(self) -> None:
        resp = self.client.put(
            f"/admin/users/{self.alice.id}",
            json={"role": "admin", "global_radios_enabled": False, "password": ""},
            headers=self.admin_headers,
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["role"], "admin")
        self.assertFalse(resp.json()["global_radios_enabled"])
        self.reload(self.alice)
        self.assertTrue(verify_password("password123", self.alice.password_hash))

    def test_update_user_password(self) -> None:
        resp = self.client.put(
            f"/admin/users/{self.alice.id}",
            json={"password": "reset-password-9"},
            headers=self.admin_headers,
        )
        self.assertEqual(resp.status_code, 200)
        self.reload(self.alice)
        self.assertTrue(verify_password("reset-password-9", self.alice.password_hash))

    def test_update_rejects_invalid_role_and_weak_password(self) -> None:
        url = f"/admin/users/{self.alice.id}"
        self.assertEqual(self.client.put(url, json={"role": "root"}, headers=self.admin_headers).status_code, 400)
        self.assertEqual(self.client.put(url, json={"password": "1234"}, headers=self.admin_headers).status_code, 400)

    def test_missing_user_is_404(self) -> None:
        self.assertEqual(self.client.put("/admin/users/999", json={}, headers=self.admin_headers).status_code, 404)
        self.assertEqual(self.client.delete("/admin/users/999", headers=self.admin_headers).status_code, 404)


class TestDefaultAdminProtection(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.admin = self.make_user("admin", role="admin")
        self.ops = self.make_user("ops", role="admin")

    def test_other_admin_cannot_modify_default_admin(self) -> None:
        resp = self.client.put(
            f"/admin/users/{self.admin.id}", json={"enabled": False}, headers=self.auth("ops")
        )
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json()["error"], "Cannot modify default admin")

    def test_default_admin_can_modify_itself(self) -> None:
        resp = self.client.put(
            f"/admin/users/{self.admin.id}",
            json={"global_radios_enabled": False},
            headers=self.auth("admin"),
        )
        self.assertEqual(resp.status_code, 200)

    def test_default_admin_cannot_be_deleted_even_by_itself(self) -> None:
        resp = self.client.delete(f"/admin/users/{self.admin.id}", headers=self.auth("admin"))
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json()["error"], "Cannot delete default admin")

    def test_other_admin_role_user_can_be_deleted(self) -> None:
        resp = self.client.delete(f"/admin/users/{self.ops.id}", headers=self.auth("admin"))
        self.assertEqual(resp.status_code, 204)
        self.db.expire_all()
        self.assertIsNone(self.db.get(User, self.ops.id))

    def test_deleting_owner_orphans_stations(self) -> None:
        station = self.make_station("Ops FM", "http://ops.example/s", owner=self.ops)
        headers = self.auth("admin")
        self.assertEqual(self.client.delete(f"/admin/users/{self.ops.id}", headers=headers).status_code, 204)
        self.db.expire_all()
        orphan = self.db.get(RadioStation, station.id)
        self.assertIsNotNone(orphan)
        self.assertIsNone(orphan.user_id)
        rows = self.client.get("/admin/radios", headers=headers).json()
        self.assertEqual(rows[0]["owner"], "Unknown")


if __name__ == "__main__":
    unittest.main()
