import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import patch
from uuid import uuid4

from api_case import ApiTestCase

from pos_backend.auth.service import get_password_hash
from pos_backend.core.database import RecordNotFoundError, StoreError, UniqueViolationError
from pos_backend.models.User import User


def random_user(password: str = "password123") -> User:
    return User(
        id=uuid4(),
        username="alice",
        hashed_password=get_password_hash(password),
        created_at=datetime(2022, 1, 1, 12, 0, 0, tzinfo=timezone.utc),
    )


class TestCreateUser(ApiTestCase):

    def setUp(self):
        super().setUp()
        self.user = random_user()

    @patch("pos_backend.users.router.create_user")
    def test_ok(self, mock_create):
        mock_create.return_value = self.user

        resp = self.client.post("/users", json={"username": "alice", "password": "password123"})
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["id"], str(self.user.id))
        self.assertEqual(body["username"], "alice")
        self.assertNotIn("hashed_password", body)

        args, _ = mock_create.call_args
        self.assertEqual(args[1], "alice")
        self.assertNotEqual(args[2], "password123")

    @patch("pos_backend.users.router.create_user")
    def test_duplicate_username(self, mock_create):
        mock_create.side_effect = UniqueViolationError("duplicate key value")

        resp = self.client.post("/users", json={"username": "alice", "password": "password123"})
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json(), {"error": "duplicate key value"})

    @patch("pos_backend.users.router.create_user")
    def test_internal_error(self, mock_create):
        mock_create.side_effect = StoreError("connection refused")

        resp = self.client.post("/users", json={"username": "alice", "password": "password123"})
        self.assertEqual(resp.status_code, 500)
        self.assertIn("error", resp.json())

    @patch("pos_backend.users.router.create_user")
    def test_invalid_username(self, mock_create):
        resp = self.client.post("/users", json={"username": "alice#1", "password": "password123"})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("error", resp.json())
        mock_create.assert_not_called()

    @patch("pos_backend.users.router.create_user")
    def test_password_too_short(self, mock_create):
        resp = self.client.post("/users", json={"username": "alice", "password": "short"})
        self.assertEqual(resp.status_code, 400)
        mock_create.assert_not_called()


class TestLoginUser(ApiTestCase):

    def setUp(self):
        super().setUp()
        self.user = random_user("password123")

    @patch("pos_backend.users.router.get_user")
    def test_ok(self, mock_get_user):
        mock_get_user.return_value = self.user

        resp = self.client.post("/users/login", json={"username": "alice", "password": "password123"})
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["user"]["username"], "alice")

        payload = self.token_maker.verify_token(body["access_token"])
        self.assertEqual(payload.username, "alice")
        self.assertEqual(payload.user_id, self.user.id)

    @patch("pos_backend.users.router.get_user")
    def test_user_not_found(self, mock_get_user):
        mock_get_user.side_effect = RecordNotFoundError("no rows in result set")

        resp = self.client.post("/users/login", json={"username": "alice", "password": "password123"})
        self.assertEqual(resp.status_code, 404)

    @patch("pos_backend.users.router.get_user")
    def test_wrong_password(self, mock_get_user):
        mock_get_user.return_value = self.user

        resp = self.client.post("/users/login", json={"username": "alice", "password": "wrongpassword"})
        self.assertEqual(resp.status_code, 401)
        self.assertNotIn("access_token", resp.json())

    @patch("pos_backend.users.router.get_user")
    def test_invalid_request(self, mock_get_user):
        resp = self.client.post("/users/login", json={"username": "alice"})
        self.assertEqual(resp.status_code, 400)
        mock_get_user.assert_not_called()

    @patch("pos_backend.users.router.get_user")
    def test_internal_error(self, mock_get_user):
        mock_get_user.side_effect = StoreError("connection refused")

        resp = self.client.post("/users/login", json={"username": "alice", "password": "password123"})
        self.assertEqual(resp.status_code, 500)


class TestGetUser(ApiTestCase):

    def setUp(self):
        super().setUp()
        self.user = User(id=uuid4(), username="alice", hashed_password="hash", created_at=datetime(2022, 1, 1, tzinfo=timezone.utc))

    @patch("pos_backend.users.router.get_user")
    def test_ok(self, mock_get_user):
        mock_get_user.return_value = self.user

        resp = self.client.get("/users/alice", headers=self.auth_headers("alice"))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["username"], "alice")
        mock_get_user.assert_called_once_with(self.session, "alice")

    @patch("pos_backend.users.router.get_user")
    def test_other_user(self, mock_get_user):
        resp = self.client.get("/users/alice", headers=self.auth_headers("bob"))
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"error": "unauthorized user"})
        mock_get_user.assert_not_called()

    @patch("pos_backend.users.router.get_user")
    def test_not_found(self, mock_get_user):
        mock_get_user.side_effect = RecordNotFoundError("no rows in result set")

        resp = self.client.get("/users/alice", headers=self.auth_headers("alice"))
        self.assertEqual(resp.status_code, 404)

    @patch("pos_backend.users.router.get_user")
    def test_invalid_username(self, mock_get_user):
        resp = self.client.get("/users/al-ice", headers=self.auth_headers("al-ice", timedelta(minutes=1)))
        self.assertEqual(resp.status_code, 400)
        mock_get_user.assert_not_called()

    @patch("pos_backend.users.router.get_user")
    def test_invalid_username_without_token(self, mock_get_user):
        # Authentication runs before path validation.
        resp = self.client.get("/users/al-ice")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"error": "authorization header is not provided"})
        mock_get_user.assert_not_called()


if __name__ == "__main__":
    unittest.main()
