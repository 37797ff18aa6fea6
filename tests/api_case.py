import unittest
from datetime import timedelta
from typing import Optional
from unittest.mock import MagicMock
from uuid import UUID

from fastapi.testclient import TestClient

from pos_backend.main import app
from pos_backend.auth.service import get_token_maker
from pos_backend.auth.token import TokenMaker
from pos_backend.core.database import get_session

SECRET_KEY = "0123456789abcdefghijklmnopqrstuvwxyz"


class ApiTestCase(unittest.TestCase):
    """
    Runs the real app with a fixed token maker and a stub database session.
    Persistence functions are patched per test.
    """

    def setUp(self):
        self.token_maker = TokenMaker(SECRET_KEY)
        self.session = MagicMock(name="session")
        app.dependency_overrides[get_token_maker] = lambda: self.token_maker
        app.dependency_overrides[get_session] = lambda: self.session
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def auth_headers(
        self,
        username: str,
        duration: timedelta = timedelta(minutes=1),
        user_id: Optional[UUID] = None,
    ) -> dict:
        token = self.token_maker.create_token(username, duration, user_id=user_id)
        return {"Authorization": f"Bearer {token}"}
