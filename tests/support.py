import unittest

from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from task_manager import models  # noqa: F401
from task_manager.configs.database import get_db
from task_manager.main import app
from task_manager.models import UserRole
from task_manager.services import user_service


def make_memory_engine():
    # One shared connection so every session sees the same in-memory database
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    return engine


class DatabaseTestCase(unittest.TestCase):
    def setUp(self):
        self.engine = make_memory_engine()
        self.db = Session(self.engine)

    def tearDown(self):
        self.db.close()
        SQLModel.metadata.drop_all(self.engine)
        self.engine.dispose()


class ApiTestCase(DatabaseTestCase):
    def setUp(self):
        super().setUp()

        def override_get_db():
            with Session(self.engine) as session:
                yield session

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()
        super().tearDown()

    def register(self, username, email, password="secret1"):
        response = self.client.post(
            "/api/auth/register", json={"username": username, "email": email, "password": password}
        )
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    def login(self, email, password="secret1"):
        response = self.client.post("/api/auth/login", json={"email": email, "password": password})
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()

    def create_admin(self, username="admin", email="admin@x.com", password="secret1"):
        user_service.create_user(self.db, username, email, password, role=UserRole.admin)
        return self.login(email, password)

    @staticmethod
    def auth(token):
        return {"Authorization": f"Bearer {token}"}
