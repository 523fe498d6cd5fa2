"""Shared test fixtures: in-memory SQLite database and an API client bound to it."""

import unittest
from typing import Any

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import get_db
from app.main import app
from app.models import Base, Destination, DestinationType, User
from app.services import users as user_service


def make_engine():
    """Fresh in-memory SQLite engine with foreign keys enforced and all tables created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    return engine


def add_destination(
    db: Session,
    owner: User,
    name: str = "Cancun Beach",
    description: str = "White sand and turquoise water.",
    country_code: str = "MX",
    type: DestinationType = DestinationType.BEACH,
    **kwargs: Any,
) -> Destination:
    """Insert a destination row directly, bypassing the service layer."""
    destination = Destination(
        name=name,
        description=description,
        country_code=country_code,
        type=type,
        user_id=owner.id,
        **kwargs,
    )
    db.add(destination)
    db.commit()
    db.refresh(destination)
    return destination


class DatabaseTestCase(unittest.TestCase):
    """Each test gets its own empty database and a session on it."""

    def setUp(self) -> None:
        self.engine = make_engine()
        self.Session = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        self.db = self.Session()

    def tearDown(self) -> None:
        self.db.close()
        Base.metadata.drop_all(bind=self.engine)
        self.engine.dispose()

    def make_user(
        self,
        email: str = "owner@x.com",
        password: str = "secret1",
        name: str = "Owner",
    ) -> User:
        return user_service.register(self.db, email=email, password=password, name=name)


class ApiTestCase(DatabaseTestCase):
    """DatabaseTestCase plus a TestClient whose get_db dependency uses the test database."""

    def setUp(self) -> None:
        super().setUp()

        def _override_get_db():
            session = self.Session()
            try:
                yield session
            finally:
                session.close()

        app.dependency_overrides[get_db] = _override_get_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        super().tearDown()

    def register(
        self,
        email: str = "a@x.com",
        password: str = "secret1",
        name: str = "A",
    ) -> dict[str, Any]:
        """POST /api/auth/register and return the JSON body."""
        resp = self.client.post(
            "/api/auth/register",
            json={"email": email, "password": password, "name": name},
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()

    @staticmethod
    def bearer(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}
