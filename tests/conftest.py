"""Shared fixtures: an in-memory SQLite store behind ``get_db`` and signed staff tokens."""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DB_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from zoo import database
from zoo.app import app
from zoo.services import auth

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

LEO = {
    "Name": "Leo",
    "Species": "Lion",
    "DateOfBirth": "2019-01-01",
    "Gender": "M",
    "HealthStatus": "Healthy",
    "LastVetCheckup": "2024-01-01",
    "EnclosureID": 3,
    "DangerLevel": "High",
}


def auth_header(role: str | None = "staff", staff_role: str | None = None,
                staff_type: str | None = None, sub: str = "1") -> dict:
    token = auth.create_access_token(
        {"sub": sub, "role": role, "staffRole": staff_role, "staffType": staff_type}
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(autouse=True)
def db():
    database.create_tables(bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()
    database.Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db) -> TestClient:
    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[database.get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def manager() -> dict:
    return auth_header(role="staff", staff_role="Manager")


@pytest.fixture
def zookeeper() -> dict:
    return auth_header(role="staff", staff_type="Zookeeper")


@pytest.fixture
def vet() -> dict:
    return auth_header(role="staff", staff_type="Vet")


@pytest.fixture
def leo_id(client, manager) -> int:
    response = client.post("/animals/", json=LEO, headers=manager)
    assert response.status_code == 201
    return response.json()["AnimalID"]
