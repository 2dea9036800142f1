from decimal import Decimal
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from carservice_shared.db.models import (
    Base,
    Service,
    ServicePricing,
    ServiceStation,
    User,
)

from booking_api.api.dependencies import get_session, get_settings
from booking_api.config.settings import Settings
from booking_api.core.security import hash_password
from booking_api.main import app

TEST_PASSWORD = "s3cret-pass"


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+pysqlite:///{tmp_path / 'car_service.db'}",
        jwt_secret="test-secret",
        bcrypt_rounds=4,
    )


@pytest.fixture
def db_engine(test_settings: Settings):
    engine = create_engine(
        test_settings.database_url,
        connect_args={"check_same_thread": False},
        future=True,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def SessionLocal(db_engine):
    return sessionmaker(
        bind=db_engine,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
        future=True,
    )


@pytest.fixture
def db_session(SessionLocal) -> Generator[Session, None, None]:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def catalog(SessionLocal):
    """
    Two stations and two services. Oil Change costs 59.99 by default and has
    a 49.99 override at City Auto Care; Tire Rotation has no overrides.
    """
    with SessionLocal() as s:
        s.add_all(
            [
                ServiceStation(id=1, name="City Auto Care", address="123 Main St"),
                ServiceStation(id=2, name="Premium Car Services", address="456 Oak Ave"),
                Service(
                    id=1,
                    name="Oil Change",
                    description="Complete oil and filter change",
                    base_price=Decimal("59.99"),
                    duration_minutes=30,
                ),
                Service(
                    id=2,
                    name="Tire Rotation",
                    description="Tire rotation and pressure check",
                    base_price=Decimal("29.99"),
                    duration_minutes=45,
                ),
            ]
        )
        s.flush()
        s.add(ServicePricing(service_id=1, station_id=1, price=Decimal("49.99")))
        s.commit()


@pytest.fixture
def clients(SessionLocal):
    """Two registered clients; returns their ids."""
    with SessionLocal() as s:
        alice = User(
            email="alice@example.com",
            password_hash=hash_password(TEST_PASSWORD, rounds=4),
            name="Alice",
            phone="555-0001",
            role="client",
        )
        bob = User(
            email="bob@example.com",
            password_hash=hash_password(TEST_PASSWORD, rounds=4),
            name="Bob",
            role="client",
        )
        s.add_all([alice, bob])
        s.commit()
        return alice.id, bob.id


@pytest.fixture
def api_client(SessionLocal, test_settings) -> Generator[TestClient, None, None]:
    def _get_session():
        session = SessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_session] = _get_session
    app.dependency_overrides[get_settings] = lambda: test_settings
    try:
        # entering the client runs lifespan and keeps one event loop for all websockets
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def booking_payload():
    def _payload(**overrides) -> dict:
        payload = {
            "serviceId": 1,
            "stationId": 1,
            "clientId": 1,
            "date": "2026-11-02",
            "time": "10:30",
        }
        payload.update(overrides)
        return payload

    return _payload


def pytest_configure(config):
    config.addinivalue_line("markers", "api: tests going through the HTTP layer")
