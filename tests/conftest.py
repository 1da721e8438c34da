"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from main import create_app


def make_settings(**overrides) -> Settings:
    values = {
        "DATABASE_URL": "sqlite://",
        "LOG_LEVEL": "WARNING",
        "DB_CONNECT_MAX_ATTEMPTS": 1,
        "DB_CONNECT_INITIAL_DELAY": 0,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def make_client():
    """Factory for clients backed by a fresh in-memory database."""
    clients = []

    def _make(**overrides) -> TestClient:
        client = TestClient(create_app(make_settings(**overrides)))
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()


@pytest.fixture
def device_payload():
    return {
        "deviceId": "d1",
        "model": "Pixel7",
        "manufacturer": "Google",
        "osVersion": "14",
        "screenBrightness": 0.8,
        "screenOrientation": "portrait",
        "oneHandMode": True,
        "dominantHand": "right",
    }


@pytest.fixture
def sensor_payload():
    return {
        "deviceId": "d1",
        "timestamp": "2024-01-01T12:00:00Z",
        "gyroscope": {"x": 0.1, "y": 0.2, "z": 0.3},
        "magnetometer": {"x": 12.5, "y": -3.0, "z": 40.0},
        "lightSensor": 310.0,
        "proximitySensor": False,
    }
