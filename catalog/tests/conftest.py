"""Pytest configuration and fixtures for the catalog service tests."""

from datetime import UTC, datetime, timedelta

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from catalog.main import create_app
from catalog.modules.items import CatalogStore, NeverFail, default_catalog


class FakeClock:
    """Clock that moves one second forward on every reading."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, tzinfo=UTC)

    def __call__(self) -> datetime:
        current = self.now
        self.now += timedelta(seconds=1)
        return current


# ==================== Store Fixtures ====================


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def empty_store(clock: FakeClock) -> CatalogStore:
    """Store without items and without simulated failures."""
    return CatalogStore(fault_policy=NeverFail(), clock=clock)


@pytest.fixture
def store(clock: FakeClock) -> CatalogStore:
    """Store seeded with the demo catalog (ids 1..7), never failing."""
    return CatalogStore(fault_policy=NeverFail(), clock=clock, items=default_catalog())


# ==================== App Fixtures ====================


@pytest.fixture
def app(store: CatalogStore) -> FastAPI:
    """Application serving the seeded store."""
    return create_app(store=store)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """HTTP client that returns 500 responses instead of re-raising."""
    return TestClient(app, raise_server_exceptions=False)
