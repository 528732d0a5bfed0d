"""
Shared fixtures: an isolated store under tmp_path, a service with
deterministic ids/timestamps, and a TestClient over a freshly built app.
"""
from __future__ import annotations

import itertools
from pathlib import Path
from typing import Callable

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.main import create_app
from src.core.config import Settings
from src.db.json_store import JsonStore
from src.services.resource_service import ResourceService


def _sequence_ids() -> Callable[[], str]:
    counter = itertools.count(1)
    return lambda: f"res-{next(counter)}"


def _ticking_clock() -> Callable[[], str]:
    """Each call returns a timestamp one second later than the previous one."""
    counter = itertools.count(0)

    def _now() -> str:
        n = next(counter)
        return f"2024-01-01T00:{n // 60:02d}:{n % 60:02d}.000Z"

    return _now


@pytest.fixture()
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "resources.json"


@pytest.fixture()
def store(store_path: Path) -> JsonStore:
    return JsonStore(store_path)


@pytest.fixture()
def service(store: JsonStore) -> ResourceService:
    return ResourceService(store, id_factory=_sequence_ids(), clock=_ticking_clock())


@pytest.fixture()
def app(store_path: Path, service: ResourceService) -> FastAPI:
    settings = Settings(RESOURCES_FILE=str(store_path), APP_ENV="test")
    return create_app(settings, service=service)


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
