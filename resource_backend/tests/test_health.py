"""
Tests for health endpoints, settings and the OpenAPI export.
"""
from __future__ import annotations

import json

from src.api.generate_openapi import generate_openapi_file
from src.core.config import Settings


def test_health_and_alias(client):
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/health/healthz").json() == {"status": "ok"}


def test_store_health_initializes_missing_store(client, store_path):
    resp = client.get("/health/store")
    assert resp.status_code == 200
    assert store_path.exists()


def test_store_health_reports_corruption(client, store_path):
    store_path.parent.mkdir(parents=True)
    store_path.write_text("[", encoding="utf-8")

    resp = client.get("/health/store")

    assert resp.status_code == 503
    assert resp.json() == {"message": "store_unavailable"}
    assert str(store_path) not in resp.text


def test_settings_defaults(monkeypatch):
    for name in ("PORT", "HOST", "LOG_LEVEL", "APP_ENV", "RESOURCES_FILE"):
        monkeypatch.delenv(name, raising=False)
    s = Settings(_env_file=None)
    assert s.PORT == 3000
    assert s.HOST == "0.0.0.0"
    assert s.RESOURCES_FILE == "data/resources.json"
    assert s.cors_origins_list() == ["*"]
    assert s.effective_log_level() == "DEBUG"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    s = Settings(_env_file=None)
    assert s.PORT == 8080
    assert s.effective_log_level() == "INFO"
    assert s.cors_origins_list() == ["http://a.test", "http://b.test"]


def test_explicit_log_level_wins():
    s = Settings(_env_file=None, APP_ENV="production", LOG_LEVEL="warning")
    assert s.effective_log_level() == "WARNING"


def test_generate_openapi_file(tmp_path, app):
    out = generate_openapi_file(str(tmp_path / "interfaces" / "openapi.json"), app=app)

    schema = json.loads(open(out, encoding="utf-8").read())
    assert "/resources" in schema["paths"]
    assert "/resources/{resource_id}" in schema["paths"]
    assert set(schema["paths"]["/resources/{resource_id}"]) == {"get", "put", "patch", "delete"}


def test_run_main_passes_settings_to_uvicorn(monkeypatch):
    import run
    from src.core import config as core_config

    calls = {}
    monkeypatch.setenv("PORT", "4321")
    monkeypatch.delenv("UVICORN_RELOAD", raising=False)
    core_config.get_settings.cache_clear()
    monkeypatch.setattr(run.uvicorn, "run", lambda target, **kw: calls.update(target=target, **kw))
    try:
        run.main()
    finally:
        core_config.get_settings.cache_clear()

    assert calls["target"] == "src.api.main:app"
    assert calls["host"] == "0.0.0.0"
    assert calls["port"] == 4321
    assert calls["reload"] is False
