from datetime import timedelta

from app import create_app
from config import TestingConfig, parse_duration, DEFAULT_TOKEN_LIFETIME


def test_health(client):
    resp = client.get("/api/health")

    assert resp.status_code == 200
    assert resp.get_json()["status"] == "OK"


def test_unknown_route(client):
    resp = client.get("/api/nope")

    assert resp.status_code == 404
    assert resp.get_json() == {"status": "error", "message": "Route not found"}


def test_method_not_allowed(client):
    resp = client.delete("/api/health")

    assert resp.status_code == 405
    assert resp.get_json()["status"] == "error"


class _ProductionConfig(TestingConfig):
    APP_ENV = "production"


def _boom_app(config):
    app = create_app(config)

    @app.route("/boom")
    def boom():
        raise RuntimeError("kaboom")

    return app


def test_unexpected_error_includes_stack_outside_production():
    resp = _boom_app(TestingConfig).test_client().get("/boom")

    assert resp.status_code == 500
    body = resp.get_json()
    assert body["message"] == "kaboom"
    assert "RuntimeError" in body["stack"]


def test_unexpected_error_hides_stack_in_production():
    resp = _boom_app(_ProductionConfig).test_client().get("/boom")

    assert resp.status_code == 500
    assert resp.get_json() == {"status": "error", "message": "kaboom"}


def test_parse_duration():
    assert parse_duration("3600") == timedelta(seconds=3600)
    assert parse_duration("30m") == timedelta(minutes=30)
    assert parse_duration("24h") == timedelta(hours=24)
    assert parse_duration("7D") == timedelta(days=7)
    assert parse_duration(None) == DEFAULT_TOKEN_LIFETIME
    assert parse_duration("soon") == DEFAULT_TOKEN_LIFETIME
    assert parse_duration("0") == DEFAULT_TOKEN_LIFETIME
