"""Tests for the error logging service."""

from types import SimpleNamespace

from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.middleware.error_handler import setup_error_handlers
from app.services.error_logging import ErrorLogger, sanitize_data, truncate_string


def test_sanitize_redacts_sensitive_keys():
    data = {"name": "eve", "password": "hunter2", "nested": {"access_token": "abc"}}
    assert sanitize_data(data) == {
        "name": "eve",
        "password": "[REDACTED]",
        "nested": {"access_token": "[REDACTED]"},
    }


def test_sanitize_redacts_jwt_strings():
    assert sanitize_data(["eyJhbGciOiJIUzI1NiIsInR5cCI6"]) == ["[REDACTED_TOKEN]"]


def test_truncate_string():
    assert truncate_string("abc", 10) == "abc"
    assert truncate_string("a" * 20, 5).startswith("aaaaa... [TRUNCATED")


def test_log_error_writes_detailed_file(tmp_path, caplog):
    error_logger = ErrorLogger()
    error_logger.set_log_dir(tmp_path)

    try:
        raise ValueError("boom")
    except ValueError as exc:
        error_id = error_logger.log_error(
            exc,
            user=SimpleNamespace(id=5, name="eve"),
            context={"operation": "rate", "password": "x"},
        )

    assert error_id in caplog.text
    detailed = (tmp_path / "errors_detailed.log").read_text(encoding="utf-8")
    assert "ValueError" in detailed
    assert '"operation": "rate"' in detailed
    assert '"password": "[REDACTED]"' in detailed


def test_unhandled_error_keeps_error_envelope():
    app = FastAPI()
    setup_error_handlers(app)

    @app.get("/boom")
    def boom():
        raise RuntimeError("database exploded")

    response = TestClient(app, raise_server_exceptions=False).get("/boom")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert response.headers["X-Error-ID"]
