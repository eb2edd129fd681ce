from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from smart_pantry.middleware.error_handler import setup_error_handling
from smart_pantry.models.error_log import ErrorLog
from smart_pantry.services.error_logging import ErrorLogger, error_logger, sanitize_data, setup_file_logging


def test_sanitize_redacts_sensitive_fields():
    data = {
        "email": "owner@pantry.io",
        "password": "hunter22",
        "nested": {"refresh_token": "abc", "barcode": "12345678"},
        "items": [{"api_key": "k"}],
        "header": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9.payload",
    }
    clean = sanitize_data(data)

    assert clean["email"] == "owner@pantry.io"
    assert clean["password"] == "[REDACTED]"
    assert clean["nested"] == {"refresh_token": "[REDACTED]", "barcode": "12345678"}
    assert clean["items"] == [{"api_key": "[REDACTED]"}]
    assert clean["header"] == "[REDACTED_TOKEN]"


def test_log_error_persists_row(session_factory):
    logger = ErrorLogger()
    logger.set_db_session_factory(session_factory)

    try:
        raise ValueError("scale offline")
    except ValueError as e:
        error_id = logger.log_error(e, severity="warning", context={"password": "x", "sensor": "S1"})

    assert error_id is not None
    db = session_factory()
    try:
        row = db.query(ErrorLog).filter(ErrorLog.id == error_id).one()
        assert row.error_type == "ValueError"
        assert row.message == "scale offline"
        assert row.severity == "warning"
        assert row.function == "test_log_error_persists_row"
        assert row.context_data == {"password": "[REDACTED]", "sensor": "S1"}
        assert "ValueError" in row.stack_trace
    finally:
        db.close()


def test_log_error_without_database():
    assert ErrorLogger().log_error(RuntimeError("no db")) is None


def test_file_logging_falls_back_when_directory_unusable(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    assert setup_file_logging(str(blocker / "logs")) is False


def test_middleware_returns_error_id(session_factory, monkeypatch):
    monkeypatch.setattr(error_logger, "db_session_factory", session_factory)

    app = FastAPI()
    setup_error_handling(app)

    @app.get("/boom")
    def boom():
        raise RuntimeError("kaboom")

    response = TestClient(app).get("/boom")

    assert response.status_code == 500
    body = response.json()
    assert body["error_id"]
    assert response.headers["X-Error-ID"] == body["error_id"]
    db = session_factory()
    try:
        row = db.query(ErrorLog).one()
        assert str(row.id) == body["error_id"]
        assert row.severity == "critical"
        assert row.request_path == "/boom"
    finally:
        db.close()


def test_http_errors_pass_through_unlogged(session_factory, monkeypatch):
    monkeypatch.setattr(error_logger, "db_session_factory", session_factory)

    app = FastAPI()
    setup_error_handling(app)

    @app.get("/teapot")
    def teapot():
        raise HTTPException(status_code=418, detail="short and stout")

    response = TestClient(app).get("/teapot")

    assert response.status_code == 418
    assert response.json() == {"detail": "short and stout"}
    db = session_factory()
    try:
        assert db.query(ErrorLog).count() == 0
    finally:
        db.close()


def test_unhandled_error_without_database_has_no_error_id(monkeypatch):
    monkeypatch.setattr(error_logger, "db_session_factory", None)

    app = FastAPI()
    setup_error_handling(app)

    @app.get("/boom")
    def boom():
        raise ValueError("no db")

    response = TestClient(app).get("/boom")

    assert response.status_code == 500
    assert response.json()["error_id"] is None
    assert "X-Error-ID" not in response.headers


def test_health_and_root(client):
    health = client.get("/health")
    assert health.status_code == 200
    assert health.json()["status"] == "ok"
    assert client.get("/").json()["docs"] == "/docs"
