"""
Tests for error handling: message sanitization and the JSON error envelope.
"""

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, OperationalError

from core.exceptions import RecordNotFound, TransientStoreError, ValidationFailure
from core.middleware.error_handling import (
    ErrorHandlingMiddleware,
    classify_exception,
    get_safe_error_details,
    sanitize_error_message,
    setup_error_handlers,
)


class TestSensitiveDataSanitization:
    """Credentials and identifiers never reach an error message."""

    @pytest.mark.parametrize("sensitive_input", [
        'password="secret123"',
        'token="Bearer abc123xyz"',
        'api_key="sk_live_12345"',
        'client_secret:abc123',
        'authorization: Bearer token123',
        'SSN: 123-45-6789',
        'card: 4532123456789010',
    ])
    def test_sensitive_values_redacted(self, sensitive_input):
        assert "[REDACTED]" in sanitize_error_message(sensitive_input)

    @pytest.mark.parametrize("safe_input", [
        "Record not found",
        "Onboarding status must be one of: Pending, In Progress, Completed",
        'position="Engineer"',
    ])
    def test_safe_values_untouched(self, safe_input):
        assert sanitize_error_message(safe_input) == safe_input

    def test_multiple_fields_in_one_message(self):
        sanitized = sanitize_error_message('password="secret" and token="abc123"')

        assert "secret" not in sanitized
        assert "abc123" not in sanitized
        assert sanitized.count("[REDACTED]") == 2

    def test_non_string_detail(self):
        assert sanitize_error_message({"id": "a1"}) == "{'id': 'a1'}"


class TestSafeErrorDetails:

    def test_without_traceback(self):
        details = get_safe_error_details(ValueError("password=hunter22"))

        assert details["type"] == "ValueError"
        assert "hunter22" not in details["message"]
        assert "traceback" not in details

    def test_with_traceback(self):
        details = get_safe_error_details(ValueError("boom"), include_details=True)

        assert isinstance(details["traceback"], str)


class TestClassifyException:

    @pytest.mark.parametrize("exc,status_code,code", [
        (RecordNotFound(record_id="zzz"), 404, "NOT_FOUND"),
        (ValidationFailure("bad input"), 422, "VALIDATION_ERROR"),
        (TransientStoreError("retry"), 503, "STORE_UNAVAILABLE"),
        (IntegrityError("INSERT", {}, Exception("dup")), 409, "INTEGRITY_ERROR"),
        (OperationalError("SELECT", {}, Exception("down")), 503, "STORE_UNAVAILABLE"),
        (TimeoutError(), 504, "TIMEOUT"),
        (RuntimeError("boom"), 500, "INTERNAL_SERVER_ERROR"),
    ])
    def test_mapping(self, exc, status_code, code):
        result_status, result_code, _, _ = classify_exception(exc, "/x", "GET")

        assert (result_status, result_code) == (status_code, code)

    def test_not_found_carries_id(self):
        _, _, message, details = classify_exception(RecordNotFound(record_id="zzz"), "/x", "PUT")

        assert message == "Record not found"
        assert details == {"id": "zzz"}

    def test_unexpected_error_hides_message(self):
        _, _, message, details = classify_exception(RuntimeError("password=hunter22"), "/x", "GET")

        assert message == "An unexpected error occurred"
        assert details is None


class TestErrorEnvelope:
    """Handlers and the middleware render the same envelope."""

    @pytest.fixture
    def app(self):
        app = FastAPI()
        setup_error_handlers(app)
        app.add_middleware(ErrorHandlingMiddleware, debug=False)

        class Body(BaseModel):
            rating: int

        @app.get("/missing")
        async def missing():
            raise RecordNotFound(record_id="zzz")

        @app.get("/transient")
        async def transient():
            raise TransientStoreError("Could not hire record; please retry")

        @app.get("/http")
        async def http_error():
            raise HTTPException(status_code=403, detail="Requires one of roles: recruiter")

        @app.post("/validate")
        async def validate(body: Body):
            return body

        return app

    @pytest.fixture
    def client(self, app):
        return TestClient(app)

    def test_domain_not_found(self, client):
        response = client.get("/missing")

        assert response.status_code == 404
        assert response.json() == {
            "error": {
                "code": "NOT_FOUND",
                "message": "Record not found",
                "path": "/missing",
                "method": "GET",
                "details": {"id": "zzz"},
            }
        }

    def test_transient_store_error(self, client):
        response = client.get("/transient")

        assert response.status_code == 503
        assert response.json()["error"]["code"] == "STORE_UNAVAILABLE"

    def test_http_exception(self, client):
        response = client.get("/http")

        assert response.status_code == 403
        assert response.json()["error"]["message"] == "Requires one of roles: recruiter"

    def test_request_validation(self, client):
        response = client.post("/validate", json={"rating": "five"})

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"][0]["field"] == "body.rating"
