"""Unit tests for RequestIDMiddleware."""

from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from admin_dashboard.infrastructure.config.logging import request_id_var
from admin_dashboard.presentation.middleware import RequestIDMiddleware


def _client():
    app = FastAPI()
    app.add_middleware(RequestIDMiddleware)

    @app.get("/whoami")
    async def whoami(request: Request):
        return {"state": request.state.request_id, "context": request_id_var.get()}

    return TestClient(app)


class TestRequestIDMiddleware:
    """Test request id propagation."""

    def test_reuses_inbound_header(self):
        """Test an inbound X-Request-ID is kept."""
        response = _client().get("/whoami", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"
        assert response.json() == {"state": "abc-123", "context": "abc-123"}

    def test_generates_id(self):
        """Test a request id is generated when none is sent."""
        response = _client().get("/whoami")

        request_id = response.headers["X-Request-ID"]
        assert len(request_id) == 36
        assert response.json()["state"] == request_id

    def test_context_reset_after_request(self):
        """Test the context variable does not leak past the request."""
        _client().get("/whoami", headers={"X-Request-ID": "abc-123"})

        assert request_id_var.get() is None
