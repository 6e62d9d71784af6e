from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from flask import Flask

from cms.domain.users.entities import TokenPair
from cms.domain.users.exceptions import (
    InvalidCredentialsError,
    InvalidTokenTypeError,
    UserNotFoundError,
)
from cms.interfaces.http.controllers.auth_controller import AuthController
from cms.shared.middleware.error_handler import configure_error_handling


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app, debug_mode=False)
    return app


def _controller(login=None, refresh=None, **kwargs) -> AuthController:
    return AuthController(
        login_use_case=login or MagicMock(),
        refresh_use_case=refresh or MagicMock(),
        **kwargs,
    )


def test_login_returns_token_envelope(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.return_value = TokenPair(access_token="acc", refresh_token="ref")
    flask_app.register_blueprint(_controller(login=login).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/v1/auth/login", json={"username": "admin", "password": "admin123"}
        )

    assert response.status_code == 200
    assert response.get_json() == {
        "meta": {"code": 200, "message": "OK"},
        "data": {"token": {"access_token": "acc", "refresh_token": "ref"}},
    }
    login.execute.assert_called_once_with("admin", "admin123")


@pytest.mark.parametrize(
    "body",
    [{}, {"username": "admin"}, {"username": "   ", "password": "x"}, {"password": "x"}],
)
def test_login_invalid_payload_returns_400(flask_app: Flask, body: dict) -> None:
    login = MagicMock()
    flask_app.register_blueprint(_controller(login=login).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/v1/auth/login", json=body)

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["error"] == "validation_error"
    assert payload["meta"] == {"code": 400, "message": "Invalid request payload"}
    login.execute.assert_not_called()


@pytest.mark.parametrize(
    ("error", "status", "message"),
    [
        (UserNotFoundError(), 404, "User not found"),
        (InvalidCredentialsError(), 401, "Invalid username or password"),
    ],
)
def test_login_errors_are_mapped(flask_app: Flask, error, status: int, message: str) -> None:
    login = MagicMock()
    login.execute.side_effect = error
    flask_app.register_blueprint(_controller(login=login).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/v1/auth/login", json={"username": "admin", "password": "x"})

    assert response.status_code == status
    assert response.get_json()["meta"]["message"] == message


def test_refresh_returns_new_pair(flask_app: Flask) -> None:
    refresh = MagicMock()
    refresh.execute.return_value = TokenPair(access_token="acc2", refresh_token="ref2")
    flask_app.register_blueprint(_controller(refresh=refresh).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/v1/auth/refresh", json={"refresh_token": "ref1"})

    assert response.status_code == 200
    assert response.get_json()["data"]["token"]["refresh_token"] == "ref2"
    refresh.execute.assert_called_once_with("ref1")


def test_refresh_with_wrong_token_type_is_401(flask_app: Flask) -> None:
    refresh = MagicMock()
    refresh.execute.side_effect = InvalidTokenTypeError()
    flask_app.register_blueprint(_controller(refresh=refresh).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/v1/auth/refresh", json={"refresh_token": "acc"})

    assert response.status_code == 401
    assert response.get_json()["error"] == "invalid_token_type"


def test_login_is_rate_limited(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.return_value = TokenPair(access_token="a", refresh_token="r")
    controller = _controller(login=login, rate_limit_requests=2, rate_limit_window=60.0)
    flask_app.register_blueprint(controller.as_blueprint())

    body = {"username": "admin", "password": "admin123"}
    with flask_app.test_client() as client:
        statuses = [client.post("/api/v1/auth/login", json=body).status_code for _ in range(3)]
        limited = client.post("/api/v1/auth/login", json=body)

    assert statuses == [200, 200, 429]
    assert limited.get_json()["error"] == "rate_limited"


def test_rate_limit_can_be_disabled(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.return_value = TokenPair(access_token="a", refresh_token="r")
    controller = _controller(login=login, rate_limit_requests=1, rate_limit_enabled=False)
    flask_app.register_blueprint(controller.as_blueprint())

    body = {"username": "admin", "password": "admin123"}
    with flask_app.test_client() as client:
        statuses = {client.post("/api/v1/auth/login", json=body).status_code for _ in range(3)}

    assert statuses == {200}


def test_rate_limit_ignores_rotating_forwarded_for(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.return_value = TokenPair(access_token="a", refresh_token="r")
    controller = _controller(login=login, rate_limit_requests=2, rate_limit_window=60.0)
    flask_app.register_blueprint(controller.as_blueprint())

    body = {"username": "admin", "password": "guess"}
    with flask_app.test_client() as client:
        statuses = [
            client.post(
                "/api/v1/auth/login",
                json=body,
                headers={"X-Forwarded-For": f"198.51.100.{attempt}"},
            ).status_code
            for attempt in range(20)
        ]

    assert statuses[:2] == [200, 200]
    assert set(statuses[2:]) == {429}
    assert login.execute.call_count == 2
