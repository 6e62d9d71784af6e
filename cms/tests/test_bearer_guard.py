from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from flask import Flask, g, jsonify

from cms.domain.users.entities import TokenClaims, TokenKind
from cms.domain.users.exceptions import InvalidTokenClaimsError, InvalidTokenError
from cms.interfaces.http.auth import require_access_token
from cms.shared.middleware.error_handler import configure_error_handling


@pytest.fixture()
def tokens() -> MagicMock:
    return MagicMock()


@pytest.fixture()
def flask_app(tokens: MagicMock) -> Flask:
    app = Flask(__name__)
    configure_error_handling(app, debug_mode=False)

    @app.get("/protected")
    @require_access_token(tokens)
    def protected():
        return jsonify({"user_id": g.user_id})

    return app


@pytest.mark.parametrize(
    ("headers", "message"),
    [
        ({}, "Authorization header is required"),
        ({"Authorization": "Token abc"}, "Invalid authorization header format"),
        ({"Authorization": "Bearer"}, "Invalid authorization header format"),
        ({"Authorization": "Bearer    "}, "Token is required"),
    ],
)
def test_malformed_headers_are_rejected(
    flask_app: Flask, tokens: MagicMock, headers: dict, message: str
) -> None:
    with flask_app.test_client() as client:
        response = client.get("/protected", headers=headers)

    assert response.status_code == 401
    assert response.get_json()["meta"]["message"] == message
    assert response.get_json()["error"] == "unauthorized"
    tokens.validate_access_token.assert_not_called()


@pytest.mark.parametrize(
    ("error", "message"),
    [
        (InvalidTokenError(), "Invalid or expired token"),
        (InvalidTokenClaimsError(), "Invalid token claims"),
    ],
)
def test_token_errors_are_401(flask_app: Flask, tokens: MagicMock, error, message: str) -> None:
    tokens.validate_access_token.side_effect = error

    with flask_app.test_client() as client:
        response = client.get("/protected", headers={"Authorization": "Bearer abc"})

    assert response.status_code == 401
    assert response.get_json()["meta"]["message"] == message


def test_valid_token_exposes_user_id(flask_app: Flask, tokens: MagicMock) -> None:
    tokens.validate_access_token.return_value = TokenClaims(
        user_id="user-7", kind=TokenKind.ACCESS, exp=4102444800
    )

    with flask_app.test_client() as client:
        response = client.get("/protected", headers={"Authorization": "Bearer abc"})

    assert response.status_code == 200
    assert response.get_json() == {"user_id": "user-7"}
    tokens.validate_access_token.assert_called_once_with("abc")
