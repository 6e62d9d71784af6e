from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from cms.application.services import token_manager as token_manager_module
from cms.application.services.token_manager import JwtTokenManager
from cms.domain.users.entities import TokenKind
from cms.domain.users.exceptions import (
    GenerateAccessTokenError,
    GenerateRefreshTokenError,
    InvalidTokenClaimsError,
    InvalidTokenError,
    InvalidTokenTypeError,
)
from cms.shared.config import JwtConfig


@pytest.fixture()
def manager(jwt_config: JwtConfig) -> JwtTokenManager:
    return JwtTokenManager(jwt_config)


def _past() -> datetime:
    return datetime.now(UTC) - timedelta(minutes=5)


def test_access_token_round_trip(manager: JwtTokenManager) -> None:
    token = manager.issue_access_token("user-1")

    claims = manager.validate_access_token(token)

    assert claims.subject == "user-1"
    assert claims.kind is TokenKind.ACCESS
    assert claims.expires_at > datetime.now(UTC)


def test_refresh_token_carries_type_tag(manager: JwtTokenManager, jwt_config: JwtConfig) -> None:
    token = manager.issue_refresh_token("user-1")

    payload = jwt.decode(token, jwt_config.refresh_token_secret_key, algorithms=["HS256"])
    claims = manager.validate_refresh_token(token)

    assert payload["type"] == "refresh"
    assert payload["user_id"] == "user-1"
    assert claims.kind is TokenKind.REFRESH


def test_access_token_has_no_type_tag(manager: JwtTokenManager, jwt_config: JwtConfig) -> None:
    token = manager.issue_access_token("user-1")

    payload = jwt.decode(token, jwt_config.access_token_secret_key, algorithms=["HS256"])

    assert "type" not in payload
    assert {"user_id", "exp", "iat", "jti"} <= payload.keys()


def test_tokens_issued_back_to_back_differ(manager: JwtTokenManager) -> None:
    assert manager.issue_access_token("user-1") != manager.issue_access_token("user-1")
    assert manager.issue_refresh_token("user-1") != manager.issue_refresh_token("user-1")


def test_ttls_follow_config(manager: JwtTokenManager) -> None:
    now = datetime.now(UTC)

    access = manager.validate_access_token(manager.issue_access_token("u"))
    refresh = manager.validate_refresh_token(manager.issue_refresh_token("u"))

    assert timedelta(minutes=14) < access.expires_at - now <= timedelta(minutes=15, seconds=1)
    assert timedelta(hours=23) < refresh.expires_at - now <= timedelta(hours=24, seconds=1)


def test_expired_access_token_is_invalid(manager: JwtTokenManager, jwt_config: JwtConfig) -> None:
    token = jwt.encode(
        {"user_id": "user-1", "exp": _past()},
        jwt_config.access_token_secret_key,
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenError) as exc_info:
        manager.validate_access_token(token)

    assert exc_info.value.context == {"reason": "expired"}


def test_access_token_signed_with_other_secret_is_invalid(manager: JwtTokenManager) -> None:
    token = jwt.encode(
        {"user_id": "user-1", "exp": datetime.now(UTC) + timedelta(minutes=5)},
        "someone-elses-secret",
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenError):
        manager.validate_access_token(token)


def test_garbage_is_invalid(manager: JwtTokenManager) -> None:
    with pytest.raises(InvalidTokenError):
        manager.validate_access_token("not-a-token")
    with pytest.raises(InvalidTokenError):
        manager.validate_refresh_token("not-a-token")


def test_refresh_token_rejected_by_access_validator(manager: JwtTokenManager) -> None:
    refresh = manager.issue_refresh_token("user-1")

    # Signed with the refresh secret, so the signature check fails first.
    with pytest.raises(InvalidTokenError):
        manager.validate_access_token(refresh)


def test_type_tagged_token_under_access_secret_is_type_mismatch(
    manager: JwtTokenManager, jwt_config: JwtConfig
) -> None:
    token = jwt.encode(
        {"user_id": "user-1", "type": "refresh", "exp": datetime.now(UTC) + timedelta(minutes=5)},
        jwt_config.access_token_secret_key,
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenTypeError):
        manager.validate_access_token(token)


def test_access_token_rejected_by_refresh_validator_as_type_mismatch(
    manager: JwtTokenManager,
) -> None:
    access = manager.issue_access_token("user-1")

    with pytest.raises(InvalidTokenTypeError):
        manager.validate_refresh_token(access)


def test_expired_refresh_token_is_invalid(manager: JwtTokenManager, jwt_config: JwtConfig) -> None:
    token = jwt.encode(
        {"user_id": "user-1", "type": "refresh", "exp": _past()},
        jwt_config.refresh_token_secret_key,
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenError):
        manager.validate_refresh_token(token)


def test_token_without_expiry_is_invalid(manager: JwtTokenManager, jwt_config: JwtConfig) -> None:
    token = jwt.encode({"user_id": "user-1"}, jwt_config.access_token_secret_key, algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        manager.validate_access_token(token)


@pytest.mark.parametrize("subject", [None, "", 42])
def test_bad_subject_is_invalid_claims(
    manager: JwtTokenManager, jwt_config: JwtConfig, subject: object
) -> None:
    payload: dict[str, object] = {"exp": datetime.now(UTC) + timedelta(minutes=5)}
    if subject is not None:
        payload["user_id"] = subject
    token = jwt.encode(payload, jwt_config.access_token_secret_key, algorithm="HS256")

    with pytest.raises(InvalidTokenClaimsError):
        manager.validate_access_token(token)


def test_signing_failure_maps_to_generation_errors(
    manager: JwtTokenManager, monkeypatch: pytest.MonkeyPatch
) -> None:
    def boom(*_args, **_kwargs):
        raise jwt.PyJWTError("signing backend unavailable")

    monkeypatch.setattr(token_manager_module.jwt, "encode", boom)

    with pytest.raises(GenerateAccessTokenError):
        manager.issue_access_token("user-1")
    with pytest.raises(GenerateRefreshTokenError):
        manager.issue_refresh_token("user-1")
