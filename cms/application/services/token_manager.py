# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed access/refresh tokens.

Access and refresh tokens are HMAC-signed JWTs with separate secrets. Refresh
tokens carry an explicit ``type`` claim; access tokens carry none. Both carry a
random ``jti`` so that two tokens minted for the same user within one second
are still different strings.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from pydantic import ValidationError

from cms.domain.users.entities import TokenClaims, TokenKind
from cms.domain.users.exceptions import (
    GenerateAccessTokenError,
    GenerateRefreshTokenError,
    InvalidTokenClaimsError,
    InvalidTokenError,
    InvalidTokenTypeError,
)
from cms.domain.users.repositories import TokenManager
from cms.shared.config import JwtConfig
from cms.shared.logging import logger

CLAIM_SUBJECT = "user_id"
CLAIM_TYPE = "type"
CLAIM_EXPIRES = "exp"
CLAIM_ISSUED_AT = "iat"
CLAIM_TOKEN_ID = "jti"

REFRESH_TOKEN_TYPE = TokenKind.REFRESH.value


class JwtTokenManager(TokenManager):
    def __init__(self, config: JwtConfig) -> None:
        self._config = config

    def issue_access_token(self, subject_id: str) -> str:
        claims = self._base_claims(subject_id, self._config.access_token_ttl)
        try:
            return self._sign(claims, self._config.access_token_secret_key)
        except (jwt.PyJWTError, TypeError, ValueError, NotImplementedError) as exc:
            logger.error(f"tokens.access: signing failed ({type(exc).__name__})")
            raise GenerateAccessTokenError() from exc

    def issue_refresh_token(self, subject_id: str) -> str:
        claims = self._base_claims(subject_id, self._config.refresh_token_ttl)
        claims[CLAIM_TYPE] = REFRESH_TOKEN_TYPE
        try:
            return self._sign(claims, self._config.refresh_token_secret_key)
        except (jwt.PyJWTError, TypeError, ValueError, NotImplementedError) as exc:
            logger.error(f"tokens.refresh: signing failed ({type(exc).__name__})")
            raise GenerateRefreshTokenError() from exc

    def validate_access_token(self, token: str) -> TokenClaims:
        payload = self._verify(token, self._config.access_token_secret_key)

        if CLAIM_TYPE in payload:
            logger.info(
                f"tokens.access: rejected token tagged type={payload.get(CLAIM_TYPE)!r}"
            )
            raise InvalidTokenTypeError()

        return self._parse_claims(payload, TokenKind.ACCESS)

    def validate_refresh_token(self, token: str) -> TokenClaims:
        unverified = self._peek(token)
        if unverified.get(CLAIM_TYPE) != REFRESH_TOKEN_TYPE:
            logger.info("tokens.refresh: rejected token without refresh type tag")
            raise InvalidTokenTypeError()

        payload = self._verify(token, self._config.refresh_token_secret_key)
        return self._parse_claims(payload, TokenKind.REFRESH)

    @staticmethod
    def _base_claims(subject_id: str, ttl: timedelta) -> dict[str, Any]:
        now = datetime.now(UTC)
        return {
            CLAIM_SUBJECT: subject_id,
            CLAIM_EXPIRES: now + ttl,
            CLAIM_ISSUED_AT: now,
            CLAIM_TOKEN_ID: uuid.uuid4().hex,
        }

    def _sign(self, claims: Mapping[str, Any], secret: str) -> str:
        return jwt.encode(dict(claims), secret, algorithm=self._config.algorithm)

    def _peek(self, token: str) -> dict[str, Any]:
        """Decode without verifying, only to route on the type tag."""
        try:
            return jwt.decode(
                token,
                options={"verify_signature": False, "verify_exp": False},
                algorithms=[self._config.algorithm],
            )
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError() from exc

    def _verify(self, token: str, secret: str) -> dict[str, Any]:
        try:
            return jwt.decode(
                token,
                secret,
                algorithms=[self._config.algorithm],
                options={"require": [CLAIM_EXPIRES]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise InvalidTokenError(context={"reason": "expired"}) from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError() from exc

    @staticmethod
    def _parse_claims(payload: Mapping[str, Any], kind: TokenKind) -> TokenClaims:
        try:
            return TokenClaims.model_validate({**payload, "kind": kind})
        except ValidationError as exc:
            raise InvalidTokenClaimsError() from exc


__all__ = ["JwtTokenManager"]
