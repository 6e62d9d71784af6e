# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from cms.shared.errors.base import DomainError, InfrastructureError


class UserNotFoundError(DomainError):
    code = "user_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "User not found"


class UserAlreadyExistsError(DomainError):
    code = "user_already_exists"
    status = HTTPStatus.CONFLICT
    message = "Username is already taken"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid username or password"


class InvalidTokenError(DomainError):
    code = "invalid_token"
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid or expired token"


class InvalidTokenTypeError(DomainError):
    code = "invalid_token_type"
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid token type"


class InvalidTokenClaimsError(DomainError):
    code = "invalid_token_claims"
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid token claims"


class GenerateAccessTokenError(InfrastructureError):
    code = "generate_access_token_failed"


class GenerateRefreshTokenError(InfrastructureError):
    code = "generate_refresh_token_failed"


class PasswordHashError(InfrastructureError):
    code = "password_hash_error"
