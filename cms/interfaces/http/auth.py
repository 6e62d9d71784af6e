# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import g, request

from cms.domain.users.repositories import TokenManager
from cms.shared.errors import UnauthorizedError
from cms.shared.logging import logger

BEARER_SCHEME = "Bearer"


def _reject(message: str) -> UnauthorizedError:
    logger.warning(f"auth.guard: {message} on {request.method} {request.path}")
    return UnauthorizedError(message)


def extract_bearer_token() -> str:
    header = request.headers.get("Authorization")
    if not header:
        raise _reject("Authorization header is required")

    parts = header.split(" ", 1)
    if len(parts) != 2 or parts[0] != BEARER_SCHEME:
        raise _reject("Invalid authorization header format")

    token = parts[1].strip()
    if not token:
        raise _reject("Token is required")
    return token


def require_access_token(tokens: TokenManager) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Guard a view with a bearer access token; the subject lands in ``g.user_id``."""

    def decorator(view: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(view)
        def inner(*args: Any, **kwargs: Any) -> Any:
            token = extract_bearer_token()
            claims = tokens.validate_access_token(token)
            g.user_id = claims.subject
            logger.debug(f"auth.guard: ok user_id={claims.subject} {request.method} {request.path}")
            return view(*args, **kwargs)

        return inner

    return decorator


def current_user_id() -> str:
    user_id = getattr(g, "user_id", None)
    if not user_id:
        raise UnauthorizedError()
    return user_id
