# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "meta": {
                "code": int(self.status),
                "message": self.message or self.status.phrase,
            },
            "error": self.code,
        }
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class _DeclaredError(AppError):
    """Base for errors whose code, status and message live on the subclass."""

    _fallback_code = "app_error"
    _fallback_status = HTTPStatus.BAD_REQUEST
    _fallback_message: str | None = None

    def __init__(
        self,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(
            code=code or cast(str, getattr(self, "code", self._fallback_code)),
            status=status or cast(HTTPStatus, getattr(self, "status", self._fallback_status)),
            context=context,
            message=message or getattr(self, "message", None) or self._fallback_message,
        )


class DomainError(_DeclaredError):
    _fallback_code = "domain_error"


class InfrastructureError(_DeclaredError):
    _fallback_code = "infrastructure_error"
    _fallback_status = HTTPStatus.INTERNAL_SERVER_ERROR
    _fallback_message = "Internal server error"


class ValidationError(AppError):
    def __init__(self, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(
            code="validation_error",
            status=HTTPStatus.BAD_REQUEST,
            context=context,
            message="Invalid request payload",
        )


class UnauthorizedError(AppError):
    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(code="unauthorized", status=HTTPStatus.UNAUTHORIZED, message=message)


class RateLimitedError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="rate_limited",
            status=HTTPStatus.TOO_MANY_REQUESTS,
            message="Too many requests",
        )
