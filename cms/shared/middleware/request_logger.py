# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
import secrets
import time
from collections.abc import Mapping

from flask import Flask, Response, g, request

from cms.shared.logging import clear_correlation_id, logger, set_correlation_id

from .client import client_address

REQUEST_ID_HEADER = "X-Request-ID"

_SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})
_MAX_REQUEST_ID_LENGTH = 64


def _fingerprint(value: str) -> str:
    return f"<sha256:{hashlib.sha256(value.encode()).hexdigest()[:8]}>"


def _masked_headers(headers: Mapping[str, str]) -> dict[str, str]:
    return {
        key: _fingerprint(value) if key.lower() in _SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }


def _incoming_request_id() -> str:
    supplied = request.headers.get(REQUEST_ID_HEADER, "").strip()
    if supplied and len(supplied) <= _MAX_REQUEST_ID_LENGTH:
        return supplied
    return secrets.token_hex(8)


def configure_request_logging(app: Flask, *, debug_mode: bool = False) -> None:
    @app.before_request
    def _start() -> None:
        g.correlation_id = _incoming_request_id()
        g.request_started = time.perf_counter()
        set_correlation_id(g.correlation_id)

        if debug_mode:
            logger.debug(
                f"http: -> {request.method} {request.path} from {client_address()} "
                f"headers={_masked_headers(request.headers)} "
                f"body_size={request.content_length or 0}"
            )
        else:
            logger.info(f"http: -> {request.method} {request.path} from {client_address()}")

    @app.after_request
    def _finish(response: Response) -> Response:
        started = getattr(g, "request_started", None)
        elapsed_ms = (time.perf_counter() - started) * 1000 if started else 0.0
        user_id = getattr(g, "user_id", None)
        logger.info(
            f"http: <- {request.method} {request.path} status={response.status_code} "
            f"dt_ms={elapsed_ms:.0f}" + (f" user_id={user_id}" if user_id else "")
        )

        correlation_id = getattr(g, "correlation_id", None)
        if correlation_id:
            response.headers.setdefault(REQUEST_ID_HEADER, correlation_id)
        return response

    @app.teardown_request
    def _teardown(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(f"http: {type(exc).__name__} escaped {request.method} {request.path}")
        clear_correlation_id()


__all__ = ["REQUEST_ID_HEADER", "configure_request_logging"]
