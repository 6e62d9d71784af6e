# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from cms.shared.config import load_config
from cms.shared.logging import logger
from cms.shared.middleware.client import client_address

from .base import AppError


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    response = jsonify(error.to_dict())
    return response, error.status


def register_error_handler(
    app: Flask,
    *,
    default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
    debug_mode: bool | None = None,
) -> None:
    if debug_mode is None:
        debug_mode = load_config().debug_logging

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            logger.opt(exception=exc.__cause__ or exc).error(
                f"Application error {exc.code} on {request.method} {request.path}"
            )
        else:
            logger.warning(
                f"Handled application error {exc.code} on {request.method} {request.path}"
            )
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        status = HTTPStatus(exc.code or default_status)
        payload = {
            "meta": {"code": int(status), "message": status.phrase},
            "error": status.name.lower(),
        }
        return jsonify(payload), status

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        detail = f"{request.method} {request.path}"
        if debug_mode:
            detail += (
                f" from {client_address()}, user={getattr(g, 'user_id', None)}, "
                f"body_size={request.content_length or 0}"
            )
        logger.opt(exception=exc).error(f"Unhandled {type(exc).__name__} on {detail}")

        payload = {
            "meta": {"code": int(default_status), "message": "Internal server error"},
            "error": "internal_error",
        }
        return jsonify(payload), default_status
