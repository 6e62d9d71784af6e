# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from http import HTTPStatus

from flask import Blueprint, jsonify
from sqlalchemy.exc import SQLAlchemyError

from cms.shared.logging import logger


class MiscController:
    def __init__(self, *, check_database: Callable[[], bool]) -> None:
        self._check_database = check_database

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/healthz", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            self._check_database()
            status["database"] = "ok"
        except SQLAlchemyError as exc:
            logger.error(f"healthz: database unavailable ({type(exc).__name__})")
            status["ok"] = False
            status["database"] = "unavailable"
            return jsonify(status), HTTPStatus.SERVICE_UNAVAILABLE
        return jsonify(status), HTTPStatus.OK
