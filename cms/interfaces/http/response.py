# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""JSON envelope shared by every endpoint: ``{"meta": {...}, "data": {...}}``."""

from __future__ import annotations

from collections.abc import Mapping
from http import HTTPStatus
from typing import Any

from flask import Response, jsonify


def send_success(
    data: Mapping[str, Any] | None = None,
    status: HTTPStatus = HTTPStatus.OK,
) -> tuple[Response, HTTPStatus]:
    payload: dict[str, Any] = {"meta": {"code": int(status), "message": status.phrase}}
    if data is not None:
        payload["data"] = dict(data)
    return jsonify(payload), status


def send_message(message: str) -> tuple[Response, HTTPStatus]:
    return send_success({"message": message})
