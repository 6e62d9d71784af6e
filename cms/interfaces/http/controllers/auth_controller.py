# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response

from cms.application.use_cases.users.login_user import LoginUserUseCase
from cms.application.use_cases.users.refresh_tokens import RefreshTokensUseCase
from cms.interfaces.http.dto.auth import LoginRequestDTO, RefreshRequestDTO, TokenResponseDTO
from cms.interfaces.http.dto.common import parse_json_body
from cms.interfaces.http.response import send_success
from cms.shared.middleware.rate_limit import rate_limit


class AuthController:
    def __init__(
        self,
        *,
        login_use_case: LoginUserUseCase,
        refresh_use_case: RefreshTokensUseCase,
        rate_limit_requests: int = 10,
        rate_limit_window: float = 60.0,
        rate_limit_enabled: bool = True,
    ) -> None:
        self._login_use_case = login_use_case
        self._refresh_use_case = refresh_use_case
        self._rate_limit_requests = rate_limit_requests
        self._rate_limit_window = rate_limit_window
        self._rate_limit_enabled = rate_limit_enabled

    def login(self) -> tuple[Response, HTTPStatus]:
        dto = parse_json_body(LoginRequestDTO)
        pair = self._login_use_case.execute(dto.username, dto.password)
        return send_success({"token": TokenResponseDTO.from_pair(pair).model_dump()})

    def refresh(self) -> tuple[Response, HTTPStatus]:
        dto = parse_json_body(RefreshRequestDTO)
        pair = self._refresh_use_case.execute(dto.refresh_token)
        return send_success({"token": TokenResponseDTO.from_pair(pair).model_dump()})

    def _limited(self, view):
        limiter = rate_limit(
            self._rate_limit_requests,
            self._rate_limit_window,
            enabled=self._rate_limit_enabled,
        )
        return limiter(view)

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/v1/auth")
        bp.add_url_rule(
            "/login", endpoint="login", view_func=self._limited(self.login), methods=["POST"]
        )
        bp.add_url_rule(
            "/refresh",
            endpoint="refresh",
            view_func=self._limited(self.refresh),
            methods=["POST"],
        )
        return bp
