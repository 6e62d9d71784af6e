# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response

from cms.application.use_cases.content.custom_pages import CustomPageUseCase
from cms.domain.users.repositories import TokenManager
from cms.interfaces.http.auth import current_user_id, require_access_token
from cms.interfaces.http.dto.common import parse_json_body
from cms.interfaces.http.dto.custom_page import CustomPageRequestDTO, CustomPageResponseDTO
from cms.interfaces.http.response import send_message, send_success


def _dump(page) -> dict:
    return CustomPageResponseDTO.model_validate(page).model_dump(mode="json")


class CustomPageController:
    def __init__(self, *, pages: CustomPageUseCase, tokens: TokenManager) -> None:
        self._pages = pages
        self._tokens = tokens

    def list_pages(self) -> tuple[Response, HTTPStatus]:
        return send_success({"pages": [_dump(page) for page in self._pages.list_pages()]})

    def get_page(self, page_id: str) -> tuple[Response, HTTPStatus]:
        return send_success({"page": _dump(self._pages.get_page(page_id))})

    def create(self) -> tuple[Response, HTTPStatus]:
        dto = parse_json_body(CustomPageRequestDTO)
        page = self._pages.create_page(current_user_id(), dto.to_draft())
        return send_success({"page": _dump(page)}, HTTPStatus.CREATED)

    def update(self, page_id: str) -> tuple[Response, HTTPStatus]:
        dto = parse_json_body(CustomPageRequestDTO)
        self._pages.update_page(page_id, dto.to_draft())
        return send_message("Page updated successfully")

    def delete(self, page_id: str) -> tuple[Response, HTTPStatus]:
        self._pages.delete_page(page_id)
        return send_message("Page deleted successfully")

    def as_blueprint(self) -> Blueprint:
        protected = require_access_token(self._tokens)
        bp = Blueprint("pages", __name__, url_prefix="/api/v1/pages")
        bp.add_url_rule("", endpoint="list", view_func=self.list_pages, methods=["GET"])
        bp.add_url_rule("/<page_id>", endpoint="get", view_func=self.get_page, methods=["GET"])
        bp.add_url_rule("", endpoint="create", view_func=protected(self.create), methods=["POST"])
        bp.add_url_rule(
            "/<page_id>", endpoint="update", view_func=protected(self.update), methods=["PUT"]
        )
        bp.add_url_rule(
            "/<page_id>", endpoint="delete", view_func=protected(self.delete), methods=["DELETE"]
        )
        return bp
