# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response

from cms.application.use_cases.content.categories import CategoryUseCase
from cms.domain.users.repositories import TokenManager
from cms.interfaces.http.auth import require_access_token
from cms.interfaces.http.dto.category import CategoryRequestDTO, CategoryResponseDTO
from cms.interfaces.http.dto.common import parse_json_body
from cms.interfaces.http.response import send_message, send_success


def _dump(category) -> dict:
    return CategoryResponseDTO.model_validate(category).model_dump(mode="json")


class CategoryController:
    def __init__(self, *, categories: CategoryUseCase, tokens: TokenManager) -> None:
        self._categories = categories
        self._tokens = tokens

    def list_categories(self) -> tuple[Response, HTTPStatus]:
        items = self._categories.list_categories()
        return send_success({"categories": [_dump(item) for item in items]})

    def get_category(self, category_id: str) -> tuple[Response, HTTPStatus]:
        category = self._categories.get_category(category_id)
        return send_success({"category": _dump(category)})

    def create(self) -> tuple[Response, HTTPStatus]:
        dto = parse_json_body(CategoryRequestDTO)
        category = self._categories.create_category(dto.name)
        return send_success({"category": _dump(category)}, HTTPStatus.CREATED)

    def update(self, category_id: str) -> tuple[Response, HTTPStatus]:
        dto = parse_json_body(CategoryRequestDTO)
        self._categories.update_category(category_id, dto.name)
        return send_message("Category updated successfully")

    def delete(self, category_id: str) -> tuple[Response, HTTPStatus]:
        self._categories.delete_category(category_id)
        return send_message("Category deleted successfully")

    def as_blueprint(self) -> Blueprint:
        protected = require_access_token(self._tokens)
        bp = Blueprint("categories", __name__, url_prefix="/api/v1/categories")
        bp.add_url_rule("", endpoint="list", view_func=self.list_categories, methods=["GET"])
        bp.add_url_rule("/<category_id>", endpoint="get", view_func=self.get_category, methods=["GET"])
        bp.add_url_rule("", endpoint="create", view_func=protected(self.create), methods=["POST"])
        bp.add_url_rule(
            "/<category_id>", endpoint="update", view_func=protected(self.update), methods=["PUT"]
        )
        bp.add_url_rule(
            "/<category_id>",
            endpoint="delete",
            view_func=protected(self.delete),
            methods=["DELETE"],
        )
        return bp
