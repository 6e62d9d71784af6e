# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response

from cms.application.use_cases.content.comments import CommentUseCase
from cms.domain.content.entities import CommentDraft
from cms.interfaces.http.dto.comment import CommentRequestDTO, CommentResponseDTO
from cms.interfaces.http.dto.common import parse_json_body
from cms.interfaces.http.response import send_success


class CommentController:
    """Comments are public: anyone may read or post them."""

    def __init__(self, *, comments: CommentUseCase) -> None:
        self._comments = comments

    def create(self, news_id: str) -> tuple[Response, HTTPStatus]:
        dto = parse_json_body(CommentRequestDTO)
        self._comments.add_comment(
            CommentDraft(news_id=news_id, name=dto.name, comment=dto.comment)
        )
        return send_success({"message": "Comment created successfully"}, HTTPStatus.CREATED)

    def list_comments(self, news_id: str) -> tuple[Response, HTTPStatus]:
        items = self._comments.list_comments(news_id)
        return send_success(
            {
                "comments": [
                    CommentResponseDTO.model_validate(item).model_dump(mode="json")
                    for item in items
                ]
            }
        )

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("comments", __name__, url_prefix="/api/v1/news")
        bp.add_url_rule(
            "/<news_id>/comments", endpoint="create", view_func=self.create, methods=["POST"]
        )
        bp.add_url_rule(
            "/<news_id>/comments", endpoint="list", view_func=self.list_comments, methods=["GET"]
        )
        return bp
