# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response

from cms.application.use_cases.content.news import NewsUseCase
from cms.domain.users.repositories import TokenManager
from cms.interfaces.http.auth import current_user_id, require_access_token
from cms.interfaces.http.dto.common import parse_json_body
from cms.interfaces.http.dto.news import NewsRequestDTO, NewsResponseDTO
from cms.interfaces.http.response import send_message, send_success


def _dump(article) -> dict:
    return NewsResponseDTO.model_validate(article).model_dump(mode="json")


class NewsController:
    def __init__(self, *, news: NewsUseCase, tokens: TokenManager) -> None:
        self._news = news
        self._tokens = tokens

    def list_news(self) -> tuple[Response, HTTPStatus]:
        items = self._news.list_news()
        return send_success({"news": [_dump(item) for item in items]})

    def get_news(self, news_id: str) -> tuple[Response, HTTPStatus]:
        return send_success({"news": _dump(self._news.get_news(news_id))})

    def create(self) -> tuple[Response, HTTPStatus]:
        dto = parse_json_body(NewsRequestDTO)
        article = self._news.create_news(current_user_id(), dto.to_draft())
        return send_success({"news": _dump(article)}, HTTPStatus.CREATED)

    def update(self, news_id: str) -> tuple[Response, HTTPStatus]:
        dto = parse_json_body(NewsRequestDTO)
        self._news.update_news(news_id, dto.to_draft())
        return send_message("News updated successfully")

    def delete(self, news_id: str) -> tuple[Response, HTTPStatus]:
        self._news.delete_news(news_id)
        return send_message("News deleted successfully")

    def as_blueprint(self) -> Blueprint:
        protected = require_access_token(self._tokens)
        bp = Blueprint("news", __name__, url_prefix="/api/v1/news")
        bp.add_url_rule("", endpoint="list", view_func=self.list_news, methods=["GET"])
        bp.add_url_rule("/<news_id>", endpoint="get", view_func=self.get_news, methods=["GET"])
        bp.add_url_rule("", endpoint="create", view_func=protected(self.create), methods=["POST"])
        bp.add_url_rule(
            "/<news_id>", endpoint="update", view_func=protected(self.update), methods=["PUT"]
        )
        bp.add_url_rule(
            "/<news_id>", endpoint="delete", view_func=protected(self.delete), methods=["DELETE"]
        )
        return bp
