# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from cms.domain.content.entities import News, NewsDraft
from cms.domain.content.exceptions import CategoryNotFoundError, NewsNotFoundError
from cms.domain.content.repositories import CategoryRepository, NewsRepository
from cms.shared.logging import logger


class NewsUseCase:
    def __init__(
        self,
        *,
        news: NewsRepository,
        categories: CategoryRepository,
    ) -> None:
        self._news = news
        self._categories = categories

    def list_news(self) -> Sequence[News]:
        return self._news.list_all()

    def get_news(self, news_id: str) -> News:
        article = self._news.get_by_id(news_id)
        if article is None:
            raise NewsNotFoundError()
        return article

    def create_news(self, author_id: str, draft: NewsDraft) -> News:
        self._ensure_category(draft.category_id)
        article = self._news.create(author_id, draft)
        logger.info(f"news.create: ok news_id={article.id} author_id={author_id}")
        return article

    def update_news(self, news_id: str, draft: NewsDraft) -> None:
        self._ensure_category(draft.category_id)
        if not self._news.update(news_id, draft):
            raise NewsNotFoundError()
        logger.info(f"news.update: ok news_id={news_id}")

    def delete_news(self, news_id: str) -> None:
        if not self._news.delete(news_id):
            raise NewsNotFoundError()
        logger.info(f"news.delete: ok news_id={news_id}")

    def _ensure_category(self, category_id: str) -> None:
        if self._categories.get_by_id(category_id) is None:
            raise CategoryNotFoundError()
