# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Public comments attached to news articles."""

from __future__ import annotations

from collections.abc import Sequence

from cms.domain.content.entities import Comment, CommentDraft
from cms.domain.content.exceptions import NewsNotFoundError
from cms.domain.content.repositories import CommentRepository, NewsRepository
from cms.shared.logging import logger


class CommentUseCase:
    def __init__(
        self,
        *,
        comments: CommentRepository,
        news: NewsRepository,
    ) -> None:
        self._comments = comments
        self._news = news

    def add_comment(self, draft: CommentDraft) -> Comment:
        # The repository re-checks the article inside its own transaction.
        comment = self._comments.create(draft)
        logger.info(f"comments.create: ok news_id={draft.news_id} comment_id={comment.id}")
        return comment

    def list_comments(self, news_id: str) -> Sequence[Comment]:
        if self._news.get_by_id(news_id) is None:
            raise NewsNotFoundError()
        return self._comments.list_for_news(news_id)
